from contextlib import asynccontextmanager

from fastapi import FastAPI, HTTPException, status
from fastapi.middleware.cors import CORSMiddleware

from adults import router as adults_router
from ageranges import router as ageranges_router
from allergies import router as allergies_router
from auth import router as auth_router
from auth import service as auth_service
from children import router as children_router
from classes import router as classes_router
from core import config, db, errors, log
from daycares import router as daycares_router
from office_managers import router as office_managers_router
from schedules import router as schedules_router
from special_instructions import router as special_instructions_router
from teachers import router as teachers_router

log.configure_logging()


@asynccontextmanager
async def lifespan(_: FastAPI):
    # Initialize the DB pool once per process.
    await db.init_pool()
    try:
        await auth_service.bootstrap_admin()
        yield
    finally:
        await db.close_pool()


app = FastAPI(title="teddycare-api", lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=config.cors_origins(),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)
app.middleware("http")(log.request_logging_middleware)
errors.install_error_handlers(app)

app.include_router(auth_router.router, tags=["auth"])
app.include_router(daycares_router.router, tags=["daycares"])
app.include_router(office_managers_router.router, tags=["office-managers"])
app.include_router(adults_router.router, tags=["adults"])
app.include_router(children_router.router, tags=["children"])
app.include_router(allergies_router.router, tags=["allergies"])
app.include_router(special_instructions_router.router, tags=["special-instructions"])
app.include_router(ageranges_router.router, tags=["age-ranges"])
app.include_router(classes_router.router, tags=["classes"])
app.include_router(teachers_router.router, tags=["teachers"])
app.include_router(schedules_router.router, tags=["schedules"])


@app.get("/healthz")
def healthz() -> dict:
    return {"status": "ok"}


@app.get("/readyz")
async def readyz() -> dict:
    if not db.is_ready():
        raise HTTPException(status_code=status.HTTP_503_SERVICE_UNAVAILABLE, detail="database pool not ready")
    await db.fetch_one("SELECT 1 AS ok")
    return {"status": "ready"}
