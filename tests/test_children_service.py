"""
Child enrollment transaction: commit path, rollback path and the checks
that run before the transaction opens.
"""

from datetime import date
from unittest.mock import AsyncMock, patch

import pytest
from fastapi import HTTPException

from children import schemas, service
from core.errors import ForbiddenError, ValidationError


CHILD_ROW = {
    "child_id": "child-1",
    "daycare_id": "daycare-1",
    "class_id": None,
    "first_name": "Mia",
    "last_name": "Lopez",
    "birth_date": date(2021, 5, 2),
    "gender": "F",
    "start_date": None,
    "notes": None,
}


def _request(**overrides):
    payload = {
        "firstName": "Mia",
        "lastName": "Lopez",
        "birthDate": "05/02/2021",
        "responsibleId": "adult-1",
        "relationship": "mother",
        "allergies": [{"allergy": "peanuts", "instruction": "epipen in bag"}],
        "specialInstructions": [{"instruction": "nap at 1pm"}],
    }
    payload.update(overrides)
    return schemas.AddChildRequest.model_validate(payload)


@pytest.fixture
def stores():
    """Patch every repository the enrollment touches."""
    with patch.object(service.repository, "add_child", new=AsyncMock()) as add_child, \
         patch.object(service.repository, "get_child", new=AsyncMock(return_value=CHILD_ROW)), \
         patch.object(service.allergy_repository, "add_allergy", new=AsyncMock()) as add_allergy, \
         patch.object(service.allergy_repository, "list_allergies", new=AsyncMock(return_value=[])), \
         patch.object(service.instruction_repository, "add_special_instruction", new=AsyncMock()) as add_instruction, \
         patch.object(service.instruction_repository, "list_special_instructions", new=AsyncMock(return_value=[])), \
         patch.object(service.responsible_repository, "list_links", new=AsyncMock(return_value=[])), \
         patch.object(service.responsible_repository, "add_link", new=AsyncMock()) as add_link, \
         patch.object(service.responsible_repository, "get_link", new=AsyncMock(return_value=None)) as get_link, \
         patch.object(service.class_repository, "get_class", new=AsyncMock()) as get_class, \
         patch("responsible_of.service.adult_repository.get_adult", new=AsyncMock()) as get_adult:
        get_adult.return_value = {"responsible_id": "adult-1", "daycare_id": "daycare-1"}
        yield {
            "add_child": add_child,
            "add_allergy": add_allergy,
            "add_instruction": add_instruction,
            "add_link": add_link,
            "get_class": get_class,
            "get_adult": get_adult,
            "get_link": get_link,
        }


class TestAddChildCommit:

    @pytest.mark.asyncio
    async def test_writes_every_row_in_one_transaction(self, stores, fake_transaction, office_manager):
        result = await service.add_child(_request(), current=office_manager)

        assert result.first_name == "Mia"
        assert fake_transaction.entered == 1
        assert fake_transaction.committed
        assert not fake_transaction.rolled_back

        kwargs = stores["add_child"].await_args.kwargs
        assert kwargs["daycare_id"] == "daycare-1"
        assert kwargs["fields"]["birth_date"] == date(2021, 5, 2)
        assert kwargs["conn"] is fake_transaction.conn

        stores["add_link"].assert_awaited_once()
        assert stores["add_link"].await_args.kwargs["relationship"] == "mother"
        stores["add_allergy"].assert_awaited_once()
        assert stores["add_allergy"].await_args.kwargs["allergy"] == "peanuts"
        stores["add_instruction"].assert_awaited_once()

    @pytest.mark.asyncio
    async def test_admin_enrolls_in_named_daycare(self, stores, fake_transaction, admin):
        stores["get_adult"].return_value = {"responsible_id": "adult-1", "daycare_id": "daycare-7"}

        await service.add_child(_request(daycareId="daycare-7"), current=admin)

        assert stores["add_child"].await_args.kwargs["daycare_id"] == "daycare-7"
        assert fake_transaction.committed

    @pytest.mark.asyncio
    async def test_adult_registers_own_child(self, stores, fake_transaction, adult):
        await service.add_child(_request(), current=adult)
        assert fake_transaction.committed


class TestAddChildRollback:

    @pytest.mark.asyncio
    async def test_responsible_in_other_daycare_rolls_back(self, stores, fake_transaction, office_manager):
        stores["get_adult"].return_value = {"responsible_id": "adult-1", "daycare_id": "daycare-2"}

        with pytest.raises(HTTPException) as excinfo:
            await service.add_child(_request(), current=office_manager)

        assert excinfo.value.status_code == 400
        assert excinfo.value.detail == (
            "failed to add child: responsible and child must belong to the same daycare"
        )
        assert fake_transaction.rolled_back
        assert not fake_transaction.committed
        stores["add_link"].assert_not_awaited()
        stores["add_allergy"].assert_not_awaited()

    @pytest.mark.asyncio
    async def test_missing_responsible_rolls_back_with_404(self, stores, fake_transaction, office_manager):
        stores["get_adult"].return_value = None

        with pytest.raises(HTTPException) as excinfo:
            await service.add_child(_request(), current=office_manager)

        assert excinfo.value.status_code == 404
        assert fake_transaction.rolled_back

    @pytest.mark.asyncio
    async def test_storage_failure_mid_way_rolls_back_with_500(self, stores, fake_transaction, office_manager):
        stores["add_allergy"].side_effect = RuntimeError("connection reset")

        with pytest.raises(HTTPException) as excinfo:
            await service.add_child(_request(), current=office_manager)

        assert excinfo.value.status_code == 500
        assert excinfo.value.detail == "failed to add child: connection reset"
        assert fake_transaction.rolled_back

    @pytest.mark.asyncio
    async def test_class_from_other_daycare_rolls_back(self, stores, fake_transaction, office_manager):
        stores["get_class"].return_value = {"class_id": "class-1", "daycare_id": "daycare-2"}

        with pytest.raises(HTTPException) as excinfo:
            await service.add_child(_request(classId="class-1"), current=office_manager)

        assert excinfo.value.status_code == 400
        assert fake_transaction.rolled_back
        stores["add_child"].assert_not_awaited()


class TestSetResponsible:

    @pytest.mark.asyncio
    async def test_links_second_adult(self, stores, fake_transaction, office_manager):
        stores["get_adult"].return_value = {"responsible_id": "adult-2", "daycare_id": "daycare-1"}
        request = schemas.SetResponsibleRequest.model_validate({"responsibleId": "adult-2", "relationship": "guardian"})

        await service.set_responsible("child-1", request, current=office_manager)

        assert stores["add_link"].await_args.kwargs == {
            "responsible_id": "adult-2",
            "child_id": "child-1",
            "relationship": "guardian",
            "conn": fake_transaction.conn,
        }
        assert fake_transaction.committed

    @pytest.mark.asyncio
    async def test_existing_link_is_409(self, stores, fake_transaction, office_manager):
        stores["get_link"].return_value = {"responsible_id": "adult-1", "child_id": "child-1"}
        request = schemas.SetResponsibleRequest.model_validate({"responsibleId": "adult-1", "relationship": "mother"})

        with pytest.raises(HTTPException) as excinfo:
            await service.set_responsible("child-1", request, current=office_manager)

        assert excinfo.value.status_code == 409
        assert fake_transaction.rolled_back
        stores["add_link"].assert_not_awaited()


class TestAddChildValidation:

    @pytest.mark.asyncio
    async def test_bad_birth_date(self, stores, fake_transaction, office_manager):
        with pytest.raises(ValidationError, match="invalid birth date: banana"):
            await service.add_child(_request(birthDate="banana"), current=office_manager)
        assert fake_transaction.entered == 0

    @pytest.mark.asyncio
    async def test_responsible_is_mandatory(self, stores, fake_transaction, office_manager):
        with pytest.raises(ValidationError, match="responsibleId is mandatory"):
            await service.add_child(_request(responsibleId=""), current=office_manager)
        assert fake_transaction.entered == 0

    @pytest.mark.asyncio
    async def test_other_daycare_is_forbidden(self, stores, fake_transaction, office_manager):
        with pytest.raises(ForbiddenError, match="child does not belong to this daycare"):
            await service.add_child(_request(daycareId="daycare-2"), current=office_manager)

    @pytest.mark.asyncio
    async def test_adult_cannot_register_for_someone_else(self, stores, fake_transaction, adult):
        with pytest.raises(ForbiddenError):
            await service.add_child(_request(responsibleId="adult-2"), current=adult)
        assert fake_transaction.entered == 0

    @pytest.mark.asyncio
    async def test_invalid_relationship(self, stores, fake_transaction, office_manager):
        with pytest.raises(ValidationError, match="relationship is not valid"):
            await service.add_child(_request(relationship="neighbour"), current=office_manager)
        assert fake_transaction.entered == 0


class TestUpdateChild:

    @pytest.mark.asyncio
    async def test_daycare_cannot_change(self, stores, fake_transaction, admin):
        request = schemas.UpdateChildRequest.model_validate({"daycareId": "daycare-9"})

        with pytest.raises(HTTPException) as excinfo:
            await service.update_child("child-1", request, current=admin)

        assert excinfo.value.status_code == 400
        assert excinfo.value.detail == "failed to update child: you can't update a child daycare"
        assert fake_transaction.rolled_back

    @pytest.mark.asyncio
    async def test_allergies_are_replaced(self, stores, fake_transaction, office_manager):
        request = schemas.UpdateChildRequest.model_validate(
            {"notes": "likes trains", "allergies": [{"allergy": "milk"}]}
        )
        with patch.object(service.repository, "update_child", new=AsyncMock(return_value=True)) as update, \
             patch.object(service.allergy_repository, "delete_child_allergies", new=AsyncMock()) as clear, \
             patch.object(
                 service.instruction_repository, "delete_child_special_instructions", new=AsyncMock()
             ) as clear_instructions:
            await service.update_child("child-1", request, current=office_manager)

        assert update.await_args.args[1] == {"notes": "likes trains"}
        clear.assert_awaited_once()
        clear_instructions.assert_not_awaited()
        stores["add_allergy"].assert_awaited_once()
        stores["add_instruction"].assert_not_awaited()
        assert fake_transaction.committed
