# tests/domains/test_company_n.py

"""
'company' 도메인 API 엔드포인트에 대한 통합 테스트를 정의하는 모듈입니다.
실제 데이터베이스(기본: 메모리 SQLite)를 사용하여 요청부터 저장소까지 전체 경로를 검증합니다.

- `POST /companies` (생성)
- `GET /companies/{id}` (단일 조회)
- `PATCH /companies/{id}` (부분 수정)
- `DELETE /companies/{id}` (삭제)
"""

import uuid
from unittest.mock import AsyncMock

import pytest
from httpx import AsyncClient
from sqlmodel import select

from app.core.exceptions import MSG_BAD_REQUEST, MSG_INTERNAL_ERROR
from app.domains.company import crud as company_crud
from app.domains.company import models as company_models
from app.domains.company.events import EventAction
from app.domains.company.services import CompanyService


async def _create(client: AsyncClient, payload: dict) -> uuid.UUID:
    response = await client.post("/companies", json=payload)
    assert response.status_code == 201, response.text
    return uuid.UUID(payload["id"])


@pytest.mark.asyncio
async def test_create_and_get_company(authorized_client: AsyncClient, company_payload):
    """
    클라이언트가 지정한 id로 회사를 생성한 뒤 조회하면 같은 값이 반환되는지 테스트합니다.
    """
    print("\n--- Running test_create_and_get_company ---")
    payload = company_payload(id=str(uuid.uuid4()))

    response = await authorized_client.post("/companies", json=payload)
    print(f"Response status code: {response.status_code}")

    assert response.status_code == 201
    assert response.content == b""

    response = await authorized_client.get(f"/companies/{payload['id']}")
    assert response.status_code == 200
    assert response.json() == payload


@pytest.mark.asyncio
async def test_create_example_company_without_description(authorized_client: AsyncClient, session_factory):
    """
    id와 description 없이 생성하면 서버가 id를 발급하고, 조회 시 description은 null로 반환됩니다.
    """
    payload = {"name": "Acme", "amount_of_employees": 5, "registered": True, "type": "Corporations"}

    response = await authorized_client.post("/companies", json=payload)
    assert response.status_code == 201

    async with session_factory() as session:
        result = await session.exec(select(company_models.Company))
        companies = result.all()
    assert len(companies) == 1
    company_id = companies[0].id
    assert company_id != uuid.UUID(int=0)

    response = await authorized_client.get(f"/companies/{company_id}")
    assert response.status_code == 200
    body = response.json()
    assert body["id"] == str(company_id)
    assert body["type"] == "Corporations"
    assert body["registered"] is True
    assert body["description"] is None


@pytest.mark.asyncio
async def test_create_with_nil_uuid_generates_new_id(
    authorized_client: AsyncClient, session_factory, company_payload
):
    response = await authorized_client.post(
        "/companies", json=company_payload(id="00000000-0000-0000-0000-000000000000")
    )
    assert response.status_code == 201

    async with session_factory() as session:
        result = await session.exec(select(company_models.Company))
        company = result.one()
    assert company.id != uuid.UUID(int=0)


@pytest.mark.asyncio
async def test_create_registered_defaults_to_false(authorized_client: AsyncClient, company_payload):
    payload = company_payload(id=str(uuid.uuid4()))
    del payload["registered"]

    company_id = await _create(authorized_client, payload)

    response = await authorized_client.get(f"/companies/{company_id}")
    assert response.status_code == 200
    assert response.json()["registered"] is False


@pytest.mark.asyncio
async def test_create_duplicate_id_returns_internal_error(authorized_client: AsyncClient, company_payload):
    """
    이미 존재하는 id로 다시 생성하면 500과 일반 오류 메시지를 반환하는지 테스트합니다.
    """
    payload = company_payload(id=str(uuid.uuid4()))
    await _create(authorized_client, payload)

    response = await authorized_client.post("/companies", json=company_payload(id=payload["id"], name="Other"))

    assert response.status_code == 500
    assert response.json() == {"message": MSG_INTERNAL_ERROR}


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "overrides",
    [
        {"name": ""},
        {"name": "   "},
        {"amount_of_employees": -1},
        {"amount_of_employees": 2**32},
        {"type": "Partnership"},
    ],
)
async def test_create_company_invalid_body(authorized_client: AsyncClient, company_payload, overrides):
    response = await authorized_client.post("/companies", json=company_payload(**overrides))

    assert response.status_code == 422
    assert response.json() == {"message": MSG_BAD_REQUEST}


@pytest.mark.asyncio
async def test_create_company_missing_required_field(authorized_client: AsyncClient, company_payload):
    payload = company_payload()
    del payload["type"]

    response = await authorized_client.post("/companies", json=payload)

    assert response.status_code == 422
    assert response.json() == {"message": MSG_BAD_REQUEST}


@pytest.mark.asyncio
async def test_create_sole_proprietorship(authorized_client: AsyncClient, company_payload):
    payload = company_payload(id=str(uuid.uuid4()), type="Sole Proprietorship", amount_of_employees=0)
    company_id = await _create(authorized_client, payload)

    response = await authorized_client.get(f"/companies/{company_id}")

    assert response.status_code == 200
    assert response.json()["type"] == "Sole Proprietorship"
    assert response.json()["amount_of_employees"] == 0


@pytest.mark.asyncio
async def test_get_company_not_found_returns_internal_error(client: AsyncClient):
    """
    존재하지 않는 id는 별도의 404 없이 500으로 응답합니다.
    """
    response = await client.get(f"/companies/{uuid.uuid4()}")

    assert response.status_code == 500
    assert response.json() == {"message": MSG_INTERNAL_ERROR}


@pytest.mark.asyncio
async def test_get_company_invalid_uuid(client: AsyncClient):
    response = await client.get("/companies/not-a-uuid")

    assert response.status_code == 422
    assert response.json() == {"message": MSG_BAD_REQUEST}


@pytest.mark.asyncio
async def test_patch_company_partial_update(authorized_client: AsyncClient, company_payload):
    """
    요청에 포함된 필드만 변경되고 나머지는 유지되는지 테스트합니다.
    """
    print("\n--- Running test_patch_company_partial_update ---")
    payload = company_payload(id=str(uuid.uuid4()))
    company_id = await _create(authorized_client, payload)

    response = await authorized_client.patch(
        f"/companies/{company_id}", json={"name": "Acme Renamed", "amount_of_employees": 42}
    )
    print(f"Response JSON: {response.json()}")

    assert response.status_code == 200
    expected = {**payload, "name": "Acme Renamed", "amount_of_employees": 42}
    assert response.json() == expected

    response = await authorized_client.get(f"/companies/{company_id}")
    assert response.json() == expected


@pytest.mark.asyncio
async def test_patch_company_clears_description(authorized_client: AsyncClient, company_payload):
    payload = company_payload(id=str(uuid.uuid4()))
    company_id = await _create(authorized_client, payload)

    response = await authorized_client.patch(f"/companies/{company_id}", json={"description": None})

    assert response.status_code == 200
    assert response.json()["description"] is None
    assert response.json()["name"] == payload["name"]


@pytest.mark.asyncio
async def test_patch_company_type_and_registered(authorized_client: AsyncClient, company_payload):
    payload = company_payload(id=str(uuid.uuid4()))
    company_id = await _create(authorized_client, payload)

    response = await authorized_client.patch(
        f"/companies/{company_id}", json={"type": "NonProfit", "registered": False}
    )

    assert response.status_code == 200
    assert response.json()["type"] == "NonProfit"
    assert response.json()["registered"] is False


@pytest.mark.asyncio
async def test_patch_company_empty_body_returns_internal_error(authorized_client: AsyncClient, company_payload):
    """
    변경할 필드가 하나도 없으면 저장소에서 실패하여 500으로 응답합니다.
    """
    company_id = await _create(authorized_client, company_payload(id=str(uuid.uuid4())))

    response = await authorized_client.patch(f"/companies/{company_id}", json={})

    assert response.status_code == 500
    assert response.json() == {"message": MSG_INTERNAL_ERROR}


@pytest.mark.asyncio
@pytest.mark.parametrize("field", ["name", "amount_of_employees", "registered", "type"])
async def test_patch_company_rejects_null_for_required_field(
    authorized_client: AsyncClient, company_payload, field
):
    company_id = await _create(authorized_client, company_payload(id=str(uuid.uuid4())))

    response = await authorized_client.patch(f"/companies/{company_id}", json={field: None})

    assert response.status_code == 422
    assert response.json() == {"message": MSG_BAD_REQUEST}


@pytest.mark.asyncio
async def test_patch_company_not_found_returns_internal_error(authorized_client: AsyncClient):
    response = await authorized_client.patch(f"/companies/{uuid.uuid4()}", json={"name": "Ghost"})

    assert response.status_code == 500
    assert response.json() == {"message": MSG_INTERNAL_ERROR}


@pytest.mark.asyncio
async def test_delete_company_then_get_returns_internal_error(authorized_client: AsyncClient, company_payload):
    """
    삭제 후 같은 id로 조회하면 500으로 응답하는지 테스트합니다.
    """
    company_id = await _create(authorized_client, company_payload(id=str(uuid.uuid4())))

    response = await authorized_client.delete(f"/companies/{company_id}")
    assert response.status_code == 204
    assert response.content == b""

    response = await authorized_client.get(f"/companies/{company_id}")
    assert response.status_code == 500
    assert response.json() == {"message": MSG_INTERNAL_ERROR}


@pytest.mark.asyncio
async def test_delete_missing_company_succeeds(authorized_client: AsyncClient):
    response = await authorized_client.delete(f"/companies/{uuid.uuid4()}")

    assert response.status_code == 204


@pytest.mark.asyncio
async def test_get_company_does_not_require_token(
    authorized_client: AsyncClient, client: AsyncClient, company_payload
):
    payload = company_payload(id=str(uuid.uuid4()))
    company_id = await _create(authorized_client, payload)

    response = await client.get(f"/companies/{company_id}")

    assert response.status_code == 200
    assert response.json() == payload


@pytest.mark.asyncio
async def test_each_mutation_emits_exactly_one_event(test_app, authorized_client: AsyncClient, company_payload):
    """
    이벤트 전송이 켜진 경우 생성/수정/삭제마다 이벤트가 하나씩 나가고, 조회는 이벤트를 만들지 않습니다.
    """
    sender = AsyncMock()
    test_app.state.company_service = CompanyService(
        company_crud.EventSendingCompanyRepository(company_crud.company, sender)
    )
    payload = company_payload(id=str(uuid.uuid4()))
    company_id = await _create(authorized_client, payload)

    await authorized_client.get(f"/companies/{company_id}")
    await authorized_client.patch(f"/companies/{company_id}", json={"amount_of_employees": 6})
    await authorized_client.delete(f"/companies/{company_id}")

    events = [call.args[0] for call in sender.send.await_args_list]
    assert [event.action for event in events] == [EventAction.INSERT, EventAction.UPDATE, EventAction.DELETE]
    assert all(event.id == company_id for event in events)
    assert events[0].state.model_dump(mode="json") == payload
    assert events[1].state.amount_of_employees == 6
    assert events[2].state is None


@pytest.mark.asyncio
async def test_patch_company_rejects_blank_name(authorized_client: AsyncClient, company_payload):
    payload = company_payload(id=str(uuid.uuid4()))
    company_id = await _create(authorized_client, payload)

    response = await authorized_client.patch(f"/companies/{company_id}", json={"name": " \t "})

    assert response.status_code == 422
    assert response.json() == {"message": MSG_BAD_REQUEST}

    response = await authorized_client.get(f"/companies/{company_id}")
    assert response.json()["name"] == payload["name"]
