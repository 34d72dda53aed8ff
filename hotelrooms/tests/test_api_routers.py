from __future__ import annotations

from decimal import Decimal
from typing import Any

import pytest
from fastapi import FastAPI
from starlette.testclient import TestClient

import hotelrooms.presentation.routers as routers
from hotelrooms.core.errors import InvalidDataError, NotFoundError
from hotelrooms.presentation.exception_handlers import register_exception_handlers
from hotelrooms.schemas.models import RoomResponse


class _DummySessions:
    """A minimal stand-in for an async_sessionmaker (never called in router tests)."""


@pytest.fixture()
def app() -> FastAPI:
    """
    Build a tiny FastAPI app with ONLY the router and error handlers under test.
    """
    test_app = FastAPI()
    register_exception_handlers(test_app)
    test_app.include_router(routers.router)
    test_app.dependency_overrides[routers.get_sessionmaker] = lambda: _DummySessions()
    return test_app


@pytest.fixture()
def router_client(app: FastAPI) -> TestClient:
    return TestClient(app)


def _room_body(**overrides: Any) -> dict[str, Any]:
    base = {
        "id": 1,
        "room_number": 101,
        "daily_rate": Decimal("60.00"),
        "type_id": 1,
        "status_id": 1,
        "type": {"id": 1, "name": "Single"},
        "status": {"id": 1, "description": "Available"},
    }
    base.update(overrides)
    return base


def test_post_rooms_returns_201_with_camel_case_body(router_client: TestClient, monkeypatch: pytest.MonkeyPatch) -> None:
    received = {}

    async def _fake_create_room_service(body, sessions):
        received["body"] = body
        return _room_body()

    monkeypatch.setattr(routers, "create_room_service", _fake_create_room_service)

    r = router_client.post("/api/rooms", json={"roomNumber": 101, "dailyRate": 60.00, "typeId": 1, "statusId": 1})

    assert r.status_code == 201
    assert r.json()["roomNumber"] == 101
    assert r.json()["dailyRate"] == 60.0
    assert r.json()["type"] == {"id": 1, "name": "Single"}
    assert received["body"].daily_rate == Decimal("60")
    assert received["body"].id is None


def test_get_room_not_found_maps_to_404(router_client: TestClient, monkeypatch: pytest.MonkeyPatch) -> None:
    async def _fake_get_room_service(room_id: int, sessions):
        raise NotFoundError(f"Object not found with id: {room_id}")

    monkeypatch.setattr(routers, "get_room_service", _fake_get_room_service)

    r = router_client.get("/api/rooms/9")
    assert r.status_code == 404
    assert r.json() == {
        "status": 404,
        "error": "Not Found",
        "message": "Object not found with id: 9",
        "path": "/api/rooms/9",
    }


def test_put_room_invalid_data_maps_to_400(router_client: TestClient, monkeypatch: pytest.MonkeyPatch) -> None:
    async def _fake_update_room_service(body, sessions):
        raise InvalidDataError("O valor mínimo da diária deve ser 60 reais")

    monkeypatch.setattr(routers, "update_room_service", _fake_update_room_service)

    r = router_client.put("/api/rooms", json={"id": 1, "roomNumber": 101, "dailyRate": 10, "typeId": 1, "statusId": 1})
    assert r.status_code == 400
    assert r.json()["message"] == "O valor mínimo da diária deve ser 60 reais"
    assert r.json()["error"] == "Bad Request"


def test_put_room_without_id_is_a_validation_error(router_client: TestClient) -> None:
    r = router_client.put("/api/rooms", json={"roomNumber": 101, "dailyRate": 80, "typeId": 1, "statusId": 1})

    assert r.status_code == 400
    assert r.json()["message"] == "Erro de validação"
    assert "id" in r.json()["errors"]


def test_negative_daily_rate_is_a_validation_error(router_client: TestClient) -> None:
    r = router_client.post("/api/rooms", json={"roomNumber": 1, "dailyRate": -5, "typeId": 1, "statusId": 1})

    assert r.status_code == 400
    assert set(r.json()["errors"]) == {"dailyRate"}


@pytest.mark.parametrize("path", ["/api/rooms/abc", "/api/type-rooms/-1", "/api/status-rooms/1.5"])
def test_malformed_ids_map_to_400(router_client: TestClient, path: str) -> None:
    r = router_client.get(path)

    assert r.status_code == 400
    assert r.json()["message"].startswith("Invalid id: ")


def test_delete_room_returns_200(router_client: TestClient, monkeypatch: pytest.MonkeyPatch) -> None:
    deleted = []

    async def _fake_delete_room_service(room_id: int, sessions):
        deleted.append(room_id)

    monkeypatch.setattr(routers, "delete_room_service", _fake_delete_room_service)

    r = router_client.delete("/api/rooms/4")
    assert r.status_code == 200
    assert deleted == [4]


def test_get_rooms_returns_list(router_client: TestClient, monkeypatch: pytest.MonkeyPatch) -> None:
    async def _fake_list_rooms_service(sessions):
        return [_room_body(id=1), _room_body(id=2, room_number=102)]

    monkeypatch.setattr(routers, "list_rooms_service", _fake_list_rooms_service)

    r = router_client.get("/api/rooms")
    assert r.status_code == 200
    assert [room["id"] for room in r.json()] == [1, 2]


def test_get_type_room_200(router_client: TestClient, monkeypatch: pytest.MonkeyPatch) -> None:
    async def _fake_get_type_room_service(type_room_id: int, sessions):
        return {"id": type_room_id, "name": "Suite"}

    monkeypatch.setattr(routers, "get_type_room_service", _fake_get_type_room_service)

    r = router_client.get("/api/type-rooms/3")
    assert r.status_code == 200
    assert r.json() == {"id": 3, "name": "Suite"}


def test_post_status_room_201(router_client: TestClient, monkeypatch: pytest.MonkeyPatch) -> None:
    async def _fake_create_status_room_service(body, sessions):
        return {"id": 1, "description": body.description}

    monkeypatch.setattr(routers, "create_status_room_service", _fake_create_status_room_service)

    r = router_client.post("/api/status-rooms", json={"description": "Occupied"})
    assert r.status_code == 201
    assert r.json() == {"id": 1, "description": "Occupied"}


@pytest.mark.parametrize("rate", ["60.00", "99.90", "12345678.91", "99999999.99"])
def test_daily_rate_json_keeps_the_stored_decimal(rate: str) -> None:
    response = RoomResponse(
        id=1,
        room_number=101,
        daily_rate=Decimal(rate),
        type_id=1,
        status_id=1,
        type={"id": 1, "name": "Single"},
        status={"id": 1, "description": "Available"},
    )

    text = response.model_dump_json(by_alias=True)

    assert f'"dailyRate":{float(Decimal(rate))!r}' in text
    assert Decimal(repr(float(Decimal(rate)))) == Decimal(rate)
