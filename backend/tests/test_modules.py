from datetime import datetime

import pytest
from fastapi import status
from fastapi.testclient import TestClient

from module_studio.config import Settings
from module_studio.exceptions import StorageError
from module_studio.main import create_app
from module_studio.services import ModuleService


def _create(client, payload):
    response = client.post("/api/modules", json=payload)
    assert response.status_code == status.HTTP_201_CREATED
    return response.json()["data"]


def _timestamp(value):
    assert value.endswith("Z")
    return datetime.fromisoformat(value[:-1] + "+00:00")


def test_health(client):
    response = client.get("/health")
    assert response.status_code == status.HTTP_200_OK
    assert response.json()["status"] == "OK"


def test_list_modules_empty(client):
    response = client.get("/api/modules")
    assert response.status_code == status.HTTP_200_OK
    assert response.json() == {"success": True, "data": []}


def test_create_module(client):
    """Create returns 201 with the stored entity"""
    response = client.post(
        "/api/modules",
        json={"prompt": "Summarize:", "en": {"name": "Summarizer"}, "kn": {"name": "ಸಾರಾಂಶ"}}
    )
    assert response.status_code == status.HTTP_201_CREATED
    body = response.json()
    assert body["success"] is True
    assert "error" not in body
    module = body["data"]
    assert module["id"] > 0
    assert module["createdAt"] == module["updatedAt"]
    assert module["en"] == {"name": "Summarizer", "description": None, "inputPlaceholder": None}
    assert module["kn"]["name"] == "ಸಾರಾಂಶ"


def test_create_module_validation_order(client, module_payload):
    module_payload["prompt"] = ""
    module_payload["en"]["name"] = ""
    response = client.post("/api/modules", json=module_payload)
    assert response.status_code == status.HTTP_400_BAD_REQUEST
    assert response.json() == {"success": False, "error": "Module prompt is required"}

    module_payload["prompt"] = "Summarize:"
    module_payload["kn"]["name"] = ""
    response = client.post("/api/modules", json=module_payload)
    assert response.status_code == status.HTTP_400_BAD_REQUEST
    assert response.json()["error"] == "English name is required"


def test_create_module_without_body(client):
    response = client.post("/api/modules")
    assert response.status_code == status.HTTP_400_BAD_REQUEST
    assert response.json()["error"] == "Module data is required"


def test_create_module_with_wrong_types(client, module_payload):
    module_payload["en"]["description"] = ["not", "text"]
    response = client.post("/api/modules", json=module_payload)
    assert response.status_code == status.HTTP_400_BAD_REQUEST
    assert response.json()["success"] is False
    assert response.json()["error"].startswith("Invalid module data")


def test_get_module(client, module_payload):
    created = _create(client, module_payload)

    response = client.get(f"/api/modules/{created['id']}")
    assert response.status_code == status.HTTP_200_OK
    assert response.json()["data"] == created


def test_get_missing_module(client):
    response = client.get("/api/modules/4242")
    assert response.status_code == status.HTTP_404_NOT_FOUND
    assert response.json() == {"success": False, "error": "Module with ID 4242 not found"}


def test_update_module(client, module_payload):
    created = _create(client, module_payload)
    module_payload["prompt"] = "Summarize in one line:"
    module_payload["en"]["name"] = "One-liner"

    response = client.put(f"/api/modules/{created['id']}", json=module_payload)
    assert response.status_code == status.HTTP_200_OK
    updated = response.json()["data"]
    assert updated["id"] == created["id"]
    assert updated["prompt"] == "Summarize in one line:"
    assert updated["en"]["name"] == "One-liner"
    assert updated["createdAt"] == created["createdAt"]
    assert _timestamp(updated["updatedAt"]) > _timestamp(created["updatedAt"])


def test_update_missing_module(client, module_payload):
    response = client.put("/api/modules/99999", json=module_payload)
    assert response.status_code == status.HTTP_404_NOT_FOUND
    assert response.json()["success"] is False


@pytest.mark.parametrize("module_id", ["99999999999999999999", str(2 ** 63)])
def test_ids_beyond_integer_range_are_not_found(client, module_payload, module_id):
    _create(client, module_payload)
    expected = {"success": False, "error": f"Module with ID {module_id} not found"}

    response = client.get(f"/api/modules/{module_id}")
    assert response.status_code == status.HTTP_404_NOT_FOUND
    assert response.json() == expected

    response = client.put(f"/api/modules/{module_id}", json=module_payload)
    assert response.status_code == status.HTTP_404_NOT_FOUND
    assert response.json() == expected

    response = client.delete(f"/api/modules/{module_id}")
    assert response.status_code == status.HTTP_404_NOT_FOUND
    assert response.json() == expected

    assert len(client.get("/api/modules").json()["data"]) == 1


def test_update_with_invalid_id(client, module_payload):
    response = client.put("/api/modules/0", json=module_payload)
    assert response.status_code == status.HTTP_400_BAD_REQUEST
    assert response.json()["error"] == "Valid module ID is required"


def test_delete_module(client, module_payload):
    created = _create(client, module_payload)

    response = client.delete(f"/api/modules/{created['id']}")
    assert response.status_code == status.HTTP_200_OK
    assert response.json() == {"success": True, "message": "Module deleted successfully"}

    listed = client.get("/api/modules").json()["data"]
    assert created["id"] not in [module["id"] for module in listed]

    response = client.delete(f"/api/modules/{created['id']}")
    assert response.status_code == status.HTTP_404_NOT_FOUND


def test_delete_non_numeric_id(client):
    response = client.delete("/api/modules/abc")
    assert response.status_code == status.HTTP_400_BAD_REQUEST
    assert response.json()["success"] is False


def test_delete_ineffective_is_server_error(client, module_payload, monkeypatch):
    created = _create(client, module_payload)
    monkeypatch.setattr("module_studio.repositories.base.BaseRepository.delete_by_id", lambda self, id: 0)

    response = client.delete(f"/api/modules/{created['id']}")
    assert response.status_code == status.HTTP_500_INTERNAL_SERVER_ERROR
    assert response.json()["error"] == "Module deletion failed - no rows affected"


def test_storage_errors_are_sanitized(client, monkeypatch):
    def broken(self):
        raise StorageError("sqlite3.OperationalError: disk I/O error at /var/secret")

    monkeypatch.setattr(ModuleService, "list_modules", broken)

    response = client.get("/api/modules")
    assert response.status_code == status.HTTP_500_INTERNAL_SERVER_ERROR
    assert response.json() == {"success": False, "error": "Failed to fetch modules"}
    assert "secret" not in response.text


def test_unexpected_errors_are_sanitized(database, monkeypatch):
    def broken(self, module_data):
        raise RuntimeError("connection string postgres://user:pw@host")

    monkeypatch.setattr(ModuleService, "create_module", broken)
    app = create_app(Settings(seed_on_startup=False), database)

    with TestClient(app, raise_server_exceptions=False) as client:
        response = client.post("/api/modules", json={"prompt": "x"})

    assert response.status_code == status.HTTP_500_INTERNAL_SERVER_ERROR
    assert response.json() == {"success": False, "error": "Failed to create module"}


def test_seeded_store_lists_defaults_newest_first(seeded_client):
    response = seeded_client.get("/api/modules")
    assert response.status_code == status.HTTP_200_OK
    modules = response.json()["data"]
    assert [module["en"]["name"] for module in modules] == ["Image Analysis", "Email Writer", "Text Summarizer"]


def test_restart_does_not_reseed(database):
    for _ in range(2):
        app = create_app(Settings(seed_on_startup=True), database)
        with TestClient(app) as client:
            modules = client.get("/api/modules").json()["data"]
    assert len(modules) == 3
