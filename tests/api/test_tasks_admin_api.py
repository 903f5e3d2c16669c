"""Tests for task, first-run setup and health endpoints."""

import pytest


def as_user(user) -> dict[str, str]:
    return {"X-User-Id": user.id}


class TestTasks:
    async def test_create_and_list_by_visibility(self, client, staff):
        admin = as_user(staff["admin"])
        await client.post("/api/tasks", json={"title": "Repor bebidas", "assignedTo": "seller"}, headers=admin)
        await client.post("/api/tasks", json={"title": "Fechar caixa", "assignedTo": "manager"}, headers=admin)

        seller_titles = [t["title"] for t in (await client.get("/api/tasks", headers=as_user(staff["seller"]))).json()]
        admin_titles = [t["title"] for t in (await client.get("/api/tasks", headers=admin)).json()]

        assert seller_titles == ["Repor bebidas"]
        assert set(admin_titles) == {"Repor bebidas", "Fechar caixa"}

    async def test_unknown_target_means_everyone(self, client, staff):
        response = await client.post(
            "/api/tasks", json={"title": "Inventário", "assignedTo": "everybody"}, headers=as_user(staff["admin"])
        )

        assert response.status_code == 200
        assert response.json()["assigned_to"] == "all"

    async def test_blank_title_rejected(self, client, staff):
        response = await client.post("/api/tasks", json={"title": "   "}, headers=as_user(staff["admin"]))

        assert response.status_code == 400
        assert response.json()["error_code"] == "VALIDATION_ERROR"

    async def test_complete_with_comment(self, client, staff):
        created = await client.post("/api/tasks", json={"title": "Limpar balcão"}, headers=as_user(staff["admin"]))
        task_id = created.json()["id"]

        response = await client.patch(
            f"/api/tasks/{task_id}",
            json={"completed": True, "completionComment": "Feito às 18h"},
            headers=as_user(staff["seller"]),
        )

        assert response.status_code == 200
        assert response.json()["completed"] is True
        assert response.json()["completion_comment"] == "Feito às 18h"

    async def test_update_unknown_task(self, client, staff):
        response = await client.patch("/api/tasks/ghost", json={"completed": True}, headers=as_user(staff["admin"]))

        assert response.status_code == 404
        assert response.json()["error_code"] == "TASK_NOT_FOUND"

    async def test_delete_is_idempotent(self, client, staff):
        created = await client.post("/api/tasks", json={"title": "Temporária"}, headers=as_user(staff["admin"]))
        task_id = created.json()["id"]
        headers = as_user(staff["seller"])

        first = await client.delete(f"/api/tasks/{task_id}", headers=headers)
        second = await client.delete(f"/api/tasks/{task_id}", headers=headers)

        assert first.json() == {"success": True}
        assert second.status_code == 200
        assert (await client.get("/api/tasks", headers=headers)).json() == []


class TestFirstRunSetup:
    @pytest.fixture(autouse=True)
    def fast_hashing(self, monkeypatch):
        monkeypatch.setenv("SEED_BCRYPT_ROUNDS", "4")
        from src.config import reset_settings

        reset_settings()

    async def test_empty_database(self, client):
        response = await client.get("/api/admin/check-empty")

        assert response.json() == {"isEmpty": True}

    async def test_force_seed_then_refuse(self, client):
        seeded = await client.post("/api/admin/force-seed")

        assert seeded.status_code == 200
        body = seeded.json()
        assert body["success"] is True
        assert body["categories"] == 5
        assert body["products"] == 10
        assert "admin" in body["message"]
        assert (await client.get("/api/admin/check-empty")).json() == {"isEmpty": False}

        refused = await client.post("/api/admin/force-seed")

        assert refused.status_code == 400
        assert refused.json()["userCount"] == 1
        assert refused.json()["message"].startswith("Para segurança")
        assert refused.json()["error"]

    async def test_seeded_admin_can_use_the_api(self, client):
        await client.post("/api/admin/force-seed")
        from src.infrastructure.storage.sqlite import SQLiteUserStore

        (admin,) = await SQLiteUserStore().list_users()

        response = await client.get("/api/receipts/list", headers={"X-User-Id": admin.id})

        assert response.status_code == 200
        assert response.json() == []


class TestHealth:
    async def test_root_health(self, client):
        response = await client.get("/health")

        assert response.json()["status"] == "healthy"

    async def test_full_health_reports_database(self, client):
        response = await client.get("/api/health/full")

        body = response.json()
        assert body["database"]["available"] is True
        assert body["status"] in {"healthy", "degraded"}

    async def test_response_headers(self, client):
        response = await client.get("/api/health")

        assert "x-request-id" in response.headers
        assert "x-response-time" in response.headers
