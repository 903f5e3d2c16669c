"""Tests for receipt, settings and sales endpoints."""

import pytest


def as_user(user) -> dict[str, str]:
    return {"X-User-Id": user.id}


SALE_BODY = {
    "items": [{"productId": "p1", "quantity": 2, "priceAtSale": 6.5}],
    "paymentMethod": "cash",
    "amountReceived": 20,
    "change": 7,
    "preview": {
        "items": [{"productName": "Banana Prata", "productUnit": "kg", "quantity": 2, "priceAtSale": 6.5}],
        "subtotal": 13,
        "total": 13,
        "paymentMethod": "cash",
        "amountReceived": 20,
        "change": 7,
    },
}


@pytest.fixture
async def sale_id(client, staff):
    response = await client.post("/api/sales", json=SALE_BODY, headers=as_user(staff["seller"]))
    assert response.status_code == 201
    return response.json()["id"]


class TestIdentity:
    async def test_missing_header_is_unauthorized(self, client, staff):
        response = await client.get("/api/receipts/preview/x")

        assert response.status_code == 401
        assert response.json()["error_code"] == "UNAUTHORIZED"

    async def test_unknown_user_is_unauthorized(self, client, staff):
        response = await client.get("/api/tasks", headers={"X-User-Id": "ghost"})

        assert response.status_code == 401


class TestSales:
    async def test_total_defaults_to_line_sum(self, client, staff, sale_id):
        response = await client.get(f"/api/sales/{sale_id}", headers=as_user(staff["seller"]))

        assert response.status_code == 200
        body = response.json()
        assert body["total"] == 13.0
        assert body["user_id"] == staff["seller"].id

    async def test_unknown_sale(self, client, staff):
        response = await client.get("/api/sales/nope", headers=as_user(staff["admin"]))

        assert response.status_code == 404
        assert response.json()["error_code"] == "SALE_NOT_FOUND"

    async def test_sellers_only_list_their_own(self, client, staff, sale_id):
        await client.post("/api/sales", json=SALE_BODY, headers=as_user(staff["manager"]))

        seller_view = await client.get("/api/sales", headers=as_user(staff["seller"]))
        manager_view = await client.get("/api/sales", headers=as_user(staff["manager"]))

        assert [s["id"] for s in seller_view.json()] == [sale_id]
        assert len(manager_view.json()) == 2

    async def test_empty_cart_rejected(self, client, staff):
        response = await client.post("/api/sales", json={"items": []}, headers=as_user(staff["seller"]))

        assert response.status_code == 422
        assert response.json()["error_code"] == "VALIDATION_ERROR"


class TestPreview:
    async def test_renders_html(self, client, staff, sale_id):
        response = await client.get(f"/api/receipts/preview/{sale_id}", headers=as_user(staff["seller"]))

        assert response.status_code == 200
        assert response.headers["content-type"].startswith("text/html")
        assert response.headers["cache-control"] == "no-store"
        assert "<!DOCTYPE html>" in response.text
        assert "Banana Prata" in response.text

    async def test_unknown_sale_is_plain_text(self, client, staff):
        response = await client.get("/api/receipts/preview/nope", headers=as_user(staff["seller"]))

        assert response.status_code == 404
        assert response.headers["content-type"].startswith("text/plain")
        assert response.text == "Venda não encontrada"


class TestSave:
    async def test_missing_sale_id(self, client, staff):
        response = await client.post("/api/receipts/save", json={}, headers=as_user(staff["seller"]))

        assert response.status_code == 400
        assert response.json() == {"error": "saleId é obrigatório"}

    async def test_no_body(self, client, staff):
        response = await client.post("/api/receipts/save", headers=as_user(staff["seller"]))

        assert response.status_code == 400
        assert response.json() == {"error": "saleId é obrigatório"}

    async def test_non_string_sale_id(self, client, staff):
        response = await client.post(
            "/api/receipts/save", json={"saleId": 123}, headers=as_user(staff["seller"])
        )

        assert response.status_code == 400
        assert response.json() == {"error": "saleId é obrigatório"}

    async def test_unknown_sale(self, client, staff):
        response = await client.post(
            "/api/receipts/save", json={"saleId": "nope"}, headers=as_user(staff["seller"])
        )

        assert response.status_code == 404

    async def test_archives_and_serves_file(self, client, staff, sale_id):
        headers = as_user(staff["seller"])
        saved = await client.post("/api/receipts/save", json={"saleId": sale_id}, headers=headers)

        assert saved.status_code == 200
        assert saved.json()["success"] is True
        assert saved.json()["path"].endswith(".html")

        inline = await client.get(f"/api/receipts/file/{sale_id}", headers=headers)
        download = await client.get(f"/api/receipts/file/{sale_id}?download=1", headers=headers)

        assert inline.status_code == 200
        assert "Banana Prata" in inline.text
        assert inline.headers["content-disposition"].startswith("inline")
        assert download.headers["content-disposition"].startswith("attachment")
        assert f"recibo-{sale_id[:8]}.html" in download.headers["content-disposition"]

    async def test_file_before_save(self, client, staff, sale_id):
        response = await client.get(f"/api/receipts/file/{sale_id}", headers=as_user(staff["seller"]))

        assert response.status_code == 404

    async def test_listing_is_admin_only(self, client, staff, sale_id):
        await client.post("/api/receipts/save", json={"saleId": sale_id}, headers=as_user(staff["seller"]))

        denied = await client.get("/api/receipts/list", headers=as_user(staff["seller"]))
        listed = await client.get("/api/receipts/list", headers=as_user(staff["admin"]))

        assert denied.status_code == 403
        assert listed.status_code == 200
        assert len(listed.json()) == 1


async def test_pdf(client, staff, sale_id):
    response = await client.get(f"/api/receipts/pdf/{sale_id}", headers=as_user(staff["seller"]))

    assert response.status_code == 200
    assert response.headers["content-type"] == "application/pdf"
    assert response.content.startswith(b"%PDF")


class TestReceiptSettings:
    async def test_defaults(self, client, staff):
        response = await client.get("/api/settings/receipt", headers=as_user(staff["seller"]))

        assert response.status_code == 200
        assert response.json()["paper_size"] == "80x80"
        assert response.json()["print_on_confirm"] is False

    async def test_admin_updates(self, client, staff):
        response = await client.put(
            "/api/settings/receipt",
            json={"paperSize": "a6", "printOnConfirm": True},
            headers=as_user(staff["admin"]),
        )

        assert response.status_code == 200
        assert response.json()["paper_size"] == "a6"
        reread = await client.get("/api/settings/receipt", headers=as_user(staff["seller"]))
        assert reread.json()["print_on_confirm"] is True

    async def test_invalid_paper_size(self, client, staff):
        response = await client.put(
            "/api/settings/receipt", json={"paperSize": "letter"}, headers=as_user(staff["admin"])
        )

        assert response.status_code == 400

    async def test_non_admin_forbidden(self, client, staff):
        response = await client.put(
            "/api/settings/receipt", json={"paperSize": "a6"}, headers=as_user(staff["manager"])
        )

        assert response.status_code == 403
        assert response.json()["error_code"] == "FORBIDDEN"


class BrokenRenderer:
    async def render_html(self, sale_id: str) -> str:
        raise RuntimeError("template exploded")


async def test_render_failure_is_distinct_from_unknown_sale(staff):
    from httpx import ASGITransport, AsyncClient

    from src.api.dependencies import get_render_receipt_use_case
    from src.api.main import create_app

    app = create_app()
    app.dependency_overrides[get_render_receipt_use_case] = BrokenRenderer
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        response = await ac.get("/api/receipts/preview/any", headers=as_user(staff["seller"]))

    assert response.status_code == 500
    assert response.text == "Erro ao gerar recibo"
