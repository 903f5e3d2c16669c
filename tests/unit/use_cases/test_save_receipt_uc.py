"""Tests for RenderReceiptUseCase and SaveReceiptUseCase."""

from datetime import datetime
from pathlib import Path
from unittest.mock import AsyncMock, Mock

import pytest

from src.application.use_cases.render_receipt import RenderReceiptUseCase
from src.application.use_cases.save_receipt import SaveReceiptUseCase
from src.core.entities.receipt import PaperSize, ReceiptSettings
from src.core.entities.sale import Sale, SaleItem
from src.core.exceptions import SaleNotFoundError


@pytest.fixture
def sale_store():
    store = AsyncMock()
    store.get_sale.return_value = Sale(
        id="sale-1",
        user_id="u1",
        total=20.0,
        items=[SaleItem(quantity=2, price_at_sale=10.0)],
        created_at=datetime(2024, 6, 1, 12, 30, 15),
    )
    return store


@pytest.fixture
def settings_store():
    store = Mock()
    store.load.return_value = ReceiptSettings(paper_size=PaperSize.A6)
    return store


@pytest.fixture
def renderer():
    renderer = Mock()
    renderer.render.return_value = "<html>ok</html>"
    return renderer


@pytest.fixture
def render_use_case(sale_store, settings_store, renderer):
    user_store = AsyncMock()
    user_store.get_user.return_value = None
    return RenderReceiptUseCase(
        sale_store=sale_store,
        user_store=user_store,
        product_store=AsyncMock(),
        settings_store=settings_store,
        renderer=renderer,
        pdf_renderer=Mock(render=Mock(return_value=b"%PDF-1.4")),
    )


class TestRenderReceiptUseCase:
    async def test_render_html_uses_configured_paper(self, render_use_case, renderer):
        html = await render_use_case.render_html("sale-1")

        assert html == "<html>ok</html>"
        data, paper = renderer.render.call_args[0]
        assert data.sale_id == "sale-1"
        assert paper == PaperSize.A6

    async def test_render_pdf(self, render_use_case):
        assert await render_use_case.render_pdf("sale-1") == b"%PDF-1.4"

    async def test_unknown_sale(self, render_use_case, sale_store):
        sale_store.get_sale.return_value = None
        with pytest.raises(SaleNotFoundError):
            await render_use_case.render_html("nope")


class TestSaveReceiptUseCase:
    async def test_archives_rendered_document(self, render_use_case):
        archive = Mock()
        archive.save.return_value = Path("/r/2024/06/semana-22/recibo-2024-06-01-12-30-15.html")

        result = await SaveReceiptUseCase(render_use_case, archive).execute("sale-1")

        data, document = archive.save.call_args[0]
        assert data.sale_id == "sale-1"
        assert document == "<html>ok</html>"
        assert result.path.name == "recibo-2024-06-01-12-30-15.html"

    async def test_unknown_sale_writes_nothing(self, render_use_case, sale_store):
        sale_store.get_sale.return_value = None
        archive = Mock()

        with pytest.raises(SaleNotFoundError):
            await SaveReceiptUseCase(render_use_case, archive).execute("nope")

        archive.save.assert_not_called()
