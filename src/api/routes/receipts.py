"""
Receipt endpoints: preview, archive, download and PDF.
"""

from fastapi import APIRouter, Depends, status
from fastapi.responses import FileResponse, HTMLResponse, JSONResponse, PlainTextResponse, Response

from src.api.dependencies import (
    get_audit_context,
    get_current_user,
    get_list_receipt_files_use_case,
    get_receipt_file_use_case,
    get_render_receipt_use_case,
    get_save_receipt_use_case,
    require_admin,
)
from src.application.dto.requests import SaveReceiptRequest
from src.application.dto.responses import (
    ErrorResponse,
    ReceiptFileResponse,
    SaveReceiptResponse,
)
from src.application.use_cases import (
    GetReceiptFileUseCase,
    ListReceiptFilesUseCase,
    RenderReceiptUseCase,
    SaveReceiptUseCase,
)
from src.config import get_logger
from src.core.entities.audit import AuditContext
from src.core.exceptions import SaleNotFoundError

logger = get_logger(__name__)

router = APIRouter(
    prefix="/api/receipts",
    tags=["receipts"],
    dependencies=[Depends(get_current_user)],
)

SALE_NOT_FOUND = "Venda não encontrada"
RENDER_FAILED = "Erro ao gerar recibo"


def receipt_filename(sale_id: str, extension: str = "html") -> str:
    return f"recibo-{sale_id[:8]}.{extension}"


@router.get(
    "/preview/{sale_id}",
    response_class=HTMLResponse,
    responses={404: {"content": {"text/plain": {}}}, 500: {"content": {"text/plain": {}}}},
)
async def preview_receipt(
    sale_id: str,
    use_case: RenderReceiptUseCase = Depends(get_render_receipt_use_case),
) -> Response:
    """
    Render a sale's receipt as a standalone HTML document.

    Errors are plain text so the till can tell an unknown sale apart from a
    rendering failure.
    """
    try:
        html = await use_case.render_html(sale_id)
    except SaleNotFoundError:
        return PlainTextResponse(SALE_NOT_FOUND, status_code=status.HTTP_404_NOT_FOUND)
    except Exception as e:
        logger.error("receipt_preview_failed", sale_id=sale_id, error=str(e))
        return PlainTextResponse(
            RENDER_FAILED, status_code=status.HTTP_500_INTERNAL_SERVER_ERROR
        )

    return HTMLResponse(html, headers={"Cache-Control": "no-store"})


@router.post(
    "/save",
    response_model=SaveReceiptResponse,
    responses={400: {}, 404: {"model": ErrorResponse}},
)
async def save_receipt(
    request: SaveReceiptRequest | None = None,
    use_case: SaveReceiptUseCase = Depends(get_save_receipt_use_case),
) -> SaveReceiptResponse | JSONResponse:
    """Render a sale's receipt and write it to the dated archive."""
    if request is None or not request.sale_id:
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"error": "saleId é obrigatório"},
        )

    result = await use_case.execute(request.sale_id)
    return SaveReceiptResponse(path=str(result.path))


@router.get(
    "/file/{sale_id}",
    response_class=FileResponse,
    responses={404: {"model": ErrorResponse}},
)
async def get_receipt_file(
    sale_id: str,
    download: bool = False,
    context: AuditContext = Depends(get_audit_context),
    use_case: GetReceiptFileUseCase = Depends(get_receipt_file_use_case),
) -> FileResponse:
    """Serve an archived receipt inline, or as an attachment with ?download=1."""
    path = await use_case.execute(sale_id, context)
    return FileResponse(
        path,
        media_type="text/html; charset=utf-8",
        filename=receipt_filename(sale_id),
        content_disposition_type="attachment" if download else "inline",
    )


@router.get(
    "/pdf/{sale_id}",
    response_class=Response,
    responses={404: {"model": ErrorResponse}},
)
async def get_receipt_pdf(
    sale_id: str,
    download: bool = False,
    use_case: RenderReceiptUseCase = Depends(get_render_receipt_use_case),
) -> Response:
    """Render a sale's receipt as PDF on the configured paper size."""
    pdf_bytes = await use_case.render_pdf(sale_id)
    disposition = "attachment" if download else "inline"
    return Response(
        content=pdf_bytes,
        media_type="application/pdf",
        headers={
            "Content-Disposition": f'{disposition}; filename="{receipt_filename(sale_id, "pdf")}"',
        },
    )


@router.get(
    "/list",
    response_model=list[ReceiptFileResponse],
    dependencies=[Depends(require_admin)],
)
async def list_receipts(
    use_case: ListReceiptFilesUseCase = Depends(get_list_receipt_files_use_case),
) -> list[ReceiptFileResponse]:
    """List archived receipts, most recent first."""
    return [ReceiptFileResponse.from_entity(f) for f in use_case.execute()]
