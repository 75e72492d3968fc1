from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse
from starlette.concurrency import run_in_threadpool

from pdftext.config.settings import Settings
from pdftext.logging.logger import Log
from pdftext.parsing.exceptions import InvalidRequestBodyError, MethodNotAllowedError
from pdftext.parsing.request import read_file_base64
from pdftext.parsing.service import PdfTextService

async def parse_pdf(request: Request) -> JSONResponse:
    """Extract the plain text of a base64-encoded PDF.

    Body: ``{"fileBase64": "<base64 string>"}``. Responds ``{"text": ...}``.
    """
    if request.method != "POST":
        raise MethodNotAllowedError()

    file_base64 = read_file_base64(await _read_json(request))
    service: PdfTextService = request.app.state.service
    result = await run_in_threadpool(service.parse, file_base64)
    return JSONResponse(status_code=200, content=result.to_body())


async def health_check(request: Request) -> dict[str, str]:
    settings: Settings = request.app.state.settings
    return {
        "status": "ok",
        "service": settings.app_name,
        "pdf_engine": settings.pdf_engine,
    }


async def _read_json(request: Request) -> object:
    try:
        return await request.json()
    except ValueError as exc:
        Log.warning(f"Request body is not valid JSON: {exc}")
        raise InvalidRequestBodyError() from exc


def build_router(settings: Settings) -> APIRouter:
    """Create the router, mounting the parse endpoint at the configured path."""
    router = APIRouter()
    # No method restriction: parse_pdf answers every non-POST method itself
    # so the 405 always carries the JSON body and "Allow: POST".
    router.add_route(settings.route_path, parse_pdf, include_in_schema=False)
    router.add_api_route("/health", health_check, methods=["GET"], tags=["Health"])
    return router
