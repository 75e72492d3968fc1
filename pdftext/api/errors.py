from fastapi import Request
from fastapi.responses import JSONResponse

from pdftext.logging.logger import Log
from pdftext.parsing.exceptions import (
    ExtractionFailureError,
    MethodNotAllowedError,
    ParsePdfError,
)


async def parse_pdf_error_handler(request: Request, exc: Exception) -> JSONResponse:
    """Map a ParsePdfError to its JSON error response."""
    if not isinstance(exc, ParsePdfError):
        return await unhandled_error_handler(request, exc)

    headers: dict[str, str] | None = None
    if isinstance(exc, MethodNotAllowedError):
        headers = {"Allow": exc.allowed_method}
        Log.debug(f"Rejected {request.method} {request.url.path}")
    elif isinstance(exc, ExtractionFailureError):
        Log.error(f"[PDF Parse Error] {exc.details}", exc_info=exc.__cause__ or exc)
    else:
        Log.warning(f"Bad request on {request.url.path}: {exc.message}")

    return JSONResponse(
        status_code=exc.status_code,
        content=exc.to_body(),
        headers=headers,
    )


async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    """Report anything that escaped the pipeline as an extraction failure."""
    Log.error(
        f"Unhandled exception on {request.method} {request.url.path}: "
        f"{type(exc).__name__}: {exc}",
        exc_info=exc,
    )
    failure = ExtractionFailureError(str(exc) or None)
    return JSONResponse(status_code=failure.status_code, content=failure.to_body())
