from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from pdftext.api.errors import parse_pdf_error_handler, unhandled_error_handler
from pdftext.api.routes import build_router
from pdftext.config.settings import Settings
from pdftext.logging.logger import Log
from pdftext.parsing.exceptions import ParsePdfError
from pdftext.parsing.service import PdfTextService, build_service


def create_app(
    settings: Settings | None = None,
    service: PdfTextService | None = None,
) -> FastAPI:
    """Build the ASGI application.

    The extraction service is resolved once here and shared by all requests.
    Pass ``service`` to inject a different extractor.
    """
    settings = settings if settings is not None else Settings()
    Log.configure(settings.log_level)

    app = FastAPI(title=settings.app_name, version="0.1.0")
    app.state.settings = settings
    app.state.service = service if service is not None else build_service(settings)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_allow_origins,
        allow_credentials=False,
        allow_methods=["POST"],
        allow_headers=["*"],
    )
    app.add_exception_handler(ParsePdfError, parse_pdf_error_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)
    app.include_router(build_router(settings))

    Log.info(
        f"{settings.app_name} ready ({settings.app_env}): "
        f"POST {settings.route_path} using {app.state.service.extractor.name or 'custom'} extractor"
    )
    return app
