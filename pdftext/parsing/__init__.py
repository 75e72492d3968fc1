from pdftext.parsing.models import ParseResult
from pdftext.parsing.service import PdfTextService, build_service

__all__ = ["ParseResult", "PdfTextService", "build_service"]
