from pdftext.config.settings import Settings
from pdftext.logging.logger import Log
from pdftext.parsing.exceptions import ExtractionFailureError
from pdftext.parsing.models import ParseResult
from pdftext.parsing.payload import decode_payload, ensure_pdf_signature
from pdftext.pdf.base import BasePdfExtractor
from pdftext.pdf.factory import PdfExtractorFactory


class PdfTextService:
    """Turns a base64 PDF payload into its plain text.

    Pipeline: decode -> check signature -> extract.
    Every failure surfaces as ExtractionFailureError.
    """

    def __init__(
        self,
        extractor: BasePdfExtractor,
        validate_signature: bool = True,
    ) -> None:
        self._extractor = extractor
        self._validate_signature = validate_signature

    @property
    def extractor(self) -> BasePdfExtractor:
        return self._extractor

    def parse(self, file_base64: str) -> ParseResult:
        pdf_bytes = decode_payload(file_base64)
        Log.info(f"Decoded payload of {len(pdf_bytes)} bytes")

        if self._validate_signature:
            ensure_pdf_signature(pdf_bytes)

        try:
            text = self._extractor.extract(pdf_bytes)
        except Exception as exc:
            # adapters raise PdfExtractionError; injected extractors may raise anything
            raise ExtractionFailureError(str(exc) or None) from exc

        Log.info(f"Extracted {len(text)} chars with {self._extractor.name or 'extractor'}")
        return ParseResult(text=text)


def build_service(settings: Settings) -> PdfTextService:
    """Build a PdfTextService with the configured extractor adapter."""
    return PdfTextService(
        extractor=PdfExtractorFactory.create(settings),
        validate_signature=settings.validate_pdf_signature,
    )
