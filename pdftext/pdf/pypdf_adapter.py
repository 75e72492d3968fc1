import io

from pypdf import PdfReader

from pdftext.pdf.base import BasePdfExtractor
from pdftext.pdf.exceptions import PdfExtractionError


class PyPdfAdapter(BasePdfExtractor):
    """Extracts text from PDF using pypdf."""

    name = "pypdf"

    def extract(self, pdf_bytes: bytes) -> str:
        try:
            reader = PdfReader(io.BytesIO(pdf_bytes))
            pages = [(page.extract_text() or "").strip() for page in reader.pages]
            return "\n".join(pages).strip()
        except PdfExtractionError:
            raise
        except Exception as exc:
            raise PdfExtractionError(f"pypdf extraction failed: {exc}") from exc
