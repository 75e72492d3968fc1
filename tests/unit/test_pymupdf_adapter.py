import pytest

from pdftext.pdf.exceptions import PdfExtractionError
from pdftext.pdf.pymupdf_adapter import PyMuPdfAdapter


class TestPyMuPdfAdapter:
    def test_extract_returns_text(self, sample_pdf_bytes: bytes) -> None:
        adapter = PyMuPdfAdapter()
        result = adapter.extract(sample_pdf_bytes)
        assert "Hello PDF World" in result

    def test_extract_keeps_page_order(self, multi_page_pdf_bytes: bytes) -> None:
        adapter = PyMuPdfAdapter()
        result = adapter.extract(multi_page_pdf_bytes)
        assert result.index("Page one content") < result.index("Page two content")

    def test_extract_empty_pdf_returns_empty_string(self, empty_pdf_bytes: bytes) -> None:
        adapter = PyMuPdfAdapter()
        assert adapter.extract(empty_pdf_bytes) == ""

    def test_extract_raises_on_invalid_bytes(self) -> None:
        adapter = PyMuPdfAdapter()
        with pytest.raises(PdfExtractionError, match="pymupdf extraction failed"):
            adapter.extract(b"not a pdf")
