from pdftext.config.settings import Settings
from pdftext.pdf.base import BasePdfExtractor
from pdftext.pdf.pdfplumber_adapter import PdfPlumberAdapter
from pdftext.pdf.pymupdf_adapter import PyMuPdfAdapter
from pdftext.pdf.pypdf_adapter import PyPdfAdapter


class PdfExtractorFactory:
    """Creates the correct PDF extractor based on settings."""

    ADAPTERS: dict[str, type[BasePdfExtractor]] = {
        "pdfplumber": PdfPlumberAdapter,
        "pymupdf": PyMuPdfAdapter,
        "pypdf": PyPdfAdapter,
    }

    @classmethod
    def create(cls, settings: Settings) -> BasePdfExtractor:
        engine = settings.pdf_engine.lower()
        adapter_cls = cls.ADAPTERS.get(engine)
        if adapter_cls is None:
            raise ValueError(
                f"Unknown PDF engine '{engine}'. Choose from: {list(cls.ADAPTERS)}"
            )
        return adapter_cls()
