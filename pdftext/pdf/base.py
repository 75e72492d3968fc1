from abc import ABC, abstractmethod


class BasePdfExtractor(ABC):
    """Contract for all PDF text extraction adapters.

    Adapters hold no per-request state, so one instance is built at startup
    and shared by every request.
    """

    name: str = ""

    @abstractmethod
    def extract(self, pdf_bytes: bytes) -> str:
        """Extract plain text from PDF bytes.

        Args:
            pdf_bytes: Raw PDF file content.

        Returns:
            Page texts in page order, newline-joined and stripped.
            An empty string for a document with no text layer.

        Raises:
            PdfExtractionError: if extraction fails for any reason.
        """
