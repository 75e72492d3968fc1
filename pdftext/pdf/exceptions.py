class PdfExtractionError(Exception):
    """Raised by an extractor adapter when a document cannot be read."""
