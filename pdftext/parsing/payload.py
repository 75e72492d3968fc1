import base64
import binascii
import re

from pdftext.parsing.exceptions import ExtractionFailureError

PDF_SIGNATURE = b"%PDF"

_DATA_URL_PREFIX = re.compile(r"^data:[^,;]*(;[^,;]+)*;base64,", re.IGNORECASE)
_WHITESPACE = re.compile(r"\s+")
_URLSAFE_TO_STANDARD = str.maketrans("-_", "+/")


def decode_payload(file_base64: str) -> bytes:
    """Decode a base64 payload into raw bytes.

    Accepts the standard and URL-safe alphabets, with or without padding.
    A leading data URL prefix (``data:application/pdf;base64,``) and any
    whitespace are dropped first. Other characters outside the alphabet
    are rejected.

    Raises:
        ExtractionFailureError: if the payload is not valid base64.
    """
    cleaned = _WHITESPACE.sub("", _DATA_URL_PREFIX.sub("", file_base64.strip(), count=1))
    cleaned = cleaned.translate(_URLSAFE_TO_STANDARD).rstrip("=")
    # a single trailing sextet cannot complete a byte
    if len(cleaned) % 4 == 1:
        cleaned = cleaned[:-1]
    cleaned += "=" * (-len(cleaned) % 4)
    try:
        return base64.b64decode(cleaned, validate=True)
    except (binascii.Error, ValueError) as exc:
        raise ExtractionFailureError(f"Invalid base64 payload: {exc}") from exc


def ensure_pdf_signature(data: bytes) -> None:
    """Raise ExtractionFailureError unless data starts with the %PDF signature."""
    if not data.startswith(PDF_SIGNATURE):
        raise ExtractionFailureError(
            "Decoded payload is not a PDF document (missing %PDF signature)."
        )
