class ParsePdfError(Exception):
    """Base exception for all errors reported by the parse endpoint."""

    status_code: int = 500

    def __init__(self, message: str, details: str | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = details

    def to_body(self) -> dict[str, str]:
        body = {"error": self.message}
        if self.details is not None:
            body["details"] = self.details
        return body


class MethodNotAllowedError(ParsePdfError):
    """Raised for any request method other than POST."""

    status_code = 405
    allowed_method = "POST"

    def __init__(self) -> None:
        super().__init__("Method not allowed. Use POST.")


class InvalidRequestBodyError(ParsePdfError):
    """Raised when the body carries no usable "fileBase64" string."""

    status_code = 400

    def __init__(self) -> None:
        super().__init__('Missing or invalid "fileBase64" in request body.')


class ExtractionFailureError(ParsePdfError):
    """Raised when the payload cannot be decoded or its text extracted."""

    status_code = 500
    UNKNOWN_DETAILS = "Unknown error"

    def __init__(self, details: str | None = None) -> None:
        super().__init__("Failed to parse PDF.", details=details or self.UNKNOWN_DETAILS)
