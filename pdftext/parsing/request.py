from pdftext.parsing.exceptions import InvalidRequestBodyError

FILE_FIELD = "fileBase64"


def read_file_base64(body: object) -> str:
    """Return the base64 payload from a decoded JSON request body.

    Raises:
        InvalidRequestBodyError: if the body is not an object, or the field is
            missing, not a string, or empty.
    """
    if not isinstance(body, dict):
        raise InvalidRequestBodyError()
    value = body.get(FILE_FIELD)
    if not isinstance(value, str) or not value:
        raise InvalidRequestBodyError()
    return value
