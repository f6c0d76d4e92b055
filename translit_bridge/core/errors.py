"""
Batch-level failures of the transliteration bridge.

Each error carries a short machine-readable ``code`` that travels over the
method channel next to the human-readable message.
"""
from typing import Optional


class BridgeError(Exception):
    code = "TRANSLIT_ERROR"

    def __init__(self, message: Optional[str] = None):
        super().__init__(message or self.__class__.__name__)
        self.message = message or self.__class__.__name__


class UnsupportedPlatform(BridgeError):
    """The configured backend lacks the native transliteration capability."""

    code = "API_TOO_LOW"


class TransformError(BridgeError):
    """The transform could not be constructed for the requested script."""

    code = "TRANSLIT_ERROR"


class UnknownOperation(BridgeError):
    code = "NOT_IMPLEMENTED"


class InvalidArgument(BridgeError):
    code = "INVALID_ARGUMENT"


ERRORS_BY_CODE = {
    cls.code: cls for cls in (UnsupportedPlatform, TransformError, UnknownOperation, InvalidArgument)
}


def error_for_code(code: str, message: Optional[str] = None) -> BridgeError:
    return ERRORS_BY_CODE.get(code, BridgeError)(message)
