"""
Errors raised while building, sending and decoding chat completions
"""

from enum import Enum
from typing import Optional


class BuildErrorKind(str, Enum):
    MISSING_REQUIRED_FIELD = "missing_required_field"
    INVALID_FIELD = "invalid_field"


class DecodeErrorKind(str, Enum):
    MISSING_FIELD = "missing_field"
    TYPE_MISMATCH = "type_mismatch"
    INVALID_JSON = "invalid_json"


class BuildError(Exception):
    """Exception raised when a request builder cannot produce a request"""

    def __init__(self, kind: BuildErrorKind, field: str, detail: Optional[str] = None):
        self.kind = kind
        self.field = field
        self.detail = detail
        message = f"{kind.value}: {field}"
        if detail:
            message += f" ({detail})"
        super().__init__(message)


class DecodeError(Exception):
    """Exception raised when a service reply does not match the response schema"""

    def __init__(self, kind: DecodeErrorKind, field: str, detail: Optional[str] = None):
        self.kind = kind
        self.field = field
        self.detail = detail
        message = f"{kind.value}: {field}"
        if detail:
            message += f" ({detail})"
        super().__init__(message)


class TransportError(Exception):
    """Exception raised by a transport; never interpreted by the request/response layer"""

    def __init__(self, message: str, status_code: Optional[int] = None, body: Optional[bytes] = None):
        self.status_code = status_code
        self.body = body
        super().__init__(message)
