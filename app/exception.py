from enum import Enum
from typing import Any, Optional


class BusinessException(Exception):
    def __init__(
        self,
        code: Enum,
        *,
        status_code: int = 400,
        detail: Optional[Any] = None,
        message: Optional[str] = None,
    ):
        self._message = message or getattr(code, "message", str(code))
        super().__init__(self._message)
        self.code = code
        self.status_code = status_code
        self.detail = detail

    @property
    def error_code(self) -> str:
        return getattr(self.code, "code", getattr(self.code, "name", "UNKNOWN"))

    @property
    def error_message(self) -> str:
        return self._message

    def to_dict(self) -> dict:
        return {"error": self.error_message}


class PodcastConverterException(BusinessException):
    def __init__(
        self,
        code: Enum,
        *,
        status_code: int = 400,
        detail: Optional[Any] = None,
        message: Optional[str] = None,
    ):
        super().__init__(code, status_code=status_code, detail=detail, message=message)
