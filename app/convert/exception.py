from enum import Enum
from typing import Any, Optional

from app.exception import PodcastConverterException


class ConvertErrorCode(Enum):
    CONVERT_FAILED = ("CONVERT_001", "Failed to convert video")

    def __init__(self, code: str, message: str):
        self._code = code
        self._message = message

    @property
    def code(self) -> str:
        return self._code

    @property
    def message(self) -> str:
        return self._message


class ConvertException(PodcastConverterException):
    def __init__(
        self,
        code: Enum,
        *,
        status_code: int = 500,
        detail: Optional[Any] = None,
        message: Optional[str] = None,
    ):
        super().__init__(code, status_code=status_code, detail=detail, message=message)
        self.code = code
