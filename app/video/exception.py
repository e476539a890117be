from enum import Enum
from typing import Any, Optional

from app.exception import PodcastConverterException


class VideoErrorCode(Enum):
    VIDEO_URL_REQUIRED = ("VIDEO_001", "YouTube URL is required")
    VIDEO_URL_INVALID = ("VIDEO_002", "Invalid YouTube URL")
    VIDEO_NOT_FOUND = ("VIDEO_003", "Video not found")
    VIDEO_INFO_FETCH_FAILED = ("VIDEO_004", "Failed to fetch video information")

    def __init__(self, code: str, message: str):
        self._code = code
        self._message = message

    @property
    def code(self) -> str:
        return self._code

    @property
    def message(self) -> str:
        return self._message


class VideoException(PodcastConverterException):
    def __init__(self, code: Enum, *, status_code: int = 400, detail: Optional[Any] = None):
        super().__init__(code, status_code=status_code, detail=detail)
        self.code = code
