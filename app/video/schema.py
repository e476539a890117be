from typing import Any, Optional

from pydantic import BaseModel, Field


class VideoReference(BaseModel):
    """입력 URL과 추출된 영상 ID"""
    raw_url: str = Field(..., description="사용자가 입력한 URL")
    video_id: Optional[str] = Field(None, description="YouTube 영상 ID (11자)")


class VideoMetadata(BaseModel):
    """oEmbed 응답 그대로의 영상 정보 (타입 변환 없음)"""
    title: Optional[Any] = Field(None, description="영상 제목")
    author: Optional[Any] = Field(None, description="채널명")
    thumbnail_url: Optional[Any] = Field(None, description="썸네일 URL")
