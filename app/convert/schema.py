from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field


class ConvertRequest(BaseModel):
    """POST /api/convert 요청"""
    model_config = ConfigDict(populate_by_name=True)

    youtube_url: Optional[Any] = Field(None, alias="youtubeUrl", description="YouTube URL 또는 영상 ID")


class ConversionResult(BaseModel):
    """POST /api/convert 응답 (영상 정보 + 팟캐스트 콘텐츠)"""
    model_config = ConfigDict(populate_by_name=True)

    title: Optional[Any] = Field(None, description="영상 제목")
    channel: Optional[Any] = Field(None, description="채널명")
    duration: str = Field(..., description="재생 시간 (항상 'Variable')")
    thumbnail_url: Optional[Any] = Field(None, alias="thumbnailUrl", description="썸네일 URL")
    podcast_description: Optional[Any] = Field(None, alias="podcastDescription")
    key_topics: Optional[Any] = Field(None, alias="keyTopics")
    show_notes: Optional[Any] = Field(None, alias="showNotes")
    transcript: Optional[Any] = Field(None, description="다듬어진 트랜스크립트")
    audio_url: str = Field(..., alias="audioUrl", description="원본 영상 URL")
    video_id: str = Field(..., alias="videoId", description="YouTube 영상 ID")
