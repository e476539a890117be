from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field


class PodcastContent(BaseModel):
    """팟캐스트 형태로 재구성된 콘텐츠.

    모델이 반환한 JSON 객체를 검증 없이 그대로 담기 위해 모든 필드는 선택이며
    타입을 강제하지 않고, 알 수 없는 키도 보존합니다.
    """
    model_config = ConfigDict(extra="allow", populate_by_name=True)

    podcast_description: Optional[Any] = Field(None, alias="podcastDescription", description="에피소드 설명")
    key_topics: Optional[Any] = Field(None, alias="keyTopics", description="핵심 주제 목록")
    show_notes: Optional[Any] = Field(None, alias="showNotes", description="쇼 노트")
    enhanced_transcript: Optional[Any] = Field(None, alias="enhancedTranscript", description="다듬어진 트랜스크립트")
