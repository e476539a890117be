"""모델 응답 파싱 및 대체(fallback) 콘텐츠 생성 함수들"""

import json
import logging
import re
from typing import Any, Dict, Optional

from app.constants import AIConfig, PodcastConfig
from app.podcast.schema import PodcastContent
from app.video.schema import VideoMetadata

logger = logging.getLogger(__name__)

# 첫 '{' 부터 마지막 '}' 까지
JSON_OBJECT_PATTERN = re.compile(r"\{[\s\S]*\}")


def build_template_content(metadata: VideoMetadata, transcript: str) -> PodcastContent:
    """API 키가 없을 때 사용하는 고정 템플릿"""
    return PodcastContent(
        podcast_description=(
            f'This episode covers "{metadata.title}" from {metadata.author}. '
            "The content has been transformed into an engaging podcast format "
            "perfect for audio-only consumption.\n\n"
            "Note: Full AI enhancement requires API key configuration."
        ),
        key_topics=list(PodcastConfig.TEMPLATE_TOPICS),
        show_notes=(
            f"Episode: {metadata.title}\nChannel: {metadata.author}\n\n"
            "Full AI-powered show notes available with API key configuration."
        ),
        enhanced_transcript=transcript[:AIConfig.EXCERPT_LIMIT],
    )


def build_parse_failure_content(content: str, transcript: str) -> PodcastContent:
    """모델 응답을 JSON으로 해석하지 못했을 때 사용하는 템플릿"""
    return PodcastContent(
        podcast_description=content.split("\n\n")[0] or content[:AIConfig.DESCRIPTION_LIMIT],
        key_topics=list(PodcastConfig.PARSE_FAILURE_TOPICS),
        show_notes=PodcastConfig.PARSE_FAILURE_SHOW_NOTES,
        enhanced_transcript=transcript[:AIConfig.EXCERPT_LIMIT],
    )


def _reject_constant(name: str):
    raise ValueError(f"허용되지 않는 JSON 상수: {name}")


def extract_json_object(content: str) -> Optional[Dict[str, Any]]:
    match = JSON_OBJECT_PATTERN.search(content)
    if not match:
        return None
    try:
        # NaN/Infinity 거부, 짝 없는 서로게이트 등 UTF-8로 인코딩할 수 없는 값도 실패로 처리
        parsed = json.loads(match.group(0), parse_constant=_reject_constant)
        json.dumps(parsed, ensure_ascii=False).encode("utf-8")
        return parsed
    except (json.JSONDecodeError, ValueError, UnicodeEncodeError) as e:
        logger.error(f"AI 응답 JSON 파싱 실패: {e}")
        return None


def parse_podcast_content(content: str, transcript: str) -> PodcastContent:
    """모델 응답 텍스트를 PodcastContent로 변환합니다.

    1단계: 응답 안의 JSON 객체를 그대로 채택 (필드 검증 없음)
    2단계: 실패 시 일반 텍스트 기반 대체 콘텐츠
    """
    parsed = extract_json_object(content)
    if parsed is not None:
        return PodcastContent.model_validate(parsed)

    return build_parse_failure_content(content, transcript)
