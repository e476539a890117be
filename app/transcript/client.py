import logging
from typing import Optional

import requests

from app.constants import TranscriptConfig
from app.transcript.schema import Transcript


class TranscriptClient:
    def __init__(self, api_key: Optional[str] = None, timeout: float = TranscriptConfig.REQUEST_TIMEOUT):
        self.logger = logging.getLogger(__name__)
        self.api_key = api_key
        self.timeout = timeout

    @staticmethod
    def placeholder() -> Transcript:
        return Transcript(text=TranscriptConfig.PLACEHOLDER, is_placeholder=True)

    def get_transcript(self, video_id: str) -> Transcript:
        """트랜스크립트를 조회합니다. 어떤 실패든 예외 대신 대체 문구를 반환합니다."""
        headers = {
            "X-RapidAPI-Key": self.api_key or "",
            "X-RapidAPI-Host": TranscriptConfig.RAPIDAPI_HOST,
        }
        try:
            resp = requests.get(
                TranscriptConfig.TRANSCRIPT_URL,
                params={"video_id": video_id},
                headers=headers,
                timeout=self.timeout,
            )
            if resp.ok:
                segments = resp.json().get("transcript")
                if segments:
                    text = " ".join(segment["text"] for segment in segments)
                    self.logger.info(f"트랜스크립트 조회 성공: video_id={video_id}, segments={len(segments)}")
                    return Transcript(text=text)
            else:
                self.logger.warning(f"트랜스크립트 API 응답 오류: video_id={video_id}, status={resp.status_code}")

        except Exception as e:
            self.logger.warning(f"트랜스크립트 조회 실패, 대체 문구 사용: video_id={video_id}, error={e}")
            return self.placeholder()

        self.logger.info(f"트랜스크립트가 없어 대체 문구 사용: video_id={video_id}")
        return self.placeholder()
