import asyncio
import logging
from typing import Any

from app.constants import PodcastConfig, VideoConfig
from app.convert.schema import ConversionResult
from app.podcast.generator import PodcastGenerator
from app.transcript.client import TranscriptClient
from app.video.client import VideoInfoClient
from app.video.exception import VideoErrorCode, VideoException
from app.video.extractor import extract_video_id
from app.video.schema import VideoReference


class ConvertService:
    def __init__(
        self,
        video_client: VideoInfoClient,
        transcript_client: TranscriptClient,
        generator: PodcastGenerator,
    ):
        self.logger = logging.getLogger(__name__)
        self.video_client = video_client
        self.transcript_client = transcript_client
        self.generator = generator

    @staticmethod
    def resolve(youtube_url: Any) -> VideoReference:
        if not youtube_url:
            raise VideoException(VideoErrorCode.VIDEO_URL_REQUIRED)

        video_id = extract_video_id(youtube_url) if isinstance(youtube_url, str) else None
        if not video_id:
            raise VideoException(VideoErrorCode.VIDEO_URL_INVALID)

        return VideoReference(raw_url=youtube_url, video_id=video_id)

    async def convert(self, youtube_url: Any) -> ConversionResult:
        # 1) 영상 ID 추출
        reference = self.resolve(youtube_url)
        video_id = reference.video_id
        self.logger.info(f"변환 시작: video_id={video_id}")

        # 2) 영상 정보 조회 (실패 시 500)
        metadata = await asyncio.to_thread(self.video_client.get_video_info, video_id)

        # 3) 트랜스크립트 조회 (실패해도 대체 문구)
        transcript = await asyncio.to_thread(self.transcript_client.get_transcript, video_id)

        # 4) 팟캐스트 콘텐츠 생성 (실패해도 템플릿)
        content = await asyncio.to_thread(self.generator.generate, metadata, transcript)

        self.logger.info(
            f"변환 완료: video_id={video_id}, placeholder_transcript={transcript.is_placeholder}"
        )
        return ConversionResult(
            title=metadata.title,
            channel=metadata.author,
            duration=PodcastConfig.DURATION,
            thumbnail_url=metadata.thumbnail_url,
            podcast_description=content.podcast_description,
            key_topics=content.key_topics,
            show_notes=content.show_notes,
            transcript=content.enhanced_transcript,
            audio_url=VideoConfig.WATCH_URL.format(video_id=video_id),
            video_id=video_id,
        )
