import logging

import requests

from app.constants import VideoConfig
from app.video.exception import VideoErrorCode, VideoException
from app.video.schema import VideoMetadata


class VideoInfoClient:
    def __init__(self, timeout: float = VideoConfig.REQUEST_TIMEOUT):
        self.logger = logging.getLogger(__name__)
        self.timeout = timeout

    def get_video_info(self, video_id: str) -> VideoMetadata:
        params = {
            "url": VideoConfig.WATCH_URL.format(video_id=video_id),
            "format": "json",
        }
        try:
            resp = requests.get(VideoConfig.OEMBED_URL, params=params, timeout=self.timeout)
            if not resp.ok:
                raise VideoException(VideoErrorCode.VIDEO_NOT_FOUND, status_code=404)

            data = resp.json()
            return VideoMetadata(
                title=data.get("title"),
                author=data.get("author_name"),
                thumbnail_url=data.get("thumbnail_url"),
            )

        except VideoException as e:
            self.logger.error(f"영상을 찾을 수 없습니다. video_id={video_id}, status={resp.status_code}")
            raise VideoException(
                VideoErrorCode.VIDEO_INFO_FETCH_FAILED, status_code=500, detail=e.error_message
            ) from e
        except Exception as e:
            self.logger.exception(f"영상 정보 조회 중 오류 발생: video_id={video_id}, error={e}")
            raise VideoException(
                VideoErrorCode.VIDEO_INFO_FETCH_FAILED, status_code=500, detail=str(e)
            ) from e
