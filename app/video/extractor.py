import re
from typing import Optional

# 순서 중요: URL 형태를 먼저 확인하고, 11자 단독 ID는 마지막에 확인
VIDEO_ID_PATTERNS = [
    re.compile(r"(?:youtube\.com/watch\?v=|youtu\.be/|youtube\.com/embed/)([^&\n?#]+)"),
    re.compile(r"\A([a-zA-Z0-9_-]{11})\Z"),
]


def extract_video_id(url: str) -> Optional[str]:
    """YouTube URL(또는 단독 영상 ID)에서 영상 ID를 추출합니다. 매칭되지 않으면 None."""
    for pattern in VIDEO_ID_PATTERNS:
        match = pattern.search(url)
        if match:
            return match.group(1)
    return None
