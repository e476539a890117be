import pytest

from app.video.extractor import extract_video_id


@pytest.mark.parametrize("url", [
    "https://www.youtube.com/watch?v=dQw4w9WgXcQ",
    "https://youtube.com/watch?v=dQw4w9WgXcQ&t=42s",
    "https://m.youtube.com/watch?v=dQw4w9WgXcQ#comments",
    "https://youtu.be/dQw4w9WgXcQ",
    "https://youtu.be/dQw4w9WgXcQ?si=share",
    "https://www.youtube.com/embed/dQw4w9WgXcQ",
    "dQw4w9WgXcQ",
])
def test_extract_video_id_valid_cases(url):
    """인식 가능한 URL 형태면 영상 ID가 그대로 반환되어야 한다."""
    assert extract_video_id(url) == "dQw4w9WgXcQ"


def test_extract_video_id_accepts_bare_id_with_symbols():
    assert extract_video_id("a_b-C1d2E3f") == "a_b-C1d2E3f"


@pytest.mark.parametrize("url", [
    "",
    "not a url",
    "https://example.com/watch",
    "https://www.youtube.com/watch?v=",
    "https://www.youtube.com/shorts/dQw4w9WgXcQ",
    "dQw4w9WgXc",
    "dQw4w9WgXcQQ",
    "dQw4w9WgXcQ\n",
    "dQw4w9WgX!Q",
])
def test_extract_video_id_invalid_cases(url):
    """인식할 수 없는 문자열이면 None이 반환되어야 한다."""
    assert extract_video_id(url) is None


def test_extract_video_id_prefers_url_pattern():
    """URL 패턴이 단독 ID 패턴보다 우선하며, ID 형태는 검증하지 않는다."""
    # Given
    url = "https://youtu.be/short"

    # When
    video_id = extract_video_id(url)

    # Then
    assert video_id == "short"
