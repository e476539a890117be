"""
애플리케이션 전역 상수 정의
"""


class VideoConfig:
    """YouTube 영상 정보 조회 관련 설정"""
    OEMBED_URL = "https://www.youtube.com/oembed"
    WATCH_URL = "https://www.youtube.com/watch?v={video_id}"
    REQUEST_TIMEOUT = 20.0


class TranscriptConfig:
    """자막(트랜스크립트) 조회 관련 설정"""
    RAPIDAPI_HOST = "youtube-transcriptor.p.rapidapi.com"
    TRANSCRIPT_URL = f"https://{RAPIDAPI_HOST}/transcript"
    REQUEST_TIMEOUT = 20.0

    PLACEHOLDER = (
        "This is a simulated transcript for the YouTube video. "
        "In a production environment, this would contain the actual video transcript "
        "extracted from YouTube's captions or using a speech-to-text service. "
        "The video discusses various interesting topics and provides valuable insights to the audience."
    )


class AIConfig:
    """AI 모델 관련 설정"""
    DEFAULT_MODEL = "gpt-4-turbo-preview"
    MAX_TOKENS = 2000
    TEMPERATURE = 0.7

    PROMPT_TRANSCRIPT_LIMIT = 8000
    EXCERPT_LIMIT = 1000
    DESCRIPTION_LIMIT = 500


class PodcastConfig:
    """팟캐스트 결과 구성 관련 설정"""
    DURATION = "Variable"

    TEMPLATE_TOPICS = ["Video Content", "Key Discussion Points", "Main Insights"]
    PARSE_FAILURE_TOPICS = ["Main Topic", "Discussion Points", "Key Insights"]
    PARSE_FAILURE_SHOW_NOTES = "See full episode description above."
