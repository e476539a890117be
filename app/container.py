from dotenv import load_dotenv

load_dotenv()

from pathlib import Path

from dependency_injector import containers, providers

from app.constants import AIConfig, TranscriptConfig, VideoConfig
from app.convert.service import ConvertService
from app.podcast.generator import PodcastGenerator
from app.transcript.client import TranscriptClient
from app.video.client import VideoInfoClient


class Container(containers.DeclarativeContainer):
    """의존성 주입 컨테이너"""

    # Configuration
    wiring_config = containers.WiringConfiguration(
        modules=[
            "app.convert.router",
        ]
    )
    config = providers.Configuration()
    config.openai.api_key.from_env("OPENAI_API_KEY")
    config.openai.model.from_env("OPENAI_MODEL", default=AIConfig.DEFAULT_MODEL)
    config.rapidapi.api_key.from_env("RAPIDAPI_KEY")

    # Video
    video_client = providers.Singleton(
        VideoInfoClient,
        timeout=VideoConfig.REQUEST_TIMEOUT,
    )

    # Transcript
    transcript_client = providers.Singleton(
        TranscriptClient,
        api_key=config.rapidapi.api_key,
        timeout=TranscriptConfig.REQUEST_TIMEOUT,
    )

    # Podcast
    podcast_generator = providers.Singleton(
        PodcastGenerator,
        api_key=config.openai.api_key,
        model=config.openai.model,
        prompt_dir=Path(__file__).resolve().parent / "podcast" / "prompt",
        max_tokens=AIConfig.MAX_TOKENS,
        temperature=AIConfig.TEMPERATURE,
    )

    # Convert
    convert_service = providers.Factory(
        ConvertService,
        video_client=video_client,
        transcript_client=transcript_client,
        generator=podcast_generator,
    )


# 전역 컨테이너 인스턴스
container = Container()
