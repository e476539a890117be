import json
from unittest.mock import MagicMock, patch

import pytest

from app.podcast.generator import PodcastGenerator
from app.transcript.schema import Transcript
from app.video.schema import VideoMetadata


@pytest.fixture
def metadata():
    return VideoMetadata(title="Deep Dive Into Tides", author="Ocean Channel", thumbnail_url=None)


@pytest.fixture
def transcript():
    return Transcript(text="a" * 9000)


def _mock_client(content):
    mock_client = MagicMock()
    mock_client.chat.completions.create.return_value.choices = [
        MagicMock(message=MagicMock(content=content))
    ]
    return mock_client


@patch("app.podcast.generator.OpenAI")
def test_without_api_key_uses_template(mock_openai, metadata, transcript):
    """API 키가 없으면 클라이언트를 만들지 않고 템플릿을 반환해야 한다."""
    generator = PodcastGenerator(api_key=None)

    content = generator.generate(metadata, transcript)

    assert generator.is_configured is False
    mock_openai.assert_not_called()
    assert content.key_topics == ["Video Content", "Key Discussion Points", "Main Insights"]
    assert content.enhanced_transcript == "a" * 1000


@patch("app.podcast.generator.OpenAI")
def test_client_created_once(mock_openai, metadata, transcript):
    """OpenAI 클라이언트는 처음 사용할 때 한 번만 생성되어야 한다."""
    mock_openai.return_value = _mock_client('{"podcastDescription": "desc"}')
    generator = PodcastGenerator(api_key="sk-test")

    mock_openai.assert_not_called()
    generator.generate(metadata, transcript)
    generator.generate(metadata, transcript)

    mock_openai.assert_called_once_with(api_key="sk-test")


def test_completion_request(metadata, transcript):
    """모델명, 온도, 최대 토큰, 잘린 트랜스크립트가 요청에 담겨야 한다."""
    mock_client = _mock_client("{}")
    generator = PodcastGenerator(api_key="sk-test", model="gpt-test", client=mock_client)

    generator.generate(metadata, transcript)

    _, kwargs = mock_client.chat.completions.create.call_args
    assert kwargs["model"] == "gpt-test"
    assert kwargs["temperature"] == 0.7
    assert kwargs["max_tokens"] == 2000

    system_message, user_message = kwargs["messages"]
    assert system_message["role"] == "system"
    assert "podcast producer" in system_message["content"]
    assert user_message["role"] == "user"
    assert "Title: Deep Dive Into Tides" in user_message["content"]
    assert "Channel: Ocean Channel" in user_message["content"]
    assert "a" * 8000 in user_message["content"]
    assert "a" * 8001 not in user_message["content"]
    assert "podcastDescription, keyTopics (array), showNotes, enhancedTranscript" in user_message["content"]


def test_model_json_adopted(metadata, transcript):
    payload = {
        "podcastDescription": "An episode about tides.",
        "keyTopics": ["Moon", "Gravity"],
        "showNotes": "00:00 Intro",
        "enhancedTranscript": "Welcome.",
    }
    generator = PodcastGenerator(api_key="sk-test", client=_mock_client(json.dumps(payload)))

    content = generator.generate(metadata, transcript)

    assert content.model_dump(by_alias=True) == payload


def test_model_plain_text_falls_back(metadata, transcript):
    generator = PodcastGenerator(
        api_key="sk-test",
        client=_mock_client("Tides are fascinating.\n\nMore text."),
    )

    content = generator.generate(metadata, transcript)

    assert content.podcast_description == "Tides are fascinating."
    assert content.key_topics == ["Main Topic", "Discussion Points", "Key Insights"]
    assert content.show_notes == "See full episode description above."
    assert content.enhanced_transcript == "a" * 1000


def test_empty_model_response_is_empty_object(metadata, transcript):
    """빈 응답은 '{}'로 해석되어 모든 필드가 비어 있어야 한다."""
    generator = PodcastGenerator(api_key="sk-test", client=_mock_client(None))

    content = generator.generate(metadata, transcript)

    assert content.podcast_description is None
    assert content.key_topics is None


def test_openai_exception_handling(metadata, transcript):
    """OpenAI 호출 중 예외가 발생해도 템플릿 콘텐츠를 반환해야 한다."""
    mock_client = MagicMock()
    mock_client.chat.completions.create.side_effect = Exception("API 오류")
    generator = PodcastGenerator(api_key="sk-test", client=mock_client)

    content = generator.generate(metadata, transcript)

    assert content.key_topics == ["Video Content", "Key Discussion Points", "Main Insights"]
    assert content.enhanced_transcript == "a" * 1000
