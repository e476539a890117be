import logging
from pathlib import Path
from typing import Any, Dict, List, Optional

import jinja2
from openai import OpenAI

from app.constants import AIConfig
from app.podcast.parser import build_template_content, parse_podcast_content
from app.podcast.schema import PodcastContent
from app.transcript.schema import Transcript
from app.video.schema import VideoMetadata

PROMPT_DIR = Path(__file__).resolve().parent / "prompt"


class PodcastGenerator:
    """영상 정보와 트랜스크립트로 팟캐스트 콘텐츠를 생성합니다.

    OpenAI 클라이언트는 처음 사용할 때 한 번만 생성되며, API 키가 없으면
    생성하지 않고 항상 템플릿 결과를 반환합니다.
    """

    def __init__(
        self,
        *,
        api_key: Optional[str] = None,
        model: str = AIConfig.DEFAULT_MODEL,
        prompt_dir: Path = PROMPT_DIR,
        max_tokens: int = AIConfig.MAX_TOKENS,
        temperature: float = AIConfig.TEMPERATURE,
        client: Optional[OpenAI] = None,
    ):
        self.logger = logging.getLogger(__name__)
        self.api_key = api_key
        self.model = model or AIConfig.DEFAULT_MODEL
        self.max_tokens = max_tokens
        self.temperature = temperature
        self._client = client

        # ----- 프롬프트 로드 -----
        self.system_prompt = (prompt_dir / "system" / "podcast.md").read_text(encoding="utf-8").strip()
        self.template_env = jinja2.Environment(
            loader=jinja2.FileSystemLoader(str(prompt_dir)),
            autoescape=False,
        )
        self.user_template = self.template_env.get_template("user/podcast.jinja2")

    @property
    def is_configured(self) -> bool:
        return self._client is not None or bool(self.api_key)

    def _get_client(self) -> Optional[OpenAI]:
        if self._client is None and self.api_key:
            self.logger.info("OpenAI 클라이언트 초기화")
            self._client = OpenAI(api_key=self.api_key)
        return self._client

    def _create_user_prompt(self, metadata: VideoMetadata, transcript: str) -> str:
        return self.user_template.render(
            title=metadata.title,
            channel=metadata.author,
            transcript=transcript[:AIConfig.PROMPT_TRANSCRIPT_LIMIT],
        )

    def _create_chat_completion(self, messages: List[Dict[str, Any]]) -> str:
        """OpenAI Chat Completion API 호출. 응답이 비어 있으면 '{}'"""
        response = self._get_client().chat.completions.create(
            model=self.model,
            messages=messages,
            max_tokens=self.max_tokens,
            temperature=self.temperature,
        )
        return response.choices[0].message.content or "{}"

    def generate(self, metadata: VideoMetadata, transcript: Transcript) -> PodcastContent:
        if not self.is_configured:
            self.logger.info("OPENAI_API_KEY가 설정되지 않아 템플릿 콘텐츠를 사용합니다.")
            return build_template_content(metadata, transcript.text)

        messages = [
            {"role": "system", "content": self.system_prompt},
            {"role": "user", "content": self._create_user_prompt(metadata, transcript.text)},
        ]
        try:
            content = self._create_chat_completion(messages)
        except Exception as e:
            self.logger.exception(f"OpenAI API 호출 중 오류 발생: {e}")
            return build_template_content(metadata, transcript.text)

        return parse_podcast_content(content, transcript.text)
