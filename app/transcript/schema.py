from pydantic import BaseModel, Field


class Transcript(BaseModel):
    """세그먼트를 공백으로 이어붙인 단일 텍스트 (타이밍 정보 없음)"""
    text: str = Field(..., description="트랜스크립트 본문")
    is_placeholder: bool = Field(False, description="대체 문구 여부")
