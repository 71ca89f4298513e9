"""
Data models shared by the gateway and the HTTP layer.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator


@dataclass
class ChatResult:
    text: str
    session_id: str
    handle: Optional[Any] = None

    @property
    def continued(self) -> bool:
        return self.handle is not None


class PsychometricResult(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    score: Union[int, float]
    strengths: List[str]
    areas_for_development: List[str] = Field(..., alias="areasForDevelopment")
    advice: str
    resources: List[str]

    @field_validator("score")
    @classmethod
    def _score_in_range(cls, value):
        if not 1 <= value <= 10:
            raise ValueError("score must be between 1 and 10")
        return value

    def to_payload(self) -> dict:
        return self.model_dump(by_alias=True)


class QuestionOption(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: str
    image_url: str = Field(..., alias="imageUrl")
    label: str


class Question(BaseModel):
    id: int
    type: str = Field(..., description="'visual-choice' or 'scenario'")
    question: str
    options: List[QuestionOption]
