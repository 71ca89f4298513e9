from __future__ import annotations

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field


class ChatRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    message: Optional[str] = Field(None, description="User's financial question")
    session_id: Optional[str] = Field(
        None,
        alias="sessionId",
        description="Session id returned by a previous chat call",
    )


class ChatResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    response: str
    session_id: str = Field(..., alias="sessionId")


class AnalyzeRequest(BaseModel):
    # Left untyped so that a non-list value reaches the gateway's own check.
    responses: Optional[Any] = Field(None, description="Answers to the psychometric questions")


class AnalyzeResponse(BaseModel):
    analysis: Dict[str, Any]


class QuestionsResponse(BaseModel):
    questions: List[Dict[str, Any]]


class ProviderTestResponse(BaseModel):
    success: bool
    message: str
