from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, List, Optional, Tuple

from langchain_core.messages import AIMessage, BaseMessage, HumanMessage
from langchain_google_genai import ChatGoogleGenerativeAI

from config.settings import Settings
from gateway.errors import ProviderError


logger = logging.getLogger(__name__)


class ConversationProvider:
    """Boundary to an external text-generation service.

    Handles returned by ``start``/``send`` are opaque to callers: the
    gateway stores them per session and hands them back unchanged.
    """

    name = "provider"

    def start(self) -> Any:
        raise NotImplementedError

    def send(self, handle: Any, text: str) -> Tuple[str, Any]:
        raise NotImplementedError

    def generate(self, prompt: str) -> str:
        raise NotImplementedError


@dataclass
class GeminiConversation:
    history: List[BaseMessage] = field(default_factory=list)


def _message_text(message: BaseMessage) -> str:
    content = message.content
    if isinstance(content, str):
        return content
    parts = []
    for part in content or []:
        if isinstance(part, str):
            parts.append(part)
        elif isinstance(part, dict) and part.get("type") == "text":
            parts.append(part.get("text") or "")
    return "".join(parts)


class GeminiConversationProvider(ConversationProvider):
    name = "gemini"

    def __init__(
        self,
        api_key: str,
        model: str = "gemini-2.0-flash",
        temperature: float = 0.7,
        top_p: float = 0.95,
        top_k: int = 40,
        max_output_tokens: int = 4096,
        max_retries: int = 0,
        llm: Optional[Any] = None,
    ) -> None:
        self.model = model
        self._llm = llm or ChatGoogleGenerativeAI(
            model=model,
            google_api_key=api_key,
            temperature=temperature,
            top_p=top_p,
            top_k=top_k,
            max_output_tokens=max_output_tokens,
            max_retries=max_retries,
        )

    @classmethod
    def from_settings(cls, settings: Settings) -> "GeminiConversationProvider":
        if not settings.gemini_api_key:
            raise RuntimeError("GEMINI_API_KEY not set. Please configure it in environment or .env")
        return cls(
            api_key=settings.gemini_api_key,
            model=settings.gemini_model,
            temperature=settings.temperature,
            top_p=settings.top_p,
            top_k=settings.top_k,
            max_output_tokens=settings.max_output_tokens,
            max_retries=settings.max_retries,
        )

    def start(self) -> GeminiConversation:
        return GeminiConversation()

    def send(self, handle: GeminiConversation, text: str) -> Tuple[str, GeminiConversation]:
        message = HumanMessage(content=text)
        reply = self._invoke(handle.history + [message])
        # History only grows once the model has answered.
        handle.history.extend([message, AIMessage(content=reply)])
        return reply, handle

    def generate(self, prompt: str) -> str:
        return self._invoke([HumanMessage(content=prompt)])

    def _invoke(self, messages: List[BaseMessage]) -> str:
        logger.info("Sending %s message(s) to %s", len(messages), self.model)
        try:
            result = self._llm.invoke(messages)
        except Exception as exc:
            raise ProviderError(str(exc), provider=self.name) from exc
        text = _message_text(result)
        logger.info("Received %s chars from %s", len(text), self.model)
        return text
