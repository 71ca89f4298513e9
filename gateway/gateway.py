from __future__ import annotations

import logging
import time
from typing import Any, Optional

from pydantic import ValidationError as SchemaError

from config.settings import Settings, get_settings
from gateway.core.fallback import fallback_analysis, fallback_chat_response
from gateway.core.memory import InMemorySessionStore, SessionStore
from gateway.core.parsing import ExtractionFailure, parse_json_object
from gateway.core.prompt import PROBE_PROMPT, build_financial_prompt, build_psychometric_prompt
from gateway.errors import ValidationError
from gateway.models import ChatResult, PsychometricResult
from gateway.provider import ConversationProvider, GeminiConversationProvider


logger = logging.getLogger(__name__)


def new_session_id() -> str:
    return str(int(time.time() * 1000))


class AdviceGateway:
    """Financial chat and psychometric analysis on top of a text provider.

    With no provider configured every operation serves canned content.
    Provider failures are logged and degrade to the same canned content;
    only missing input raises.
    """

    def __init__(
        self,
        provider: Optional[ConversationProvider] = None,
        sessions: Optional[SessionStore] = None,
    ) -> None:
        self.provider = provider
        self.sessions = sessions if sessions is not None else InMemorySessionStore()

    @property
    def has_provider(self) -> bool:
        return self.provider is not None

    def send_chat(self, message: Optional[str], session_id: Optional[str] = None) -> ChatResult:
        if not message:
            raise ValidationError("Message is required")

        handle = self.sessions.get(session_id) if session_id else None
        text, handle = self._converse(message, handle)

        derived_id = session_id or new_session_id()
        if handle is None:
            self.sessions.delete(derived_id)
        else:
            self.sessions.set(derived_id, handle)
        return ChatResult(text=text, session_id=derived_id, handle=handle)

    def _converse(self, message: str, handle: Any):
        if self.provider is None:
            logger.info("Using mock response due to missing API key")
            return fallback_chat_response(message), None

        prompt = build_financial_prompt(message)
        try:
            if handle is None:
                handle = self.provider.start()
            return self.provider.send(handle, prompt)
        except Exception as exc:
            logger.warning("Chat provider call failed, using mock response: %s", exc)
            return fallback_chat_response(message), None

    def analyze(self, responses: Any) -> PsychometricResult:
        if not responses or not isinstance(responses, list):
            raise ValidationError("Valid responses are required")

        if self.provider is None:
            logger.info("Using fallback psychometric analysis due to missing API key")
            return fallback_analysis()

        try:
            raw = self.provider.generate(build_psychometric_prompt(responses))
        except Exception as exc:
            logger.warning("Psychometric analysis failed, using fallback: %s", exc)
            return fallback_analysis()

        parsed = parse_json_object(raw)
        if isinstance(parsed, ExtractionFailure):
            logger.error("Could not parse analysis as JSON: %s", parsed.reason)
            return fallback_analysis()
        if parsed.extracted:
            logger.info("Analysis JSON extracted from surrounding text")

        try:
            return PsychometricResult.model_validate(parsed.data)
        except SchemaError as exc:
            logger.error("Analysis JSON does not match the expected schema: %s", exc)
            return fallback_analysis()

    def test_provider(self) -> bool:
        if self.provider is None:
            logger.info("Cannot test provider: missing API key")
            return False
        try:
            text = self.provider.generate(PROBE_PROMPT)
        except Exception as exc:
            logger.error("Provider test failed: %s", exc)
            return False
        logger.info("Provider test response: %s", text)
        return "API is working" in text or len(text) > 10


def build_gateway(settings: Optional[Settings] = None) -> AdviceGateway:
    settings = settings or get_settings()
    if not settings.gemini_api_key:
        logger.error("GEMINI_API_KEY not found in environment variables")
        return AdviceGateway()

    logger.info("GEMINI_API_KEY found (length=%s)", len(settings.gemini_api_key))
    try:
        provider = GeminiConversationProvider.from_settings(settings)
    except Exception as exc:
        logger.error("Error initializing Gemini client: %s", exc)
        return AdviceGateway()
    return AdviceGateway(provider=provider)
