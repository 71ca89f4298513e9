import pytest
from langchain_core.messages import AIMessage, HumanMessage

from config.settings import Settings
from gateway.errors import ProviderError
from gateway.gateway import AdviceGateway, build_gateway
from gateway.provider import GeminiConversation, GeminiConversationProvider


class FakeChatModel:
    def __init__(self, replies=None, error=None):
        self.replies = list(replies or [])
        self.error = error
        self.calls = []

    def invoke(self, messages):
        self.calls.append(list(messages))
        if self.error is not None:
            raise self.error
        return AIMessage(content=self.replies.pop(0))


def make_provider(llm):
    return GeminiConversationProvider(api_key="test-key", llm=llm)


def test_send_grows_history_and_returns_same_handle():
    llm = FakeChatModel(replies=["First answer", "Second answer"])
    provider = make_provider(llm)
    handle = provider.start()

    text, returned = provider.send(handle, "first question")
    assert text == "First answer"
    assert returned is handle

    text, _ = provider.send(handle, "second question")
    assert text == "Second answer"
    assert len(llm.calls[1]) == 3
    assert isinstance(llm.calls[1][0], HumanMessage)
    assert [m.content for m in handle.history] == [
        "first question",
        "First answer",
        "second question",
        "Second answer",
    ]


def test_failed_send_leaves_history_untouched():
    provider = make_provider(FakeChatModel(error=ConnectionError("offline")))
    handle = GeminiConversation()
    with pytest.raises(ProviderError) as excinfo:
        provider.send(handle, "hello")
    assert handle.history == []
    assert isinstance(excinfo.value.__cause__, ConnectionError)
    assert excinfo.value.provider == "gemini"


def test_generate_is_one_shot():
    llm = FakeChatModel(replies=["API is working"])
    provider = make_provider(llm)
    assert provider.generate("ping") == "API is working"
    assert len(llm.calls[0]) == 1


def test_list_content_is_flattened():
    class ListContentModel(FakeChatModel):
        def invoke(self, messages):
            return AIMessage(content=[{"type": "text", "text": "Save "}, "daily"])

    assert make_provider(ListContentModel()).generate("tip?") == "Save daily"


def test_gateway_over_gemini_provider_continues_session():
    llm = FakeChatModel(replies=["Use UPI", "Open an RD at the post office"])
    gateway = AdviceGateway(provider=make_provider(llm))
    first = gateway.send_chat("How do I pay my bills?")
    second = gateway.send_chat("How do I save?", first.session_id)
    assert second.text == "Open an RD at the post office"
    assert len(second.handle.history) == 4


def test_build_gateway_without_key(monkeypatch):
    monkeypatch.delenv("GEMINI_API_KEY", raising=False)
    gateway = build_gateway(Settings())
    assert gateway.has_provider is False


def test_build_gateway_with_key(monkeypatch):
    monkeypatch.setenv("GEMINI_API_KEY", "AIza-test-key")
    gateway = build_gateway(Settings())
    assert isinstance(gateway.provider, GeminiConversationProvider)
    assert gateway.provider.model == "gemini-2.0-flash"


def test_provider_makes_a_single_attempt(monkeypatch):
    monkeypatch.setenv("GEMINI_API_KEY", "AIza-test-key")
    monkeypatch.delenv("MODEL_MAX_RETRIES", raising=False)
    gateway = build_gateway(Settings())
    assert gateway.provider._llm.max_retries == 0

    provider = GeminiConversationProvider.from_settings(Settings())
    assert provider._llm.max_retries == 0
