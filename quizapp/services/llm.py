import asyncio, json
from typing import AsyncIterator, Callable, Optional

from loguru import logger
from openai import OpenAI, APIConnectionError, APIError, AuthenticationError, RateLimitError

from ..errors import ConfigurationError, GenerationError, GenerationErrorKind, GENERIC_ERROR
from ..settings import Settings

_MOCK_QUESTIONS = [
    {
        "question": f"Mock question {i} about the requested topic?",
        "options": [
            {"label": "A", "text": "First option"},
            {"label": "B", "text": "Second option"},
            {"label": "C", "text": "Third option"},
            {"label": "D", "text": "Fourth option"},
        ],
        "correctAnswer": "ABCDA"[i - 1],
        "explanation": "This is a MOCK explanation. It is only returned in mock mode.",
        "sources": [{"title": "Wikipedia - Quiz", "url": "https://en.wikipedia.org/wiki/Quiz"}],
    }
    for i in range(1, 6)
]

def _mock_reply(prompt: str) -> str:
    p = prompt.lower()
    if "multiple choice questions" in p:
        return "Here are your questions:\n```json\n" + json.dumps(_MOCK_QUESTIONS, indent=2) + "\n```"
    if "sentiment" in p:
        return json.dumps({"sentiment": "neutral", "explanation": "MOCK sentiment."})
    if "key points" in p:
        return json.dumps(["MOCK point one", "MOCK point two"])
    return "This is a MOCK response."

CONTENT_FILTERED = "The response was blocked by the content filter"

def _upstream_message(e: APIError) -> str:
    return getattr(e, "message", None) or str(e) or GENERIC_ERROR

def _generation_error(e: APIError) -> GenerationError:
    if isinstance(e, AuthenticationError):
        kind = GenerationErrorKind.INVALID_API_KEY
    elif isinstance(e, RateLimitError):
        kind = GenerationErrorKind.RATE_LIMIT_EXCEEDED
    elif isinstance(e, APIConnectionError):
        kind = GenerationErrorKind.NETWORK_ERROR
    else:
        kind = GenerationErrorKind.UNKNOWN_ERROR
    return GenerationError(_upstream_message(e), kind)


class TextClient:
    """One-shot and streamed completions against an OpenAI-compatible API."""

    def __init__(self, api_key: Optional[str], model: str, base_url: Optional[str] = None, mock: bool = False):
        self.model = model
        self.mock = mock
        self._client = None if mock else OpenAI(api_key=api_key, base_url=base_url)

    def _generate_sync(self, prompt: str, model: Optional[str] = None, **options) -> str:
        if self.mock:
            return _mock_reply(prompt)
        resp = self._client.chat.completions.create(
            model=model or self.model,
            messages=[{"role": "user", "content": prompt}],
            **options,
        )
        if not resp.choices or resp.choices[0].finish_reason == "content_filter":
            raise GenerationError(CONTENT_FILTERED, GenerationErrorKind.CONTENT_FILTERED)
        return resp.choices[0].message.content or ""

    async def generate(self, prompt: str, model: Optional[str] = None, **options) -> str:
        """
        Single completion. `options` are passed through to the API
        (temperature, top_p, max_tokens).
        """
        try:
            return await asyncio.to_thread(self._generate_sync, prompt, model, **options)
        except APIError as e:
            err = _generation_error(e)
            logger.warning(f"[llm] generation failed kind={err.kind.value}: {e}")
            raise err from e
        except GenerationError as e:
            logger.warning(f"[llm] generation failed kind={e.kind.value}: {e.message}")
            raise

    async def stream(self, prompt: str, model: Optional[str] = None) -> AsyncIterator[str]:
        if self.mock:
            for piece in _mock_reply(prompt).split(" "):
                yield piece + " "
            return
        try:
            chunks = await asyncio.to_thread(
                lambda: self._client.chat.completions.create(
                    model=model or self.model,
                    messages=[{"role": "user", "content": prompt}],
                    stream=True,
                )
            )
            it = iter(chunks)
            while True:
                chunk = await asyncio.to_thread(next, it, None)
                if chunk is None:
                    break
                if chunk.choices and chunk.choices[0].finish_reason == "content_filter":
                    raise GenerationError(CONTENT_FILTERED, GenerationErrorKind.CONTENT_FILTERED)
                text = chunk.choices[0].delta.content if chunk.choices else None
                if text:
                    yield text
        except APIError as e:
            err = _generation_error(e)
            logger.warning(f"[llm] stream failed kind={err.kind.value}: {e}")
            raise err from e


def build_text_client(settings: Settings) -> TextClient:
    if settings.MOCK_MODE:
        return TextClient(None, settings.OPENAI_MODEL, mock=True)
    if not settings.api_key_configured:
        logger.error("[llm] OPENAI_API_KEY is not configured")
        raise ConfigurationError("Server configuration error: API key not configured")
    return TextClient(settings.OPENAI_API_KEY, settings.OPENAI_MODEL, base_url=settings.OPENAI_BASE_URL)

def get_client_factory() -> Callable[[Settings], TextClient]:
    """FastAPI dependency. The client is only built once the request passed input checks."""
    return build_text_client
