import asyncio
from typing import Callable

from fastapi import APIRouter, Depends
from fastapi.responses import StreamingResponse
from loguru import logger

from ..errors import InvalidRequestError
from ..schemas import StreamRequest
from ..services.helpers import stream_with_typing_effect
from ..services.llm import TextClient, get_client_factory
from ..settings import Settings, get_settings

router = APIRouter()

_DONE = object()

@router.post("/api/stream")
async def stream(
    body: StreamRequest,
    settings: Settings = Depends(get_settings),
    make_client: Callable[[Settings], TextClient] = Depends(get_client_factory),
):
    """Relay a streamed completion as plain text, chunk by chunk."""
    if not body.prompt.strip():
        raise InvalidRequestError("Prompt is required and must be a non-empty string")

    client = make_client(settings)
    delay_ms = body.delay_ms if body.delay_ms is not None else settings.STREAM_DELAY_MS
    queue: asyncio.Queue = asyncio.Queue()

    async def relay():
        try:
            await stream_with_typing_effect(client, body.prompt, queue.put_nowait, delay_ms=delay_ms)
        except Exception as e:
            # headers are already sent; the client just sees the stream end
            logger.warning(f"[stream] aborted: {e}")
        finally:
            queue.put_nowait(_DONE)

    async def chunks():
        task = asyncio.create_task(relay())
        sent = 0
        try:
            while True:
                item = await queue.get()
                if item is _DONE:
                    break
                yield item[sent:]
                sent = len(item)
        finally:
            await task

    return StreamingResponse(chunks(), media_type="text/plain; charset=utf-8")
