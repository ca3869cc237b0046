"""
Best-effort helpers built on a single completion each.

Unlike quiz generation, these never fail on an unparseable reply: they fall
back to a permissive default instead.
"""
import asyncio, json
from typing import Awaitable, Callable, Dict, List, Literal, Optional, Union

from .llm import TextClient

CreativeKind = Literal["story", "poem", "essay", "article"]
UpdateCallback = Callable[[str], Union[None, Awaitable[None]]]


async def analyze_sentiment(client: TextClient, text: str) -> Dict[str, str]:
    prompt = (
        'Analyze the sentiment of the following text and respond with ONLY a JSON object containing '
        f'"sentiment" (positive, negative, or neutral) and "explanation" fields. Text: "{text}"'
    )
    response = await client.generate(prompt)
    try:
        return json.loads(response)
    except json.JSONDecodeError:
        return {"sentiment": "unknown", "explanation": response}


async def summarize_text(client: TextClient, text: str, max_length: int = 100) -> str:
    return await client.generate(f"Summarize the following text in no more than {max_length} words: {text}")


async def translate_text(client: TextClient, text: str, target_language: str) -> str:
    return await client.generate(f"Translate the following text to {target_language}: {text}")


async def generate_creative_content(client: TextClient, topic: str, kind: CreativeKind = "story") -> str:
    return await client.generate(f"Write a creative {kind} about: {topic}")


async def answer_question(client: TextClient, context: str, question: str) -> str:
    prompt = f"""Based on the following context, answer the question.

Context: {context}

Question: {question}

Answer:"""
    return await client.generate(prompt)


async def extract_key_points(client: TextClient, text: str, number_of_points: int = 5) -> List[str]:
    prompt = (
        f"Extract {number_of_points} key points from the following text. "
        f"Return them as a JSON array of strings: {text}"
    )
    response = await client.generate(prompt)
    try:
        return json.loads(response)
    except json.JSONDecodeError:
        return [line for line in response.split("\n") if line.strip()]


async def chat_with_history(client: TextClient, messages: List[Dict[str, str]], new_message: str) -> str:
    history = "\n".join(
        f"{'User' if m.get('role') == 'user' else 'Assistant'}: {m.get('content', '')}" for m in messages
    )
    prompt = f"""Continue this conversation naturally:

{history}
User: {new_message}
Assistant:"""
    return await client.generate(prompt)


async def improve_text(client: TextClient, text: str, instruction: Optional[str] = None) -> str:
    how = f" by {instruction}" if instruction else ""
    prompt = f"""Improve the following text{how}:

{text}

Improved version:"""
    return await client.generate(prompt)


async def generate_quiz_questions(client: TextClient, content: str, number_of_questions: int = 5) -> list:
    # Loose variant for arbitrary content; /api/generate-question is the strict one.
    prompt = (
        f"Generate {number_of_questions} quiz questions from the following content. "
        'Return as a JSON array with objects containing "question", "answer", and optionally '
        f'"options" (array of 4 choices for multiple choice). Content: {content}'
    )
    response = await client.generate(prompt)
    try:
        return json.loads(response)
    except json.JSONDecodeError:
        return []


async def stream_with_typing_effect(
    client: TextClient,
    prompt: str,
    on_update: UpdateCallback,
    delay_ms: int = 50,
    model: Optional[str] = None,
) -> str:
    """
    Relay streamed chunks to `on_update`, always passing the text accumulated
    so far, then pause `delay_ms` before the next chunk. Returns the full text.
    """
    accumulated = ""
    async for chunk in client.stream(prompt, model=model):
        accumulated += chunk
        result = on_update(accumulated)
        if asyncio.iscoroutine(result):
            await result
        await asyncio.sleep(delay_ms / 1000)
    return accumulated
