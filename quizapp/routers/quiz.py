from typing import Any, Callable, Dict

from fastapi import APIRouter, Depends, Request
from loguru import logger

from ..errors import InvalidRequestError, InvalidTopicError
from ..schemas import ErrorResponse, GenerateQuizResponse, ScoreRequest, ScoreResult
from ..services.llm import TextClient, get_client_factory
from ..services.parse import parse_questions
from ..services.prompt import build_prompt
from ..services.scoring import score_quiz
from ..settings import Settings, get_settings

router = APIRouter()

TOPIC_REQUIRED = "Topic is required and must be a non-empty string"

async def _json_object(request: Request) -> Dict[str, Any]:
    try:
        body = await request.json()
    except ValueError:
        raise InvalidRequestError("Request body must be valid JSON")
    if not isinstance(body, dict):
        raise InvalidRequestError("Request body must be a JSON object")
    return body

@router.post(
    "/api/generate-question",
    responses={200: {"model": GenerateQuizResponse}, 400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
async def generate_question(
    request: Request,
    settings: Settings = Depends(get_settings),
    make_client: Callable[[Settings], TextClient] = Depends(get_client_factory),
):
    """
    Generate 5 multiple-choice questions for `{"topic": ...}`.
    The API key stays on the server; the browser only ever sees the questions.
    """
    body = await _json_object(request)
    topic = body.get("topic")
    if not isinstance(topic, str) or not topic.strip():
        raise InvalidTopicError(TOPIC_REQUIRED)
    topic = topic.strip()

    client = make_client(settings)
    logger.info(f"[generate] topic={topic!r} model={client.model}")

    raw = await client.generate(build_prompt(topic))
    questions = parse_questions(raw)

    logger.info(f"[generate] ok topic={topic!r} questions={len(questions)}")
    # returned untouched: no response_model so nothing gets normalized
    return {"success": True, "questions": questions}

@router.post("/api/score", response_model=ScoreResult)
def score(body: ScoreRequest):
    return score_quiz(body.questions, body.answers)
