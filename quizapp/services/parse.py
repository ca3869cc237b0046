import json, re
from typing import Any

from ..errors import ParseErrorKind, QuizParseError
from .prompt import OPTION_COUNT, QUESTION_COUNT

# Widest span from the first "[" to the last "]". Prose around the array is
# fine; unrelated brackets in that prose break extraction.
_ARRAY_RE = re.compile(r"\[.*\]", re.DOTALL)

def _truthy(value: Any) -> bool:
    # JSON truthiness: null, false, 0 and "" are falsy; [] and {} are not.
    if value is None or value is False:
        return False
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return value != 0
    if isinstance(value, str):
        return value != ""
    return True

def _field(obj: Any, name: str) -> Any:
    return obj.get(name) if isinstance(obj, dict) else None

def _has_question_fields(q: Any) -> bool:
    options = _field(q, "options")
    sources = _field(q, "sources")
    return (
        _truthy(_field(q, "question"))
        and isinstance(options, list) and len(options) == OPTION_COUNT
        and _truthy(_field(q, "correctAnswer"))
        and _truthy(_field(q, "explanation"))
        and isinstance(sources, list) and len(sources) > 0
    )

def _reject_constant(name: str) -> Any:
    # NaN and Infinity are not JSON
    raise ValueError(f"Unexpected token {name}")

def extract_json_array(s: str) -> str:
    s = s or ""
    m = _ARRAY_RE.search(s)
    if m:
        return m.group(0)
    start = s.find("[")
    if start != -1:
        # unterminated array; the JSON parser reports it as malformed
        return s[start:]
    raise QuizParseError(
        ParseErrorKind.NO_JSON_FOUND,
        "Invalid response format from AI - no JSON array found",
    )

def parse_questions(s: str) -> list:
    """
    Pull the question array out of a model reply and check its shape.

    Returns the decoded list exactly as the model produced it. Raises
    QuizParseError, whose `kind` names the first check that failed;
    question numbers in errors count from 1.
    """
    try:
        data = json.loads(extract_json_array(s), parse_constant=_reject_constant)
    except ValueError as e:
        raise QuizParseError(ParseErrorKind.MALFORMED_JSON, f"Malformed JSON in AI response: {e}") from e

    if not isinstance(data, list):
        raise QuizParseError(ParseErrorKind.NOT_AN_ARRAY, "Response is not an array")

    if len(data) != QUESTION_COUNT:
        raise QuizParseError(
            ParseErrorKind.WRONG_QUESTION_COUNT,
            f"Expected {QUESTION_COUNT} questions, but got {len(data)}",
            count=len(data),
        )

    for n, q in enumerate(data, start=1):
        if not _has_question_fields(q):
            raise QuizParseError(
                ParseErrorKind.INVALID_QUESTION_STRUCTURE,
                f"Question {n} is missing required fields",
                question_number=n,
            )
        for opt in q["options"]:
            if not (_truthy(_field(opt, "label")) and _truthy(_field(opt, "text"))):
                raise QuizParseError(
                    ParseErrorKind.INVALID_OPTION_STRUCTURE,
                    f"Question {n} has invalid option structure",
                    question_number=n,
                )
        for src in q["sources"]:
            if not (_truthy(_field(src, "title")) and _truthy(_field(src, "url"))):
                raise QuizParseError(
                    ParseErrorKind.INVALID_SOURCE_STRUCTURE,
                    f"Question {n} has invalid source structure",
                    question_number=n,
                )

    return data
