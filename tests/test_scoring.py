from datetime import datetime, timezone

import pytest

from quizapp.schemas import QuizQuestion
from quizapp.services.scoring import format_date, get_percentage, get_score_color, get_score_emoji, score_quiz


@pytest.mark.parametrize("score,total,pct", [(0, 5, 0), (3, 5, 60), (4, 5, 80), (5, 5, 100), (1, 3, 33), (2, 3, 67), (1, 8, 13), (0, 0, 0)])
def test_percentage(score, total, pct):
    assert get_percentage(score, total) == pct


@pytest.mark.parametrize("pct,color,emoji", [(100, "green", "🎉"), (80, "green", "🎉"), (79, "yellow", "👍"), (60, "yellow", "👍"), (59, "red", "📚"), (0, "red", "📚")])
def test_color_and_emoji_thresholds(pct, color, emoji):
    assert get_score_color(pct) == color
    assert get_score_emoji(pct) == emoji


def test_format_date():
    ts = int(datetime(2024, 3, 9, 14, 5, tzinfo=timezone.utc).timestamp() * 1000)
    assert format_date(ts, tz=timezone.utc) == "2024-03-09 14:05"


def test_score_quiz(make_questions):
    questions = [QuizQuestion.model_validate(q) for q in make_questions()]
    result = score_quiz(questions, {0: "A", 1: "A", 2: "B", 3: "A"})
    assert result.score == 3
    assert result.total == 5
    assert result.percentage == 60
    assert result.color == "yellow"


def test_score_endpoint(client, make_questions):
    resp = client.post("/api/score", json={"questions": make_questions(), "answers": {"0": "A", "4": "A"}})
    assert resp.status_code == 200
    assert resp.json() == {"score": 2, "total": 5, "percentage": 40, "color": "red", "emoji": "📚"}


def test_score_endpoint_validation_error_shape(client):
    resp = client.post("/api/score", json={"questions": []})
    assert resp.status_code == 422
    assert "questions" in resp.json()["error"]
