from datetime import datetime
from typing import Dict, List, Optional

from ..schemas import QuizQuestion, ScoreColor, ScoreResult

def get_percentage(score: int, total: int) -> int:
    if total <= 0:
        return 0
    # round half up, like the browser does
    return int(score * 100 / total + 0.5)

def get_score_color(percentage: int) -> ScoreColor:
    if percentage >= 80: return "green"
    if percentage >= 60: return "yellow"
    return "red"

def get_score_emoji(percentage: int) -> str:
    if percentage >= 80: return "🎉"
    if percentage >= 60: return "👍"
    return "📚"

def format_date(timestamp_ms: int, tz=None) -> str:
    """Epoch milliseconds -> 'YYYY-MM-DD HH:MM' in local time (or `tz`)."""
    return datetime.fromtimestamp(timestamp_ms / 1000, tz=tz).strftime("%Y-%m-%d %H:%M")

def score_quiz(questions: List[QuizQuestion], answers: Dict[int, str]) -> ScoreResult:
    score = 0
    for i, q in enumerate(questions):
        chosen: Optional[str] = answers.get(i)
        if chosen is not None and chosen == q.correctAnswer:
            score += 1
    pct = get_percentage(score, len(questions))
    return ScoreResult(
        score=score,
        total=len(questions),
        percentage=pct,
        color=get_score_color(pct),
        emoji=get_score_emoji(pct),
    )
