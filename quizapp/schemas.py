from typing import Dict, List, Literal, Optional
from pydantic import BaseModel, Field

ScoreColor = Literal["green", "yellow", "red"]

class QuestionOption(BaseModel):
    label: str
    text: str

class SourceCitation(BaseModel):
    title: str
    url: str

class QuizQuestion(BaseModel):
    question: str
    options: List[QuestionOption]
    correctAnswer: str
    explanation: str
    sources: List[SourceCitation]

class GenerateQuizResponse(BaseModel):
    success: bool = True
    questions: List[QuizQuestion]

class ErrorResponse(BaseModel):
    error: str

class ScoreRequest(BaseModel):
    questions: List[QuizQuestion] = Field(min_length=1)
    # question index (as sent by the browser, a string key) -> chosen label
    answers: Dict[int, str] = Field(default_factory=dict)

class ScoreResult(BaseModel):
    score: int
    total: int
    percentage: int
    color: ScoreColor
    emoji: str

class StreamRequest(BaseModel):
    prompt: str
    delay_ms: Optional[int] = Field(default=None, ge=0, le=5000)
