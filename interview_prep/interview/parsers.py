"""
Parsing of untrusted model output.

Parsers never raise: they return a ``ParseSuccess`` carrying the structured
value or a ``ParseFailure`` carrying the reason, and the caller picks the
fallback content for the failure branch.
"""
import json
from dataclasses import dataclass
from typing import Any, List, Union

from pydantic import BaseModel, Field, ValidationError, field_validator

from ..domain import Citation
from ..errors import UpstreamParseError
from ..utils.text_utils import strip_code_fences

FALLBACK_QUESTIONS = [
    "Tell me about your most relevant experience for this role and how it aligns with the job requirements.",
    "What specific technical skills from the job description do you possess, and can you provide examples of how you've used them?",
    "Describe a challenging project you've worked on that relates to this position. What was your role and the outcome?",
    "How do you stay updated with the latest technologies and trends relevant to this field?",
    "Can you walk me through your approach to problem-solving when faced with a technical challenge?",
    "Tell me about a time you worked in a team. What was your contribution and how did you handle any conflicts?",
    "Describe a situation where you had to learn a new technology or skill quickly. How did you approach it?",
    "What interests you most about this role, and how does it fit into your career goals?",
    "Can you share an example of how you handled a tight deadline or competing priorities?",
    "Where do you see yourself growing in this role, and what value can you bring to our team?"
]

FALLBACK_FEEDBACK = "Thank you for your answer. You've provided relevant information."
FALLBACK_SCORE = 7


class Evaluation(BaseModel):
    """Structured evaluation of one answer."""
    score: int = Field(..., ge=1, le=10)
    feedback: str = ""
    citations: List[Citation] = Field(default_factory=list)

    @field_validator("score", mode="before")
    @classmethod
    def clamp_score(cls, value: Any) -> int:
        # Numbers and numeric strings are rounded and clamped to 1-10
        if isinstance(value, bool):
            raise ValueError("score must be a number")
        try:
            score = round(float(value))
        except (TypeError, OverflowError) as e:
            raise ValueError(f"score must be a finite number: {e}") from e
        return min(10, max(1, score))

    @field_validator("citations", mode="before")
    @classmethod
    def keep_wellformed_citations(cls, value: Any) -> list:
        if not isinstance(value, list):
            return []
        return [
            c for c in value
            if isinstance(c, dict)
            and isinstance(c.get("source"), str)
            and isinstance(c.get("text"), str)
        ]


def fallback_evaluation() -> Evaluation:
    return Evaluation(score=FALLBACK_SCORE, feedback=FALLBACK_FEEDBACK, citations=[])


@dataclass(frozen=True)
class ParseSuccess:
    value: Any


@dataclass(frozen=True)
class ParseFailure:
    error: UpstreamParseError

    @property
    def reason(self) -> str:
        return self.error.message


ParseResult = Union[ParseSuccess, ParseFailure]


def _failure(reason: str) -> ParseFailure:
    return ParseFailure(UpstreamParseError(reason))


def parse_questions(text: str, question_count: int) -> ParseResult:
    """
    Parse a JSON array of question strings.

    Markdown code fences are removed first. Fails when the payload is not a
    JSON array of strings or holds fewer than ``question_count`` items.
    Extra questions are dropped.
    """
    try:
        data = json.loads(strip_code_fences(text))
    except (json.JSONDecodeError, TypeError) as e:
        return _failure(f"Questions are not valid JSON: {e}")

    if not isinstance(data, list):
        return _failure("Questions payload is not a JSON array")
    if not all(isinstance(q, str) and q.strip() for q in data):
        return _failure("Questions array contains non-string or empty items")
    if len(data) < question_count:
        return _failure(f"Expected {question_count} questions, got {len(data)}")

    return ParseSuccess([q.strip() for q in data[:question_count]])


def parse_evaluation(text: str) -> ParseResult:
    """
    Parse a JSON object ``{score, feedback, citations}`` into an Evaluation.

    Fails when the payload is not a JSON object or its score is missing or
    not numeric.
    """
    try:
        data = json.loads(strip_code_fences(text))
    except (json.JSONDecodeError, TypeError) as e:
        return _failure(f"Evaluation is not valid JSON: {e}")

    if not isinstance(data, dict):
        return _failure("Evaluation payload is not a JSON object")

    try:
        return ParseSuccess(Evaluation.model_validate(data))
    except ValidationError as e:
        return _failure(f"Evaluation has the wrong shape: {e.error_count()} error(s)")
