import json

import pytest

from interview_prep.errors import UpstreamParseError
from interview_prep.interview import (
    FALLBACK_QUESTIONS,
    Evaluation,
    ParseFailure,
    ParseSuccess,
    fallback_evaluation,
    parse_evaluation,
    parse_questions
)
from interview_prep.interview.parsers import FALLBACK_FEEDBACK


QUESTIONS = [f"Q{i}?" for i in range(10)]


def test_fallback_questions_are_ten_generic_questions():
    assert len(FALLBACK_QUESTIONS) == 10
    assert all(q.endswith("?") for q in FALLBACK_QUESTIONS)


def test_parse_questions_success():
    result = parse_questions(json.dumps(QUESTIONS), 10)
    assert isinstance(result, ParseSuccess)
    assert result.value == QUESTIONS


def test_parse_questions_strips_code_fences():
    text = "```json\n" + json.dumps(QUESTIONS) + "\n```"
    result = parse_questions(text, 10)
    assert isinstance(result, ParseSuccess)
    assert result.value == QUESTIONS


def test_parse_questions_truncates_extra_items():
    result = parse_questions(json.dumps(QUESTIONS + ["extra?"]), 10)
    assert result.value == QUESTIONS


@pytest.mark.parametrize("text", [
    "Here are your questions: 1. Why?",
    json.dumps({"questions": QUESTIONS}),
    json.dumps(QUESTIONS[:9]),
    json.dumps(QUESTIONS[:9] + [3]),
    json.dumps(QUESTIONS[:9] + ["   "]),
    "",
])
def test_parse_questions_failures(text):
    result = parse_questions(text, 10)
    assert isinstance(result, ParseFailure)
    assert isinstance(result.error, UpstreamParseError)
    assert result.reason


def test_parse_evaluation_success():
    text = json.dumps({
        "score": 9,
        "feedback": "Great depth.",
        "citations": [{"source": "resume", "text": "Led a team"}]
    })
    result = parse_evaluation(text)
    assert isinstance(result, ParseSuccess)
    assert result.value.score == 9
    assert result.value.feedback == "Great depth."
    assert result.value.citations[0].source == "resume"
    assert result.value.citations[0].text == "Led a team"


@pytest.mark.parametrize("raw_score, expected", [
    (0, 1),
    (15, 10),
    (7.6, 8),
    ("6", 6),
])
def test_parse_evaluation_normalizes_score(raw_score, expected):
    result = parse_evaluation(json.dumps({"score": raw_score, "feedback": "ok"}))
    assert result.value.score == expected


def test_parse_evaluation_drops_malformed_citations():
    text = json.dumps({
        "score": 5,
        "feedback": "fine",
        "citations": [{"source": "resume"}, "loose text", {"source": "job_description", "text": "APIs"}]
    })
    result = parse_evaluation(text)
    assert [c.text for c in result.value.citations] == ["APIs"]


def test_parse_evaluation_non_list_citations_become_empty():
    result = parse_evaluation(json.dumps({"score": 5, "feedback": "x", "citations": "none"}))
    assert result.value.citations == []


@pytest.mark.parametrize("text", [
    "Score: 8/10. Nice answer.",
    json.dumps([1, 2, 3]),
    json.dumps({"feedback": "no score"}),
    json.dumps({"score": None, "feedback": "x"}),
    json.dumps({"score": "high", "feedback": "x"}),
    json.dumps({"score": True, "feedback": "x"}),
])
def test_parse_evaluation_failures(text):
    assert isinstance(parse_evaluation(text), ParseFailure)


def test_fallback_evaluation_is_fixed():
    evaluation = fallback_evaluation()
    assert evaluation == Evaluation(score=7, feedback=FALLBACK_FEEDBACK, citations=[])
    assert evaluation.feedback == "Thank you for your answer. You've provided relevant information."
