"""
AI Interview System.

This module provides the interview pipeline:
- Prompt construction (questions, evaluation, interviewer persona)
- Parsing of model output with fallback content
- Session orchestration (start, answer, complete)
"""

from .prompts import build_question_prompt, build_evaluation_prompt, build_system_prompt
from .parsers import (
    Evaluation,
    ParseSuccess,
    ParseFailure,
    parse_questions,
    parse_evaluation,
    fallback_evaluation,
    FALLBACK_QUESTIONS
)
from .orchestrator import InterviewOrchestrator, AnswerOutcome

__all__ = [
    'build_question_prompt',
    'build_evaluation_prompt',
    'build_system_prompt',
    'Evaluation',
    'ParseSuccess',
    'ParseFailure',
    'parse_questions',
    'parse_evaluation',
    'fallback_evaluation',
    'FALLBACK_QUESTIONS',
    'InterviewOrchestrator',
    'AnswerOutcome'
]
