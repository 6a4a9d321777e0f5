"""
Prompt templates for question generation, answer evaluation and the
interviewer persona.

All builders are pure string construction.
"""
from typing import Iterable, List

from langchain_core.prompts import PromptTemplate

from ..domain import ScoredChunk

NO_RESUME_CONTEXT = "No resume context available"
NO_JOB_DESCRIPTION_CONTEXT = "No job description context available"

SYSTEM_PROMPT = (
    "You are an AI interview assistant. Your role is to:\n"
    "1. Ask relevant interview questions based on the job description\n"
    "2. Evaluate candidate answers using their resume as context\n"
    "3. Provide constructive feedback and scores\n"
    "4. Maintain a professional and encouraging tone\n"
    "5. Help candidates improve their interview skills\n\n"
    "Always be fair, objective, and helpful in your evaluations."
)

QUESTION_PROMPT = PromptTemplate(
    input_variables=["job_description", "question_count"],
    template=(
        "You are an expert technical interviewer. Based on the following job description, "
        "generate exactly {question_count} relevant, specific interview questions that would "
        "help assess if a candidate is suitable for this role.\n\n"
        "Job Description:\n{job_description}\n\n"
        "Requirements:\n"
        "- Generate exactly {question_count} questions\n"
        "- Include a mix of:\n"
        "  * Technical questions (40-50% of questions) - specific to required skills and technologies\n"
        "  * Behavioral/situational questions (30-40%) - STAR method friendly\n"
        "  * Experience-based questions (20-30%) - based on role requirements\n"
        "- Questions should be clear, specific, and directly related to the JD\n"
        "- Progress from easier to more challenging questions\n"
        "- Format: Return as a JSON array of strings\n\n"
        "Example format:\n"
        "[\"Question 1 here?\", \"Question 2 here?\", \"Question 3 here?\", ...]\n\n"
        "IMPORTANT: Return ONLY the JSON array, no additional text or explanation."
    )
)

EVALUATION_PROMPT = PromptTemplate(
    input_variables=["question", "answer", "resume_context", "job_description_context"],
    template=(
        "You are an expert interview evaluator. Evaluate the candidate's answer using their "
        "resume and the job description as context.\n\n"
        "Question: {question}\n\n"
        "Candidate's Answer: {answer}\n\n"
        "Resume Context:\n{resume_context}\n\n"
        "Job Description Context:\n{job_description_context}\n\n"
        "Please evaluate the answer and provide:\n"
        "1. A score from 1-10 (where 10 is excellent)\n"
        "2. Detailed feedback on:\n"
        "   - Relevance to the question\n"
        "   - Alignment with resume experience\n"
        "   - Fit for the job requirements\n"
        "   - Areas of improvement\n"
        "3. Specific citations from resume or JD that support your evaluation\n\n"
        "Return your response in the following JSON format:\n"
        "{{\n"
        "  \"score\": 8,\n"
        "  \"feedback\": \"Detailed feedback here...\",\n"
        "  \"citations\": [\n"
        "    {{\n"
        "      \"source\": \"resume\",\n"
        "      \"text\": \"Relevant text from resume\"\n"
        "    }}\n"
        "  ]\n"
        "}}"
    )
)


def build_system_prompt() -> str:
    return SYSTEM_PROMPT


def build_question_prompt(job_description_text: str, question_count: int = 10) -> str:
    """Ask for a JSON array of exactly ``question_count`` questions, easy to hard."""
    return QUESTION_PROMPT.format(
        job_description=job_description_text,
        question_count=question_count
    )


def _join_context(chunks: Iterable[ScoredChunk], source: str) -> str:
    return "\n\n".join(c.text for c in chunks if c.source == source)


def build_evaluation_prompt(
    question: str,
    answer: str,
    scored_chunks: List[ScoredChunk]
) -> str:
    """
    Ask for a JSON evaluation of ``answer``.

    Retrieved chunks are split into a resume block and a job description
    block; an empty block is replaced by a placeholder line.
    """
    return EVALUATION_PROMPT.format(
        question=question,
        answer=answer,
        resume_context=_join_context(scored_chunks, "resume") or NO_RESUME_CONTEXT,
        job_description_context=(
            _join_context(scored_chunks, "job_description") or NO_JOB_DESCRIPTION_CONTEXT
        )
    )
