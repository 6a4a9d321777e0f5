"""
Interview Orchestrator.

Drives one interview session through ``active -> completed``:
- start: generate questions from the job description and open a session
- answer: evaluate the answer against retrieved resume/JD context, record
  the score and move to the next question (or complete the session)
- history/listing of sessions

Model output that cannot be parsed is replaced by fixed fallback content, so
a session always starts and every answer always gets a score.
"""
import asyncio
from datetime import datetime
from typing import List, Optional, Protocol

from pydantic import BaseModel

from ..domain import ChatMessage, Document, GeneratedQuestion, InterviewSession
from ..errors import (
    MissingDocumentsError,
    NoPendingQuestionError,
    SessionCompletedError,
    SessionNotFoundError
)
from ..retrieval import find_relevant_chunks
from ..storage import DocumentStore, SessionStore
from ..utils.config import (
    QUESTION_COUNT,
    RETRIEVAL_TOP_K,
    SESSION_LIST_LIMIT,
    QUESTION_TEMPERATURE,
    QUESTION_MAX_TOKENS,
    EVALUATION_TEMPERATURE,
    EVALUATION_MAX_TOKENS
)
from ..utils.logger import setup_logger
from .parsers import (
    FALLBACK_QUESTIONS,
    Evaluation,
    ParseFailure,
    fallback_evaluation,
    parse_evaluation,
    parse_questions
)
from .prompts import build_evaluation_prompt, build_question_prompt, build_system_prompt

logger = setup_logger("orchestrator")


class Completer(Protocol):
    async def complete(
        self,
        system_prompt: str,
        user_prompt: str,
        temperature: float,
        max_tokens: int
    ) -> str: ...


class AnswerOutcome(BaseModel):
    """Result of one answer submission."""
    score: int
    feedback: str
    citations: List[dict]
    response: str
    has_more_questions: bool
    current_question: Optional[int]
    total_questions: int
    completed: bool
    average_score: Optional[float]


class InterviewOrchestrator:
    """
    Sequences question generation, answer evaluation and session completion.

    The completion service and stores are injected; the orchestrator holds no
    per-session state between calls.
    """

    def __init__(
        self,
        completion_service: Completer,
        document_store: DocumentStore,
        session_store: SessionStore,
        question_count: int = QUESTION_COUNT,
        retrieval_top_k: int = RETRIEVAL_TOP_K
    ):
        self.completion_service = completion_service
        self.document_store = document_store
        self.session_store = session_store
        self.question_count = question_count
        self.retrieval_top_k = retrieval_top_k

    async def generate_questions(self, job_description_text: str) -> List[str]:
        """Ask the model for questions, falling back to the fixed list."""
        raw = await self.completion_service.complete(
            build_system_prompt(),
            build_question_prompt(job_description_text, self.question_count),
            temperature=QUESTION_TEMPERATURE,
            max_tokens=QUESTION_MAX_TOKENS
        )

        result = parse_questions(raw, self.question_count)
        if isinstance(result, ParseFailure):
            logger.warning(f"Using fallback questions: {result.reason}")
            return list(FALLBACK_QUESTIONS)
        return result.value

    async def evaluate_answer(
        self,
        question: str,
        answer: str,
        documents: List[Document]
    ) -> Evaluation:
        """Score one answer with retrieved context, falling back to a neutral evaluation."""
        relevant_chunks = find_relevant_chunks(answer, documents, self.retrieval_top_k)
        raw = await self.completion_service.complete(
            build_system_prompt(),
            build_evaluation_prompt(question, answer, relevant_chunks),
            temperature=EVALUATION_TEMPERATURE,
            max_tokens=EVALUATION_MAX_TOKENS
        )

        result = parse_evaluation(raw)
        if isinstance(result, ParseFailure):
            logger.warning(f"Using fallback evaluation: {result.reason}")
            return fallback_evaluation()
        return result.value

    async def start_interview(self, user_id: str) -> InterviewSession:
        """
        Open a new session for ``user_id``.

        Raises:
            MissingDocumentsError: If the resume or job description is missing
            UpstreamModelError: If the completion call fails
        """
        resume = self.document_store.find(user_id, "resume")
        job_description = self.document_store.find(user_id, "job_description")
        if resume is None or job_description is None:
            raise MissingDocumentsError()

        questions = await self.generate_questions(job_description.extracted_text)

        session = InterviewSession(
            user_id=user_id,
            resume_id=resume.id,
            job_description_id=job_description.id,
            generated_questions=[GeneratedQuestion(question=q) for q in questions],
            messages=[
                ChatMessage(role="system", content=build_system_prompt()),
                ChatMessage(
                    role="assistant",
                    content=(
                        f"Hello! I'm your AI interviewer. I've reviewed the job description and "
                        f"I have {len(questions)} questions for you. Let's begin!\n\n"
                        f"Question 1: {questions[0]}"
                    )
                )
            ]
        )
        self.session_store.create(session)
        return session

    async def _load_documents(self, session: InterviewSession) -> List[Document]:
        resume, job_description = await asyncio.gather(
            asyncio.to_thread(self.document_store.get, session.resume_id),
            asyncio.to_thread(self.document_store.get, session.job_description_id)
        )
        documents = [d for d in (resume, job_description) if d is not None]
        if len(documents) < 2:
            logger.warning(f"Session {session.id} is missing a document; evaluating with partial context")
        return documents

    async def submit_answer(self, user_id: str, session_id: str, message: str) -> AnswerOutcome:
        """
        Record and evaluate the answer to the current question.

        Raises:
            SessionNotFoundError: If the session does not exist for this user
            SessionCompletedError: If the session is already completed
            NoPendingQuestionError: If no question is left unanswered
            RetrievalError: If context retrieval fails
            UpstreamModelError: If the completion call fails
        """
        session = self.session_store.get(session_id, user_id=user_id)
        if session is None:
            raise SessionNotFoundError()
        if session.is_completed:
            raise SessionCompletedError()

        index = session.current_question_index()
        if index is None:
            raise NoPendingQuestionError()

        documents = await self._load_documents(session)
        current_question = session.generated_questions[index].question

        session.messages.append(ChatMessage(role="user", content=message))
        evaluation = await self.evaluate_answer(current_question, message, documents)

        session.generated_questions[index].answered = True

        response = f"Score: {evaluation.score}/10\n\nFeedback: {evaluation.feedback}"
        total = len(session.generated_questions)
        next_index = index + 1
        has_more = next_index < total
        if has_more:
            next_question = session.generated_questions[next_index].question
            response += f"\n\nNext Question ({next_index + 1}/{total}): {next_question}"

        session.messages.append(ChatMessage(
            role="assistant",
            content=response,
            score=evaluation.score,
            feedback=evaluation.feedback,
            citations=evaluation.citations
        ))

        if not has_more:
            session.status = "completed"
            session.completed_at = datetime.now()
            session.average_score = session.calculate_average_score()
            session.messages[-1].content += (
                f"\n\n🎉 Interview completed! Your average score: {session.average_score:.2f}/10"
            )
            response = session.messages[-1].content
            logger.info(f"Completed interview session: {session.id}, average score {session.average_score}")

        self.session_store.save(session)

        return AnswerOutcome(
            score=evaluation.score,
            feedback=evaluation.feedback,
            citations=[c.model_dump() for c in evaluation.citations],
            response=response,
            has_more_questions=has_more,
            current_question=next_index + 1 if has_more else None,
            total_questions=total,
            completed=session.is_completed,
            average_score=session.average_score if session.is_completed else None
        )

    def get_history(self, user_id: str, session_id: str) -> InterviewSession:
        session = self.session_store.get(session_id, user_id=user_id)
        if session is None:
            raise SessionNotFoundError()
        return session

    def list_sessions(self, user_id: str, limit: int = SESSION_LIST_LIMIT) -> List[InterviewSession]:
        return self.session_store.list_for_user(user_id, limit=limit)
