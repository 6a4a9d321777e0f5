import json
from typing import List, Optional

from interview_prep.domain import Chunk, Document
from interview_prep.pdf import chunk_text
from interview_prep.storage import DocumentStore

USER_ID = "user-1"

QUESTIONS = [f"Question number {i}?" for i in range(1, 11)]

RESUME_TEXT = (
    "Jane Doe is a backend engineer with six years of Python experience. "
    "She built FastAPI services handling payments at scale. "
    "She led a team of four engineers and mentored interns."
)

JOB_DESCRIPTION_TEXT = (
    "We are hiring a senior backend engineer. "
    "You will design Python services and REST APIs. "
    "Experience with cloud deployments and team leadership is a plus."
)


def evaluation_json(score=8, feedback="Solid answer.", citations=None) -> str:
    return json.dumps({
        "score": score,
        "feedback": feedback,
        "citations": citations if citations is not None else [
            {"source": "resume", "text": "six years of Python experience"}
        ]
    })


class FakeCompletionService:
    """
    Stand-in for the Groq completion service.

    Question prompts get ``question_reply``; evaluation prompts get the next
    item of ``evaluation_replies`` (the last one repeats). Exceptions in the
    replies are raised instead of returned.
    """

    def __init__(self, question_reply=None, evaluation_replies: Optional[List] = None):
        self.question_reply = question_reply if question_reply is not None else json.dumps(QUESTIONS)
        self.evaluation_replies = list(evaluation_replies or [evaluation_json()])
        self.calls = []

    async def complete(self, system_prompt, user_prompt, temperature, max_tokens):
        self.calls.append({
            "system_prompt": system_prompt,
            "user_prompt": user_prompt,
            "temperature": temperature,
            "max_tokens": max_tokens
        })
        if user_prompt.startswith("You are an expert interview evaluator"):
            reply = self.evaluation_replies.pop(0) if len(self.evaluation_replies) > 1 else self.evaluation_replies[0]
        else:
            reply = self.question_reply

        if isinstance(reply, Exception):
            raise reply
        return reply


def make_document(store: DocumentStore, file_type: str, text: str, user_id: str = USER_ID) -> Document:
    document = Document(
        user_id=user_id,
        file_name=f"{file_type}.pdf",
        file_type=file_type,
        file_url=f"file:///tmp/{file_type}.pdf",
        storage_id=f"interview-prep/{file_type}",
        extracted_text=text,
        chunks=[
            Chunk(text=c, chunk_index=i, source_tag=file_type)
            for i, c in enumerate(chunk_text(text, 12))
        ]
    )
    store.save(document)
    return document


def fake_extractor(path):
    """Extracted text keyed on the uploaded file name."""
    if "empty" in path.name:
        return "too short"
    if "broken" in path.name:
        raise ValueError("Failed to extract text from PDF")
    if "job" in path.name:
        return JOB_DESCRIPTION_TEXT
    return RESUME_TEXT
