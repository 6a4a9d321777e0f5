"""
Groq Cloud completion service for question generation and answer evaluation.

The ChatGroq client is built once at startup by ``initialize_llm`` and
wrapped in a ``CompletionService`` that the interview orchestrator receives
as a dependency. Each orchestrator step is a single completion round trip:
no retries, no timeout handling and no streaming.
"""
import os
from typing import Optional

from langchain_core.messages import HumanMessage, SystemMessage
from langchain_core.language_models.chat_models import BaseChatModel
from langchain_groq import ChatGroq

from ..errors import UpstreamModelError
from ..utils.config import (
    GROQ_API_KEY,
    GROQ_MODEL_NAME,
    GROQ_TOP_P,
    GROQ_SEED
)
from ..utils.logger import setup_logger

logger = setup_logger("groq_service")


def initialize_llm(
    api_key: str = None,
    model_name: str = None,
    top_p: float = None,
    seed: int = None
) -> ChatGroq:
    """
    Initialize Groq Cloud LLM.

    Temperature and max tokens are chosen per call by ``CompletionService``.

    Args:
        api_key: Groq API key. If None, uses environment variable or config.
        model_name: Model name. If None, uses config default.
        top_p: Top-p setting. If None, uses config default.
        seed: Random seed. If None, uses config default.

    Returns:
        ChatGroq LLM instance
    """
    if api_key is None:
        api_key = os.environ.get("GROQ_API_KEY", GROQ_API_KEY)

    if not api_key:
        raise ValueError("GROQ_API_KEY not found. Please set it in environment or config.")

    if model_name is None:
        model_name = GROQ_MODEL_NAME
    if top_p is None:
        top_p = GROQ_TOP_P
    if seed is None:
        seed = GROQ_SEED

    try:
        llm = ChatGroq(
            groq_api_key=api_key,
            model_name=model_name,
            model_kwargs={
                "top_p": top_p,
                "seed": seed
            }
        )
        logger.info(f"✅ Groq Cloud LLM initialized: {model_name} (top_p={top_p})")
        return llm
    except Exception as e:
        logger.error(f"❌ Groq initialization failed: {e}")
        raise


class CompletionService:
    """
    Text completion over a LangChain chat model.

    ``complete`` sends a system prompt and a user prompt and returns the
    model's reply as plain text.
    """

    def __init__(self, llm: BaseChatModel):
        self.llm = llm

    async def complete(
        self,
        system_prompt: str,
        user_prompt: str,
        temperature: float,
        max_tokens: int
    ) -> str:
        """
        Run one completion.

        Raises:
            UpstreamModelError: If the model call fails
        """
        messages = [
            SystemMessage(content=system_prompt),
            HumanMessage(content=user_prompt)
        ]
        try:
            model = self.llm.bind(temperature=temperature, max_tokens=max_tokens)
            response = await model.ainvoke(messages)
        except Exception as e:
            logger.error(f"❌ Completion request failed: {e}")
            raise UpstreamModelError(f"Language model request failed: {e}") from e

        return response.content if isinstance(response.content, str) else str(response.content)


def create_completion_service(llm: Optional[BaseChatModel] = None) -> CompletionService:
    """Build a CompletionService, initializing the Groq LLM when none is given."""
    if llm is None:
        llm = initialize_llm()
    return CompletionService(llm)
