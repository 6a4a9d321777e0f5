"""
LLM service modules for Groq Cloud integration.
"""
from .groq_service import initialize_llm, CompletionService, create_completion_service

__all__ = ['initialize_llm', 'CompletionService', 'create_completion_service']
