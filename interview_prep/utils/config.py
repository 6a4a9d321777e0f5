"""
Configuration settings for the Interview Prep API.
"""
import os
from pathlib import Path

# Base paths
BASE_DIR = Path(__file__).parent.parent.parent
STORAGE_DIR = Path(os.environ.get("INTERVIEW_PREP_STORAGE_DIR", BASE_DIR / "storage"))

# LLM configuration
# The key is checked when the client is built, so the package imports without it
GROQ_API_KEY = os.environ.get("GROQ_API_KEY", "")
GROQ_MODEL_NAME = os.environ.get("GROQ_MODEL_NAME", "llama-3.1-8b-instant")
GROQ_TOP_P = 0.9
GROQ_SEED = 1

# Per-step sampling settings
QUESTION_TEMPERATURE = 0.8
QUESTION_MAX_TOKENS = 1000
EVALUATION_TEMPERATURE = 0.7
EVALUATION_MAX_TOKENS = 800

# Interview configuration
QUESTION_COUNT = 10  # Questions generated per session
RETRIEVAL_TOP_K = 2  # Context chunks used to evaluate one answer
SESSION_LIST_LIMIT = 10  # Sessions returned by the listing endpoint

# Document configuration
CHUNK_WORD_COUNT = 500  # Target words per chunk
MIN_EXTRACTED_TEXT_LENGTH = 50  # Minimum characters extracted from a PDF
MAX_UPLOAD_BYTES = 10 * 1024 * 1024  # 10MB upload limit
DOCUMENT_TYPES = ("resume", "job_description")

# Logging configuration
LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO")
LOG_FILE = os.environ.get("LOG_FILE")
