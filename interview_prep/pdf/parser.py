"""
PDF parsing utilities for extracting text from uploaded resumes and job descriptions.
"""
from pathlib import Path

import pdfplumber

from ..utils.logger import setup_logger

logger = setup_logger("pdf_parser")


def extract_text_from_pdf(pdf_path: Path) -> str:
    """
    Extract text from a PDF file.

    Args:
        pdf_path: Path to PDF file

    Returns:
        Extracted text as string, pages separated by newlines

    Raises:
        FileNotFoundError: If PDF file doesn't exist
        ValueError: If the file cannot be parsed as a PDF
    """
    pdf_path = Path(pdf_path)
    if not pdf_path.exists():
        raise FileNotFoundError(f"PDF file not found: {pdf_path}")

    try:
        text = ""
        with pdfplumber.open(pdf_path) as pdf:
            for page in pdf.pages:
                page_text = page.extract_text()
                if page_text:
                    text += page_text + "\n"
        return text.strip()
    except Exception as e:
        logger.error(f"Error extracting text from {pdf_path.name}: {e}")
        raise ValueError("Failed to extract text from PDF") from e
