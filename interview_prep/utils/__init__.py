"""
Utility modules for configuration, logging and text handling.
"""
from .logger import setup_logger
from .text_utils import strip_code_fences, count_words, cleanup_file

__all__ = ['setup_logger', 'strip_code_fences', 'count_words', 'cleanup_file']
