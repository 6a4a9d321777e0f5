"""
Interview Prep API: AI mock interviews grounded in a resume and job description.
"""

__version__ = "1.0.0"
