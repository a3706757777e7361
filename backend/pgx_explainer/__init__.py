"""
PGx Explainer

Clinical explanations for pharmacogenomic risk assessments, generated by an LLM
with a deterministic template fallback.
"""

from .core.logging import setup_logging
from .services.llm import generate_explanation

__all__ = ['generate_explanation', 'setup_logging']
