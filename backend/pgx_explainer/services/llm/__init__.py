"""
LLM explanation service.

generate_explanation() is the entry point: Gemini first, template fallback on any failure.
"""

from .explanation_service import (
    ExplanationResult,
    generate_explanation,
    parse_explanation,
    request_explanation,
)
from .fallback import (
    generate_fallback_mechanism,
    generate_fallback_summary,
    synthesize_explanation,
)
from .gemini_client import GeminiClient
from .prompt_builder import build_explanation_prompt

__all__ = [
    # Orchestration
    'generate_explanation',
    'request_explanation',
    'parse_explanation',
    'ExplanationResult',

    # Fallback
    'synthesize_explanation',
    'generate_fallback_summary',
    'generate_fallback_mechanism',

    # Remote call
    'GeminiClient',
    'build_explanation_prompt',
]
