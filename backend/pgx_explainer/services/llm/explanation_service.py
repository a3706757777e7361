import json
import logging
import time
from dataclasses import dataclass
from typing import Any, Mapping, Optional, Union

from pgx_explainer.core.exceptions import (
    ExplanationRequestError,
    IncompleteResponseError,
    MalformedResponseError,
)
from pgx_explainer.schemas.internal_contracts import RiskAssessment
from pgx_explainer.schemas.pharma_schema import LLMExplanation
from pgx_explainer.services.llm.fallback import synthesize_explanation
from pgx_explainer.services.llm.gemini_client import GeminiClient
from pgx_explainer.services.llm.prompt_builder import build_explanation_prompt

logger = logging.getLogger(__name__)

REQUIRED_FIELDS = ("summary", "mechanism")


@dataclass(frozen=True)
class ExplanationResult:
    """Outcome of one LLM request: an explanation, or the reason there is none."""
    explanation: Optional[LLMExplanation] = None
    error: Optional[ExplanationRequestError] = None

    @property
    def ok(self) -> bool:
        return self.explanation is not None


def parse_explanation(text: str) -> LLMExplanation:
    """
    Parses the LLM response body into an explanation.

    Raises:
        MalformedResponseError: body is not a JSON object.
        IncompleteResponseError: summary or mechanism missing, empty or not a string.
    """
    try:
        parsed: Any = json.loads(text)
    except (TypeError, ValueError) as e:
        raise MalformedResponseError(f"LLM response is not valid JSON: {e}") from e

    if not isinstance(parsed, dict):
        raise MalformedResponseError("LLM response is not a JSON object")

    fields = {}
    for name in REQUIRED_FIELDS:
        value = parsed.get(name)
        if not value or not isinstance(value, str) or not value.strip():
            raise IncompleteResponseError(f"Invalid LLM response structure: missing {name}")
        fields[name] = value.strip()

    return LLMExplanation(**fields)


async def request_explanation(risk: RiskAssessment, client: Optional[GeminiClient] = None) -> ExplanationResult:
    """
    Asks the LLM for a structured explanation.
    Every failure (request building, transport, parsing, validation) comes back as a failed result.
    """
    try:
        client = client or GeminiClient()
        prompt = build_explanation_prompt(risk)
        text = await client.generate_json_text(prompt)
        return ExplanationResult(explanation=parse_explanation(text))
    except ExplanationRequestError as e:
        return ExplanationResult(error=e)
    except Exception as e:
        wrapped = ExplanationRequestError(f"Unexpected error requesting explanation: {e}")
        wrapped.__cause__ = e
        return ExplanationResult(error=wrapped)


async def generate_explanation(
    risk: Union[RiskAssessment, Mapping[str, Any]],
    client: Optional[GeminiClient] = None,
) -> LLMExplanation:
    """
    Generates a clinical explanation for a risk assessment.

    Tries the LLM once; on any failure logs a warning and returns the
    deterministic template explanation instead. Never raises for LLM problems.

    Args:
        risk: The risk assessment, or a mapping with the same fields (validated here).
        client: Optional Gemini client, mainly for injecting a stub.

    Returns:
        An LLMExplanation with non-empty summary and mechanism.
    """
    if not isinstance(risk, RiskAssessment):
        risk = RiskAssessment.model_validate(risk)

    logger.info("Generating clinical explanation for %s / %s", risk.gene, risk.drug)
    llm_start_time = time.time()

    result = await request_explanation(risk, client)

    if result.ok:
        logger.info("LLM explanation generated in %.2f seconds", time.time() - llm_start_time)
        return result.explanation

    logger.warning(
        "LLM generation failed (%s: %s), using fallback.",
        type(result.error).__name__,
        result.error,
    )
    return synthesize_explanation(risk)
