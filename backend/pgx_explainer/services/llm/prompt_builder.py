import json
from typing import Any

from pydantic import BaseModel

from pgx_explainer.schemas.internal_contracts import RiskAssessment


def _jsonable(value: Any) -> Any:
    if isinstance(value, BaseModel):
        return value.model_dump()
    return str(value)


def render_variants(risk: RiskAssessment) -> str:
    """Compact JSON of the variants exactly as the caller passed them ("null" when absent)."""
    return json.dumps(
        risk.variants_payload,
        separators=(",", ":"),
        ensure_ascii=False,
        default=_jsonable,
    )


def build_explanation_prompt(risk: RiskAssessment) -> str:
    """
    Constructs the prompt asking the LLM for a two-field JSON explanation.

    Args:
        risk: The risk assessment to explain. Every field is embedded verbatim.

    Returns:
        A formatted prompt string.
    """
    prompt = f"""
You are a clinical pharmacogenomics expert.

Explain the following risk assessment for a healthcare provider.

Drug: {risk.drug}
Gene: {risk.gene}
Diplotype: {risk.diplotype}
Phenotype: {risk.phenotype}
Risk Label: {risk.risk_label}
Recommendation: {risk.recommendation}
Detected Variants: {render_variants(risk)}

Return ONLY valid JSON in this exact format:

{{
  "summary": "Concise clinical explanation of the risk.",
  "mechanism": "Biological and pharmacokinetic explanation including gene and specific variants."
}}

Do not include markdown, headings, or extra commentary.
"""
    return prompt
