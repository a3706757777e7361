"""
Deterministic explanation templates.

Used whenever the LLM request fails. Pure string formatting: the same
RiskAssessment always yields the same LLMExplanation.
"""

from pgx_explainer.schemas.internal_contracts import RiskAssessment, RiskLabel
from pgx_explainer.schemas.pharma_schema import LLMExplanation

UNSPECIFIED_VARIANTS = "unspecified variants"

ELEVATED_RISK_LABELS = {RiskLabel.TOXIC.value, RiskLabel.INEFFECTIVE.value}


def generate_fallback_summary(risk: RiskAssessment) -> str:
    if risk.risk_label == RiskLabel.SAFE.value:
        return (
            f"Patient is a {risk.phenotype} for {risk.gene}. "
            f"Standard dosing of {risk.drug} is likely appropriate."
        )

    if risk.risk_label in ELEVATED_RISK_LABELS:
        return (
            f"Elevated clinical risk identified for {risk.drug} due to "
            f"{risk.gene} {risk.phenotype} status. {risk.recommendation}"
        )

    # Any other label (Adjust Dosage, Unknown, ...)
    return (
        f"Dose adjustment or monitoring may be required for {risk.drug} "
        f"based on {risk.gene} {risk.phenotype} phenotype."
    )


def generate_fallback_mechanism(risk: RiskAssessment) -> str:
    # An empty list renders as "variants: )"; only a missing list gets the placeholder
    if risk.detected_variants is None:
        variants = UNSPECIFIED_VARIANTS
    else:
        variants = ", ".join(variant.star for variant in risk.detected_variants)

    return (
        f"The {risk.gene} gene (variants: {variants}) influences metabolism or "
        f"transporter activity affecting {risk.drug} pharmacokinetics, potentially "
        f"altering drug exposure and response as described in CPIC guidance."
    )


def synthesize_explanation(risk: RiskAssessment) -> LLMExplanation:
    """Builds the template explanation for a risk assessment. Never calls out."""
    return LLMExplanation(
        summary=generate_fallback_summary(risk),
        mechanism=generate_fallback_mechanism(risk),
    )
