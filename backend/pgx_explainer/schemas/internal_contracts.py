from enum import Enum
from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator
from typing import Any, List, Optional


class RiskLabel(str, Enum):
    """Risk labels with a dedicated fallback wording. Other labels are allowed."""
    SAFE = "Safe"
    TOXIC = "Toxic"
    INEFFECTIVE = "Ineffective"


class DetectedVariant(BaseModel):
    """A detected star allele. Extra keys (rsid, gene, ...) are kept as-is."""
    model_config = ConfigDict(extra="allow", frozen=True)

    star: str = Field(default="", description="Star allele notation (e.g., *4)")


class RiskAssessment(BaseModel):
    """
    Internal contract between the CPIC Risk Engine and the explanation layer.
    One drug-gene finding, read-only while an explanation is generated.
    """
    model_config = ConfigDict(frozen=True)

    drug: str = Field(..., description="Medication name (e.g., Codeine)")
    gene: str = Field(..., description="The gene symbol (e.g., CYP2D6)")
    diplotype: str = Field(..., description="The detected diplotype (e.g., *1/*4)")
    phenotype: str = Field(..., description="The metabolizer status (e.g., Poor Metabolizer)")
    risk_label: str = Field(..., description="Risk category (Safe, Toxic, Ineffective, Adjust Dosage, ...)")
    recommendation: str = Field(..., description="Core clinical recommendation text from CPIC guidelines")
    detected_variants: Optional[List[DetectedVariant]] = Field(
        default=None,
        description="Detected star alleles; None when unknown"
    )
    variants_payload: Any = Field(
        default=None,
        exclude=True,
        repr=False,
        description="detected_variants exactly as received, for the LLM prompt"
    )

    @model_validator(mode="before")
    @classmethod
    def keep_variants_payload(cls, data: Any) -> Any:
        if isinstance(data, dict) and "variants_payload" not in data:
            data = dict(data)
            data["variants_payload"] = data.get("detected_variants")
        return data

    @field_validator("detected_variants", mode="before")
    @classmethod
    def coerce_non_sequence(cls, v: Any) -> Any:
        # Anything that is not a list is treated as unknown rather than rejected
        if isinstance(v, (list, tuple)):
            return list(v)
        return None
