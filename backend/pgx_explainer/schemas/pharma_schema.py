from pydantic import BaseModel, Field


class LLMExplanation(BaseModel):
    """Clinician-facing explanation. Same shape whether it came from the LLM or the fallback."""
    summary: str = Field(..., min_length=1, description="Concise clinical statement")
    mechanism: str = Field(..., min_length=1, description="Biological / pharmacokinetic rationale")
