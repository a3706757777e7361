import pytest

from pgx_explainer.schemas.internal_contracts import RiskAssessment


@pytest.fixture
def codeine_risk():
    """CYP2D6 poor metabolizer on codeine, two detected alleles."""
    return RiskAssessment(
        drug="Codeine",
        gene="CYP2D6",
        diplotype="*4/*4",
        phenotype="Poor Metabolizer",
        risk_label="Toxic",
        recommendation="Avoid use.",
        detected_variants=[{"star": "*1", "rsid": "rs1065852"}, {"star": "*4"}],
    )


@pytest.fixture
def safe_risk():
    return RiskAssessment(
        drug="Codeine",
        gene="CYP2D6",
        diplotype="*1/*1",
        phenotype="Normal Metabolizer",
        risk_label="Safe",
        recommendation="Use label-recommended dosing.",
    )
