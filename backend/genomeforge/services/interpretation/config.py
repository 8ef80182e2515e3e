"""
Configuration for the interpretation engine.
Centralizes the tunable constants used by the scoring engines.
"""

from typing import Any, Dict

from pydantic import BaseModel, Field


class RiskAssessmentConfig(BaseModel):
    """Thresholds for the clinical risk decision tree."""

    high_min_impact: float = Field(
        default=4.0,
        description="Minimum highest impact score for a high-risk call"
    )

    high_min_review_stars: int = Field(
        default=2,
        ge=0,
        le=4,
        description="Minimum ClinVar review stars for a high-risk call"
    )

    moderate_min_impact: float = Field(
        default=2.0,
        description="Minimum impact for likely-pathogenic variants to reach moderate risk"
    )

    low_min_impact: float = Field(
        default=1.0,
        description="Minimum impact score for a low-risk call"
    )

    explanation_max_genes: int = Field(
        default=3,
        ge=1,
        description="Number of genes named in a risk explanation before ' and others'"
    )


class TraitAssociationConfig(BaseModel):
    """Configuration for GWAS trait scoring."""

    increased_threshold: float = Field(
        default=0.65,
        ge=0.5,
        le=1.0,
        description="Risk score at or above which risk is 'increased'"
    )

    decreased_threshold: float = Field(
        default=0.35,
        ge=0.0,
        le=0.5,
        description="Risk score at or below which risk is 'decreased'"
    )

    significance_p_value: float = Field(
        default=1e-10,
        gt=0.0,
        description="p-value below which an association counts as strongly significant"
    )

    high_confidence_min_significant: int = Field(
        default=3,
        ge=1,
        description="Strongly significant entries required for 'high' confidence"
    )

    moderate_confidence_min_entries: int = Field(
        default=3,
        ge=1,
        description="Total entries that alone give 'moderate' confidence"
    )

    has_risk_allele_effect: float = Field(
        default=0.5,
        description="Effect used when only the has-risk-allele flag is known"
    )


class PolygenicScoreConfig(BaseModel):
    """Configuration for polygenic risk scoring."""

    min_coverage_percent: float = Field(
        default=50.0,
        ge=0.0,
        le=100.0,
        description="Models with lower variant coverage are skipped"
    )

    sd_fraction_of_mean: float = Field(
        default=0.5,
        gt=0.0,
        description="Population SD approximated as this fraction of the expected mean"
    )

    relative_risk_scale: float = Field(
        default=0.3,
        description="Relative risk heuristic: e^(z * scale)"
    )


class KeyFindingsConfig(BaseModel):
    """Caps for the key-findings digest."""

    max_findings: int = Field(default=10, ge=1)
    max_critical_drugs_per_gene: int = Field(default=2, ge=0)
    max_carriers: int = Field(default=3, ge=0)
    max_polygenic_scores: int = Field(default=2, ge=0)
    max_traits: int = Field(default=3, ge=0)


class InterpretationConfig(BaseModel):
    """Main configuration for the interpretation engine."""

    risk_assessment: RiskAssessmentConfig = Field(
        default_factory=RiskAssessmentConfig,
        description="Risk assessment configuration"
    )

    trait_associations: TraitAssociationConfig = Field(
        default_factory=TraitAssociationConfig,
        description="Trait association configuration"
    )

    polygenic_scores: PolygenicScoreConfig = Field(
        default_factory=PolygenicScoreConfig,
        description="Polygenic risk score configuration"
    )

    key_findings: KeyFindingsConfig = Field(
        default_factory=KeyFindingsConfig,
        description="Key findings configuration"
    )

    # Logging
    verbose_logging: bool = Field(
        default=False,
        description="Log per-gene and per-model scoring details"
    )


# Replaced on every update, never mutated in place.
_config = InterpretationConfig()


def get_config() -> InterpretationConfig:
    return _config


def _apply_override(data: Dict[str, Any], dotted_key: str, value: Any) -> None:
    *parents, leaf = dotted_key.split(".")
    for part in parents:
        data = data[part]
    data[leaf] = value


def update_config(**overrides: Any) -> InterpretationConfig:
    """
    Swap in a validated copy of the active configuration with `overrides` applied.
    Nested fields take dotted keys, e.g. ``polygenic_scores.min_coverage_percent``.
    """
    global _config
    data = _config.model_dump()
    for key, value in overrides.items():
        _apply_override(data, key, value)
    _config = InterpretationConfig.model_validate(data)
    return _config


def reset_config() -> InterpretationConfig:
    global _config
    _config = InterpretationConfig()
    return _config


def load_config_from_file(filepath: str) -> InterpretationConfig:
    """Activate a configuration stored as JSON."""
    global _config
    with open(filepath) as f:
        _config = InterpretationConfig.model_validate_json(f.read())
    return _config


def save_config_to_file(filepath: str) -> None:
    with open(filepath, "w") as f:
        f.write(_config.model_dump_json(indent=2))


# Section accessors
def get_risk_config() -> RiskAssessmentConfig:
    return _config.risk_assessment


def get_trait_config() -> TraitAssociationConfig:
    return _config.trait_associations


def get_prs_config() -> PolygenicScoreConfig:
    return _config.polygenic_scores
