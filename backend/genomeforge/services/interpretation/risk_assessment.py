"""
Risk Assessment Engine - Classifies disease risk from ClinVar annotations.

Variants are grouped by every condition they reference (a variant naming
three conditions contributes to three groups). Each group is classified by a
fixed decision tree over clinical significance, review stars and impact.
"""

from typing import Dict, List, Optional
import logging

from .config import InterpretationConfig, RiskAssessmentConfig, get_config, get_risk_config
from .genotype import Zygosity, is_x_chromosome, zygosity
from .models import (
    AnnotatedVariant,
    ClinicalSignificance,
    Inheritance,
    MatchResult,
    RiskAssessment,
    RiskLevel,
)

logger = logging.getLogger(__name__)


RISK_LEVEL_RANK: Dict[RiskLevel, int] = {
    RiskLevel.HIGH: 0,
    RiskLevel.MODERATE: 1,
    RiskLevel.LOW: 2,
    RiskLevel.UNKNOWN: 3,
}


def _has_significance(variants: List[AnnotatedVariant], significance: ClinicalSignificance) -> bool:
    return any(v.clinvar is not None and v.clinvar.clinical_significance == significance for v in variants)


def determine_risk_level(
    variants: List[AnnotatedVariant], cfg: Optional[RiskAssessmentConfig] = None
) -> RiskLevel:
    """Ordered decision tree; the first matching branch wins."""
    cfg = cfg or get_risk_config()
    highest_impact = max(v.impact_score for v in variants)
    has_pathogenic = _has_significance(variants, ClinicalSignificance.PATHOGENIC)
    has_likely_pathogenic = _has_significance(variants, ClinicalSignificance.LIKELY_PATHOGENIC)
    has_reviewed = any(
        v.clinvar is not None and v.clinvar.review_status >= cfg.high_min_review_stars
        for v in variants
    )

    if has_pathogenic and has_reviewed and highest_impact >= cfg.high_min_impact:
        return RiskLevel.HIGH
    if has_pathogenic or (has_likely_pathogenic and highest_impact >= cfg.moderate_min_impact):
        return RiskLevel.MODERATE
    if has_likely_pathogenic or highest_impact >= cfg.low_min_impact:
        return RiskLevel.LOW
    return RiskLevel.UNKNOWN


def infer_inheritance(variants: List[AnnotatedVariant]) -> Inheritance:
    if any(is_x_chromosome(v.snp.chromosome) for v in variants):
        return Inheritance.X_LINKED

    pathogenic_zygosity = [
        zygosity(v.snp.genotype)
        for v in variants
        if v.clinvar is not None and v.clinvar.clinical_significance == ClinicalSignificance.PATHOGENIC
    ]
    any_het = Zygosity.HETEROZYGOUS in pathogenic_zygosity
    any_hom = Zygosity.HOMOZYGOUS in pathogenic_zygosity

    if any_het and not any_hom:
        return Inheritance.AUTOSOMAL_DOMINANT
    if any_hom:
        return Inheritance.AUTOSOMAL_RECESSIVE
    return Inheritance.COMPLEX


def generate_risk_explanation(
    condition: str,
    risk_level: RiskLevel,
    variants: List[AnnotatedVariant],
    cfg: Optional[RiskAssessmentConfig] = None,
) -> str:
    max_genes = (cfg or get_risk_config()).explanation_max_genes
    genes: List[str] = []
    for v in variants:
        if v.clinvar is not None and v.clinvar.gene and v.clinvar.gene not in genes:
            genes.append(v.clinvar.gene)

    gene_text = ", ".join(genes[:max_genes]) or "unknown genes"
    if len(genes) > max_genes:
        gene_text += " and others"
    count = len(variants)

    explanations = {
        RiskLevel.HIGH: (
            f"{count} variant(s) in {gene_text} associated with increased risk for {condition}. "
            f"Consultation with a healthcare provider or genetic counselor is recommended."
        ),
        RiskLevel.MODERATE: (
            f"{count} variant(s) in {gene_text} may be associated with {condition}. "
            f"Consider discussing these findings with a healthcare provider."
        ),
        RiskLevel.LOW: (
            f"{count} variant(s) in {gene_text} found with possible but limited association with {condition}."
        ),
        RiskLevel.UNKNOWN: (
            f"{count} variant(s) in {gene_text} found, but their clinical significance for {condition} is uncertain."
        ),
    }
    return explanations[risk_level]


def assess_risks(
    match_result: MatchResult, config: Optional[InterpretationConfig] = None
) -> List[RiskAssessment]:
    """Assess disease risk for every condition referenced by a ClinVar annotation."""
    cfg = (config or get_config()).risk_assessment
    condition_groups: Dict[str, List[AnnotatedVariant]] = {}

    for annotated in match_result.annotated_snps:
        if annotated.clinvar is None:
            continue
        for condition in annotated.clinvar.conditions:
            condition_groups.setdefault(condition.name, []).append(annotated)

    risks: List[RiskAssessment] = []
    for condition, variants in condition_groups.items():
        highest_stars = max((v.clinvar.review_status for v in variants if v.clinvar is not None), default=0)
        risk_level = determine_risk_level(variants, cfg)
        gene = variants[0].clinvar.gene if variants[0].clinvar and variants[0].clinvar.gene else "Unknown"

        risks.append(RiskAssessment(
            condition=condition,
            gene=gene,
            risk_level=risk_level,
            confidence=highest_stars / 4,
            variants=variants,
            explanation=generate_risk_explanation(condition, risk_level, variants, cfg),
            inheritance=infer_inheritance(variants),
        ))

    # sorted() is stable: ties keep condition discovery order
    risks = sorted(risks, key=lambda r: RISK_LEVEL_RANK[r.risk_level])
    logger.debug("Assessed %d condition(s)", len(risks))
    return risks
