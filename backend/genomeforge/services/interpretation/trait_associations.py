"""
Trait Association Analyzer - GWAS-style risk scoring per trait.

Per entry:
    effect = copies * ln(normalized OR)      when copies and OR/beta are known
           = +/-0.5                          when only has_risk_allele is known
           = 0                               otherwise
    weight = -log10(p)

The weighted mean effect is passed through a logistic function so the final
risk score lies in (0, 1) with 0.5 meaning population-average risk.
"""

from typing import Dict, List, Optional
import logging
import math

from .config import InterpretationConfig, TraitAssociationConfig, get_config, get_trait_config
from .models import (
    ConfidenceLevel,
    GWASAssociation,
    MatchResult,
    TraitAssociation,
    TraitCategory,
    TraitInterpretation,
)
from .reference_tables import TRAIT_CATEGORY_KEYWORDS

logger = logging.getLogger(__name__)


def categorize_trait(trait: str) -> TraitCategory:
    name = trait.lower()
    for category, keywords in TRAIT_CATEGORY_KEYWORDS:
        if any(kw in name for kw in keywords):
            return category
    return TraitCategory.OTHER


def association_effect(assoc: GWASAssociation, cfg: Optional[TraitAssociationConfig] = None) -> float:
    if assoc.risk_allele_copies is not None and assoc.or_beta is not None:
        if assoc.or_beta == 0:
            return 0.0
        # negative values are read as inverted odds ratios
        normalized = assoc.or_beta if assoc.or_beta > 0 else 1 / abs(assoc.or_beta)
        return assoc.risk_allele_copies * math.log(normalized)
    if assoc.has_risk_allele is not None:
        step = (cfg or get_trait_config()).has_risk_allele_effect
        return step if assoc.has_risk_allele else -step
    return 0.0


def association_weight(assoc: GWASAssociation) -> float:
    return -math.log10(assoc.p_value)


def sigmoid(x: float) -> float:
    # exp() must only see non-positive arguments
    if x >= 0:
        return 1.0 / (1.0 + math.exp(-x))
    z = math.exp(x)
    return z / (1.0 + z)


def calculate_risk_score(
    associations: List[GWASAssociation], cfg: Optional[TraitAssociationConfig] = None
) -> float:
    total_weight = 0.0
    weighted_effect = 0.0
    for assoc in associations:
        weight = association_weight(assoc)
        total_weight += weight
        weighted_effect += association_effect(assoc, cfg) * weight

    raw_score = weighted_effect / total_weight if total_weight > 0 else 0.0
    return sigmoid(raw_score)


def interpret_risk(
    risk_score: float,
    associations: List[GWASAssociation],
    cfg: Optional[TraitAssociationConfig] = None,
) -> TraitInterpretation:
    cfg = cfg or get_trait_config()
    if not any(a.has_risk_allele is not None for a in associations):
        return TraitInterpretation.UNKNOWN
    if risk_score >= cfg.increased_threshold:
        return TraitInterpretation.INCREASED
    if risk_score <= cfg.decreased_threshold:
        return TraitInterpretation.DECREASED
    return TraitInterpretation.TYPICAL


def determine_confidence(
    associations: List[GWASAssociation], cfg: Optional[TraitAssociationConfig] = None
) -> ConfidenceLevel:
    cfg = cfg or get_trait_config()
    significant = sum(1 for a in associations if a.p_value < cfg.significance_p_value)
    if significant >= cfg.high_confidence_min_significant:
        return ConfidenceLevel.HIGH
    if significant >= 1 or len(associations) >= cfg.moderate_confidence_min_entries:
        return ConfidenceLevel.MODERATE
    return ConfidenceLevel.LOW


def analyze_trait_associations(
    match_result: MatchResult, config: Optional[InterpretationConfig] = None
) -> List[TraitAssociation]:
    """Group GWAS entries by trait and score each trait."""
    cfg = (config or get_config()).trait_associations
    trait_groups: Dict[str, List[GWASAssociation]] = {}
    for annotated in match_result.annotated_snps:
        for assoc in annotated.gwas:
            trait_groups.setdefault(assoc.trait, []).append(assoc)

    traits: List[TraitAssociation] = []
    for trait, associations in trait_groups.items():
        risk_score = calculate_risk_score(associations, cfg)
        traits.append(TraitAssociation(
            trait=trait,
            category=categorize_trait(trait),
            variant_count=len(associations),
            associations=associations,
            risk_score=risk_score,
            interpretation=interpret_risk(risk_score, associations, cfg),
            confidence=determine_confidence(associations, cfg),
        ))

    traits = sorted(traits, key=lambda t: (-t.variant_count, -abs(t.risk_score - 0.5)))
    logger.debug("Scored %d trait(s)", len(traits))
    return traits
