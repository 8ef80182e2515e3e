"""
Polygenic Risk Score Calculator.

For each model the weighted risk-allele dosage is compared with the dosage
expected from one risk allele per model variant:

    expected_mean = sum(weights)
    z             = (raw - expected_mean) / (expected_mean * 0.5)

The z-score is ranked with the Abramowitz-Stegun (7.1.26) approximation of
the normal CDF. Relative risk is the heuristic e^(0.3 z); it is not a
calibrated clinical figure.
"""

from typing import Dict, List, Optional
import logging
import math

from .annotation_index import build_annotation_index, genotype_for
from .config import InterpretationConfig, PolygenicScoreConfig, get_config, get_prs_config
from .genotype import count_allele
from .models import AnnotatedVariant, MatchResult, PolygenicRiskScore, PRSRiskCategory
from .reference_tables import PRS_MODELS, PRSModel

logger = logging.getLogger(__name__)

# Abramowitz & Stegun 7.1.26
_A1 = 0.254829592
_A2 = -0.284496736
_A3 = 1.421413741
_A4 = -1.453152027
_A5 = 1.061405429
_P = 0.3275911


def normal_cdf(z: float) -> float:
    sign = -1 if z < 0 else 1
    x = abs(z) / math.sqrt(2)
    t = 1.0 / (1.0 + _P * x)
    y = 1.0 - (((((_A5 * t + _A4) * t) + _A3) * t + _A2) * t + _A1) * t * math.exp(-x * x)
    return 0.5 * (1.0 + sign * y)


def z_to_percentile(z: float) -> int:
    """Percentile 0-100, rounded half up."""
    return int(math.floor(100 * normal_cdf(z) + 0.5))


def percentile_to_category(percentile: int) -> PRSRiskCategory:
    if percentile >= 95:
        return PRSRiskCategory.VERY_HIGH
    elif percentile >= 80:
        return PRSRiskCategory.HIGH
    elif percentile >= 60:
        return PRSRiskCategory.MODERATE
    elif percentile >= 40:
        return PRSRiskCategory.AVERAGE
    elif percentile >= 20:
        return PRSRiskCategory.LOW
    else:
        return PRSRiskCategory.VERY_LOW


def score_model(
    model: PRSModel,
    index: Dict[str, AnnotatedVariant],
    cfg: Optional[PolygenicScoreConfig] = None,
) -> Optional[PolygenicRiskScore]:
    """Score one model, or None when coverage is below the cutoff."""
    cfg = cfg or get_prs_config()
    raw_score = 0.0
    found = 0
    for variant in model.variants:
        genotype = genotype_for(index, variant.rsid)
        if genotype is None:
            continue
        found += 1
        raw_score += variant.weight * count_allele(genotype, variant.risk_allele)

    total = len(model.variants)
    coverage = found / total * 100 if total else 0.0
    if coverage < cfg.min_coverage_percent:
        logger.debug("Skipping %s: coverage %.1f%% below cutoff", model.trait, coverage)
        return None

    expected_mean = sum(v.weight for v in model.variants)
    z_score = (raw_score - expected_mean) / (expected_mean * cfg.sd_fraction_of_mean)
    percentile = z_to_percentile(z_score)

    return PolygenicRiskScore(
        trait=model.trait,
        model_id=model.model_id,
        raw_score=raw_score,
        z_score=z_score,
        percentile=percentile,
        risk_category=percentile_to_category(percentile),
        variants_used=found,
        variants_missing=total - found,
        coverage=coverage,
        relative_risk=math.exp(z_score * cfg.relative_risk_scale),
    )


def calculate_polygenic_risk_scores(
    match_result: MatchResult,
    index: Optional[Dict[str, AnnotatedVariant]] = None,
    config: Optional[InterpretationConfig] = None,
) -> List[PolygenicRiskScore]:
    """Score every catalogue model with sufficient coverage, most extreme first."""
    cfg = (config or get_config()).polygenic_scores
    if index is None:
        index = build_annotation_index(match_result.annotated_snps)

    scores = [s for s in (score_model(m, index, cfg) for m in PRS_MODELS) if s is not None]
    return sorted(scores, key=lambda s: -abs(s.percentile - 50))
