"""
Analysis Pipeline - Orchestrates the interpretation engines.

Builds the annotation index once, runs each engine over the same match
result, aggregates key findings and assembles the summary counts.
"""
import logging
from datetime import datetime, timezone
from typing import Any, Dict, Optional

from pydantic import ValidationError

from genomeforge.services.interpretation.annotation_index import build_annotation_index
from genomeforge.services.interpretation.carrier_status import identify_carrier_status
from genomeforge.services.interpretation.config import get_config
from genomeforge.services.interpretation.key_findings import generate_key_findings
from genomeforge.services.interpretation.models import (
    AnalysisOptions,
    AnalysisResult,
    AnalysisSummary,
    ClinicalSignificance,
    MatchResult,
    RiskLevel,
)
from genomeforge.services.interpretation.pharmacogenomics_engine import analyze_pharmacogenomics
from genomeforge.services.interpretation.polygenic_risk import calculate_polygenic_risk_scores
from genomeforge.services.interpretation.risk_assessment import assess_risks
from genomeforge.services.interpretation.trait_associations import analyze_trait_associations

logger = logging.getLogger(__name__)


class InvalidMatchResultError(ValueError):
    """Raised when a match-result document fails validation."""

    def __init__(self, validation_error: ValidationError):
        self.errors = validation_error.errors()
        super().__init__(f"Invalid match result: {validation_error}")


def parse_match_result(payload: Dict[str, Any]) -> MatchResult:
    try:
        return MatchResult.model_validate(payload)
    except ValidationError as e:
        raise InvalidMatchResultError(e) from e


def parse_options(payload: Optional[Dict[str, Any]]) -> AnalysisOptions:
    try:
        return AnalysisOptions.model_validate(payload or {})
    except ValidationError as e:
        raise ValueError(f"Invalid analysis options: {e}") from e


def analyze_genome(match_result: MatchResult, options: Optional[AnalysisOptions] = None) -> AnalysisResult:
    """Perform the complete interpretation of a match result."""
    options = options or AnalysisOptions()
    # one snapshot for every engine in this analysis
    config = get_config()
    index = build_annotation_index(match_result.annotated_snps)

    risk_assessments = assess_risks(match_result, config)
    metabolizer_phenotypes = analyze_pharmacogenomics(match_result, index)
    carrier_statuses = identify_carrier_status(match_result)
    trait_associations = (
        analyze_trait_associations(match_result, config) if options.include_trait_associations else []
    )
    polygenic_risk_scores = (
        calculate_polygenic_risk_scores(match_result, index, config) if options.include_polygenic_scores else []
    )

    key_findings = generate_key_findings(
        risk_assessments,
        metabolizer_phenotypes,
        carrier_statuses,
        polygenic_risk_scores,
        trait_associations,
        config,
    )

    pathogenic_count = sum(
        1 for v in match_result.annotated_snps
        if v.clinvar is not None and v.clinvar.clinical_significance in (
            ClinicalSignificance.PATHOGENIC, ClinicalSignificance.LIKELY_PATHOGENIC
        )
    )

    summary = AnalysisSummary(
        total_variants_analyzed=len(match_result.annotated_snps),
        pathogenic_count=pathogenic_count,
        high_risk_count=sum(1 for r in risk_assessments if r.risk_level == RiskLevel.HIGH),
        moderate_risk_count=sum(1 for r in risk_assessments if r.risk_level == RiskLevel.MODERATE),
        pharmacogene_count=len(metabolizer_phenotypes),
        carrier_count=len(carrier_statuses),
        trait_association_count=len(trait_associations),
        prs_count=len(polygenic_risk_scores),
        key_findings=key_findings,
    )

    logger.info(
        "Analyzed genome %s: %d variants, %d risks, %d pharmacogenes, %d carriers, %d traits, %d PRS",
        match_result.genome_id,
        summary.total_variants_analyzed,
        len(risk_assessments),
        summary.pharmacogene_count,
        summary.carrier_count,
        summary.trait_association_count,
        summary.prs_count,
    )
    if config.verbose_logging:
        for p in metabolizer_phenotypes:
            logger.info("  %s: %s (activity %s) -> %s", p.gene, p.diplotype, p.activity_score, p.phenotype.value)
        for s in polygenic_risk_scores:
            logger.info("  %s: percentile %d, coverage %.0f%%", s.model_id, s.percentile, s.coverage)

    return AnalysisResult(
        genome_id=match_result.genome_id,
        analyzed_at=datetime.now(timezone.utc),
        risk_assessments=risk_assessments,
        metabolizer_phenotypes=metabolizer_phenotypes,
        carrier_statuses=carrier_statuses,
        trait_associations=trait_associations,
        polygenic_risk_scores=polygenic_risk_scores,
        summary=summary,
        database_versions=match_result.database_versions,
    )


def run_analysis_from_dict(
    payload: Dict[str, Any], options: Optional[Dict[str, Any]] = None
) -> AnalysisResult:
    """Validate a raw match-result document and analyze it."""
    return analyze_genome(parse_match_result(payload), parse_options(options))
