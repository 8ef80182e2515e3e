"""
Legacy Adapter - Converts an AnalysisResult to the older result shape.

Pure structural conversion: no scoring happens here. The legacy carrier
inheritance enum has no mitochondrial member, so that value is reported as
"other".
"""
from typing import List, Literal, Optional

from pydantic import BaseModel, Field

from genomeforge.services.interpretation.models import (
    AnalysisOptions,
    AnalysisResult,
    AnnotatedVariant,
    CarrierInheritance,
    MatchResult,
    MetabolizerStatus,
    RiskLevel,
)
from genomeforge.services.interpretation.reference_tables import get_phenotype_label
from genomeforge.services.pipeline.analysis_pipeline import analyze_genome


STATUS_LABELS = {
    MetabolizerStatus.ULTRARAPID: "Ultrarapid Metabolizer",
    MetabolizerStatus.RAPID: "Rapid Metabolizer",
    MetabolizerStatus.NORMAL: "Normal Metabolizer",
    MetabolizerStatus.INTERMEDIATE: "Intermediate Metabolizer",
    MetabolizerStatus.POOR: "Poor Metabolizer",
    MetabolizerStatus.UNKNOWN: "Indeterminate",
}


class LegacyRiskAssessment(BaseModel):
    condition: str
    gene: str
    risk_level: RiskLevel
    confidence: float
    variants: List[AnnotatedVariant]
    explanation: str


class LegacyMetabolizerPhenotype(BaseModel):
    gene: str
    phenotype: str
    phenotype_label: str
    activity_score: Optional[float] = None
    affected_drugs: List[str] = Field(default_factory=list)
    recommendations: List[str] = Field(default_factory=list)


class LegacyCarrierStatus(BaseModel):
    gene: str
    condition: str
    inheritance: Literal["autosomal_recessive", "x_linked", "other"]
    partner_risk: str


class LegacyAnalysisSummary(BaseModel):
    total_risks: int
    high_risk_count: int
    moderate_risk_count: int
    pharmacogene_count: int
    carrier_count: int


class LegacyAnalysisResult(BaseModel):
    risk_assessments: List[LegacyRiskAssessment]
    metabolizer_phenotypes: List[LegacyMetabolizerPhenotype]
    carrier_statuses: List[LegacyCarrierStatus]
    summary: LegacyAnalysisSummary


def legacy_phenotype_label(gene: str, diplotype: Optional[str], phenotype: MetabolizerStatus) -> str:
    """Tabulated label for the diplotype, else one derived from the phenotype."""
    return get_phenotype_label(gene, diplotype) or STATUS_LABELS[phenotype]


def _legacy_inheritance(inheritance: CarrierInheritance) -> str:
    if inheritance == CarrierInheritance.MITOCHONDRIAL:
        return "other"
    return inheritance.value


def to_legacy_result(result: AnalysisResult) -> LegacyAnalysisResult:
    return LegacyAnalysisResult(
        risk_assessments=[
            LegacyRiskAssessment(
                condition=r.condition,
                gene=r.gene,
                risk_level=r.risk_level,
                confidence=r.confidence,
                variants=r.variants,
                explanation=r.explanation,
            )
            for r in result.risk_assessments
        ],
        metabolizer_phenotypes=[
            LegacyMetabolizerPhenotype(
                gene=p.gene,
                phenotype=p.phenotype.value,
                phenotype_label=legacy_phenotype_label(p.gene, p.diplotype, p.phenotype),
                activity_score=p.activity_score,
                affected_drugs=[d.drug_name for d in p.affected_drugs],
                recommendations=[f"{d.drug_name}: {d.recommendation}" for d in p.affected_drugs],
            )
            for p in result.metabolizer_phenotypes
        ],
        carrier_statuses=[
            LegacyCarrierStatus(
                gene=c.gene,
                condition=c.condition,
                inheritance=_legacy_inheritance(c.inheritance),
                partner_risk=c.partner_risk,
            )
            for c in result.carrier_statuses
        ],
        summary=LegacyAnalysisSummary(
            total_risks=len(result.risk_assessments),
            high_risk_count=result.summary.high_risk_count,
            moderate_risk_count=result.summary.moderate_risk_count,
            pharmacogene_count=result.summary.pharmacogene_count,
            carrier_count=result.summary.carrier_count,
        ),
    )


def analyze_legacy(match_result: MatchResult) -> LegacyAnalysisResult:
    """Backwards-compatible entry point for consumers of the legacy shape."""
    return to_legacy_result(analyze_genome(match_result, AnalysisOptions()))
