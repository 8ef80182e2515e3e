"""
Key Findings Aggregator - A short, prioritized digest across all engines.

Findings are appended in a fixed order (high risks, critical drugs, carriers,
elevated polygenic scores, increased traits) and the list is truncated to
the configured maximum without re-sorting.
"""

from typing import List, Optional

from .config import InterpretationConfig, get_config
from .models import (
    CarrierStatus,
    ConfidenceLevel,
    DrugSeverity,
    FindingPriority,
    FindingType,
    KeyFinding,
    MetabolizerPhenotype,
    PolygenicRiskScore,
    PRSRiskCategory,
    RiskAssessment,
    RiskLevel,
    TraitAssociation,
    TraitInterpretation,
)


def generate_key_findings(
    risk_assessments: List[RiskAssessment],
    metabolizer_phenotypes: List[MetabolizerPhenotype],
    carrier_statuses: List[CarrierStatus],
    polygenic_risk_scores: List[PolygenicRiskScore],
    trait_associations: List[TraitAssociation],
    config: Optional[InterpretationConfig] = None,
) -> List[KeyFinding]:
    cfg = (config or get_config()).key_findings
    findings: List[KeyFinding] = []

    for risk in risk_assessments:
        if risk.risk_level != RiskLevel.HIGH:
            continue
        findings.append(KeyFinding(
            type=FindingType.PATHOGENIC,
            priority=FindingPriority.URGENT,
            title=f"High risk: {risk.condition}",
            description=risk.explanation,
            related_item=risk.gene,
        ))

    for phenotype in metabolizer_phenotypes:
        critical = [d for d in phenotype.affected_drugs if d.severity == DrugSeverity.CRITICAL]
        for drug in critical[:cfg.max_critical_drugs_per_gene]:
            findings.append(KeyFinding(
                type=FindingType.DRUG,
                priority=FindingPriority.URGENT,
                title=f"{drug.drug_name}: {phenotype.phenotype.value} metabolizer ({phenotype.gene})",
                description=drug.recommendation,
                related_item=phenotype.gene,
            ))

    for carrier in carrier_statuses[:cfg.max_carriers]:
        findings.append(KeyFinding(
            type=FindingType.CARRIER,
            priority=FindingPriority.IMPORTANT,
            title=f"Carrier: {carrier.condition}",
            description=carrier.partner_risk,
            related_item=carrier.gene,
        ))

    elevated = [
        s for s in polygenic_risk_scores
        if s.risk_category in (PRSRiskCategory.VERY_HIGH, PRSRiskCategory.HIGH)
    ]
    for score in elevated[:cfg.max_polygenic_scores]:
        findings.append(KeyFinding(
            type=FindingType.PRS,
            priority=FindingPriority.IMPORTANT,
            title=f"Elevated polygenic risk: {score.trait}",
            description=(
                f"Polygenic score at the {score.percentile}th percentile "
                f"({score.variants_used} of {score.variants_used + score.variants_missing} model variants)."
            ),
            related_item=score.trait,
        ))

    increased = [
        t for t in trait_associations
        if t.interpretation == TraitInterpretation.INCREASED and t.confidence != ConfidenceLevel.LOW
    ]
    for trait in increased[:cfg.max_traits]:
        findings.append(KeyFinding(
            type=FindingType.TRAIT,
            priority=FindingPriority.INFORMATIONAL,
            title=f"Increased association: {trait.trait}",
            description=(
                f"{trait.variant_count} association(s) suggest increased predisposition "
                f"(risk score {trait.risk_score:.2f}, {trait.confidence.value} confidence)."
            ),
            related_item=trait.trait,
        ))

    return findings[:cfg.max_findings]
