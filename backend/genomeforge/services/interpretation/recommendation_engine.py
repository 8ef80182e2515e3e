"""
Recommendation Engine - Drug recommendations for a metabolizer phenotype.

Features:
- Therapeutic category by drug-name keyword
- Severity from evidence level and phenotype
- Phenotype-specific recommendation wording
- Deterministic ordering by severity then evidence strength
"""

from typing import Dict, List, Optional

from .models import DrugGeneInteraction, DrugRecommendation, DrugSeverity, MetabolizerStatus
from .reference_tables import DRUG_CATEGORIES, EVIDENCE_LEVEL_RANK, UNRANKED_EVIDENCE


# ============================================================================
# Phenotype Templates
# ============================================================================

PHENOTYPE_RECOMMENDATIONS: Dict[MetabolizerStatus, str] = {
    MetabolizerStatus.POOR: (
        "Poor metabolizer: enzyme activity is greatly reduced. Consider an alternative drug "
        "or a substantially reduced dose per CPIC guidance."
    ),
    MetabolizerStatus.INTERMEDIATE: (
        "Intermediate metabolizer: enzyme activity is reduced. A dose adjustment or closer "
        "monitoring may be needed."
    ),
    MetabolizerStatus.NORMAL: (
        "Normal metabolizer: standard dosing is expected to be appropriate."
    ),
    MetabolizerStatus.RAPID: (
        "Rapid metabolizer: enzyme activity is increased. Monitor for reduced efficacy or "
        "altered active-metabolite levels."
    ),
    MetabolizerStatus.ULTRARAPID: (
        "Ultrarapid metabolizer: enzyme activity is greatly increased. Risk of treatment failure "
        "or toxicity; consider an alternative drug per CPIC guidance."
    ),
    MetabolizerStatus.UNKNOWN: (
        "Metabolizer status could not be determined from the available markers. "
        "Discuss with a pharmacist before prescribing."
    ),
}

SEVERITY_RANK: Dict[DrugSeverity, int] = {
    DrugSeverity.CRITICAL: 0,
    DrugSeverity.MODERATE: 1,
    DrugSeverity.INFORMATIONAL: 2,
}


def categorize_drug(drug_name: str) -> Optional[str]:
    """Therapeutic category of the first matching keyword, or None."""
    name = drug_name.lower()
    for category, keywords in DRUG_CATEGORIES:
        if any(kw in name for kw in keywords):
            return category
    return None


def determine_severity(evidence_level: str, phenotype: MetabolizerStatus) -> DrugSeverity:
    level = evidence_level.strip().upper()
    if level in ("1A", "1B") and phenotype in (MetabolizerStatus.POOR, MetabolizerStatus.ULTRARAPID):
        return DrugSeverity.CRITICAL
    if level.startswith("2") or phenotype in (MetabolizerStatus.INTERMEDIATE, MetabolizerStatus.RAPID):
        return DrugSeverity.MODERATE
    return DrugSeverity.INFORMATIONAL


def evidence_rank(evidence_level: str) -> int:
    return EVIDENCE_LEVEL_RANK.get(evidence_level.strip().upper(), UNRANKED_EVIDENCE)


class RecommendationEngine:
    """Builds the sorted drug recommendation list for one gene."""

    def __init__(self, templates: Optional[Dict[MetabolizerStatus, str]] = None):
        self.templates = templates or PHENOTYPE_RECOMMENDATIONS

    def recommendation_text(self, interaction: DrugGeneInteraction, phenotype: MetabolizerStatus) -> str:
        template = self.templates[phenotype]
        annotation = interaction.annotation.strip()
        if annotation:
            return f"{annotation} {template}"
        return template

    def build(self, interaction: DrugGeneInteraction, phenotype: MetabolizerStatus) -> DrugRecommendation:
        return DrugRecommendation(
            drug_name=interaction.drug_name,
            generic_name=interaction.drug_name.lower(),
            recommendation=self.recommendation_text(interaction, phenotype),
            severity=determine_severity(interaction.evidence_level, phenotype),
            evidence_level=interaction.evidence_level,
            has_fda_label=bool(interaction.fda_label),
            cpic_level=interaction.cpic_level,
            therapeutic_category=categorize_drug(interaction.drug_name),
        )

    def recommend(
        self, interactions: List[DrugGeneInteraction], phenotype: MetabolizerStatus
    ) -> List[DrugRecommendation]:
        """Deduplicate by drug name (first wins), then sort by severity and evidence."""
        seen = set()
        drugs: List[DrugRecommendation] = []
        for interaction in interactions:
            if interaction.drug_name in seen:
                continue
            seen.add(interaction.drug_name)
            drugs.append(self.build(interaction, phenotype))

        return sorted(drugs, key=lambda d: (SEVERITY_RANK[d.severity], evidence_rank(d.evidence_level)))
