"""
Pharmacogenomics Engine - Metabolizer phenotypes and drug recommendations per gene.
"""

from typing import Dict, List, Optional
import logging

from .annotation_index import build_annotation_index
from .models import (
    AnnotatedVariant,
    CpicStatus,
    DrugGeneInteraction,
    MatchResult,
    MetabolizerPhenotype,
)
from .phenotype_mapper import PhenotypeMapper
from .recommendation_engine import RecommendationEngine

logger = logging.getLogger(__name__)


def group_by_pharmacogene(variants: List[AnnotatedVariant]) -> Dict[str, List[AnnotatedVariant]]:
    groups: Dict[str, List[AnnotatedVariant]] = {}
    for annotated in variants:
        if annotated.pharmgkb is None:
            continue
        groups.setdefault(annotated.pharmgkb.gene, []).append(annotated)
    return groups


def analyze_pharmacogenomics(
    match_result: MatchResult,
    index: Optional[Dict[str, AnnotatedVariant]] = None,
) -> List[MetabolizerPhenotype]:
    """Determine metabolizer phenotypes for every pharmacogene in the input."""
    if index is None:
        index = build_annotation_index(match_result.annotated_snps)

    mapper = PhenotypeMapper(index)
    recommender = RecommendationEngine()
    phenotypes: List[MetabolizerPhenotype] = []

    for gene, variants in group_by_pharmacogene(match_result.annotated_snps).items():
        diplotype, activity_score, phenotype = mapper.process_gene(gene)

        interactions: List[DrugGeneInteraction] = [
            drug for v in variants for drug in v.pharmgkb.drugs
        ]
        has_cpic = any(v.pharmgkb.has_cpic_guideline for v in variants)

        phenotypes.append(MetabolizerPhenotype(
            gene=gene,
            diplotype=diplotype,
            phenotype=phenotype,
            activity_score=activity_score,
            affected_drugs=recommender.recommend(interactions, phenotype),
            cpic_status=CpicStatus.AVAILABLE if has_cpic else CpicStatus.NOT_AVAILABLE,
            contributing_variants=[v.snp.rsid for v in variants],
        ))

    logger.debug("Analyzed %d pharmacogene(s)", len(phenotypes))
    return phenotypes
