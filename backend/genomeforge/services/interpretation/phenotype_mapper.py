"""
Phenotype Mapper - Marker-based diplotype calling and phenotype determination.

Star alleles are detected from a small set of marker rsIDs per gene; this is
a heuristic, not full haplotype resolution. The two called alleles are scored
with CPIC-style activity values and the summed score is mapped to a
metabolizer phenotype.
"""

from typing import Dict, List, Optional, Tuple
import logging

from .annotation_index import genotype_for
from .genotype import count_allele
from .models import AnnotatedVariant, MetabolizerStatus
from .reference_tables import get_allele_activity, get_star_alleles

logger = logging.getLogger(__name__)

REFERENCE_ALLELE = "*1"


class DiplotypeResolver:
    """Calls diplotypes from marker genotypes held in an annotation index."""

    def __init__(self, index: Dict[str, AnnotatedVariant]):
        self.index = index

    def detect_alleles(self, gene: str) -> Optional[List[str]]:
        """
        Star alleles detected for `gene`, one entry per copy, in table order.
        Returns None when the gene has no star-allele definitions.
        """
        definitions = get_star_alleles(gene)
        if definitions is None:
            return None

        detected: List[str] = []
        for allele, markers in definitions.items():
            copies = max(
                (count_allele(genotype_for(self.index, m.rsid), m.risk_allele) for m in markers),
                default=0,
            )
            detected.extend([allele] * copies)
        return detected

    def resolve_diplotype(self, gene: str) -> Optional[str]:
        """
        Main entry point for diplotype calling.
        Returns e.g. "*1/*4", or None for genes without definitions.
        """
        detected = self.detect_alleles(gene)
        if detected is None:
            return None

        if len(detected) > 2:
            logger.debug("%s: %d alleles detected, keeping %s", gene, len(detected), detected[:2])
        alleles = detected[:2]
        while len(alleles) < 2:
            alleles.append(REFERENCE_ALLELE)
        return "/".join(sorted(alleles))


def split_diplotype(diplotype: str) -> Tuple[str, str]:
    first, second = diplotype.split("/", 1)
    return first, second


def calculate_activity_score(gene: str, diplotype: Optional[str]) -> Optional[float]:
    """Sum of both alleles' activity values; unknown alleles count 1.0."""
    if diplotype is None:
        return None
    return sum(get_allele_activity(gene, allele) for allele in split_diplotype(diplotype))


def activity_score_to_phenotype(score: Optional[float]) -> MetabolizerStatus:
    """Map total activity score to metabolizer status."""
    if score is None:
        return MetabolizerStatus.UNKNOWN
    if score == 0:
        return MetabolizerStatus.POOR
    elif score < 1.0:
        return MetabolizerStatus.INTERMEDIATE
    elif score <= 2.0:
        return MetabolizerStatus.NORMAL
    elif score <= 2.5:
        return MetabolizerStatus.RAPID
    else:
        return MetabolizerStatus.ULTRARAPID


class PhenotypeMapper:
    """High-level interface for phenotype mapping."""

    def __init__(self, index: Dict[str, AnnotatedVariant]):
        self.resolver = DiplotypeResolver(index)

    def process_gene(self, gene: str) -> Tuple[Optional[str], Optional[float], MetabolizerStatus]:
        """Return (diplotype, activity score, phenotype) for one gene."""
        diplotype = self.resolver.resolve_diplotype(gene)
        score = calculate_activity_score(gene, diplotype)
        phenotype = activity_score_to_phenotype(score)
        logger.debug("%s: diplotype=%s activity=%s phenotype=%s", gene, diplotype, score, phenotype.value)
        return diplotype, score, phenotype
