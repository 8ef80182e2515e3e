"""
Annotation Index - rsID lookup over the annotated variants of a match result.
"""

from typing import Dict, Iterable

from .models import AnnotatedVariant


def build_annotation_index(variants: Iterable[AnnotatedVariant]) -> Dict[str, AnnotatedVariant]:
    """
    Map rsID -> annotated variant in one pass.
    Duplicate rsIDs overwrite earlier entries (last one wins).
    """
    index: Dict[str, AnnotatedVariant] = {}
    for variant in variants:
        index[variant.snp.rsid] = variant
    return index


def genotype_for(index: Dict[str, AnnotatedVariant], rsid: str):
    """Genotype string for `rsid`, or None when the variant is absent."""
    variant = index.get(rsid)
    if variant is None:
        return None
    return variant.snp.genotype
