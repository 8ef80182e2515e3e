"""
Genotype helpers shared by the engines.

Genotype strings arrive in consumer-array form ("AG", "TT", "DI") or as
separated tokens ("A/G", "A|G", "A G"). Anything that does not yield exactly
two allele tokens has indeterminate zygosity and counts zero alleles.
"""

from __future__ import annotations

import re
from enum import Enum
from typing import Optional, Tuple

_SEPARATORS = re.compile(r"[/|\s]+")
_NO_CALLS = {"--", "00", ".."}


class Zygosity(str, Enum):
    HOMOZYGOUS = "homozygous"
    HETEROZYGOUS = "heterozygous"
    INDETERMINATE = "indeterminate"


def allele_tokens(genotype: Optional[str]) -> Optional[Tuple[str, str]]:
    """Split a genotype into its two allele tokens, or None if it cannot be."""
    if not genotype:
        return None
    text = genotype.strip().upper()
    if text in _NO_CALLS:
        return None

    if _SEPARATORS.search(text):
        parts = [p for p in _SEPARATORS.split(text) if p]
    elif len(text) == 2:
        parts = [text[0], text[1]]
    else:
        return None

    if len(parts) != 2:
        return None
    return parts[0], parts[1]


def zygosity(genotype: Optional[str]) -> Zygosity:
    tokens = allele_tokens(genotype)
    if tokens is None:
        return Zygosity.INDETERMINATE
    if tokens[0] == tokens[1]:
        return Zygosity.HOMOZYGOUS
    return Zygosity.HETEROZYGOUS


def count_allele(genotype: Optional[str], allele: Optional[str]) -> int:
    """Copies of `allele` in the genotype, capped at 2."""
    if not allele:
        return 0
    tokens = allele_tokens(genotype)
    if tokens is None:
        return 0
    target = allele.strip().upper()
    return min(sum(1 for t in tokens if t == target), 2)


def is_x_chromosome(chromosome: str) -> bool:
    return chromosome.strip().upper() in ("X", "CHRX", "23")
