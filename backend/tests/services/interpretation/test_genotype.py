"""
Unit tests for genotype parsing helpers.
"""

import pytest
from genomeforge.services.interpretation.genotype import (
    Zygosity,
    allele_tokens,
    count_allele,
    is_x_chromosome,
    zygosity,
)


class TestAlleleTokens:
    """Test splitting genotype strings into two allele tokens."""

    @pytest.mark.parametrize("genotype,expected", [
        ("AG", ("A", "G")),
        ("tt", ("T", "T")),
        ("A/G", ("A", "G")),
        ("A|G", ("A", "G")),
        ("A G", ("A", "G")),
        ("DI", ("D", "I")),
        ("AAT/A", ("AAT", "A")),
    ])
    def test_valid_genotypes(self, genotype, expected):
        assert allele_tokens(genotype) == expected

    @pytest.mark.parametrize("genotype", ["", None, "--", "00", "A", "AGT", "A/G/T"])
    def test_unparseable_genotypes(self, genotype):
        assert allele_tokens(genotype) is None


class TestZygosity:

    def test_homozygous(self):
        assert zygosity("TT") == Zygosity.HOMOZYGOUS

    def test_heterozygous(self):
        assert zygosity("C/T") == Zygosity.HETEROZYGOUS

    def test_no_call_is_indeterminate(self):
        """A '--' no-call has no zygosity"""
        assert zygosity("--") == Zygosity.INDETERMINATE

    def test_haploid_call_is_indeterminate(self):
        assert zygosity("A") == Zygosity.INDETERMINATE


class TestCountAllele:

    def test_counts_both_copies(self):
        assert count_allele("TT", "T") == 2

    def test_counts_one_copy(self):
        assert count_allele("CT", "T") == 1

    def test_case_insensitive(self):
        assert count_allele("ct", "T") == 1

    def test_absent_allele(self):
        assert count_allele("CC", "T") == 0

    def test_missing_inputs(self):
        assert count_allele(None, "T") == 0
        assert count_allele("TT", None) == 0
        assert count_allele("--", "T") == 0


def test_x_chromosome_names():
    assert is_x_chromosome("X")
    assert is_x_chromosome("chrX")
    assert is_x_chromosome("23")
    assert not is_x_chromosome("7")
