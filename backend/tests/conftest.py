"""
Shared test factories for the interpretation engine.
Each factory fixture returns a builder that accepts field overrides.
"""

import pytest

from genomeforge.services.interpretation.config import reset_config
from genomeforge.services.interpretation.models import (
    AnnotatedVariant,
    ClinVarAnnotation,
    GWASAssociation,
    MatchResult,
    PharmGKBAnnotation,
    SNP,
)


def _snp(**overrides) -> SNP:
    data = {
        "rsid": "rs123456",
        "chromosome": "1",
        "position": 12345,
        "genotype": "AG",
        "allele1": "A",
        "allele2": "G",
    }
    data.update(overrides)
    return SNP(**data)


def _clinvar(**overrides) -> ClinVarAnnotation:
    data = {
        "rsid": "rs123456",
        "vcv": "VCV000123456",
        "gene": "BRCA1",
        "gene_id": 672,
        "clinical_significance": "pathogenic",
        "review_status": 3,
        "conditions": [{"name": "Breast Cancer", "traits": ["cancer"]}],
    }
    data.update(overrides)
    return ClinVarAnnotation(**data)


def _pharmgkb(**overrides) -> PharmGKBAnnotation:
    data = {
        "rsid": "rs3892097",
        "gene": "CYP2D6",
        "drugs": [
            {
                "drug_name": "codeine",
                "drug_id": "PA449088",
                "evidence_level": "1A",
                "phenotype_category": "Efficacy",
                "significance": "Yes",
                "annotation": "Poor metabolizers may experience lack of efficacy.",
                "fda_label": True,
                "cpic_level": "A",
            }
        ],
        "has_cpic_guideline": True,
        "has_dpwg_guideline": True,
    }
    data.update(overrides)
    return PharmGKBAnnotation(**data)


def _gwas(**overrides) -> GWASAssociation:
    data = {
        "rsid": "rs7903146",
        "trait": "Type 2 Diabetes",
        "p_value": 1e-15,
        "or_beta": 1.4,
        "risk_allele": "T",
        "study_accession": "GCST001234",
        "pubmed_id": "12345678",
    }
    data.update(overrides)
    return GWASAssociation(**data)


def _variant(**overrides) -> AnnotatedVariant:
    data = {
        "snp": _snp(),
        "impact_score": 3,
        "category": "pathogenic",
    }
    data.update(overrides)
    return AnnotatedVariant(**data)


def _match_result(variants=None, **overrides) -> MatchResult:
    variants = variants or []
    data = {
        "genome_id": "test-genome-123",
        "total_snps": 700000,
        "matched_snps": len(variants),
        "annotated_snps": variants,
        "build_version": "GRCh38",
        "database_versions": {"clinvar": "2024-01", "pharmgkb": "2024-01", "gwas": "2024-01"},
    }
    data.update(overrides)
    return MatchResult(**data)


@pytest.fixture
def make_snp():
    return _snp


@pytest.fixture
def make_clinvar():
    return _clinvar


@pytest.fixture
def make_pharmgkb():
    return _pharmgkb


@pytest.fixture
def make_gwas():
    return _gwas


@pytest.fixture
def make_variant():
    return _variant


@pytest.fixture
def make_match_result():
    return _match_result


@pytest.fixture(autouse=True)
def default_config():
    """Every test starts and ends with the default configuration."""
    reset_config()
    yield
    reset_config()
