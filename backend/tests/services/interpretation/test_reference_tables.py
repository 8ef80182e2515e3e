"""
Unit tests for the immutable reference tables.
"""

import pytest
from genomeforge.services.interpretation.reference_tables import (
    METABOLIZER_PHENOTYPES,
    PHARMACOGENES,
    PRS_MODELS,
    STAR_ALLELE_MARKERS,
    get_phenotype_label,
    supported_genes,
)


class TestConstants:

    def test_standard_pharmacogenes(self):
        for gene in ("CYP2D6", "CYP2C19", "CYP2C9", "SLCO1B1"):
            assert gene in PHARMACOGENES
        assert len(PHARMACOGENES) > 10

    def test_star_allele_genes_are_pharmacogenes(self):
        assert set(supported_genes()) <= set(PHARMACOGENES)

    def test_metabolizer_phenotype_labels(self):
        assert "CYP2D6" in METABOLIZER_PHENOTYPES
        assert METABOLIZER_PHENOTYPES["CYP2D6"]["*1/*1"] == "Normal Metabolizer"
        assert METABOLIZER_PHENOTYPES["CYP2D6"]["*4/*4"] == "Poor Metabolizer"

    def test_tables_are_read_only(self):
        with pytest.raises(TypeError):
            METABOLIZER_PHENOTYPES["CYP2D6"]["*1/*1"] = "Poor Metabolizer"
        with pytest.raises(TypeError):
            STAR_ALLELE_MARKERS["CYP2D6"] = {}

    def test_prs_models_have_five_variants(self):
        assert all(len(m.variants) == 5 for m in PRS_MODELS)
        assert len({m.model_id for m in PRS_MODELS}) == len(PRS_MODELS)


class TestPhenotypeLabel:

    def test_tabulated_diplotype(self):
        assert get_phenotype_label("CYP2C19", "*1/*17") == "Rapid Metabolizer"

    def test_untabulated_diplotype(self):
        assert get_phenotype_label("CYP2D6", "*10/*41") is None
        assert get_phenotype_label("VKORC1", "*1/*1") is None

    def test_no_diplotype(self):
        assert get_phenotype_label("CYP2D6", None) is None
