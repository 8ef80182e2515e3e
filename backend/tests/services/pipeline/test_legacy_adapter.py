"""
Tests for conversion to the legacy result shape.
"""

from genomeforge.services.interpretation.models import (
    CarrierInheritance,
    CarrierStatus,
    CarrierType,
    MetabolizerStatus,
)
from genomeforge.services.pipeline.analysis_pipeline import analyze_genome
from genomeforge.services.pipeline.legacy_adapter import (
    analyze_legacy,
    legacy_phenotype_label,
    to_legacy_result,
)


class TestLegacyAdapter:

    def test_phenotypes_flatten_drugs(self, make_match_result, make_variant, make_snp, make_pharmgkb):
        variant = make_variant(snp=make_snp(rsid="rs3892097", genotype="AA"), pharmgkb=make_pharmgkb())

        legacy = analyze_legacy(make_match_result([variant]))

        phenotype = legacy.metabolizer_phenotypes[0]
        assert phenotype.gene == "CYP2D6"
        assert phenotype.phenotype == "poor"
        assert phenotype.activity_score == 0.0
        assert phenotype.affected_drugs == ["codeine"]
        assert phenotype.recommendations[0].startswith("codeine: ")

    def test_phenotype_label_from_table(self, make_match_result, make_variant, make_snp, make_pharmgkb):
        variant = make_variant(snp=make_snp(rsid="rs3892097", genotype="AA"), pharmgkb=make_pharmgkb())

        phenotype = analyze_legacy(make_match_result([variant])).metabolizer_phenotypes[0]

        assert phenotype.phenotype_label == "Poor Metabolizer"

    def test_phenotype_label_fallback(self):
        assert legacy_phenotype_label("CYP2D6", "*10/*41", MetabolizerStatus.INTERMEDIATE) == "Intermediate Metabolizer"
        assert legacy_phenotype_label("VKORC1", None, MetabolizerStatus.UNKNOWN) == "Indeterminate"

    def test_tabulated_label_keeps_legacy_wording(self):
        """*1/*4 keeps its historical intermediate label though activity scoring calls it normal"""
        assert legacy_phenotype_label("CYP2D6", "*1/*4", MetabolizerStatus.NORMAL) == "Intermediate Metabolizer"

    def test_summary_counts(self, make_match_result, make_variant, make_clinvar):
        variant = make_variant(clinvar=make_clinvar(), impact_score=4.5)

        legacy = analyze_legacy(make_match_result([variant]))

        assert legacy.summary.total_risks == 1
        assert legacy.summary.high_risk_count == 1
        assert legacy.summary.carrier_count == 1
        assert legacy.carrier_statuses[0].inheritance == "autosomal_recessive"

    def test_mitochondrial_maps_to_other(self, make_match_result):
        result = analyze_genome(make_match_result())
        carrier = CarrierStatus(
            gene="MT-ND4",
            condition="Leber Hereditary Optic Neuropathy",
            inheritance=CarrierInheritance.MITOCHONDRIAL,
            carrier_type=CarrierType.HETEROZYGOUS,
            partner_risk="Maternally inherited.",
        )

        legacy = to_legacy_result(result.model_copy(update={"carrier_statuses": [carrier]}))

        assert legacy.carrier_statuses[0].inheritance == "other"
