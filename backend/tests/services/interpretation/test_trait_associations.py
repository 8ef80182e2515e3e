"""
Unit tests for GWAS trait association scoring.
Tests effect sizes, the logistic risk score, interpretation and confidence.
"""

import math

import pytest
from genomeforge.services.interpretation.models import (
    ConfidenceLevel,
    TraitCategory,
    TraitInterpretation,
)
from genomeforge.services.interpretation.trait_associations import (
    analyze_trait_associations,
    association_effect,
    calculate_risk_score,
    categorize_trait,
    determine_confidence,
    interpret_risk,
    sigmoid,
)


class TestCategorizeTrait:

    @pytest.mark.parametrize("trait,expected", [
        ("Blood Pressure", TraitCategory.CARDIOVASCULAR),
        ("Coronary Artery Disease", TraitCategory.CARDIOVASCULAR),
        ("Type 2 Diabetes", TraitCategory.METABOLIC),
        ("Breast Cancer", TraitCategory.CANCER),
        ("Alzheimer's Disease", TraitCategory.NEUROLOGICAL),
        ("Rheumatoid Arthritis", TraitCategory.AUTOIMMUNE),
        ("Height", TraitCategory.PHYSICAL_TRAIT),
        ("Caffeine Consumption", TraitCategory.RESPONSE),
        ("Asthma", TraitCategory.DISEASE),
        ("Educational Attainment", TraitCategory.OTHER),
    ])
    def test_categories(self, trait, expected):
        assert categorize_trait(trait) == expected


class TestAssociationEffect:

    def test_copies_times_log_odds(self, make_gwas):
        assoc = make_gwas(or_beta=1.4, risk_allele_copies=2)
        assert association_effect(assoc) == pytest.approx(2 * math.log(1.4))

    def test_negative_beta_is_inverted(self, make_gwas):
        assoc = make_gwas(or_beta=-2.0, risk_allele_copies=1)
        assert association_effect(assoc) == pytest.approx(math.log(0.5))

    def test_zero_beta_has_no_effect(self, make_gwas):
        assert association_effect(make_gwas(or_beta=0.0, risk_allele_copies=2)) == 0.0

    def test_flag_only(self, make_gwas):
        assert association_effect(make_gwas(or_beta=None, has_risk_allele=True)) == 0.5
        assert association_effect(make_gwas(or_beta=None, has_risk_allele=False)) == -0.5

    def test_nothing_known(self, make_gwas):
        assert association_effect(make_gwas()) == 0.0


class TestRiskScore:

    def test_sigmoid_bounds(self):
        assert sigmoid(0) == 0.5
        assert sigmoid(1000) == pytest.approx(1.0)
        assert sigmoid(-1000) == pytest.approx(0.0)

    def test_single_entry(self, make_gwas):
        """rs7903146 TT, OR 1.4 -> sigmoid(2 ln 1.4) ~ 0.662"""
        assoc = make_gwas(or_beta=1.4, p_value=1e-50, risk_allele_copies=2, has_risk_allele=True)
        assert calculate_risk_score([assoc]) == pytest.approx(1.96 / 2.96)

    def test_weighted_by_significance(self, make_gwas):
        strong = make_gwas(p_value=1e-20, or_beta=2.0, risk_allele_copies=1)
        weak = make_gwas(p_value=1e-2, or_beta=0.5, risk_allele_copies=1)

        expected_raw = (20 * math.log(2.0) + 2 * math.log(0.5)) / 22
        assert calculate_risk_score([strong, weak]) == pytest.approx(sigmoid(expected_raw))

    def test_zero_total_weight_is_neutral(self, make_gwas):
        assoc = make_gwas(p_value=1.0, or_beta=3.0, risk_allele_copies=2)
        assert calculate_risk_score([assoc]) == 0.5


class TestInterpretation:

    def test_unknown_without_risk_allele_flag(self, make_gwas):
        assoc = make_gwas(risk_allele_copies=2)
        assert interpret_risk(0.9, [assoc]) == TraitInterpretation.UNKNOWN

    @pytest.mark.parametrize("score,expected", [
        (0.65, TraitInterpretation.INCREASED),
        (0.64, TraitInterpretation.TYPICAL),
        (0.36, TraitInterpretation.TYPICAL),
        (0.35, TraitInterpretation.DECREASED),
    ])
    def test_thresholds(self, make_gwas, score, expected):
        assert interpret_risk(score, [make_gwas(has_risk_allele=True)]) == expected


class TestConfidence:

    def test_three_significant_is_high(self, make_gwas):
        assocs = [make_gwas(p_value=1e-12) for _ in range(3)]
        assert determine_confidence(assocs) == ConfidenceLevel.HIGH

    def test_one_significant_is_moderate(self, make_gwas):
        assert determine_confidence([make_gwas(p_value=1e-11)]) == ConfidenceLevel.MODERATE

    def test_three_entries_is_moderate(self, make_gwas):
        assocs = [make_gwas(p_value=1e-5) for _ in range(3)]
        assert determine_confidence(assocs) == ConfidenceLevel.MODERATE

    def test_boundary_p_value_is_not_significant(self, make_gwas):
        assert determine_confidence([make_gwas(p_value=1e-10)]) == ConfidenceLevel.LOW


class TestAnalyzeTraitAssociations:
    """Test grouping and ordering over a match result."""

    def test_tcf7l2_increased_risk(self, make_match_result, make_variant, make_snp, make_gwas):
        """GIVEN rs7903146 TT with OR 1.4 WHEN analyzed THEN type 2 diabetes risk is increased"""
        variant = make_variant(
            snp=make_snp(rsid="rs7903146", chromosome="10", genotype="TT"),
            gwas=[make_gwas(p_value=1e-50, has_risk_allele=True, risk_allele_copies=2, user_genotype="TT")],
            category="neutral",
        )

        traits = analyze_trait_associations(make_match_result([variant]))

        assert len(traits) == 1
        trait = traits[0]
        assert trait.trait == "Type 2 Diabetes"
        assert trait.category == TraitCategory.METABOLIC
        assert trait.variant_count == 1
        assert trait.risk_score == pytest.approx(0.662, abs=1e-3)
        assert trait.interpretation == TraitInterpretation.INCREASED
        assert trait.confidence == ConfidenceLevel.MODERATE

    def test_grouped_by_trait_across_variants(self, make_match_result, make_variant, make_snp, make_gwas):
        variants = [
            make_variant(snp=make_snp(rsid="rs1"), gwas=[make_gwas(rsid="rs1")]),
            make_variant(snp=make_snp(rsid="rs2"), gwas=[make_gwas(rsid="rs2"), make_gwas(rsid="rs2", trait="Height")]),
        ]

        traits = analyze_trait_associations(make_match_result(variants))

        assert [t.trait for t in traits] == ["Type 2 Diabetes", "Height"]
        assert traits[0].variant_count == 2

    def test_ties_ordered_by_distance_from_average(self, make_match_result, make_variant, make_snp, make_gwas):
        variants = [
            make_variant(snp=make_snp(rsid="rs1"),
                         gwas=[make_gwas(rsid="rs1", trait="Height", has_risk_allele=True)]),
            make_variant(snp=make_snp(rsid="rs2"),
                         gwas=[make_gwas(rsid="rs2", trait="Asthma", risk_allele_copies=2, or_beta=3.0)]),
        ]

        traits = analyze_trait_associations(make_match_result(variants))

        assert [t.trait for t in traits] == ["Asthma", "Height"]

    def test_empty_input(self, make_match_result):
        assert analyze_trait_associations(make_match_result()) == []
