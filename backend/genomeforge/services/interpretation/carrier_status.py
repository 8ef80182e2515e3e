"""
Carrier Status Detector - Flags heterozygous pathogenic variants as carrier states.

Only heterozygous genotypes qualify; homozygous or indeterminate genotypes
are never reported as carriers.
"""

from typing import List, Set, Tuple

from .genotype import Zygosity, is_x_chromosome, zygosity
from .models import (
    CarrierInheritance,
    CarrierStatus,
    CarrierType,
    ClinicalSignificance,
    MatchResult,
)

X_LINKED_PARTNER_RISK = (
    "X-linked: each son has a 50% chance of being affected and each daughter has a 50% "
    "chance of being a carrier if the variant is inherited."
)

AUTOSOMAL_PARTNER_RISK = (
    "If your partner is also a carrier, each child has a 25% chance of being affected, "
    "a 50% chance of being a carrier, and a 25% chance of being unaffected."
)

CARRIER_SIGNIFICANCE = (ClinicalSignificance.PATHOGENIC, ClinicalSignificance.LIKELY_PATHOGENIC)


def identify_carrier_status(match_result: MatchResult) -> List[CarrierStatus]:
    """Identify carrier statuses for recessive and X-linked conditions."""
    carriers: List[CarrierStatus] = []
    seen: Set[Tuple[str, str]] = set()

    for annotated in match_result.annotated_snps:
        clinvar = annotated.clinvar
        if clinvar is None or clinvar.clinical_significance not in CARRIER_SIGNIFICANCE:
            continue
        if zygosity(annotated.snp.genotype) != Zygosity.HETEROZYGOUS:
            continue

        x_linked = is_x_chromosome(annotated.snp.chromosome)
        for condition in clinvar.conditions:
            key = (clinvar.gene, condition.name)
            if key in seen:
                continue
            seen.add(key)

            carriers.append(CarrierStatus(
                gene=clinvar.gene,
                condition=condition.name,
                inheritance=CarrierInheritance.X_LINKED if x_linked else CarrierInheritance.AUTOSOMAL_RECESSIVE,
                carrier_type=CarrierType.X_LINKED_FEMALE if x_linked else CarrierType.HETEROZYGOUS,
                partner_risk=X_LINKED_PARTNER_RISK if x_linked else AUTOSOMAL_PARTNER_RISK,
                variant_accession=clinvar.vcv,
            ))

    return carriers
