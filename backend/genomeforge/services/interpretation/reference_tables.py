"""
reference_tables.py
===================
Immutable reference data for the interpretation engines.

  - STAR_ALLELE_MARKERS: marker (rsID, risk allele) pairs per star allele
  - PHARMACOGENES:       genes with CPIC/DPWG dosing guidance
  - METABOLIZER_PHENOTYPES: legacy display label per common diplotype
  - STAR_ACTIVITY:       activity value per star allele per gene
  - DRUG_CATEGORIES:     therapeutic category -> drug-name keywords
  - TRAIT_CATEGORY_KEYWORDS: ordered trait category -> keywords
  - PRS_MODELS:          per-trait polygenic models (rsID, risk allele, weight)

Marker alleles are reported on the strand consumer arrays use, so the
marker risk allele can be counted directly in the genotype string.

Sources: CPIC guidelines (https://cpicpgx.org/genes-drugs/), PharmVar,
NHGRI-EBI GWAS Catalog.
"""
from __future__ import annotations

from types import MappingProxyType
from typing import Mapping, NamedTuple, Optional, Tuple

from .models import TraitCategory


class StarMarker(NamedTuple):
    rsid: str
    risk_allele: str


class PRSVariant(NamedTuple):
    rsid: str
    risk_allele: str
    weight: float


class PRSModel(NamedTuple):
    model_id: str
    trait: str
    variants: Tuple[PRSVariant, ...]
    reference_population: str
    source: str


# ---------------------------------------------------------------------------
# Star-allele marker definitions
# ---------------------------------------------------------------------------
# Order matters: when more than two alleles are detected the first two in
# table order are kept.

STAR_ALLELE_MARKERS: Mapping[str, Mapping[str, Tuple[StarMarker, ...]]] = MappingProxyType({

    # ── CYP2D6 ──────────────────────────────────────────────────────────────
    "CYP2D6": MappingProxyType({
        "*3":  (StarMarker("rs35742686", "D"),),    # 2549delA, frameshift
        "*4":  (StarMarker("rs3892097", "A"),),     # 1846G>A, splice defect
        "*6":  (StarMarker("rs5030655", "D"),),     # 1707delT, frameshift
        "*10": (StarMarker("rs1065852", "A"),),     # 100C>T
        "*17": (StarMarker("rs28371706", "A"),),    # 1023C>T
        "*41": (StarMarker("rs28371725", "T"),),    # 2988G>A
    }),

    # ── CYP2C19 ─────────────────────────────────────────────────────────────
    "CYP2C19": MappingProxyType({
        "*2":  (StarMarker("rs4244285", "A"),),     # 681G>A, splice defect
        "*3":  (StarMarker("rs4986893", "A"),),     # 636G>A, premature stop
        "*17": (StarMarker("rs12248560", "T"),),    # -806C>T, increased expression
    }),

    # ── CYP2C9 ──────────────────────────────────────────────────────────────
    "CYP2C9": MappingProxyType({
        "*2": (StarMarker("rs1799853", "T"),),      # R144C
        "*3": (StarMarker("rs1057910", "C"),),      # I359L
    }),

    # ── CYP3A5 ──────────────────────────────────────────────────────────────
    "CYP3A5": MappingProxyType({
        "*3": (StarMarker("rs776746", "C"),),       # 6986A>G, splice defect
        "*6": (StarMarker("rs10264272", "T"),),
    }),

    # ── TPMT ────────────────────────────────────────────────────────────────
    "TPMT": MappingProxyType({
        "*2":  (StarMarker("rs1800462", "C"),),
        "*3A": (StarMarker("rs1800460", "T"), StarMarker("rs1142345", "C")),
        "*3C": (StarMarker("rs1142345", "C"),),
    }),

    # ── NUDT15 ──────────────────────────────────────────────────────────────
    "NUDT15": MappingProxyType({
        "*3": (StarMarker("rs116855232", "T"),),    # R139C
    }),

    # ── DPYD ────────────────────────────────────────────────────────────────
    "DPYD": MappingProxyType({
        "*2A": (StarMarker("rs3918290", "T"),),     # IVS14+1G>A
        "*13": (StarMarker("rs55886062", "C"),),    # I560S
    }),

    # ── SLCO1B1 ─────────────────────────────────────────────────────────────
    "SLCO1B1": MappingProxyType({
        "*5": (StarMarker("rs4149056", "C"),),      # 521T>C
    }),

    # ── UGT1A1 ──────────────────────────────────────────────────────────────
    "UGT1A1": MappingProxyType({
        "*6": (StarMarker("rs4148323", "A"),),      # G71R
    }),
})


# ---------------------------------------------------------------------------
# Pharmacogenes with CPIC/DPWG dosing guidance
# ---------------------------------------------------------------------------
# Broader than STAR_ALLELE_MARKERS: genes such as VKORC1 or HLA-B are
# reported without diplotype calling.

PHARMACOGENES: Tuple[str, ...] = (
    "CYP2D6",
    "CYP2C19",
    "CYP2C9",
    "CYP3A4",
    "CYP3A5",
    "CYP2B6",
    "CYP1A2",
    "SLCO1B1",
    "TPMT",
    "NUDT15",
    "DPYD",
    "UGT1A1",
    "VKORC1",
    "HLA-B",
    "HLA-A",
    "G6PD",
    "IFNL3",
)


# ---------------------------------------------------------------------------
# Legacy metabolizer labels for common diplotypes
# ---------------------------------------------------------------------------
# Display labels used by the legacy result shape. These predate activity
# scoring and can disagree with it (*1/*4 is labelled intermediate here).

METABOLIZER_PHENOTYPES: Mapping[str, Mapping[str, str]] = MappingProxyType({
    "CYP2D6": MappingProxyType({
        "*1/*1": "Normal Metabolizer",
        "*1/*4": "Intermediate Metabolizer",
        "*4/*4": "Poor Metabolizer",
        "*1/*1xN": "Ultrarapid Metabolizer",
    }),
    "CYP2C19": MappingProxyType({
        "*1/*1": "Normal Metabolizer",
        "*1/*2": "Intermediate Metabolizer",
        "*2/*2": "Poor Metabolizer",
        "*1/*17": "Rapid Metabolizer",
        "*17/*17": "Ultrarapid Metabolizer",
    }),
    "CYP2C9": MappingProxyType({
        "*1/*1": "Normal Metabolizer",
        "*1/*2": "Intermediate Metabolizer",
        "*1/*3": "Intermediate Metabolizer",
        "*2/*2": "Poor Metabolizer",
    }),
})


# ---------------------------------------------------------------------------
# Activity values per star allele per gene
# ---------------------------------------------------------------------------
# 0 = no function, 0.25/0.5 = decreased, 1 = normal, 1.5 = increased.
# Alleles or genes not listed default to 1.0.

DEFAULT_ACTIVITY = 1.0

STAR_ACTIVITY: Mapping[str, Mapping[str, float]] = MappingProxyType({
    "CYP2D6": MappingProxyType({
        "*1": 1.0, "*2": 1.0, "*3": 0.0, "*4": 0.0, "*5": 0.0, "*6": 0.0,
        "*10": 0.25, "*17": 0.5, "*41": 0.5, "*1x2": 2.0, "*2x2": 2.0,
    }),
    "CYP2C19": MappingProxyType({
        "*1": 1.0, "*2": 0.0, "*3": 0.0, "*17": 1.5,
    }),
    "CYP2C9": MappingProxyType({
        "*1": 1.0, "*2": 0.5, "*3": 0.0,
    }),
    "CYP3A5": MappingProxyType({
        "*1": 1.0, "*3": 0.0, "*6": 0.0,
    }),
    "TPMT": MappingProxyType({
        "*1": 1.0, "*2": 0.0, "*3A": 0.0, "*3C": 0.0,
    }),
    "NUDT15": MappingProxyType({
        "*1": 1.0, "*3": 0.0,
    }),
    "DPYD": MappingProxyType({
        "*1": 1.0, "*2A": 0.0, "*13": 0.0,
    }),
    "SLCO1B1": MappingProxyType({
        "*1": 1.0, "*5": 0.0,
    }),
    "UGT1A1": MappingProxyType({
        "*1": 1.0, "*6": 0.5,
    }),
})


# ---------------------------------------------------------------------------
# Therapeutic categories (first keyword match wins)
# ---------------------------------------------------------------------------

DRUG_CATEGORIES: Tuple[Tuple[str, Tuple[str, ...]], ...] = (
    ("Analgesic", ("codeine", "tramadol", "oxycodone", "hydrocodone", "morphine", "celecoxib", "ibuprofen")),
    ("Antiplatelet", ("clopidogrel", "prasugrel", "ticagrelor")),
    ("Anticoagulant", ("warfarin", "acenocoumarol", "phenprocoumon")),
    ("Statin", ("simvastatin", "atorvastatin", "rosuvastatin", "pravastatin", "lovastatin", "fluvastatin")),
    ("Antidepressant", ("citalopram", "escitalopram", "sertraline", "amitriptyline", "nortriptyline",
                        "paroxetine", "fluvoxamine", "venlafaxine", "imipramine", "clomipramine")),
    ("Antipsychotic", ("aripiprazole", "risperidone", "haloperidol", "pimozide", "brexpiprazole")),
    ("Proton Pump Inhibitor", ("omeprazole", "esomeprazole", "lansoprazole", "pantoprazole", "rabeprazole")),
    ("Immunosuppressant", ("azathioprine", "mercaptopurine", "thioguanine", "tacrolimus")),
    ("Oncology", ("fluorouracil", "capecitabine", "tegafur", "irinotecan", "tamoxifen")),
    ("Anticonvulsant", ("phenytoin", "fosphenytoin", "carbamazepine", "oxcarbazepine")),
    ("Antiviral", ("abacavir", "efavirenz", "atazanavir")),
    ("Anesthetic", ("succinylcholine", "sevoflurane", "desflurane")),
)


# ---------------------------------------------------------------------------
# Evidence level ranking (lower = stronger)
# ---------------------------------------------------------------------------

EVIDENCE_LEVEL_RANK: Mapping[str, int] = MappingProxyType({
    "1A": 0, "1B": 1, "2A": 2, "2B": 3, "3": 4, "4": 5,
})
UNRANKED_EVIDENCE = len(EVIDENCE_LEVEL_RANK)


# ---------------------------------------------------------------------------
# Trait categories, checked in order; OTHER is the fallback
# ---------------------------------------------------------------------------

TRAIT_CATEGORY_KEYWORDS: Tuple[Tuple[TraitCategory, Tuple[str, ...]], ...] = (
    (TraitCategory.CARDIOVASCULAR, (
        "coronary", "heart", "cardiac", "cardiovascular", "blood pressure", "hypertension",
        "atrial fibrillation", "stroke", "myocardial", "artery", "arterial", "aortic",
        "venous thromboembolism",
    )),
    (TraitCategory.METABOLIC, (
        "diabetes", "glucose", "insulin", "obesity", "metabolic", "cholesterol", "triglyceride",
        "lipid", "uric acid", "gout", "hba1c",
    )),
    (TraitCategory.NEUROLOGICAL, (
        "alzheimer", "parkinson", "dementia", "migraine", "epilep", "schizophrenia", "bipolar",
        "depressi", "cognitive", "neurodegenerat", "autism", "adhd",
    )),
    (TraitCategory.AUTOIMMUNE, (
        "lupus", "rheumatoid", "celiac", "crohn", "ulcerative colitis", "inflammatory bowel",
        "multiple sclerosis", "psoriasis", "autoimmune", "thyroiditis", "graves",
    )),
    (TraitCategory.CANCER, (
        "cancer", "carcinoma", "melanoma", "lymphoma", "leukemia", "tumor", "glioma",
        "neoplasm", "sarcoma", "myeloma",
    )),
    (TraitCategory.PHYSICAL_TRAIT, (
        "height", "eye color", "eye colour", "hair", "skin pigment", "freckl", "baldness",
        "body mass", "bmi", "weight", "muscle",
    )),
    (TraitCategory.RESPONSE, (
        "response", "sensitivity", "caffeine", "alcohol", "nicotine", "smoking", "taste",
        "intolerance",
    )),
    (TraitCategory.DISEASE, (
        "disease", "disorder", "syndrome", "deficiency", "infection", "asthma",
    )),
)


# ---------------------------------------------------------------------------
# Polygenic risk score models
# ---------------------------------------------------------------------------
# Weights are per-allele log odds ratios from the cited GWAS.

PRS_MODELS: Tuple[PRSModel, ...] = (
    PRSModel(
        model_id="PRS-T2D-5",
        trait="Type 2 Diabetes",
        variants=(
            PRSVariant("rs7903146", "T", 0.31),    # TCF7L2
            PRSVariant("rs12255372", "T", 0.25),   # TCF7L2
            PRSVariant("rs1801282", "C", 0.14),    # PPARG Pro12Ala
            PRSVariant("rs5219", "T", 0.13),       # KCNJ11 E23K
            PRSVariant("rs13266634", "C", 0.12),   # SLC30A8
        ),
        reference_population="European",
        source="DIAGRAM consortium",
    ),
    PRSModel(
        model_id="PRS-CAD-5",
        trait="Coronary Artery Disease",
        variants=(
            PRSVariant("rs10757274", "G", 0.25),   # 9p21
            PRSVariant("rs1333049", "C", 0.24),    # 9p21
            PRSVariant("rs4977574", "G", 0.22),    # CDKN2B-AS1
            PRSVariant("rs6725887", "C", 0.14),    # WDR12
            PRSVariant("rs9982601", "T", 0.17),    # MRPS6
        ),
        reference_population="European",
        source="CARDIoGRAMplusC4D",
    ),
    PRSModel(
        model_id="PRS-BMI-5",
        trait="Body Mass Index",
        variants=(
            PRSVariant("rs9939609", "A", 0.33),    # FTO
            PRSVariant("rs17782313", "C", 0.20),   # MC4R
            PRSVariant("rs6548238", "C", 0.15),    # TMEM18
            PRSVariant("rs10938397", "G", 0.12),   # GNPDA2
            PRSVariant("rs2815752", "A", 0.10),    # NEGR1
        ),
        reference_population="European",
        source="GIANT consortium",
    ),
    PRSModel(
        model_id="PRS-BC-5",
        trait="Breast Cancer",
        variants=(
            PRSVariant("rs2981582", "T", 0.26),    # FGFR2
            PRSVariant("rs3803662", "T", 0.20),    # TOX3
            PRSVariant("rs889312", "C", 0.13),     # MAP3K1
            PRSVariant("rs13281615", "G", 0.08),   # 8q24
            PRSVariant("rs3817198", "C", 0.07),    # LSP1
        ),
        reference_population="European",
        source="BCAC",
    ),
    PRSModel(
        model_id="PRS-AD-5",
        trait="Alzheimer's Disease",
        variants=(
            PRSVariant("rs429358", "C", 1.12),     # APOE e4
            PRSVariant("rs11136000", "C", 0.16),   # CLU
            PRSVariant("rs3851179", "C", 0.13),    # PICALM
            PRSVariant("rs744373", "G", 0.15),     # BIN1
            PRSVariant("rs3764650", "G", 0.18),    # ABCA7
        ),
        reference_population="European",
        source="IGAP",
    ),
)


# ---------------------------------------------------------------------------
# Accessors
# ---------------------------------------------------------------------------

def get_star_alleles(gene: str) -> Optional[Mapping[str, Tuple[StarMarker, ...]]]:
    return STAR_ALLELE_MARKERS.get(gene)


def get_allele_activity(gene: str, allele: str) -> float:
    return STAR_ACTIVITY.get(gene, {}).get(allele, DEFAULT_ACTIVITY)


def supported_genes() -> Tuple[str, ...]:
    return tuple(STAR_ALLELE_MARKERS.keys())


def get_phenotype_label(gene: str, diplotype: Optional[str]) -> Optional[str]:
    """Legacy display label for a diplotype, or None when it is not tabulated."""
    if diplotype is None:
        return None
    return METABOLIZER_PHENOTYPES.get(gene, {}).get(diplotype)
