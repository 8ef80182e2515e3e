"""
Data models for the genetic interpretation engine.

Input models describe the annotated match result produced by the variant
matcher. Derived models are the findings built by the engines; they are
frozen and created fresh on every analysis.
"""

from pydantic import BaseModel, ConfigDict, Field
from typing import List, Optional, Dict
from enum import Enum
from datetime import datetime


# ============================================================================
# Enumerations
# ============================================================================

class ClinicalSignificance(str, Enum):
    """ClinVar clinical significance classification."""
    PATHOGENIC = "pathogenic"
    LIKELY_PATHOGENIC = "likely_pathogenic"
    UNCERTAIN_SIGNIFICANCE = "uncertain_significance"
    LIKELY_BENIGN = "likely_benign"
    BENIGN = "benign"
    CONFLICTING = "conflicting"
    NOT_PROVIDED = "not_provided"


class VariantCategory(str, Enum):
    """Coarse category assigned by the matcher."""
    PATHOGENIC = "pathogenic"
    DRUG = "drug"
    CARRIER = "carrier"
    PROTECTIVE = "protective"
    NEUTRAL = "neutral"


class RiskLevel(str, Enum):
    HIGH = "high"
    MODERATE = "moderate"
    LOW = "low"
    UNKNOWN = "unknown"


class Inheritance(str, Enum):
    """Inheritance pattern inferred for a condition."""
    AUTOSOMAL_DOMINANT = "autosomal_dominant"
    AUTOSOMAL_RECESSIVE = "autosomal_recessive"
    X_LINKED = "x_linked"
    COMPLEX = "complex"


class MetabolizerStatus(str, Enum):
    ULTRARAPID = "ultrarapid"
    RAPID = "rapid"
    NORMAL = "normal"
    INTERMEDIATE = "intermediate"
    POOR = "poor"
    UNKNOWN = "unknown"


class DrugSeverity(str, Enum):
    CRITICAL = "critical"
    MODERATE = "moderate"
    INFORMATIONAL = "informational"


class CpicStatus(str, Enum):
    AVAILABLE = "available"
    IN_PROGRESS = "in_progress"
    NOT_AVAILABLE = "not_available"


class CarrierInheritance(str, Enum):
    AUTOSOMAL_RECESSIVE = "autosomal_recessive"
    X_LINKED = "x_linked"
    MITOCHONDRIAL = "mitochondrial"


class CarrierType(str, Enum):
    HETEROZYGOUS = "heterozygous"
    COMPOUND_HETEROZYGOUS = "compound_heterozygous"
    X_LINKED_FEMALE = "x_linked_female"


class TraitCategory(str, Enum):
    DISEASE = "disease"
    CARDIOVASCULAR = "cardiovascular"
    METABOLIC = "metabolic"
    NEUROLOGICAL = "neurological"
    AUTOIMMUNE = "autoimmune"
    CANCER = "cancer"
    PHYSICAL_TRAIT = "physical_trait"
    RESPONSE = "response"
    OTHER = "other"


class TraitInterpretation(str, Enum):
    INCREASED = "increased"
    TYPICAL = "typical"
    DECREASED = "decreased"
    UNKNOWN = "unknown"


class ConfidenceLevel(str, Enum):
    HIGH = "high"
    MODERATE = "moderate"
    LOW = "low"


class PRSRiskCategory(str, Enum):
    VERY_HIGH = "very_high"
    HIGH = "high"
    MODERATE = "moderate"
    AVERAGE = "average"
    LOW = "low"
    VERY_LOW = "very_low"


class FindingType(str, Enum):
    PATHOGENIC = "pathogenic"
    DRUG = "drug"
    CARRIER = "carrier"
    TRAIT = "trait"
    PRS = "prs"


class FindingPriority(str, Enum):
    URGENT = "urgent"
    IMPORTANT = "important"
    INFORMATIONAL = "informational"


# ============================================================================
# Input models (produced by the variant matcher)
# ============================================================================

class SNP(BaseModel):
    """A single genotyped position from the parsed genome."""
    rsid: str = Field(..., description="rsID (e.g., rs1234567) or internal ID")
    chromosome: str = Field(..., description="Chromosome: 1-22, X, Y or MT")
    position: int = Field(..., description="Base pair position")
    genotype: str = Field(..., description="Diploid genotype (e.g., AG, A/G)")
    allele1: Optional[str] = Field(None, description="First allele")
    allele2: Optional[str] = Field(None, description="Second allele")


class ClinVarCondition(BaseModel):
    name: str = Field(..., description="Condition name")
    medgen_id: Optional[str] = Field(None, description="MedGen concept ID")
    traits: List[str] = Field(default_factory=list, description="Associated traits")


class ClinVarAnnotation(BaseModel):
    """Clinical annotation matched from ClinVar."""
    rsid: str = Field(..., description="rsID")
    vcv: Optional[str] = Field(None, description="VCV accession (e.g., VCV000123456)")
    gene: str = Field(..., description="Gene symbol")
    gene_id: Optional[int] = Field(None, description="Entrez Gene ID")
    clinical_significance: ClinicalSignificance = Field(..., description="Clinical significance")
    review_status: int = Field(0, ge=0, le=4, description="Review status star rating (0-4)")
    conditions: List[ClinVarCondition] = Field(default_factory=list, description="Associated conditions")
    hgvs: Optional[str] = Field(None, description="HGVS nomenclature")
    molecular_consequence: Optional[str] = Field(None, description="Molecular consequence")


class DrugGeneInteraction(BaseModel):
    drug_name: str = Field(..., description="Drug name")
    drug_id: Optional[str] = Field(None, description="PharmGKB drug ID")
    evidence_level: str = Field(..., description="Evidence level: 1A, 1B, 2A, 2B, 3, 4")
    phenotype_category: Optional[str] = Field(None, description="Phenotype category (e.g., Toxicity)")
    significance: str = Field("", description="Statistical significance flag")
    annotation: str = Field("", description="Annotation summary")
    cpic_level: Optional[str] = Field(None, description="CPIC classification level")
    fda_label: Optional[bool] = Field(None, description="Has FDA label annotation")


class PharmGKBAnnotation(BaseModel):
    """Pharmacogenomic annotation matched from PharmGKB."""
    rsid: str = Field(..., description="rsID")
    gene: str = Field(..., description="Gene symbol")
    drugs: List[DrugGeneInteraction] = Field(default_factory=list, description="Drug-gene interactions")
    has_cpic_guideline: bool = Field(False, description="Has CPIC guideline")
    has_dpwg_guideline: bool = Field(False, description="Has DPWG guideline")


class GnomADFrequency(BaseModel):
    rsid: str
    total_af: float = Field(..., ge=0.0, le=1.0, description="Global allele frequency")
    population_af: Dict[str, float] = Field(default_factory=dict, description="Per-population allele frequency")
    homozygote_count: int = 0
    heterozygote_count: int = 0


class GWASAssociation(BaseModel):
    """A single association-study entry for a variant."""
    rsid: str = Field(..., description="rsID")
    trait: str = Field(..., description="Trait or phenotype")
    p_value: float = Field(..., gt=0.0, le=1.0, description="p-value from study")
    or_beta: Optional[float] = Field(None, description="Odds ratio or beta coefficient")
    risk_allele: Optional[str] = Field(None, description="Risk allele")
    study_accession: str = Field("", description="Study accession")
    pubmed_id: Optional[str] = Field(None, description="PubMed ID")
    user_genotype: Optional[str] = Field(None, description="User's genotype")
    has_risk_allele: Optional[bool] = Field(None, description="Whether user carries the risk allele")
    risk_allele_copies: Optional[int] = Field(None, ge=0, le=2, description="Risk allele copies (0, 1 or 2)")


class AnnotatedVariant(BaseModel):
    """A matched SNP with every database annotation it received."""
    snp: SNP
    clinvar: Optional[ClinVarAnnotation] = None
    pharmgkb: Optional[PharmGKBAnnotation] = None
    gnomad: Optional[GnomADFrequency] = None
    gwas: List[GWASAssociation] = Field(default_factory=list)
    impact_score: float = Field(0.0, description="Calculated impact score (0-6)")
    category: VariantCategory = Field(VariantCategory.NEUTRAL, description="Variant category")


class DatabaseVersions(BaseModel):
    clinvar: Optional[str] = None
    pharmgkb: Optional[str] = None
    gnomad: Optional[str] = None
    gwas: Optional[str] = None


class MatchResult(BaseModel):
    """Output of the variant matcher; the engine's only input."""
    genome_id: str = Field(..., description="Genome identifier")
    total_snps: int = Field(0, ge=0, description="Total SNPs in genome")
    matched_snps: int = Field(0, ge=0, description="SNPs matched against databases")
    pathogenic_count: int = 0
    drug_interaction_count: int = 0
    carrier_count: int = 0
    gwas_association_count: int = 0
    annotated_snps: List[AnnotatedVariant] = Field(default_factory=list, description="All annotated SNPs")
    build_version: str = Field("unknown", description="Genome build version")
    database_versions: DatabaseVersions = Field(default_factory=DatabaseVersions)


# ============================================================================
# Derived models (engine output)
# ============================================================================

class _Finding(BaseModel):
    model_config = ConfigDict(frozen=True)


class RiskAssessment(_Finding):
    """Disease risk for one condition."""
    condition: str = Field(..., description="Condition name")
    gene: str = Field(..., description="Gene symbol")
    risk_level: RiskLevel = Field(..., description="Risk level")
    confidence: float = Field(..., ge=0.0, le=1.0, description="Review-status confidence (0-1)")
    variants: List[AnnotatedVariant] = Field(..., description="Contributing variants")
    explanation: str = Field(..., description="Human-readable explanation")
    inheritance: Inheritance = Field(..., description="Inferred inheritance pattern")
    omim_id: Optional[str] = None


class DrugRecommendation(_Finding):
    drug_name: str
    generic_name: Optional[str] = None
    recommendation: str
    severity: DrugSeverity
    evidence_level: str
    has_fda_label: bool = False
    cpic_level: Optional[str] = None
    therapeutic_category: Optional[str] = None


class MetabolizerPhenotype(_Finding):
    """Metabolizer phenotype for one pharmacogene."""
    gene: str = Field(..., description="Gene symbol")
    diplotype: Optional[str] = Field(None, description="Diplotype (e.g., *1/*4)")
    phenotype: MetabolizerStatus = Field(..., description="Metabolizer status")
    activity_score: Optional[float] = Field(None, description="Summed allele activity")
    affected_drugs: List[DrugRecommendation] = Field(default_factory=list)
    cpic_status: CpicStatus = CpicStatus.NOT_AVAILABLE
    contributing_variants: List[str] = Field(default_factory=list, description="Contributing rsIDs")


class CarrierStatus(_Finding):
    gene: str
    condition: str
    inheritance: CarrierInheritance
    carrier_type: CarrierType
    partner_risk: str
    population_frequency: Optional[float] = None
    variant_accession: Optional[str] = None
    omim_id: Optional[str] = None


class TraitAssociation(_Finding):
    trait: str
    category: TraitCategory
    variant_count: int = Field(..., description="Number of association entries")
    associations: List[GWASAssociation]
    risk_score: float = Field(..., ge=0.0, le=1.0, description="Combined risk score (0-1)")
    interpretation: TraitInterpretation
    confidence: ConfidenceLevel


class PolygenicRiskScore(_Finding):
    trait: str
    model_id: str
    raw_score: float
    z_score: float
    percentile: int = Field(..., ge=0, le=100)
    risk_category: PRSRiskCategory
    variants_used: int
    variants_missing: int
    coverage: float = Field(..., description="Model coverage percentage (0-100)")
    relative_risk: float = Field(..., description="Heuristic e^(0.3 z); not a calibrated clinical figure")


class KeyFinding(_Finding):
    type: FindingType
    priority: FindingPriority
    title: str
    description: str
    related_item: str = Field(..., description="Related gene or trait")


class AnalysisOptions(BaseModel):
    include_trait_associations: bool = True
    include_polygenic_scores: bool = True
    # Reserved; no engine reads these.
    min_gwas_p_value: Optional[float] = None
    min_prs_variants: Optional[int] = None


class AnalysisSummary(_Finding):
    total_variants_analyzed: int = 0
    pathogenic_count: int = 0
    high_risk_count: int = 0
    moderate_risk_count: int = 0
    pharmacogene_count: int = 0
    carrier_count: int = 0
    trait_association_count: int = 0
    prs_count: int = 0
    key_findings: List[KeyFinding] = Field(default_factory=list)


class AnalysisResult(_Finding):
    """Complete interpretation of one match result."""
    genome_id: str
    analyzed_at: datetime
    risk_assessments: List[RiskAssessment]
    metabolizer_phenotypes: List[MetabolizerPhenotype]
    carrier_statuses: List[CarrierStatus]
    trait_associations: List[TraitAssociation]
    polygenic_risk_scores: List[PolygenicRiskScore]
    summary: AnalysisSummary
    database_versions: DatabaseVersions
