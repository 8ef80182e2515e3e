"""
Interpretation Service

Turns annotated genome variants into risk assessments, metabolizer
phenotypes, carrier statuses, trait associations and polygenic risk scores.
All engines are deterministic and side-effect free.
"""

from .models import (
    AnnotatedVariant,
    MatchResult,
    AnalysisOptions,
    AnalysisResult,
    RiskAssessment,
    MetabolizerPhenotype,
    CarrierStatus,
    TraitAssociation,
    PolygenicRiskScore,
    KeyFinding,
)
from .annotation_index import build_annotation_index
from .risk_assessment import assess_risks
from .pharmacogenomics_engine import analyze_pharmacogenomics
from .phenotype_mapper import DiplotypeResolver, PhenotypeMapper
from .carrier_status import identify_carrier_status
from .trait_associations import analyze_trait_associations
from .polygenic_risk import calculate_polygenic_risk_scores
from .key_findings import generate_key_findings
from .config import (
    get_config,
    update_config,
    reset_config,
    load_config_from_file,
    save_config_to_file,
)

__all__ = [
    # Models
    'AnnotatedVariant',
    'MatchResult',
    'AnalysisOptions',
    'AnalysisResult',
    'RiskAssessment',
    'MetabolizerPhenotype',
    'CarrierStatus',
    'TraitAssociation',
    'PolygenicRiskScore',
    'KeyFinding',

    # Engines
    'build_annotation_index',
    'assess_risks',
    'analyze_pharmacogenomics',
    'DiplotypeResolver',
    'PhenotypeMapper',
    'identify_carrier_status',
    'analyze_trait_associations',
    'calculate_polygenic_risk_scores',
    'generate_key_findings',

    # Config
    'get_config',
    'update_config',
    'reset_config',
    'load_config_from_file',
    'save_config_to_file',
]
