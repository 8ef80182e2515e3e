from fastapi import APIRouter

from genomeforge.schemas.analysis_schema import ReferenceCatalogResponse
from genomeforge.services.interpretation.reference_tables import PHARMACOGENES, PRS_MODELS, supported_genes

router = APIRouter()


@router.get("/catalog", response_model=ReferenceCatalogResponse)
async def get_reference_catalog() -> ReferenceCatalogResponse:
    """Known pharmacogenes, genes with star-allele definitions and traits with polygenic models."""
    return ReferenceCatalogResponse(
        pharmacogenes=list(PHARMACOGENES),
        star_allele_genes=list(supported_genes()),
        prs_traits=[m.trait for m in PRS_MODELS],
    )
