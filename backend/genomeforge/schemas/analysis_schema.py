from pydantic import BaseModel, Field
from typing import Any, Dict, List, Optional


class AnalyzeRequest(BaseModel):
    match_result: Dict[str, Any] = Field(..., description="Match result produced by the variant matcher")
    options: Optional[Dict[str, Any]] = Field(None, description="Analysis options")


class ReferenceCatalogResponse(BaseModel):
    pharmacogenes: List[str]
    star_allele_genes: List[str]
    prs_traits: List[str]
