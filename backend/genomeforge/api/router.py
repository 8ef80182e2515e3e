from fastapi import APIRouter
from genomeforge.api.routes import analysis, reference

api_router = APIRouter()

api_router.include_router(analysis.router, prefix="/analysis", tags=["Analysis"])
api_router.include_router(reference.router, prefix="/reference", tags=["Reference"])
