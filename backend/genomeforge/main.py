import logging as std_logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from genomeforge.api.router import api_router
from genomeforge.core import logging  # Initialize logging
from genomeforge.services.interpretation.reference_tables import PRS_MODELS, supported_genes

logger = std_logging.getLogger(__name__)

app = FastAPI(
    title="GenomeForge Interpretation API",
    description="Genetic interpretation engine: disease risk, pharmacogenomics, carrier status, traits and polygenic scores",
    version="1.0.0"
)

# CORS Configuration
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include API Routers
app.include_router(api_router, prefix="/api/v1")


@app.on_event("startup")
async def startup_event():
    logger.info(
        "Reference tables loaded: %d star-allele genes, %d polygenic models",
        len(supported_genes()), len(PRS_MODELS),
    )


@app.get("/health")
async def health_check():
    return {"status": "ok", "service": "GenomeForge"}
