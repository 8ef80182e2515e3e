from fastapi import APIRouter, HTTPException, status
import logging

from genomeforge.schemas.analysis_schema import AnalyzeRequest
from genomeforge.services.interpretation.models import AnalysisResult
from genomeforge.services.pipeline.analysis_pipeline import (
    parse_match_result,
    run_analysis_from_dict,
)
from genomeforge.services.pipeline.legacy_adapter import LegacyAnalysisResult, analyze_legacy

router = APIRouter()
logger = logging.getLogger(__name__)


@router.post(
    "/analyze",
    response_model=AnalysisResult,
    status_code=status.HTTP_200_OK,
    summary="Interpret Annotated Variants",
    description="Run every interpretation engine over a match result and return ranked findings."
)
async def analyze_match_result(request: AnalyzeRequest) -> AnalysisResult:
    """
    Endpoint to trigger the interpretation pipeline.

    - **match_result**: annotated variants from the matcher
    - **options**: optional engine toggles
    """
    try:
        return run_analysis_from_dict(request.match_result, request.options)

    except ValueError as ve:
        logger.error(f"Validation error in analysis: {str(ve)}")
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(ve)
        )
    except Exception as e:
        logger.exception(f"Unexpected error in analysis pipeline: {str(e)}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="An error occurred during the analysis pipeline."
        )


@router.post(
    "/analyze/legacy",
    response_model=LegacyAnalysisResult,
    summary="Interpret Annotated Variants (legacy shape)",
)
async def analyze_match_result_legacy(request: AnalyzeRequest) -> LegacyAnalysisResult:
    try:
        return analyze_legacy(parse_match_result(request.match_result))

    except ValueError as ve:
        logger.error(f"Validation error in legacy analysis: {str(ve)}")
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(ve))
    except Exception as e:
        logger.exception(f"Unexpected error in legacy analysis: {str(e)}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="An error occurred during the legacy analysis."
        )
