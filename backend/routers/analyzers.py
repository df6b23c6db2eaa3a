import json

from fastapi import APIRouter, Request
from fastapi.concurrency import run_in_threadpool

from schemas.analysis import AnalysisRequest, AnalysisResult, ErrorResponse
from services.analysis import analyze_contract
from services.errors import InvalidInput

router = APIRouter(prefix="/api", tags=["analyzers"])


# ============== SCOPE OF WORK ANALYSIS ==============

@router.post(
    "/analyze",
    response_model=AnalysisResult,
    responses={
        400: {"model": ErrorResponse},
        429: {"model": ErrorResponse},
        500: {"model": ErrorResponse},
    },
    openapi_extra={
        "requestBody": {
            "required": True,
            "content": {"application/json": {"schema": AnalysisRequest.model_json_schema()}},
        },
    },
)
async def analyze(request: Request):
    """Score a contract / scope of work and list its red flags"""
    # Raw body: the payload is validated by the pipeline, not by FastAPI,
    # so bad input surfaces as a 400 {"error": ...} instead of a 422
    try:
        payload = await request.json()
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        raise InvalidInput("Request body must be valid JSON.") from e

    # The provider call blocks; keep it off the event loop
    return await run_in_threadpool(analyze_contract, payload)
