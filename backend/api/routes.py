import logging
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException
from fastapi.responses import StreamingResponse
from pydantic import BaseModel

from backend.api.dependencies import get_llm_service
from backend.models.analysis import AIAnalysis, AnalysisResponse
from backend.models.request import StartupInput
from backend.models.valuations import ValuationResult
from backend.pipeline.step_analyze import analyze_valuation
from backend.services.llm_service import LLMService
from backend.services.report_service import generate_valuation_pdf, report_filename
from backend.valuation.engine import calculate_valuation
from backend.valuation.stages import stage_defaults

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/valuations", tags=["valuations"])


class AnalyzeRequest(BaseModel):
    input: StartupInput
    result: ValuationResult


class ReportRequest(BaseModel):
    input: StartupInput
    result: ValuationResult
    analysis: Optional[AIAnalysis] = None


@router.get("/stages", response_model=list[dict])
async def list_stages():
    """Default discount rate and revenue multiple per funding stage."""
    return stage_defaults()


@router.post("", response_model=ValuationResult)
async def create_valuation(startup: StartupInput):
    """Compute the blended valuation for a startup profile."""
    return calculate_valuation(startup)


@router.post("/analyze", response_model=AnalysisResponse)
async def analyze(
    body: AnalyzeRequest,
    llm: LLMService = Depends(get_llm_service),
):
    """Request an AI narrative analysis of a completed valuation."""
    return await analyze_valuation(body.input, body.result, llm)


@router.post("/report")
async def export_report(body: ReportRequest):
    """Download the valuation (and optional analysis) as a PDF."""
    try:
        pdf = generate_valuation_pdf(body.input, body.result, body.analysis)
    except Exception as e:
        logger.error(f"PDF export failed for '{body.input.company_name}': {e}")
        raise HTTPException(status_code=500, detail=f"Failed to render report: {e}")

    filename = report_filename(body.input.company_name)
    return StreamingResponse(
        pdf,
        media_type="application/pdf",
        headers={"Content-Disposition": f'attachment; filename="{filename}"'},
    )
