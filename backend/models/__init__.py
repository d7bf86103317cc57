from backend.models.request import Stage, StartupInput
from backend.models.valuations import (
    MethodResult, SensitivityCell, DCFResult, RevenueMultipleResult, ComparablesResult,
    ValuationRange, MethodologyWeight, ValuationResult,
)
from backend.models.analysis import SWOTAnalysis, AIAnalysis, AnalysisResponse
from backend.models.report import LLMCallLog

__all__ = [
    "Stage", "StartupInput",
    "MethodResult", "SensitivityCell", "DCFResult", "RevenueMultipleResult", "ComparablesResult",
    "ValuationRange", "MethodologyWeight", "ValuationResult",
    "SWOTAnalysis", "AIAnalysis", "AnalysisResponse",
    "LLMCallLog",
]
