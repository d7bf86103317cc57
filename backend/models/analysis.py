from pydantic import BaseModel, ConfigDict, Field
from typing import Optional


class SWOTAnalysis(BaseModel):
    strengths: list[str] = Field(default_factory=list)
    weaknesses: list[str] = Field(default_factory=list)
    opportunities: list[str] = Field(default_factory=list)
    threats: list[str] = Field(default_factory=list)


class AIAnalysis(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    summary: str = Field(..., description="2-3 sentence summary of the valuation")
    assumptions: list[str] = Field(default_factory=list, description="Key assumptions behind the figures")
    swot: SWOTAnalysis
    investor_points: list[str] = Field(
        default_factory=list, alias="investorPoints", description="Investor talking points"
    )


class AnalysisResponse(BaseModel):
    success: bool
    analysis: Optional[AIAnalysis] = None
    error: Optional[str] = None
