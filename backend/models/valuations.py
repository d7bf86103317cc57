from pydantic import BaseModel, ConfigDict, Field


class MethodResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    value: float
    label: str
    description: str


class SensitivityCell(BaseModel):
    model_config = ConfigDict(frozen=True)

    discount_rate: float
    growth_rate: float
    value: float


class DCFResult(MethodResult):
    label: str = "DCF"
    projected_cash_flows: list[float] = Field(default_factory=list)
    terminal_value: float = 0.0
    discount_rate: float
    terminal_growth_rate: float
    warnings: list[str] = Field(default_factory=list)
    sensitivity_table: list[SensitivityCell] = Field(default_factory=list)


class RevenueMultipleResult(MethodResult):
    label: str = "Revenue Multiple"
    multiple: float
    stage: str


class ComparablesResult(MethodResult):
    label: str = "Comparables"
    multiple: float
    sector: str = "default"


class ValuationRange(BaseModel):
    model_config = ConfigDict(frozen=True)

    low: float
    high: float


class MethodologyWeight(BaseModel):
    model_config = ConfigDict(frozen=True)

    method: str
    weight: float
    rationale: str


class ValuationResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    dcf: DCFResult
    revenue_multiple: RevenueMultipleResult
    comparables: ComparablesResult
    blended: float
    range: ValuationRange = Field(..., description="Low/high estimate across methods")
    methodology_weights: list[MethodologyWeight] = Field(default_factory=list)
