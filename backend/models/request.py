from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

Stage = Literal["pre-seed", "seed", "series-a", "growth"]


class StartupInput(BaseModel):
    """Financial profile of a startup.

    The valuation engine assumes every field is inside its declared range and
    performs no re-validation. In particular a discount rate of exactly 3%
    equals the DCF terminal growth rate and makes the terminal value undefined.
    """

    model_config = ConfigDict(frozen=True)

    company_name: str = Field(..., min_length=1, description="Name of the startup")
    stage: Stage = Field(..., description="Funding stage")
    revenue: float = Field(..., allow_inf_nan=False, ge=0, description="Trailing annual revenue in USD")
    growth_rate: float = Field(..., allow_inf_nan=False, ge=-100, le=1000, description="Annual revenue growth, percent")
    ebitda_margin: float = Field(..., allow_inf_nan=False, ge=-100, le=100, description="EBITDA margin, percent")
    discount_rate: float = Field(..., allow_inf_nan=False, ge=1, le=50, description="Discount rate, percent")
    description: str = Field(..., min_length=20, description="What the startup does")
