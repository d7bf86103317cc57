from backend.models.request import StartupInput
from backend.models.valuations import RevenueMultipleResult
from backend.valuation.stages import DEFAULT_MULTIPLES


def compute_revenue_multiple_valuation(startup: StartupInput) -> RevenueMultipleResult:
    """Apply the stage's typical revenue multiple to trailing revenue.

    An unknown stage raises KeyError; it can only reach here if the input
    bypassed validation.
    """
    multiple = DEFAULT_MULTIPLES[startup.stage]
    return RevenueMultipleResult(
        value=startup.revenue * multiple,
        description=f"{multiple}x revenue multiple ({startup.stage} stage typical)",
        multiple=multiple,
        stage=startup.stage,
    )
