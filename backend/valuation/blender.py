from types import MappingProxyType

from backend.models.valuations import (
    ComparablesResult, DCFResult, RevenueMultipleResult,
    MethodologyWeight, ValuationRange, ValuationResult,
)
from backend.valuation.dcf import PROJECTION_YEARS
from backend.valuation.formatting import format_number

METHOD_WEIGHTS = MappingProxyType({
    "dcf": 0.4,
    "revenue_multiple": 0.3,
    "comparables": 0.3,
})

RANGE_LOW_FACTOR = 0.8
RANGE_HIGH_FACTOR = 1.2


def compute_blended_valuation(
    dcf: DCFResult,
    revenue_multiple: RevenueMultipleResult,
    comparables: ComparablesResult,
) -> ValuationResult:
    """Blend the three methodologies into a single weighted estimate.

    The range spans the lowest method value less 20% to the highest plus 20%.
    Nothing checks that the blended figure falls inside it.
    """
    blended = (
        dcf.value * METHOD_WEIGHTS["dcf"]
        + revenue_multiple.value * METHOD_WEIGHTS["revenue_multiple"]
        + comparables.value * METHOD_WEIGHTS["comparables"]
    )

    all_values = [dcf.value, revenue_multiple.value, comparables.value]
    value_range = ValuationRange(
        low=min(all_values) * RANGE_LOW_FACTOR,
        high=max(all_values) * RANGE_HIGH_FACTOR,
    )

    return ValuationResult(
        dcf=dcf,
        revenue_multiple=revenue_multiple,
        comparables=comparables,
        blended=blended,
        range=value_range,
        methodology_weights=_methodology_weights(dcf, revenue_multiple, comparables),
    )


def _methodology_weights(
    dcf: DCFResult,
    revenue_multiple: RevenueMultipleResult,
    comparables: ComparablesResult,
) -> list[MethodologyWeight]:
    rationales = {
        "dcf": (
            f"Weight {METHOD_WEIGHTS['dcf']:.2f}: intrinsic value anchor, "
            f"{PROJECTION_YEARS}-year projection"
        ),
        "revenue_multiple": (
            f"Weight {METHOD_WEIGHTS['revenue_multiple']:.2f}: "
            f"{format_number(revenue_multiple.multiple)}x typical {revenue_multiple.stage} stage multiple"
        ),
        "comparables": (
            f"Weight {METHOD_WEIGHTS['comparables']:.2f}: "
            f"{format_number(comparables.multiple)}x {comparables.sector} sector median"
        ),
    }
    return [
        MethodologyWeight(method=method, weight=weight, rationale=rationales[method])
        for method, weight in METHOD_WEIGHTS.items()
    ]
