import logging

from backend.models.request import StartupInput
from backend.models.valuations import ValuationResult
from backend.valuation.blender import compute_blended_valuation
from backend.valuation.comps import compute_comps_valuation
from backend.valuation.dcf import compute_dcf_valuation
from backend.valuation.revenue_multiple import compute_revenue_multiple_valuation

logger = logging.getLogger(__name__)


def calculate_valuation(startup: StartupInput) -> ValuationResult:
    """Run all three methodologies on a validated input and blend them.

    Deterministic and free of I/O. The input is trusted: out-of-range values
    produce nonsensical figures rather than errors.
    """
    dcf = compute_dcf_valuation(startup)
    revenue_multiple = compute_revenue_multiple_valuation(startup)
    comparables = compute_comps_valuation(startup)

    for warning in dcf.warnings:
        logger.warning(f"DCF [{startup.company_name}]: {warning}")

    result = compute_blended_valuation(dcf, revenue_multiple, comparables)

    logger.info(
        f"Valuation for '{startup.company_name}' ({startup.stage}): "
        f"dcf={dcf.value:,.0f}, revenue_multiple={revenue_multiple.value:,.0f}, "
        f"comparables={comparables.value:,.0f}, blended={result.blended:,.0f}"
    )
    return result
