from backend.models.request import StartupInput
from backend.models.valuations import DCFResult, SensitivityCell
from backend.valuation.formatting import format_number

PROJECTION_YEARS = 5
TERMINAL_GROWTH = 0.03


def _compute_ev(
    revenue: float,
    growth_rate: float,
    ebitda_margin: float,
    discount_rate: float,
) -> tuple[float, list[float], float]:
    """Core DCF computation on percent inputs. Returns (present_value, cash_flows, terminal_value).

    The present value is not floored. Raises ZeroDivisionError when the
    discount rate equals the terminal growth rate.
    """
    cash_flows: list[float] = []
    total_pv = 0.0
    projected_revenue = revenue

    for year in range(1, PROJECTION_YEARS + 1):
        projected_revenue *= 1 + growth_rate / 100
        cash_flow = projected_revenue * (ebitda_margin / 100)
        cash_flows.append(cash_flow)
        total_pv += cash_flow / (1 + discount_rate / 100) ** year

    terminal_value = (
        cash_flows[-1] * (1 + TERMINAL_GROWTH)
        / (discount_rate / 100 - TERMINAL_GROWTH)
    )
    terminal_pv = terminal_value / (1 + discount_rate / 100) ** PROJECTION_YEARS

    return total_pv + terminal_pv, cash_flows, terminal_value


def _is_singular(discount_rate: float) -> bool:
    return discount_rate / 100 - TERMINAL_GROWTH == 0


def _compute_sensitivity_table(
    revenue: float,
    growth_rate: float,
    ebitda_margin: float,
    base_discount_rate: float,
) -> list[SensitivityCell]:
    """Generate 5x5 grid: discount rate +/-2pts x growth rate +/-10pts, skipping invalid cells."""
    rate_steps = [base_discount_rate + delta for delta in [-2, -1, 0, 1, 2]]
    growth_steps = [growth_rate + delta for delta in [-10, -5, 0, 5, 10]]

    cells: list[SensitivityCell] = []
    for r in rate_steps:
        if r < 1 or r > 50 or _is_singular(r):
            continue
        for g in growth_steps:
            if g < -100 or g > 1000:
                continue
            pv, _, _ = _compute_ev(revenue, g, ebitda_margin, r)
            cells.append(SensitivityCell(
                discount_rate=r,
                growth_rate=g,
                value=round(max(0.0, pv), 2),
            ))
    return cells


def compute_dcf_valuation(startup: StartupInput) -> DCFResult:
    """Five-year discounted cash flow plus a 3% perpetual-growth terminal value."""
    discount_rate = startup.discount_rate
    warnings: list[str] = []
    description = (
        f"{PROJECTION_YEARS}-year projection with {format_number(discount_rate)}% discount rate "
        f"and {format_number(TERMINAL_GROWTH * 100)}% terminal growth"
    )

    if _is_singular(discount_rate):
        warnings.append(
            f"Discount rate ({format_number(discount_rate)}%) equals terminal growth rate "
            f"({format_number(TERMINAL_GROWTH * 100)}%): terminal value is undefined, DCF reported as 0"
        )
        return DCFResult(
            value=0.0,
            description=description,
            discount_rate=discount_rate,
            terminal_growth_rate=TERMINAL_GROWTH * 100,
            warnings=warnings,
        )

    if discount_rate / 100 < TERMINAL_GROWTH:
        warnings.append(
            f"Discount rate ({format_number(discount_rate)}%) is below terminal growth rate "
            f"({format_number(TERMINAL_GROWTH * 100)}%): terminal value changes sign"
        )

    present_value, cash_flows, terminal_value = _compute_ev(
        startup.revenue,
        startup.growth_rate,
        startup.ebitda_margin,
        discount_rate,
    )

    if present_value < 0:
        warnings.append(f"DCF present value {present_value:,.0f} is negative, floored at 0")

    sensitivity_table = _compute_sensitivity_table(
        startup.revenue,
        startup.growth_rate,
        startup.ebitda_margin,
        discount_rate,
    )

    return DCFResult(
        value=max(0.0, present_value),
        description=description,
        projected_cash_flows=cash_flows,
        terminal_value=terminal_value,
        discount_rate=discount_rate,
        terminal_growth_rate=TERMINAL_GROWTH * 100,
        warnings=warnings,
        sensitivity_table=sensitivity_table,
    )
