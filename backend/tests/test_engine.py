import logging

from backend.valuation.engine import calculate_valuation
from backend.valuation.dcf import compute_dcf_valuation


def test_seed_scenario(make_startup):
    startup = make_startup(
        revenue=1_000_000, growth_rate=50, ebitda_margin=20, discount_rate=35, stage="seed",
    )
    result = calculate_valuation(startup)

    assert result.revenue_multiple.value == 10_000_000
    assert result.comparables.value == 8_000_000
    assert result.dcf.value == compute_dcf_valuation(startup).value
    assert result.dcf.value > 0
    assert result.blended == (
        result.dcf.value * 0.4
        + result.revenue_multiple.value * 0.3
        + result.comparables.value * 0.3
    )


def test_growth_stage_multiple(make_startup):
    result = calculate_valuation(make_startup(stage="growth"))
    assert result.revenue_multiple.value == 15_000_000
    assert result.comparables.value == 8_000_000


def test_range_ordering(make_startup):
    for margin in (-100, -10, 0, 15, 100):
        for rate in (1, 2.5, 3, 4, 20, 50):
            result = calculate_valuation(make_startup(ebitda_margin=margin, discount_rate=rate))
            assert result.dcf.value >= 0
            assert result.range.low <= result.range.high


def test_doubling_revenue_doubles_multiple_methods(make_startup):
    base = calculate_valuation(make_startup(revenue=2_750_000))
    doubled = calculate_valuation(make_startup(revenue=5_500_000))
    assert doubled.revenue_multiple.value == 2 * base.revenue_multiple.value
    assert doubled.comparables.value == 2 * base.comparables.value


def test_singular_discount_rate_yields_finite_result(make_startup):
    result = calculate_valuation(make_startup(discount_rate=3))
    assert result.dcf.value == 0.0
    assert result.dcf.warnings
    assert result.blended == 0.0 * 0.4 + 10_000_000 * 0.3 + 8_000_000 * 0.3
    assert result.range.low == 0.0


def test_deterministic(make_startup):
    startup = make_startup()
    assert calculate_valuation(startup) == calculate_valuation(startup)


def test_logs_dcf_warnings(make_startup, caplog):
    with caplog.at_level(logging.WARNING, logger="backend.valuation.engine"):
        calculate_valuation(make_startup(discount_rate=3))
    assert any("undefined" in r.message for r in caplog.records)
