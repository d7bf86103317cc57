from backend.models.valuations import ComparablesResult, DCFResult, RevenueMultipleResult
from backend.valuation.blender import compute_blended_valuation, METHOD_WEIGHTS


def _dcf(value: float) -> DCFResult:
    return DCFResult(
        value=value,
        description="5-year projection with 35% discount rate and 3% terminal growth",
        projected_cash_flows=[1, 2, 3, 4, 5],
        terminal_value=100,
        discount_rate=35,
        terminal_growth_rate=3,
    )


def _revenue_multiple(value: float) -> RevenueMultipleResult:
    return RevenueMultipleResult(
        value=value,
        description="10x revenue multiple (seed stage typical)",
        multiple=10,
        stage="seed",
    )


def _comps(value: float) -> ComparablesResult:
    return ComparablesResult(
        value=value,
        description="8x median multiple from comparable companies",
        multiple=8,
    )


def test_weighted_blend():
    result = compute_blended_valuation(_dcf(5_000_000), _revenue_multiple(10_000_000), _comps(8_000_000))
    assert result.blended == 5_000_000 * 0.4 + 10_000_000 * 0.3 + 8_000_000 * 0.3


def test_weights_sum_to_one():
    assert abs(sum(METHOD_WEIGHTS.values()) - 1.0) < 1e-9
    result = compute_blended_valuation(_dcf(1), _revenue_multiple(1), _comps(1))
    total_weight = sum(w.weight for w in result.methodology_weights)
    assert abs(total_weight - 1.0) < 0.001
    assert [w.method for w in result.methodology_weights] == ["dcf", "revenue_multiple", "comparables"]


def test_range_from_min_and_max():
    result = compute_blended_valuation(_dcf(5_000_000), _revenue_multiple(10_000_000), _comps(8_000_000))
    assert result.range.low == 5_000_000 * 0.8
    assert result.range.high == 10_000_000 * 1.2
    assert result.range.low <= result.blended <= result.range.high


def test_zero_dcf_sets_low_to_zero():
    result = compute_blended_valuation(_dcf(0.0), _revenue_multiple(10_000_000), _comps(8_000_000))
    assert result.range.low == 0.0
    assert result.blended == 0.0 * 0.4 + 10_000_000 * 0.3 + 8_000_000 * 0.3


def test_all_zero():
    result = compute_blended_valuation(_dcf(0.0), _revenue_multiple(0.0), _comps(0.0))
    assert result.blended == 0.0
    assert result.range.low == result.range.high == 0.0


def test_sub_results_carried_through():
    dcf, rm, comps = _dcf(1), _revenue_multiple(2), _comps(3)
    result = compute_blended_valuation(dcf, rm, comps)
    assert result.dcf == dcf
    assert result.revenue_multiple == rm
    assert result.comparables == comps


def test_rationale_mentions_parameters():
    result = compute_blended_valuation(_dcf(1), _revenue_multiple(2), _comps(3))
    rationales = {w.method: w.rationale for w in result.methodology_weights}
    assert "5-year" in rationales["dcf"]
    assert "10x" in rationales["revenue_multiple"] and "seed" in rationales["revenue_multiple"]
    assert "8x default" in rationales["comparables"]
