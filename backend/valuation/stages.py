from types import MappingProxyType

STAGES = ("pre-seed", "seed", "series-a", "growth")

# Reference defaults only; the DCF uses whatever discount rate the caller supplies.
DEFAULT_DISCOUNT_RATES = MappingProxyType({
    "pre-seed": 40,
    "seed": 35,
    "series-a": 25,
    "growth": 15,
})

DEFAULT_MULTIPLES = MappingProxyType({
    "pre-seed": 8,
    "seed": 10,
    "series-a": 12,
    "growth": 15,
})


def stage_defaults() -> list[dict]:
    """Default discount rate and revenue multiple for each stage, in stage order."""
    return [
        {
            "stage": stage,
            "discount_rate": DEFAULT_DISCOUNT_RATES[stage],
            "revenue_multiple": DEFAULT_MULTIPLES[stage],
        }
        for stage in STAGES
    ]
