import pytest

from backend.models.request import StartupInput


@pytest.fixture
def make_startup():
    def _make(**overrides) -> StartupInput:
        fields = dict(
            company_name="Acme Analytics",
            stage="seed",
            revenue=1_000_000,
            growth_rate=50,
            ebitda_margin=20,
            discount_rate=35,
            description="B2B analytics platform for mid-market retailers",
        )
        fields.update(overrides)
        return StartupInput(**fields)
    return _make
