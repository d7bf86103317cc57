from types import MappingProxyType

from backend.models.request import StartupInput
from backend.models.valuations import ComparablesResult

# Mocked median EV/revenue multiples by sector.
COMPARABLE_MULTIPLES = MappingProxyType({
    "default": 8,
    "saas": 12,
    "fintech": 10,
    "ecommerce": 6,
    "marketplace": 9,
})

# The input carries no sector yet, so only the default entry is used.
# TODO: select the sector entry once StartupInput gains a sector field.
DEFAULT_SECTOR = "default"


def compute_comps_valuation(startup: StartupInput) -> ComparablesResult:
    """Value the company at the median multiple of comparable companies."""
    multiple = COMPARABLE_MULTIPLES[DEFAULT_SECTOR]
    return ComparablesResult(
        value=startup.revenue * multiple,
        description=f"{multiple}x median multiple from comparable companies",
        multiple=multiple,
        sector=DEFAULT_SECTOR,
    )
