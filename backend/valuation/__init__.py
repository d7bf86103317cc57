from backend.valuation.engine import calculate_valuation
from backend.valuation.formatting import format_currency

__all__ = ["calculate_valuation", "format_currency"]
