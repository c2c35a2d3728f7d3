"""Internal application services."""

from .validation import ValidationError, validate_press_window, validate_tee_order
from .settlement import RoundBets, settle_trip, simplify_payments, trip_format_standings

__all__ = [
    "ValidationError",
    "validate_press_window",
    "validate_tee_order",
    "RoundBets",
    "settle_trip",
    "simplify_payments",
    "trip_format_standings",
]
