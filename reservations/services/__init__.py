"""Reservation API access and response normalization."""

from .reservation_client import ClubContext, ReservationApiClient, ReservationFetchError
from .response_normalizer import normalize_reservations_response

__all__ = [
    "ClubContext",
    "ReservationApiClient",
    "ReservationFetchError",
    "normalize_reservations_response",
]
