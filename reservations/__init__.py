"""Reservation records and the reservation API client."""
