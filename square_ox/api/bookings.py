"""
Bookings (appointments) functionality of the Square API.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from square_ox.api.base import ApiResource, path_id
from square_ox.builder import Builder, new_idempotency_key
from square_ox.endpoint import SquareAPI, Verb
from square_ox.objects import AppointmentSegment, Booking, SquareObject
from square_ox.response import SquareResponse


@dataclass
class BookingRequest(SquareObject):
    idempotency_key: str | None = field(default_factory=new_idempotency_key)
    booking: Booking = field(default_factory=Booking)


class BookingBuilder(Builder[BookingRequest]):
    """
    Build a BookingRequest. start_at, location_id and at least one appointment
    segment are required.
    """

    def __init__(self, body: BookingRequest | None = None) -> None:
        super().__init__(body or BookingRequest())

    @property
    def _booking(self) -> Booking:
        return self.body.booking

    def validate(self) -> None:
        self._require(self._booking.start_at, "start_at")
        self._require(self._booking.location_id, "location_id")
        self._require(self._booking.appointment_segments, "appointment_segments")

    def start_at(self, start_at: str) -> BookingBuilder:
        """RFC 3339 timestamp, e.g. "2024-06-01T15:00:00Z"."""
        self._booking.start_at = start_at
        return self

    def location_id(self, location_id: str) -> BookingBuilder:
        self._booking.location_id = location_id
        return self

    def customer_id(self, customer_id: str) -> BookingBuilder:
        self._booking.customer_id = customer_id
        return self

    def customer_note(self, note: str) -> BookingBuilder:
        self._booking.customer_note = note
        return self

    def seller_note(self, note: str) -> BookingBuilder:
        self._booking.seller_note = note
        return self

    def location_type(self, location_type: str) -> BookingBuilder:
        self._booking.location_type = location_type
        return self

    def version(self, version: int) -> BookingBuilder:
        self._booking.version = version
        return self

    def add_appointment_segment(self, segment: AppointmentSegment) -> BookingBuilder:
        if self._booking.appointment_segments is None:
            self._booking.appointment_segments = [segment]
        else:
            self._booking.appointment_segments.append(segment)
        return self


class Bookings(ApiResource):
    """Appointments: list, book, search availability, reschedule and cancel."""

    def list(
        self,
        limit: int | None = None,
        cursor: str | None = None,
        customer_id: str | None = None,
        team_member_id: str | None = None,
        location_id: str | None = None,
        start_at_min: str | None = None,
        start_at_max: str | None = None,
    ) -> SquareResponse:
        return self._client.request(
            Verb.GET,
            SquareAPI.bookings(),
            params={
                "limit": limit,
                "cursor": cursor,
                "customer_id": customer_id,
                "team_member_id": team_member_id,
                "location_id": location_id,
                "start_at_min": start_at_min,
                "start_at_max": start_at_max,
            },
        )

    def create(self, booking: BookingRequest) -> SquareResponse:
        return self._client.request(Verb.POST, SquareAPI.bookings(), json=booking)

    def search_availability(self, query: dict[str, Any]) -> SquareResponse:
        """
        Find open slots. ``query`` is Square's SearchAvailabilityQuery, e.g.
        {"filter": {"start_at_range": {...}, "location_id": "L1"}}.
        """
        return self._client.request(
            Verb.POST,
            SquareAPI.bookings("/availability/search"),
            json={"query": query},
        )

    def retrieve(self, booking_id: str) -> SquareResponse:
        return self._client.request(
            Verb.GET, SquareAPI.bookings(f"/{path_id(booking_id)}")
        )

    def update(self, booking_id: str, booking: BookingRequest) -> SquareResponse:
        return self._client.request(
            Verb.PUT, SquareAPI.bookings(f"/{path_id(booking_id)}"), json=booking
        )

    def cancel(
        self,
        booking_id: str,
        booking_version: int | None = None,
        idempotency_key: str | None = None,
    ) -> SquareResponse:
        return self._client.request(
            Verb.POST,
            SquareAPI.bookings(f"/{path_id(booking_id)}/cancel"),
            json={
                "idempotency_key": idempotency_key or new_idempotency_key(),
                "booking_version": booking_version,
            },
        )
