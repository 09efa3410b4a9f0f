"""Tests for square_ox.api.bookings: BookingBuilder and the Bookings resource."""

from __future__ import annotations

from unittest.mock import MagicMock

import pytest

from square_ox import SquareClient, ValidationError
from square_ox.api import BookingBuilder
from square_ox.objects import AppointmentSegment

SANDBOX = "https://connect.squareupsandbox.com/v2/"


def _segment() -> AppointmentSegment:
    return AppointmentSegment(
        team_member_id="TM1", service_variation_id="SV1", service_variation_version=1
    )


@pytest.mark.parametrize(
    "builder, field",
    [
        (BookingBuilder().location_id("L1").add_appointment_segment(_segment()), "start_at"),
        (BookingBuilder().start_at("2024-06-01T15:00:00Z").add_appointment_segment(_segment()), "location_id"),
        (BookingBuilder().start_at("2024-06-01T15:00:00Z").location_id("L1"), "appointment_segments"),
    ],
)
def test_builder_required_fields(builder: BookingBuilder, field: str) -> None:
    with pytest.raises(ValidationError) as info:
        builder.build()
    assert info.value.field == field


def test_create(client: SquareClient, session: MagicMock) -> None:
    body = (
        BookingBuilder()
        .start_at("2024-06-01T15:00:00Z")
        .location_id("L1")
        .customer_id("C1")
        .add_appointment_segment(_segment())
        .build()
    )
    client.bookings.create(body)
    kwargs = session.call_args.kwargs
    assert kwargs["method"] == "POST"
    assert kwargs["url"] == SANDBOX + "bookings"
    assert kwargs["json"]["booking"] == {
        "start_at": "2024-06-01T15:00:00Z",
        "location_id": "L1",
        "customer_id": "C1",
        "appointment_segments": [
            {"team_member_id": "TM1", "service_variation_id": "SV1", "service_variation_version": 1}
        ],
    }


def test_list(client: SquareClient, session: MagicMock) -> None:
    client.bookings.list(limit=10, location_id="L1")
    assert session.call_args.kwargs["params"] == [("limit", "10"), ("location_id", "L1")]


def test_search_availability(client: SquareClient, session: MagicMock) -> None:
    query = {"filter": {"location_id": "L1", "start_at_range": {"start_at": "a", "end_at": "b"}}}
    client.bookings.search_availability(query)
    assert session.call_args.kwargs["url"] == SANDBOX + "bookings/availability/search"
    assert session.call_args.kwargs["json"] == {"query": query}


def test_retrieve_update_cancel(client: SquareClient, session: MagicMock) -> None:
    client.bookings.retrieve("B1")
    assert session.call_args.kwargs["url"] == SANDBOX + "bookings/B1"

    body = BookingBuilder().seller_note("moved").version(2).body
    client.bookings.update("B1", body)
    assert session.call_args.kwargs["method"] == "PUT"
    assert session.call_args.kwargs["json"]["booking"] == {"seller_note": "moved", "version": 2}

    client.bookings.cancel("B1", booking_version=2, idempotency_key="k")
    assert session.call_args.kwargs["method"] == "POST"
    assert session.call_args.kwargs["url"] == SANDBOX + "bookings/B1/cancel"
    assert session.call_args.kwargs["json"] == {"idempotency_key": "k", "booking_version": 2}
