"""
Locations functionality of the Square API.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from square_ox.api.base import ApiResource, path_id
from square_ox.builder import Builder
from square_ox.endpoint import SquareAPI, Verb
from square_ox.objects import (
    Address,
    BusinessHours,
    BusinessHoursPeriod,
    Coordinates,
    Currency,
    Location,
    LocationStatus,
    LocationType,
    SquareObject,
    TaxIds,
)
from square_ox.response import SquareResponse

logger = logging.getLogger(__name__)


@dataclass
class LocationCreationWrapper(SquareObject):
    """Create/update body: Square expects the location wrapped under "location"."""

    location: Location = field(default_factory=Location)


class LocationBuilder(Builder[LocationCreationWrapper]):
    """
    Build a LocationCreationWrapper. A new location must have a name.

        body = LocationBuilder().name("The Foo Bar").build()
    """

    def __init__(self, body: LocationCreationWrapper | None = None) -> None:
        super().__init__(body or LocationCreationWrapper())

    @property
    def _location(self) -> Location:
        return self.body.location

    def validate(self) -> None:
        self._require(self._location.name, "name")

    def name(self, name: str) -> LocationBuilder:
        self._location.name = name
        return self

    def address(self, address: Address) -> LocationBuilder:
        self._location.address = address
        return self

    def business_email(self, business_email: str) -> LocationBuilder:
        self._location.business_email = business_email
        return self

    def add_business_hours_period(self, period: BusinessHoursPeriod) -> LocationBuilder:
        """Append one opening period, creating the BusinessHours on first use."""
        hours = self._location.business_hours
        if hours is None or hours.periods is None:
            self._location.business_hours = BusinessHours(periods=[period])
        else:
            hours.periods.append(period)
        return self

    def business_hours(self, business_hours: BusinessHours) -> LocationBuilder:
        """Replace all opening hours."""
        self._location.business_hours = business_hours
        return self

    def business_name(self, business_name: str) -> LocationBuilder:
        self._location.business_name = business_name
        return self

    def add_capability(self, capability: str) -> LocationBuilder:
        if self._location.capabilities is None:
            self._location.capabilities = [capability]
        else:
            self._location.capabilities.append(capability)
        return self

    def capabilities(self, capabilities: list[str]) -> LocationBuilder:
        """Replace all capabilities already set."""
        self._location.capabilities = list(capabilities)
        return self

    def coordinates(self, coordinates: Coordinates) -> LocationBuilder:
        self._location.coordinates = coordinates
        return self

    def country(self, country: str) -> LocationBuilder:
        self._location.country = country
        return self

    def currency(self, currency: Currency) -> LocationBuilder:
        self._location.currency = currency
        return self

    def description(self, description: str) -> LocationBuilder:
        self._location.description = description
        return self

    def facebook_url(self, facebook_url: str) -> LocationBuilder:
        self._location.facebook_url = facebook_url
        return self

    def full_format_logo_url(self, url: str) -> LocationBuilder:
        self._location.full_format_logo_url = url
        return self

    def instagram_username(self, username: str) -> LocationBuilder:
        self._location.instagram_username = username
        return self

    def language_code(self, language_code: str) -> LocationBuilder:
        self._location.language_code = language_code
        return self

    def logo_url(self, logo_url: str) -> LocationBuilder:
        self._location.logo_url = logo_url
        return self

    def mcc(self, mcc: str) -> LocationBuilder:
        self._location.mcc = mcc
        return self

    def merchant_id(self, merchant_id: str) -> LocationBuilder:
        self._location.merchant_id = merchant_id
        return self

    def phone_number(self, phone_number: str) -> LocationBuilder:
        self._location.phone_number = phone_number
        return self

    def pos_background_url(self, url: str) -> LocationBuilder:
        self._location.pos_background_url = url
        return self

    def status(self, status: LocationStatus) -> LocationBuilder:
        self._location.status = status
        return self

    def tax_ids(self, tax_ids: TaxIds) -> LocationBuilder:
        self._location.tax_ids = tax_ids
        return self

    def timezone(self, timezone: str) -> LocationBuilder:
        self._location.timezone = timezone
        return self

    def twitter_username(self, username: str) -> LocationBuilder:
        self._location.twitter_username = username
        return self

    def location_type(self, location_type: LocationType) -> LocationBuilder:
        self._location.type = location_type
        return self

    def website_url(self, website_url: str) -> LocationBuilder:
        self._location.website_url = website_url
        return self


class Locations(ApiResource):
    """List, create, retrieve and update business locations."""

    def list(self) -> SquareResponse:
        """List all locations of the seller (body key "locations")."""
        return self._client.request(Verb.GET, SquareAPI.locations())

    def create(self, new_location: LocationCreationWrapper) -> SquareResponse:
        """Create a location (body key "location")."""
        response = self._client.request(
            Verb.POST, SquareAPI.locations(), json=new_location
        )
        logger.info("Created location %s", (response.get("location") or {}).get("id"))
        return response

    def retrieve(self, location_id: str) -> SquareResponse:
        """Retrieve one location by id; "main" returns the main location."""
        return self._client.request(
            Verb.GET, SquareAPI.locations(f"/{path_id(location_id)}")
        )

    def update(
        self, updated_location: LocationCreationWrapper, location_id: str
    ) -> SquareResponse:
        """Update the fields set on updated_location for an existing location."""
        return self._client.request(
            Verb.PUT,
            SquareAPI.locations(f"/{path_id(location_id)}"),
            json=updated_location,
        )
