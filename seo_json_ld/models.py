"""Option records accepted by the JSON-LD builders.

Field names are snake_case; the camelCase spelling of each Schema.org-style
option (``priceRange``, ``sameAs``, ``geoMidpoint``...) is accepted as an alias.
"""

from typing import List, Literal, Optional, Union

from pydantic import BaseModel, Field

DayOfWeek = Literal[
    "Monday",
    "Tuesday",
    "Wednesday",
    "Thursday",
    "Friday",
    "Saturday",
    "Sunday",
]

Availability = Literal[
    "InStock",
    "OutOfStock",
    "PreOrder",
    "Backorder",
    "LimitedAvailability",
]

EventStatus = Literal[
    "EventScheduled",
    "EventCancelled",
    "EventPostponed",
    "EventRescheduled",
]

EventAttendanceMode = Literal[
    "OfflineEventAttendanceMode",
    "OnlineEventAttendanceMode",
    "MixedEventAttendanceMode",
]


class OptionRecord(BaseModel):
    """Base for option records: accepts field names and aliases."""

    class Config:
        populate_by_name = True
        frozen = True


class OrganizationInfo(OptionRecord):
    """Organization information for structured data."""

    name: str = Field(..., description="Organization name")
    url: str = Field(..., description="Organization website URL")
    description: Optional[str] = None
    logo: Optional[str] = Field(default=None, description="Logo URL")
    image: Optional[str] = Field(default=None, description="Image URL")
    telephone: Optional[str] = None
    email: Optional[str] = None
    price_range: Optional[str] = Field(
        default=None,
        alias="priceRange",
        description="Price range, e.g. '$$'",
    )
    same_as: List[str] = Field(
        default_factory=list,
        alias="sameAs",
        description="Social / profile URLs",
    )
    id: Optional[str] = Field(default=None, description="Node identifier, emitted as @id")


class GeoCoordinates(OptionRecord):
    latitude: float
    longitude: float


class ServiceArea(OptionRecord):
    """Service area: a circle around a midpoint, or a named city.

    ``region`` and ``country`` are accepted but not rendered.
    """

    geo_midpoint: Optional[GeoCoordinates] = Field(default=None, alias="geoMidpoint")
    geo_radius: Optional[str] = Field(
        default=None,
        alias="geoRadius",
        description="Radius, e.g. '30km'",
    )
    city: Optional[str] = None
    region: Optional[str] = None
    country: Optional[str] = None


class OpeningHours(OptionRecord):
    """Weekly opening hours, or always open."""

    day_of_week: Optional[List[DayOfWeek]] = Field(default=None, alias="dayOfWeek")
    opens: Optional[str] = Field(default=None, description="Opening time, HH:MM")
    closes: Optional[str] = Field(default=None, description="Closing time, HH:MM")
    open24_hours: bool = Field(default=False, alias="open24Hours")


class FAQItem(OptionRecord):
    question: str
    answer: str


class BreadcrumbItem(OptionRecord):
    name: str
    url: str


class ReviewItem(OptionRecord):
    """A single customer review."""

    author: str
    review_body: str = Field(..., alias="reviewBody")
    review_rating: Union[int, float] = Field(..., alias="reviewRating")
    date_published: str = Field(..., alias="datePublished", description="ISO date")


class EventLocation(OptionRecord):
    name: str
    address: Optional[str] = Field(default=None, description="Street address")
