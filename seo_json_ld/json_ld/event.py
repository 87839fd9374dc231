"""Schema.org JSON-LD for Event."""

from typing import Any, Dict, Mapping, Optional, Union

from ..models import EventAttendanceMode, EventLocation, EventStatus
from .base import coerce_optional, schema_base, schema_enum_url, set_if


def event_ld(
    name: str,
    start_date: str,
    description: Optional[str] = None,
    end_date: Optional[str] = None,
    location: Union[EventLocation, Mapping[str, Any], None] = None,
    url: Optional[str] = None,
    image: Optional[str] = None,
    event_status: Optional[EventStatus] = None,
    event_attendance_mode: Optional[EventAttendanceMode] = None,
) -> Dict[str, Any]:
    """Event; status and attendance mode render as schema.org enum URLs."""
    place = coerce_optional(EventLocation, location)

    out = schema_base("Event", name=name, startDate=start_date)
    set_if(out, "description", description)
    set_if(out, "endDate", end_date)
    if place is not None:
        loc: Dict[str, Any] = {"@type": "Place", "name": place.name}
        if place.address:
            loc["address"] = {"@type": "PostalAddress", "streetAddress": place.address}
        out["location"] = loc
    set_if(out, "url", url)
    set_if(out, "image", image)
    if event_status:
        out["eventStatus"] = schema_enum_url(event_status)
    if event_attendance_mode:
        out["eventAttendanceMode"] = schema_enum_url(event_attendance_mode)
    return out
