"""Schema.org JSON-LD for Organization / LocalBusiness."""

from typing import Any, Dict, Mapping, Optional, Union

from ..models import OpeningHours, OrganizationInfo, ServiceArea
from .base import coerce, coerce_optional, drop_partial, schema_base, set_if

OPEN_24_HOURS = "Mo-Su"


def area_served_ld(area: ServiceArea) -> Optional[Dict[str, Any]]:
    """GeoCircle if midpoint and radius are set, else City, else None."""
    if area.geo_midpoint is not None and area.geo_radius:
        return {
            "@type": "GeoCircle",
            "geoMidpoint": {
                "@type": "GeoCoordinates",
                "latitude": area.geo_midpoint.latitude,
                "longitude": area.geo_midpoint.longitude,
            },
            "geoRadius": area.geo_radius,
        }
    if area.city:
        return {"@type": "City", "name": area.city}
    return None


def organization_ld(
    organization: Union[OrganizationInfo, Mapping[str, Any]],
    area_served: Union[ServiceArea, Mapping[str, Any], None] = None,
    opening_hours: Union[OpeningHours, Mapping[str, Any], None] = None,
    type: str = "LocalBusiness",
    *,
    strict: Optional[bool] = None,
) -> Dict[str, Any]:
    """Organization (default type LocalBusiness) with service area and opening hours.

    Partial service-area or opening-hours options are dropped; with
    ``strict=True`` (or ``SEO_JSON_LD_STRICT``) they raise
    ``IncompleteOptionsError`` instead.
    """
    org = coerce(OrganizationInfo, organization)
    area = coerce_optional(ServiceArea, area_served)
    hours = coerce_optional(OpeningHours, opening_hours)

    out = schema_base(type, name=org.name, url=org.url)
    set_if(out, "@id", org.id)
    set_if(out, "description", org.description)
    set_if(out, "telephone", org.telephone)
    set_if(out, "email", org.email)
    set_if(out, "priceRange", org.price_range)
    set_if(out, "image", org.image)
    set_if(out, "logo", org.logo)
    set_if(out, "sameAs", list(org.same_as))

    if area is not None:
        served = area_served_ld(area)
        if served is None:
            drop_partial(
                "areaServed",
                "Service area needs geoMidpoint with geoRadius, or city; omitted",
                strict,
                region=area.region,
                country=area.country,
            )
        else:
            out["areaServed"] = served

    if hours is not None:
        if hours.open24_hours:
            out["openingHours"] = OPEN_24_HOURS
        elif hours.day_of_week is not None and hours.opens and hours.closes:
            out["openingHoursSpecification"] = {
                "@type": "OpeningHoursSpecification",
                "dayOfWeek": list(hours.day_of_week),
                "opens": hours.opens,
                "closes": hours.closes,
            }
        else:
            drop_partial(
                "openingHoursSpecification",
                "Opening hours need dayOfWeek, opens and closes together; omitted",
                strict,
            )
    return out
