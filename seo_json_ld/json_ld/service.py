"""Schema.org JSON-LD for Service."""

from typing import Any, Dict, Mapping, Optional, Union

from ..models import OrganizationInfo, ServiceArea
from .base import coerce, coerce_optional, schema_base, set_if


def service_ld(
    name: str,
    description: str,
    url: str,
    provider: Union[OrganizationInfo, Mapping[str, Any]],
    image: Optional[str] = None,
    service_type: Optional[str] = None,
    area_served: Union[ServiceArea, Mapping[str, Any], None] = None,
) -> Dict[str, Any]:
    """Service with its provider summarized as a LocalBusiness (name and url only).

    Only a city service area is rendered here.
    """
    prov = coerce(OrganizationInfo, provider)
    area = coerce_optional(ServiceArea, area_served)

    out = schema_base(
        "Service",
        name=name,
        description=description,
        url=url,
        provider={
            "@type": "LocalBusiness",
            "name": prov.name,
            "url": prov.url,
        },
    )
    set_if(out, "image", image)
    set_if(out, "serviceType", service_type)
    if area is not None and area.city:
        out["areaServed"] = {"@type": "City", "name": area.city}
    return out
