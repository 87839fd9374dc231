"""Schema.org JSON-LD structured data helpers for SEO."""

from .json_ld import (
    article_ld,
    breadcrumb_ld,
    event_ld,
    faq_ld,
    json_ld_script,
    merge_schemas,
    organization_ld,
    product_ld,
    review_ld,
    service_ld,
)
from .models import (
    BreadcrumbItem,
    EventLocation,
    FAQItem,
    GeoCoordinates,
    OpeningHours,
    OrganizationInfo,
    ReviewItem,
    ServiceArea,
)

__version__ = "1.0.0"

__all__ = [
    "article_ld",
    "breadcrumb_ld",
    "event_ld",
    "faq_ld",
    "json_ld_script",
    "merge_schemas",
    "organization_ld",
    "product_ld",
    "review_ld",
    "service_ld",
    "BreadcrumbItem",
    "EventLocation",
    "FAQItem",
    "GeoCoordinates",
    "OpeningHours",
    "OrganizationInfo",
    "ReviewItem",
    "ServiceArea",
]
