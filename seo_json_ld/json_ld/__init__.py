"""Schema.org JSON-LD builders for page structured data."""

from .base import SCHEMA_BASE_URL, SCHEMA_CONTEXT, schema_base, schema_enum_url, set_if
from .organization import area_served_ld, organization_ld
from .service import service_ld
from .faq import faq_ld
from .breadcrumb import breadcrumb_ld
from .review import review_ld
from .product import offer_ld, product_ld
from .article import article_ld
from .event import event_ld
from .script import json_ld_script, merge_schemas

__all__ = [
    "SCHEMA_BASE_URL",
    "SCHEMA_CONTEXT",
    "schema_base",
    "schema_enum_url",
    "set_if",
    "area_served_ld",
    "organization_ld",
    "service_ld",
    "faq_ld",
    "breadcrumb_ld",
    "review_ld",
    "offer_ld",
    "product_ld",
    "article_ld",
    "event_ld",
    "json_ld_script",
    "merge_schemas",
]
