"""Schema.org JSON-LD for BreadcrumbList."""

from typing import Any, Dict, Iterable, Mapping, Union

from ..models import BreadcrumbItem
from .base import coerce, schema_base


def breadcrumb_ld(items: Iterable[Union[BreadcrumbItem, Mapping[str, Any]]]) -> Dict[str, Any]:
    """BreadcrumbList with 1-based ListItem positions."""
    elements = []
    for index, item in enumerate(items):
        crumb = coerce(BreadcrumbItem, item)
        elements.append(
            {
                "@type": "ListItem",
                "position": index + 1,
                "name": crumb.name,
                "item": crumb.url,
            }
        )
    return schema_base("BreadcrumbList", itemListElement=elements)
