"""Schema.org JSON-LD for Article."""

from typing import Any, Dict, Optional

from .base import schema_base, set_if


def article_ld(
    headline: str,
    date_published: str,
    author: str,
    publisher: str,
    description: Optional[str] = None,
    image: Optional[str] = None,
    date_modified: Optional[str] = None,
    publisher_logo: Optional[str] = None,
    url: Optional[str] = None,
) -> Dict[str, Any]:
    """Article with Person author and Organization publisher."""
    publisher_ld: Dict[str, Any] = {"@type": "Organization", "name": publisher}
    if publisher_logo:
        publisher_ld["logo"] = {"@type": "ImageObject", "url": publisher_logo}

    out = schema_base(
        "Article",
        headline=headline,
        datePublished=date_published,
        author={"@type": "Person", "name": author},
        publisher=publisher_ld,
    )
    set_if(out, "description", description)
    set_if(out, "image", image)
    set_if(out, "dateModified", date_modified)
    if url:
        out["mainEntityOfPage"] = {"@type": "WebPage", "@id": url}
    return out
