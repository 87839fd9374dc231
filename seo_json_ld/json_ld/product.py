"""Schema.org JSON-LD for Product."""

from decimal import ROUND_HALF_UP, Decimal
from typing import Any, Dict, List, Optional, Union

from ..models import Availability
from .base import drop_partial, schema_base, schema_enum_url, set_if

CENT = Decimal("0.01")


def format_price(price: float) -> str:
    """Two-decimal price string; exact ties round away from zero, -0.0 gives "0.00"."""
    if price == 0:
        price = 0
    return format(Decimal(price).quantize(CENT, rounding=ROUND_HALF_UP), "f")


def offer_ld(
    price: float,
    currency: str,
    availability: Optional[Availability] = None,
) -> Dict[str, Any]:
    """Offer with price fixed to two decimals ("0.00" for free items)."""
    out: Dict[str, Any] = {
        "@type": "Offer",
        "price": format_price(price),
        "priceCurrency": currency,
    }
    if availability:
        out["availability"] = schema_enum_url(availability)
    return out


def product_ld(
    name: str,
    description: str,
    image: Union[str, List[str], None] = None,
    url: Optional[str] = None,
    brand: Optional[str] = None,
    sku: Optional[str] = None,
    price: Optional[float] = None,
    price_currency: Optional[str] = None,
    availability: Optional[Availability] = None,
    *,
    strict: Optional[bool] = None,
) -> Dict[str, Any]:
    """Single product as Schema.org Product.

    ``offers`` is emitted only when both price and currency are given.
    """
    out = schema_base("Product", name=name, description=description)
    set_if(out, "image", list(image) if isinstance(image, (list, tuple)) else image)
    set_if(out, "url", url)
    if brand:
        out["brand"] = {"@type": "Brand", "name": brand}
    set_if(out, "sku", sku)

    if price is not None and price_currency:
        out["offers"] = offer_ld(price, price_currency, availability)
    elif price is not None or price_currency:
        drop_partial(
            "offers",
            "Offer needs both price and priceCurrency; omitted",
            strict,
            price=price,
            price_currency=price_currency,
        )
    return out
