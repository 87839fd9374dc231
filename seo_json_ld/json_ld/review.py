"""Schema.org JSON-LD for reviews attached to a LocalBusiness."""

from typing import Any, Dict, Iterable, Mapping, Optional, Union

from ..models import OrganizationInfo, ReviewItem
from .base import coerce, schema_base

DEFAULT_BEST_RATING = 5
DEFAULT_WORST_RATING = 1

Number = Union[int, float]


def review_ld(
    organization: Union[OrganizationInfo, Mapping[str, Any]],
    review_count: int,
    rating_value: Number,
    reviews: Iterable[Union[ReviewItem, Mapping[str, Any]]] = (),
    best_rating: Optional[Number] = None,
    worst_rating: Optional[Number] = None,
) -> Dict[str, Any]:
    """LocalBusiness carrying an AggregateRating and individual Reviews.

    The aggregate is attached to the business, not to a top-level Review.
    Each review's Rating repeats the aggregate's best/worst bounds; ratings
    are not range-checked.
    """
    org = coerce(OrganizationInfo, organization)
    best = DEFAULT_BEST_RATING if best_rating is None else best_rating
    worst = DEFAULT_WORST_RATING if worst_rating is None else worst_rating

    review_list = []
    for item in reviews:
        r = coerce(ReviewItem, item)
        review_list.append(
            {
                "@type": "Review",
                "author": {"@type": "Person", "name": r.author},
                "reviewBody": r.review_body,
                "reviewRating": {
                    "@type": "Rating",
                    "ratingValue": r.review_rating,
                    "bestRating": best,
                    "worstRating": worst,
                },
                "datePublished": r.date_published,
            }
        )

    return schema_base(
        "LocalBusiness",
        name=org.name,
        aggregateRating={
            "@type": "AggregateRating",
            "ratingValue": rating_value,
            "reviewCount": review_count,
            "bestRating": best,
            "worstRating": worst,
        },
        review=review_list,
    )
