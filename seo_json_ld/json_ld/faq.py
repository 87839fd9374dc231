"""Schema.org JSON-LD for FAQPage."""

from typing import Any, Dict, Iterable, Mapping, Union

from ..models import FAQItem
from .base import coerce, schema_base


def faq_ld(faqs: Iterable[Union[FAQItem, Mapping[str, Any]]]) -> Dict[str, Any]:
    """FAQPage; ``mainEntity`` keeps input order and is present even when empty."""
    questions = []
    for item in faqs:
        faq = coerce(FAQItem, item)
        questions.append(
            {
                "@type": "Question",
                "name": faq.question,
                "acceptedAnswer": {"@type": "Answer", "text": faq.answer},
            }
        )
    return schema_base("FAQPage", mainEntity=questions)
