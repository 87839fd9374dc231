"""Serialize JSON-LD records for a ``<script type="application/ld+json">`` element."""

import json
from typing import Any, Dict, List, Sequence, Union

from ..errors import SerializationError

Schema = Dict[str, Any]


def json_ld_script(schema: Union[Schema, Sequence[Schema]]) -> str:
    """Compact JSON text of one record, or a JSON array for a list of records.

    Key order and non-ASCII text are kept as-is. No HTML escaping is applied;
    callers embedding untrusted text own that.
    """
    try:
        return json.dumps(
            schema,
            ensure_ascii=False,
            separators=(",", ":"),
            allow_nan=False,
        )
    except (TypeError, ValueError) as e:
        raise SerializationError(
            f"Schema is not JSON-serializable: {e}",
            details={"type": type(schema).__name__},
        ) from e


def merge_schemas(schemas: List[Schema]) -> List[Schema]:
    """Records for a multi-schema page, in caller order (returned unchanged)."""
    return schemas
