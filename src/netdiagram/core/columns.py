"""Column access and source/destination/value field selection."""

import logging
from dataclasses import dataclass
from typing import Dict, List, Optional, Sequence

from netdiagram.core.errors import ConfigurationError
from netdiagram.core.schemas import (
    ColumnarResult,
    FieldDescriptor,
    RawVizData,
    Scalar,
    ValueOptions,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FieldResolution:
    """Effective fields of a diagram."""
    source: FieldDescriptor
    dest: FieldDescriptor
    value: FieldDescriptor


def resolve_fields(
    fields: Sequence[FieldDescriptor],
    value_options: Optional[ValueOptions] = None,
) -> FieldResolution:
    """Pick the source, destination and value fields.

    An explicit selection wins; otherwise the source is the last field and the
    destination the second-to-last. The value field is always the first one.

    Raises:
        ConfigurationError: fewer than two fields are available.
    """
    if len(fields) < 2:
        raise ConfigurationError(
            f"A network diagram needs at least 2 fields, got {len(fields)}"
        )

    options = value_options or ValueOptions()
    source = options.source[0] if options.source else fields[-1]
    dest = options.dest[0] if options.dest else fields[-2]

    known = {f.name for f in fields}
    for role, selected in (("source", source), ("destination", dest)):
        if selected.name not in known:
            logger.warning(f"Selected {role} field '{selected.name}' is not in the result fields")

    return FieldResolution(source=source, dest=dest, value=fields[0])


def get_column(data: ColumnarResult, name: str) -> List[Scalar]:
    """Return the values of a column, or an empty list if the column is missing."""
    if name not in data:
        logger.warning(f"Column '{name}' is missing from the query result")
        return []
    return list(data[name])


def rows_to_columns(
    rows: Sequence[Dict[str, Scalar]],
    fields: Sequence[FieldDescriptor],
) -> ColumnarResult:
    """Pivot row-oriented records into columns, one per field descriptor."""
    return {f.name: [row.get(f.name) for row in rows] for f in fields}


def columns_of(raw: RawVizData) -> ColumnarResult:
    """Columnar view of a query result, pivoting `jsonData` when `data` is empty."""
    if raw.data:
        return raw.data
    if raw.json_data:
        return rows_to_columns(raw.json_data, raw.metadata.fields)
    return {}


__all__ = ["FieldResolution", "resolve_fields", "get_column", "rows_to_columns", "columns_of"]
