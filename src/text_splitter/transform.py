"""Record fan-out: apply the segmenter to a list of records.

Every input record expands into zero or more output records. Each output
record is a shallow copy of its source plus one computed field (``chunk``
or ``match``). Output order follows input order, then fragment order.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable, Mapping
from typing import Any

from .errors import MissingFieldError, TextSplitterError
from .models import ERROR_FIELD, ErrorMode, TransformConfig
from .patterns import DEFAULT_TIMEOUT
from .properties import resolve_config
from .segmenter import process

logger = logging.getLogger(__name__)

Record = Mapping[str, Any]
ParameterSource = Mapping[str, Any] | Callable[[int, Record], Mapping[str, Any]]


def read_text(record: Record, field: str) -> str:
    """Return the text stored under ``field``.

    Raises:
        MissingFieldError: If the field is absent, not a string, or empty.
    """
    if field not in record:
        raise MissingFieldError(field)
    text = record[field]
    if not isinstance(text, str):
        raise MissingFieldError(field, f"not a string ({type(text).__name__})")
    if not text:
        raise MissingFieldError(field, "empty")
    return text


def transform_record(record: Record, config: TransformConfig) -> list[dict[str, Any]]:
    """Fan one record out into its output records.

    A record without usable text yields an empty list.
    """
    try:
        text = read_text(record, config.text_field)
    except MissingFieldError as exc:
        logger.debug("Skipping record: %s", exc)
        return []

    field = config.output_field
    return [{**record, field: fragment} for fragment in process(text, config)]


def _parameters_for(source: ParameterSource | None, index: int, record: Record) -> Mapping[str, Any]:
    if source is None:
        return {}
    if callable(source):
        return source(index, record)
    return source


def transform_records(
    records: Iterable[Record],
    parameters: ParameterSource | None = None,
    *,
    on_error: ErrorMode = "abort",
    regex_timeout: float | None = DEFAULT_TIMEOUT,
) -> list[dict[str, Any]]:
    """Transform every record and flatten the results into one list.

    Args:
        records: Input records, each a mapping of field name to value.
        parameters: Parameter values by name (``textField``, ``operation``,
            ``splitMethod``, ``regex``, ``length``, ``splitRegex``, ...).
            Either one mapping shared by every record, or a callable
            ``(index, record) -> mapping`` resolving values per record.
        on_error: ``"abort"`` re-raises the first pattern, length or
            configuration error and returns nothing. ``"continue"`` emits
            one record with an ``error`` field for the failing input and
            carries on.
        regex_timeout: Execution budget for user patterns, in seconds.

    Returns:
        The flattened output records.

    Raises:
        TextSplitterError: In ``"abort"`` mode, the first failure.
    """
    if on_error not in ("abort", "continue"):
        raise ValueError(f"on_error must be 'abort' or 'continue', got {on_error!r}")

    output: list[dict[str, Any]] = []
    count = 0
    for index, record in enumerate(records):
        count += 1
        try:
            config = resolve_config(
                _parameters_for(parameters, index, record),
                regex_timeout=regex_timeout,
            )
            output.extend(transform_record(record, config))
        except TextSplitterError as exc:
            if on_error == "abort":
                raise
            logger.warning("Record %d failed: %s", index, exc)
            output.append({**record, ERROR_FIELD: str(exc)})

    logger.info("Transformed %d records into %d output records", count, len(output))
    return output


__all__ = ["ParameterSource", "Record", "read_text", "transform_record", "transform_records"]
