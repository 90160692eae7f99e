"""Pydantic models describing one transformation."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, StrictInt

from .chunking import DEFAULT_SPLIT_PATTERN
from .extract import DEFAULT_EXTRACT_PATTERN
from .patterns import DEFAULT_TIMEOUT

Operation = Literal["split", "extract"]
SplitMethod = Literal["length", "paragraph", "sentence", "word", "regex"]
ErrorMode = Literal["abort", "continue"]

OPERATIONS: tuple[str, ...] = ("split", "extract")
SPLIT_METHODS: tuple[str, ...] = ("length", "paragraph", "sentence", "word", "regex")

# Field added to each output record, keyed by operation.
OUTPUT_FIELDS: dict[str, str] = {"split": "chunk", "extract": "match"}
ERROR_FIELD = "error"


class TransformConfig(BaseModel):
    """Validated parameters for transforming one record.

    Field aliases carry the camelCase parameter names hosts use, so both
    ``TransformConfig(splitMethod="word")`` and
    ``TransformConfig(split_method="word")`` work.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")

    text_field: str = Field(default="text", alias="textField")
    operation: Operation = "split"
    split_method: SplitMethod = Field(default="length", alias="splitMethod")
    regex: str = DEFAULT_EXTRACT_PATTERN
    length: StrictInt = 100
    split_regex: str = Field(default=DEFAULT_SPLIT_PATTERN, alias="splitRegex")
    ignore_case: bool = Field(default=True, alias="ignoreCase")
    global_match: bool = Field(default=True, alias="globalMatch")
    split_ignore_case: bool = Field(default=False, alias="splitIgnoreCase")
    regex_timeout: float | None = Field(default=DEFAULT_TIMEOUT, alias="regexTimeout")

    @property
    def output_field(self) -> str:
        return OUTPUT_FIELDS[self.operation]


__all__ = [
    "ERROR_FIELD",
    "ErrorMode",
    "OPERATIONS",
    "OUTPUT_FIELDS",
    "Operation",
    "SPLIT_METHODS",
    "SplitMethod",
    "TransformConfig",
]
