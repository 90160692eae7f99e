"""Declarative parameter schema for the text splitter node.

Hosts render these properties as a form and resolve one set of values per
input record. A property carrying ``display_options`` is only shown when
every listed parameter currently holds one of the listed values; hidden
parameters resolve to their defaults.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any, Literal

from pydantic import BaseModel, Field, ValidationError

from .chunking import DEFAULT_SPLIT_PATTERN
from .errors import ConfigurationError, InvalidLengthError
from .extract import DEFAULT_EXTRACT_PATTERN
from .models import TransformConfig
from .patterns import DEFAULT_TIMEOUT

logger = logging.getLogger(__name__)

PropertyType = Literal["string", "number", "options", "boolean"]


class PropertyOption(BaseModel):
    name: str
    value: str
    description: str | None = None


class DisplayOptions(BaseModel):
    show: dict[str, list[Any]] = Field(default_factory=dict)


class NodeProperty(BaseModel):
    """One user-facing parameter."""

    display_name: str
    name: str
    type: PropertyType
    default: Any
    description: str | None = None
    options: list[PropertyOption] = Field(default_factory=list)
    display_options: DisplayOptions | None = None


class NodeDescription(BaseModel):
    """Static description of the node and its parameters."""

    display_name: str
    name: str
    icon: str
    group: list[str]
    version: int
    description: str
    defaults: dict[str, str]
    properties: list[NodeProperty]


def _show(**conditions: list[Any]) -> DisplayOptions:
    return DisplayOptions(show=dict(conditions))


PROPERTIES: list[NodeProperty] = [
    NodeProperty(
        display_name="Text Field",
        name="textField",
        type="string",
        default="text",
        description="Name of the field in input item that contains the text to process.",
    ),
    NodeProperty(
        display_name="Operation",
        name="operation",
        type="options",
        default="split",
        options=[
            PropertyOption(name="Split", value="split", description="Divide text (default)"),
            PropertyOption(name="Extract", value="extract", description="Extract matches (regex only)"),
        ],
    ),
    NodeProperty(
        display_name="Split Method",
        name="splitMethod",
        type="options",
        default="length",
        description="Method to split the text.",
        options=[
            PropertyOption(name="Length", value="length"),
            PropertyOption(name="Paragraph", value="paragraph"),
            PropertyOption(name="Sentence", value="sentence"),
            PropertyOption(name="Word", value="word"),
            PropertyOption(name="Regex", value="regex"),
        ],
        display_options=_show(operation=["split"]),
    ),
    NodeProperty(
        display_name="Regex Pattern",
        name="regex",
        type="string",
        default=DEFAULT_EXTRACT_PATTERN,
        description="Regular expression to extract from the text.",
        display_options=_show(operation=["extract"]),
    ),
    NodeProperty(
        display_name="Ignore Case",
        name="ignoreCase",
        type="boolean",
        default=True,
        description="Match the extraction pattern case-insensitively.",
        display_options=_show(operation=["extract"]),
    ),
    NodeProperty(
        display_name="All Matches",
        name="globalMatch",
        type="boolean",
        default=True,
        description="Return every match instead of only the first one.",
        display_options=_show(operation=["extract"]),
    ),
    NodeProperty(
        display_name="Length (characters)",
        name="length",
        type="number",
        default=100,
        description="Number of characters per chunk.",
        display_options=_show(operation=["split"], splitMethod=["length"]),
    ),
    NodeProperty(
        display_name="Regex Pattern (for split)",
        name="splitRegex",
        type="string",
        default=DEFAULT_SPLIT_PATTERN,
        description="Regular expression to split the text.",
        display_options=_show(operation=["split"], splitMethod=["regex"]),
    ),
    NodeProperty(
        display_name="Ignore Case (for split)",
        name="splitIgnoreCase",
        type="boolean",
        default=False,
        description="Match the split pattern case-insensitively.",
        display_options=_show(operation=["split"], splitMethod=["regex"]),
    ),
]

NODE_DESCRIPTION = NodeDescription(
    display_name="Text Splitter & Chunker",
    name="textSplitterChunker",
    icon="fa:cut",
    group=["transform"],
    version=2,
    description="Splits or extracts text using length, paragraph, sentence, word, or regex.",
    defaults={"name": "Text Splitter & Chunker"},
    properties=PROPERTIES,
)

_BY_NAME = {prop.name: prop for prop in PROPERTIES}


def get_property(name: str) -> NodeProperty:
    try:
        return _BY_NAME[name]
    except KeyError:
        raise KeyError(f"Unknown parameter: {name}") from None


def parameter_defaults() -> dict[str, Any]:
    """Default value of every declared parameter, keyed by name."""
    return {prop.name: prop.default for prop in PROPERTIES}


def is_visible(prop: NodeProperty, values: Mapping[str, Any]) -> bool:
    """Whether ``prop`` is shown given the current parameter ``values``.

    Missing values are compared using their defaults.
    """
    if prop.display_options is None:
        return True
    current = {**parameter_defaults(), **values}
    return all(
        current.get(name) in allowed
        for name, allowed in prop.display_options.show.items()
    )


def visible_properties(values: Mapping[str, Any]) -> list[NodeProperty]:
    return [prop for prop in PROPERTIES if is_visible(prop, values)]


def resolve_parameters(values: Mapping[str, Any] | None = None) -> dict[str, Any]:
    """Fill in defaults for a set of user-supplied parameter values.

    Visible parameters take the supplied value when present. Hidden ones
    always take their default, so a stale ``length`` left over from an
    earlier ``split`` setup does not leak into an ``extract`` run.
    Unknown names are ignored.
    """
    values = dict(values or {})
    for name in values:
        if name not in _BY_NAME:
            logger.debug("Ignoring unknown parameter %s", name)

    resolved: dict[str, Any] = {}
    for prop in PROPERTIES:
        if prop.name in values and is_visible(prop, values):
            resolved[prop.name] = values[prop.name]
        else:
            resolved[prop.name] = prop.default
    return resolved


def resolve_config(
    values: Mapping[str, Any] | None = None,
    *,
    regex_timeout: float | None = DEFAULT_TIMEOUT,
) -> TransformConfig:
    """Resolve parameter values into a validated :class:`TransformConfig`.

    Raises:
        ConfigurationError: If a value has the wrong shape, such as an
            unknown operation or a non-integer length.
        InvalidLengthError: For the ``length`` split method with a length
            below 1.
    """
    resolved = resolve_parameters(values)
    try:
        config = TransformConfig.model_validate(
            {**resolved, "regexTimeout": regex_timeout}
        )
    except ValidationError as exc:
        details = "; ".join(
            f"{'.'.join(str(part) for part in err['loc'])}: {err['msg']}"
            for err in exc.errors()
        )
        raise ConfigurationError(f"Invalid parameters: {details}") from exc

    if config.operation == "split" and config.split_method == "length" and config.length < 1:
        raise InvalidLengthError(config.length)
    return config


__all__ = [
    "DisplayOptions",
    "NODE_DESCRIPTION",
    "NodeDescription",
    "NodeProperty",
    "PROPERTIES",
    "PropertyOption",
    "get_property",
    "is_visible",
    "parameter_defaults",
    "resolve_config",
    "resolve_parameters",
    "visible_properties",
]
