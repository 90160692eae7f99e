"""Split text into chunks or extract regex matches, one output record per fragment.

Key components:
    - process: Pure segmenter/extractor for a single text value
    - transform_records: Fan a list of records out into chunk/match records
    - chunking: The individual split strategies
    - properties: Parameter schema and configuration resolution
    - cli: Command-line interface
    - server: Optional FastAPI surface

Example:
    >>> from text_splitter import transform_records
    >>> transform_records([{"id": 1, "text": "ab\\n\\ncd"}], {"splitMethod": "paragraph"})
    [{'id': 1, 'text': 'ab\\n\\ncd', 'chunk': 'ab'}, {'id': 1, 'text': 'ab\\n\\ncd', 'chunk': 'cd'}]
"""

__version__ = "0.2.0"

from .chunking import (
    split_by_length,
    split_by_paragraph,
    split_by_regex,
    split_by_sentence,
    split_by_word,
)
from .errors import (
    ConfigurationError,
    InvalidLengthError,
    MissingFieldError,
    PatternError,
    PatternTimeoutError,
    TextSplitterError,
)
from .extract import regex_extract
from .models import TransformConfig
from .properties import NODE_DESCRIPTION, resolve_config, resolve_parameters
from .segmenter import process
from .transform import transform_record, transform_records

__all__ = [
    "__version__",
    "process",
    "transform_record",
    "transform_records",
    "TransformConfig",
    "resolve_config",
    "resolve_parameters",
    "NODE_DESCRIPTION",
    "regex_extract",
    "split_by_length",
    "split_by_paragraph",
    "split_by_regex",
    "split_by_sentence",
    "split_by_word",
    "TextSplitterError",
    "MissingFieldError",
    "PatternError",
    "PatternTimeoutError",
    "InvalidLengthError",
    "ConfigurationError",
]
