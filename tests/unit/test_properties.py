from __future__ import annotations

import pytest

from text_splitter.errors import ConfigurationError, InvalidLengthError
from text_splitter.properties import (
    NODE_DESCRIPTION,
    get_property,
    is_visible,
    parameter_defaults,
    resolve_config,
    resolve_parameters,
    visible_properties,
)


def test_node_description():
    assert NODE_DESCRIPTION.name == "textSplitterChunker"
    assert NODE_DESCRIPTION.display_name == "Text Splitter & Chunker"
    assert NODE_DESCRIPTION.version == 2
    assert NODE_DESCRIPTION.group == ["transform"]


def test_parameter_defaults():
    defaults = parameter_defaults()
    assert defaults["textField"] == "text"
    assert defaults["operation"] == "split"
    assert defaults["splitMethod"] == "length"
    assert defaults["regex"] == "[aeiouáéíóúüAEIOUÁÉÍÓÚÜ]"
    assert defaults["length"] == 100
    assert defaults["splitRegex"] == "\\n\\n+"
    assert defaults["ignoreCase"] is True
    assert defaults["globalMatch"] is True
    assert defaults["splitIgnoreCase"] is False


def test_split_method_options():
    prop = get_property("splitMethod")
    assert [option.value for option in prop.options] == [
        "length",
        "paragraph",
        "sentence",
        "word",
        "regex",
    ]


def test_get_property_unknown():
    with pytest.raises(KeyError, match="Unknown parameter"):
        get_property("nope")


def test_visibility_with_defaults():
    names = [prop.name for prop in visible_properties({})]
    assert names == ["textField", "operation", "splitMethod", "length"]


def test_visibility_for_extract():
    names = [prop.name for prop in visible_properties({"operation": "extract"})]
    assert names == ["textField", "operation", "regex", "ignoreCase", "globalMatch"]


def test_visibility_for_regex_split():
    assert is_visible(get_property("splitRegex"), {"splitMethod": "regex"})
    assert is_visible(get_property("splitIgnoreCase"), {"splitMethod": "regex"})
    assert not is_visible(get_property("length"), {"splitMethod": "regex"})
    assert not is_visible(
        get_property("splitRegex"), {"operation": "extract", "splitMethod": "regex"}
    )


def test_resolve_parameters_fills_defaults():
    resolved = resolve_parameters({"splitMethod": "word"})
    assert resolved["splitMethod"] == "word"
    assert resolved["length"] == 100
    assert resolved["textField"] == "text"


def test_resolve_parameters_hidden_values_fall_back_to_defaults():
    resolved = resolve_parameters({"operation": "extract", "length": 5, "splitMethod": "word"})
    assert resolved["length"] == 100
    assert resolved["splitMethod"] == "length"


def test_resolve_parameters_ignores_unknown_names():
    resolved = resolve_parameters({"bogus": 1})
    assert "bogus" not in resolved


def test_resolve_config_maps_parameter_names():
    config = resolve_config(
        {"textField": "body", "splitMethod": "regex", "splitRegex": ";", "splitIgnoreCase": True},
        regex_timeout=2.0,
    )
    assert config.text_field == "body"
    assert config.split_method == "regex"
    assert config.split_regex == ";"
    assert config.split_ignore_case is True
    assert config.regex_timeout == 2.0


@pytest.mark.parametrize("length", [True, 5.0, "3"])
def test_resolve_config_rejects_non_integer_length(length):
    with pytest.raises(ConfigurationError, match="length"):
        resolve_config({"splitMethod": "length", "length": length})


def test_resolve_config_rejects_invalid_length_for_length_split():
    with pytest.raises(InvalidLengthError):
        resolve_config({"splitMethod": "length", "length": 0})


def test_resolve_config_ignores_length_for_other_methods():
    config = resolve_config({"splitMethod": "word", "length": 0})
    assert config.length == 100


def test_resolve_config_rejects_unknown_operation():
    with pytest.raises(ConfigurationError, match="Invalid parameters: operation"):
        resolve_config({"operation": "shuffle"})


def test_resolve_config_rejects_unknown_split_method():
    with pytest.raises(ConfigurationError, match=r"split_?[Mm]ethod"):
        resolve_config({"splitMethod": "chapter"})


def test_resolve_config_rejects_non_numeric_length():
    with pytest.raises(ConfigurationError, match="length"):
        resolve_config({"length": "ten"})
