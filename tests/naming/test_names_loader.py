"""Tests for loading the names configuration section."""

import pytest

from audio_names.naming.loader import NamesConfigError, NamesLoader, load_names
from audio_names.naming.names import Names, OverrideType
from audio_names.naming.tag import ClientTag, NodeTag
from audio_names.naming.template import parse_template


class TestNamesLoader:
    def test_none_gives_defaults(self):
        assert load_names(None) == Names()

    def test_empty_section_gives_defaults(self):
        assert load_names({}) == Names()

    def test_omitted_lists_keep_defaults(self):
        names = load_names({"endpoint": ["{node:node.nick}"]})
        assert names.endpoint == (parse_template("{node:node.nick}"),)
        assert names.stream == Names.default_stream()
        assert names.device == Names.default_device()

    def test_empty_list_stays_empty(self):
        names = load_names({"stream": []})
        assert names.stream == ()

    def test_override(self):
        names = load_names({
            "overrides": [{
                "types": ["stream"],
                "property": "node:node.name",
                "value": "Firefox",
                "templates": ["{client:application.name}"],
            }]
        })
        (override,) = names.overrides
        assert override.types == frozenset({OverrideType.STREAM})
        assert override.property is NodeTag.NAME
        assert override.value == "Firefox"
        assert override.templates[0].tags == (ClientTag.APPLICATION_NAME,)

    def test_override_order_kept(self):
        names = load_names({
            "overrides": [
                {"property": "node:node.name", "value": "a"},
                {"property": "node:node.name", "value": "b"},
            ]
        })
        assert [o.value for o in names.overrides] == ["a", "b"]

    def test_single_type_string(self):
        names = load_names({"overrides": [{"types": "device", "property": "device:device.nick", "value": "x"}]})
        assert names.overrides[0].types == frozenset({OverrideType.DEVICE})

    def test_types_default_to_all(self):
        names = load_names({"overrides": [{"property": "node:node.name", "value": "x"}]})
        assert names.overrides[0].types == frozenset(OverrideType)

    def test_templates_default_to_empty(self):
        names = load_names({"overrides": [{"property": "node:node.name", "value": "x"}]})
        assert names.overrides[0].templates == ()


class TestNamesLoaderErrors:
    def test_bad_template_location(self):
        with pytest.raises(NamesConfigError) as exc_info:
            load_names({"endpoint": ["{device:device.nick}", "{node:node.volume}"]})
        assert exc_info.value.location == "names.endpoint[1]"
        assert "node.volume" in str(exc_info.value)

    def test_bad_override_property(self):
        with pytest.raises(NamesConfigError) as exc_info:
            load_names({"overrides": [{"property": "node:volume", "value": "x"}]})
        assert exc_info.value.location == "names.overrides[0].property"

    def test_bad_override_template(self):
        with pytest.raises(NamesConfigError) as exc_info:
            load_names({"overrides": [{"property": "node:node.name", "value": "x", "templates": ["{"]}]})
        assert exc_info.value.location == "names.overrides[0].templates[0]"

    def test_unknown_type(self):
        with pytest.raises(NamesConfigError) as exc_info:
            load_names({"overrides": [{"types": ["port"], "property": "node:node.name", "value": "x"}]})
        assert exc_info.value.location == "names.overrides[0].types"

    @pytest.mark.parametrize("missing", ["property", "value"])
    def test_required_fields(self, missing):
        entry = {"property": "node:node.name", "value": "x"}
        del entry[missing]
        with pytest.raises(NamesConfigError) as exc_info:
            load_names({"overrides": [entry]})
        assert missing in str(exc_info.value)

    def test_value_must_be_string(self):
        with pytest.raises(NamesConfigError):
            load_names({"overrides": [{"property": "node:node.name", "value": 3}]})

    def test_list_expected(self):
        with pytest.raises(NamesConfigError):
            load_names({"stream": "{node:node.name}"})

    def test_section_must_be_mapping(self):
        with pytest.raises(NamesConfigError):
            NamesLoader().load_dict(["stream"])

    def test_is_value_error(self):
        with pytest.raises(ValueError):
            load_names({"device": [42]})
