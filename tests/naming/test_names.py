"""Tests for the Names configuration entities."""

import pytest

from audio_names.naming.names import NameOverride, Names, OverrideType
from audio_names.naming.tag import DeviceTag, NodeTag
from audio_names.naming.template import parse_template


class TestDefaults:
    def test_default_stream(self):
        assert [str(t) for t in Names.default_stream()] == ["{node:node.name}: {node:media.name}"]

    def test_default_endpoint(self):
        assert [str(t) for t in Names.default_endpoint()] == [
            "{device:device.nick}",
            "{node:node.description}",
        ]

    def test_default_device(self):
        assert [str(t) for t in Names.default_device()] == [
            "{device:device.nick}",
            "{device:device.description}",
        ]

    def test_default_construction(self):
        names = Names()
        assert names.stream == Names.default_stream()
        assert names.endpoint == Names.default_endpoint()
        assert names.device == Names.default_device()
        assert names.overrides == ()

    def test_partial_construction_keeps_other_defaults(self):
        names = Names(endpoint=[parse_template("{node:node.nick}")])
        assert names.endpoint == (parse_template("{node:node.nick}"),)
        assert names.stream == Names.default_stream()

    def test_lists_become_tuples(self):
        names = Names(stream=[], overrides=[])
        assert names.stream == ()
        assert names.overrides == ()

    def test_templates_for(self):
        names = Names()
        assert names.templates_for(OverrideType.DEVICE) is names.device
        assert names.templates_for(OverrideType.ENDPOINT) is names.endpoint
        assert names.templates_for(OverrideType.STREAM) is names.stream

    def test_with_overrides(self):
        override = NameOverride(
            types=frozenset({OverrideType.STREAM}),
            property=NodeTag.NAME,
            value="x",
        )
        names = Names().with_overrides([override])
        assert names.overrides == (override,)
        assert names.stream == Names.default_stream()


class TestNameOverride:
    def make(self, **kwargs):
        defaults = dict(
            types=frozenset({OverrideType.STREAM}),
            property=NodeTag.NAME,
            value="Node name",
            templates=(parse_template("{node:node.nick}"),),
        )
        defaults.update(kwargs)
        return NameOverride(**defaults)

    def test_matches(self):
        override = self.make()
        assert override.matches(OverrideType.STREAM, {NodeTag.NAME: "Node name"}.get)

    def test_category_mismatch(self):
        override = self.make()
        assert not override.matches(OverrideType.ENDPOINT, {NodeTag.NAME: "Node name"}.get)

    def test_value_mismatch(self):
        override = self.make()
        assert not override.matches(OverrideType.STREAM, {NodeTag.NAME: "Other"}.get)

    def test_exact_match_only(self):
        override = self.make(value="Node")
        assert not override.matches(OverrideType.STREAM, {NodeTag.NAME: "Node name"}.get)
        assert not self.make(value="node name").matches(
            OverrideType.STREAM, {NodeTag.NAME: "Node name"}.get
        )

    def test_absent_property_never_matches(self):
        assert not self.make().matches(OverrideType.STREAM, lambda tag: None)

    def test_types_accept_strings(self):
        override = self.make(types=["device", "stream"])
        assert override.types == frozenset({OverrideType.DEVICE, OverrideType.STREAM})

    def test_empty_templates_default(self):
        override = NameOverride(types=frozenset({OverrideType.DEVICE}), property=DeviceTag.NICK, value="x")
        assert override.templates == ()

    def test_unknown_type_rejected(self):
        with pytest.raises(ValueError):
            self.make(types=["port"])
