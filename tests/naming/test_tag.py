"""Tests for tags."""

import pytest

from audio_names.naming.tag import (
    ClientTag,
    DeviceTag,
    NodeTag,
    UnknownTagError,
    all_tags,
    is_tag,
    parse_tag,
)
from audio_names.state.types import ObjectKind


class TestParseTag:
    def test_full_form(self):
        assert parse_tag("node:media.name") is NodeTag.MEDIA_NAME
        assert parse_tag("device:device.nick") is DeviceTag.NICK
        assert parse_tag("client:application.process.binary") is ClientTag.APPLICATION_PROCESS_BINARY

    def test_kind_and_path(self):
        assert parse_tag("client", "application.name") is ClientTag.APPLICATION_NAME

    def test_every_tag_round_trips(self):
        for tag in all_tags():
            assert parse_tag(tag.value) is tag

    def test_unknown_kind(self):
        with pytest.raises(UnknownTagError) as exc_info:
            parse_tag("port:port.name")
        assert "port" in str(exc_info.value)
        assert exc_info.value.kind == "port"

    def test_unknown_property(self):
        with pytest.raises(UnknownTagError) as exc_info:
            parse_tag("node:node.volume")
        assert "node.volume" in str(exc_info.value)
        assert exc_info.value.path == "node.volume"

    def test_property_of_wrong_kind(self):
        # media.name belongs to nodes only
        with pytest.raises(UnknownTagError):
            parse_tag("device:media.name")

    def test_missing_colon(self):
        with pytest.raises(UnknownTagError):
            parse_tag("node.name")

    def test_is_value_error(self):
        with pytest.raises(ValueError):
            parse_tag("bogus:thing")


class TestTag:
    def test_kind(self):
        assert DeviceTag.NAME.kind == ObjectKind.DEVICE
        assert NodeTag.MEDIA_NAME.kind == ObjectKind.NODE
        assert ClientTag.APPLICATION_NAME.kind == ObjectKind.CLIENT

    def test_path(self):
        assert NodeTag.MEDIA_NAME.path == "media.name"
        assert ClientTag.APPLICATION_PROCESS_BINARY.path == "application.process.binary"

    def test_str_is_textual_form(self):
        assert str(DeviceTag.DESCRIPTION) == "device:device.description"

    def test_equality_across_kinds(self):
        assert DeviceTag.NAME != NodeTag.NAME
        assert DeviceTag.NAME == DeviceTag.NAME

    def test_ordered_by_textual_form(self):
        assert ClientTag.APPLICATION_NAME < DeviceTag.NAME < NodeTag.MEDIA_NAME < NodeTag.NAME
        assert all_tags() == sorted(all_tags(), key=lambda t: t.value)

    def test_all_tags_complete(self):
        assert len(all_tags()) == 9
        assert set(all_tags()) == set(DeviceTag) | set(NodeTag) | set(ClientTag)

    def test_is_tag(self):
        assert is_tag(NodeTag.NAME)
        assert not is_tag("node:node.name")
