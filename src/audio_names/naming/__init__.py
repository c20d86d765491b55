"""Name templates, tags and the resolution engine."""

from .tag import ClientTag, DeviceTag, NodeTag, Tag, UnknownTagError, all_tags, parse_tag
from .template import NameTemplate, TemplateParseError, parse_template, parse_templates
from .names import NameOverride, Names, OverrideType
from .resolver import (
    NameSource,
    ObjectLookup,
    Resolution,
    category,
    explain,
    fallback,
    name_override,
    resolve,
    resolve_tag,
    templates,
)
from .loader import NamesConfigError, NamesLoader, load_names

__all__ = [
    "ClientTag",
    "DeviceTag",
    "NodeTag",
    "Tag",
    "UnknownTagError",
    "all_tags",
    "parse_tag",
    "NameTemplate",
    "TemplateParseError",
    "parse_template",
    "parse_templates",
    "NameOverride",
    "Names",
    "OverrideType",
    "NameSource",
    "ObjectLookup",
    "Resolution",
    "category",
    "explain",
    "fallback",
    "name_override",
    "resolve",
    "resolve_tag",
    "templates",
    "NamesConfigError",
    "NamesLoader",
    "load_names",
]
