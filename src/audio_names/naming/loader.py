"""Names loader - builds a Names configuration from the ``names`` config section."""

from __future__ import annotations

import logging
from typing import Any

from .names import NameOverride, Names, OverrideType
from .tag import UnknownTagError, parse_tag
from .template import NameTemplate, TemplateParseError, parse_template


logger = logging.getLogger(__name__)

TEMPLATE_LISTS = ("stream", "endpoint", "device")


class NamesConfigError(ValueError):
    """Raised when the names configuration is invalid."""

    def __init__(self, message: str, location: str):
        super().__init__(f"{location}: {message}")
        self.location = location


class NamesLoader:
    """
    Loads name templates and overrides from a dictionary.

    Section format:
    ```yaml
    names:
      stream:
        - "{node:node.name}: {node:media.name}"
      endpoint:
        - "{device:device.nick}"
        - "{node:node.description}"
      device:
        - "{device:device.nick}"
        - "{device:device.description}"
      overrides:
        - types: [stream]
          property: "node:node.name"
          value: "Firefox"
          templates:
            - "{client:application.name}"
    ```

    Lists that are left out keep their defaults; an empty list stays empty.
    """

    def load_dict(self, data: dict[str, Any] | None, location: str = "names") -> Names:
        """Parse the names section. Raises NamesConfigError on any invalid entry."""
        if data is None:
            return Names()
        if not isinstance(data, dict):
            raise NamesConfigError("expected a mapping", location)

        for key in data:
            if key not in TEMPLATE_LISTS and key != "overrides":
                logger.warning(f"{location}: ignoring unknown key '{key}'")

        kwargs: dict[str, Any] = {}
        for key in TEMPLATE_LISTS:
            if key in data:
                kwargs[key] = self._parse_templates(data[key], f"{location}.{key}")

        raw_overrides = data.get("overrides") or []
        if not isinstance(raw_overrides, list):
            raise NamesConfigError("expected a list of overrides", f"{location}.overrides")
        kwargs["overrides"] = tuple(
            self._parse_override(entry, f"{location}.overrides[{i}]")
            for i, entry in enumerate(raw_overrides)
        )

        names = Names(**kwargs)
        logger.info(
            f"Loaded names: {len(names.stream)} stream, {len(names.endpoint)} endpoint, "
            f"{len(names.device)} device templates, {len(names.overrides)} overrides"
        )
        return names

    def _parse_templates(self, raw: Any, location: str) -> tuple[NameTemplate, ...]:
        if not isinstance(raw, list):
            raise NamesConfigError("expected a list of template strings", location)

        parsed = []
        for i, source in enumerate(raw):
            if not isinstance(source, str):
                raise NamesConfigError(f"template must be a string, got {source!r}", f"{location}[{i}]")
            try:
                parsed.append(parse_template(source))
            except TemplateParseError as e:
                raise NamesConfigError(str(e), f"{location}[{i}]") from e
        return tuple(parsed)

    def _parse_override(self, raw: Any, location: str) -> NameOverride:
        if not isinstance(raw, dict):
            raise NamesConfigError("override must be a mapping", location)

        raw_types = raw.get("types", [t.value for t in OverrideType])
        if isinstance(raw_types, str):
            raw_types = [raw_types]
        if not isinstance(raw_types, list):
            raise NamesConfigError("expected a type or list of types", f"{location}.types")

        types = set()
        for t in raw_types:
            try:
                types.add(OverrideType(t))
            except ValueError:
                valid = ", ".join(o.value for o in OverrideType)
                raise NamesConfigError(
                    f"unknown type {t!r}. Expected one of: {valid}", f"{location}.types"
                ) from None

        if "property" not in raw:
            raise NamesConfigError("missing 'property'", location)
        if not isinstance(raw["property"], str):
            raise NamesConfigError("expected a tag like 'node:node.name'", f"{location}.property")
        try:
            prop = parse_tag(raw["property"])
        except UnknownTagError as e:
            raise NamesConfigError(str(e), f"{location}.property") from e

        if "value" not in raw:
            raise NamesConfigError("missing 'value'", location)
        if not isinstance(raw["value"], str):
            raise NamesConfigError(f"value must be a string, got {raw['value']!r}", f"{location}.value")

        return NameOverride(
            types=frozenset(types),
            property=prop,
            value=raw["value"],
            templates=self._parse_templates(raw.get("templates", []), f"{location}.templates"),
        )


def load_names(data: dict[str, Any] | None) -> Names:
    """Convenience function to load the names section."""
    return NamesLoader().load_dict(data)
