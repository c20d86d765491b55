"""Name templates - literal text with ``{kind:property}`` placeholders."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Callable, Iterator, Union

from .tag import Tag, UnknownTagError, is_tag, parse_tag


# A placeholder body: kind, colon, dot-separated property path
PLACEHOLDER_PATTERN = re.compile(
    r"(?P<kind>[A-Za-z][A-Za-z0-9_\-]*):(?P<path>[A-Za-z0-9_\-]+(?:\.[A-Za-z0-9_\-]+)*)"
)

Segment = Union[str, Tag]


class TemplateParseError(ValueError):
    """Raised when a template string cannot be parsed."""

    def __init__(self, message: str, source: str, placeholder: str | None = None, position: int | None = None):
        super().__init__(message)
        self.source = source
        self.placeholder = placeholder
        self.position = position


@dataclass(frozen=True, slots=True, eq=False)
class NameTemplate:
    """
    A parsed template: an ordered sequence of literal strings and tags.

    Rendering is all-or-nothing. If any referenced tag has no value the
    template produces no name at all, never a name with a hole in it.

    Examples:
        {node:node.name}: {node:media.name}
        {device:device.nick}
        {client:application.name} ({client:application.process.binary})
        {{literal braces}} {node:node.nick}
    """
    segments: tuple[Segment, ...]

    def __str__(self) -> str:
        parts = []
        for segment in self.segments:
            if is_tag(segment):
                parts.append(f"{{{segment.value}}}")
            else:
                parts.append(segment.replace("{", "{{").replace("}", "}}"))
        return "".join(parts)

    def __repr__(self) -> str:
        return f"NameTemplate({str(self)!r})"

    def __eq__(self, other: object) -> bool:
        # Compare canonical text; a literal "node:node.name" equals the tag as a str
        if not isinstance(other, NameTemplate):
            return NotImplemented
        return str(self) == str(other)

    def __hash__(self) -> int:
        return hash(str(self))

    def __iter__(self) -> Iterator[Segment]:
        return iter(self.segments)

    @property
    def tags(self) -> tuple[Tag, ...]:
        """Tags referenced by this template, in order."""
        return tuple(s for s in self.segments if is_tag(s))

    def render(self, resolve: Callable[[Tag], str | None]) -> str | None:
        """
        Render the template, resolving each tag with ``resolve``.

        Returns None as soon as one tag fails to resolve.
        """
        parts: list[str] = []
        for segment in self.segments:
            if is_tag(segment):
                value = resolve(segment)
                if value is None:
                    return None
                parts.append(value)
            else:
                parts.append(segment)
        return "".join(parts)

    @classmethod
    def parse(cls, source: str) -> NameTemplate:
        return parse_template(source)


def _parse_placeholder(body: str, source: str, position: int) -> Tag:
    """Map the text between braces to a tag."""
    placeholder = f"{{{body}}}"

    if ":" not in body:
        raise TemplateParseError(
            f"Invalid placeholder '{placeholder}' at position {position}: "
            "expected '{kind:property}'.",
            source=source,
            placeholder=placeholder,
            position=position,
        )

    match = PLACEHOLDER_PATTERN.fullmatch(body)
    if not match:
        raise TemplateParseError(
            f"Malformed placeholder '{placeholder}' at position {position}. "
            "Kind and property must be non-empty and contain only "
            "alphanumerics, hyphens, underscores, or dots between names.",
            source=source,
            placeholder=placeholder,
            position=position,
        )

    try:
        return parse_tag(match.group("kind"), match.group("path"))
    except UnknownTagError as e:
        raise TemplateParseError(
            f"Invalid placeholder '{placeholder}' at position {position}: {e}",
            source=source,
            placeholder=placeholder,
            position=position,
        ) from e


def parse_template(source: str) -> NameTemplate:
    """
    Parse a template string.

    ``{kind:property.path}`` is a placeholder; ``{{`` and ``}}`` stand for
    literal braces. Everything else is literal text.

    Args:
        source: Template text like "{node:node.name}: {node:media.name}"

    Returns:
        NameTemplate instance

    Raises:
        TemplateParseError: If a placeholder is malformed or names an
            unknown kind or property
    """
    segments: list[Segment] = []
    literal: list[str] = []
    i = 0

    while i < len(source):
        char = source[i]

        if char == "{":
            if source.startswith("{{", i):
                literal.append("{")
                i += 2
                continue

            end = source.find("}", i + 1)
            if end == -1:
                raise TemplateParseError(
                    f"Unterminated placeholder '{source[i:]}' at position {i}.",
                    source=source,
                    placeholder=source[i:],
                    position=i,
                )

            body = source[i + 1:end]
            if "{" in body:
                raise TemplateParseError(
                    f"Nested '{{' in placeholder '{source[i:end + 1]}' at position {i}.",
                    source=source,
                    placeholder=source[i:end + 1],
                    position=i,
                )

            tag = _parse_placeholder(body, source, i)
            if literal:
                segments.append("".join(literal))
                literal = []
            segments.append(tag)
            i = end + 1

        elif char == "}":
            if source.startswith("}}", i):
                literal.append("}")
                i += 2
                continue
            raise TemplateParseError(
                f"Unmatched '}}' at position {i}. Use '}}}}' for a literal brace.",
                source=source,
                position=i,
            )

        else:
            literal.append(char)
            i += 1

    if literal:
        segments.append("".join(literal))

    return NameTemplate(tuple(segments))


def parse_templates(sources: list[str] | tuple[str, ...]) -> tuple[NameTemplate, ...]:
    """Parse an ordered list of template strings."""
    return tuple(parse_template(s) for s in sources)
