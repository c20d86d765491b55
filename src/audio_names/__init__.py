"""
Audio Names - display names for audio-session objects

Picks one human-readable name for each device and node in the audio graph:
- User-authored templates such as "{node:node.name}: {node:media.name}"
- Ordered overrides keyed on an exact property value
- Node templates that borrow properties of the linked device or client
- A guaranteed fallback to the object's own name
"""

__version__ = "0.1.0"

from .naming import NameOverride, Names, NameTemplate, OverrideType, parse_template, resolve

__all__ = [
    "NameOverride",
    "Names",
    "NameTemplate",
    "OverrideType",
    "parse_template",
    "resolve",
    "__version__",
]
