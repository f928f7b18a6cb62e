"""Named tag content that can be substituted into tag strings as ``{name}``."""

from __future__ import annotations

import re
from collections.abc import Mapping

_PLACEHOLDER = re.compile(r"\{(.+?)\}")


class TagExistsError(ValueError):
    """Raised when a tag name is registered twice without overwriting."""


class TagRegistry:
    """Stores tag content by name and expands ``{name}`` placeholders."""

    def __init__(self) -> None:
        self._data: dict[str, str] = {}

    def set(self, name: str, value: str) -> None:
        """Register ``value`` under ``name``; the name must be new."""
        if name in self._data:
            raise TagExistsError(f'value for tag name "{name}" already exists')
        self._data[name] = value

    def set_over(self, name: str, value: str) -> None:
        """Register ``value`` under ``name``, replacing any earlier value."""
        self._data[name] = value

    def set_many(self, mapping: Mapping[str, str]) -> None:
        """Register every item of ``mapping``; every name must be new."""
        for name, value in mapping.items():
            self.set(name, value)

    def set_many_over(self, mapping: Mapping[str, str]) -> None:
        """Register every item of ``mapping``, replacing earlier values."""
        for name, value in mapping.items():
            self.set_over(name, value)

    def get(self, name: str) -> str:
        """Return the content stored for ``name``, or an empty string."""
        return self._data.get(name, "")

    def parse(self, content: str) -> str:
        """Replace each ``{name}`` whose name is registered by its content."""

        def _substitute(match: re.Match[str]) -> str:
            return self._data.get(match.group(1), match.group(0))

        return _PLACEHOLDER.sub(_substitute, content)


_default = TagRegistry()


def set_tag(name: str, value: str) -> None:
    """Register tag content in the shared registry."""
    _default.set(name, value)


def set_tag_over(name: str, value: str) -> None:
    """Register tag content in the shared registry, overwriting."""
    _default.set_over(name, value)


def get_tag(name: str) -> str:
    """Return tag content from the shared registry."""
    return _default.get(name)


def parse_tags(content: str) -> str:
    """Expand ``{name}`` placeholders using the shared registry."""
    return _default.parse(content)