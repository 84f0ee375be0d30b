"""Selection of attributes that are sent as metadata."""

from __future__ import annotations

import re
from collections.abc import Iterable, Mapping
from typing import Any

from .fields import Fields


class MetadataFilter:
    """Splits attributes by whether their keys match any of the patterns."""

    def __init__(self, patterns: Iterable[str]) -> None:
        self.regexes: list[re.Pattern[str]] = []
        for pattern in patterns:
            try:
                self.regexes.append(re.compile(pattern))
            except re.error as exc:
                raise ValueError(f"error parsing regexp: {exc.msg}: `{pattern}`") from exc

    def _matches(self, key: str) -> bool:
        return any(regex.search(key) for regex in self.regexes)

    def filter_in(self, attributes: Mapping[str, Any]) -> Fields:
        """Return fields whose keys match at least one pattern, sorted by key."""
        selected = {key: value for key, value in attributes.items() if self._matches(key)}
        return Fields(dict(sorted(selected.items())))

    def filter_out(self, attributes: Mapping[str, Any]) -> Fields:
        """Return fields whose keys match none of the patterns, sorted by key."""
        selected = {key: value for key, value in attributes.items() if not self._matches(key)}
        return Fields(dict(sorted(selected.items())))