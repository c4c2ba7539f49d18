from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field


class MalformedDeeplinkError(ValueError):
    """Raised when a deep link cannot be parsed as a URL."""


@dataclass(frozen=True, slots=True)
class ParsedDeeplink:
    """
    Attribution-relevant parts of one deep link.

    - query: decoded (name, value) pairs in URL order, names kept as written
    - fragment: key=value pairs from the fragment, keys lowercased at parse time
    """

    query: tuple[tuple[str, str], ...] = ()
    fragment: Mapping[str, str] = field(default_factory=dict)

    def query_value(self, name: str) -> str | None:
        wanted = name.lower()
        for key, value in self.query:
            if key.lower() == wanted:
                return value
        return None

    def fragment_value(self, name: str) -> str | None:
        return self.fragment.get(name)
