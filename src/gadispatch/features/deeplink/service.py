from __future__ import annotations

from urllib.parse import parse_qsl, unquote, urlsplit

from .types import MalformedDeeplinkError, ParsedDeeplink


def parse_deeplink(raw: str | None) -> ParsedDeeplink | None:
    """
    Parse a raw deep link into its query and fragment lookup tables.

    The link is trimmed first; hosts routinely hand over links padded with
    spaces or newlines. Query names/values and the fragment as a whole are
    percent-decoded by the URL layer; the fragment pair parser itself does
    no further decoding.
    """
    if raw is None:
        return None

    link = raw.strip()
    try:
        parts = urlsplit(link)
        query = tuple(parse_qsl(parts.query, keep_blank_values=True))
    except ValueError as exc:
        raise MalformedDeeplinkError(f"Cannot parse deep link {link!r}: {exc}") from exc

    fragment = unquote(parts.fragment)
    return ParsedDeeplink(query=query, fragment=parse_fragment(fragment) if fragment else {})


def parse_fragment(fragment: str) -> dict[str, str]:
    """
    Parse an ad-hoc `key=value&key=value` fragment.

    Tokens without a value are dropped, keys are lowercased and only the
    text between the first and second `=` is kept as the value.
    """
    out: dict[str, str] = {}
    for token in fragment.split("&"):
        pieces = _split_drop_trailing_empty(token, "=")
        if len(pieces) >= 2:
            out[pieces[0].lower()] = pieces[1]
    return out


def _split_drop_trailing_empty(s: str, sep: str) -> list[str]:
    pieces = s.split(sep)
    while len(pieces) > 1 and pieces[-1] == "":
        pieces.pop()
    return pieces
