"""Query-string building for Helix request URLs.

Helix expects multi-valued filters as repeated keys::

    users?login=a&login=b&id=5

rather than comma-joined or bracket-indexed forms, so ``urllib.parse.urlencode``
is not used here.  Values are inserted as given: no percent-encoding happens at
this layer and callers pre-encode any value containing reserved characters.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any, Union
from urllib.parse import urlsplit

Scalar = Union[str, int, float, bool, None]
ParamValue = Union[Scalar, Iterable[Scalar]]


def build_url(base_path: str, parameters: Mapping[str, ParamValue]) -> str:
    """Append *parameters* to *base_path* as a repeated-key query string.

    Keys are emitted in mapping order.  A scalar value emits one ``key=value``
    pair; any other iterable (list, tuple, set, generator) emits one pair per
    element, in iteration order, all under the same key.  Strings and bytes
    count as scalars.  The separator is ``?`` while the URL has no query
    component yet and ``&`` afterwards, so a *base_path* that already carries
    a query string is extended rather than restarted.

    Args:
        base_path: Path or absolute URL to extend.
        parameters: Mapping of parameter names to scalars or iterables of
            scalars.

    Returns:
        The URL with every parameter pair appended.

    Example::

        >>> build_url("users", {"login": ["a", "b"], "id": "5"})
        'users?login=a&login=b&id=5'
    """
    url = base_path
    for key, option in parameters.items():
        values = option if _is_sequence(option) else [option]
        for value in values:
            separator = "&" if urlsplit(url).query else "?"
            url += f"{separator}{key}={_render(value)}"
    return url


def _is_sequence(value: Any) -> bool:
    return isinstance(value, Iterable) and not isinstance(value, (str, bytes, bytearray))


def _render(value: Scalar) -> str:
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)
