"""Host adapters -- collect ``Authorization`` values from request objects.

The guard itself only sees a sequence of strings. These helpers do the
host-side part of the contract: locate every ``Authorization`` header by
case-insensitive name, keep repeated occurrences as separate entries, and
never split a single value on commas.

* :func:`authorization_values` -- from raw ``(name, value)`` pairs, as found
  in ASGI scopes or WSGI-style header lists.
* :func:`authorization_values_from_request` -- from an :class:`httpx.Request`.
* :func:`resolve_request` -- collect and resolve in one call.
"""

from __future__ import annotations

from typing import Iterable, Optional, Union

import httpx

from basicguard.guard import RequestGuard, resolve
from basicguard.models import Outcome

AUTHORIZATION = "authorization"

HeaderPart = Union[str, bytes]


def _to_text(value: HeaderPart) -> str:
    # Raw header bytes carry no charset; latin-1 maps every byte one-to-one.
    if isinstance(value, bytes):
        return value.decode("latin-1")
    return value


def authorization_values(pairs: Iterable[tuple[HeaderPart, HeaderPart]]) -> list[str]:
    """Return every ``Authorization`` value from a list of header pairs.

    Args:
        pairs: ``(name, value)`` tuples. Names and values may be ``str`` or
            ``bytes``; bytes are decoded as latin-1.

    Returns:
        The matching values in arrival order, one entry per header
        occurrence.
    """
    return [
        _to_text(value)
        for name, value in pairs
        if _to_text(name).strip().lower() == AUTHORIZATION
    ]


def authorization_values_from_request(request: httpx.Request) -> list[str]:
    """Return every ``Authorization`` value carried by an :class:`httpx.Request`.

    :class:`httpx.Headers` already matches names case-insensitively and keeps
    repeated headers distinct.
    """
    return request.headers.get_list(AUTHORIZATION)


def resolve_request(
    request: httpx.Request, guard: Optional[RequestGuard] = None
) -> Outcome:
    """Resolve the Basic credentials of *request*.

    Args:
        request: The request to inspect.
        guard: Guard to apply. Defaults to an untraced
            :class:`~basicguard.guard.BasicAuthGuard`.

    Returns:
        The request's :class:`~basicguard.models.Outcome`.
    """
    values = authorization_values_from_request(request)
    if guard is None:
        return resolve(values)
    return guard.resolve(values)
