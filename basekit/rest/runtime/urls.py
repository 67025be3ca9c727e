"""URL composition for relative endpoints.

Endpoints resolve against the base URL with RFC 3986 reference resolution,
so a base of ``https://api.example.com/v1/`` joined with ``users`` yields
``https://api.example.com/v1/users`` while ``/users`` replaces the whole path.
A non-empty params mapping replaces whatever query the endpoint carried; no
other component of the URL is touched.
"""

from __future__ import annotations

from collections.abc import Mapping

from yarl import URL

from ..core.exceptions import CompositionError

ALLOWED_SCHEMES = frozenset({"http", "https"})


def _ensure_absolute(url: URL, *, base_url: str, endpoint: str | None = None) -> URL:
    if not url.is_absolute() or url.scheme not in ALLOWED_SCHEMES or not url.host:
        raise CompositionError(
            f"Not a valid absolute http(s) URL: {url}",
            base_url=base_url,
            endpoint=endpoint,
        )
    return url


def parse_base_url(base_url: str | URL) -> URL:
    """Parse and validate a client base URL.

    Raises:
        CompositionError: If the value is not an absolute http(s) URL
    """
    try:
        url = base_url if isinstance(base_url, URL) else URL(base_url)
    except (TypeError, ValueError) as e:
        raise CompositionError(f"Invalid base URL: {base_url!r}", base_url=str(base_url)) from e
    return _ensure_absolute(url, base_url=str(base_url))


def compose_url(
    base_url: URL,
    endpoint: str,
    params: Mapping[str, str] | None = None,
) -> URL:
    """Resolve ``endpoint`` against ``base_url`` and apply query parameters.

    Args:
        base_url: Absolute base URL (never modified)
        endpoint: Path relative to the base URL
        params: Optional query parameters; a non-empty mapping becomes the
            whole query, an empty or missing one leaves the URL unchanged

    Returns:
        Absolute request URL

    Raises:
        CompositionError: If the combination is not a valid absolute URL
    """
    try:
        url = base_url.join(URL(endpoint))
        if params:
            url = url.with_query(dict(params))
    except (TypeError, ValueError) as e:
        raise CompositionError(
            f"Cannot resolve endpoint {endpoint!r} against {base_url}",
            base_url=str(base_url),
            endpoint=str(endpoint),
        ) from e
    return _ensure_absolute(url, base_url=str(base_url), endpoint=endpoint)
