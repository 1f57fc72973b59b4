"""URL helpers."""

from urllib.parse import urljoin, urlsplit, urlunsplit


def resolve(base: str, href: str) -> str:
    """Resolve ``href`` against the absolute URL ``base``.

    Raises ValueError when ``base`` is not an absolute URL or when ``href``
    cannot be joined onto it.
    """
    try:
        parts = urlsplit(base)
    except ValueError as exc:
        raise ValueError(f"bad base url {base}") from exc
    if not parts.scheme:
        raise ValueError(f"bad base url {base}")

    try:
        href_parts = urlsplit(href)
    except ValueError as exc:
        raise ValueError(f"bad relative url {href}") from exc
    if not parts.netloc and not href_parts.scheme:
        raise ValueError(f"bad relative url {href}")

    try:
        joined = urljoin(base, href)
        result = urlsplit(joined)
    except ValueError as exc:
        raise ValueError(f"bad relative url {href}") from exc

    if result.netloc and not result.path:
        result = result._replace(path="/")
    return urlunsplit(result)