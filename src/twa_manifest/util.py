"""Small pure helpers shared by the normalizer and the manifest record."""

import re
from urllib.parse import urljoin, urlsplit

_DISALLOWED_PACKAGE_CHARS = re.compile(r"[^a-zA-Z0-9_.]")


def generate_package_id(host: str) -> str | None:
    """Build an Android package id from a host name.

    ``"pwa.example.com"`` -> ``"com.example.pwa.twa"``.  Returns None when
    the host has no usable parts.  Pass the host name without a port: the
    same site served on another port keeps the same package id.
    """
    host = host.strip()
    if not host:
        return None

    parts = []
    for part in reversed(host.split(".")):
        part = part.strip()
        if not part:
            continue
        part = _DISALLOWED_PACKAGE_CHARS.sub("_", part)
        # Java identifiers can't start with a digit
        if part[0].isdigit():
            part = "_" + part
        parts.append(part)

    if not parts:
        return None
    parts.append("twa")
    return ".".join(parts)


def check_non_empty(value: str | None, field_name: str) -> str | None:
    """Return an error message when ``value`` is missing or blank."""
    if value is None or not value.strip():
        return f"{field_name} cannot be empty"
    return None


def url_host(url: str) -> str:
    """Host of an absolute URL, with the port when one is given explicitly."""
    parts = urlsplit(url)
    host = parts.hostname or ""
    if parts.port is not None:
        host = f"{host}:{parts.port}"
    return host


def resolve_url(reference: str, base_url: str) -> str:
    return urljoin(base_url, reference)


def path_and_query(url: str) -> str:
    """Drop scheme and host, keeping ``/path?query``."""
    parts = urlsplit(url)
    path = parts.path or "/"
    return f"{path}?{parts.query}" if parts.query else path
