"""Icon selection for web manifest icon lists."""

import logging
import re
from collections.abc import Iterable
from enum import Enum

from twa_manifest.web_manifest import WebManifestIcon

logger = logging.getLogger(__name__)

_SIZE_RE = re.compile(r"^(\d+)x(\d+)$", re.IGNORECASE)


class IconPurpose(str, Enum):
    """Rendering context an icon is declared for.

    UNSPECIFIED is what an icon without a ``purpose`` member gets; it
    matches requests for ANY.
    """

    ANY = "any"
    MASKABLE = "maskable"
    MONOCHROME = "monochrome"
    UNSPECIFIED = "unspecified"

    def matches(self, requested: "IconPurpose") -> bool:
        if self is IconPurpose.UNSPECIFIED:
            return requested is IconPurpose.ANY
        return self is requested


def parse_purposes(raw: str | None) -> set[IconPurpose]:
    """Split a space-separated purpose string, dropping unknown tokens."""
    if raw is None or not raw.strip():
        return {IconPurpose.UNSPECIFIED}
    purposes: set[IconPurpose] = set()
    for token in raw.lower().split():
        try:
            purpose = IconPurpose(token)
        except ValueError:
            continue
        if purpose is not IconPurpose.UNSPECIFIED:
            purposes.add(purpose)
    return purposes


def parse_sizes(raw: str | list[str] | None) -> list[int]:
    """Return the declared edge lengths, e.g. ``"48x48 512x512"`` -> ``[48, 512]``.

    ``any`` (scalable icons) and malformed tokens are ignored.
    """
    if raw is None:
        return []
    tokens = raw.split() if isinstance(raw, str) else [t for item in raw for t in item.split()]
    sizes = []
    for token in tokens:
        match = _SIZE_RE.match(token)
        if match:
            sizes.append(max(int(match.group(1)), int(match.group(2))))
    return sizes


def find_best_icon(
    icons: Iterable[WebManifestIcon] | None,
    purpose: IconPurpose,
    min_size: int,
) -> WebManifestIcon | None:
    """Pick the icon for ``purpose`` whose size is closest to, but not below, ``min_size``.

    Returns None when no candidate of that purpose declares a large enough
    size; an undersized icon is never returned.
    """
    best: WebManifestIcon | None = None
    best_size = 0
    for icon in icons or ():
        if not any(p.matches(purpose) for p in parse_purposes(icon.purpose)):
            continue
        eligible = [size for size in parse_sizes(icon.sizes) if size >= min_size]
        if not eligible:
            continue
        size = min(eligible)
        if best is None or size < best_size:
            best, best_size = icon, size

    if best is not None:
        logger.debug("Selected %s icon %s (%dpx)", purpose.value, best.src, best_size)
    return best
