"""Derive an AppManifest from a W3C Web App Manifest.

The derivation is pure: the only side channel is the warning log for
shortcuts that get skipped, and that log is passed in by the caller.
"""

import logging
from typing import Any, Protocol
from urllib.parse import urlsplit

from pydantic import ValidationError

from twa_manifest.errors import ShortcutError
from twa_manifest.icons import IconPurpose, find_best_icon
from twa_manifest.manifest import (
    DEFAULT_APP_NAME,
    DEFAULT_APP_VERSION_NAME,
    DEFAULT_BACKGROUND_COLOR,
    DEFAULT_ENABLE_NOTIFICATIONS,
    DEFAULT_NAVIGATION_COLOR,
    DEFAULT_SPLASHSCREEN_FADEOUT_DURATION,
    DEFAULT_THEME_COLOR,
    MAX_SHORTCUTS,
    AppManifest,
    SigningKeyInfo,
)
from twa_manifest.shortcuts import SHORT_NAME_MAX_SIZE, ShortcutInfo
from twa_manifest.util import generate_package_id, path_and_query, resolve_url, url_host
from twa_manifest.web_manifest import WebManifest, WebManifestIcon

logger = logging.getLogger(__name__)

# The minimum size needed for the app icon.
MIN_ICON_SIZE = 512

# The minimum size needed for the notification icon.
MIN_NOTIFICATION_ICON_SIZE = 48


class WarningLog(Protocol):
    """Anything with a logging-style ``warning`` method."""

    def warning(self, msg: str, *args: Any) -> None: ...


def _collect_shortcuts(
    web_manifest_url: str, raw_shortcuts: list[Any], log: WarningLog
) -> list[ShortcutInfo]:
    shortcuts: list[ShortcutInfo] = []
    for i, raw in enumerate(raw_shortcuts):
        try:
            shortcuts.append(ShortcutInfo.from_shortcut_json(web_manifest_url, raw))
        except (ShortcutError, ValidationError) as e:
            log.warning("Skipping shortcut[%d] for %s.", i, e)

        if len(shortcuts) == MAX_SHORTCUTS:
            break
    return shortcuts


def from_web_manifest_json(
    web_manifest_url: str,
    web_manifest: WebManifest | dict[str, Any],
    log: WarningLog = logger,
    generator_app: str | None = None,
) -> AppManifest:
    """Create an AppManifest from the content of a web manifest.

    Args:
        web_manifest_url: Absolute URL the web manifest was served from.
            Relative icon, shortcut and start URLs resolve against it.
        web_manifest: The parsed web manifest JSON (or a WebManifest).
        log: Receives a warning for every shortcut that is skipped.
        generator_app: Recorded as ``generatorApp``; "unknown" when omitted.

    Raises:
        pydantic.ValidationError: ``web_manifest`` doesn't have the shape of
            a web manifest.
    """
    manifest = WebManifest.parse(web_manifest)

    icon = find_best_icon(manifest.icons, IconPurpose.ANY, MIN_ICON_SIZE)
    maskable_icon = find_best_icon(manifest.icons, IconPurpose.MASKABLE, MIN_ICON_SIZE)
    monochrome_icon = find_best_icon(
        manifest.icons, IconPurpose.MONOCHROME, MIN_NOTIFICATION_ICON_SIZE
    )

    def resolve_icon_url(candidate: WebManifestIcon | None) -> str | None:
        return resolve_url(candidate.src, web_manifest_url) if candidate else None

    host = url_host(web_manifest_url)
    full_start_url = resolve_url(manifest.start_url or "/", web_manifest_url)

    launcher_name = (
        manifest.short_name
        or (manifest.name[:SHORT_NAME_MAX_SIZE] if manifest.name else None)
        or DEFAULT_APP_NAME
    )

    return AppManifest.model_validate(
        {
            "packageId": generate_package_id(urlsplit(web_manifest_url).hostname or "") or "",
            "host": host,
            "name": manifest.name or manifest.short_name or DEFAULT_APP_NAME,
            "launcherName": launcher_name,
            # Unrecognized display modes fall back during reconciliation
            "display": manifest.display,
            "themeColor": manifest.theme_color or DEFAULT_THEME_COLOR,
            "navigationColor": DEFAULT_NAVIGATION_COLOR,
            "backgroundColor": manifest.background_color or DEFAULT_BACKGROUND_COLOR,
            "startUrl": path_and_query(full_start_url),
            "iconUrl": resolve_icon_url(icon),
            "maskableIconUrl": resolve_icon_url(maskable_icon),
            "monochromeIconUrl": resolve_icon_url(monochrome_icon),
            "appVersion": DEFAULT_APP_VERSION_NAME,
            "signingKey": SigningKeyInfo(),
            "splashScreenFadeOutDuration": DEFAULT_SPLASHSCREEN_FADEOUT_DURATION,
            "enableNotifications": DEFAULT_ENABLE_NOTIFICATIONS,
            "shortcuts": _collect_shortcuts(web_manifest_url, manifest.shortcuts, log),
            "generatorApp": generator_app,
            "webManifestUrl": web_manifest_url,
        }
    )
