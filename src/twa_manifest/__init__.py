"""twa-manifest: derive, validate and persist Trusted Web Activity configuration."""

from twa_manifest.errors import ManifestError, ManifestFormatError, ShortcutError
from twa_manifest.icons import IconPurpose, find_best_icon
from twa_manifest.manifest import AppManifest, DisplayMode, FallbackType, SigningKeyInfo
from twa_manifest.normalizer import from_web_manifest_json
from twa_manifest.shortcuts import ShortcutInfo

__version__ = "0.1.0"

__all__ = [
    "AppManifest",
    "DisplayMode",
    "FallbackType",
    "IconPurpose",
    "ManifestError",
    "ManifestFormatError",
    "ShortcutError",
    "ShortcutInfo",
    "SigningKeyInfo",
    "find_best_icon",
    "from_web_manifest_json",
]
