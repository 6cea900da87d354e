# Exceptions raised while deriving or loading an app manifest.
# Validation problems on a finished manifest are reported by
# AppManifest.check() as plain strings, not raised.


class ManifestError(Exception):
    """Base class for twa-manifest errors."""


class ShortcutError(ManifestError):
    """A web manifest shortcut entry cannot be turned into a ShortcutInfo."""


class ManifestFormatError(ManifestError):
    """A persisted manifest parsed as JSON but is not a JSON object."""
