"""The app manifest: configuration used to generate a Trusted Web Activity project.

Persisted as a flat JSON document (``twa-manifest.json``):

{
  "packageId": "com.example.twa",
  "host": "example.com",
  "name": "Example",
  "launcherName": "Example",
  "display": "standalone",
  "themeColor": "#FFFFFF",
  "navigationColor": "#000000",
  "backgroundColor": "#FFFFFF",
  "enableNotifications": false,
  "startUrl": "/app",
  "iconUrl": "https://example.com/icon.png",
  "splashScreenFadeOutDuration": 300,
  "signingKey": {"path": "./android.keystore", "alias": "android"},
  "appVersionCode": 1,
  "appVersion": "1",
  "shortcuts": [],
  "generatorApp": "unknown",
  "webManifestUrl": "https://example.com/manifest.json",
  "fallbackType": "customtabs"
}

``appVersion`` holds the version *name*; older manifests used that key and
it is kept for compatibility.
"""

import json
from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_serializer, model_validator
from pydantic.alias_generators import to_camel
from pydantic_extra_types.color import Color

from twa_manifest.errors import ManifestFormatError
from twa_manifest.shortcuts import ShortcutInfo
from twa_manifest.util import check_non_empty

MAX_SHORTCUTS = 4


class DisplayMode(str, Enum):
    STANDALONE = "standalone"
    FULLSCREEN = "fullscreen"


class FallbackType(str, Enum):
    """Browser strategy used when Trusted Web Activities are unavailable."""

    CUSTOMTABS = "customtabs"
    WEBVIEW = "webview"


def as_display_mode(value: Any) -> DisplayMode | None:
    """Map a raw display string to a DisplayMode, or None if unrecognized."""
    if isinstance(value, DisplayMode):
        return value
    if not isinstance(value, str):
        return None
    try:
        return DisplayMode(value)
    except ValueError:
        return None


DEFAULT_APP_NAME = "My TWA"
DEFAULT_DISPLAY_MODE = DisplayMode.STANDALONE
DEFAULT_THEME_COLOR = "#FFFFFF"
DEFAULT_NAVIGATION_COLOR = "#000000"
DEFAULT_BACKGROUND_COLOR = "#FFFFFF"
DEFAULT_SPLASHSCREEN_FADEOUT_DURATION = 300
DEFAULT_APP_VERSION_CODE = 1
DEFAULT_APP_VERSION_NAME = str(DEFAULT_APP_VERSION_CODE)
DEFAULT_SIGNING_KEY_PATH = "./android.keystore"
DEFAULT_SIGNING_KEY_ALIAS = "android"
DEFAULT_ENABLE_NOTIFICATIONS = False
DEFAULT_GENERATOR_APP_NAME = "unknown"
DEFAULT_FALLBACK_TYPE = FallbackType.CUSTOMTABS


def color_to_hex(color: Color) -> str:
    """Canonical ``#RRGGBB`` form, alpha dropped."""
    r, g, b = color.as_rgb_tuple(alpha=False)
    return f"#{r:02X}{g:02X}{b:02X}"


class SigningKeyInfo(BaseModel):
    model_config = ConfigDict(frozen=True)

    path: str = DEFAULT_SIGNING_KEY_PATH
    alias: str = DEFAULT_SIGNING_KEY_ALIAS


def reconcile_manifest_data(data: dict[str, Any]) -> dict[str, Any]:
    """Back-fill fields that older manifests (or fresh derivations) leave out.

    Works on the JSON (camelCase) shape and returns a new dict.  Every
    AppManifest goes through here, whether it was derived from a web
    manifest or loaded from disk.
    """
    data = dict(data)

    for key in ("packageId", "host", "name", "startUrl"):
        if data.get(key) is None:
            data[key] = ""

    if not data.get("launcherName"):
        data["launcherName"] = data["name"]
    data["display"] = as_display_mode(data.get("display")) or DEFAULT_DISPLAY_MODE

    for key, default in (
        ("themeColor", DEFAULT_THEME_COLOR),
        ("navigationColor", DEFAULT_NAVIGATION_COLOR),
        ("backgroundColor", DEFAULT_BACKGROUND_COLOR),
    ):
        if not data.get(key):
            data[key] = default

    if data.get("enableNotifications") is None:
        data["enableNotifications"] = DEFAULT_ENABLE_NOTIFICATIONS
    if data.get("splashScreenFadeOutDuration") is None:
        data["splashScreenFadeOutDuration"] = DEFAULT_SPLASHSCREEN_FADEOUT_DURATION
    if not data.get("signingKey"):
        data["signingKey"] = SigningKeyInfo()

    if not data.get("appVersionCode"):
        data["appVersionCode"] = DEFAULT_APP_VERSION_CODE
    if not data.get("appVersion"):
        data["appVersion"] = str(data["appVersionCode"])

    if data.get("shortcuts") is None:
        data["shortcuts"] = ()
    if not data.get("generatorApp"):
        data["generatorApp"] = DEFAULT_GENERATOR_APP_NAME
    if not data.get("fallbackType"):
        data["fallbackType"] = DEFAULT_FALLBACK_TYPE
    return data


class AppManifest(BaseModel):
    """Configuration for one TWA project.

    Build one with :func:`twa_manifest.normalizer.from_web_manifest_json`
    or :meth:`from_json`.  Instances are frozen; use ``model_copy(update=...)``
    to derive a changed manifest.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)

    package_id: str
    host: str
    name: str
    launcher_name: str
    display: DisplayMode
    theme_color: Color
    navigation_color: Color
    background_color: Color
    enable_notifications: bool
    start_url: str
    icon_url: str | None = None
    maskable_icon_url: str | None = None
    monochrome_icon_url: str | None = None
    splash_screen_fade_out_duration: int = Field(ge=0)
    signing_key: SigningKeyInfo
    app_version_code: int = Field(ge=1)
    app_version_name: str = Field(alias="appVersion")
    shortcuts: tuple[ShortcutInfo, ...] = Field(max_length=MAX_SHORTCUTS)
    generator_app: str
    web_manifest_url: str | None = None
    fallback_type: FallbackType

    @model_validator(mode="before")
    @classmethod
    def reconcile_fields(cls, data: Any) -> Any:
        if not isinstance(data, dict):
            return data
        # Accept python field names too, so reconciliation only sees aliases
        aliased = {}
        for key, value in data.items():
            field = cls.model_fields.get(key)
            aliased[field.alias if field is not None and field.alias else key] = value
        return reconcile_manifest_data(aliased)

    @field_serializer("theme_color", "navigation_color", "background_color")
    def serialize_color(self, color: Color) -> str:
        return color_to_hex(color)

    # ─── Validation ──────────────────────────────────────────────────────

    def check(self) -> str | None:
        """Check the fields needed to generate a project.

        Returns:
            The first error found, or None when the manifest is usable.
        """
        for value, field_name in (
            (self.host, "host"),
            (self.name, "name"),
            (self.start_url, "startUrl"),
        ):
            error = check_non_empty(value, field_name)
            if error is not None:
                return error

        if not self.icon_url:
            return "iconUrl cannot be empty"
        return check_non_empty(self.icon_url, "iconUrl")

    # ─── Serialization ───────────────────────────────────────────────────

    def generate_shortcuts(self) -> str:
        return "[" + ",".join(s.to_fragment(i) for i, s in enumerate(self.shortcuts)) + "]"

    def to_json_dict(self) -> dict[str, Any]:
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)

    def to_json(self) -> str:
        return json.dumps(self.to_json_dict(), indent=2)

    @classmethod
    def from_json_dict(cls, data: dict[str, Any]) -> "AppManifest":
        return cls.model_validate(data)

    @classmethod
    def from_json(cls, text: str | bytes) -> "AppManifest":
        """Parse a persisted manifest.

        Raises:
            json.JSONDecodeError: the text is not JSON.
            ManifestFormatError: the JSON is not an object.
            pydantic.ValidationError: a field has an unusable value.
        """
        data = json.loads(text)
        if not isinstance(data, dict):
            raise ManifestFormatError(
                f"Expected a JSON object for the app manifest, got {type(data).__name__}"
            )
        return cls.from_json_dict(data)
