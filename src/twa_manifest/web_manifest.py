"""Loose models for the W3C Web App Manifest.

Only the members used to derive an app manifest are declared; everything
else in the document is ignored.  Shortcuts stay as raw dicts here so a
single bad entry can be rejected on its own instead of failing the whole
document.

    {
      "name": "Example App",
      "short_name": "Example",
      "start_url": "/?source=pwa",
      "display": "standalone",
      "theme_color": "#3367D6",
      "background_color": "#ffffff",
      "icons": [{"src": "/icon-512.png", "sizes": "512x512", "purpose": "any maskable"}],
      "shortcuts": [{"name": "New", "url": "/new", "icons": [...]}]
    }
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator


class WebManifestIcon(BaseModel):
    model_config = ConfigDict(extra="ignore")

    src: str
    sizes: str | list[str] | None = None
    purpose: str | None = None
    type: str | None = None


class WebManifestShortcut(BaseModel):
    model_config = ConfigDict(extra="ignore")

    name: str | None = None
    short_name: str | None = None
    url: str | None = None
    icons: list[WebManifestIcon] = Field(default_factory=list)

    @field_validator("icons", mode="before")
    @classmethod
    def icons_or_empty(cls, value: Any) -> Any:
        return [] if value is None else value


class WebManifest(BaseModel):
    model_config = ConfigDict(extra="ignore")

    name: str | None = None
    short_name: str | None = None
    start_url: str | None = None
    # Any JSON value; unrecognized ones fall back to "standalone"
    display: Any = None
    theme_color: str | None = None
    background_color: str | None = None
    icons: list[WebManifestIcon] = Field(default_factory=list)
    shortcuts: list[Any] = Field(default_factory=list)

    @field_validator("icons", "shortcuts", mode="before")
    @classmethod
    def lists_or_empty(cls, value: Any) -> Any:
        return [] if value is None else value

    @classmethod
    def parse(cls, data: "WebManifest | dict[str, Any]") -> "WebManifest":
        """Accept either an already-parsed model or the raw JSON object."""
        if isinstance(data, cls):
            return data
        return cls.model_validate(data)
