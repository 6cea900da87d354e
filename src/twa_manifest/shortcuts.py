"""App shortcuts (long-press launcher menu entries)."""

from typing import Any

from pydantic import BaseModel, ConfigDict, ValidationError
from pydantic.alias_generators import to_camel

from twa_manifest.errors import ShortcutError
from twa_manifest.icons import IconPurpose, find_best_icon
from twa_manifest.util import resolve_url
from twa_manifest.web_manifest import WebManifestShortcut

SHORT_NAME_MAX_SIZE = 12

# Launchers render shortcut icons at 48dp; 96px covers xhdpi.
MIN_SHORTCUT_ICON_SIZE = 96


def _escape(value: str) -> str:
    return value.replace("\\", "\\\\").replace("'", "\\'")


class ShortcutInfo(BaseModel):
    """One shortcut as stored in the app manifest.

    ``url`` and ``chosen_icon_url`` are absolute.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)

    name: str
    short_name: str
    url: str
    chosen_icon_url: str

    def asset_name(self, index: int) -> str:
        return f"shortcut_{index}"

    def to_fragment(self, index: int) -> str:
        """Render as a positional entry of the generated shortcuts array.

        ``[name:'New', short_name:'New', url:'https://example.com/new', icon:'shortcut_0']``
        """
        return (
            f"[name:'{_escape(self.name)}', short_name:'{_escape(self.short_name)}', "
            f"url:'{_escape(self.url)}', icon:'{self.asset_name(index)}']"
        )

    @classmethod
    def from_shortcut_json(cls, web_manifest_url: str, shortcut: Any) -> "ShortcutInfo":
        """Build a ShortcutInfo from one entry of a web manifest ``shortcuts`` list.

        Raises:
            ShortcutError: the entry is not an object, has no name or url,
                has an unparseable url, or has no icon of at least 96px.
        """
        if not isinstance(shortcut, dict):
            raise ShortcutError("entry is not an object")
        try:
            parsed = WebManifestShortcut.model_validate(shortcut)
        except ValidationError as e:
            raise ShortcutError(f"invalid entry ({e.error_count()} validation errors)") from e

        name = parsed.name or parsed.short_name
        if not name:
            raise ShortcutError("missing metadata: name")
        if not parsed.url:
            raise ShortcutError("missing metadata: url")

        short_name = parsed.short_name or name[:SHORT_NAME_MAX_SIZE]
        icon = find_best_icon(parsed.icons, IconPurpose.ANY, MIN_SHORTCUT_ICON_SIZE)
        if icon is None:
            raise ShortcutError("not finding a suitable icon")

        try:
            url = resolve_url(parsed.url, web_manifest_url)
            chosen_icon_url = resolve_url(icon.src, web_manifest_url)
        except ValueError as e:
            raise ShortcutError(f"invalid url ({e})") from e

        return cls(name=name, short_name=short_name, url=url, chosen_icon_url=chosen_icon_url)
