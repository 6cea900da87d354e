# Tests for AppManifest validation, reconciliation and JSON round trips
# Created: 2026-10-19

import json

import pytest
from pydantic import ValidationError

from twa_manifest.errors import ManifestFormatError
from twa_manifest.manifest import AppManifest, DisplayMode, FallbackType, SigningKeyInfo
from twa_manifest.normalizer import from_web_manifest_json
from twa_manifest.shortcuts import ShortcutInfo


@pytest.fixture
def manifest() -> AppManifest:
    return from_web_manifest_json(
        "https://example.com/manifest.json",
        {
            "name": "Example Progressive App",
            "short_name": "Example",
            "display": "fullscreen",
            "start_url": "/app?mode=twa",
            "theme_color": "#3367d6",
            "background_color": "#fafafa",
            "icons": [
                {"src": "/icon.png", "sizes": "512x512"},
                {"src": "/mask.png", "sizes": "512x512", "purpose": "maskable"},
                {"src": "/mono.png", "sizes": "48x48", "purpose": "monochrome"},
            ],
            "shortcuts": [
                {
                    "name": "New",
                    "url": "/new",
                    "icons": [{"src": "/new.png", "sizes": "96x96"}],
                },
                {
                    "name": "Recent",
                    "url": "/recent",
                    "icons": [{"src": "/recent.png", "sizes": "192x192"}],
                },
            ],
        },
    )


def _minimal_json(**overrides) -> dict:
    data = {
        "packageId": "com.example.twa",
        "host": "example.com",
        "name": "Example",
        "themeColor": "#FFFFFF",
        "navigationColor": "#000000",
        "backgroundColor": "#FFFFFF",
        "enableNotifications": False,
        "startUrl": "/",
        "iconUrl": "https://example.com/icon.png",
        "splashScreenFadeOutDuration": 300,
        "signingKey": {"path": "./android.keystore", "alias": "android"},
        "appVersion": "1",
        "shortcuts": [],
    }
    data.update(overrides)
    return data


class TestCheck:
    def test_valid(self, manifest):
        assert manifest.check() is None

    @pytest.mark.parametrize(
        ("update", "expected"),
        [
            ({"host": ""}, "host cannot be empty"),
            ({"name": "   "}, "name cannot be empty"),
            ({"start_url": ""}, "startUrl cannot be empty"),
            ({"icon_url": None}, "iconUrl cannot be empty"),
            ({"icon_url": "  "}, "iconUrl cannot be empty"),
        ],
    )
    def test_missing_required_field(self, manifest, update, expected):
        assert manifest.model_copy(update=update).check() == expected

    def test_first_failure_wins(self, manifest):
        broken = manifest.model_copy(update={"host": "", "name": "", "icon_url": None})
        assert broken.check() == "host cannot be empty"

    def test_package_id_not_checked(self, manifest):
        assert manifest.model_copy(update={"package_id": ""}).check() is None


class TestSerialization:
    def test_json_shape(self, manifest):
        data = manifest.to_json_dict()
        assert data["appVersion"] == "1"
        assert "appVersionName" not in data
        assert data["themeColor"] == "#3367D6"
        assert data["backgroundColor"] == "#FAFAFA"
        assert data["display"] == "fullscreen"
        assert data["fallbackType"] == "customtabs"
        assert data["webManifestUrl"] == "https://example.com/manifest.json"
        assert data["signingKey"] == {"path": "./android.keystore", "alias": "android"}
        assert data["shortcuts"][0] == {
            "name": "New",
            "shortName": "New",
            "url": "https://example.com/new",
            "chosenIconUrl": "https://example.com/new.png",
        }

    def test_absent_optional_fields_omitted(self):
        manifest = AppManifest.from_json_dict(_minimal_json())
        data = manifest.to_json_dict()
        assert "webManifestUrl" not in data
        assert "maskableIconUrl" not in data

    def test_round_trip(self, manifest):
        restored = AppManifest.from_json(manifest.to_json())
        assert restored.to_json_dict() == manifest.to_json_dict()

    def test_round_trip_color_case(self):
        manifest = AppManifest.from_json_dict(_minimal_json(themeColor="#abcdef"))
        restored = AppManifest.from_json(manifest.to_json())
        assert restored.to_json_dict()["themeColor"].lower() == "#abcdef"

    def test_to_json_is_indented(self, manifest):
        text = manifest.to_json()
        assert text.startswith('{\n  "packageId"')
        assert json.loads(text)["host"] == "example.com"

    def test_generate_shortcuts(self, manifest):
        assert manifest.generate_shortcuts() == (
            "[[name:'New', short_name:'New', url:'https://example.com/new', icon:'shortcut_0'],"
            "[name:'Recent', short_name:'Recent', url:'https://example.com/recent', "
            "icon:'shortcut_1']]"
        )

    def test_generate_shortcuts_empty(self):
        assert AppManifest.from_json_dict(_minimal_json()).generate_shortcuts() == "[]"


class TestReconciliation:
    def test_older_manifest_back_filled(self):
        manifest = AppManifest.from_json_dict(_minimal_json())
        assert manifest.launcher_name == "Example"
        assert manifest.display is DisplayMode.STANDALONE
        assert manifest.app_version_code == 1
        assert manifest.generator_app == "unknown"
        assert manifest.fallback_type is FallbackType.CUSTOMTABS

    def test_unknown_display_discarded(self):
        manifest = AppManifest.from_json_dict(_minimal_json(display="minimal-ui"))
        assert manifest.display is DisplayMode.STANDALONE

    def test_version_name_defaults_from_code(self):
        data = _minimal_json(appVersionCode=7)
        del data["appVersion"]
        manifest = AppManifest.from_json_dict(data)
        assert manifest.app_version_name == "7"

    def test_missing_signing_key_and_colors(self):
        data = _minimal_json()
        for key in ("signingKey", "themeColor", "navigationColor", "backgroundColor"):
            del data[key]
        data = AppManifest.from_json_dict(data).to_json_dict()
        assert data["signingKey"] == {"path": "./android.keystore", "alias": "android"}
        assert data["navigationColor"] == "#000000"

    def test_python_field_names_accepted(self):
        manifest = AppManifest(
            package_id="com.example.twa",
            host="example.com",
            name="Example",
            start_url="/",
            icon_url="https://example.com/icon.png",
            signing_key=SigningKeyInfo(path="./key.jks", alias="upload"),
            fallback_type="webview",
        )
        assert manifest.launcher_name == "Example"
        assert manifest.signing_key.alias == "upload"
        assert manifest.fallback_type is FallbackType.WEBVIEW

    def test_missing_required_strings_reported_not_raised(self):
        manifest = AppManifest.from_json_dict({})
        assert manifest.check() == "host cannot be empty"


class TestMalformed:
    def test_not_json(self):
        with pytest.raises(json.JSONDecodeError):
            AppManifest.from_json("{not json")

    def test_not_an_object(self):
        with pytest.raises(ManifestFormatError):
            AppManifest.from_json("[1, 2, 3]")

    def test_invalid_color(self):
        with pytest.raises(ValidationError):
            AppManifest.from_json_dict(_minimal_json(themeColor="not-a-color"))

    def test_too_many_shortcuts(self):
        shortcut = ShortcutInfo(
            name="S",
            short_name="S",
            url="https://example.com/s",
            chosen_icon_url="https://example.com/s.png",
        )
        with pytest.raises(ValidationError):
            AppManifest.from_json_dict(_minimal_json(shortcuts=[shortcut] * 5))

    def test_frozen(self, manifest):
        with pytest.raises(ValidationError):
            manifest.name = "Other"

    def test_shortcuts_not_mutable_in_place(self, manifest):
        assert isinstance(manifest.shortcuts, tuple)
        with pytest.raises(AttributeError):
            manifest.shortcuts.append(manifest.shortcuts[0])
        assert len(manifest.shortcuts) == 2
