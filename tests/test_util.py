# Tests for package id generation and field checks
# Created: 2026-10-19

import pytest

from twa_manifest.util import check_non_empty, generate_package_id, path_and_query, url_host


class TestGeneratePackageId:
    @pytest.mark.parametrize(
        ("host", "expected"),
        [
            ("example.com", "com.example.twa"),
            ("pwa.example.com", "com.example.pwa.twa"),
            ("my-app.example.com", "com.example.my_app.twa"),
            ("1up.example.com", "com.example._1up.twa"),
            ("  example.com. ", "com.example.twa"),
            ("example.com:8443", "com_8443.example.twa"),
        ],
    )
    def test_reverse_domain(self, host, expected):
        assert generate_package_id(host) == expected

    def test_empty_host(self):
        assert generate_package_id("") is None
        assert generate_package_id("   ") is None
        assert generate_package_id("...") is None


class TestCheckNonEmpty:
    def test_empty_values(self):
        assert check_non_empty(None, "host") == "host cannot be empty"
        assert check_non_empty("", "name") == "name cannot be empty"
        assert check_non_empty("  ", "startUrl") == "startUrl cannot be empty"

    def test_non_empty(self):
        assert check_non_empty("example.com", "host") is None


class TestUrlHelpers:
    def test_url_host_keeps_explicit_port(self):
        assert url_host("https://Example.com:8443/manifest.json") == "example.com:8443"
        assert url_host("https://example.com/manifest.json") == "example.com"

    def test_path_and_query(self):
        assert path_and_query("https://example.com/app?x=1#frag") == "/app?x=1"
        assert path_and_query("https://example.com") == "/"
