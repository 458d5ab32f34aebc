"""Tests for tag style presets."""

from __future__ import annotations

import pytest

from htmlruns.style_manager import StyleManager


class TestPresets:
    def test_default_preset(self) -> None:
        assert StyleManager().preset == "default"

    def test_presets_listed(self) -> None:
        assert StyleManager.PRESETS == ["plain", "default", "compact"]

    def test_invalid_preset_raises(self) -> None:
        with pytest.raises(ValueError):
            StyleManager("fancy")

    def test_plain_is_empty(self) -> None:
        assert StyleManager("plain").tag_styles() == {}

    @pytest.mark.parametrize("level", [1, 2, 3, 4, 5, 6])
    def test_headings_bold(self, level: int) -> None:
        for preset in ("default", "compact"):
            style = StyleManager(preset).get_style(f"h{level}")
            assert style["fontWeight"] == "bold"

    def test_compact_headings_in_points(self) -> None:
        assert StyleManager("compact").get_style("h1")["fontSize"] == "22pt"


class TestLookup:
    def test_unknown_tag(self) -> None:
        assert StyleManager().get_style("span") == {}

    def test_case_insensitive(self) -> None:
        assert StyleManager().get_style("STRONG") == {"fontWeight": "bold"}

    def test_returns_copies(self) -> None:
        sm = StyleManager()
        sm.get_style("b")["fontWeight"] = "normal"
        sm.tag_styles()["b"]["fontWeight"] = "normal"
        assert sm.get_style("b") == {"fontWeight": "bold"}

    def test_list_style_names(self) -> None:
        names = StyleManager().list_style_names()
        assert names == sorted(names)
        assert "a" in names


class TestOverrides:
    def test_merged_per_property(self) -> None:
        sm = StyleManager().with_overrides({"A": {"color": "red"}})
        assert sm.get_style("a") == {"color": "red", "textDecorationLine": "underline"}

    def test_new_tag(self) -> None:
        sm = StyleManager("plain").with_overrides({"span": {"color": "red"}})
        assert sm.get_style("span") == {"color": "red"}

    def test_original_unchanged(self) -> None:
        sm = StyleManager()
        sm.with_overrides({"a": {"color": "red"}})
        assert sm.get_style("a")["color"] != "red"

    def test_none(self) -> None:
        sm = StyleManager("compact")
        assert sm.with_overrides(None).tag_styles() == sm.tag_styles()
