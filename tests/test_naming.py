"""Tests for naming module."""

import pytest

from asset_pack_codegen.core.naming import split_words, to_camel_case


class TestToCamelCase:
    """Test conversion of asset names to field names."""

    @pytest.mark.parametrize(
        ("name", "expected"),
        [
            ("ZombieDie", "zombieDie"),
            ("Troll", "troll"),
            ("Zombie10", "zombie10"),
            ("MainMenuBgSound", "mainMenuBgSound"),
            ("Ui", "ui"),
            ("InfoBox", "infoBox"),
            ("TowerSimplifier", "towerSimplifier"),
            ("Level2Boss", "level2Boss"),
            ("HTMLParser", "htmlParser"),
            ("ABC", "abc"),
            ("level_failed", "levelFailed"),
            ("freezer-hit sound", "freezerHitSound"),
            ("zombieDie", "zombieDie"),
        ],
    )
    def test_table(self, name: str, expected: str) -> None:
        """Test the fixed table of name / field pairs."""
        assert to_camel_case(name) == expected

    def test_empty_and_symbol_only(self) -> None:
        """Test that inputs without letters or digits give an empty string."""
        assert to_camel_case("") == ""
        assert to_camel_case("__--") == ""

    def test_idempotent(self) -> None:
        """Test that converting an already converted name changes nothing."""
        for name in ["ZombieDie", "MainMenuBgSound", "Zombie10", "HelpScreen"]:
            once = to_camel_case(name)
            assert to_camel_case(once) == once


class TestSplitWords:
    """Test word splitting."""

    def test_splits_on_case_and_digits(self) -> None:
        """Test that case changes and digit runs start new words."""
        assert split_words("MainMenuBgSound") == ["Main", "Menu", "Bg", "Sound"]
        assert split_words("Zombie10") == ["Zombie", "10"]

    def test_splits_on_separators(self) -> None:
        """Test that non-alphanumeric characters separate words."""
        assert split_words("zombie_die") == ["zombie", "die"]
        assert split_words("tower/arrow") == ["tower", "arrow"]
