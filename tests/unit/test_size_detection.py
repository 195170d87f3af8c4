import pytest

from models.schemas import (
    DimensionsSize,
    LetterSize,
    NumericSize,
    ShoeSize,
    WaistInseamSize,
    WatchSize,
)
from services.import_pipeline import detect_size_type


class TestCategorySpecificFormats:
    def test_footwear_numeric_is_shoe(self):
        assert detect_size_type("9", "footwear") == ShoeSize(value="9", system="us")
        assert detect_size_type("8.5", "footwear") == ShoeSize(value="8.5")
        assert detect_size_type("42", "footwear") == ShoeSize(value="42")

    def test_watch_case_requires_mm_suffix(self):
        assert detect_size_type("42mm", "accessories") == WatchSize(value="42")
        assert detect_size_type("42", "accessories") == NumericSize(value="42")
        assert detect_size_type("42mm", "clothing") == LetterSize(value="42mm")

    def test_bag_capacity(self):
        assert detect_size_type("30L", "bags") == DimensionsSize(capacity=30)
        assert detect_size_type("30l", "bags").capacity == 30
        assert detect_size_type("30L", "clothing") == LetterSize(value="30L")


class TestGeneralFormats:
    @pytest.mark.parametrize("raw,expected", [
        ("M", "M"),
        ("xl", "XL"),
        ("XXXXL", "XXXXL"),
        ("3XL", "3XL"),
    ])
    def test_letter_sizes(self, raw, expected):
        assert detect_size_type(raw, "clothing") == LetterSize(value=expected)

    @pytest.mark.parametrize("raw,expected", [
        ("24", NumericSize(value="24")),
        ("32", NumericSize(value="32")),
        ("60", NumericSize(value="60")),
        ("4", ShoeSize(value="4")),
        ("20", ShoeSize(value="20")),
    ])
    def test_bare_integer_ranges(self, raw, expected):
        assert detect_size_type(raw, "clothing") == expected

    def test_integer_outside_ranges_falls_back(self):
        assert detect_size_type("2", "clothing") == LetterSize(value="2")
        assert detect_size_type("22", "clothing") == LetterSize(value="22")
        assert detect_size_type("61", "clothing") == LetterSize(value="61")

    def test_waist_inseam(self):
        assert detect_size_type("32x34", "clothing") == WaistInseamSize(waist="32", inseam="34")
        assert detect_size_type("30X30", "clothing") == WaistInseamSize(waist="30", inseam="30")

    @pytest.mark.parametrize("raw", ["Free Size", "UK 8", "32/34", "One Size"])
    def test_opaque_fallback(self, raw):
        assert detect_size_type(raw, "clothing") == LetterSize(value=raw)

    @pytest.mark.parametrize("raw", ["", "   ", None])
    def test_empty_is_absent(self, raw):
        assert detect_size_type(raw, "clothing") is None

    def test_whitespace_is_trimmed(self):
        assert detect_size_type("  L ", "clothing") == LetterSize(value="L")


def test_ranges_follow_settings(monkeypatch):
    from config import settings

    monkeypatch.setattr(settings, "numeric_size_min", 20)
    assert detect_size_type("22", "clothing") == NumericSize(value="22")
