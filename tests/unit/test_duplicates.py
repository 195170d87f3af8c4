import pytest

from models.domain import ImportStatus
from models.schemas import ExistingItem, ImportedItem
from services.import_pipeline import (
    check_for_duplicates,
    find_duplicate_of,
    is_probable_duplicate,
    mark_duplicates,
    normalize_string,
)


def candidate(name: str, brand=None, index: int = 0) -> ImportedItem:
    return ImportedItem(temp_id=f"import-myntra-1-{index}", name=name, brand=brand, category="clothing")


def existing(name: str, brand=None, item_id: str = "inv-1") -> ExistingItem:
    return ExistingItem(id=item_id, name=name, brand=brand)


class TestNormalizeString:
    @pytest.mark.parametrize("raw,expected", [
        ("Nike Air-Max_90", "nikeairmax90"),
        ("  Levi's 511  ", "levis511"),
        ("T-Shirt (Pack of 2)", "tshirtpackof2"),
        ("", ""),
    ])
    def test_normalization(self, raw, expected):
        assert normalize_string(raw) == expected


class TestBrandRules:
    def test_brand_mismatch_is_a_veto(self):
        assert not is_probable_duplicate("Air Max 90", "Nike", existing("Air Max 90", "Puma"))

    def test_missing_candidate_brand_is_not_a_duplicate(self):
        assert not is_probable_duplicate("Nike Air Max 90", None, existing("Nike Air Max 90", "Nike"))

    def test_missing_existing_brand_is_not_a_duplicate(self):
        assert not is_probable_duplicate("Nike Air Max 90", "Nike", existing("Nike Air Max 90"))

    def test_both_brands_absent_with_identical_names(self):
        assert is_probable_duplicate("Cotton Kurta", None, existing("cotton-kurta"))

    def test_brand_comparison_is_normalized(self):
        assert is_probable_duplicate("Air Max 90", "Levi's", existing("air max 90", "LEVIS"))


class TestNameRules:
    @pytest.mark.parametrize("candidate_name,existing_name,expected", [
        ("Nike Air Max 90", "Nike Air Max 90 White", True),
        ("Nike Air Max 90", "Nike Air Zoom Pegasus", False),
        ("Nike Air Max 90 White", "Nike Air Max 90", True),
        ("Air Max", "Nike Air Max 90 Premium Edition", False),
        ("Nike Air Max 90", "Nike Air Max 90", True),
    ])
    def test_near_identical_names(self, candidate_name, existing_name, expected):
        result = is_probable_duplicate(candidate_name, "Nike", existing(existing_name, "Nike"))
        assert result is expected

    def test_near_identical_requires_brand_on_both_sides(self):
        assert not is_probable_duplicate("Air Max 90", None, existing("Air Max 90 White"))

    def test_threshold_is_configurable(self):
        item = existing("Nike Air Max 90 Premium Edition", "Nike")

        assert not is_probable_duplicate("Nike Air Max 90", "Nike", item)
        assert is_probable_duplicate("Nike Air Max 90", "Nike", item, length_ratio=0.5)


class TestCheckForDuplicates:
    def test_returns_indices_of_flagged_candidates(self):
        candidates = [
            candidate("Nike Air Max 90", "Nike", 0),
            candidate("Nike Air Zoom Pegasus", "Nike", 1),
            candidate("Linen Shirt", None, 2),
        ]
        inventory = [
            existing("Nike Air Max 90 White", "Nike", "inv-1"),
            existing("linen shirt", None, "inv-2"),
        ]

        assert check_for_duplicates(candidates, inventory) == [0, 2]

    def test_single_existing_item_examples(self):
        nike = [candidate("Nike Air Max 90", "Nike")]

        assert check_for_duplicates(nike, [existing("Nike Air Max 90 White", "Nike")]) == [0]
        assert check_for_duplicates(nike, [existing("Nike Air Zoom Pegasus", "Nike")]) == []

    def test_empty_inputs(self):
        assert check_for_duplicates([], [existing("Tee")]) == []
        assert check_for_duplicates([candidate("Tee")], []) == []

    def test_does_not_mutate_candidates(self):
        items = [candidate("Tee", None)]

        check_for_duplicates(items, [existing("Tee")])

        assert items[0].is_duplicate is None


class TestMarkDuplicates:
    def test_marks_copies_with_existing_id(self):
        items = [candidate("Tee", None, 0), candidate("Hoodie", None, 1)]

        marked = mark_duplicates(items, [existing("Hoodie", None, "inv-9")])

        assert [m.is_duplicate for m in marked] == [False, True]
        assert marked[1].duplicate_of == "inv-9"
        assert [m.status for m in marked] == [ImportStatus.PENDING, ImportStatus.DUPLICATE]
        assert items[1].is_duplicate is None

    def test_find_duplicate_of_returns_first_match(self):
        inventory = [existing("Hoodie", None, "inv-1"), existing("hoodie", None, "inv-2")]

        assert find_duplicate_of(candidate("Hoodie"), inventory) == "inv-1"
