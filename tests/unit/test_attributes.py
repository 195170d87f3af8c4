import pytest

from services.import_pipeline import extract_brand, extract_color


class TestExtractColor:
    @pytest.mark.parametrize("name,expected", [
        ("Men Navy Slim Fit Shirt", "Navy"),
        ("WHITE sneakers", "White"),
        ("Black and red hoodie", "Black"),
        ("Red and black hoodie", "Black"),
        ("Floral print kurta", "Floral"),
        ("Roadster Navyblue Tee", "Blue"),
        ("Multicolor Kurta", "Multi"),
        ("Tanned leather belt", "Tan"),
    ])
    def test_first_vocabulary_entry_wins(self, name, expected):
        assert extract_color(name) == expected

    @pytest.mark.parametrize("name", ["Cotton kurta", "", None, "Plain linen shirt"])
    def test_no_match_returns_none(self, name):
        assert extract_color(name) is None

    def test_custom_vocabulary(self):
        assert extract_color("Sea Foam polo", colors=["sea foam"]) == "Sea foam"
        assert extract_color("Navy polo", colors=["sea foam"]) is None

    def test_whole_words_is_opt_in(self):
        assert extract_color("Redwood bench") == "Red"
        assert extract_color("Redwood bench", whole_words=True) is None
        assert extract_color("Multicolor Kurta", whole_words=True) == "Multicolor"


class TestExtractBrand:
    @pytest.mark.parametrize("name,expected", [
        ("Nike Air Max 90", "Nike"),
        ("levi's 511 slim jeans", "Levi's"),
        ("Men Tommy Hilfiger Polo", "Tommy Hilfiger"),
        ("H&M Relaxed Fit Tee", "H&M"),
        ("Adidas x Nike collab", "Nike"),
        ("NikeAir tee", "Nike"),
        ("Gapped hem skirt", "Gap"),
    ])
    def test_known_brands(self, name, expected):
        assert extract_brand(name) == expected

    @pytest.mark.parametrize("name", ["Generic cotton tee", "", None, "Handloom stole"])
    def test_unknown_brand_returns_none(self, name):
        assert extract_brand(name) is None

    def test_injected_vocabulary_is_used(self):
        brands = ["Sabyasachi", "Manyavar"]

        assert extract_brand("Manyavar sherwani", brands) == "Manyavar"
        assert extract_brand("Nike tee", brands) is None

    def test_whole_words_is_opt_in(self):
        assert extract_brand("Leeds United scarf") == "Lee"
        assert extract_brand("Leeds United scarf", whole_words=True) is None
