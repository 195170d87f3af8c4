import re

LETTER_SIZES = ["XXS", "XS", "S", "M", "L", "XL", "XXL", "XXXL", "XXXXL", "2XL", "3XL", "4XL", "5XL"]

LETTER_SIZE_RE = re.compile(r"^(" + "|".join(LETTER_SIZES) + r")$", re.IGNORECASE)
DECIMAL_RE = re.compile(r"^\d+(\.\d+)?$")
INTEGER_RE = re.compile(r"^\d+$")
WATCH_CASE_RE = re.compile(r"^(\d+)mm$", re.IGNORECASE)
CAPACITY_RE = re.compile(r"^(\d+)L$", re.IGNORECASE)
WAIST_INSEAM_RE = re.compile(r"^(\d+)x(\d+)$", re.IGNORECASE)

DEFAULT_SHOE_SYSTEM = "us"
