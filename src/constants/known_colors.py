KNOWN_COLORS = [
    "black", "white", "red", "blue", "green", "yellow", "orange", "purple", "pink",
    "brown", "grey", "gray", "navy", "beige", "cream", "maroon", "olive", "teal",
    "coral", "burgundy", "tan", "khaki", "charcoal", "ivory", "lavender", "mint",
    "peach", "rose", "rust", "salmon", "turquoise", "mustard", "mauve", "indigo",
    "multi", "multicolor", "printed", "floral", "striped", "checked", "plaid",
]
