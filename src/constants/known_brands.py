# Ordered: the first brand in this list that occurs in a product name wins.
COMMON_BRANDS = [
    "Nike", "Adidas", "Puma", "Reebok", "Under Armour", "New Balance", "Skechers",
    "Levi's", "Pepe Jeans", "Lee", "Wrangler", "US Polo", "Tommy Hilfiger",
    "Calvin Klein", "Gap", "H&M", "Zara", "Mango", "Forever 21",
    "Allen Solly", "Van Heusen", "Louis Philippe", "Peter England", "Arrow",
    "Raymond", "Park Avenue", "Blackberrys", "Indian Terrain", "Woodland",
    "Bata", "Liberty", "Paragon", "Red Tape", "Hush Puppies",
    "FabIndia", "Biba", "Aurelia", "Global Desi", "Libas",
    "Roadster", "HRX", "Bewakoof", "The Souled Store", "Bombay Shaving",
    "Boat", "Noise", "Fire-Boltt", "Fastrack", "Titan", "Sonata",
]
