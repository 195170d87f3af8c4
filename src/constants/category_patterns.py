# (pattern, category, subcategory, priority)
# Patterns are matched case-insensitively on word boundaries. Specific
# vocabulary sits at priority 10; catch-alls ("shoe", "bag") sit lower so
# that overlapping names resolve to the specific subcategory.
CATEGORY_PATTERNS = [
    # footwear
    (r"\b(sneaker|trainer)s?\b", "footwear", "Sneakers", 10),
    (r"\b(running\s+shoe|sport\s+shoe)s?\b", "footwear", "Sneakers", 10),
    (r"\b(loafer|moccasin)s?\b", "footwear", "Loafers", 10),
    (r"\b(boot)s?\b", "footwear", "Boots", 10),
    (r"\b(sandal|chappal|slipper|flip\s*flop|slider)s?\b", "footwear", "Sandals", 10),
    (r"\b(heel|stiletto|pump)s?\b", "footwear", "Heels", 10),
    (r"\b(flat|ballet)s?\b", "footwear", "Flats", 9),
    (r"\b(oxford|derby|brogue)s?\b", "footwear", "Formal Shoes", 10),
    (r"\b(shoe|footwear)s?\b", "footwear", None, 5),

    # tops
    (r"\b(t-?shirt|tee)s?\b", "clothing", "T-Shirts", 10),
    (r"\b(polo)s?\b", "clothing", "Polo Shirts", 10),
    (r"\b(shirt)s?\b", "clothing", "Shirts", 8),
    (r"\b(blouse)s?\b", "clothing", "Blouses", 10),
    (r"\b(top)s?\b", "clothing", "Tops", 6),
    (r"\b(tank\s*top|vest)s?\b", "clothing", "Tank Tops", 10),
    (r"\b(crop\s*top)s?\b", "clothing", "Crop Tops", 10),
    (r"\b(tunic)s?\b", "clothing", "Tunics", 10),

    # bottoms
    (r"\b(jean|denim)s?\b", "clothing", "Jeans", 10),
    (r"\b(trouser|pant|chino)s?\b", "clothing", "Trousers", 9),
    (r"\b(short)s?\b", "clothing", "Shorts", 8),
    (r"\b(skirt)s?\b", "clothing", "Skirts", 10),
    (r"\b(legging|jegging)s?\b", "clothing", "Leggings", 10),
    (r"\b(jogger|track\s*pant|sweatpant)s?\b", "clothing", "Joggers", 10),

    # dresses, suits and ethnic wear
    (r"\b(dress|gown)(es|s)?\b", "clothing", "Dresses", 10),
    (r"\b(jumpsuit|romper|playsuit)s?\b", "clothing", "Jumpsuits", 10),
    (r"\b(suit|blazer)s?\b", "clothing", "Suits", 9),
    (r"\b(kurta|kurti)s?\b", "clothing", "Kurtas", 10),
    (r"\b(saree|sari)s?\b", "clothing", "Sarees", 10),
    (r"\b(lehenga|ghagra)s?\b", "clothing", "Lehengas", 10),
    (r"\b(salwar|churidar|palazzo)s?\b", "clothing", "Ethnic Wear", 10),

    # outerwear
    (r"\b(jacket)s?\b", "clothing", "Jackets", 10),
    (r"\b(coat|overcoat|trench)s?\b", "clothing", "Coats", 10),
    (r"\b(hoodie|hoody|sweatshirt)s?\b", "clothing", "Hoodies", 10),
    (r"\b(sweater|pullover|cardigan|jumper)s?\b", "clothing", "Sweaters", 10),
    (r"\b(windbreaker|bomber|puffer)s?\b", "clothing", "Jackets", 10),
    (r"\b(shrug|shawl|poncho)s?\b", "clothing", "Outerwear", 9),

    # innerwear and sleepwear
    (r"\b(underwear|brief|boxer)s?\b", "clothing", "Innerwear", 10),
    (r"\b(bra|lingerie|panty|panties)\b", "clothing", "Innerwear", 10),
    (r"\b(pajama|pyjama|nightwear|sleepwear|nightsuit)s?\b", "clothing", "Sleepwear", 10),
    (r"\b(robe|bathrobe)s?\b", "clothing", "Sleepwear", 10),

    # activewear and swimwear
    (r"\b(sports?\s*bra)s?\b", "clothing", "Activewear", 10),
    (r"\b(tracksuit|gym\s*wear|activewear|athleisure)s?\b", "clothing", "Activewear", 10),
    (r"\b(yoga\s*pant|workout)s?\b", "clothing", "Activewear", 9),
    (r"\b(swimsuit|swimwear|bikini|swim\s*trunk)s?\b", "clothing", "Swimwear", 10),

    # accessories
    (r"\b(watch|smartwatch)(es)?\b", "accessories", "Watches", 10),
    (r"\b(sunglass|eyeglass|spectacle|frame)(es|s)?\b", "accessories", "Eyewear", 10),
    (r"\b(belt)s?\b", "accessories", "Belts", 10),
    (r"\b(wallet|purse|cardholder)s?\b", "accessories", "Wallets", 10),
    (r"\b(scarf|scarves|muffler|stole)s?\b", "accessories", "Scarves", 10),
    (r"\b(hat|cap|beanie)s?\b", "accessories", "Hats", 10),
    (r"\b(glove)s?\b", "accessories", "Gloves", 10),
    (r"\b(tie|bow\s*tie|necktie)s?\b", "accessories", "Ties", 10),
    (r"\b(jewelry|jewellery|necklace|bracelet|ring|earring|bangle)s?\b", "accessories", "Jewelry", 10),
    (r"\b(sock)s?\b", "accessories", "Socks", 10),
    (r"\b(cufflink|lapel\s*pin)s?\b", "accessories", "Accessories", 10),

    # bags
    (r"\b(backpack|rucksack)s?\b", "bags", "Backpacks", 10),
    (r"\b(handbag|hand\s*bag|tote|clutch|satchel|hobo\s*bag)s?\b", "bags", "Handbags", 10),
    (r"\b(messenger\s*bag|crossbody|sling\s*bag)s?\b", "bags", "Messenger Bags", 10),
    (r"\b(duffel|duffle|gym\s*bag|sports\s*bag)s?\b", "bags", "Duffel Bags", 10),
    (r"\b(laptop\s*bag|briefcase|office\s*bag)s?\b", "bags", "Laptop Bags", 10),
    (r"\b(travel\s*bag|luggage|trolley|suitcase)s?\b", "bags", "Travel Bags", 10),
    (r"\b(bag)s?\b", "bags", None, 5),

    # gadgets
    (r"\b(fitness\s*band|fitness\s*tracker)s?\b", "gadgets", "Fitness Trackers", 10),
    (r"\b(earbuds?|headphones?|airpods?)\b", "gadgets", "Audio", 10),
]

FALLBACK_CATEGORY = "clothing"
FALLBACK_CONFIDENCE = 0.3
