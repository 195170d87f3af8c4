ALLOWED_IMAGE_DOMAINS = [
    "myntra.com",
    "ajio.com",
    "amazon.in",
    "amazon.com",
    "flipkart.com",
    "hm.com",
    "zara.com",
    "assets.myntassets.com",
    "assets.ajio.com",
    "rukminim1.flixcart.com",
    "rukminim2.flixcart.com",
    "m.media-amazon.com",
    "images-na.ssl-images-amazon.com",
    "lp2.hm.com",
    "static.zara.net",
]
