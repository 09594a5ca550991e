"""
Static domain knowledge used by the eco-scoring engine.

Every table is read-only (MappingProxyType or tuple) and is iterated in
declaration order, so "first match" always means first as written here.
"""
from types import MappingProxyType

from interfaces.productModels import PackagingType


# kg CO2-equivalent per kg of product, by category keyword
CARBON_FOOTPRINT_BY_CATEGORY = MappingProxyType({
    "beef": 27.0,
    "lamb": 24.0,
    "cheese": 13.5,
    "pork": 12.1,
    "poultry": 6.9,
    "fish": 6.1,
    "eggs": 4.8,
    "dairy": 3.2,
    "butter": 9.0,
    "vegetables": 0.5,
    "fruits": 0.5,
    "legumes": 0.9,
    "grains": 1.5,
    "bread": 1.4,
    "processed": 2.5,
    "snacks": 3.2,
    "chocolate": 19.0,
    "coffee": 17.0,
    "sugarcane": 1.2,
    "water": 0.3,
    "soda": 0.8,
    "juice": 1.2,
    "beer": 1.0,
    "wine": 1.8,
})

# packaging material keyword -> (score, packaging type)
PACKAGING_MATERIAL_SCORES = MappingProxyType({
    "glass": (90, PackagingType.REUSABLE),
    "aluminum": (85, PackagingType.RECYCLABLE),
    "aluminium": (85, PackagingType.RECYCLABLE),
    "metal": (85, PackagingType.RECYCLABLE),
    "paper": (80, PackagingType.RECYCLABLE),
    "cardboard": (80, PackagingType.RECYCLABLE),
    "pet": (70, PackagingType.RECYCLABLE),
    "hdpe": (65, PackagingType.RECYCLABLE),
    "pp": (60, PackagingType.RECYCLABLE),
    "ps": (40, PackagingType.NON_RECYCLABLE),
    "pvc": (20, PackagingType.NON_RECYCLABLE),
    "mixed": (50, PackagingType.MIXED),
    "compostable": (85, PackagingType.COMPOSTABLE),
    "biodegradable": (75, PackagingType.COMPOSTABLE),
})

# free-text packaging rules, most specific phrasing first
# (regex pattern, score, packaging type)
PACKAGING_TEXT_RULES = (
    (r"100% recyclable|fully recyclable", 85, PackagingType.RECYCLABLE),
    (r"non-recyclable|not recyclable", 30, PackagingType.NON_RECYCLABLE),
    (r"plastic.*recyclable", 65, PackagingType.RECYCLABLE),
    (r"recyclable", 75, PackagingType.RECYCLABLE),
    (r"compostable|biodegradable", 80, PackagingType.COMPOSTABLE),
    (r"reusable|refillable|returnable", 90, PackagingType.REUSABLE),
    (r"glass|bottle made of glass", 88, PackagingType.REUSABLE),
    (r"aluminum|aluminium|tin can", 82, PackagingType.RECYCLABLE),
    (r"tetra pak|carton", 70, PackagingType.MIXED),
    (r"mixed materials|multi-material", 50, PackagingType.MIXED),
    (r"plastic.*film|plastic.*bag", 25, PackagingType.NON_RECYCLABLE),
)

# product archetypes used when no packaging data exists at all
# (keywords, score, packaging type)
PRODUCT_PACKAGING_ARCHETYPES = (
    (("maruchan", "cup noodle", "instant soup"), 20, PackagingType.NON_RECYCLABLE),
    (("sabritas", "doritos", "cheetos", "ruffles", "chips"), 15, PackagingType.NON_RECYCLABLE),
    (("coca-cola", "pepsi", "soda can", "beer can"), 85, PackagingType.RECYCLABLE),
    (("glass bottle", "beer bottle", "wine bottle"), 90, PackagingType.REUSABLE),
    (("water bottle", "pet bottle"), 70, PackagingType.RECYCLABLE),
    (("milk carton", "juice carton", "tetra pak"), 65, PackagingType.MIXED),
    (("yogurt", "yoghurt"), 40, PackagingType.MIXED),
    (("cereal box",), 60, PackagingType.RECYCLABLE),
    (("cookies", "chocolate bar", "candy"), 30, PackagingType.NON_RECYCLABLE),
)

# neutral result for anything we cannot classify
DEFAULT_PACKAGING = (50, PackagingType.MIXED)

# certification label keyword -> (ethics weight, display name, description)
CERTIFICATION_WEIGHTS = MappingProxyType({
    "organic": (20, "Organic", "No pesticides, sustainable farming"),
    "fair-trade": (18, "Fair Trade", "Fair wages, ethical sourcing"),
    "rainforest-alliance": (15, "Rainforest Alliance", "Biodiversity protection"),
    "carbon-neutral": (15, "Carbon Neutral", "Net-zero carbon emissions"),
    "b-corp": (12, "B Corp", "Social and environmental performance"),
    "vegan": (10, "Vegan", "No animal products"),
    "non-gmo": (8, "Non-GMO", "No genetically modified organisms"),
    "gluten-free": (5, "Gluten Free", "Suitable for celiacs"),
    "halal": (3, "Halal", "Prepared according to Islamic law"),
    "kosher": (3, "Kosher", "Prepared according to Jewish law"),
    "local": (0, "Local Product", "Produced locally, reducing transportation emissions"),
})

LOCAL_CERTIFICATION_ID = "local"

# carbon-specific labels, summed then capped
CARBON_LABEL_BONUSES = MappingProxyType({
    "carbon-neutral": 15,
    "climate-neutral": 10,
    "renewable-energy": 8,
})
CARBON_LABEL_BONUS_CAP = 15

# eco-labels worth a flat bonus on the headline score (exact tag match)
ECO_LABELS = ("organic", "fair-trade", "rainforest-alliance", "carbon-neutral", "vegan", "cruelty-free")
ECO_LABEL_BONUS = 3

ECO_SCORE_WEIGHTS = MappingProxyType({
    "carbon": 40,
    "packaging": 35,
    "ethics": 25,
})
LOCAL_BONUS = 5

NUTRITION_GRADE_BONUS = MappingProxyType({
    "a": 8,
    "b": 4,
    "c": 0,
    "d": -4,
    "e": -8,
})

# ethics score by country of origin (0-100)
ETHICAL_COUNTRY_SCORES = MappingProxyType({
    "switzerland": 90,
    "norway": 88,
    "denmark": 87,
    "sweden": 86,
    "finland": 85,
    "germany": 82,
    "netherlands": 80,
    "austria": 78,
    "belgium": 77,
    "canada": 75,
    "australia": 74,
    "new zealand": 73,
    "united kingdom": 72,
    "france": 70,
    "mexico": 60,
    "united states": 65,
    "spain": 68,
    "italy": 67,
    "japan": 75,
    "south korea": 70,
})
COUNTRY_ETHICS_BASELINE = 65

# ingredient keyword -> penalty
CONTROVERSIAL_INGREDIENTS = MappingProxyType({
    "palm oil": -15,
    "high fructose corn syrup": -10,
    "artificial colors": -8,
    "artificial flavors": -6,
    "preservatives": -5,
    "trans fats": -12,
    "monosodium glutamate": -4,
})
INGREDIENT_PENALTY_FLOOR = -15

ETHICAL_BRANDS = MappingProxyType({
    "patagonia": 10,
    "ben & jerry": 8,
    "seventh generation": 9,
    "tom's": 7,
    "the body shop": 6,
})

UNETHICAL_BRANDS = MappingProxyType({
    "nestlé": -10,
    "nestle": -10,
    "coca-cola": -8,
    "pepsi": -7,
    "monsanto": -15,
    "philip morris": -12,
})

# transport tiers after the home region check, first match wins
# (country keywords, adjustment)
TRANSPORT_TIERS = (
    (("usa", "united states", "canada"), 5),
    (("spain", "france", "germany"), 0),
    (("china", "brazil"), -5),
)
LOCAL_TRANSPORT_BONUS = 15
DISTANT_TRANSPORT_PENALTY = -10

# processing level keywords on the category text, first match wins
PROCESSING_IMPACT = (
    (("fresh", "raw"), 10),
    (("frozen",), 0),
    (("canned",), -5),
    (("processed", "ultra-processed"), -10),
)

UNKNOWN_CATEGORY_PENALTY = -10

PACKAGING_CARBON_IMPACT = MappingProxyType({
    PackagingType.REUSABLE: 10,
    PackagingType.COMPOSTABLE: 8,
    PackagingType.RECYCLABLE: 5,
    PackagingType.MIXED: -5,
    PackagingType.NON_RECYCLABLE: -10,
})

# material keywords that make a packaging component recyclable
RECYCLABLE_MATERIAL_KEYWORDS = ("glass", "aluminum", "aluminium", "metal", "paper", "cardboard", "pet", "hdpe", "pp")

# fallback composition per packaging type: (name, percentage, recyclable)
DEFAULT_MATERIAL_COMPOSITIONS = MappingProxyType({
    PackagingType.REUSABLE: (
        ("Glass", 100.0, True),
    ),
    PackagingType.RECYCLABLE: (
        ("PET Plastic", 60.0, True),
        ("Aluminum", 30.0, True),
        ("Paper", 10.0, True),
    ),
    PackagingType.COMPOSTABLE: (
        ("Plant-based Materials", 100.0, False),
    ),
    PackagingType.MIXED: (
        ("Mixed Plastics", 50.0, False),
        ("Cardboard", 30.0, True),
        ("Aluminum Foil", 20.0, False),
    ),
    PackagingType.NON_RECYCLABLE: (
        ("Multi-layer Plastic", 100.0, False),
    ),
})

# home region code -> names that count as that region in country/origin text
REGION_ALIASES = MappingProxyType({
    "mx": ("mx", "mexico", "méxico"),
    "us": ("us", "usa", "united states"),
    "es": ("es", "spain", "españa"),
    "fr": ("fr", "france"),
    "de": ("de", "germany", "deutschland"),
    "uk": ("uk", "united kingdom"),
    "it": ("it", "italy", "italia"),
    "ca": ("ca", "canada"),
    "br": ("br", "brazil", "brasil"),
    "jp": ("jp", "japan"),
    "in": ("in", "india"),
    "au": ("au", "australia"),
})

# Open Food Facts country subdomains offered to the user
SUPPORTED_COUNTRIES = MappingProxyType({
    "world": "World (International)",
    "mx": "Mexico",
    "us": "United States",
    "es": "Spain",
    "fr": "France",
    "de": "Germany",
    "uk": "United Kingdom",
    "it": "Italy",
    "ca": "Canada",
    "br": "Brazil",
    "jp": "Japan",
    "in": "India",
    "au": "Australia",
})
