import os
from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()


# Environment variables for EcoScan-API
PORT = int(os.getenv("PORT", 8000))

# Open Food Facts source settings
# country subdomain used as the fallback source ("world" for the global database)
OPEN_FOOD_FACTS_COUNTRY = os.getenv("OPEN_FOOD_FACTS_COUNTRY", "world").lower()
# region-specific source tried before the fallback
OPEN_FOOD_FACTS_PRIMARY_COUNTRY = os.getenv("OPEN_FOOD_FACTS_PRIMARY_COUNTRY", "mx").lower()
OPEN_FOOD_FACTS_TIMEOUT = int(os.getenv("OPEN_FOOD_FACTS_TIMEOUT", 15))

# Home region used for locality and transport heuristics
# when the source country is "world" we fall back to mexico
HOME_REGION = os.getenv(
    "HOME_REGION",
    "mx" if OPEN_FOOD_FACTS_COUNTRY == "world" else OPEN_FOOD_FACTS_COUNTRY,
).lower()

# Product cache (scored products per barcode)
PRODUCT_CACHE_SIZE = int(os.getenv("PRODUCT_CACHE_SIZE", 256))
PRODUCT_CACHE_TTL = int(os.getenv("PRODUCT_CACHE_TTL", 3600))

# db url, sqlite file by default
DATABASE_URL = os.getenv("DATABASE_URL", "sqlite:///./eco_scan.db")

# logging
LOG_FILE = os.getenv("LOG_FILE", "eco_scan.log")
LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG").upper()
