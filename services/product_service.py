from threading import Lock
from typing import Callable, Dict, List, Optional

from cachetools import TTLCache

from env import HOME_REGION, OPEN_FOOD_FACTS_PRIMARY_COUNTRY, PRODUCT_CACHE_SIZE, PRODUCT_CACHE_TTL
from interfaces.productModels import Product
from logger_manager import log_info
from services.product_normalizer import build_product
from utils.demo_products import DEMO_PRODUCTS
from utils.fetch_data import fetch_product_data_from_api
from utils.reference_tables import SUPPORTED_COUNTRIES


class ProductService:
    """
    Looks products up by barcode: cache, then demo seed data, then
    Open Food Facts. Each barcode is scored at most once per cache lifetime.
    """

    def __init__(
        self,
        home_region: str = HOME_REGION,
        fetcher: Callable[[str], Dict] = fetch_product_data_from_api,
        cache: Optional[TTLCache] = None,
    ):
        self.home_region = home_region
        self.fetcher = fetcher
        self.cache = cache if cache is not None else TTLCache(maxsize=PRODUCT_CACHE_SIZE, ttl=PRODUCT_CACHE_TTL)
        self._lock = Lock()

    def get_product(self, barcode: str) -> Product:
        barcode = barcode.strip()
        log_info(f"Searching for product: {barcode}")

        with self._lock:
            cached_product = self.cache.get(barcode)
        if cached_product is not None:
            log_info(f"Product found in cache: {cached_product.name}")
            return cached_product

        demo_product = DEMO_PRODUCTS.get(barcode)
        if demo_product is not None:
            log_info(f"Demo product found: {demo_product.name}")
            self._remember(barcode, demo_product)
            return demo_product

        # raises ProductNotFoundError / UpstreamServiceError
        raw_product = self.fetcher(barcode)
        product = build_product(raw_product, self.home_region)
        log_info(f"Product found in Open Food Facts: {product.name}")
        self._remember(barcode, product)
        return product

    def score_raw_product(self, raw_product: Dict, home_region: Optional[str] = None) -> Product:
        return build_product(raw_product, home_region or self.home_region)

    def _remember(self, barcode: str, product: Product):
        with self._lock:
            self.cache[barcode] = product

    def clear_cache(self):
        with self._lock:
            self.cache.clear()
        log_info("Cache cleared")

    def cache_info(self) -> str:
        with self._lock:
            cached = len(self.cache)
        return f"Cached products: {cached}"


def available_countries(primary: str = OPEN_FOOD_FACTS_PRIMARY_COUNTRY) -> List[Dict[str, str]]:
    """Supported Open Food Facts countries, primary region first then by name."""
    countries = sorted(SUPPORTED_COUNTRIES.items(), key=lambda item: (item[0] != primary, item[1]))
    return [{"code": code, "name": name} for code, name in countries]
