from typing import Any, Dict, Iterable, Optional

import requests

from env import OPEN_FOOD_FACTS_COUNTRY, OPEN_FOOD_FACTS_PRIMARY_COUNTRY, OPEN_FOOD_FACTS_TIMEOUT
from logger_manager import log_info, log_warning, log_error

OPEN_FOOD_FACTS_URL = "https://{country}.openfoodfacts.org/api/v2/product/{barcode}.json"


class ProductLookupError(Exception):
    """Base class for lookup outcomes the scoring core does not interpret."""

    def __init__(self, barcode: str, message: str):
        super().__init__(message)
        self.barcode = barcode


class ProductNotFoundError(ProductLookupError):
    pass


class UpstreamServiceError(ProductLookupError):
    def __init__(self, barcode: str, message: str, status_code: Optional[int] = None):
        super().__init__(barcode, message)
        self.status_code = status_code


def product_url(barcode: str, country: str) -> str:
    return OPEN_FOOD_FACTS_URL.format(country=country or "world", barcode=barcode)


def fetch_product_from_country(barcode: str, country: str, timeout: int = OPEN_FOOD_FACTS_TIMEOUT) -> Dict[str, Any]:
    """Fetch the raw product object of one Open Food Facts country database."""
    url = product_url(barcode, country)
    log_info(f"Fetching {barcode} from {url}")
    try:
        response = requests.get(url, timeout=timeout)
    except requests.RequestException as e:
        raise UpstreamServiceError(barcode, f"Open Food Facts request failed: {e}") from e

    if response.status_code == 404:
        raise ProductNotFoundError(barcode, f"Product {barcode} not found in {country}")
    if response.status_code != 200:
        raise UpstreamServiceError(
            barcode,
            f"Open Food Facts returned HTTP {response.status_code} for {barcode}",
            status_code=response.status_code,
        )

    try:
        payload = response.json()
    except ValueError as e:
        raise UpstreamServiceError(barcode, f"Invalid JSON from Open Food Facts for {barcode}") from e

    if payload.get("status") != 1 or not payload.get("product"):
        raise ProductNotFoundError(barcode, f"Product {barcode} not found in {country}")
    return payload["product"]


def source_countries(primary: str = OPEN_FOOD_FACTS_PRIMARY_COUNTRY, fallback: str = OPEN_FOOD_FACTS_COUNTRY) -> list:
    countries = []
    for country in (primary, fallback, "world"):
        if country and country not in countries:
            countries.append(country)
    return countries


def fetch_product_data_from_api(barcode: str, countries: Optional[Iterable[str]] = None) -> Dict[str, Any]:
    """
    Try the region-specific database first and fall back to the configured
    one (then world). Raises ProductNotFoundError if no source has the product,
    UpstreamServiceError if the last failure was a transport problem.
    """
    last_error: Optional[ProductLookupError] = None
    for country in countries or source_countries():
        try:
            return fetch_product_from_country(barcode, country)
        except ProductNotFoundError as e:
            log_info(str(e))
            last_error = e
        except UpstreamServiceError as e:
            log_warning(f"Open Food Facts {country} failed for {barcode}: {e}")
            last_error = e

    if last_error is None:
        last_error = ProductNotFoundError(barcode, f"Product {barcode} not found")
    log_error(f"Lookup failed for {barcode}: {last_error}")
    raise last_error
