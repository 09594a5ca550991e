from typing import Any, Dict, List, Optional

from fastapi import APIRouter, Body, Depends, HTTPException, Query

from env import HOME_REGION
from interfaces.productModels import Product
from logger_manager import log_info, log_error
from services.product_service import ProductService, available_countries
from utils.fetch_data import ProductNotFoundError, UpstreamServiceError

router = APIRouter()

product_service = ProductService(home_region=HOME_REGION)


def get_product_service() -> ProductService:
    return product_service


@router.get("/countries")
def list_countries() -> List[Dict[str, str]]:
    return available_countries()


@router.delete("/cache")
def clear_product_cache(service: ProductService = Depends(get_product_service)):
    service.clear_cache()
    return {"message": "Cache cleared"}


@router.post("/score", response_model=Product)
def score_product(
    raw_product: Dict[str, Any] = Body(...),
    home_region: Optional[str] = Query(None, min_length=2, max_length=8),
    service: ProductService = Depends(get_product_service),
):
    """Score a raw Open Food Facts product object without any lookup."""
    log_info("Score product endpoint called")
    # accept both the bare product object and the full API response
    if isinstance(raw_product.get("product"), dict):
        raw_product = raw_product["product"]
    try:
        return service.score_raw_product(raw_product, home_region)
    except Exception as e:
        log_error(f"Error scoring product: {str(e)}", e)
        raise HTTPException(status_code=500, detail="Internal Server Error")


@router.get("/{barcode}", response_model=Product)
def get_product(barcode: str, service: ProductService = Depends(get_product_service)):
    log_info(f"Get product endpoint called for {barcode}")
    try:
        return service.get_product(barcode)
    except ProductNotFoundError as e:
        log_info(f"Product not found: {barcode}")
        raise HTTPException(status_code=404, detail=str(e))
    except UpstreamServiceError as e:
        log_error(f"Upstream error for {barcode}: {str(e)}")
        raise HTTPException(status_code=502, detail=str(e))
    except Exception as e:
        log_error(f"Error in get_product endpoint: {str(e)}", e)
        raise HTTPException(status_code=500, detail="Internal Server Error")
