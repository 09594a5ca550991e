from typing import List

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from db.database import get_db
from interfaces.historyModels import ImpactMetrics, ScanHistorySnapshot, ScanRequest
from logger_manager import log_info, log_error
from routers.product import get_product_service
from services.product_service import ProductService
from services.scan_history import clear_scan_history, freeze, get_scan_history, record_scan, summarize_impact
from utils.fetch_data import ProductNotFoundError, UpstreamServiceError

router = APIRouter()


@router.post("/scan", response_model=ScanHistorySnapshot, status_code=status.HTTP_201_CREATED)
def create_scan(
    scan: ScanRequest,
    db: Session = Depends(get_db),
    service: ProductService = Depends(get_product_service),
):
    log_info("Create scan endpoint called")
    try:
        product = service.get_product(scan.barcode)
    except ProductNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    except UpstreamServiceError as e:
        log_error(f"Upstream error in create_scan endpoint: {str(e)}")
        raise HTTPException(status_code=status.HTTP_502_BAD_GATEWAY, detail=str(e))

    snapshot = freeze(product, scan.decision)
    return record_scan(db, snapshot)


@router.get("/scan", response_model=List[ScanHistorySnapshot])
def read_scan_history(db: Session = Depends(get_db)):
    log_info("Read scan history endpoint called")
    return get_scan_history(db)


@router.delete("/scan")
def reset_scan_history(
    db: Session = Depends(get_db),
    service: ProductService = Depends(get_product_service),
):
    """Reset all data: scan history, the impact metrics derived from it, and the product cache."""
    log_info("Reset scan history endpoint called")
    deleted = clear_scan_history(db)
    service.clear_cache()
    return {"message": "All data cleared", "deletedScans": deleted}


@router.get("/impact", response_model=ImpactMetrics)
def read_impact_metrics(db: Session = Depends(get_db)):
    log_info("Read impact metrics endpoint called")
    return summarize_impact(get_scan_history(db))
