import uuid
from datetime import datetime
from typing import Iterable, List, Optional

import pytz
from fastapi import HTTPException
from sqlalchemy.orm import Session

from db.models import ScanHistory
from interfaces.historyModels import ImpactMetrics, ScanHistorySnapshot, UserDecision
from interfaces.productModels import Product
from logger_manager import log_info, log_error

LOW_ECO_SCORE = 50
HIGH_ECO_SCORE = 70


def freeze(
    product: Product,
    decision: UserDecision,
    scan_date: Optional[datetime] = None,
    snapshot_id: Optional[uuid.UUID] = None,
) -> ScanHistorySnapshot:
    """
    Copy a product's identity and scores by value into a history snapshot,
    so later changes to scoring never rewrite past decisions.
    """
    return ScanHistorySnapshot(
        id=snapshot_id or uuid.uuid4(),
        product_id=product.id,
        product_name=product.name,
        brand=product.brand,
        category=product.category,
        image_url=product.image_url,
        eco_score=product.eco_score,
        packaging_score=product.packaging_score,
        carbon_score=product.carbon_score,
        ethics_score=product.ethics_score,
        scan_date=scan_date or datetime.now(tz=pytz.utc),
        decision=UserDecision(decision),
        packaging_type=product.packaging_type,
        certifications=tuple(certification.model_copy() for certification in product.certifications),
        materials=tuple(material.model_copy() for material in product.materials),
        is_local=product.is_local,
    )


def record_scan(db: Session, snapshot: ScanHistorySnapshot) -> ScanHistorySnapshot:
    log_info(f"Recording scan of product {snapshot.product_id} ({snapshot.decision.value})")
    try:
        scan_entry = ScanHistory(
            snapshot_id=str(snapshot.id).upper(),
            product_id=snapshot.product_id,
            product_name=snapshot.product_name,
            eco_score=snapshot.eco_score,
            decision=snapshot.decision.value,
            is_local=snapshot.is_local,
            scan_date=snapshot.scan_date,
            payload=snapshot.model_dump(mode="json", by_alias=True),
        )
        db.add(scan_entry)
        db.commit()
        db.refresh(scan_entry)
        log_info("Scan recorded successfully")
        return snapshot
    except Exception as e:
        db.rollback()
        log_error(f"Error recording scan: {str(e)}", e)
        raise HTTPException(status_code=500, detail="Internal Server Error")


def get_scan_history(db: Session) -> List[ScanHistorySnapshot]:
    log_info("Getting scan history")
    try:
        scan_history = db.query(ScanHistory)\
            .order_by(ScanHistory.scan_date.desc())\
            .all()
        snapshots = [ScanHistorySnapshot.model_validate(entry.payload) for entry in scan_history]
        log_info(f"Scan history retrieved successfully ({len(snapshots)} scans)")
        return snapshots
    except Exception as e:
        log_error(f"Error getting scan history: {str(e)}", e)
        raise HTTPException(status_code=500, detail="Internal Server Error")


def clear_scan_history(db: Session) -> int:
    """Delete every recorded scan; impact metrics are derived, so they reset too."""
    log_info("Clearing scan history")
    try:
        deleted = db.query(ScanHistory).delete()
        db.commit()
        log_info(f"Scan history cleared ({deleted} scans)")
        return deleted
    except Exception as e:
        db.rollback()
        log_error(f"Error clearing scan history: {str(e)}", e)
        raise HTTPException(status_code=500, detail="Internal Server Error")


def summarize_impact(history: Iterable[ScanHistorySnapshot]) -> ImpactMetrics:
    """Replay decisions into CO2 (kg) and plastic (kg) saved."""
    co2_saved = 0.0
    plastic_saved = 0.0
    total_scans = 0
    good_decisions = 0

    for snapshot in history:
        total_scans += 1
        if snapshot.decision in (UserDecision.AVOIDED, UserDecision.ALTERNATIVE):
            if snapshot.eco_score < LOW_ECO_SCORE:
                co2_saved += 1.0
                plastic_saved += 0.2
            else:
                co2_saved += 0.5
                plastic_saved += 0.1
            good_decisions += 1
        elif snapshot.decision == UserDecision.PURCHASED and snapshot.eco_score >= HIGH_ECO_SCORE:
            co2_saved += 0.3
            plastic_saved += 0.05
            good_decisions += 1

    return ImpactMetrics(
        co2_saved=round(co2_saved, 2),
        plastic_saved=round(plastic_saved, 2),
        total_scans=total_scans,
        good_decisions=good_decisions,
    )
