import uuid
from datetime import datetime, timedelta
from enum import Enum
from typing import Optional, Tuple

import pytz
from pydantic import BaseModel, ConfigDict, Field, field_serializer, field_validator
from pydantic.alias_generators import to_camel

from interfaces.productModels import Certification, Material, PackagingType

# history records store dates as seconds since this reference date
REFERENCE_DATE = datetime(2001, 1, 1, tzinfo=pytz.utc)


class UserDecision(str, Enum):
    PURCHASED = "Purchased"
    AVOIDED = "Avoided"
    ALTERNATIVE = "Found Alternative"
    UNDECIDED = "Undecided"


class ScanHistorySnapshot(BaseModel):
    """
    Point-in-time copy of a product's scores plus the user's decision.

    This is the durable history record: field names, enum strings, the
    uppercase UUID and the reference-date timestamp must not change.
    """
    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)

    id: uuid.UUID = Field(default_factory=uuid.uuid4)
    product_id: str
    product_name: str
    brand: Optional[str] = None
    category: Optional[str] = None
    image_url: Optional[str] = None
    eco_score: int = Field(..., ge=0, le=100)
    packaging_score: int = Field(50, ge=0, le=100)
    carbon_score: int = Field(50, ge=0, le=100)
    ethics_score: int = Field(50, ge=0, le=100)
    scan_date: datetime
    decision: UserDecision
    packaging_type: PackagingType = PackagingType.MIXED
    certifications: Tuple[Certification, ...] = ()
    materials: Tuple[Material, ...] = ()
    is_local: bool = False

    @field_validator("scan_date", mode="before")
    @classmethod
    def parse_scan_date(cls, value):
        if isinstance(value, (int, float)) and not isinstance(value, bool):
            return REFERENCE_DATE + timedelta(seconds=value)
        return value

    @field_validator("scan_date")
    @classmethod
    def ensure_utc(cls, value: datetime) -> datetime:
        if value.tzinfo is None:
            return pytz.utc.localize(value)
        return value.astimezone(pytz.utc)

    @field_serializer("scan_date")
    def serialize_scan_date(self, value: datetime) -> float:
        return (value - REFERENCE_DATE).total_seconds()

    @field_serializer("id")
    def serialize_id(self, value: uuid.UUID) -> str:
        return str(value).upper()


class ScanRequest(BaseModel):
    barcode: str = Field(..., min_length=1, max_length=64)
    decision: UserDecision


class ImpactMetrics(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    co2_saved: float = 0.0
    plastic_saved: float = 0.0
    total_scans: int = 0
    good_decisions: int = 0
