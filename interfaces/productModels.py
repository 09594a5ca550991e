from enum import Enum
from typing import Any, List, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel


class PackagingType(str, Enum):
    RECYCLABLE = "Recyclable"
    COMPOSTABLE = "Compostable"
    REUSABLE = "Reusable"
    NON_RECYCLABLE = "Non-Recyclable"
    MIXED = "Mixed Materials"


# camelCase on the wire, snake_case in python, immutable once built
ENTITY_CONFIG = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)


class Certification(BaseModel):
    model_config = ENTITY_CONFIG

    id: str
    name: str
    description: str


class Material(BaseModel):
    model_config = ENTITY_CONFIG

    name: str
    percentage: float
    is_recyclable: bool


class Product(BaseModel):
    """Scored product, built once from a raw record and never mutated."""
    model_config = ENTITY_CONFIG

    id: str
    name: str
    brand: Optional[str] = None
    category: str
    image_url: Optional[str] = None

    eco_score: int = Field(..., ge=0, le=100)
    packaging_score: int = Field(..., ge=0, le=100)
    carbon_score: int = Field(..., ge=0, le=100)
    ethics_score: int = Field(..., ge=0, le=100)

    packaging_type: PackagingType
    certifications: Tuple[Certification, ...] = ()
    materials: Tuple[Material, ...] = Field(..., min_length=1)
    is_local: bool = False

    @field_validator("certifications")
    @classmethod
    def unique_certification_ids(cls, value):
        ids = [certification.id for certification in value]
        if len(ids) != len(set(ids)):
            raise ValueError(f"duplicate certification ids: {ids}")
        return value


def _as_text(value: Any) -> Optional[str]:
    if value is None:
        return None
    if isinstance(value, (list, tuple)):
        value = ", ".join(str(item) for item in value if item is not None)
    text = str(value).strip()
    return text or None


def _as_tag_list(value: Any) -> List[str]:
    if value is None:
        return []
    if isinstance(value, str):
        value = value.split(",")
    elif not isinstance(value, (list, tuple, set)):
        return []
    return [str(item).strip() for item in value if item is not None and str(item).strip()]


class RawExternalProduct(BaseModel):
    """
    Product record as delivered by Open Food Facts (the "product" object of
    /api/v2/product/{barcode}.json). Every field is optional and malformed
    values are coerced or dropped instead of failing validation.
    """
    model_config = ConfigDict(extra="ignore")

    code: Optional[str] = None
    product_name: Optional[str] = None
    brands: Optional[str] = None
    categories: Optional[str] = None
    image_url: Optional[str] = None
    image_front_url: Optional[str] = None
    image_small_url: Optional[str] = None

    ecoscore_score: Optional[int] = None
    ecoscore_grade: Optional[str] = None
    nutriscore_grade: Optional[str] = None

    packaging_materials_tags: List[str] = Field(default_factory=list)
    packaging_text: Optional[str] = None
    ingredients_text: Optional[str] = None
    labels_tags: List[str] = Field(default_factory=list)

    countries: Optional[str] = None
    manufacturing_places: Optional[str] = None
    origins: Optional[str] = None

    @field_validator(
        "code", "product_name", "brands", "categories", "image_url", "image_front_url",
        "image_small_url", "ecoscore_grade", "nutriscore_grade", "packaging_text",
        "ingredients_text", "countries", "manufacturing_places", "origins",
        mode="before",
    )
    @classmethod
    def coerce_text(cls, value):
        return _as_text(value)

    @field_validator("packaging_materials_tags", "labels_tags", mode="before")
    @classmethod
    def coerce_tags(cls, value):
        return _as_tag_list(value)

    @field_validator("ecoscore_score", mode="before")
    @classmethod
    def coerce_score(cls, value):
        if value is None or isinstance(value, bool):
            return None
        try:
            return int(float(value))
        except (TypeError, ValueError, OverflowError):
            return None


class ResolvedProduct(BaseModel):
    """
    RawExternalProduct with every default applied once. Text used for keyword
    lookups is already lowercased and normalized, so scoring functions never
    deal with absence.
    """
    model_config = ConfigDict(frozen=True)

    barcode: str
    display_name: str
    brand: Optional[str]
    category: str
    image_url: Optional[str]

    product_name_text: str = ""
    brand_text: str = ""
    categories_text: str = ""
    countries: str = ""
    ingredients_text: str = ""
    packaging_text: str = ""
    material_tags: Tuple[str, ...] = ()
    labels: Tuple[str, ...] = ()

    authoritative_eco_score: Optional[int] = None
    nutrition_grade: Optional[str] = None

    home_region: str
    is_local: bool = False
