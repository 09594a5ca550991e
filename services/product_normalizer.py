"""
Turns a raw Open Food Facts record into a scored, immutable Product.

The pipeline is pure: the same raw record and home region always give the
same Product, so results can be cached and snapshotted safely.
"""
import json
import uuid
from typing import Any, Dict, Optional, Union

from interfaces.productModels import Product, RawExternalProduct, ResolvedProduct
from logger_manager import log_debug
from services.carbon_score import calculate_carbon_score
from services.eco_score import calculate_eco_score
from services.ethics_score import calculate_ethics_score
from services.extractors import extract_certifications, extract_materials
from services.packaging_classifier import classify_packaging
from utils.scores import clamp_score
from utils.text_matching import mentions_region, normalize_place_text

DEFAULT_PRODUCT_NAME = "Product"
DEFAULT_CATEGORY = "General"
# namespace for ids of records that arrive without a barcode
GENERATED_ID_NAMESPACE = uuid.UUID("6f1c8a8e-3f5e-4d7a-9a52-2f0f7b8f4c11")

RawInput = Union[RawExternalProduct, Dict[str, Any], None]


def to_raw_product(raw: RawInput) -> RawExternalProduct:
    if raw is None:
        return RawExternalProduct()
    if isinstance(raw, RawExternalProduct):
        return raw
    return RawExternalProduct.model_validate(raw)


def generated_product_id(raw: RawExternalProduct) -> str:
    """Stable id derived from the record content, so re-scoring gives the same id."""
    canonical = json.dumps(raw.model_dump(mode="json"), sort_keys=True, ensure_ascii=False)
    return str(uuid.uuid5(GENERATED_ID_NAMESPACE, canonical)).upper()


def first_category(categories: Optional[str]) -> Optional[str]:
    if not categories:
        return None
    first = categories.split(",")[0].strip()
    return first or None


def display_name(raw: RawExternalProduct) -> str:
    category = first_category(raw.categories)
    if raw.product_name:
        return raw.product_name
    if raw.brands and category:
        return f"{raw.brands} {category}"
    return raw.brands or category or DEFAULT_PRODUCT_NAME


def is_local_product(raw: RawExternalProduct, home_region: str) -> bool:
    return any(
        mentions_region(place, home_region)
        for place in (raw.countries, raw.manufacturing_places, raw.origins)
    )


def resolve_product(raw: RawInput, home_region: str) -> ResolvedProduct:
    """Apply every documented default once so scoring never handles absence."""
    raw = to_raw_product(raw)

    nutrition_grade = (raw.nutriscore_grade or "").strip().lower() or None
    authoritative = raw.ecoscore_score
    if authoritative is not None:
        authoritative = clamp_score(authoritative)

    return ResolvedProduct(
        barcode=raw.code or generated_product_id(raw),
        display_name=display_name(raw),
        brand=raw.brands,
        category=first_category(raw.categories) or DEFAULT_CATEGORY,
        image_url=raw.image_front_url or raw.image_url,
        product_name_text=(raw.product_name or "").lower(),
        brand_text=(raw.brands or "").lower(),
        categories_text=(raw.categories or "").lower(),
        countries=normalize_place_text(raw.countries),
        ingredients_text=(raw.ingredients_text or "").lower(),
        packaging_text=raw.packaging_text or "",
        material_tags=tuple(raw.packaging_materials_tags),
        labels=tuple(label.lower() for label in raw.labels_tags),
        authoritative_eco_score=authoritative,
        nutrition_grade=nutrition_grade,
        home_region=(home_region or "").strip().lower(),
        is_local=is_local_product(raw, home_region),
    )


def score_resolved_product(resolved: ResolvedProduct) -> Product:
    packaging_score, packaging_type = classify_packaging(
        resolved.material_tags,
        resolved.packaging_text,
        resolved.product_name_text,
        resolved.brand_text,
        resolved.categories_text,
    )
    carbon_score = calculate_carbon_score(
        resolved.categories_text,
        resolved.countries,
        resolved.home_region,
        resolved.labels,
        packaging_type,
        is_local=resolved.is_local,
    )
    ethics_score = calculate_ethics_score(
        resolved.labels,
        resolved.countries,
        resolved.ingredients_text,
        resolved.brand_text,
    )
    eco_score = calculate_eco_score(
        resolved.authoritative_eco_score,
        carbon_score,
        packaging_score,
        ethics_score,
        is_local=resolved.is_local,
        nutrition_grade=resolved.nutrition_grade,
        labels=resolved.labels,
    )

    return Product(
        id=resolved.barcode,
        name=resolved.display_name,
        brand=resolved.brand,
        category=resolved.category,
        image_url=resolved.image_url,
        eco_score=eco_score,
        packaging_score=packaging_score,
        carbon_score=carbon_score,
        ethics_score=ethics_score,
        packaging_type=packaging_type,
        certifications=extract_certifications(resolved.labels, resolved.is_local),
        materials=extract_materials(resolved.material_tags, packaging_type),
        is_local=resolved.is_local,
    )


def build_product(raw: RawInput, home_region: str) -> Product:
    resolved = resolve_product(raw, home_region)
    log_debug(f"Scoring product {resolved.barcode} ({resolved.display_name}) for region {resolved.home_region}")
    product = score_resolved_product(resolved)
    log_debug(
        f"Product {product.id} scored eco={product.eco_score} packaging={product.packaging_score} "
        f"carbon={product.carbon_score} ethics={product.ethics_score}"
    )
    return product
