import re
from typing import List, Sequence, Tuple

from interfaces.productModels import PackagingType
from logger_manager import log_debug
from utils.reference_tables import (
    DEFAULT_PACKAGING,
    PACKAGING_MATERIAL_SCORES,
    PACKAGING_TEXT_RULES,
    PRODUCT_PACKAGING_ARCHETYPES,
)
from utils.scores import clamp_score
from utils.text_matching import first_key_in, first_rule_match, normalize_tag

COMPOSITE_PACKAGING_PENALTY = 10

_COMPILED_TEXT_RULES = tuple(
    (re.compile(pattern), score, packaging_type)
    for pattern, score, packaging_type in PACKAGING_TEXT_RULES
)


def classify_packaging(
    material_tags: Sequence[str],
    packaging_text: str,
    product_name: str = "",
    brand: str = "",
    category: str = "",
) -> Tuple[int, PackagingType]:
    """
    Score the packaging of a product.

    Sources are tried in strict order and never blended:
    structured material tags, then the free-text packaging description,
    then keyword inference over name/brand/category.
    """
    if material_tags:
        result = classify_material_tags(material_tags)
        source = "materials"
    elif packaging_text and packaging_text.strip():
        result = classify_packaging_text(packaging_text)
        source = "text"
    else:
        result = infer_packaging_from_product(product_name, brand, category)
        source = "inference"

    log_debug(f"Packaging classified from {source}: score={result[0]} type={result[1].value}")
    return result


def classify_material_tags(material_tags: Sequence[str]) -> Tuple[int, PackagingType]:
    matched_scores: List[int] = []
    detected_types: List[PackagingType] = []

    for tag in material_tags:
        material_key = first_key_in(normalize_tag(tag), PACKAGING_MATERIAL_SCORES)
        if material_key is None:
            continue
        score, packaging_type = PACKAGING_MATERIAL_SCORES[material_key]
        matched_scores.append(score)
        detected_types.append(packaging_type)

    if not matched_scores:
        return DEFAULT_PACKAGING

    average_score = sum(matched_scores) // len(matched_scores)
    if len(set(detected_types)) > 2:
        average_score -= COMPOSITE_PACKAGING_PENALTY

    return clamp_score(average_score), predominant_type(detected_types)


def predominant_type(detected_types: Sequence[PackagingType]) -> PackagingType:
    """Most frequent type; on a tie the one detected first wins."""
    if not detected_types:
        return PackagingType.MIXED
    counts = {}
    for packaging_type in detected_types:
        counts[packaging_type] = counts.get(packaging_type, 0) + 1
    # dicts keep first-detected order and max() keeps the first maximum
    return max(counts, key=counts.get)


def classify_packaging_text(packaging_text: str) -> Tuple[int, PackagingType]:
    lower_text = packaging_text.lower()
    for pattern, score, packaging_type in _COMPILED_TEXT_RULES:
        if pattern.search(lower_text):
            return score, packaging_type
    return DEFAULT_PACKAGING


def infer_packaging_from_product(product_name: str, brand: str, category: str) -> Tuple[int, PackagingType]:
    text = f"{product_name or ''} {brand or ''} {category or ''}".lower()
    archetype = first_rule_match(text, PRODUCT_PACKAGING_ARCHETYPES)
    if archetype is None:
        return DEFAULT_PACKAGING
    _, score, packaging_type = archetype
    return score, packaging_type
