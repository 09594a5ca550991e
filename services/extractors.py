from typing import Dict, List, Sequence, Tuple

from interfaces.productModels import Certification, Material, PackagingType
from utils.reference_tables import (
    CERTIFICATION_WEIGHTS,
    DEFAULT_MATERIAL_COMPOSITIONS,
    LOCAL_CERTIFICATION_ID,
    RECYCLABLE_MATERIAL_KEYWORDS,
)
from utils.text_matching import contains_any, first_key_in, strip_locale_prefix


def extract_certifications(labels: Sequence[str], is_local: bool) -> Tuple[Certification, ...]:
    """
    One Certification per distinct matched table entry, in label order.
    Local products get the local certification appended when the labels
    did not already provide it.
    """
    certifications: List[Certification] = []
    seen = set()
    for label in labels:
        certification_key = first_key_in(label.lower(), CERTIFICATION_WEIGHTS)
        if certification_key is None or certification_key in seen:
            continue
        if certification_key == LOCAL_CERTIFICATION_ID and not is_local:
            continue
        seen.add(certification_key)
        certifications.append(_certification(certification_key))

    if is_local and LOCAL_CERTIFICATION_ID not in seen:
        certifications.append(_certification(LOCAL_CERTIFICATION_ID))

    return tuple(certifications)


def _certification(certification_key: str) -> Certification:
    _, name, description = CERTIFICATION_WEIGHTS[certification_key]
    return Certification(id=certification_key, name=name, description=description)


def extract_materials(material_tags: Sequence[str], packaging_type: PackagingType) -> Tuple[Material, ...]:
    if material_tags:
        materials = materials_from_tags(material_tags)
        if materials:
            return materials
    return default_materials(packaging_type)


def material_display_name(tag: str) -> str:
    """Display name for a material tag, e.g. en:pet-bottle -> Pet Bottle."""
    cleaned = strip_locale_prefix(tag).replace("-", " ").replace("_", " ")
    return " ".join(cleaned.split()).title()


def is_recyclable_material(name: str) -> bool:
    return contains_any(name.lower(), RECYCLABLE_MATERIAL_KEYWORDS)


def materials_from_tags(material_tags: Sequence[str]) -> Tuple[Material, ...]:
    """
    Group tags by display name and share 100% by tag count (not weight),
    largest share first, ties kept in first-seen order.
    """
    counts: Dict[str, int] = {}
    for tag in material_tags:
        name = material_display_name(tag)
        if name:
            counts[name] = counts.get(name, 0) + 1

    total = sum(counts.values())
    if not total:
        return ()

    materials = [
        Material(name=name, percentage=count / total * 100, is_recyclable=is_recyclable_material(name))
        for name, count in counts.items()
    ]
    materials.sort(key=lambda material: material.percentage, reverse=True)
    return tuple(materials)


def default_materials(packaging_type: PackagingType) -> Tuple[Material, ...]:
    composition = sorted(DEFAULT_MATERIAL_COMPOSITIONS[packaging_type], key=lambda entry: entry[1], reverse=True)
    return tuple(
        Material(name=name, percentage=percentage, is_recyclable=recyclable)
        for name, percentage, recyclable in composition
    )
