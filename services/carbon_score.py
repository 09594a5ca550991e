from typing import Sequence

from interfaces.productModels import PackagingType
from logger_manager import log_debug
from utils.reference_tables import (
    CARBON_FOOTPRINT_BY_CATEGORY,
    CARBON_LABEL_BONUSES,
    CARBON_LABEL_BONUS_CAP,
    DISTANT_TRANSPORT_PENALTY,
    LOCAL_TRANSPORT_BONUS,
    PACKAGING_CARBON_IMPACT,
    PROCESSING_IMPACT,
    TRANSPORT_TIERS,
    UNKNOWN_CATEGORY_PENALTY,
)
from utils.scores import clamp_score
from utils.text_matching import first_key_in, first_rule_match, mentions_region

BASE_CARBON_SCORE = 50
# 30 kg CO2e/kg maps to a score of ~0
CARBON_TO_SCORE_FACTOR = 3.33


def calculate_carbon_score(
    categories: str,
    countries: str,
    home_region: str,
    labels: Sequence[str],
    packaging_type: PackagingType,
    is_local: bool = False,
) -> int:
    """
    Carbon sub-score: base 50 plus category, transport, processing,
    packaging and certification components, clamped to [0, 100].
    """
    components = {
        "category": category_carbon_impact(categories),
        "transport": transport_impact(countries, home_region, is_local),
        "processing": processing_impact(categories),
        "packaging": packaging_carbon_impact(packaging_type),
        "certification": carbon_certification_bonus(labels),
    }
    score = clamp_score(BASE_CARBON_SCORE + sum(components.values()))
    log_debug(f"Carbon score {score} from components {components}")
    return score


def category_carbon_impact(categories: str) -> int:
    if not categories:
        return 0
    category_key = first_key_in(categories.lower(), CARBON_FOOTPRINT_BY_CATEGORY)
    if category_key is None:
        return UNKNOWN_CATEGORY_PENALTY
    carbon_value = CARBON_FOOTPRINT_BY_CATEGORY[category_key]
    return int(100 - carbon_value * CARBON_TO_SCORE_FACTOR) - 50


def transport_impact(countries: str, home_region: str, is_local: bool = False) -> int:
    if is_local or mentions_region(countries, home_region):
        return LOCAL_TRANSPORT_BONUS
    if not countries:
        return 0
    tier = first_rule_match(countries.lower(), TRANSPORT_TIERS)
    if tier is None:
        return DISTANT_TRANSPORT_PENALTY
    return tier[1]


def processing_impact(categories: str) -> int:
    rule = first_rule_match((categories or "").lower(), PROCESSING_IMPACT)
    return rule[1] if rule else 0


def packaging_carbon_impact(packaging_type: PackagingType) -> int:
    return PACKAGING_CARBON_IMPACT[packaging_type]


def carbon_certification_bonus(labels: Sequence[str]) -> int:
    bonus = 0
    for label_key, label_bonus in CARBON_LABEL_BONUSES.items():
        if any(label_key in label for label in labels):
            bonus += label_bonus
    return min(bonus, CARBON_LABEL_BONUS_CAP)
