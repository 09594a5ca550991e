from typing import Sequence

from logger_manager import log_debug
from utils.reference_tables import (
    CERTIFICATION_WEIGHTS,
    CONTROVERSIAL_INGREDIENTS,
    COUNTRY_ETHICS_BASELINE,
    ETHICAL_BRANDS,
    ETHICAL_COUNTRY_SCORES,
    INGREDIENT_PENALTY_FLOOR,
    UNETHICAL_BRANDS,
)
from utils.scores import clamp_score
from utils.text_matching import first_key_in

BASE_ETHICS_SCORE = 50
CERTIFICATION_CAP = 20
CERTIFICATION_OFFSET = 10


def calculate_ethics_score(labels: Sequence[str], countries: str, ingredients_text: str, brand: str) -> int:
    components = {
        "certification": certification_ethics_score(labels),
        "country": country_ethics_score(countries),
        "ingredients": ingredient_ethics_penalty(ingredients_text),
        "brand": brand_ethics_score(brand),
    }
    score = clamp_score(BASE_ETHICS_SCORE + sum(components.values()))
    log_debug(f"Ethics score {score} from components {components}")
    return score


def certification_ethics_score(labels: Sequence[str]) -> int:
    """No certification nets -10, a capped 20 points nets +10."""
    total = 0
    for label in labels:
        certification_key = first_key_in(label, CERTIFICATION_WEIGHTS)
        if certification_key is not None:
            total += CERTIFICATION_WEIGHTS[certification_key][0]
    return min(CERTIFICATION_CAP, total) - CERTIFICATION_OFFSET


def country_ethics_score(countries: str) -> int:
    country_key = first_key_in((countries or "").lower(), ETHICAL_COUNTRY_SCORES)
    if country_key is None:
        return 0
    # truncate toward zero so 60 -> -2, not -3
    return int((ETHICAL_COUNTRY_SCORES[country_key] - COUNTRY_ETHICS_BASELINE) / 2)


def ingredient_ethics_penalty(ingredients_text: str) -> int:
    text = (ingredients_text or "").lower()
    if not text:
        return 0
    penalty = sum(value for ingredient, value in CONTROVERSIAL_INGREDIENTS.items() if ingredient in text)
    return max(INGREDIENT_PENALTY_FLOOR, penalty)


def brand_ethics_score(brand: str) -> int:
    text = (brand or "").lower()
    ethical_key = first_key_in(text, ETHICAL_BRANDS)
    if ethical_key is not None:
        return ETHICAL_BRANDS[ethical_key]
    unethical_key = first_key_in(text, UNETHICAL_BRANDS)
    if unethical_key is not None:
        return UNETHICAL_BRANDS[unethical_key]
    return 0
