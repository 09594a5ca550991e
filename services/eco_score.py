from typing import Optional, Sequence

from logger_manager import log_debug
from utils.reference_tables import (
    ECO_LABEL_BONUS,
    ECO_LABELS,
    ECO_SCORE_WEIGHTS,
    LOCAL_BONUS,
    NUTRITION_GRADE_BONUS,
)
from utils.scores import clamp_score


def calculate_eco_score(
    authoritative_score: Optional[int],
    carbon_score: int,
    packaging_score: int,
    ethics_score: int,
    is_local: bool = False,
    nutrition_grade: Optional[str] = None,
    labels: Sequence[str] = (),
) -> int:
    """
    Headline eco-score. An externally supplied score is returned unchanged;
    otherwise carbon/packaging/ethics are blended 40/35/25 (truncated) and the
    eco bonus is added before the final clamp.
    """
    if authoritative_score is not None:
        log_debug(f"Using authoritative eco-score {authoritative_score}")
        return authoritative_score

    blended = weighted_blend(carbon_score, packaging_score, ethics_score)
    bonus = eco_bonus(is_local, nutrition_grade, labels)
    score = clamp_score(blended + bonus)
    log_debug(f"Eco-score {score} (blend {blended}, bonus {bonus})")
    return score


def weighted_blend(carbon_score: int, packaging_score: int, ethics_score: int) -> int:
    # integer percent weights keep the truncation exact
    total = (
        carbon_score * ECO_SCORE_WEIGHTS["carbon"]
        + packaging_score * ECO_SCORE_WEIGHTS["packaging"]
        + ethics_score * ECO_SCORE_WEIGHTS["ethics"]
    )
    return total // 100


def eco_bonus(is_local: bool, nutrition_grade: Optional[str], labels: Sequence[str]) -> int:
    bonus = LOCAL_BONUS if is_local else 0
    if nutrition_grade:
        bonus += NUTRITION_GRADE_BONUS.get(nutrition_grade.strip().lower(), 0)
    # eco-labels only count on an exact tag match
    bonus += sum(ECO_LABEL_BONUS for eco_label in ECO_LABELS if eco_label in labels)
    return bonus
