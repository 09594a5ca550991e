SCORE_MIN = 0
SCORE_MAX = 100


def clamp_score(value) -> int:
    """Clamp a (possibly out of range) partial sum into [0, 100]."""
    return max(SCORE_MIN, min(SCORE_MAX, int(value)))
