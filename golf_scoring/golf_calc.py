import logging
import math
from decimal import Decimal, ROUND_HALF_UP

from .errors import InvalidInput, InvalidRange

logger = logging.getLogger(__name__)

HOLES_PER_ROUND = 18
STANDARD_SLOPE = 113.0


def _round_half_away(value) -> int:
    # Python's round() is banker's rounding; handicaps round .5 away from zero
    if not math.isfinite(value):
        raise InvalidRange(f"handicap must be a finite number, got {value}")
    return int(Decimal(str(value)).quantize(Decimal("1"), rounding=ROUND_HALF_UP))


def course_handicap(hcp_exact: float, slope: int, course_rating=None, par=None) -> float:
    ch = hcp_exact * (slope / STANDARD_SLOPE)
    if course_rating is not None and par is not None:
        ch += course_rating - par
    return ch


def calculate_playing_handicap(
    handicap_index: float,
    slope: int,
    course_rating: float,
    par: int,
    handicap_allowance_percent: float,
) -> int:
    """WHS playing handicap: course handicap scaled by the event allowance."""
    if not 0 <= handicap_allowance_percent <= 100:
        raise InvalidRange(
            f"handicap allowance must be between 0 and 100, got {handicap_allowance_percent}"
        )

    ch = course_handicap(handicap_index, slope, course_rating, par)
    return _round_half_away(ch * handicap_allowance_percent / 100.0)


def _check_rank(rank) -> None:
    if isinstance(rank, bool) or not isinstance(rank, int):
        raise InvalidRange(f"hole difficulty rank must be an integer, got {rank!r}")
    if not 1 <= rank <= HOLES_PER_ROUND:
        raise InvalidRange(f"hole difficulty rank must be between 1 and 18, got {rank}")


def allocate_strokes(handicap_a, handicap_b, hole_difficulty_rank: int):
    """
    Strokes given on one hole to whichever competitor has the higher handicap.

    The differential is dealt one stroke at a time from rank 1 (hardest) to
    rank 18, wrapping back to rank 1, so every hole gets d // 18 strokes and
    ranks up to d % 18 get one more. A fractional differential deals a stroke
    for the part hole too (5.4 deals 6). Returns (strokes_a, strokes_b).
    """
    _check_rank(hole_difficulty_rank)

    gap = abs(handicap_a - handicap_b)
    if not math.isfinite(gap):
        raise InvalidRange(f"handicaps must be finite, got {handicap_a} and {handicap_b}")
    # drop float noise so 15.2 - 10.2 deals 5, not 6
    diff = math.ceil(round(gap, 9))
    if diff == 0:
        return 0, 0

    base, extra = divmod(diff, HOLES_PER_ROUND)
    strokes = base + (1 if hole_difficulty_rank <= extra else 0)

    if handicap_a > handicap_b:
        return strokes, 0
    return 0, strokes


def strokes_received_per_hole(handicap_a, handicap_b, holes):
    """
    holes: Hole list with stroke_index
    returns {hole_number: (strokes_a, strokes_b)}
    """
    seen_numbers = set()
    seen_ranks = set()
    for h in holes:
        if h.number in seen_numbers:
            raise InvalidInput(f"hole {h.number} appears more than once")
        if h.stroke_index in seen_ranks:
            raise InvalidInput(f"stroke index {h.stroke_index} is used by more than one hole")
        seen_numbers.add(h.number)
        seen_ranks.add(h.stroke_index)

    received = {
        h.number: allocate_strokes(handicap_a, handicap_b, h.stroke_index)
        for h in holes
    }

    logger.debug(
        "allocated %d/%d strokes over %d holes (handicaps %s vs %s)",
        sum(a for a, _ in received.values()),
        sum(b for _, b in received.values()),
        len(received),
        handicap_a,
        handicap_b,
    )
    return received
