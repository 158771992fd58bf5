from .errors import InvalidInput
from .golf_calc import strokes_received_per_hole
from .schemas import HoleOutcome, HoleResult, MatchScore, ScoringConfig


def _scoring_config(config) -> ScoringConfig:
    if config is None:
        return ScoringConfig()
    if not isinstance(config, ScoringConfig):
        raise TypeError(f"config must be a ScoringConfig, got {type(config).__name__}")
    return config


def calculate_score(
    effective_handicap_strokes,
    gross_strokes,
    one_putt: bool,
    par=0,
    *,
    config=None,
):
    """
    Net score for one hole.

    gross * stroke_value, less the handicap strokes, less the one-putt bonus,
    less par when a to-par figure is wanted (par > 0). Stroke and one-putt
    values come from config, 1 each by default.
    """
    config = _scoring_config(config)

    score = gross_strokes * config.stroke_value - effective_handicap_strokes
    if one_putt:
        score -= config.one_putt_value
    if par > 0:
        score -= par
    return score


def calculate_total_score(
    effective_handicaps,
    gross_strokes,
    one_putts,
    pars=(),
    *,
    config=None,
):
    effective_handicaps = list(effective_handicaps)
    gross_strokes = list(gross_strokes)
    one_putts = list(one_putts)
    pars = list(pars)

    if (
        len(effective_handicaps) != len(gross_strokes)
        or len(gross_strokes) != len(one_putts)
        or (pars and len(pars) != len(gross_strokes))
    ):
        raise InvalidInput(
            "per-hole inputs must have the same length "
            f"(handicaps={len(effective_handicaps)}, strokes={len(gross_strokes)}, "
            f"one_putts={len(one_putts)}, pars={len(pars)})"
        )

    config = _scoring_config(config)

    total = 0
    for i, strokes in enumerate(gross_strokes):
        total += calculate_score(
            effective_handicaps[i],
            strokes,
            one_putts[i],
            pars[i] if pars else 0,
            config=config,
        )
    return total


def score_hole(result_a: HoleResult, result_b: HoleResult, par=0, hole=0, config=None) -> HoleOutcome:
    config = _scoring_config(config)
    score_a = calculate_score(result_a.allocated_strokes, result_a.gross_strokes, result_a.one_putt, par, config=config)
    score_b = calculate_score(result_b.allocated_strokes, result_b.gross_strokes, result_b.one_putt, par, config=config)

    # a hole without strokes on either card has not been played yet
    if result_a.gross_strokes == 0 or result_b.gross_strokes == 0:
        winner = "tie"
    elif score_a < score_b:
        winner = "a"
    elif score_b < score_a:
        winner = "b"
    else:
        winner = "tie"

    return HoleOutcome(hole=hole, score_a=score_a, score_b=score_b, winner=winner)


def score_match(
    holes,
    handicap_a,
    handicap_b,
    gross_a,
    gross_b,
    one_putts_a,
    one_putts_b,
    use_par: bool = False,
    config=None,
) -> MatchScore:
    """
    Score a full head-to-head card.

    holes: Hole list in playing order; the per-hole sequences follow the
    same order. Strokes are allocated from the two handicaps and each hole is
    scored with score_hole.
    """
    holes = list(holes)
    per_hole = [list(gross_a), list(gross_b), list(one_putts_a), list(one_putts_b)]
    if any(len(seq) != len(holes) for seq in per_hole):
        raise InvalidInput(
            f"expected {len(holes)} entries per side, got {[len(seq) for seq in per_hole]}"
        )
    gross_a, gross_b, one_putts_a, one_putts_b = per_hole

    config = _scoring_config(config)

    received = strokes_received_per_hole(handicap_a, handicap_b, holes)

    outcomes = []
    for i, h in enumerate(holes):
        strokes_a, strokes_b = received[h.number]
        outcomes.append(
            score_hole(
                HoleResult(gross_strokes=gross_a[i], one_putt=one_putts_a[i], allocated_strokes=strokes_a),
                HoleResult(gross_strokes=gross_b[i], one_putt=one_putts_b[i], allocated_strokes=strokes_b),
                par=h.par if use_par else 0,
                hole=h.number,
                config=config,
            )
        )

    return MatchScore(
        score_a=sum(o.score_a for o in outcomes),
        score_b=sum(o.score_b for o in outcomes),
        hole_wins_a=sum(1 for o in outcomes if o.winner == "a"),
        hole_wins_b=sum(1 for o in outcomes if o.winner == "b"),
        holes=outcomes,
    )
