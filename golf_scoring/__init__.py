"""Handicap allocation, net scoring and standings for match-play golf leagues."""

from .errors import InvalidInput, InvalidRange, ScoringError  # noqa: F401
from .golf_calc import (  # noqa: F401
    allocate_strokes,
    calculate_playing_handicap,
    course_handicap,
    strokes_received_per_hole,
)
from .schemas import (  # noqa: F401
    AggregateStanding,
    Competitor,
    Hole,
    HoleOutcome,
    HoleResult,
    MatchProgress,
    MatchResult,
    MatchScore,
    MatchSide,
    PlayerStanding,
    ScoringConfig,
    TeamStanding,
    TeeRating,
)
from .scoring import calculate_score, calculate_total_score, score_hole, score_match  # noqa: F401
from .standings import (  # noqa: F401
    aggregate_player_standings,
    aggregate_team_standings,
    aggregate_tournament_standings,
    competition_ranks,
    match_progress,
)
