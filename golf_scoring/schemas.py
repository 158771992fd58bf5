from pydantic import BaseModel, ConfigDict, Field
from typing import List, Literal, Optional


# ---------------------------------------------------------------------------
# Course
# ---------------------------------------------------------------------------

class Hole(BaseModel):
    number: int = Field(ge=1, le=18)
    stroke_index: int = Field(ge=1, le=18)  # 1 = hardest
    par: int = Field(ge=3, le=6)


class TeeRating(BaseModel):
    name: Optional[str] = None
    slope: int = Field(default=113, ge=55, le=155)
    course_rating: float = 72.0


class Competitor(BaseModel):
    name: Optional[str] = None
    team_name: Optional[str] = None
    handicap_index: float = 0.0


# ---------------------------------------------------------------------------
# Scoring
# ---------------------------------------------------------------------------

class ScoringConfig(BaseModel):
    """Point values used by the scoring formula."""
    model_config = ConfigDict(frozen=True)

    stroke_value: float = 1.0
    one_putt_value: float = 1.0


class HoleResult(BaseModel):
    gross_strokes: int = Field(default=0, ge=0)
    one_putt: bool = False
    allocated_strokes: int = Field(default=0, ge=0)


class HoleOutcome(BaseModel):
    model_config = ConfigDict(frozen=True)

    hole: int = 0
    score_a: float
    score_b: float
    winner: Literal["a", "b", "tie"] = "tie"


class MatchScore(BaseModel):
    model_config = ConfigDict(frozen=True)

    score_a: float = 0
    score_b: float = 0
    hole_wins_a: int = 0
    hole_wins_b: int = 0
    holes: List[HoleOutcome] = []


# ---------------------------------------------------------------------------
# Standings
# ---------------------------------------------------------------------------

class MatchSide(BaseModel):
    team_key: str
    score: float = 0
    player_name: Optional[str] = None


class MatchResult(BaseModel):
    side_a: MatchSide
    side_b: MatchSide
    completed: bool = False


class TeamStanding(BaseModel):
    model_config = ConfigDict(frozen=True)

    team_key: str
    total_score: float = 0
    match_count: int = 0


class AggregateStanding(TeamStanding):
    event_count: int = 0


class PlayerStanding(BaseModel):
    model_config = ConfigDict(frozen=True)

    player_name: str
    team_key: Optional[str] = None
    total_score: float = 0
    match_count: int = 0
    event_count: int = 0


class MatchProgress(BaseModel):
    model_config = ConfigDict(frozen=True)

    completed: int = 0
    total: int = 0
    percent: int = 0
