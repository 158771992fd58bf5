import logging
from collections import defaultdict

from .schemas import AggregateStanding, MatchProgress, PlayerStanding, TeamStanding

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Event standings
# ---------------------------------------------------------------------------

def aggregate_team_standings(match_results, roster_team_keys):
    """
    Team totals for one event.

    Every roster key starts at zero. Completed matches add each side's score
    under the side's team key; keys not in the roster are ignored. Sorted by
    total score descending, ties keep roster order.
    """
    stats = {}
    for key in roster_team_keys:
        if key not in stats:
            stats[key] = {"total_score": 0, "match_count": 0}

    for match in match_results:
        if not match.completed:
            continue
        for side in (match.side_a, match.side_b):
            s = stats.get(side.team_key)
            if s is None:
                logger.debug("team %r is not on the roster, result dropped", side.team_key)
                continue
            s["total_score"] += side.score
            s["match_count"] += 1

    rows = [TeamStanding(team_key=key, **s) for key, s in stats.items()]
    rows.sort(key=lambda r: r.total_score, reverse=True)
    return rows


# ---------------------------------------------------------------------------
# Tournament standings
# ---------------------------------------------------------------------------

def aggregate_tournament_standings(per_event_standings):
    """
    per_event_standings: iterable of (event_id, [TeamStanding, ...])
    """
    stats = {}
    for event_id, standings in per_event_standings:
        for standing in standings:
            s = stats.get(standing.team_key)
            if s is None:
                s = stats[standing.team_key] = {
                    "total_score": 0,
                    "match_count": 0,
                    "events": set(),
                }
            s["total_score"] += standing.total_score
            s["match_count"] += standing.match_count
            s["events"].add(event_id)

    rows = [
        AggregateStanding(
            team_key=key,
            total_score=s["total_score"],
            match_count=s["match_count"],
            event_count=len(s["events"]),
        )
        for key, s in stats.items()
    ]
    rows.sort(key=lambda r: r.total_score, reverse=True)
    return rows


def aggregate_player_standings(per_event_matches):
    """
    Individual totals across a tournament, keyed by player name.

    per_event_matches: iterable of (event_id, [MatchResult, ...]). Only
    completed matches count. Sorted by total score, then matches played.
    """
    stats = defaultdict(lambda: {
        "team_key": None,
        "total_score": 0,
        "match_count": 0,
        "events": set(),
    })

    for event_id, matches in per_event_matches:
        for match in matches:
            if not match.completed:
                continue
            for side in (match.side_a, match.side_b):
                if not side.player_name:
                    continue
                s = stats[side.player_name]
                if s["team_key"] is None:
                    s["team_key"] = side.team_key
                s["total_score"] += side.score
                s["match_count"] += 1
                s["events"].add(event_id)

    rows = [
        PlayerStanding(
            player_name=name,
            team_key=s["team_key"],
            total_score=s["total_score"],
            match_count=s["match_count"],
            event_count=len(s["events"]),
        )
        for name, s in stats.items()
    ]
    rows.sort(key=lambda r: (-r.total_score, -r.match_count))
    return rows


# ---------------------------------------------------------------------------
# Helpers for leaderboards
# ---------------------------------------------------------------------------

def competition_ranks(scores):
    """[10, 10, 8] -> [1, 1, 3]; expects scores already in leaderboard order."""
    scores = list(scores)
    ranks = []
    for i, score in enumerate(scores):
        if i > 0 and score == scores[i - 1]:
            ranks.append(ranks[-1])
        else:
            ranks.append(i + 1)
    return ranks


def match_progress(match_results, registered=None):
    match_results = list(match_results)
    completed = sum(1 for m in match_results if m.completed)
    total = len(match_results) if registered is None else registered

    percent = 0
    if total > 0:
        percent = min(100, int(completed * 100 / total + 0.5))
    return MatchProgress(completed=completed, total=total, percent=percent)
