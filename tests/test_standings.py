from golf_scoring import (
    MatchResult,
    MatchSide,
    TeamStanding,
    aggregate_player_standings,
    aggregate_team_standings,
    aggregate_tournament_standings,
    competition_ranks,
    match_progress,
)


def _match(team_a, score_a, team_b, score_b, completed=True, player_a=None, player_b=None):
    return MatchResult(
        side_a=MatchSide(team_key=team_a, score=score_a, player_name=player_a),
        side_b=MatchSide(team_key=team_b, score=score_b, player_name=player_b),
        completed=completed,
    )


class TestTeamStandings:
    def test_completed_matches_only(self):
        results = [
            _match("Eagles", 30, "Hawks", 34),
            _match("Eagles", 100, "Hawks", 100, completed=False),
            _match("Hawks", 28, "Owls", 31),
        ]
        rows = aggregate_team_standings(results, ["Eagles", "Hawks", "Owls"])

        assert [r.team_key for r in rows] == ["Hawks", "Owls", "Eagles"]
        hawks = rows[0]
        assert hawks.total_score == 62
        assert hawks.match_count == 2
        assert rows[2].match_count == 1

    def test_roster_order_breaks_ties(self):
        results = [_match("Owls", 20, "Eagles", 20)]
        rows = aggregate_team_standings(results, ["Hawks", "Eagles", "Owls"])
        assert [r.team_key for r in rows] == ["Eagles", "Owls", "Hawks"]

    def test_unknown_team_dropped(self):
        results = [_match("Eagles", 30, "Falcons", 40)]
        rows = aggregate_team_standings(results, ["Eagles", "Hawks"])
        assert len(rows) == 2
        assert {r.team_key for r in rows} == {"Eagles", "Hawks"}
        assert sum(r.total_score for r in rows) == 30

    def test_duplicate_roster_keys(self):
        rows = aggregate_team_standings([], ["Eagles", "Hawks", "Eagles"])
        assert [r.team_key for r in rows] == ["Eagles", "Hawks"]
        assert all(r.total_score == 0 and r.match_count == 0 for r in rows)

    def test_same_inputs_same_output(self):
        results = [_match("Eagles", 30, "Hawks", 34)]
        assert aggregate_team_standings(results, ["Eagles", "Hawks"]) == aggregate_team_standings(
            results, ["Eagles", "Hawks"]
        )


class TestTournamentStandings:
    def test_sums_across_events(self):
        per_event = [
            ("e1", [TeamStanding(team_key="Eagles", total_score=30, match_count=2),
                    TeamStanding(team_key="Hawks", total_score=40, match_count=2)]),
            ("e2", [TeamStanding(team_key="Hawks", total_score=10, match_count=1),
                    TeamStanding(team_key="Eagles", total_score=25, match_count=1),
                    TeamStanding(team_key="Owls", total_score=5, match_count=1)]),
        ]
        rows = aggregate_tournament_standings(per_event)

        assert [r.team_key for r in rows] == ["Eagles", "Hawks", "Owls"]
        eagles = rows[0]
        assert eagles.total_score == 55
        assert eagles.match_count == 3
        assert eagles.event_count == 2
        assert rows[2].event_count == 1

    def test_ties_keep_first_appearance(self):
        per_event = [
            ("e1", [TeamStanding(team_key="Hawks", total_score=10, match_count=1)]),
            ("e2", [TeamStanding(team_key="Eagles", total_score=10, match_count=1)]),
        ]
        rows = aggregate_tournament_standings(per_event)
        assert [r.team_key for r in rows] == ["Hawks", "Eagles"]

    def test_repeated_event_counted_once(self):
        standing = TeamStanding(team_key="Hawks", total_score=10, match_count=1)
        rows = aggregate_tournament_standings([("e1", [standing]), ("e1", [standing])])
        assert rows[0].event_count == 1
        assert rows[0].total_score == 20

    def test_no_events(self):
        assert aggregate_tournament_standings([]) == []


class TestPlayerStandings:
    def test_keyed_by_player(self):
        per_event = [
            ("e1", [_match("Eagles", 30, "Hawks", 34, player_a="Ann", player_b="Bo")]),
            ("e2", [
                _match("Eagles", 20, "Owls", 34, player_a="Ann", player_b="Cy"),
                _match("Eagles", 99, "Owls", 99, completed=False, player_a="Ann", player_b="Cy"),
            ]),
        ]
        rows = aggregate_player_standings(per_event)

        assert [r.player_name for r in rows] == ["Ann", "Bo", "Cy"]
        ann = rows[0]
        assert ann.total_score == 50
        assert ann.match_count == 2
        assert ann.event_count == 2
        assert ann.team_key == "Eagles"

    def test_match_count_breaks_ties(self):
        per_event = [
            ("e1", [
                _match("Eagles", 20, "Hawks", 10, player_a="Ann", player_b="Bo"),
                _match("Eagles", 0, "Hawks", 10, player_a="Dee", player_b="Bo"),
            ]),
        ]
        rows = aggregate_player_standings(per_event)
        assert [r.player_name for r in rows] == ["Bo", "Ann", "Dee"]
        assert rows[0].match_count == 2


def test_competition_ranks():
    assert competition_ranks([10, 10, 8, 7, 7]) == [1, 1, 3, 4, 4]
    assert competition_ranks([]) == []


def test_match_progress():
    results = [_match("A", 1, "B", 1), _match("A", 1, "B", 1, completed=False), _match("A", 1, "B", 1)]
    progress = match_progress(results)
    assert progress.completed == 2
    assert progress.total == 3
    assert progress.percent == 67

    assert match_progress(results, registered=2).percent == 100
    assert match_progress([]).percent == 0
