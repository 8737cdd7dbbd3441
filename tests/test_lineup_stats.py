from logic.lineup_stats import StatsAccumulator, calculate_lineup_stats, summarize_lineup
from models.lineup import InningLineup, Lineup, PositionAssignment
from models.position import LINEUP_ORDER
from tests.util.roster_factory import make_player


def _inning(number, **placed):
    by_pos = {pos.replace("_", ""): pid for pos, pid in placed.items()}
    return InningLineup(
        number,
        tuple(PositionAssignment(pos, by_pos.get(pos), by_pos.get(pos)) for pos in LINEUP_ORDER),
    )


def test_update_counts_each_category():
    players = [make_player(pid) for pid in ("a", "b", "c", "d")]
    acc = StatsAccumulator(players)
    acc.update(_inning(1, P="a", C="b", SS="c", CF="d"))
    a, b, c, d = (acc.get(pid) for pid in "abcd")
    assert (a.pitching_innings, a.total_innings) == (1, 1)
    # Catching only counts toward total innings.
    assert (b.infield_innings, b.outfield_innings, b.pitching_innings, b.total_innings) == (0, 0, 0, 1)
    assert b.catching_innings == 1
    assert (c.infield_innings, c.total_innings) == (1, 1)
    assert (d.outfield_innings, d.total_innings) == (1, 1)


def test_open_slots_and_unknown_players_ignored():
    acc = StatsAccumulator([make_player("a")])
    acc.update(_inning(1, P="ghost", _1B="a"))
    row = acc.get("a")
    assert row.infield_innings == 1
    assert acc.get("ghost") is None


def test_snapshot_is_a_copy():
    acc = StatsAccumulator([make_player("a")])
    snap = acc.snapshot()
    acc.update(_inning(1, LF="a"))
    assert snap["a"].outfield_innings == 0
    assert acc.get("a").outfield_innings == 1


def test_calculate_lineup_stats_folds_every_inning():
    players = [make_player("a"), make_player("b"), make_player("idle")]
    lineup = Lineup(
        "g1",
        (
            _inning(1, P="a", C="b"),
            _inning(2, SS="a", RF="b"),
            _inning(3, LF="a"),
        ),
    )
    rows = {row.player_id: row for row in calculate_lineup_stats(lineup, players)}
    assert [r.player_id for r in calculate_lineup_stats(lineup, players)] == ["a", "b", "idle"]
    assert (rows["a"].pitching_innings, rows["a"].infield_innings, rows["a"].outfield_innings) == (1, 1, 1)
    assert rows["a"].total_innings == 3
    assert rows["b"].total_innings == 2
    assert rows["idle"].total_innings == 0

    summary = summarize_lineup(lineup, players)
    assert summary.total_innings == 3
    assert len(summary.player_stats) == 3
