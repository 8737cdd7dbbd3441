
from scripts.audit_bench_fairness import audit, tier_violations
from scripts.generate_lineup import main
from tests.util.roster_factory import make_roster


def test_generate_lineup_cli_writes_csv(tmp_path, capsys):
    out = tmp_path / "lineup.csv"
    code = main(
        [
            "--players",
            "samples/roster_sample.csv",
            "--innings",
            "5",
            "--seed",
            "3",
            "--combinations",
            "samples/combinations_sample.csv",
            "--overrides",
            str(tmp_path / "none.json"),
            "--output",
            str(out),
        ]
    )
    assert code == 0
    printed = capsys.readouterr().out
    assert "Avery Cole" in printed
    lines = out.read_text(encoding="utf-8").splitlines()
    assert lines[0] == "inning,position,player_id,player_name"
    assert len(lines) == 1 + 5 * 9


def test_generate_lineup_cli_rejects_unknown_players(capsys):
    code = main(["--players", "samples/roster_sample.csv", "--available", "p01,nobody"])
    assert code == 2
    assert "nobody" in capsys.readouterr().err


def test_generate_lineup_cli_rejects_zero_innings(capsys):
    code = main(["--players", "samples/roster_sample.csv", "--innings", "0"])
    assert code == 2


def test_generate_lineup_cli_rejects_unknown_override_keys(tmp_path, capsys):
    overrides = tmp_path / "overrides.json"
    overrides.write_text('{"randomiseFieldTies": 1}', encoding="utf-8")
    code = main(["--players", "samples/roster_sample.csv", "--overrides", str(overrides)])
    assert code == 2
    assert "randomiseFieldTies" in capsys.readouterr().err


def test_generate_lineup_cli_rejects_malformed_overrides(tmp_path, capsys):
    overrides = tmp_path / "overrides.json"
    overrides.write_text("{not json", encoding="utf-8")
    code = main(["--players", "samples/roster_sample.csv", "--overrides", str(overrides)])
    assert code == 2
    assert capsys.readouterr().err.startswith("Error:")


def test_tier_violations_detects_early_second_turn():
    ids = ["a", "b", "c"]
    assert tier_violations([frozenset({"a"}), frozenset({"b"}), frozenset({"c"})], ids) == 0
    assert tier_violations([frozenset({"a"}), frozenset({"a"})], ids) == 1
    # Second turns in the same inning that clears the last first turn are fine.
    assert tier_violations([frozenset({"a", "b"}), frozenset({"c", "a"})], ids) == 0


def test_audit_reports_clean_rotation():
    roster = make_roster(12, pitchers=4)
    report = audit(roster, 6, 15, seed=1, use_tqdm=False)
    assert report.runs == 15
    assert report.tier_violations == 0
    assert report.open_slots == 0
    assert report.max_bench_spread == 1
