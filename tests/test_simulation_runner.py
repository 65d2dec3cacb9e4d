import random

from ai.simulation_runner import BotPlayer, SimulationRunner
from entities import Arena


def test_runner_plays_all_matches(capsys):
    runner = SimulationRunner(2, Arena(800, 600), seed=5, max_seconds=5.0)
    results = runner.run()

    assert [r.match_number for r in results] == [1, 2]
    for r in results:
        assert r.outcome in ("defeated", "timeout")
        assert 0 < r.survived_sec <= 5.0 + 1 / 60 + 1e-9
        assert r.archetype in ("blaze", "aether", "titan", "nix")
    assert "SIMULATION SUMMARY" in capsys.readouterr().out


def test_runner_is_reproducible():
    a = SimulationRunner(1, Arena(800, 600), seed=9, max_seconds=3.0).run()
    b = SimulationRunner(1, Arena(800, 600), seed=9, max_seconds=3.0).run()
    assert a == b


def test_bot_aims_at_nearest_enemy(started_session):
    enemy = started_session.ctx.enemies[0]
    enemy.x, enemy.y = 100, 100
    snap = BotPlayer(random.Random(0)).decide(started_session, 1 / 60)
    assert snap.attack
    assert snap.pointer == (100, 100)


def test_bot_shops_when_rich(started_session):
    started_session.player.gold = 1000
    BotPlayer.shop(started_session)
    assert started_session.player.items == {"atk", "def", "spd"}


def test_timed_out_match_still_reports(capsys):
    runner = SimulationRunner(1, Arena(800, 600), seed=3, max_seconds=0.1)
    result = runner.run_one(1)

    assert result.outcome == "timeout"
    assert capsys.readouterr().out.count("MATCH SUMMARY") == 1
