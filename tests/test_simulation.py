import pytest

from game.bullethell import Action, FrameLoop, Owner, RoundState, Simulation
from game.bullethell.utils import Vec2


def hit_enemy(sim, count=1):
    c = sim.enemy.center
    for _ in range(count):
        sim.bullets.spawn(sim, Owner.PLAYER, Vec2(c.x - 6, c.y - 6), Vec2(0, 0), Vec2(0, 0))
    sim.bullets.step_all(sim, 0.0)


def test_new_simulation_waits_in_break():
    sim = Simulation(seed=0)
    assert sim.round_state is RoundState.BREAK
    before = sim.player.position.copy()
    sim.step(1.0)
    assert sim.player.position == before
    assert len(sim.bullets) == 0


def test_start_game_begins_play():
    sim = Simulation(seed=0)
    sim.start_game()
    assert sim.is_playing
    assert sim.player.lives == 5
    assert sim.player.score == 0
    assert sim.enemy.level == 1
    assert sim.enemy.health == 60


def test_step_zero_dt_is_safe(sim):
    sim.step(0.0)
    assert sim.is_playing


def test_negative_dt_rejected(sim):
    with pytest.raises(ValueError):
        sim.step(-0.1)


def test_step_runs_player_enemy_and_bullets(sim):
    sim.set_input(Action.MOVE_LEFT, True)
    sim.step(0.1)
    assert sim.player.position.x == pytest.approx(170)
    assert len(sim.bullets.player_bullets) == 5
    assert sim.enemy.attack_state.timer > 0


def test_round_ends_exactly_once(sim):
    sim.enemy.health = 1
    hit_enemy(sim, count=3)

    assert sim.round_state is RoundState.BREAK
    assert sim.stats["rounds_cleared"] == 1
    assert sim.enemy.health == -2
    assert sim.enemy.level == 2
    assert sim.player.lives == 6
    assert len(sim.bonus_choices) == 2
    assert sim.bonus_choices[0].id != sim.bonus_choices[1].id

    hit_enemy(sim)
    assert sim.stats["rounds_cleared"] == 1
    assert sim.enemy.level == 2


def test_repeated_round_end_is_ignored_outside_play(sim):
    sim.handle_round_end()
    offered = [b.id for b in sim.bonus_choices]
    sim.handle_round_end()

    assert sim.round_state is RoundState.BREAK
    assert sim.enemy.level == 2
    assert sim.player.lives == 6
    assert sim.stats["rounds_cleared"] == 1
    assert [b.id for b in sim.bonus_choices] == offered


def test_break_freezes_simulation(sim):
    sim.enemy.health = 1
    hit_enemy(sim)
    pos = sim.enemy.position.copy()
    sim.step(1.0)
    assert sim.enemy.position == pos


def test_select_bonus_starts_next_round(sim):
    sim.enemy.health = 1
    hit_enemy(sim)
    sim.bullets.spawn(sim, Owner.ENEMY, Vec2(50, 50), Vec2(0, 0), Vec2(0, 0))
    chosen = sim.bonus_choices[1].id

    sim.select_bonus(1)

    assert sim.is_playing
    assert sim.bonuses.is_active(chosen)
    assert sim.bonus_choices == []
    assert len(sim.bullets) == 0
    assert sim.enemy.health == 110
    assert sim.snapshot()["active_bonuses"] == [chosen]


def test_select_bonus_without_offer_raises(sim):
    with pytest.raises(RuntimeError):
        sim.select_bonus(0)


def test_round_restarts_when_bonuses_run_out(sim):
    for bonus_id in ["enemy_bullet_shrink", "enemy_grow", "player_bullet_grow", "play_area_grow"]:
        sim.apply_bonus(bonus_id)
    sim.enemy.health = 1
    hit_enemy(sim)

    assert sim.is_playing
    assert sim.bonus_choices == []
    assert sim.enemy.level == 2
    assert sim.enemy.health == 110


def test_bonus_dimensions(sim):
    sim.apply_bonus("enemy_grow")
    sim.apply_bonus("play_area_grow")
    assert sim.enemy.size == 96
    assert sim.width == 600
    with pytest.raises(KeyError):
        sim.apply_bonus("bigger_lasers")


def test_game_over_is_terminal(sim):
    sim.player.lives = 0
    c = sim.player.center
    sim.bullets.spawn(sim, Owner.ENEMY, Vec2(c.x - 9, c.y - 9), Vec2(0, 0), Vec2(0, 0))
    sim.bullets.step_all(sim, 0.0)

    assert sim.is_game_over
    assert sim.player.lives == 0
    pos = sim.enemy.position.copy()
    sim.step(1.0)
    assert sim.enemy.position == pos
    with pytest.raises(RuntimeError):
        sim.start_round()

    sim.start_game()
    assert sim.is_playing
    assert sim.player.lives == 5


def test_start_game_resets_progress(sim):
    sim.apply_bonus("enemy_grow")
    sim.enemy.health = 1
    hit_enemy(sim)
    sim.start_game()
    assert sim.enemy.level == 1
    assert sim.player.score == 0
    assert sim.enemy.size == 64
    assert sim.bonuses.active_ids() == []


def test_set_input_accepts_action_names(sim):
    sim.set_input("moveRight", True)
    assert sim.keys[Action.MOVE_RIGHT]
    with pytest.raises(ValueError):
        sim.set_input("jump", True)


def test_snapshot_tags_bullets(sim):
    sim.apply_bonus("player_bullet_transparent")
    sim.step(0.0)
    snap = sim.snapshot()
    assert snap["round_state"] == "play"
    assert snap["enemy_health"] == 1.0
    assert snap["lives"] == 5
    assert {b["owner"] for b in snap["bullets"]} == {"player"}
    assert all(b["translucent"] for b in snap["bullets"])
    assert snap["player"]["x"] == 200


def test_seeded_runs_are_reproducible():
    def run(seed):
        sim = Simulation(seed=seed)
        sim.start_game()
        for _ in range(120):
            sim.step(1 / 30)
        return sim.snapshot()

    assert run(7) == run(7)


def test_frame_loop_computes_dt_and_always_renders():
    sim = Simulation(seed=0)
    frames = []
    loop = FrameLoop(sim, render=frames.append)

    assert loop.tick(10.0) == 0.0
    assert loop.tick(10.5) == pytest.approx(0.5)
    assert loop.tick(10.4) == 0.0
    assert len(frames) == 3
    assert sim.round_state is RoundState.BREAK

    sim.start_game()
    loop.tick(10.6)
    assert len(sim.bullets.player_bullets) == 5
