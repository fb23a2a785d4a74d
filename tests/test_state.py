from tankgrid.state import (
    GameMode,
    GameRules,
    GameSessionState,
    GameState,
    ScoreRules,
)
from tankgrid.types import Point


def test_default_rules():
    rules = GameRules()
    assert rules.map_size == (32, 30)
    assert rules.base_cell == Point(15, 28)
    assert rules.score_rules == ScoreRules(enemy_kill=100, bonus=500, stage_clear=1000)


def test_rules_do_not_share_score_rules():
    a = GameRules()
    b = GameRules()
    a.score_rules.bonus = 1
    assert b.score_rules.bonus == ScoreRules().bonus


def test_initial_state_is_main_menu():
    state = GameState()
    assert state.game_mode == GameMode.MAIN_MENU
    assert state.is_game_over() is False


def test_reset_sets_counters():
    state = GameState()
    state.add_score(50)
    state.set_base_destroyed()
    state.reset(3, 20)
    assert state.remaining_lives == 3
    assert state.total_enemies == 20
    assert state.remaining_enemies == 20
    assert state.score == 0
    assert state.base_destroyed is False
    assert state.game_mode == GameMode.PLAYING
    assert state.session_state == GameSessionState.RUNNING


def test_spawn_and_destroy_keep_invariant():
    state = GameState()
    state.reset(3, 20)
    state.register_spawned_enemy()
    state.register_spawned_enemy()
    assert state.alive_enemies == 2
    assert state.enemies_to_spawn() == state.remaining_enemies - state.alive_enemies
    state.register_enemy_destroyed()
    assert state.alive_enemies == 1
    assert state.destroyed_enemies == 1
    assert state.remaining_enemies == state.total_enemies - state.destroyed_enemies
    assert state.enemies_to_spawn() == state.remaining_enemies - state.alive_enemies


def test_enemies_to_spawn_never_negative():
    state = GameState()
    state.reset(3, 1)
    state.register_spawned_enemy()
    state.register_spawned_enemy()
    assert state.enemies_to_spawn() == 0


def test_destroy_does_not_go_below_zero():
    state = GameState()
    state.reset(3, 0)
    state.register_enemy_destroyed()
    assert state.alive_enemies == 0
    assert state.remaining_enemies == 0
    assert state.destroyed_enemies == 1


def test_losing_all_lives_is_game_over():
    state = GameState()
    state.reset(2, 5)
    assert state.is_game_over() is False
    state.register_player_lost_life()
    state.register_player_lost_life()
    state.register_player_lost_life()
    assert state.remaining_lives == 0
    assert state.is_game_over() is True


def test_editing_is_never_game_over():
    state = GameState()
    state.reset(0, 0)
    state.game_mode = GameMode.EDITING
    assert state.is_game_over() is False


def test_base_destroyed_is_game_over_and_not_victory():
    state = GameState()
    state.reset(3, 0)
    state.set_base_destroyed()
    assert state.is_game_over() is True
    assert state.is_victory() is False


def test_victory_when_no_enemies_left():
    state = GameState()
    state.reset(3, 0)
    assert state.is_victory() is True
    state.reset(3, 4)
    assert state.is_victory() is False
    state.session_state = GameSessionState.VICTORY
    assert state.is_victory() is True


def test_score_add_and_reset():
    state = GameState()
    rules = ScoreRules()
    state.add_score(rules.enemy_kill)
    state.add_score(rules.bonus)
    assert state.score == rules.enemy_kill + rules.bonus
    state.reset_score()
    assert state.score == 0