"""Tests for ConnectFourEnv."""

import numpy as np
import pytest

from connectfour.game.rules import ConnectFourEnv


@pytest.fixture
def env() -> ConnectFourEnv:
    env = ConnectFourEnv()
    env.reset(seed=0)
    return env


class TestConnectFourEnv:
    def test_reset_returns_empty_board(self, env):
        observation, info = env.reset()
        assert observation.shape == (6, 7)
        assert observation.dtype == np.int8
        assert not observation.any()
        assert env.observation_space.contains(observation)
        assert info['valid_moves'] == list(range(7))
        assert info['current_player'] == 1
        assert info['game_result'] == 'IN_PROGRESS'

    def test_step_places_piece_and_switches_player(self, env):
        observation, reward, terminated, truncated, info = env.step(3)
        assert observation[5, 3] == 1
        assert reward == env.reward_step
        assert not terminated and not truncated
        assert info['current_player'] == 2
        assert info['last_move'] == (5, 3)
        assert info['moves_made'] == 1

    def test_win_terminates_episode(self, env):
        for action in [0, 1, 0, 1, 0, 1]:
            env.step(action)
        observation, reward, terminated, truncated, info = env.step(0)
        assert terminated and not truncated
        assert reward == env.reward_win
        assert info['game_result'] == 'WON'
        assert len(info['winning_line']) == 4
        assert info['valid_moves'] == []

    def test_invalid_action_truncates(self, env):
        observation, reward, terminated, truncated, info = env.step(7)
        assert truncated and not terminated
        assert reward == env.reward_invalid_move
        assert info['invalid_move'] == 'INVALID_COLUMN'
        assert not observation.any()

    def test_full_column_is_invalid(self, env):
        for _ in range(6):
            env.step(2)
        _, reward, _, truncated, info = env.step(2)
        assert truncated
        assert info['invalid_move'] == 'COLUMN_FULL'

    def test_ascii_render(self):
        env = ConnectFourEnv(rows=4, columns=5, render_mode="ascii")
        env.reset()
        env.step(0)
        rendered = env.render()
        assert "X" in rendered
        assert rendered.splitlines()[-1] == "|0 1 2 3 4|"

    def test_unknown_render_mode_rejected(self):
        with pytest.raises(ValueError):
            ConnectFourEnv(render_mode="rgb_array")
