"""
Unit tests for game sessions and state transitions.

Covers the win/loss rules, events, read-only queries and the fixed-layout
scenarios.
"""
import random
from typing import List

import numpy as np
import pytest
from sweeper import (
    CellRevealed,
    ConfigurationError,
    FlagToggled,
    GameLost,
    GameSession,
    GameState,
    GameWon,
    RevealOutcome,
    new_game,
    reveal,
    toggle_flag,
)


# ============================================================================
# Scenario Tests
# ============================================================================

class TestScenarios:
    """Fixed 3x3 board with one mine at (0, 0)."""

    def test_far_corner_reveal_wins(
        self, corner_mine_session: GameSession
    ) -> None:
        """Revealing (2, 2) cascades over all eight safe cells and wins."""
        outcome = reveal(corner_mine_session, 2, 2)

        assert outcome == RevealOutcome.SAFE_REVEAL
        assert corner_mine_session.safe_revealed_count == 8
        assert corner_mine_session.state == GameState.WON
        assert corner_mine_session.cell(0, 0).is_revealed is False

    def test_mine_reveal_loses(self, unprotected_session: GameSession) -> None:
        """Revealing (0, 0) without protection loses and shows the mine."""
        outcome = reveal(unprotected_session, 0, 0)

        assert outcome == RevealOutcome.MINE_HIT
        assert unprotected_session.state == GameState.LOST
        assert all(c.is_revealed for c in unprotected_session.board.mines())

    def test_flag_counter_round_trip(
        self, corner_mine_session: GameSession
    ) -> None:
        """Flags move the counter both ways and may push it negative."""
        start = corner_mine_session.mines_remaining
        toggle_flag(corner_mine_session, 1, 1)
        assert corner_mine_session.mines_remaining == start - 1
        toggle_flag(corner_mine_session, 1, 1)
        assert corner_mine_session.mines_remaining == start

        toggle_flag(corner_mine_session, 0, 0)
        toggle_flag(corner_mine_session, 0, 1)
        toggle_flag(corner_mine_session, 0, 2)
        assert corner_mine_session.mines_remaining == -2


# ============================================================================
# State Machine Tests
# ============================================================================

class TestStateMachine:
    """Test NOT_STARTED -> IN_PROGRESS -> WON/LOST."""

    def test_new_session_not_started(
        self, corner_mine_session: GameSession
    ) -> None:
        """Fresh sessions wait for their first reveal."""
        assert corner_mine_session.state == GameState.NOT_STARTED
        assert corner_mine_session.started is False
        assert corner_mine_session.is_playing is True

    def test_numbered_reveal_in_progress(
        self, unprotected_session: GameSession
    ) -> None:
        """A reveal that does not finish the game leaves it in progress."""
        reveal(unprotected_session, 1, 1)
        assert unprotected_session.state == GameState.IN_PROGRESS
        assert unprotected_session.outcome == GameState.IN_PROGRESS

    def test_win_flags_every_mine(self, two_mine_session: GameSession) -> None:
        """On a win unflagged mines are flagged and the counter is zero."""
        toggle_flag(two_mine_session, 0, 4)
        reveal(two_mine_session, 4, 4)

        assert two_mine_session.is_won is True
        assert all(c.is_flagged for c in two_mine_session.board.mines())
        assert two_mine_session.mines_remaining == 0

    def test_win_only_when_all_safe_revealed(
        self, two_mine_session: GameSession
    ) -> None:
        """A flagged safe cell keeps the game going."""
        toggle_flag(two_mine_session, 2, 2)
        reveal(two_mine_session, 4, 4)
        assert two_mine_session.state == GameState.IN_PROGRESS

        toggle_flag(two_mine_session, 2, 2)
        reveal(two_mine_session, 2, 2)
        assert two_mine_session.state == GameState.WON

    def test_loss_leaves_flags_alone(
        self, two_mine_session: GameSession
    ) -> None:
        """Right and wrong flags survive a loss unchanged."""
        toggle_flag(two_mine_session, 0, 4)
        toggle_flag(two_mine_session, 3, 3)
        reveal(two_mine_session, 0, 0)

        assert two_mine_session.is_lost is True
        assert two_mine_session.cell(0, 4).is_flagged is True
        assert two_mine_session.cell(0, 4).is_revealed is True
        assert two_mine_session.cell(3, 3).is_flagged is True
        assert two_mine_session.cell(3, 3).is_revealed is False
        assert two_mine_session.mines_remaining == 0

    def test_terminal_state_is_final(
        self, unprotected_session: GameSession
    ) -> None:
        """Nothing changes a finished game's state."""
        reveal(unprotected_session, 0, 0)
        reveal(unprotected_session, 2, 2)
        toggle_flag(unprotected_session, 2, 2)
        assert unprotected_session.state == GameState.LOST


# ============================================================================
# Event Tests
# ============================================================================

class TestEvents:
    """Test domain event emission."""

    def test_cascade_event_order(
        self, corner_mine_session: GameSession, event_log: List[object]
    ) -> None:
        """Reveals are emitted in work-list order, then the win."""
        reveal(corner_mine_session, 2, 2)
        assert event_log == [
            CellRevealed(2, 2),
            CellRevealed(1, 1),
            CellRevealed(1, 2),
            CellRevealed(2, 1),
            CellRevealed(0, 1),
            CellRevealed(0, 2),
            CellRevealed(1, 0),
            CellRevealed(2, 0),
            FlagToggled(0, 0, True),
            GameWon(),
        ]

    def test_flag_events(
        self, corner_mine_session: GameSession, event_log: List[object]
    ) -> None:
        """Each toggle reports the new flag state."""
        toggle_flag(corner_mine_session, 1, 1)
        toggle_flag(corner_mine_session, 1, 1)
        assert event_log == [FlagToggled(1, 1, True), FlagToggled(1, 1, False)]

    def test_loss_events(self) -> None:
        """The hit mine, then the other mines, then the loss."""
        session = GameSession.from_layout(
            5, 5, [(0, 0), (0, 4), (4, 4)], safe_first_click=False
        )
        events: List[object] = []
        session.subscribe(events.append)
        reveal(session, 0, 4)
        assert events == [
            CellRevealed(0, 4),
            CellRevealed(0, 0),
            CellRevealed(4, 4),
            GameLost(),
        ]

    def test_noop_emits_nothing(
        self, corner_mine_session: GameSession, event_log: List[object]
    ) -> None:
        """Blocked actions are silent."""
        toggle_flag(corner_mine_session, 1, 1)
        event_log.clear()
        reveal(corner_mine_session, 1, 1)
        assert event_log == []

    def test_unsubscribe_stops_delivery(
        self, corner_mine_session: GameSession
    ) -> None:
        """Removed listeners receive nothing further."""
        events: List[object] = []
        corner_mine_session.subscribe(events.append)
        corner_mine_session.unsubscribe(events.append)
        toggle_flag(corner_mine_session, 1, 1)
        assert events == []


# ============================================================================
# Query Tests
# ============================================================================

class TestQueries:
    """Test read-only session queries."""

    def test_view_hides_mines_until_loss(
        self, unprotected_session: GameSession
    ) -> None:
        """Mine identity is concealed for hidden cells in play."""
        assert unprotected_session.cell_view(0, 0).is_mine is None
        reveal(unprotected_session, 1, 1)
        assert unprotected_session.cell_view(0, 0).is_mine is None

    def test_view_shows_mines_after_loss(
        self, two_mine_session: GameSession
    ) -> None:
        """After a loss every cell's mine identity is visible."""
        reveal(two_mine_session, 0, 0)
        assert two_mine_session.cell_view(0, 4).is_mine is True
        assert two_mine_session.cell_view(3, 3).is_mine is False

    def test_observation_shape_and_dtype(
        self, default_session: GameSession
    ) -> None:
        """Observation matches board dimensions as int8."""
        obs = default_session.get_observation()
        assert obs.shape == (9, 9)
        assert obs.dtype == np.int8
        assert np.all(obs == -1)

    def test_observation_after_win(
        self, corner_mine_session: GameSession
    ) -> None:
        """A won board shows numbers and a flag on the mine."""
        reveal(corner_mine_session, 2, 2)
        obs = corner_mine_session.get_observation()
        assert obs.tolist() == [[-2, 1, 0], [1, 1, 0], [0, 0, 0]]

    def test_valid_actions_exclude_revealed_and_flagged(
        self, unprotected_session: GameSession
    ) -> None:
        """Only hidden, unflagged cells are offered."""
        reveal(unprotected_session, 1, 1)
        toggle_flag(unprotected_session, 0, 0)
        actions = unprotected_session.get_valid_actions()
        assert (1, 1) not in actions
        assert (0, 0) not in actions
        assert len(actions) == 7

    def test_valid_actions_empty_when_over(
        self, unprotected_session: GameSession
    ) -> None:
        """A finished game offers no moves."""
        reveal(unprotected_session, 0, 0)
        assert unprotected_session.get_valid_actions() == []


# ============================================================================
# New Game Tests
# ============================================================================

class TestNewGame:
    """Test session creation."""

    def test_new_game_counts(self) -> None:
        """Counters start from the mine count."""
        session = new_game(9, 9, 10, rng=random.Random(1))
        assert session.mine_count == 10
        assert session.mines_remaining == 10
        assert session.safe_revealed_count == 0
        assert len(session.board.mines()) == 10

    def test_new_game_rejects_bad_config(self) -> None:
        """Invalid sizes surface at generation time."""
        with pytest.raises(ConfigurationError):
            new_game(5, 5, 25)

    def test_sessions_are_independent(self) -> None:
        """Two sessions never share state."""
        first = new_game(9, 9, 10, rng=random.Random(1))
        second = new_game(9, 9, 10, rng=random.Random(1))
        toggle_flag(first, 0, 0)
        assert second.cell(0, 0).is_flagged is False
        assert second.mines_remaining == 10
