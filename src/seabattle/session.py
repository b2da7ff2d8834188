"""Two-player match state and the turn coordinator driving it.

A match is played by two actor threads, one per player, sharing a single
``MatchState``.  Only one actor is ever runnable: the other waits on the
state's condition until the turn-owner flag names it (or the match is over).

Turn protocol
-------------
PLAYER1_TURN  --shot, game continues-->  PLAYER2_TURN  (and back)
either turn   --shot sinks last ship-->  GAME_OVER     (terminal)

The acting actor renders both boards, reads and resolves exactly one shot,
then either ends the match (waking the waiting actor so it can exit and
setting the completion event for the driver) or runs the hand-off prompt and
passes the baton.
"""

from __future__ import annotations

import logging
import threading
from enum import Enum
from typing import Callable

from .battleship import ShotOutcome
from .commands import FireCommand, parse_shot
from .coord_utils import format_coord
from .errors import CommandParseError, CoordinateError
from .events import Category, Event, EventBus, Subscriber
from .game import Player
from .render import turn_view

logger = logging.getLogger(__name__)

WRONG_COORDINATES = "Error! You entered the wrong coordinates! Try again:"
HAND_OFF = "Press Enter and pass the move to another player"
VICTORY = "You sank the last ship. You won. Congratulations!"

OUTCOME_MESSAGES = {
    ShotOutcome.MISS: "You missed!",
    ShotOutcome.HIT: "You hit a ship!",
    ShotOutcome.SUNK: "You sank a ship! Specify a new target:",
    ShotOutcome.ALREADY_HIT: "You already hit that cell!",
}


class Turn(Enum):
    PLAYER1 = 1
    PLAYER2 = 2

    @property
    def other(self) -> "Turn":
        return Turn.PLAYER2 if self is Turn.PLAYER1 else Turn.PLAYER1


class Phase(Enum):
    PLAYER1_TURN = "player1_turn"
    PLAYER2_TURN = "player2_turn"
    GAME_OVER = "game_over"


class MatchState:
    """Pairs two players and tracks whose turn it is."""

    def __init__(self, player1: Player, player2: Player) -> None:
        self.player1 = player1
        self.player2 = player2
        self.current_turn = Turn.PLAYER1
        self.game_over = False
        self.winner: Player | None = None
        # Guards the turn-owner flag; waiters are woken one at a time.
        self._baton = threading.Condition()

    @property
    def phase(self) -> Phase:
        if self.game_over:
            return Phase.GAME_OVER
        return Phase.PLAYER1_TURN if self.current_turn is Turn.PLAYER1 else Phase.PLAYER2_TURN

    def player_for(self, turn: Turn) -> Player:
        return self.player1 if turn is Turn.PLAYER1 else self.player2

    @property
    def current_player(self) -> Player:
        return self.player_for(self.current_turn)

    @property
    def opponent(self) -> Player:
        return self.player_for(self.current_turn.other)

    def fire(self, row: int, col: int) -> ShotOutcome:
        """Resolve a shot by the current player at the opponent's board.

        A shot that sinks the opponent's last ship moves the match to
        GAME_OVER; any other outcome leaves the turn with the shooter until
        ``switch_turn`` is called.
        """
        if self.game_over:
            raise RuntimeError("Match is already over")
        shooter = self.current_player
        outcome = self.opponent.receive_shot(row, col)
        shooter.shots_fired += 1
        logger.debug("%s fired at %s: %s", shooter.name, format_coord(row, col), outcome.value)
        if outcome.ends_game:
            self.end(winner=shooter)
        return outcome

    def switch_turn(self) -> None:
        """Hand the turn to the other player and wake its actor."""
        with self._baton:
            if self.game_over:
                return
            self.current_turn = self.current_turn.other
            logger.debug("Turn passes to %s", self.current_player.name)
            self._baton.notify()

    def end(self, winner: Player | None = None) -> None:
        """Enter GAME_OVER and wake the waiting actor so it can exit."""
        with self._baton:
            self.game_over = True
            self.winner = winner
            self._baton.notify()

    def check_game_over(self) -> bool:
        return self.player1.has_lost() or self.player2.has_lost()

    def wait_for_turn(self, turn: Turn) -> bool:
        """Block until it is *turn*'s move.  Returns False once the match is over."""
        with self._baton:
            self._baton.wait_for(lambda: self.game_over or self.current_turn is turn)
            return not self.game_over


class PlayerActor(threading.Thread):
    """Thread playing every turn of one player until the match ends."""

    def __init__(self, coordinator: "TurnCoordinator", turn: Turn) -> None:
        super().__init__(name=coordinator.state.player_for(turn).name, daemon=True)
        self.coordinator = coordinator
        self.turn = turn
        self.error: BaseException | None = None

    def run(self) -> None:
        coord = self.coordinator
        logger.debug("%s actor started", self.name)
        try:
            while coord.state.wait_for_turn(self.turn):
                if not coord.play_turn():
                    break
        except BaseException as exc:  # noqa: BLE001 – re-raised by the driver
            logger.debug("%s actor failed: %r", self.name, exc)
            self.error = exc
            coord.state.end()
            coord.completed.set()
        finally:
            logger.debug("%s actor exiting", self.name)
            coord.emit(Event(Category.SYSTEM, "actor_exit", {"player": self.name}))


class TurnCoordinator:
    """Runs the two player actors and waits for the match to finish."""

    def __init__(
        self,
        state: MatchState,
        recv_fn: Callable[[], str],
        notify: Callable[[str], None],
        *,
        pause: bool = True,
    ) -> None:
        self.state = state
        self.recv_fn = recv_fn
        self.notify = notify
        self.pause = pause
        self.completed = threading.Event()
        self._bus = EventBus()
        self.actors = [PlayerActor(self, Turn.PLAYER1), PlayerActor(self, Turn.PLAYER2)]

    def subscribe(self, handler: Subscriber) -> None:
        self._bus.subscribe(handler)

    def emit(self, event: Event) -> None:
        self._bus.emit(event)

    # -------------------- gameplay --------------------
    def play_turn(self) -> bool:
        """Play one shot for the current player.  Returns False once the match ended."""
        state = self.state
        shooter, target = state.current_player, state.opponent

        self.notify("")
        self.notify(turn_view(target.board, shooter.board))
        self.notify(f"Enemy ships afloat: {target.ships_afloat}")
        self.notify(f"\n{shooter.name}, it's your turn:\n")
        self.emit(Event(Category.TURN, "prompt", {"player": shooter.name}))

        cmd, outcome = self._read_and_fire()
        self.emit(
            Event(
                Category.TURN,
                "shot",
                {
                    "player": shooter.name,
                    "coord": format_coord(cmd.row, cmd.col),
                    "outcome": outcome,
                },
            )
        )

        if outcome.ends_game:
            logger.info("%s sank the last ship after %d shots", shooter.name, shooter.shots_fired)
            self.emit(
                Event(
                    Category.TURN,
                    "end",
                    {
                        "winner": shooter.name,
                        "shots": {state.player1.name: state.player1.shots_fired,
                                  state.player2.name: state.player2.shots_fired},
                    },
                )
            )
            self.completed.set()
            return False

        self.notify(f"\n{OUTCOME_MESSAGES[outcome]}\n")
        if self.pause:
            self.notify(f"\n{HAND_OFF}\n")
            self.recv_fn()
        self.emit(Event(Category.TURN, "switch", {"player": target.name}))
        state.switch_turn()
        return True

    def _read_and_fire(self) -> tuple[FireCommand, ShotOutcome]:
        while True:
            line = self.recv_fn()
            try:
                cmd = parse_shot(line)
                return cmd, self.state.fire(cmd.row, cmd.col)
            except (CommandParseError, CoordinateError) as exc:
                logger.debug("Rejected shot %r: %s", line, exc)
                self.notify(f"\n{WRONG_COORDINATES}\n")

    # -------------------- driver --------------------
    def run(self) -> Player | None:
        """Start both actors, wait for the match to end and join them.

        Returns the winner.  An exception raised inside an actor (for example
        end of input) is re-raised here once both threads have stopped.
        """
        for actor in self.actors:
            actor.start()
        self.completed.wait()
        for actor in self.actors:
            actor.join()
        for actor in self.actors:
            if actor.error is not None:
                raise actor.error
        return self.state.winner
