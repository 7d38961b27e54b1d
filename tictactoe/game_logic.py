import logging
from dataclasses import dataclass
from typing import Optional, Tuple

from .board import Board, MARKER_X, MARKER_O

_logger = logging.getLogger(__name__)

DEFAULT_NAMES = ("Player 1", "Player 2")
MARKERS = (MARKER_X, MARKER_O)

GAME_OVER_MESSAGE = "Game is over!"
INVALID_MOVE_MESSAGE = "Invalid move!"

# rows, cols, diags; checked in this order
WINNING_LINES = (
    (0, 1, 2), (3, 4, 5), (6, 7, 8),
    (0, 3, 6), (1, 4, 7), (2, 5, 8),
    (0, 4, 8), (2, 4, 6),
)


@dataclass(frozen=True)
class Player:
    name: str
    marker: str


@dataclass(frozen=True)
class TurnResult:
    """
    outcome of a single play_turn call
    """
    success: bool
    message: Optional[str] = None
    game_over: bool = False
    tie: bool = False
    winner: Optional[Player] = None
    winning_combination: Optional[Tuple[int, int, int]] = None


def _clean_name(name, default):
    # blank or missing names fall back to the default
    if name is None:
        return default
    name = str(name).strip()
    return name or default


class Match:
    """
    tic-tac-toe rules, turn order and running score for one session
    """
    def __init__(self, board=None):
        """
        init board and counters; no game runs until start_game
        """
        self._board = board if board is not None else Board()
        self._players = ()              # (player 1, player 2) once started
        self._current_index = 0         # whose turn, 0 or 1
        self._starting_index = 0        # who opened the current game
        self._game_over = False         # flag when win/tie
        self._scores = [0, 0]           # wins per player

    @property
    def board(self):
        return self._board

    @property
    def players(self):
        return self._players

    def start_game(self, name_a=None, name_b=None, is_restart=False):
        """
        set up players and a clean board
        on a restart the opening player alternates, otherwise player 1 opens
        """
        self._players = (
            Player(_clean_name(name_a, DEFAULT_NAMES[0]), MARKERS[0]),
            Player(_clean_name(name_b, DEFAULT_NAMES[1]), MARKERS[1]),
        )
        if is_restart:
            self._starting_index = 1 - self._starting_index
        else:
            self._starting_index = 0
        self._current_index = self._starting_index
        self._game_over = False
        self._board.reset()
        _logger.debug(f"Game started: {self._players[0].name} vs {self._players[1].name}, "
                      f"{self.current_player().name} opens (restart={is_restart})")

    def current_player(self):
        self._require_game()
        return self._players[self._current_index]

    def play_turn(self, index):
        """
        place the current player's marker and resolve the turn
        returns: TurnResult; failures leave all state unchanged
        """
        self._require_game()
        if self._game_over:
            _logger.debug(f"Move at {index!r} ignored, game already over")
            return TurnResult(success=False, message=GAME_OVER_MESSAGE)

        player = self.current_player()
        if not self._board.write_if_empty(index, player.marker):
            return TurnResult(success=False, message=INVALID_MOVE_MESSAGE)
        _logger.debug(f"{player.name} ({player.marker}) played {index}\n{self._board}")

        line = self._find_winning_line()
        if line is not None:
            self._game_over = True
            winner_index = MARKERS.index(self._board.cell(line[0]))
            self._scores[winner_index] += 1
            winner = self._players[winner_index]
            _logger.info(f"{winner.name} wins on {line}, score now {self._scores[0]}-{self._scores[1]}")
            return TurnResult(success=True, game_over=True,
                              winner=winner, winning_combination=line)

        if self._board.is_full():
            self._game_over = True
            _logger.info("Game tied, board full")
            return TurnResult(success=True, game_over=True, tie=True)

        self._current_index = 1 - self._current_index
        return TurnResult(success=True, game_over=False)

    def is_game_over(self):
        return self._game_over

    def scores(self):
        return tuple(self._scores)

    def reset_scores(self):
        """
        zero the scores and forget who opened last
        """
        self._scores = [0, 0]
        self._starting_index = 0
        _logger.debug("Scores and opening order reset")

    def _find_winning_line(self):
        # first line holding three equal, non-empty markers
        cells = self._board.read()
        for a, b, c in WINNING_LINES:
            if cells[a] and cells[a] == cells[b] == cells[c]:
                return (a, b, c)
        return None

    def _require_game(self):
        if not self._players:
            raise RuntimeError("no game in progress; call start_game first")
