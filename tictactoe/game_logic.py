import logging
from collections import namedtuple
from dataclasses import dataclass
from typing import Optional

logger = logging.getLogger(__name__)

EMPTY = ''
PLAYER_X = 'X'
PLAYER_O = 'O'
BOARD_CELLS = 9                     # fixed 3x3 grid, row-major 0..8

# rows, cols, diags
WINNING_LINES = (
    (0, 1, 2), (3, 4, 5), (6, 7, 8),
    (0, 3, 6), (1, 4, 7), (2, 5, 8),
    (0, 4, 8), (2, 4, 6),
)


@dataclass(frozen=True)
class Outcome:
    """
    game result: in_progress, won (with winner) or draw
    """
    status: str
    winner: Optional[str] = None

    @classmethod
    def won(cls, symbol):
        return cls("won", symbol)

    @property
    def is_over(self):
        return self.status != "in_progress"


IN_PROGRESS = Outcome("in_progress")
DRAW = Outcome("draw")

# read-only view of the engine handed to the ui
GameSnapshot = namedtuple("GameSnapshot", "board turn_symbol outcome move_count")


def other_player(symbol):
    return PLAYER_O if symbol == PLAYER_X else PLAYER_X


def winning_line(board):
    """
    first line holding three equal marks, or None
    """
    for a, b, c in WINNING_LINES:
        if board[a] != EMPTY and board[a] == board[b] == board[c]:
            return (a, b, c)
    return None


def evaluate_outcome(board, move_count):
    """
    recompute the result from scratch: any full line wins,
    otherwise a full board is a draw
    """
    line = winning_line(board)
    if line is not None:
        return Outcome.won(board[line[0]])
    if move_count == BOARD_CELLS:
        return DRAW
    return IN_PROGRESS


def status_text(outcome, turn):
    """
    label for the status bar, derived only from outcome and turn
    """
    if outcome == DRAW:
        return "Draw"
    if outcome.winner is not None:
        return f"Winner: {outcome.winner}"
    return f"Turn: {turn}"


class GameLogic:
    """
    tic-tac-toe rules and state
    """
    def __init__(self):
        """
        init board and counters
        """
        self.board_size = 3               # cells per side, used by the ui
        self.reset_game()

    def make_move(self, index):
        """
        place current player's mark at index, check result
        returns: 'win', 'draw', 'continue', or 'invalid'
        invalid moves leave the state untouched
        """
        if not self.is_playable(index):
            return "invalid"
        player = self.turn
        self.board[index] = player
        self.move_count += 1               # count this move
        self.outcome = evaluate_outcome(self.board, self.move_count)
        logger.debug("%s played cell %d (move %d)", player, index, self.move_count)
        if self.outcome == DRAW:
            logger.debug("board full, game drawn")
            return "draw"
        if self.outcome.is_over:
            logger.debug("%s wins on line %s", player, self.winning_line())
            return "win"
        self.turn = other_player(player)
        return "continue"

    def reset_game(self):
        """
        clear board and reset flags
        """
        # back to fresh state
        self.board = [EMPTY] * BOARD_CELLS
        self.turn = PLAYER_X               # X always starts
        self.outcome = IN_PROGRESS
        self.move_count = 0
        logger.info("new game started")

    @property
    def game_over(self):
        return self.outcome.is_over

    @property
    def winner(self):
        return self.outcome.winner

    def is_cell_empty(self, index):
        """
        true if index valid and cell blank
        """
        if isinstance(index, int) and 0 <= index < BOARD_CELLS:
            return self.board[index] == EMPTY
        return False

    def is_playable(self, index):
        return not self.game_over and self.is_cell_empty(index)

    def winning_line(self):
        return winning_line(self.board)

    def status_text(self):
        return status_text(self.outcome, self.turn)

    def snapshot(self):
        return GameSnapshot(tuple(self.board), self.turn, self.outcome, self.move_count)
