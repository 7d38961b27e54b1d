import logging

_logger = logging.getLogger(__name__)

EMPTY = ''                # blank cell
MARKER_X = 'X'            # player 1
MARKER_O = 'O'            # player 2
BOARD_SIZE = 3            # fixed 3x3 grid
CELL_COUNT = BOARD_SIZE * BOARD_SIZE


class Board:
    """
    nine cells in row-major order, written only when empty
    """
    def __init__(self):
        """
        start with an empty grid
        """
        self._cells = [EMPTY] * CELL_COUNT

    def read(self):
        """
        snapshot of all nine cells
        """
        return tuple(self._cells)

    def cell(self, index):
        # single cell lookup, no negative wrap-around
        if not 0 <= index < CELL_COUNT:
            raise IndexError(f"cell index {index} out of range")
        return self._cells[index]

    def write_if_empty(self, index, marker):
        """
        place marker at index if it is in range and blank
        returns: True on success, False otherwise (board untouched)
        """
        if not isinstance(index, int) or isinstance(index, bool):
            _logger.debug(f"Rejected non-integer cell index {index!r}")
            return False
        if not 0 <= index < CELL_COUNT:
            _logger.debug(f"Rejected out-of-range cell index {index}")
            return False
        if self._cells[index] != EMPTY:
            _logger.debug(f"Rejected occupied cell {index} ({self._cells[index]})")
            return False
        self._cells[index] = marker
        return True

    def reset(self):
        # back to blank
        self._cells = [EMPTY] * CELL_COUNT

    def is_full(self):
        return all(cell != EMPTY for cell in self._cells)

    def __str__(self):
        rows = []
        for r in range(BOARD_SIZE):
            row = self._cells[r * BOARD_SIZE:(r + 1) * BOARD_SIZE]
            rows.append(" | ".join(c or " " for c in row))
        return "\n---------\n".join(rows)
