from PySide6.QtWidgets import QWidget, QSizePolicy
from PySide6.QtCore import QSize, Signal, QPointF, QRectF
from PySide6.QtGui import QPainter, QColor, QPen

from ..board import BOARD_SIZE, MARKER_X

BACKGROUND_COLOR = QColor("#333")
GRID_COLOR = QColor("#555")
X_COLOR = QColor("#8acaff")
O_COLOR = QColor("#ff8a8a")
WINNING_CELL_COLOR = QColor("#3f5f3f")


class BoardWidget(QWidget):
    """
    custom widget to draw and click on tic-tac-toe board
    """
    cell_clicked = Signal(int)  # emits cell index 0-8 on click

    def __init__(self, board, parent=None):
        super().__init__(parent)
        self.board = board              # reference to board state
        self.setSizePolicy(QSizePolicy.Ignored, QSizePolicy.Ignored)
        self.setMinimumSize(QSize(150, 150))
        self._highlighted = ()          # winning cell indices

    def highlight_cells(self, indices):
        # mark the winning line, redraw
        self._highlighted = tuple(indices)
        self.update()

    def clear_highlight(self):
        self._highlighted = ()
        self.update()

    def highlighted_cells(self):
        return self._highlighted

    def heightForWidth(self, width):
        # keep square shape
        return width

    def hasHeightForWidth(self):
        return True

    def _geometry(self):
        # square area centered in widget: (offset_x, offset_y, side)
        w, h = self.width(), self.height()
        side = min(w, h)
        return (w - side) / 2, (h - side) / 2, side

    def paintEvent(self, event):
        """
        draw grid, X/O marks, and highlight winning line
        """
        painter = QPainter(self)
        try:
            painter.setRenderHint(QPainter.Antialiasing, True)
            offset_x, offset_y, side = self._geometry()
            painter.fillRect(self.rect(), BACKGROUND_COLOR)
            cell_size = side / BOARD_SIZE
            cells = self.board.read()
            # winning cells behind everything else
            for index in self._highlighted:
                r, c = divmod(index, BOARD_SIZE)
                painter.fillRect(QRectF(offset_x + c*cell_size, offset_y + r*cell_size,
                                        cell_size, cell_size), WINNING_CELL_COLOR)
            # grid lines
            painter.setPen(QPen(GRID_COLOR, 2))
            for i in range(1, BOARD_SIZE):
                x = offset_x + i*cell_size
                painter.drawLine(int(x), int(offset_y), int(x), int(offset_y+side))
                y = offset_y + i*cell_size
                painter.drawLine(int(offset_x), int(y), int(offset_x+side), int(y))
            # draw marks
            for index, sym in enumerate(cells):
                if not sym: continue
                r, c = divmod(index, BOARD_SIZE)
                cx = offset_x + c*cell_size + cell_size/2
                cy = offset_y + r*cell_size + cell_size/2
                rad = cell_size/2 * 0.7
                if sym == MARKER_X:
                    painter.setPen(QPen(X_COLOR, 4))
                    # two crossing lines
                    painter.drawLine(QPointF(cx-rad, cy-rad), QPointF(cx+rad, cy+rad))
                    painter.drawLine(QPointF(cx+rad, cy-rad), QPointF(cx-rad, cy+rad))
                else:
                    painter.setPen(QPen(O_COLOR, 4))
                    painter.drawEllipse(QPointF(cx, cy), rad, rad)
        finally:
            painter.end()

    def index_at(self, x, y):
        """
        map widget coords to a cell index, None outside the grid
        """
        ox, oy, side = self._geometry()
        if side <= 0 or not (ox <= x < ox+side and oy <= y < oy+side):
            return None
        cell = side / BOARD_SIZE
        col = int((x-ox)//cell); row = int((y-oy)//cell)
        # clamp to valid range
        row = max(0, min(row, BOARD_SIZE-1)); col = max(0, min(col, BOARD_SIZE-1))
        return row*BOARD_SIZE + col

    def mouseReleaseEvent(self, event):
        """
        handle clicks: map coords to board cell and emit
        """
        index = self.index_at(event.position().x(), event.position().y())
        if index is not None:
            self.cell_clicked.emit(index)  # notify main window
