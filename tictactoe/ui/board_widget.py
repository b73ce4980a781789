import logging

from PySide6.QtWidgets import QWidget, QSizePolicy
from PySide6.QtCore import Qt, QSize, Signal, QPointF
from PySide6.QtGui import QPainter, QColor, QPen

from ..game_logic import PLAYER_X, EMPTY

logger = logging.getLogger(__name__)

BACKGROUND_COLOR = "#333"
GRID_COLOR = "#555"
X_COLOR = "#8acaff"
O_COLOR = "#ff8a8a"
WIN_LINE_COLOR = "#ffd700"

class BoardWidget(QWidget):
    """
    custom widget to draw and click on tic-tac-toe board
    """
    cell_clicked = Signal(int)  # emits cell index 0..8 on click

    def __init__(self, game_logic, parent=None):
        super().__init__(parent)
        self.game_logic = game_logic  # reference to game state
        self.setSizePolicy(QSizePolicy.Ignored, QSizePolicy.Ignored)
        self.setMinimumSize(QSize(150, 150))
        self._accept_clicks = True      # toggle click handling

    def set_accept_clicks(self, accept):
        # enable/disable user input
        self._accept_clicks = accept

    def heightForWidth(self, width):
        # keep square shape
        return width

    def hasHeightForWidth(self):
        return True

    def _grid_geometry(self):
        # centered square: (offset_x, offset_y, side, cell_size)
        w, h = self.width(), self.height()
        side = min(w, h)
        return (w-side)/2, (h-side)/2, side, side / self.game_logic.board_size

    def _cell_center(self, index, geometry):
        ox, oy, _, cell = geometry
        row, col = divmod(index, self.game_logic.board_size)
        return QPointF(ox + col*cell + cell/2, oy + row*cell + cell/2)

    def cell_at(self, x, y):
        """
        map widget coords to a cell index, None if outside the grid
        """
        ox, oy, side, cell = self._grid_geometry()
        if cell <= 0 or not (ox <= x < ox+side and oy <= y < oy+side):
            return None
        size = self.game_logic.board_size
        col = int((x-ox)//cell); row = int((y-oy)//cell)
        # clamp to valid range
        row = max(0, min(row, size-1)); col = max(0, min(col, size-1))
        return row*size + col

    def paintEvent(self, event):
        """
        draw grid, X/O marks, and strike through the winning line
        """
        painter = QPainter(self)
        try:
            painter.setRenderHint(QPainter.Antialiasing, True)
            geometry = self._grid_geometry()
            ox, oy, side, cell_size = geometry
            # background
            painter.fillRect(self.rect(), QColor(BACKGROUND_COLOR))
            size = self.game_logic.board_size
            # grid lines
            painter.setPen(QPen(QColor(GRID_COLOR), 2))
            for i in range(1, size):
                x = ox + i*cell_size
                painter.drawLine(int(x), int(oy), int(x), int(oy+side))
                y = oy + i*cell_size
                painter.drawLine(int(ox), int(y), int(ox+side), int(y))
            # draw marks
            rad = cell_size/2 * 0.7
            for index, sym in enumerate(self.game_logic.snapshot().board):
                if sym == EMPTY: continue
                center = self._cell_center(index, geometry)
                cx, cy = center.x(), center.y()
                if sym == PLAYER_X:
                    painter.setPen(QPen(QColor(X_COLOR), 4))
                    # two crossing lines
                    painter.drawLine(QPointF(cx-rad, cy-rad), QPointF(cx+rad, cy+rad))
                    painter.drawLine(QPointF(cx+rad, cy-rad), QPointF(cx-rad, cy+rad))
                else:
                    painter.setPen(QPen(QColor(O_COLOR), 4))
                    painter.drawEllipse(center, rad, rad)
            # if won, strike the winning line end to end
            line = self.game_logic.winning_line()
            if line is not None:
                painter.setPen(QPen(QColor(WIN_LINE_COLOR), 8, Qt.SolidLine, Qt.RoundCap))
                painter.drawLine(self._cell_center(line[0], geometry),
                                 self._cell_center(line[-1], geometry))
        finally:
            painter.end()

    def mouseReleaseEvent(self, event):
        """
        handle clicks: map coords to board cell and emit
        """
        if not self._accept_clicks:
            return
        pos = event.position()
        index = self.cell_at(pos.x(), pos.y())
        # taken cells and finished games ignore clicks
        if index is None or not self.game_logic.is_playable(index):
            return
        logger.debug("cell %d clicked", index)
        self.cell_clicked.emit(index)  # notify main window
