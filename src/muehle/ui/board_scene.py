"""BoardScene — QGraphicsScene that draws the Mühle board and stones."""

from __future__ import annotations

from collections.abc import Iterable
from typing import TYPE_CHECKING

from PyQt6.QtCore import QObject, QPointF, Qt, pyqtSignal
from PyQt6.QtGui import QBrush, QColor, QFont, QPen
from PyQt6.QtWidgets import (
    QGraphicsEllipseItem,
    QGraphicsLineItem,
    QGraphicsRectItem,
    QGraphicsScene,
    QGraphicsSceneMouseEvent,
    QGraphicsSimpleTextItem,
)

from muehle.core.enums import Player
from muehle.core.topology import GRID_SIZE, POINT_COORDS, lines
from muehle.core.types import POINT_COUNT, Point
from muehle.ui.theme import BoardTheme

if TYPE_CHECKING:
    from muehle.core.board import Board


class BoardScene(QGraphicsScene):
    """Renders the lines, points, labels, highlights and stones.

    The scene knows nothing about the rules: it reports clicks on points
    and the window decides what they mean.

    Signals:
        point_clicked(int): Emitted when the user clicks near a point.
    """

    point_clicked = pyqtSignal(int)

    TILE = 80  # px between neighbouring lattice positions
    MARGIN = 50
    POINT_RADIUS = 7
    STONE_RADIUS = 26

    def __init__(self, parent: QObject | None = None) -> None:
        super().__init__(parent)
        self._theme = BoardTheme.default()
        self._board: Board | None = None
        self._interactive = True
        self._show_labels = True
        self._selected: Point | None = None
        self._marked: list[Point] = []

        # Visual layers
        self._background: QGraphicsRectItem | None = None
        self._line_items: list[QGraphicsLineItem] = []
        self._point_items: dict[Point, QGraphicsEllipseItem] = {}
        self._label_items: list[QGraphicsSimpleTextItem] = []
        self._stone_items: dict[Point, QGraphicsEllipseItem] = {}
        self._highlight_items: list[QGraphicsEllipseItem] = []

        self._draw_board()

    # ── Public API ───────────────────────────────────────────────────────

    def set_board(self, board: Board) -> None:
        """Update the displayed stones (full redraw)."""
        self._board = board
        self._sync_stones()

    def refresh(self) -> None:
        """Redraw stones and highlights after the board changed in place."""
        self._sync_stones()

    def set_interactive(self, interactive: bool) -> None:
        """Enable / disable click reporting."""
        self._interactive = interactive

    def set_theme(self, theme: BoardTheme) -> None:
        self._theme = theme
        self._draw_board()
        self._sync_stones()

    def set_show_labels(self, visible: bool) -> None:
        """Show or hide point index labels."""
        self._show_labels = visible
        for item in self._label_items:
            item.setVisible(visible)

    def select_point(self, x: Point | None) -> None:
        """Highlight the stone picked up for a move (``None`` clears)."""
        self._selected = x
        self._sync_highlights()

    def mark_points(self, points: Iterable[Point]) -> None:
        """Highlight stones that may be removed."""
        self._marked = list(points)
        self._sync_highlights()

    @property
    def selected_point(self) -> Point | None:
        return self._selected

    # ── Board drawing ────────────────────────────────────────────────────

    def _draw_board(self) -> None:
        """Draw or redraw background, lines, points and labels."""
        if self._background is not None:
            self.removeItem(self._background)
        self._clear_items(self._line_items)
        self._clear_items(self._label_items)
        for item in self._point_items.values():
            self.removeItem(item)
        self._point_items.clear()

        t, m = self.TILE, self.MARGIN
        size = (GRID_SIZE - 1) * t + 2 * m

        self._background = QGraphicsRectItem(0, 0, size, size)
        self._background.setBrush(QBrush(self._theme.background))
        self._background.setPen(QPen(Qt.PenStyle.NoPen))
        self._background.setZValue(-1)
        self.addItem(self._background)

        pen = QPen(self._theme.line, 4)
        for x, y in lines():
            a, b = self._point_center(x), self._point_center(y)
            line = QGraphicsLineItem(a.x(), a.y(), b.x(), b.y())
            line.setPen(pen)
            line.setZValue(0)
            self.addItem(line)
            self._line_items.append(line)

        font = QFont("Adwaita Sans", 10)
        r = self.POINT_RADIUS
        for x in range(POINT_COUNT):
            c = self._point_center(x)
            dot = QGraphicsEllipseItem(c.x() - r, c.y() - r, 2 * r, 2 * r)
            dot.setBrush(QBrush(self._theme.point))
            dot.setPen(QPen(Qt.PenStyle.NoPen))
            dot.setZValue(0.2)
            self.addItem(dot)
            self._point_items[x] = dot

            txt = QGraphicsSimpleTextItem(str(x))
            txt.setFont(font)
            txt.setBrush(QBrush(self._theme.label))
            txt.setPos(c.x() + r + 2, c.y() + r)
            txt.setZValue(0.3)
            txt.setVisible(self._show_labels)
            self.addItem(txt)
            self._label_items.append(txt)

        self.setSceneRect(0, 0, size, size)

    # ── Stone synchronisation ────────────────────────────────────────────

    def _sync_stones(self) -> None:
        """Re-create all stone items from the current board."""
        for item in self._stone_items.values():
            self.removeItem(item)
        self._stone_items.clear()

        if self._board is not None:
            colors = {
                Player.ONE: self._theme.stone_one,
                Player.TWO: self._theme.stone_two,
            }
            for x in range(POINT_COUNT):
                owner = self._board.occupant(x)
                if owner == Player.NONE:
                    continue
                stone = self._make_disc(x, self.STONE_RADIUS, colors[owner])
                stone.setPen(QPen(self._theme.stone_outline, 2))
                stone.setZValue(1)
                self._stone_items[x] = stone

        self._sync_highlights()

    def _sync_highlights(self) -> None:
        self._clear_items(self._highlight_items)
        ring = self.STONE_RADIUS + 6
        if self._selected is not None:
            item = self._make_disc(self._selected, ring, self._theme.highlight_selected)
            self._highlight_items.append(item)
        for x in self._marked:
            item = self._make_disc(x, ring, self._theme.highlight_removable)
            self._highlight_items.append(item)

    # ── Mouse interaction ────────────────────────────────────────────────

    def mousePressEvent(self, event: QGraphicsSceneMouseEvent | None) -> None:
        if not self._interactive or event is None:
            return super().mousePressEvent(event)

        x = self._pos_to_point(event.scenePos())
        if x is not None:
            self.point_clicked.emit(x)
            return
        super().mousePressEvent(event)

    # ── Coordinate helpers ───────────────────────────────────────────────

    def _point_center(self, x: Point) -> QPointF:
        col, row = POINT_COORDS[x]
        return QPointF(self.MARGIN + col * self.TILE, self.MARGIN + row * self.TILE)

    def _pos_to_point(self, pos: QPointF) -> Point | None:
        """Scene position → nearest point within a stone radius."""
        limit = self.STONE_RADIUS * self.STONE_RADIUS
        for x in range(POINT_COUNT):
            c = self._point_center(x)
            dx, dy = pos.x() - c.x(), pos.y() - c.y()
            if dx * dx + dy * dy <= limit:
                return x
        return None

    def _make_disc(
        self, x: Point, radius: float, color: QColor
    ) -> QGraphicsEllipseItem:
        """Create a filled circle centred on point *x*."""
        c = self._point_center(x)
        disc = QGraphicsEllipseItem(
            c.x() - radius, c.y() - radius, 2 * radius, 2 * radius
        )
        disc.setBrush(QBrush(color))
        disc.setPen(QPen(Qt.PenStyle.NoPen))
        disc.setZValue(0.8)
        self.addItem(disc)
        return disc

    def _clear_items(self, items: list) -> None:
        for item in items:
            self.removeItem(item)
        items.clear()
