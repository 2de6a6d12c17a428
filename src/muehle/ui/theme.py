"""Visual theme constants and QSS styles for Mühle."""

from __future__ import annotations

from dataclasses import dataclass

from PyQt6.QtGui import QColor


@dataclass(frozen=True)
class BoardTheme:
    """Colour scheme for the board."""

    background: QColor
    line: QColor
    point: QColor
    stone_one: QColor  # Player One
    stone_two: QColor  # Player Two
    stone_outline: QColor
    highlight_selected: QColor  # stone picked up for a move
    highlight_removable: QColor  # stones that may be taken after a mill
    label: QColor  # point index text

    @classmethod
    def default(cls) -> BoardTheme:
        return cls(
            background=QColor(240, 217, 181),  # tan
            line=QColor(90, 60, 35),
            point=QColor(90, 60, 35),
            stone_one=QColor(250, 250, 245),  # white stones
            stone_two=QColor(35, 35, 35),  # black stones
            stone_outline=QColor(20, 20, 20),
            highlight_selected=QColor(255, 255, 0, 140),  # yellow transparent
            highlight_removable=QColor(255, 0, 0, 110),  # red transparent
            label=QColor(120, 90, 60),
        )

    @classmethod
    def walnut(cls) -> BoardTheme:
        return cls(
            background=QColor(118, 74, 47),
            line=QColor(228, 210, 184),
            point=QColor(228, 210, 184),
            stone_one=QColor(236, 222, 196),
            stone_two=QColor(40, 26, 18),
            stone_outline=QColor(15, 10, 5),
            highlight_selected=QColor(255, 255, 0, 140),
            highlight_removable=QColor(255, 0, 0, 110),
            label=QColor(200, 180, 150),
        )


THEMES: dict[str, BoardTheme] = {
    "Classic": BoardTheme.default(),
    "Walnut": BoardTheme.walnut(),
}


# ── Application-wide QSS ────────────────────────────────────────────────────

APP_STYLE = """
QMainWindow {
    background: #2b2b2b;
}

QLabel {
    color: #e0e0e0;
    font-family: "Adwaita Sans", "Helvetica Neue", sans-serif;
}

QMenuBar {
    background: #2b2b2b;
    color: #e0e0e0;
}
QMenuBar::item:selected {
    background: #3c3c3c;
}
QMenu {
    background: #2b2b2b;
    color: #e0e0e0;
    border: 1px solid #3c3c3c;
}
QMenu::item:selected {
    background: #264f78;
}
"""
