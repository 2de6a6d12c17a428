"""MainWindow — top-level window assembling the board and status line."""

from __future__ import annotations

import logging

from PyQt6.QtGui import QAction, QActionGroup, QKeySequence
from PyQt6.QtWidgets import QLabel, QMainWindow, QVBoxLayout, QWidget

from muehle.core.enums import Player
from muehle.core.types import Point
from muehle.game.controller import GameController
from muehle.game.interfaces import GamePhase, GameSettings, RejectReason
from muehle.i18n import LANGUAGES, set_language, t
from muehle.ui.board_view import BoardView
from muehle.ui.theme import THEMES

_LOGGER = logging.getLogger(__name__)


class MainWindow(QMainWindow):
    """Main application window for Mühle.

    Clicks on the board are translated into controller actions according
    to the current phase: placing, removing after a mill, or picking up
    one of the mover's stones and then clicking its destination.
    """

    def __init__(self, settings: GameSettings | None = None) -> None:
        super().__init__()
        self.setMinimumSize(520, 600)
        self.resize(640, 720)

        self._controller = GameController(settings)

        self._setup_ui()
        self._setup_menu()
        self._connect_signals()
        self._connect_game_events()

        self._new_game()

    # ── UI setup ─────────────────────────────────────────────────────────

    def _setup_ui(self) -> None:
        central = QWidget()
        self.setCentralWidget(central)
        root = QVBoxLayout(central)
        root.setContentsMargins(6, 6, 6, 6)
        root.setSpacing(6)

        self._turn_label = QLabel()
        self._turn_label.setStyleSheet("font-size: 15px; font-weight: bold;")
        root.addWidget(self._turn_label)

        self._board_view = BoardView()
        root.addWidget(self._board_view, stretch=1)

        self._count_label = QLabel()
        root.addWidget(self._count_label)

    def _setup_menu(self) -> None:
        mb = self.menuBar()
        assert mb is not None
        self._game_menu = mb.addMenu("")
        assert self._game_menu is not None

        self._act_new = QAction(self)
        self._act_new.setShortcut(QKeySequence.StandardKey.New)
        self._act_new.triggered.connect(self._new_game)
        self._game_menu.addAction(self._act_new)

        self._act_labels = QAction(self)
        self._act_labels.setCheckable(True)
        self._act_labels.setChecked(True)
        self._act_labels.toggled.connect(self._board_view.board_scene.set_show_labels)
        self._game_menu.addAction(self._act_labels)

        self._theme_menu = self._game_menu.addMenu("")
        assert self._theme_menu is not None
        theme_group = QActionGroup(self)
        for name in THEMES:
            act = QAction(name, self)
            act.setCheckable(True)
            act.setChecked(name == "Classic")
            act.triggered.connect(lambda _checked, n=name: self._apply_theme(n))
            theme_group.addAction(act)
            self._theme_menu.addAction(act)

        self._language_menu = self._game_menu.addMenu("")
        assert self._language_menu is not None
        language_group = QActionGroup(self)
        for name in LANGUAGES:
            act = QAction(name, self)
            act.setCheckable(True)
            act.setChecked(name == "English")
            act.triggered.connect(lambda _checked, n=name: self._apply_language(n))
            language_group.addAction(act)
            self._language_menu.addAction(act)

        self._game_menu.addSeparator()
        self._act_quit = QAction(self)
        self._act_quit.setShortcut(QKeySequence.StandardKey.Quit)
        self._act_quit.triggered.connect(self.close)
        self._game_menu.addAction(self._act_quit)

        self.retranslate_ui()

    def retranslate_ui(self) -> None:
        s = t()
        self.setWindowTitle(s.window_title)
        self._game_menu.setTitle(s.menu_game)
        self._act_new.setText(s.menu_new_game)
        self._act_labels.setText(s.menu_show_labels)
        self._theme_menu.setTitle(s.menu_theme)
        self._language_menu.setTitle(s.menu_language)
        self._act_quit.setText(s.menu_quit)
        self._refresh()

    def _connect_signals(self) -> None:
        self._board_view.point_clicked.connect(self._on_point_clicked)

    def _connect_game_events(self) -> None:
        ev = self._controller.events
        ev.on_invalid_move.append(self._on_invalid_move)
        ev.on_mill_formed.append(self._on_mill_formed)
        ev.on_game_over.append(self._on_game_over)

    # ── Game actions ─────────────────────────────────────────────────────

    def _new_game(self) -> None:
        self._controller.new_game()
        self._board_view.board_scene.set_board(self._controller.board)
        self._board_view.board_scene.select_point(None)
        self._board_view.board_scene.set_interactive(True)
        self._refresh()

    def _on_point_clicked(self, x: Point) -> None:
        ctrl = self._controller
        state = ctrl.state
        scene = self._board_view.board_scene

        if state.is_game_over:
            return
        if state.pending_removal is not None:
            ctrl.remove_stone(x)
        elif state.phase == GamePhase.PLACEMENT:
            ctrl.place(x)
        elif ctrl.board.occupant(x) == state.side_to_move:
            scene.select_point(x)
            return
        elif scene.selected_point is None:
            self.statusBar().showMessage(t().status_select_stone, 3000)
            return
        else:
            origin = scene.selected_point
            if ctrl.move(origin, x):
                scene.select_point(None)

        self._refresh()

    def _apply_theme(self, name: str) -> None:
        self._board_view.board_scene.set_theme(THEMES[name])

    def _apply_language(self, name: str) -> None:
        set_language(name)
        self.retranslate_ui()

    # ── Event handlers ───────────────────────────────────────────────────

    def _on_invalid_move(self, reason: RejectReason) -> None:
        _LOGGER.debug("Invalid click: %s", reason.name)
        self.statusBar().showMessage(
            t().invalid_move.format(reason=t().reason(reason)), 4000
        )

    def _on_mill_formed(self, player: Player, point: Point) -> None:
        self.statusBar().showMessage(
            t().mill_formed.format(player=t().player_name(player)), 4000
        )

    def _on_game_over(self, winner: Player) -> None:
        self._board_view.board_scene.set_interactive(False)

    # ── Display ──────────────────────────────────────────────────────────

    def _refresh(self) -> None:
        ctrl = self._controller
        scene = self._board_view.board_scene
        scene.refresh()
        scene.mark_points(ctrl.removable_points())
        self._turn_label.setText(self.status_text())

        board = ctrl.board
        self._count_label.setText(
            "   ".join(
                t().stones_on_board.format(
                    player=t().player_name(p), count=board.count_stones(p)
                )
                for p in (Player.ONE, Player.TWO)
            )
        )

    def status_text(self) -> str:
        """One-line description of whose turn it is and what to do."""
        s = t()
        state = self._controller.state
        if state.is_game_over:
            return s.status_winner.format(player=s.player_name(state.winner))
        if state.pending_removal is not None:
            return s.status_remove.format(player=s.player_name(state.pending_removal))

        player = state.side_to_move
        name = s.player_name(player)
        if state.phase == GamePhase.PLACEMENT:
            return s.status_place.format(
                player=name, count=state.stones_in_hand[player]
            )
        if self._controller.can_fly(player):
            return s.status_fly.format(player=name)
        return s.status_move.format(player=name)
