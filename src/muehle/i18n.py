"""Internationalisation strings for the terminal and Qt front-ends.

Usage::

    from muehle.i18n import t, set_language

    set_language("German")
    print(t().player_name(Player.ONE))   # "Spieler Eins"
    print(t().reason(RejectReason.OCCUPIED))
"""

from __future__ import annotations

from dataclasses import dataclass

from muehle.core.enums import Player
from muehle.game.interfaces import GamePhase, RejectReason


@dataclass(frozen=True)
class Strings:
    # ── Players / phases ─────────────────────────────────────────────────
    player_none: str
    player_one: str
    player_two: str

    phase_placement: str
    phase_sliding: str
    phase_flying: str
    phase_finished: str

    # ── Terminal ─────────────────────────────────────────────────────────
    welcome: str
    quit_hint: str
    legend_title: str
    board_title: str
    stones_on_board: str  # "{player}", "{count}"
    prompt_place: str  # "{player}"
    prompt_move: str  # "{player}"
    prompt_jump: str  # "{player}"
    prompt_remove: str  # "{player}"
    invalid_input: str  # "{error}"
    invalid_move: str  # "{reason}"
    mill_formed: str  # "{player}"
    stone_removed: str  # "{player}", "{point}"
    game_finished: str  # "{player}"
    game_abandoned: str

    # ── Main window ──────────────────────────────────────────────────────
    window_title: str
    menu_game: str
    menu_new_game: str
    menu_show_labels: str
    menu_theme: str
    menu_language: str
    menu_quit: str
    status_place: str  # "{player}", "{count}" stones in hand
    status_move: str  # "{player}"
    status_fly: str  # "{player}"
    status_remove: str  # "{player}"
    status_select_stone: str
    status_winner: str  # "{player}"

    # ── Reject reasons ───────────────────────────────────────────────────
    reject_game_over: str
    reject_removal_pending: str
    reject_wrong_phase: str
    reject_invalid_point: str
    reject_occupied: str
    reject_not_own_stone: str
    reject_not_adjacent: str
    reject_same_point: str
    reject_not_opponent_stone: str
    reject_protected_by_mill: str
    reject_no_removal_pending: str

    def player_name(self, player: Player) -> str:
        return getattr(self, f"player_{player.name.lower()}")

    def phase_name(self, phase: GamePhase) -> str:
        return getattr(self, f"phase_{phase.name.lower()}")

    def reason(self, reason: RejectReason) -> str:
        return getattr(self, f"reject_{reason.name.lower()}")


_EN = Strings(
    player_none="None (Draw)",
    player_one="Player One",
    player_two="Player Two",
    phase_placement=(
        "Phase 1: You can place stones freely on the board "
        "(enter a number indicating where you want to place your stone)."
    ),
    phase_sliding="Phase 2: You can move one of your stones to an adjacent empty spot.",
    phase_flying=(
        "Phase 3: Players with only 3 stones left can jump freely on the board."
    ),
    phase_finished="The game is over.",
    welcome="Welcome to Muehle!",
    quit_hint="Type q at any prompt to leave the game, e.g. when you cannot move.",
    legend_title="Points are numbered row by row:",
    board_title="Current board state:",
    stones_on_board="Number of stones on board {player}: {count}",
    prompt_place="{player} where do you want to place your next stone?",
    prompt_move=(
        "{player} what is your next move? (Format: Type 0,1 to move stone 0 to 1)"
    ),
    prompt_jump=(
        "{player} what is your next move? "
        "(Format: Type 0,10 to jump with stone 0 to 10)"
    ),
    prompt_remove=(
        "{player} pass a location where a stone of the opponent shall be removed:"
    ),
    invalid_input="Invalid input ({error}). Try again.",
    invalid_move="Invalid move ({reason}). Try again.",
    mill_formed="{player} You have a MILL!",
    stone_removed="{player} removed the stone on {point}.",
    game_finished="Game finished. Winner is {player}",
    game_abandoned="Game abandoned.",
    window_title="Mühle",
    menu_game="&Game",
    menu_new_game="&New game",
    menu_show_labels="Show point &numbers",
    menu_theme="Board &theme",
    menu_language="&Language",
    menu_quit="&Quit",
    status_place="{player}: place a stone ({count} left)",
    status_move="{player}: move a stone to an adjacent point",
    status_fly="{player}: move a stone to any empty point",
    status_remove="{player} closed a mill: remove an opposing stone",
    status_select_stone="Select one of your stones first.",
    status_winner="Game over. Winner is {player}",
    reject_game_over="the game is over",
    reject_removal_pending="a stone has to be removed first",
    reject_wrong_phase="not allowed in this phase",
    reject_invalid_point="no such point",
    reject_occupied="that point is occupied",
    reject_not_own_stone="that is not your stone",
    reject_not_adjacent="the points are not connected",
    reject_same_point="origin and destination are the same",
    reject_not_opponent_stone="that is not an opposing stone",
    reject_protected_by_mill="that stone is protected by a mill",
    reject_no_removal_pending="there is nothing to remove",
)

_DE = Strings(
    player_none="Niemand (Remis)",
    player_one="Spieler Eins",
    player_two="Spieler Zwei",
    phase_placement=(
        "Phase 1: Setze deine Steine frei auf das Brett "
        "(gib die Nummer des gewünschten Punktes ein)."
    ),
    phase_sliding="Phase 2: Ziehe einen Stein auf einen benachbarten freien Punkt.",
    phase_flying="Phase 3: Wer nur noch 3 Steine hat, darf frei springen.",
    phase_finished="Das Spiel ist beendet.",
    welcome="Willkommen bei Mühle!",
    quit_hint=(
        "Gib q ein, um das Spiel zu verlassen, z. B. wenn du nicht ziehen kannst."
    ),
    legend_title="Die Punkte sind zeilenweise nummeriert:",
    board_title="Aktueller Spielstand:",
    stones_on_board="Steine auf dem Brett, {player}: {count}",
    prompt_place="{player}, wohin setzt du deinen nächsten Stein?",
    prompt_move="{player}, dein Zug? (Format: 0,1 zieht den Stein von 0 nach 1)",
    prompt_jump=(
        "{player}, dein Zug? (Format: 0,10 springt mit dem Stein von 0 nach 10)"
    ),
    prompt_remove="{player}, welchen gegnerischen Stein nimmst du vom Brett?",
    invalid_input="Ungültige Eingabe ({error}). Bitte erneut versuchen.",
    invalid_move="Ungültiger Zug ({reason}). Bitte erneut versuchen.",
    mill_formed="{player} hat eine MÜHLE!",
    stone_removed="{player} hat den Stein auf {point} entfernt.",
    game_finished="Spiel beendet. Gewinner ist {player}",
    game_abandoned="Spiel abgebrochen.",
    window_title="Mühle",
    menu_game="&Spiel",
    menu_new_game="&Neues Spiel",
    menu_show_labels="Punkt&nummern anzeigen",
    menu_theme="Brett&design",
    menu_language="&Sprache",
    menu_quit="&Beenden",
    status_place="{player}: Stein setzen (noch {count})",
    status_move="{player}: Stein auf einen Nachbarpunkt ziehen",
    status_fly="{player}: Stein auf einen beliebigen freien Punkt springen",
    status_remove="{player} hat eine Mühle: gegnerischen Stein entfernen",
    status_select_stone="Wähle zuerst einen eigenen Stein.",
    status_winner="Spiel beendet. Gewinner ist {player}",
    reject_game_over="das Spiel ist beendet",
    reject_removal_pending="zuerst muss ein Stein entfernt werden",
    reject_wrong_phase="in dieser Phase nicht erlaubt",
    reject_invalid_point="diesen Punkt gibt es nicht",
    reject_occupied="der Punkt ist besetzt",
    reject_not_own_stone="das ist nicht dein Stein",
    reject_not_adjacent="die Punkte sind nicht verbunden",
    reject_same_point="Start und Ziel sind gleich",
    reject_not_opponent_stone="das ist kein gegnerischer Stein",
    reject_protected_by_mill="der Stein steht in einer Mühle",
    reject_no_removal_pending="es ist nichts zu entfernen",
)

_LOCALES: dict[str, Strings] = {
    "English": _EN,
    "German": _DE,
}

LANGUAGES: list[str] = list(_LOCALES.keys())

_current: Strings = _EN


def t() -> Strings:
    """Return the active locale strings."""
    return _current


def set_language(language: str) -> None:
    """Switch the global locale. Unknown names fall back to English."""
    global _current
    _current = _LOCALES.get(language, _EN)
