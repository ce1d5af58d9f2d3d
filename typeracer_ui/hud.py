"""Drawing: words, input line, cash and lives, power-ups, panels."""
from __future__ import annotations

import pygame

from typeracer.economy import POWER_UPS
from typeracer.game import GameView
from typeracer_ui.constants import (
    BG_COLOR,
    FONT_NAME,
    GAME_OVER_FONT_SIZE,
    HUD_COLOR,
    HUD_FONT_SIZE,
    INFO_BG,
    INFO_TEXT,
    INPUT_FONT_SIZE,
    LABEL_MARGIN,
    OUTLINE_COLOR,
    PANEL_MARGIN,
    TEXT_COLOR,
    WORD_FONT_SIZE,
    word_color,
)


class Fonts:
    def __init__(self) -> None:
        self.word = pygame.font.SysFont(FONT_NAME, WORD_FONT_SIZE)
        self.hud = pygame.font.SysFont(FONT_NAME, HUD_FONT_SIZE)
        self.input = pygame.font.SysFont(FONT_NAME, INPUT_FONT_SIZE)
        self.big = pygame.font.SysFont(FONT_NAME, GAME_OVER_FONT_SIZE, bold=True)


def info_lines() -> list[str]:
    lines = [
        "(+) to volume up",
        "(-) to volume down",
        "Buffs become visible when you have the required cash:",
    ]
    for defn in POWER_UPS.values():
        lines.append(f"({defn.key}) for {defn.label}  ({defn.cost}$)")
    lines += ["", "(Esc) to quit"]
    return lines


def _blit_lines(
    surface: pygame.Surface,
    font: pygame.font.Font,
    lines: list[str],
    color: tuple[int, int, int],
    background: tuple[int, int, int] | None = None,
) -> None:
    """Draw *lines* as a block centered on *surface*."""
    rendered = [font.render(line, True, color) for line in lines]
    width = max(r.get_width() for r in rendered)
    height = sum(r.get_height() for r in rendered)
    sw, sh = surface.get_size()
    x = (sw - width) // 2
    y = (sh - height) // 2
    if background is not None:
        pygame.draw.rect(
            surface,
            background,
            (x - PANEL_MARGIN, y - PANEL_MARGIN,
             width + PANEL_MARGIN * 2, height + PANEL_MARGIN * 2),
        )
    for r in rendered:
        surface.blit(r, (x, y))
        y += r.get_height()


def draw_words(
    surface: pygame.Surface, font: pygame.font.Font, view: GameView
) -> None:
    for word in view.words:
        label = font.render(word.text, True, word_color(word.color_changing, view.tick_number))
        pos = (int(word.x), int(word.y))
        surface.blit(label, pos)
        if view.practice:
            pygame.draw.rect(surface, OUTLINE_COLOR, label.get_rect(topleft=pos), 1)


def draw_top_bar(
    surface: pygame.Surface, font: pygame.font.Font, view: GameView, volume: float
) -> None:
    """Info hint and volume on the left, affordable power-ups on the right."""
    x = LABEL_MARGIN
    hint = font.render("(`) for Info|", True, HUD_COLOR)
    surface.blit(hint, (x, 0))
    x += hint.get_width() + LABEL_MARGIN
    surface.blit(font.render(f"Volume: {volume:.3f}", True, HUD_COLOR), (x, 0))

    right = surface.get_width() - LABEL_MARGIN
    for defn in reversed(view.affordable):
        label = font.render(f"({defn.key}) {defn.label} ({defn.cost}$)", True, HUD_COLOR)
        right -= label.get_width()
        surface.blit(label, (right, 0))
        right -= LABEL_MARGIN


def draw_bottom_bar(
    surface: pygame.Surface, font: pygame.font.Font, view: GameView
) -> None:
    """Input on the left, lives and cash on the right."""
    sw, sh = surface.get_size()
    current = font.render(f"Input: {view.input_buffer}", True, TEXT_COLOR)
    surface.blit(current, (0, sh - current.get_height()))

    cash = font.render(f"Cash: {view.currency}", True, TEXT_COLOR)
    cash_x = sw - cash.get_width() - LABEL_MARGIN
    surface.blit(cash, (cash_x, sh - cash.get_height()))

    lives = font.render(f"Lives: {view.lives}", True, TEXT_COLOR)
    surface.blit(lives, (cash_x - lives.get_width() - LABEL_MARGIN, sh - lives.get_height()))


def draw_game_over(
    surface: pygame.Surface, font: pygame.font.Font, view: GameView
) -> None:
    lines = [
        "Game over!",
        f"Words typed: {view.words_typed}",
        view.ending,
        "",
        "(Enter) to play again",
    ]
    _blit_lines(surface, font, lines, TEXT_COLOR)


def draw_frame(
    surface: pygame.Surface,
    fonts: Fonts,
    view: GameView,
    volume: float,
    show_info: bool,
) -> None:
    surface.fill(BG_COLOR)
    if view.game_over:
        draw_game_over(surface, fonts.big, view)
        return
    if show_info:
        _blit_lines(surface, fonts.hud, info_lines(), INFO_TEXT, background=INFO_BG)
    draw_top_bar(surface, fonts.hud, view, volume)
    draw_bottom_bar(surface, fonts.input, view)
    draw_words(surface, fonts.word, view)
