from __future__ import annotations

import colorsys
import logging
import random
from typing import Optional, Tuple

import pygame

from .board import queen_cells
from .catalog import generated_daily_puzzle, get_daily_puzzle
from .config import CELL_PX, FPS, GRID_BORDER, PAD, PLAY_SIZES, REGION_BORDER, TOP_BAR
from .model import Cell, CellState, Puzzle
from .regions import generate_regions
from .session import GameSession

logger = logging.getLogger("kweens_play")

BG = (245, 245, 245)
TEXT = (20, 20, 20)
BLACK = (0, 0, 0)
MARK = (30, 30, 30)
GRID_LINE = (45, 45, 45)
FORBIDDEN_MARK = (150, 150, 150)
QUEEN_FILL = (250, 200, 40)
ILLEGAL_RED = (220, 40, 40)
WIN_GREEN = (30, 150, 60)


# ============================================================
# Helpers
# ============================================================
def board_origin():
    return PAD, PAD + TOP_BAR


def cell_rect(r, c, CELL):
    left, top = board_origin()
    return pygame.Rect(left + c * CELL, top + r * CELL, CELL, CELL)


def cell_at(pos: Tuple[int, int], N: int, CELL: int) -> Optional[Cell]:
    """Board cell under a pixel position, or None outside the board."""
    left, top = board_origin()
    mx, my = pos
    if not pygame.Rect(left, top, N * CELL, N * CELL).collidepoint(mx, my):
        return None
    return (my - top) // CELL, (mx - left) // CELL


def pastel_palette(k: int, rng=None):
    """k evenly spaced soft hues in shuffled order."""
    cols = [
        tuple(int(v * 255) for v in colorsys.hsv_to_rgb(i / k, 0.40, 0.98))
        for i in range(k)
    ]
    (rng or random).shuffle(cols)
    return cols


def draw_text(screen, msg, x, y, f, color=TEXT):
    screen.blit(f.render(msg, True, color), (x, y))


def random_puzzle(N: int) -> Puzzle:
    seed = random.randrange(2 ** 31)
    regions = generate_regions(N, seed, require_solvable=True)
    logger.info("Generated %dx%d puzzle from seed %d", N, N, seed)
    return Puzzle(id=f"generated-{N}x{N}-{seed}", name=f"Generated {N}x{N} Puzzle", size=N, regions=regions)


# ============================================================
# Drawing
# ============================================================
def draw_edges(screen, regions, N, CELL):
    """Thin lines inside a region, thick ones where two regions meet."""
    left, top = board_origin()
    for r in range(N):
        for c in range(N):
            rect = cell_rect(r, c, CELL)
            if c + 1 < N:
                width = REGION_BORDER if regions[r][c] != regions[r][c + 1] else GRID_BORDER
                color = BLACK if width == REGION_BORDER else GRID_LINE
                pygame.draw.line(screen, color, rect.topright, rect.bottomright, width)
            if r + 1 < N:
                width = REGION_BORDER if regions[r][c] != regions[r + 1][c] else GRID_BORDER
                color = BLACK if width == REGION_BORDER else GRID_LINE
                pygame.draw.line(screen, color, rect.bottomleft, rect.bottomright, width)
    pygame.draw.rect(screen, BLACK, pygame.Rect(left, top, N * CELL, N * CELL), REGION_BORDER)


def draw_cross(screen, rect, color, width):
    cx, cy = rect.center
    s = int(rect.width * 0.25)
    pygame.draw.line(screen, color, (cx - s, cy - s), (cx + s, cy + s), width)
    pygame.draw.line(screen, color, (cx - s, cy + s), (cx + s, cy - s), width)


def draw_queen(screen, rect):
    cx, cy = rect.center
    w = int(rect.width * 0.30)
    base = cy + w // 2
    crown = [
        (cx - w, base), (cx - w, cy - w // 2), (cx - w // 2, cy),
        (cx, cy - w), (cx + w // 2, cy), (cx + w, cy - w // 2), (cx + w, base),
    ]
    pygame.draw.polygon(screen, QUEEN_FILL, crown)
    pygame.draw.polygon(screen, MARK, crown, 2)


def draw_board(state):
    screen = state["screen"]
    session: GameSession = state["session"]
    N = session.size
    CELL = state["CELL"]
    regions = session.puzzle.regions
    region_colors = state["region_colors"]

    screen.fill(BG)
    pygame.draw.rect(screen, (235, 235, 235), pygame.Rect(0, 0, state["W"], TOP_BAR + PAD))

    for r in range(N):
        for c in range(N):
            pygame.draw.rect(screen, region_colors[regions[r][c]], cell_rect(r, c, CELL))

    draw_edges(screen, regions, N, CELL)

    shown = session.forbidden
    conflicts = session.conflicts
    for r in range(N):
        for c in range(N):
            rect = cell_rect(r, c, CELL)
            v = shown[r][c]
            if v == CellState.X:
                draw_cross(screen, rect, MARK, 3)
            elif v == CellState.FORBIDDEN:
                draw_cross(screen, rect, FORBIDDEN_MARK, 1)
            elif v == CellState.DOT:
                pygame.draw.circle(screen, MARK, rect.center, max(3, CELL // 12))

    for r, c in queen_cells(session.board):
        rect = cell_rect(r, c, CELL)
        draw_queen(screen, rect)
        if conflicts[r][c]:
            pygame.draw.rect(screen, ILLEGAL_RED, rect, 4)

    return any(any(row) for row in conflicts)


def draw_info_panel(state):
    screen = state["screen"]
    session: GameSession = state["session"]
    f = state["font_tiny"]
    N = session.size
    lines = [
        session.puzzle.name,
        "D Daily  T Today  5-9 New NxN  R New  C Clear  ESC Quit",
        "Click = X / Queen / empty   Right click = dot",
        f"Queens {session.queens}/{N}",
    ]
    y = 10
    lh = f.get_linesize() + 2
    for line in lines:
        draw_text(screen, line, PAD, y, f, TEXT)
        y += lh


# ============================================================
# State
# ============================================================
def build_state(puzzle: Puzzle, fonts):
    N = puzzle.size
    CELL = CELL_PX.get(N, 60)
    W = PAD * 2 + N * CELL
    H = PAD * 2 + TOP_BAR + N * CELL

    screen = pygame.display.set_mode((W, H))
    pygame.display.set_caption(f"Kweens - {puzzle.name}")

    return {
        "session": GameSession(puzzle),
        "screen": screen,
        "CELL": CELL, "W": W, "H": H,
        "region_colors": pastel_palette(N),
        "solved": False,
        **fonts,
    }


# ============================================================
# Main
# ============================================================
def main():
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(name)s %(levelname)s %(message)s")
    pygame.init()
    clock = pygame.time.Clock()
    fonts = {
        "font": pygame.font.SysFont(["Times New Roman", "Times"], 28),
        "font_tiny": pygame.font.SysFont(["Times New Roman", "Times"], 18),
    }

    state = build_state(get_daily_puzzle(), fonts)
    running = True

    while running:
        clock.tick(FPS)

        for event in pygame.event.get():
            session: GameSession = state["session"]
            if event.type == pygame.QUIT:
                running = False

            elif event.type == pygame.KEYDOWN:
                if event.key == pygame.K_ESCAPE:
                    running = False
                elif event.key == pygame.K_c:
                    session.reset()
                elif event.key == pygame.K_d:
                    state = build_state(get_daily_puzzle(), fonts)
                elif event.key == pygame.K_t:
                    state = build_state(generated_daily_puzzle(), fonts)
                elif event.key == pygame.K_r:
                    state = build_state(random_puzzle(max(session.size, PLAY_SIZES[0])), fonts)
                elif event.unicode and event.unicode.isdigit() and int(event.unicode) in PLAY_SIZES:
                    state = build_state(random_puzzle(int(event.unicode)), fonts)

            elif event.type == pygame.MOUSEBUTTONDOWN:
                cell = cell_at(event.pos, session.size, state["CELL"])
                if cell is None:
                    continue
                if event.button == 1:
                    session.tap(*cell)
                elif event.button == 3:
                    session.long_press(*cell)

        session = state["session"]
        illegal = draw_board(state)
        draw_info_panel(state)

        won = session.won
        if won and not state["solved"]:
            logger.info("Solved %s", session.puzzle.id)
        state["solved"] = won

        if won:
            draw_text(state["screen"], "Solved!", PAD, TOP_BAR - 30, state["font"], WIN_GREEN)
        elif illegal:
            draw_text(state["screen"], "Illegal placement", PAD, TOP_BAR - 30, state["font"], ILLEGAL_RED)

        pygame.display.flip()

    pygame.quit()


if __name__ == "__main__":
    main()
