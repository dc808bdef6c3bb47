# pygame_runner.py
"""
Pygame-CE frontend for the Cascade prototype.

Architecture:
- Lattice space: (x, y, z) cell coordinates of the fluid grid, y up
- Virtual screen space: fixed 1280x720 UI layout surface
- Screen space: actual window pixels (scales with resize)

The orbit camera projects occupied cells into the viewport each frame.
The simulation ticks on a fixed wall-clock interval, independent of FPS.

Controls: see keybindings.CONTROL_DESCRIPTIONS (press H in the window).
"""
from __future__ import annotations

import argparse
import sys
from typing import List, Optional

try:
    import pygame
except ImportError as exc:
    raise SystemExit("pygame-ce is required. Install with: pip install pygame-ce") from exc

from main import handle_command, simulate_tick
from camera import Camera
from game_state import SimState, build_initial_state
from world.generation import SCENARIOS
from keybindings import (
    CONTROL_DESCRIPTIONS,
    CURSOR_KEYS,
    ORBIT_KEYS,
    POUR_KEY,
    DRAIN_KEY,
    SURVEY_KEY,
    STEP_KEY,
    PAUSE_KEY,
    RESET_KEY,
    STATUS_KEY,
    QUIT_KEY,
    HELP_KEY,
)
from config import (
    DEFAULT_SCENARIO,
    DEFAULT_SEED,
    GRID_WIDTH,
    GRID_HEIGHT,
    GRID_DEPTH,
    TICK_INTERVAL,
)
from render.config import (
    VIRTUAL_WIDTH,
    VIRTUAL_HEIGHT,
    SIDEBAR_WIDTH,
    LOG_PANEL_HEIGHT,
    MINIMAP_SIZE,
    FONT_SIZE,
    COLOR_BG_DARK,
    ROTATE_STEP_DEG,
    ZOOM_STEP,
)
from render import (
    render_viewport,
    render_hud,
    render_minimap,
    render_help_overlay,
    render_pause_overlay,
    render_event_log,
)

# Key -> (command, args) for one-shot actions
ACTION_KEYS = {
    POUR_KEY: ("pour", []),
    DRAIN_KEY: ("drain", []),
    SURVEY_KEY: ("survey", []),
    STATUS_KEY: ("status", []),
    PAUSE_KEY: ("pause", []),
    RESET_KEY: ("reset", []),
}


def render_to_virtual_screen(
    virtual_screen: pygame.Surface,
    map_surface: pygame.Surface,
    font,
    state: SimState,
    camera: Camera,
    show_help: bool,
) -> None:
    """Render everything to the virtual screen at fixed resolution."""
    virtual_screen.fill(COLOR_BG_DARK)

    # 1. Voxel viewport (left of the sidebar, above the log)
    levels = state.grid.levels
    drawn = render_viewport(map_surface, levels, camera, state.cursor)
    if state.paused:
        render_pause_overlay(map_surface, font)
    virtual_screen.blit(map_surface, (0, 0))

    # 2. Sidebar: minimap then HUD
    sidebar_x = VIRTUAL_WIDTH - SIDEBAR_WIDTH + 12
    minimap_rect = pygame.Rect(sidebar_x, 12, MINIMAP_SIZE, MINIMAP_SIZE)
    render_minimap(virtual_screen, levels, state.cursor, minimap_rect)
    render_hud(virtual_screen, font, state, sidebar_x, minimap_rect.bottom + 12, voxels_drawn=drawn)

    # 3. Log panel (or help)
    log_top = VIRTUAL_HEIGHT - LOG_PANEL_HEIGHT
    pygame.draw.line(virtual_screen, (80, 80, 80), (0, log_top), (VIRTUAL_WIDTH, log_top), 2)
    log_x, log_y = 12, log_top + 8
    if show_help:
        render_help_overlay(virtual_screen, font, CONTROL_DESCRIPTIONS,
                            (log_x, log_y), VIRTUAL_WIDTH - 24, LOG_PANEL_HEIGHT - 16)
    else:
        render_event_log(virtual_screen, font, state, (log_x, log_y), LOG_PANEL_HEIGHT)


def blit_virtual_to_screen(virtual_screen: pygame.Surface, screen: pygame.Surface) -> None:
    """Scale and blit the virtual screen to the actual display, with letterboxing."""
    screen_w, screen_h = screen.get_size()
    scale = min(screen_w / VIRTUAL_WIDTH, screen_h / VIRTUAL_HEIGHT)
    scaled_w = int(VIRTUAL_WIDTH * scale)
    scaled_h = int(VIRTUAL_HEIGHT * scale)
    offset_x = (screen_w - scaled_w) // 2
    offset_y = (screen_h - scaled_h) // 2

    # Fill letterbox areas
    screen.fill((0, 0, 0))

    scaled = pygame.transform.scale(virtual_screen, (scaled_w, scaled_h))
    screen.blit(scaled, (offset_x, offset_y))


def run(
    scenario: str = DEFAULT_SCENARIO,
    width: int = GRID_WIDTH,
    height: int = GRID_HEIGHT,
    depth: int = GRID_DEPTH,
    seed: Optional[int] = DEFAULT_SEED,
) -> None:
    """Main viewer loop."""
    pygame.init()

    virtual_screen = pygame.Surface((VIRTUAL_WIDTH, VIRTUAL_HEIGHT))
    screen = pygame.display.set_mode((VIRTUAL_WIDTH, VIRTUAL_HEIGHT), pygame.RESIZABLE)
    pygame.display.set_caption("Cascade - Volumetric Water")

    font = pygame.font.Font(None, FONT_SIZE)
    clock = pygame.time.Clock()

    state = build_initial_state(scenario, width, height, depth, seed=seed)
    state.messages.append("Press H for help.")

    # Viewport fills the area left of the sidebar and above the log panel
    viewport_w = VIRTUAL_WIDTH - SIDEBAR_WIDTH
    viewport_h = VIRTUAL_HEIGHT - LOG_PANEL_HEIGHT
    map_surface = pygame.Surface((viewport_w, viewport_h))

    camera = Camera()
    camera.set_viewport_size(viewport_w, viewport_h)
    camera.center_on_grid(state.grid.shape)

    show_help = False
    running = True
    while running:
        dt = clock.tick(60) / 1000.0

        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False
                continue

            if event.type == pygame.MOUSEWHEEL:
                camera.set_zoom(camera.zoom + event.y * ZOOM_STEP)
                continue

            if event.type != pygame.KEYDOWN:
                continue

            if event.key == QUIT_KEY:
                running = False
            elif event.key == HELP_KEY:
                show_help = not show_help
            elif event.key in (pygame.K_EQUALS, pygame.K_PLUS):
                camera.set_zoom(camera.zoom + 0.25)
            elif event.key == pygame.K_MINUS:
                camera.set_zoom(camera.zoom - 0.25)
            elif event.key in CURSOR_KEYS:
                state.move_cursor(*CURSOR_KEYS[event.key])
            elif event.key in ORBIT_KEYS:
                d_yaw, d_pitch = ORBIT_KEYS[event.key]
                camera.rotate(d_yaw * ROTATE_STEP_DEG, d_pitch * ROTATE_STEP_DEG)
            elif event.key == STEP_KEY and state.paused:
                handle_command(state, "step", [])
            elif event.key in ACTION_KEYS:
                cmd, args = ACTION_KEYS[event.key]
                if handle_command(state, cmd, args):
                    running = False

        # Simulation tick on a fixed wall-clock interval
        if not state.paused:
            state._tick_timer += dt
            if state._tick_timer >= TICK_INTERVAL:
                simulate_tick(state)
                state._tick_timer -= TICK_INTERVAL

        render_to_virtual_screen(virtual_screen, map_surface, font, state, camera, show_help)
        blit_virtual_to_screen(virtual_screen, screen)
        pygame.display.flip()

    pygame.quit()


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Cascade volumetric water viewer")
    parser.add_argument(
        "--scenario", choices=sorted(SCENARIOS), default=DEFAULT_SCENARIO,
        help=f"Initial water layout (default: {DEFAULT_SCENARIO})"
    )
    parser.add_argument(
        "--size", type=int, nargs=3, metavar=("W", "H", "L"),
        default=[GRID_WIDTH, GRID_HEIGHT, GRID_DEPTH],
        help="Grid dimensions (default: %(default)s)"
    )
    parser.add_argument(
        "--seed", type=int, default=DEFAULT_SEED,
        help=f"Random seed (default: {DEFAULT_SEED})"
    )
    return parser.parse_args(argv)


if __name__ == "__main__":
    args = parse_args()
    try:
        run(args.scenario, *args.size, seed=args.seed)
    except KeyboardInterrupt:
        sys.exit(0)
