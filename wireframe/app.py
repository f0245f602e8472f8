"""Window and event loop that show a height map as a wireframe."""

from __future__ import annotations

import struct
import sys
from collections.abc import Sequence
from pathlib import Path

import pygame

from wireframe.parsing import MapError, load_map
from wireframe.view import WINDOW_HEIGHT, WINDOW_WIDTH, Canvas, Key, Viewer

_FRAME_RATE = 60

_PYGAME_KEYS: dict[int, Key] = {
    pygame.K_ESCAPE: Key.ESCAPE,
    pygame.K_UP: Key.UP,
    pygame.K_DOWN: Key.DOWN,
    pygame.K_LEFT: Key.LEFT,
    pygame.K_RIGHT: Key.RIGHT,
    pygame.K_LSHIFT: Key.SHIFT_L,
    pygame.K_LCTRL: Key.CONTROL_L,
    pygame.K_KP_MINUS: Key.KP_SUBTRACT,
    pygame.K_KP_PLUS: Key.KP_ADD,
    pygame.K_r: Key.R,
    pygame.K_w: Key.W,
    pygame.K_s: Key.S,
    pygame.K_a: Key.A,
    pygame.K_d: Key.D,
    pygame.K_q: Key.Q,
    pygame.K_e: Key.E,
    pygame.K_z: Key.Z,
    pygame.K_x: Key.X,
    pygame.K_1: Key.ONE,
    pygame.K_2: Key.TWO,
    pygame.K_3: Key.THREE,
}


def key_from_pygame(key: int) -> Key | None:
    """Translate a pygame key code to the viewer's key, or ``None``."""
    return _PYGAME_KEYS.get(key)


def _canvas_to_surface(canvas: Canvas) -> pygame.Surface:
    """Build a pygame surface holding the canvas pixels (0xRRGGBB each)."""
    shifted = ((pixel << 8) & 0xFFFFFFFF for pixel in canvas.pixels)
    data = struct.pack(f">{len(canvas.pixels)}I", *shifted)
    return pygame.image.frombuffer(data, (canvas.width, canvas.height), "RGBX")


def run(path: str | Path, bonus: bool = False) -> int:
    """Load the map at ``path`` and show it until the window is closed.

    Raises :class:`MapError` if the map cannot be loaded. Closing the window
    or pressing Escape prints ``Closed`` and gives exit status 1.
    """
    height_map = load_map(path)
    viewer = Viewer(height_map, bonus=bonus)
    canvas = Canvas(WINDOW_WIDTH, WINDOW_HEIGHT)

    pygame.init()
    try:
        screen = pygame.display.set_mode((WINDOW_WIDTH, WINDOW_HEIGHT))
        pygame.display.set_caption(f"FDF - {path}")
        clock = pygame.time.Clock()
        dirty = True
        running = True
        while running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.KEYDOWN:
                    key = key_from_pygame(event.key)
                    if key is None:
                        continue
                    if viewer.handle_key(key):
                        running = False
                    dirty = True
            if running and dirty:
                viewer.render(canvas)
                screen.blit(_canvas_to_surface(canvas), (0, 0))
                pygame.display.flip()
                dirty = False
            clock.tick(_FRAME_RATE)
    finally:
        pygame.quit()
    print("Closed")
    return 1


def main(argv: Sequence[str] | None = None) -> int:
    """Command entry point: ``wireframe [--bonus] MAP.fdf``."""
    args = list(sys.argv[1:] if argv is None else argv)
    bonus = "--bonus" in args
    args = [arg for arg in args if arg != "--bonus"]
    if len(args) != 1:
        print("ERROR:Wrong number of arguments!")
        return 1
    try:
        return run(args[0], bonus)
    except MapError as exc:
        print(f"ERROR:{exc}")
        return 1


if __name__ == "__main__":
    sys.exit(main())