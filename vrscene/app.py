"""The interactive viewer: scene setup, keyboard movement and the main loop."""

from __future__ import annotations

import argparse
import math
import sys
import time
from collections.abc import Iterable
from enum import Enum, auto
from os import PathLike
from pathlib import Path

import pygame

from .geometry import Color, Pos
from .model import Model, load_vrobj
from .raster import Canvas, Viewport
from .scene import LightRaySource, Player, Scene, Sky

MOVEMENT = 0.01
TURN_FACTOR = 12
FRAME_DELAY_MS = 1
WINDOW_SIZE = (800, 600)


class Control(Enum):
    """Movement commands the player can hold down."""

    FORWARD = auto()
    LEFT = auto()
    BACK = auto()
    RIGHT = auto()
    YAW_LEFT = auto()
    YAW_RIGHT = auto()
    PITCH_UP = auto()
    PITCH_DOWN = auto()
    ROLL_LEFT = auto()
    ROLL_RIGHT = auto()
    UP = auto()
    DOWN = auto()


_KEY_CONTROLS = {
    pygame.K_w: Control.FORWARD,
    pygame.K_a: Control.LEFT,
    pygame.K_s: Control.BACK,
    pygame.K_d: Control.RIGHT,
    pygame.K_LEFT: Control.YAW_LEFT,
    pygame.K_RIGHT: Control.YAW_RIGHT,
    pygame.K_UP: Control.PITCH_UP,
    pygame.K_DOWN: Control.PITCH_DOWN,
    pygame.K_1: Control.ROLL_LEFT,
    pygame.K_2: Control.ROLL_RIGHT,
    pygame.K_SPACE: Control.UP,
    pygame.K_LSHIFT: Control.DOWN,
}


def apply_input(pos: Pos, controls: Iterable[Control], dt: float) -> None:
    """Move and turn a position for the held controls over dt milliseconds."""
    held = set(controls)
    yaw = math.radians(pos.yaw)
    dx = 0.0
    dz = 0.0
    if Control.FORWARD in held:
        dx += MOVEMENT * math.sin(yaw)
        dz += MOVEMENT * math.cos(yaw)
    if Control.LEFT in held:
        dx -= MOVEMENT * math.cos(-yaw)
        dz -= MOVEMENT * math.sin(-yaw)
    if Control.BACK in held:
        dx -= MOVEMENT * math.sin(yaw)
        dz -= MOVEMENT * math.cos(yaw)
    if Control.RIGHT in held:
        dx += MOVEMENT * math.cos(-yaw)
        dz += MOVEMENT * math.sin(-yaw)
    pos.x += dx * dt
    pos.z += dz * dt

    turn = MOVEMENT * TURN_FACTOR * dt
    if Control.YAW_LEFT in held:
        pos.yaw -= turn
    if Control.YAW_RIGHT in held:
        pos.yaw += turn
    if Control.PITCH_UP in held:
        pos.pitch += turn
    if Control.PITCH_DOWN in held:
        pos.pitch -= turn
    if Control.ROLL_LEFT in held:
        pos.roll -= turn
    if Control.ROLL_RIGHT in held:
        pos.roll += turn
    if Control.UP in held:
        pos.y += MOVEMENT * dt
    if Control.DOWN in held:
        pos.y -= MOVEMENT * dt


def _load_model(name: str, pos: Pos, size: float, color: Color, path: Path) -> Model:
    try:
        vertices, faces = load_vrobj(path)
    except OSError:
        print("Error opening file!", file=sys.stderr)
        return Model(name, pos, size, color)
    return Model(name, pos, size, color, vertices, faces)


def build_scene(models_dir: str | PathLike[str]) -> tuple[Scene, Player]:
    """Build the demo scene from the models directory and return it with the player."""
    directory = Path(models_dir)
    player = Player(Pos(0, 0, 0), "Spectre")
    white = Color(255, 255, 255, 255)
    cube_pos = Pos(0, -0.5, 5)
    prism_pos = Pos(0, -0.5, 7)
    prism_model = _load_model("cube", cube_pos, 2, white, directory / "prism.vrobj")
    cube_model = _load_model(
        "triangularPrism", prism_pos, 2, white, directory / "cube.vrobj"
    )
    scene = Scene(
        [
            Sky(Color(0, 0, 0, 255)),
            cube_model,
            prism_model,
            LightRaySource(Pos(0, 5, 0)),
        ]
    )
    return scene, player


class PygameCanvas(Canvas):
    """A canvas that draws straight onto a pygame surface."""

    def __init__(self, surface: pygame.Surface) -> None:
        super().__init__()
        self.surface = surface

    def _rgba(self) -> tuple[int, int, int, int]:
        return self.color.r, self.color.g, self.color.b, self.color.a

    def set_color(self, color: Color) -> None:
        self.color = color

    def clear(self) -> None:
        self.surface.fill(self._rgba())

    def draw_point(self, x: int, y: int) -> None:
        self.surface.set_at((x, y), self._rgba())

    def draw_line(self, x1: int, y1: int, x2: int, y2: int) -> None:
        pygame.draw.line(self.surface, self._rgba(), (x1, y1), (x2, y2))


def _now_ms() -> int:
    return int(time.time() * 1000)


def _set_mode(fullscreen: bool, display: int) -> pygame.Surface:
    if fullscreen:
        return pygame.display.set_mode((0, 0), pygame.FULLSCREEN, display=display)
    return pygame.display.set_mode(WINDOW_SIZE, pygame.RESIZABLE, display=display)


def _run(scene: Scene, player: Player, display: int) -> int:
    sizes = pygame.display.get_desktop_sizes()
    if not 0 <= display < len(sizes):
        print(f"Failed to get display bounds: no display {display}", file=sys.stderr)
        return 1
    pygame.display.set_caption("Pixel Drawing")
    fullscreen = True
    try:
        surface = _set_mode(fullscreen, display)
    except pygame.error as exc:
        print(f"SDL Fullscreen Error: {exc}", file=sys.stderr)
        return 1

    canvas = PygameCanvas(surface)
    viewport = Viewport()
    last = _now_ms()
    while True:
        now = _now_ms()
        dt = now - last
        last = now
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                return 0
            if event.type == pygame.KEYDOWN and event.key == pygame.K_F11:
                print("User toggled fullscreen")
                fullscreen = not fullscreen
                try:
                    surface = _set_mode(fullscreen, display)
                except pygame.error as exc:
                    print(f"SDL Screenchange Error: {exc}", file=sys.stderr)
                    return 1
                canvas.surface = surface

        pressed = pygame.key.get_pressed()
        held = {control for key, control in _KEY_CONTROLS.items() if pressed[key]}
        apply_input(player.pos, held, dt)

        viewport.width, viewport.height = surface.get_size()
        scene.render(canvas, player, viewport)
        pygame.display.flip()
        pygame.time.delay(FRAME_DELAY_MS)


def main(argv: list[str] | None = None) -> int:
    """Run the viewer until the window is closed; return the exit status."""
    parser = argparse.ArgumentParser(prog="vrscene", description="Walk around a small 3D scene.")
    parser.add_argument("--models-dir", default="models", help="directory holding .vrobj files")
    parser.add_argument("--display", type=int, default=1, help="index of the display to use")
    args = parser.parse_args(argv)

    scene, player = build_scene(args.models_dir)
    try:
        pygame.display.init()
    except pygame.error as exc:
        print(f"Unable to initialize SDL: {exc}", file=sys.stderr)
        return 1
    try:
        return _run(scene, player, args.display)
    finally:
        pygame.quit()


if __name__ == "__main__":
    sys.exit(main())