"""Scene objects, the player and the ordered scene that renders them."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass, replace
from enum import IntEnum

from .geometry import Color, Pos, Vector3
from .raster import Canvas, Viewport


class ObjectType(IntEnum):
    """Kinds of renderable objects."""

    UNKNOWN = -1
    SKY = 0
    MODEL = 1
    LIGHT = 2


@dataclass
class Player:
    """The viewer: a named camera position."""

    pos: Pos
    name: str

    def __post_init__(self) -> None:
        self.pos = replace(self.pos)


class Renderable:
    """Base class for everything a scene can draw."""

    object_type: ObjectType = ObjectType.UNKNOWN

    def __init__(self, name: str | None = None) -> None:
        self.name = name

    def render(self, canvas: Canvas, player: Player, viewport: Viewport) -> None:
        """Report that an object without a drawing routine was asked to draw."""
        print("Attempted to render null object type.")


class Sky(Renderable):
    """A background that fills the whole screen with one colour."""

    object_type = ObjectType.SKY

    def __init__(self, color: Color) -> None:
        super().__init__("sky")
        self.color = color

    def render(self, canvas: Canvas, player: Player, viewport: Viewport) -> None:
        """Clear the canvas with the sky colour."""
        canvas.set_color(self.color)
        canvas.clear()


class Cube(Renderable):
    """A cube placeholder object; it shares the light type code and draws nothing."""

    object_type = ObjectType.LIGHT

    def __init__(self, pos: Pos, size: float, color: Color) -> None:
        super().__init__()
        self.pos = pos
        self.size = size
        self.color = color

    def render(self, canvas: Canvas, player: Player, viewport: Viewport) -> None:
        """Cubes leave the canvas untouched."""
        return None


def process_light(light_pos: Pos) -> Vector3:
    """Set the light's orientation, print its normalised x component and return it."""
    light_pos.yaw = 5
    light_pos.pitch = 5
    light_pos.roll = 5
    direction = light_pos.normalized_rotation()
    print(f"{direction.x:g}")
    return direction


class LightRaySource(Renderable):
    """A directional light that processes every lit object of the scene."""

    object_type = ObjectType.LIGHT
    unlit_types = frozenset({ObjectType.SKY, ObjectType.LIGHT})

    def __init__(self, pos: Pos) -> None:
        super().__init__("directionalLightRaySource")
        self.pos = replace(pos)

    def render(
        self, canvas: Canvas, player: Player, viewport: Viewport, scene: Scene
    ) -> list[Renderable]:
        """Light every object of the scene whose type is not excluded; return them."""
        lit = []
        for obj in scene:
            if obj.object_type in self.unlit_types:
                continue
            process_light(self.pos)
            lit.append(obj)
        return lit


class Scene:
    """An ordered collection of renderable objects, drawn front to back of the list."""

    def __init__(self, objects: Iterable[Renderable] = ()) -> None:
        self._objects: list[Renderable] = list(objects)

    def __iter__(self) -> Iterator[Renderable]:
        return iter(self._objects)

    def __len__(self) -> int:
        return len(self._objects)

    def add(self, obj: Renderable) -> None:
        """Append an object to the end of the scene."""
        self._objects.append(obj)

    def render(self, canvas: Canvas, player: Player, viewport: Viewport) -> None:
        """Render every object in order; lights also receive the scene."""
        for obj in self._objects:
            if isinstance(obj, LightRaySource):
                obj.render(canvas, player, viewport, self)
            else:
                obj.render(canvas, player, viewport)