from esper import World

from postip.components.frame_origin import FrameOriginCache
from postip.components.tooltip_state import TooltipState


def create_world() -> World:
    """Create a world holding the tooltip session and frame origin cache state.

    Systems look these components up on construction, so every system built
    against the same world shares one session and one cache.
    """
    world = World()
    world.create_entity(TooltipState())
    world.create_entity(FrameOriginCache())
    return world
