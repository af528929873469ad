from __future__ import annotations

from esper import World

from clausy.components.cloud import Cloud
from clausy.components.plant import Plant
from clausy.constants import PLANT_WIDTH
from clausy.events.bus import EVENT_PLANT_GROWN, EventBus
from clausy.utils.queries import get_cloud, get_game_state, plant_entities


def cloud_over_plant(cloud: Cloud, plant: Plant) -> bool:
    """True when the cloud centre sits strictly inside the plant footprint."""

    return abs(cloud.x - plant.center_x) < PLANT_WIDTH / 2


class GrowthSystem:
    """Grows every unfinished plant the cloud is hovering over.

    A plant gains one unit per step. When its top would reach the cloud's
    underside, the height is pinned to exactly that gap and the plant is
    marked grown; grown plants are never touched again.
    """

    def __init__(self, world: World, event_bus: EventBus):
        self.world = world
        self.event_bus = event_bus

    def process(self) -> None:
        state = get_game_state(self.world)
        if state is not None and state.game_won:
            return
        cloud = get_cloud(self.world)
        if cloud is None:
            return
        for ent, plant in plant_entities(self.world):
            if plant.grown or not cloud_over_plant(cloud, plant):
                continue
            plant.height += 1
            if plant.top <= cloud.underside:
                # A canvas shorter than the cloud would yield a negative cap.
                plant.height = max(0, plant.y - cloud.underside)
                plant.grown = True
                self.event_bus.emit(
                    EVENT_PLANT_GROWN,
                    entity=ent,
                    index=plant.index,
                    height=plant.height,
                )
