from clausy.constants import PLANT_WIDTH
from clausy.events.bus import EVENT_PLANT_GROWN
from clausy.systems.growth_system import cloud_over_plant
from tests.helpers import capture, center_cloud_over


def test_overlap_boundary_is_exclusive(predictable_simulation):
    sim = predictable_simulation
    plant = sim.plants[1]
    sim.cloud.x = plant.center_x + PLANT_WIDTH / 2
    assert not cloud_over_plant(sim.cloud, plant)
    sim.cloud.x -= 0.5
    assert cloud_over_plant(sim.cloud, plant)


def test_plant_at_exact_boundary_does_not_grow(predictable_simulation):
    sim = predictable_simulation
    sim.cloud.x = sim.plants[1].center_x - PLANT_WIDTH / 2
    sim.advance_step()
    assert [p.height for p in sim.plants] == [0] * 6


def test_only_overlapped_plant_grows(predictable_simulation):
    sim = predictable_simulation
    center_cloud_over(sim, 4)
    for _ in range(3):
        sim.advance_step()
    assert [p.height for p in sim.plants] == [0, 0, 0, 0, 3, 0]


def test_grown_event_emitted_once_with_capped_height(predictable_simulation):
    sim = predictable_simulation
    grown = capture(sim.event_bus, EVENT_PLANT_GROWN)
    center_cloud_over(sim, 3)
    for _ in range(700):
        sim.advance_step()
    assert len(grown) == 1
    assert grown[0]["index"] == 3
    assert grown[0]["height"] == 670
    assert sim.plants[3].height == 670


def test_grown_plant_is_not_touched_again(predictable_simulation):
    sim = predictable_simulation
    plant = sim.plants[0]
    plant.grown = True
    plant.height = 12
    center_cloud_over(sim, 0)
    for _ in range(5):
        sim.advance_step()
    assert plant.height == 12


def test_height_snaps_to_cloud_underside(predictable_simulation):
    sim = predictable_simulation
    plant = sim.plants[2]
    plant.height = 669.5
    center_cloud_over(sim, 2)
    sim.advance_step()
    assert plant.grown
    assert plant.height == 670
