"""Draws a simulation snapshot with arcade primitives.

The simulation uses canvas coordinates (origin top-left, y grows downward);
arcade draws with y growing upward, so every y passes through ``_sy``.
"""
from __future__ import annotations

import math

import arcade

from clausy.constants import PLANT_WIDTH
from clausy.rendering.colors import (
    FLOWER_CENTER_RGB,
    RAIN_RGB,
    RAINBOW_RGB,
    STEM_RGB,
    WIN_TEXT_RGB,
    petal_rgb,
)
from clausy.snapshot import CloudView, PlantView, SimulationSnapshot

CLOUD_PUFF_RADIUS = 30
PETAL_ORBIT = 10
PETAL_RADIUS = 6
FLOWER_CENTER_RADIUS = 5
RAIN_RADIUS = 3
RAINBOW_RADIUS = 200
RAINBOW_BAND = 10


class SceneRenderer:
    """Stateless painter for plants, cloud, rain and the win overlay."""

    def __init__(self, window) -> None:
        self.window = window

    def _sy(self, y: float) -> float:
        return self.window.height - y

    def draw(self, snapshot: SimulationSnapshot, *, paused: bool = False) -> None:
        for plant in snapshot.plants:
            self._draw_plant(plant)
        self._draw_cloud(snapshot.cloud)
        for drop in snapshot.rain_drops:
            arcade.draw_circle_filled(drop.x, self._sy(drop.y), RAIN_RADIUS, RAIN_RGB)
        if snapshot.game_won:
            self._draw_win_overlay(snapshot)
        elif paused:
            arcade.draw_text(
                "Paused",
                self.window.width / 2,
                self.window.height / 2,
                arcade.color.WHITE,
                36,
                anchor_x="center",
                anchor_y="center",
                bold=True,
            )

    def _draw_plant(self, plant: PlantView) -> None:
        center_x = plant.x + PLANT_WIDTH / 2
        base_y = self._sy(plant.y)
        top_y = self._sy(plant.y - plant.height)
        arcade.draw_line(center_x, base_y, center_x, top_y, STEM_RGB, 4)
        if plant.height <= 0:
            return
        count = len(plant.petals)
        for idx, color in enumerate(plant.petals):
            angle = (idx / count) * 2 * math.pi
            # Canvas y points down, so the sine term flips on screen.
            petal_x = center_x + math.cos(angle) * PETAL_ORBIT
            petal_y = top_y - math.sin(angle) * PETAL_ORBIT
            arcade.draw_circle_filled(petal_x, petal_y, PETAL_RADIUS, petal_rgb(color))
        arcade.draw_circle_filled(center_x, top_y, FLOWER_CENTER_RADIUS, FLOWER_CENTER_RGB)

    def _draw_cloud(self, cloud: CloudView) -> None:
        diameter = CLOUD_PUFF_RADIUS * 2
        for dx, dy in ((0, 0), (-30, 10), (30, 10)):
            arcade.draw_arc_filled(
                cloud.x + dx,
                self._sy(cloud.y + dy),
                diameter,
                diameter,
                arcade.color.WHITE,
                0,
                180,
            )
        for dx in (-15, 15):
            arcade.draw_circle_filled(cloud.x + dx, self._sy(cloud.y + 5), 5, arcade.color.BLACK)
        arcade.draw_arc_outline(
            cloud.x,
            self._sy(cloud.y + 15),
            20,
            20,
            arcade.color.BLACK,
            180,
            360,
            border_width=2,
        )

    def _draw_win_overlay(self, snapshot: SimulationSnapshot) -> None:
        center_x = snapshot.canvas_width / 2
        center_y = self._sy(snapshot.cloud.y + 50)
        for idx, color in enumerate(RAINBOW_RGB):
            radius = RAINBOW_RADIUS - idx * RAINBOW_BAND
            arcade.draw_arc_outline(
                center_x,
                center_y,
                radius * 2,
                radius * 2,
                color,
                0,
                180,
                border_width=RAINBOW_BAND,
            )
        arcade.draw_text(
            "You Win!",
            self.window.width / 2,
            self.window.height / 2,
            WIN_TEXT_RGB,
            48,
            anchor_x="center",
            anchor_y="center",
            bold=True,
        )
        arcade.draw_text(
            "Press R or Enter to play again",
            self.window.width / 2,
            self.window.height / 2 - 50,
            arcade.color.WHITE,
            18,
            anchor_x="center",
            anchor_y="center",
        )
