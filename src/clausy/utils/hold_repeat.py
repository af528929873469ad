from __future__ import annotations

from dataclasses import dataclass, field
from time import monotonic
from typing import Callable

from clausy.constants import MOVE_REPEAT_INTERVAL


@dataclass(slots=True)
class HoldRepeat:
	"""Repeats a directional intent on a fixed interval while a key is held.

	Pressing a direction fires once immediately; after that ``poll`` fires once
	per ``interval`` until the key is released. Holding both directions at once
	cancels out.
	"""

	interval: float = MOVE_REPEAT_INTERVAL
	clock: Callable[[], float] | None = field(default=None, repr=False)

	_clock: Callable[[], float] = field(init=False, repr=False)
	_left: bool = field(init=False, default=False, repr=False)
	_right: bool = field(init=False, default=False, repr=False)
	_direction: int = field(init=False, default=0, repr=False)
	_next_fire: float | None = field(init=False, default=None, repr=False)

	def __post_init__(self) -> None:
		self._clock = self.clock or monotonic
		self.interval = max(0.0, float(self.interval))

	@property
	def direction(self) -> int:
		return self._direction

	def press(self, direction: int) -> int:
		"""Register a held direction; returns the direction to fire now, or 0."""
		if direction < 0:
			self._left = True
		elif direction > 0:
			self._right = True
		return self._update_direction()

	def release(self, direction: int) -> int:
		if direction < 0:
			self._left = False
		elif direction > 0:
			self._right = False
		return self._update_direction()

	def release_all(self) -> None:
		self._left = False
		self._right = False
		self._direction = 0
		self._next_fire = None

	def poll(self) -> int:
		"""Return how many repeats are due for the held direction (signed)."""
		if self._direction == 0 or self._next_fire is None:
			return 0
		now = self._clock()
		if now < self._next_fire:
			return 0
		if self.interval <= 0.0:
			self._next_fire = now
			return self._direction
		due = int((now - self._next_fire) // self.interval) + 1
		self._next_fire += due * self.interval
		return due * self._direction

	def _update_direction(self) -> int:
		new_direction = (-1 if self._left else 0) + (1 if self._right else 0)
		if new_direction == self._direction:
			return 0
		self._direction = new_direction
		if new_direction == 0:
			self._next_fire = None
			return 0
		self._next_fire = self._clock() + self.interval
		return new_direction
