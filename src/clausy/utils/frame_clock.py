from __future__ import annotations

from dataclasses import dataclass, field

from clausy.constants import MAX_STEPS_PER_FRAME, STEPS_PER_SECOND


@dataclass(slots=True)
class FixedStepClock:
	"""Turns variable frame deltas into a whole number of fixed simulation steps.

	Leftover time is carried to the next frame. A long stall never produces
	more than ``max_steps`` steps at once; the surplus is dropped.
	"""

	steps_per_second: float = STEPS_PER_SECOND
	max_steps: int = MAX_STEPS_PER_FRAME

	_step: float = field(init=False, repr=False)
	_accumulator: float = field(init=False, default=0.0, repr=False)
	_running: bool = field(init=False, default=True, repr=False)

	def __post_init__(self) -> None:
		rate = float(self.steps_per_second)
		self._step = 1.0 / rate if rate > 0.0 else 0.0
		self.max_steps = max(1, int(self.max_steps))

	@property
	def running(self) -> bool:
		return self._running

	@property
	def step_duration(self) -> float:
		return self._step

	def start(self) -> None:
		self._running = True

	def stop(self) -> None:
		self._running = False
		self._accumulator = 0.0

	def toggle(self) -> bool:
		if self._running:
			self.stop()
		else:
			self.start()
		return self._running

	def consume(self, dt: float) -> int:
		"""Add ``dt`` seconds and return how many steps are due."""
		if not self._running or self._step <= 0.0 or dt <= 0.0:
			return 0
		self._accumulator += float(dt)
		steps = int(self._accumulator // self._step)
		if steps > self.max_steps:
			self._accumulator = 0.0
			return self.max_steps
		self._accumulator -= steps * self._step
		return steps
