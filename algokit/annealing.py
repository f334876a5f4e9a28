"""A generic simulated-annealing optimiser."""

from __future__ import annotations

import math
import random
from abc import ABC, abstractmethod
from enum import IntEnum
from typing import Generic, TypeVar

State = TypeVar("State")


class Objective(IntEnum):
    """Whether the energy is to be maximised or minimised."""

    MAXIMIZE = -1
    MINIMIZE = 1


class SimulatedAnnealing(ABC, Generic[State]):
    """Subclasses define the energy of a state and how to move to a neighbour."""

    def __init__(
        self,
        objective: Objective = Objective.MINIMIZE,
        temperature_start: float = 3000,
        temperature_min: float = 1e-15,
        cooling: float = 0.996,
        seed: int = 10**9 + 7,
    ) -> None:
        if not 0 < cooling < 1:
            raise ValueError("cooling must lie strictly between 0 and 1")
        if not 0 < temperature_min:
            raise ValueError("temperature_min must be positive")
        self.objective = objective
        self.temperature_start = temperature_start
        self.temperature_min = temperature_min
        self.cooling = cooling
        self.seed = seed
        self._rng = random.Random(seed)
        self._best: State | None = None
        self._best_energy: float | None = None

    @abstractmethod
    def energy_of(self, state: State) -> float:
        """Return the energy of ``state``."""

    @abstractmethod
    def neighbour(self, state: State, temperature: float) -> State:
        """Return a candidate state near ``state``."""

    def is_valid(self, state: State) -> bool:
        """Return False for states that must be skipped."""
        return True

    def _once(self) -> None:
        temperature = self.temperature_start
        current = self._best
        while temperature > self.temperature_min:
            candidate = self.neighbour(current, temperature)
            if self.is_valid(candidate):
                energy = self.energy_of(candidate)
                delta = (energy - self._best_energy) * self.objective
                if delta < 0:
                    self._best_energy = energy
                    self._best = current = candidate
                elif math.exp(-delta / temperature) > self._rng.random():
                    current = candidate
            temperature *= self.cooling

    def run(self, begin_state: State, times: int = 1) -> State:
        """Anneal ``times`` rounds from ``begin_state``; return the best state found."""
        if times < 0:
            raise ValueError("times must be non-negative")
        self._rng.seed(self.seed)
        self._best = begin_state
        self._best_energy = self.energy_of(begin_state)
        for _ in range(times):
            self._once()
        return self._best

    def energy(self) -> float:
        """Return the energy of the best state from the last run."""
        if self._best_energy is None:
            raise RuntimeError("run has not been called")
        return self._best_energy