"""
Selection Module

This module implements parent selection for the genetic algorithm.

Classes:
    SelectionMethod:        Protocol for parent-selection strategies
    RouletteWheelSelection: Fitness-proportionate selection
"""

from typing import Protocol, Sequence, TypeVar

import numpy as np
from loguru import logger

from evonet.errors               import EmptyPopulationError, UndefinedSelectionWeightsError
from evonet.phenotype.individual import Individual

I = TypeVar('I', bound=Individual)

class SelectionMethod(Protocol):
    """
    Picks one parent out of a population.
    """

    def select(self, rng: np.random.Generator, population: Sequence[I]) -> I: ...

class RouletteWheelSelection:
    """
    Fitness-proportionate ("roulette wheel") selection.

    Each individual is picked with probability fitness / sum(fitness), so
    individuals with zero fitness are never picked as long as some other
    individual has a positive fitness. Exactly one value is drawn from the
    random number generator per selection.

    When every fitness is zero the wheel is undefined; in that case selection
    falls back to picking uniformly at random (and logs a warning). Negative,
    non-finite or missing fitness values are rejected.
    """

    def select(self, rng: np.random.Generator, population: Sequence[I]) -> I:
        """
        Parameters:
            rng:        the random number generator
            population: the individuals to choose from

        Returns:
            The selected individual

        Raises:
            EmptyPopulationError:           if the population is empty
            UndefinedSelectionWeightsError: if any fitness is negative, NaN, infinite or None
        """
        if len(population) == 0:
            raise EmptyPopulationError("Cannot select from an empty population")

        # None converts to NaN here, and is rejected with the other non-finite values
        weights = np.array([individual.fitness for individual in population], dtype=np.float64)
        if not np.all(np.isfinite(weights)):
            raise UndefinedSelectionWeightsError("Fitness values must be finite numbers")
        if np.any(weights < 0.0):
            raise UndefinedSelectionWeightsError("Fitness values must be non-negative")

        cumulative = np.cumsum(weights)
        total      = cumulative[-1]
        r          = rng.random()

        if total == 0.0:
            logger.warning("[Selection] All {} individuals have zero fitness; selecting uniformly", len(population))
            index = min(int(r * len(population)), len(population) - 1)
        else:
            index = int(np.searchsorted(cumulative, r * total, side='right'))
            index = min(index, len(population) - 1)

        return population[index]

    def __repr__(self):
        return "RouletteWheelSelection()"
