"""
Genetic Algorithm Module

This module implements the GeneticAlgorithm class, which turns one generation
of evaluated individuals into the next one.

Classes:
    GeneticAlgorithm: Orchestrates selection, crossover and mutation over a population
"""

from typing import Generic, Sequence, TypeVar

import numpy as np
from loguru import logger

from evonet.errors               import EmptyPopulationError
from evonet.operators.crossover  import CrossoverMethod
from evonet.operators.mutation   import MutationMethod
from evonet.operators.selection  import SelectionMethod
from evonet.phenotype.individual import Individual

I = TypeVar('I', bound=Individual)

class GeneticAlgorithm(Generic[I]):
    """
    A generational genetic algorithm.

    The algorithm is built once from three strategies and reused across
    generations. Each call to evolve() produces a brand new population of the
    same size; the individuals of the current population are only read, never
    modified, so both generations can safely coexist.

    For each slot of the new population, in order:
        1. select parent A from the current population
        2. select parent B from the current population (may be the same individual)
        3. cross over the chromosomes of A and B into a child chromosome
        4. mutate the child chromosome
        5. build a new individual from it, via the class of parent A

    All randomness comes from the generator passed to evolve(), consumed in the
    order listed above, so a fixed seed reproduces the same populations.

    Public Methods:
        evolve(rng, population): Produce the next generation
    """

    def __init__(self,
                 selection_method: SelectionMethod,
                 crossover_method: CrossoverMethod,
                 mutation_method : MutationMethod):
        """
        Parameters:
            selection_method: picks parents from the current population
            crossover_method: combines two parent chromosomes into a child
            mutation_method:  perturbs the child chromosome in place
        """
        self._selection_method: SelectionMethod = selection_method
        self._crossover_method: CrossoverMethod = crossover_method
        self._mutation_method : MutationMethod  = mutation_method

    def evolve(self, rng: np.random.Generator, population: Sequence[I]) -> list[I]:
        """
        Produce the next generation.

        Parameters:
            rng:        the random number generator driving every operator
            population: the current, evaluated population (not modified)

        Returns:
            A new population of the same size, whose individuals are built with
            'create' and therefore carry a fresh, not yet evaluated, fitness

        Raises:
            EmptyPopulationError: if the population is empty
        """
        if len(population) == 0:
            raise EmptyPopulationError("Cannot evolve an empty population")

        offspring = []
        for _ in range(len(population)):
            parent_a = self._selection_method.select(rng, population)
            parent_b = self._selection_method.select(rng, population)

            child = self._crossover_method.crossover(rng, parent_a.chromosome, parent_b.chromosome)
            self._mutation_method.mutate(rng, child)

            offspring.append(type(parent_a).create(child))

        logger.debug("[GA] Evolved a generation of {} individuals", len(offspring))
        return offspring

    def __repr__(self):
        return (f"GeneticAlgorithm(selection={self._selection_method!r}, "
                f"crossover={self._crossover_method!r}, mutation={self._mutation_method!r})")
