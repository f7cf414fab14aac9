"""
Population Statistics Module

This module summarizes a population after its fitness has been evaluated.

Classes:
    PopulationStatistics: Per-generation fitness and diversity summary
"""

from dataclasses import dataclass
from typing      import Sequence

import numpy as np

from evonet.errors               import ArityMismatchError, EmptyPopulationError
from evonet.phenotype.individual import Individual

@dataclass(frozen=True)
class PopulationStatistics:
    """
    Summary of one evaluated generation.

    Attributes:
        generation:           Generation number (0 for the initial population)
        size:                 Number of individuals
        min_fitness:          Lowest fitness
        max_fitness:          Highest fitness
        mean_fitness:         Average fitness
        total_fitness:        Sum of all fitness values
        survivors_percentage: Fraction of individuals with a positive fitness
        genetic_variance:     Per-gene population variance, averaged over gene positions
    """
    generation          : int
    size                : int
    min_fitness         : float
    max_fitness         : float
    mean_fitness        : float
    total_fitness       : float
    survivors_percentage: float
    genetic_variance    : float

    @classmethod
    def from_population(cls, population: Sequence[Individual], generation: int = 0) -> 'PopulationStatistics':
        """
        Compute the statistics of an evaluated population.

        Raises:
            EmptyPopulationError: if the population is empty
            ArityMismatchError:   if the chromosomes have different lengths
        """
        if len(population) == 0:
            raise EmptyPopulationError("Cannot compute statistics of an empty population")

        lengths = {len(individual.chromosome) for individual in population}
        if len(lengths) > 1:
            raise ArityMismatchError(f"Chromosomes have different lengths: {sorted(lengths)}")

        fitness = np.array([individual.fitness for individual in population], dtype=np.float64)

        genes = np.stack([individual.chromosome.genes for individual in population]).astype(np.float64)
        if genes.shape[1] == 0:
            genetic_variance = 0.0
        else:
            genetic_variance = float(np.mean(np.var(genes, axis=0)))

        return cls(generation           = generation,
                   size                 = len(population),
                   min_fitness          = float(np.min(fitness)),
                   max_fitness          = float(np.max(fitness)),
                   mean_fitness         = float(np.mean(fitness)),
                   total_fitness        = float(np.sum(fitness)),
                   survivors_percentage = float(np.count_nonzero(fitness > 0.0)) / len(population),
                   genetic_variance     = genetic_variance)

    def __str__(self):
        return (f"generation={self.generation:3d}, "
                f"fitness(max/mean/min)={self.max_fitness:.4f}/{self.mean_fitness:.4f}/{self.min_fitness:.4f}, "
                f"survivors={self.survivors_percentage:.2%}, variance={self.genetic_variance:.4f}")
