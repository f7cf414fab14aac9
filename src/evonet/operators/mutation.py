"""
Mutation Module

This module implements the random perturbation of a child chromosome.

Classes:
    MutationMethod:   Protocol for mutation strategies
    GaussianMutation: Bounded, randomly signed perturbation of each gene
"""

from typing import Protocol

import numpy as np

from evonet.errors   import InvalidConfigError
from evonet.genotype import Chromosome

class MutationMethod(Protocol):
    """
    Perturbs a chromosome in place.
    """

    def mutate(self, rng: np.random.Generator, chromosome: Chromosome) -> None: ...

class GaussianMutation:
    """
    Perturbs each gene, independently, with a given probability.

    For every gene, a sign (+1 or -1, equally likely) is drawn, then whether
    the gene mutates (with probability 'chance'). A mutating gene is shifted by
    sign * coefficient * u, with u drawn uniformly from [0, 1). The magnitude
    of a perturbation is therefore bounded by 'coefficient'.

    Public Properties:
        chance:      Probability that any given gene mutates, in [0, 1]
        coefficient: Maximum magnitude of a perturbation, >= 0

    Public Methods:
        mutate(rng, chromosome): Mutate the chromosome in place
    """

    def __init__(self, chance: float, coefficient: float):
        """
        Parameters:
            chance:      per-gene mutation probability, in [0, 1]
            coefficient: maximum perturbation magnitude, >= 0
        """
        if not 0.0 <= chance <= 1.0:
            raise InvalidConfigError(f"Mutation chance must be in [0, 1], got {chance}")
        if not coefficient >= 0.0:
            raise InvalidConfigError(f"Mutation coefficient must be >= 0, got {coefficient}")

        self._chance     : float = float(chance)
        self._coefficient: float = float(coefficient)

    @property
    def chance(self) -> float:
        return self._chance

    @property
    def coefficient(self) -> float:
        return self._coefficient

    def mutate(self, rng: np.random.Generator, chromosome: Chromosome) -> None:
        """
        Mutate the chromosome in place.

        Draw order per gene: sign, mutation decision, then (only if mutating) magnitude.
        """
        genes = chromosome.genes
        for i in range(len(genes)):
            sign = -1.0 if rng.random() < 0.5 else 1.0
            if rng.random() < self._chance:
                genes[i] = np.float32(genes[i] + np.float32(sign * self._coefficient * rng.random()))

    def __repr__(self):
        return f"GaussianMutation(chance={self._chance}, coefficient={self._coefficient})"
