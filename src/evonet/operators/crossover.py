"""
Crossover Module

This module implements the combination of two parent chromosomes into a child.

Classes:
    CrossoverMethod:  Protocol for crossover strategies
    UniformCrossover: Gene-by-gene coin-flip crossover
"""

from typing import Protocol

import numpy as np

from evonet.errors   import ArityMismatchError
from evonet.genotype import Chromosome

class CrossoverMethod(Protocol):
    """
    Builds a child chromosome out of two parent chromosomes.
    """

    def crossover(self, rng: np.random.Generator, parent_a: Chromosome, parent_b: Chromosome) -> Chromosome: ...

class UniformCrossover:
    """
    Uniform crossover: each gene of the child is copied from parent A or from
    parent B with equal probability, with one independent coin flip per gene.
    """

    def crossover(self, rng: np.random.Generator, parent_a: Chromosome, parent_b: Chromosome) -> Chromosome:
        """
        Parameters:
            rng:      the random number generator; one value is drawn per gene, in order
            parent_a: the first parent (not modified)
            parent_b: the second parent (not modified)

        Returns:
            A new chromosome with the same length as the parents

        Raises:
            ArityMismatchError: if the parents have different lengths
        """
        if len(parent_a) != len(parent_b):
            raise ArityMismatchError(
                f"Cannot cross over chromosomes of length {len(parent_a)} and {len(parent_b)}")

        genes_a = parent_a.genes
        genes_b = parent_b.genes
        child   = [genes_a[i] if rng.random() < 0.5 else genes_b[i] for i in range(len(parent_a))]
        return Chromosome(np.array(child, dtype=np.float32))

    def __repr__(self):
        return "UniformCrossover()"
