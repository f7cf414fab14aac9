"""
Operators Package

This package implements the three genetic operators used by the genetic
algorithm. Each operator is described by a small Protocol; the concrete
strategies satisfy it structurally and can be swapped freely.

Modules:
    selection: SelectionMethod protocol and RouletteWheelSelection
    crossover: CrossoverMethod protocol and UniformCrossover
    mutation:  MutationMethod protocol and GaussianMutation
"""

from evonet.operators.crossover import CrossoverMethod, UniformCrossover
from evonet.operators.mutation  import GaussianMutation, MutationMethod
from evonet.operators.selection import RouletteWheelSelection, SelectionMethod

__all__ = ['CrossoverMethod',
           'GaussianMutation',
           'MutationMethod',
           'RouletteWheelSelection',
           'SelectionMethod',
           'UniformCrossover']
