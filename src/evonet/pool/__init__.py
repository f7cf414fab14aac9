"""
Pool Package

This package operates on whole populations: producing the next generation and
summarizing the current one.

Modules:
    genetic_algorithm: GeneticAlgorithm class
    statistics:        PopulationStatistics class
"""

from evonet.pool.genetic_algorithm import GeneticAlgorithm
from evonet.pool.statistics        import PopulationStatistics

__all__ = ['GeneticAlgorithm',
           'PopulationStatistics']
