"""
evonet - Deterministic neuroevolution of small feed-forward networks.

This package evolves the parameters of fixed-topology ReLU networks with a
genetic algorithm. A network is flattened into a chromosome (the ordered
vector of its biases and weights), chromosomes are evolved through roulette
wheel selection, uniform crossover and bounded mutation, and the results are
rehydrated into networks. Chromosomes can also be written to and read from a
compact text form ("DNA").

All randomness is threaded explicitly through a numpy random Generator, so a
fixed seed reproduces the same evolutionary trajectory.

Logging goes through loguru and is disabled for the "evonet" namespace on
import; applications opt in with logger.enable("evonet").

Main components:
- genotype:  Chromosome and DNA codec
- phenotype: Network, Individual protocol, Organism, visualization
- operators: Selection, crossover and mutation strategies
- pool:      GeneticAlgorithm and population statistics
- run:       Configuration, trial and experiment framework

Example:
    >>> from evonet import Config, Trial
    >>> config = Config("config.ini")
    >>> class MyTrial(Trial):
    ...     def _evaluate_fitness(self, network):
    ...         # Implement fitness evaluation
    ...         pass
    >>> trial = MyTrial(config)
    >>> trial.run()
"""

__version__ = "0.1.0"

from loguru import logger

# Import main classes for convenient access
from evonet.errors    import (ArityMismatchError,
                              DataExhaustedError,
                              EmptyPopulationError,
                              EvolutionError,
                              InvalidConfigError,
                              InvalidDnaError,
                              TrailingDataError,
                              UndefinedSelectionWeightsError)
from evonet.genotype  import Chromosome
from evonet.operators import GaussianMutation, RouletteWheelSelection, UniformCrossover
from evonet.phenotype import Individual, Network, Organism
from evonet.pool      import GeneticAlgorithm, PopulationStatistics
from evonet.run       import Config, Experiment, Trial

# Records stay silent until the application calls logger.enable("evonet")
logger.disable("evonet")

__all__ = [
    "ArityMismatchError",
    "Chromosome",
    "Config",
    "DataExhaustedError",
    "EmptyPopulationError",
    "EvolutionError",
    "Experiment",
    "GaussianMutation",
    "GeneticAlgorithm",
    "Individual",
    "InvalidConfigError",
    "InvalidDnaError",
    "Network",
    "Organism",
    "PopulationStatistics",
    "RouletteWheelSelection",
    "TrailingDataError",
    "Trial",
    "UndefinedSelectionWeightsError",
    "UniformCrossover",
]
