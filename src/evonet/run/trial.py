"""
Trial Module

This module defines the abstract base class for evonet trials with built-in
support for CPU-based parallelization of fitness evaluation using joblib.

A trial represents one independent, seeded run of the genetic algorithm,
evolving a population through generations until a solution is found or the
maximum number of generations is reached.
"""

from abc        import ABC, abstractmethod
from joblib     import Parallel, delayed
from statistics import mean

import numpy as np
from loguru import logger

from evonet.errors                 import InvalidConfigError
from evonet.genotype               import Chromosome
from evonet.operators              import GaussianMutation, RouletteWheelSelection, UniformCrossover
from evonet.phenotype              import Network, Organism
from evonet.pool.genetic_algorithm import GeneticAlgorithm
from evonet.pool.statistics        import PopulationStatistics
from evonet.run.config             import Config

class Trial(ABC):
    """
    Abstract base class for implementing an evonet trial.

    Every individual in the population is an Organism whose chromosome holds
    the parameters of a network with the configured topology. Each generation,
    the chromosomes are rehydrated into networks, the networks are evaluated,
    and the genetic algorithm produces the next population.

    Subclasses must implement:
    - _evaluate_fitness(network): Evaluate fitness for a single network

    Subclasses can override:
    - _reset():           Reset trial-specific state (call super()._reset())
    - _report_progress(): Display progress after each generation
    - _final_report():    Display final results
    - _terminate():       Custom termination logic (default: max generations + fitness threshold)

    Public Attributes:
        history: PopulationStatistics of every generation evaluated so far
        failed:  Whether the trial ended without reaching the fitness threshold

    Public Properties:
        generation: The current generation number
        population: The current population
        fittest:    The individual with the highest fitness

    Public Methods:
        run(): Execute a complete trial

    Parallelization of fitness evaluation for individuals:
        num_jobs=1:  Serial evaluation (no parallelization)
        num_jobs>1:  Use specified number of parallel processes
        num_jobs=-1: Use all available CPU cores
    """

    def __init__(self, config: Config, suppress_output: bool = False):
        """
        Initialize the trial.

        Parameters:
            config:          Configuration parameters
            suppress_output: If True, suppress progress and final reports
                             (useful when running multiple trials in experiments)
        """
        self._config            : Config                     = config
        self._generation_counter: int                        = 0
        self._population        : list[Organism]             = []
        self._rng               : np.random.Generator | None = None
        self._suppress_output   : bool                       = suppress_output
        self.history            : list[PopulationStatistics] = []
        self.failed             : bool                       = True

        self._genetic_algorithm = GeneticAlgorithm(
            RouletteWheelSelection(),
            UniformCrossover(),
            GaussianMutation(config.mutation_chance, config.mutation_coefficient))

    @property
    def generation(self) -> int:
        return self._generation_counter

    @property
    def population(self) -> list[Organism]:
        return self._population

    @property
    def fittest(self) -> Organism:
        """The individual with the highest fitness in the current population."""
        return max(self._population, key=lambda individual: individual.fitness)

    def run(self, num_jobs: int = 1):
        """
        Run the trial.

        Resets the trial state and runs the genetic algorithm
        until the terminate condition is met.

        Parameters:
            num_jobs: Number of parallel processes for fitness evaluation of individuals
                      1 = serial (no parallelization)
                     -1 = use all available CPU cores
                     >1 = use specified number of processes
        """
        # Reset the trial state before starting a new run
        self._reset()

        # Create the initial population from random networks
        topology = self._config.topology
        self._population = [Organism.create(Chromosome(Network.random(self._rng, topology).data()))
                            for _ in range(self._config.population_size)]

        # Evaluate the fitness of the initial population
        self._evaluate_fitness_all(num_jobs)

        # Display progress for the initial population
        if not self._suppress_output:
            self._report_progress()

        # Evolution loop
        while not self._terminate():
            self._generation_counter += 1

            # The members of the population mate and create offspring
            self._population = self._genetic_algorithm.evolve(self._rng, self._population)

            # Evaluate the fitness of each individual in the new generation
            self._evaluate_fitness_all(num_jobs)

            # Display progress after each generation
            if not self._suppress_output:
                self._report_progress()

        # Produce final report
        if not self._suppress_output:
            self._final_report()

    def _reset(self):
        """
        Reset the trial state before starting a new run.

        Subclasses should call super()._reset() and then
        initialize their problem-specific data.
        """
        self._rng = np.random.default_rng(self._config.seed)
        self._generation_counter = 0
        self._population = []
        self.history = []
        self.failed = True

    @abstractmethod
    def _evaluate_fitness(self, network: Network) -> float:
        """
        Evaluate and return the fitness of a network.

        This method should test the network on the problem domain and compute
        a fitness score. Higher fitness values indicate better performance and
        higher probability of procreating.

        IMPORTANT: The fitness must be a positive number (or zero).

        Parameters:
            network: The network (rebuilt from an individual's chromosome) to evaluate

        Returns:
            float: Fitness score for the network
        """
        pass

    def _evaluate_fitness_all(self, num_jobs: int):
        """
        Evaluate fitness for all individuals in the population.

        Uses serial or parallel evaluation based on num_jobs:
        - num_jobs=1: Sequential evaluation in single process
        - num_jobs>1 or -1: Parallel evaluation using joblib

        Updates individual.fitness for all individuals and records
        the statistics of the evaluated generation in 'history'.

        Parameters:
            num_jobs: Number of parallel processes for fitness evaluation
        """
        individuals = self._population
        networks    = [individual.network(self._config.topology) for individual in individuals]
        serialize   = num_jobs == 1

        # Calculate individuals' fitness
        if serialize:
            fitness_all = [self._evaluate_fitness(network) for network in networks]
        else:
            fitness_all = Parallel(num_jobs)(delayed(self._evaluate_fitness)(n) for n in networks)

        for individual, fitness in zip(individuals, fitness_all):
            individual.fitness = float(fitness)

        self.history.append(PopulationStatistics.from_population(individuals, self._generation_counter))

    def _report_progress(self):
        """
        Report trial progress after each generation.

        This method is suppressed by setting 'self._suppress_output' to 'True',
        which we might do when running many trials, as part of an experiment.
        """
        logger.info("[Trial] {}", self.history[-1])

    def _final_report(self):
        """
        Produce final report at the end of the trial.

        This method is suppressed by setting 'self._suppress_output' to 'True',
        which we might do when running many trials, as part of an experiment.
        """
        fittest = self.fittest
        logger.info("[Trial] Finished after {} generations ({}); best fitness {:.4f}",
                    self._generation_counter, "failed" if self.failed else "succeeded", fittest.fitness)
        logger.info("[Trial] Best DNA: {}", fittest.dna)

    def _terminate(self) -> bool:
        """
        Determine whether the trial should terminate.

        This default implementation stops the trial after a maximum number
        of generations and (optionally) also stops it if a given measure of
        population fitness has reached a given threshold.

        Subclasses can override this method for custom termination logic.

        Returns:
            bool: True if the trial should stop, False otherwise

        Raises:
            InvalidConfigError: if the fitness check is enabled without a threshold
        """
        # Has this trial run for too long?
        terminate = self._generation_counter >= self._config.max_number_generations

        # Check whether the fitness has reached a target threshold
        if self._config.fitness_termination_check:
            if self._config.fitness_threshold is None:
                raise InvalidConfigError("fitness_threshold is required when fitness_termination_check is enabled")

            individual_fitness = [indv.fitness for indv in self._population]

            if self._config.fitness_criterion == "max":
                overall_fitness = max(individual_fitness)
            else:
                overall_fitness = mean(individual_fitness)

            # Compare a measure of population fitness (max, mean) against a threshold
            success = overall_fitness >= self._config.fitness_threshold
            terminate = terminate or success

            if terminate:
                self.failed = not success

        return terminate
