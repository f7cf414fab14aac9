"""
XOR Problem Implementation for evonet

This module implements the classic XOR (exclusive OR) problem as a benchmark
for the genetic algorithm. The network topology is fixed by the configuration;
only the weights and biases evolve.

The XOR Problem:
    XOR is a two-input, one-output boolean function where the output is True
    only when the inputs differ:
        Input (0, 0) -> Output 0
        Input (0, 1) -> Output 1
        Input (1, 0) -> Output 1
        Input (1, 1) -> Output 0

    This problem cannot be solved without a hidden layer, so the smallest
    usable topology is [2, 2, 1]. The example configuration uses [2, 4, 1].

Fitness Function:
    Fitness = max(0, 4.0 - sum((output - target)^2))

    Maximum fitness of 4.0 is achieved when all four XOR cases produce exact
    outputs. The fitness is clipped at zero since selection is fitness
    proportionate.

Classes:
    Trial_XOR:      Trial for solving XOR
    Experiment_XOR: Multi-trial experiment for XOR

Usage:
    Single Trial:
        config = Config("examples/configs/config_xor.ini")
        trial = Trial_XOR(config)
        trial.run(num_jobs=1)

    Experiment (Multiple Trials):
        config = Config("examples/configs/config_xor.ini")
        experiment = Experiment_XOR(num_trials=20, config=config)
        experiment.run(num_jobs_trials=-1)
"""

import numpy as np
from loguru import logger

from evonet.phenotype  import Network, visualize
from evonet.run        import Config, Experiment, Trial

XOR_INPUTS  = [[0.0, 0.0], [0.0, 1.0], [1.0, 0.0], [1.0, 1.0]]
XOR_OUTPUTS = [0.0, 1.0, 1.0, 0.0]

class Trial_XOR(Trial):
    """
    Trial evolving the weights of a fixed-topology network to compute XOR.

    Implemented Methods:
        _evaluate_fitness(network): Test network on all 4 XOR cases
        _report_progress():         Log generation statistics and the XOR truth table
        _final_report():            Visualize the fittest network
    """

    def __init__(self, config: Config, suppress_output: bool = False, visualize_result: bool = False):
        """
        Parameters:
            config:           Configuration parameters
            suppress_output:  If True, suppress progress and final reports
            visualize_result: If True, render the fittest network at the end of the trial
        """
        super().__init__(config, suppress_output)
        self._visualize_result = visualize_result

    def _evaluate_fitness(self, network: Network) -> float:
        """
        Parameters:
            network: The network to evaluate

        Returns:
            Fitness score (maximum 4.0 for a perfect XOR solution)
        """
        fitness = 4.0  # max possible fitness
        for inputs, target in zip(XOR_INPUTS, XOR_OUTPUTS):
            output   = network.propagate(inputs)[0]
            fitness -= (float(output) - target) ** 2
        return max(0.0, fitness)

    def _report_progress(self):
        super()._report_progress()

        # show the truth table of the fittest network every 25 generations
        if self.generation % 25 == 0:
            network = self.fittest.network(self._config.topology)
            for inputs, target in zip(XOR_INPUTS, XOR_OUTPUTS):
                output = float(network.propagate(inputs)[0])
                logger.info("[XOR] {} -> {:.4f} (target {}, error {:.4f})", inputs, output, target, abs(output - target))

    def _final_report(self):
        super()._final_report()

        if self._visualize_result:
            visualize(self.fittest.network(self._config.topology), view=True)

class Experiment_XOR(Experiment):

    def __init__(self, num_trials: int, config: Config, suppress_output: bool = False):
        """
        Parameters:
            num_trials:      Number of trials in this experiment
            config:          Configuration parameters
            suppress_output: If True, do not log the final summary
        """
        super().__init__(Trial_XOR, num_trials, config, suppress_output=suppress_output)

    def _final_report(self, result):
        super()._final_report(result)

        if self._config.fitness_threshold is None:
            return

        # how quickly did the successful trials converge
        generations = [g for g, fitness in zip(result.generations, result.max_fitness)
                       if fitness >= self._config.fitness_threshold]
        if generations:
            logger.info("[XOR] Successful trials needed {:.0f} generations on average", np.mean(generations))
        else:
            logger.info("[XOR] No successful trials")
