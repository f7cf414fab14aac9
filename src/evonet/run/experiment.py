"""
Experiment Module

This module defines the Experiment class, which runs many independent trials
of the same problem, with built-in support for CPU-based parallelization
using joblib.

An experiment is used to gather statistical data about the performance of the
genetic algorithm: success rate, convergence speed and fitness distribution.
"""

import copy
from dataclasses import dataclass
from joblib      import Parallel, delayed
from typing      import Type

import numpy as np
from loguru import logger

from evonet.run.config import Config
from evonet.run.trial  import Trial

@dataclass(frozen=True)
class TrialResult:
    """Outcome of a single trial."""
    seed       : int
    generations: int
    max_fitness: float
    failed     : bool

@dataclass(frozen=True)
class ExperimentResult:
    """
    Aggregated outcome of an experiment.

    Attributes:
        num_trials:  Number of trials run
        successes:   Number of trials that reached the fitness threshold
        generations: Length of each trial, in generations
        max_fitness: Best fitness reached in each trial
        seeds:       Seed used by each trial
    """
    num_trials : int
    successes  : int
    generations: list[int]
    max_fitness: list[float]
    seeds      : list[int]

    @property
    def success_rate(self) -> float:
        return self.successes / self.num_trials if self.num_trials else 0.0

def _run_trial(trial_class: Type[Trial], config: Config, trial_args: tuple, trial_kwargs: dict,
               num_jobs_fitness: int) -> TrialResult:
    """
    Build, run and summarize one trial. Module level, so that it can be sent to joblib workers.
    """
    trial = trial_class(*trial_args, config=config, suppress_output=True, **trial_kwargs)
    trial.run(num_jobs_fitness)
    return TrialResult(seed        = config.seed,
                       generations = trial.generation,
                       max_fitness = trial.fittest.fitness,
                       failed      = trial.failed)

class Experiment:
    """
    A collection of independent trials of the same problem.

    Each trial gets its own copy of the configuration, with a seed spawned from
    the configured one (numpy SeedSequence), so trials draw from independent
    random streams and the whole experiment is reproducible from one seed,
    whether the trials run serially or in parallel.

    Public Methods:
        run(num_jobs_trials=1, num_jobs_fitness=1): Execute the complete experiment

    Parallelization:
        Supports two levels of parallelization:

        Trial-level parallelization (num_jobs_trials):
            1:  Serial trial execution (no parallelization)
           >1:  Use specified number of parallel processes for trials
           -1:  Use all available CPU cores for trials

        Fitness-level parallelization within each trial (num_jobs_fitness):
            1:  Serial fitness evaluation (recommended when num_jobs_trials > 1)
           >1:  Use specified number of parallel processes per trial
           -1:  Use all available CPU cores per trial
    """

    def __init__(self, trial_class: Type[Trial], num_trials: int, config: Config,
                 *args, suppress_output: bool = False, **kwargs):
        """
        Parameters:
            trial_class:     the class describing the trials in this experiment
            num_trials:      number of trials in this experiment
            config:          configuration parameters
            suppress_output: if True, do not log the final summary
            *args:           positional arguments to pass to trial class constructor
            **kwargs:        keyword arguments to pass to trial class constructor
        """
        self._num_trials     : int         = num_trials
        self._trial_class    : Type[Trial] = trial_class
        self._config         : Config      = config
        self._suppress_output: bool        = suppress_output
        self._trial_args                   = args
        self._trial_kwargs                 = kwargs

    def trial_configs(self) -> list[Config]:
        """
        One configuration per trial, identical to the experiment's except for the seed.
        """
        children = np.random.SeedSequence(self._config.seed).spawn(self._num_trials)
        configs  = []
        for child in children:
            config      = copy.copy(self._config)
            config.seed = int(child.generate_state(1)[0])
            configs.append(config)
        return configs

    def run(self, num_jobs_trials: int = 1, num_jobs_fitness: int = 1) -> ExperimentResult:
        """
        Run the experiment.

        Parameters:
            num_jobs_trials:  Number of parallel processes for running trials
                               1 = serial trial execution (default)
                              -1 = use all available CPU cores for trials
                              >1 = use specified number of processes for trials
            num_jobs_fitness: Number of parallel processes for fitness evaluation within each trial
                               1 = serial (default, recommended when num_jobs_trials > 1 to avoid nested parallelization)
                              -1 = use all available CPU cores
                              >1 = use specified number of processes

        Returns:
            The aggregated results of all trials
        """
        configs   = self.trial_configs()
        serialize = num_jobs_trials == 1

        if serialize:
            results = [_run_trial(self._trial_class, config, self._trial_args, self._trial_kwargs, num_jobs_fitness)
                       for config in configs]
        else:
            results = Parallel(num_jobs_trials)(
                delayed(_run_trial)(self._trial_class, config, self._trial_args, self._trial_kwargs, num_jobs_fitness)
                for config in configs
            )

        result = ExperimentResult(num_trials  = self._num_trials,
                                  successes   = sum(1 for r in results if not r.failed),
                                  generations = [r.generations for r in results],
                                  max_fitness = [r.max_fitness for r in results],
                                  seeds       = [r.seed for r in results])

        if not self._suppress_output:
            self._final_report(result)

        return result

    def _final_report(self, result: ExperimentResult):
        logger.info("[Experiment] {} trials, success rate {:.2%}", result.num_trials, result.success_rate)
        if result.num_trials:
            logger.info("[Experiment] generations: mean {:.1f}, max fitness: mean {:.4f}, best {:.4f}",
                        float(np.mean(result.generations)),
                        float(np.mean(result.max_fitness)),
                        float(np.max(result.max_fitness)))
