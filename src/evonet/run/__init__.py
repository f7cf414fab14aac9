"""
Run Package

This package drives evolutionary runs: configuration, single trials and
experiments made of many trials.

Modules:
    config:     Config class (INI file parsing)
    trial:      Trial abstract base class
    experiment: Experiment class
"""

from evonet.run.config     import Config
from evonet.run.experiment import Experiment, ExperimentResult, TrialResult
from evonet.run.trial      import Trial

__all__ = ['Config',
           'Experiment',
           'ExperimentResult',
           'Trial',
           'TrialResult']
