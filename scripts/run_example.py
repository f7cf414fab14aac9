#!/usr/bin/env python3
"""
Utility script to run evonet examples easily.

Usage:
    python scripts/run_example.py xor
    python scripts/run_example.py xor --mode experiment --num-trials 20
"""

import sys
import argparse
from pathlib import Path

from loguru import logger

# Add parent directory to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from evonet import Config
from examples.trial_XOR import Trial_XOR, Experiment_XOR


EXAMPLES = {
    'xor': {
        'trial': Trial_XOR,
        'experiment': Experiment_XOR,
        'config': 'examples/configs/config_xor.ini',
        'description': 'XOR logic problem'
    }
}


def main():
    parser = argparse.ArgumentParser(description='Run evonet examples')
    parser.add_argument('example', choices=EXAMPLES.keys(),
                        help='Example to run')
    parser.add_argument('--mode', choices=['trial', 'experiment'], default='trial',
                        help='Run single trial or full experiment')
    parser.add_argument('--num-trials', type=int, default=20,
                        help='Number of trials for experiment mode')
    parser.add_argument('--num-jobs', type=int, default=4,
                        help='Number of parallel jobs')
    parser.add_argument('--seed', type=int, default=None,
                        help='Override the seed from the configuration file')

    args = parser.parse_args()
    logger.enable("evonet")

    example = EXAMPLES[args.example]
    print(f"Running {example['description']}...")
    print(f"Mode: {args.mode}")

    config = Config(example['config'])
    if args.seed is not None:
        config.seed = args.seed

    if args.mode == 'trial':
        trial = example['trial'](config)
        trial.run(num_jobs=args.num_jobs)
        print(f"\nBest fitness: {trial.fittest.fitness:.4f}")
        print(f"Best DNA: {trial.fittest.dna}")
    else:
        experiment = example['experiment'](num_trials=args.num_trials, config=config)
        experiment.run(num_jobs_trials=args.num_jobs, num_jobs_fitness=1)


if __name__ == '__main__':
    main()
