"""
Shared fixtures for integration tests.
"""

import pytest

from evonet.run.config import Config


@pytest.fixture
def target_config():
    """A small population of [2, 2, 1] networks, seeded for reproducibility."""
    config = Config()
    config.population_size = 40
    config.topology = [2, 2, 1]
    config.mutation_chance = 0.3
    config.mutation_coefficient = 0.5
    config.max_number_generations = 30
    config.seed = 42
    return config
