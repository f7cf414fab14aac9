"""Pytest configuration and shared fixtures."""

import pytest
import sys
from itertools import count
from pathlib import Path

import numpy as np

# Add the source directory to the Python path
root_dir = Path(__file__).parent.parent
sys.path.insert(0, str(root_dir / "src"))


class ScriptedRng:
    """
    Stand-in for numpy.random.Generator replaying a fixed list of draws.

    Only random() is used by the genetic operators; every call consumes the
    next scripted value, and running out of values fails the test.
    """

    def __init__(self, draws):
        self._draws = list(draws)
        self._position = 0

    def random(self):
        if self._position >= len(self._draws):
            raise AssertionError(f"ScriptedRng exhausted after {self._position} draws")
        value = self._draws[self._position]
        self._position += 1
        return value

    @property
    def remaining(self):
        return len(self._draws) - self._position


class GeneSumIndividual:
    """
    Minimal individual whose fitness is the sum of its genes, clipped at zero.

    Not an Organism subclass; it only provides the fitness, chromosome and
    create members.
    """

    def __init__(self, chromosome, fitness):
        self.chromosome = chromosome
        self.fitness = fitness

    @classmethod
    def create(cls, chromosome):
        return cls(chromosome, max(0.0, float(sum(chromosome))))


@pytest.fixture
def scripted_rng():
    """Factory fixture: scripted_rng([0.1, 0.7, ...]) -> ScriptedRng."""
    return ScriptedRng


@pytest.fixture
def rng():
    """A seeded numpy random generator."""
    return np.random.default_rng(42)


@pytest.fixture(autouse=True)
def reset_organism_id_generator():
    """Reset Organism ID generator before each test."""
    from evonet.phenotype.individual import Organism
    Organism._id_generator = count(0)
    yield
    Organism._id_generator = count(0)


@pytest.fixture
def gene_sum_individual():
    """The GeneSumIndividual class."""
    return GeneSumIndividual
