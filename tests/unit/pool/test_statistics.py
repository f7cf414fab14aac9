"""
Unit tests for evonet.pool.statistics module.
"""

import dataclasses

import pytest

from evonet.errors import ArityMismatchError, EmptyPopulationError
from evonet.genotype import Chromosome
from evonet.phenotype.individual import Organism
from evonet.pool.statistics import PopulationStatistics


@pytest.fixture
def population():
    """
    Gene columns: [0, 2, 4, 6] (variance 5), [1, 1, 1, 1] (variance 0).
    Fitness: 0, 1, 2, 5.
    """
    return [Organism(Chromosome([0.0, 1.0]), fitness=0.0),
            Organism(Chromosome([2.0, 1.0]), fitness=1.0),
            Organism(Chromosome([4.0, 1.0]), fitness=2.0),
            Organism(Chromosome([6.0, 1.0]), fitness=5.0)]


class TestPopulationStatistics:
    """Test PopulationStatistics.from_population()."""

    def test_fitness_summary(self, population):
        stats = PopulationStatistics.from_population(population, generation=3)

        assert stats.generation == 3
        assert stats.size == 4
        assert stats.min_fitness == 0.0
        assert stats.max_fitness == 5.0
        assert stats.mean_fitness == 2.0
        assert stats.total_fitness == 8.0

    def test_survivors_percentage(self, population):
        stats = PopulationStatistics.from_population(population)
        assert stats.survivors_percentage == 0.75

    def test_genetic_variance(self, population):
        stats = PopulationStatistics.from_population(population)
        assert stats.genetic_variance == pytest.approx(2.5)

    def test_identical_chromosomes_have_no_variance(self):
        population = [Organism(Chromosome([0.5, -0.5]), fitness=1.0) for _ in range(3)]
        assert PopulationStatistics.from_population(population).genetic_variance == 0.0

    def test_empty_chromosomes(self):
        population = [Organism(Chromosome(), fitness=1.0) for _ in range(2)]
        assert PopulationStatistics.from_population(population).genetic_variance == 0.0

    def test_default_generation(self, population):
        assert PopulationStatistics.from_population(population).generation == 0

    def test_is_frozen(self, population):
        stats = PopulationStatistics.from_population(population)
        with pytest.raises(dataclasses.FrozenInstanceError):
            stats.size = 10

    def test_str(self, population):
        text = str(PopulationStatistics.from_population(population, generation=7))
        assert "generation=  7" in text
        assert "5.0000/2.0000/0.0000" in text
        assert "survivors=75.00%" in text

    def test_empty_population(self):
        with pytest.raises(EmptyPopulationError):
            PopulationStatistics.from_population([])

    def test_unequal_chromosome_lengths(self):
        population = [Organism(Chromosome([1.0])), Organism(Chromosome([1.0, 2.0]))]
        with pytest.raises(ArityMismatchError):
            PopulationStatistics.from_population(population)
