"""
Integration tests for basic evonet evolution.

These tests run the whole loop: random networks are flattened into
chromosomes, evaluated, evolved by the genetic algorithm, rehydrated into
networks, and transmitted as DNA strings. All runs use fixed seeds.
"""

import pytest
import numpy as np

from evonet.genotype import Chromosome
from evonet.operators import GaussianMutation, RouletteWheelSelection, UniformCrossover
from evonet.phenotype import Network, Organism
from evonet.pool import GeneticAlgorithm, PopulationStatistics
from evonet.run.trial import Trial


# ============================================================================
# Helper Trial Class
# ============================================================================

class TrialTargetOutput(Trial):
    """Reward networks whose output for input [1, 1] is close to 1."""

    def __init__(self, config, suppress_output=True):
        super().__init__(config, suppress_output)

    def _evaluate_fitness(self, network):
        output = network.propagate([1.0, 1.0])[0]
        return max(0.0, 1.0 - abs(float(output) - 1.0))


# ============================================================================
# Test Fixtures
# ============================================================================

@pytest.fixture
def starting_population(gene_sum_individual):
    """Four individuals with gene sums 0, 3, 4 and 7 (total 14)."""
    return [gene_sum_individual.create(Chromosome(genes))
            for genes in ([0.0, 0.0, 0.0], [1.0, 1.0, 1.0], [1.0, 2.0, 1.0], [1.0, 2.0, 4.0])]


@pytest.fixture
def genetic_algorithm():
    return GeneticAlgorithm(RouletteWheelSelection(), UniformCrossover(), GaussianMutation(0.5, 0.5))


def evolve(genetic_algorithm, population, seed, generations):
    rng = np.random.default_rng(seed)
    for _ in range(generations):
        population = genetic_algorithm.evolve(rng, population)
    return population


# ============================================================================
# Gene Sum Scenario
# ============================================================================

class TestGeneSumScenario:
    """Four individuals whose fitness is their gene sum, evolved for 10 generations."""

    def test_reproducible_final_population(self, genetic_algorithm, starting_population):
        final_1 = evolve(genetic_algorithm, starting_population, seed=1, generations=10)
        final_2 = evolve(genetic_algorithm, starting_population, seed=1, generations=10)

        assert [i.chromosome.to_dna() for i in final_1] == [i.chromosome.to_dna() for i in final_2]
        assert [i.fitness for i in final_1] == [i.fitness for i in final_2]

    def test_recorded_final_dna(self, genetic_algorithm, starting_population):
        """Seed 42: the final population, as transmitted DNA, and its total fitness."""
        final = evolve(genetic_algorithm, starting_population, seed=42, generations=10)

        assert [i.chromosome.to_dna() for i in final] == ["hgkY-hgVI-hhxt",
                                                           "hgjj-hgXw-hhDT",
                                                           "hfVR-hgWP-hhDW",
                                                           "hgbK-hgSS-hhLA"]
        assert sum(i.fitness for i in final) >= 14.0

    def test_total_fitness_grows(self, genetic_algorithm, starting_population):
        totals = [sum(i.fitness for i in evolve(genetic_algorithm, starting_population, seed, 10))
                  for seed in range(20)]
        assert np.mean(totals) > 14.0

    def test_starting_population_untouched(self, genetic_algorithm, starting_population):
        evolve(genetic_algorithm, starting_population, seed=3, generations=10)
        assert [i.chromosome.to_list() for i in starting_population] == \
               [[0.0, 0.0, 0.0], [1.0, 1.0, 1.0], [1.0, 2.0, 1.0], [1.0, 2.0, 4.0]]

    def test_statistics_track_evolution(self, genetic_algorithm, starting_population):
        rng = np.random.default_rng(4)
        population = starting_population
        history = [PopulationStatistics.from_population(population, 0)]
        for generation in range(1, 11):
            population = genetic_algorithm.evolve(rng, population)
            history.append(PopulationStatistics.from_population(population, generation))

        assert history[0].total_fitness == 14.0
        assert [stats.generation for stats in history] == list(range(11))
        assert all(stats.size == 4 for stats in history)


# ============================================================================
# Network Round Trips
# ============================================================================

class TestNetworkChromosomeDna:
    """Network -> Chromosome -> DNA -> Chromosome -> Network."""

    def test_closed_loop(self):
        rng      = np.random.default_rng(10)
        topology = [11, 24, 5]
        network  = Network.random(rng, topology)

        dna     = Chromosome(network.data()).to_dna()
        rebuilt = Network.from_data(topology, Chromosome.from_dna(dna))

        np.testing.assert_allclose(rebuilt.data(), network.data(), atol=1e-3)

        inputs = rng.uniform(-1.0, 1.0, size=11)
        np.testing.assert_allclose(rebuilt.propagate(inputs), network.propagate(inputs), atol=0.1)

    def test_exact_loop_without_dna(self):
        rng      = np.random.default_rng(11)
        network  = Network.random(rng, [4, 3, 2])
        organism = Organism.create(Chromosome(network.data()))

        np.testing.assert_array_equal(organism.network([4, 3, 2]).data(), network.data())

    def test_dna_is_stable_after_first_round_trip(self):
        network = Network.random(np.random.default_rng(12), [3, 3, 2])
        dna     = Chromosome(network.data()).to_dna()

        assert Chromosome.from_dna(dna).to_dna() == dna


# ============================================================================
# Full Trial
# ============================================================================

class TestTrialEvolution:
    """Run a complete trial on a simple target output problem."""

    def test_mean_fitness_improves(self, target_config):
        trial = TrialTargetOutput(target_config)
        trial.run()

        late_mean = np.mean([stats.mean_fitness for stats in trial.history[-5:]])
        assert late_mean > trial.history[0].mean_fitness

    def test_fittest_survives_dna_transmission(self, target_config):
        trial = TrialTargetOutput(target_config)
        trial.run()

        fittest  = trial.fittest
        received = Organism.create(Chromosome.from_dna(fittest.dna))
        network  = received.network(target_config.topology)

        assert trial._evaluate_fitness(network) == pytest.approx(fittest.fitness, abs=0.05)

    def test_trial_is_reproducible(self, target_config):
        trial_1 = TrialTargetOutput(target_config)
        trial_1.run()
        trial_2 = TrialTargetOutput(target_config)
        trial_2.run()

        assert trial_1.history == trial_2.history
        assert trial_1.fittest.dna == trial_2.fittest.dna
