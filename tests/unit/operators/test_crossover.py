"""
Unit tests for evonet.operators.crossover module.
"""

import pytest
import numpy as np

from evonet.errors import ArityMismatchError
from evonet.genotype import Chromosome
from evonet.operators.crossover import UniformCrossover


@pytest.fixture
def crossover():
    return UniformCrossover()


class TestUniformCrossover:
    """Test UniformCrossover.crossover()."""

    def test_scripted_choices(self, crossover, scripted_rng):
        """Draws below 0.5 take the gene from parent A, the others from parent B."""
        rng = scripted_rng([0.1, 0.9, 0.4, 0.5])
        child = crossover.crossover(rng, Chromosome([1.0, 2.0, 3.0, 4.0]), Chromosome([5.0, 6.0, 7.0, 8.0]))

        assert child.to_list() == [1.0, 6.0, 3.0, 8.0]
        assert rng.remaining == 0

    def test_every_gene_comes_from_a_parent(self, crossover, rng):
        parent_a = Chromosome(np.arange(50, dtype=np.float32))
        parent_b = Chromosome(-np.arange(50, dtype=np.float32) - 1.0)

        child = crossover.crossover(rng, parent_a, parent_b)

        for i in range(50):
            assert child[i] in (parent_a[i], parent_b[i])

    def test_both_parents_contribute(self, crossover):
        parent_a = Chromosome(np.zeros(1000))
        parent_b = Chromosome(np.ones(1000))

        child = crossover.crossover(np.random.default_rng(1), parent_a, parent_b)

        assert float(np.mean(child.genes)) == pytest.approx(0.5, abs=0.05)

    def test_identical_parents(self, crossover, rng):
        parent = Chromosome([0.5, -1.5, 2.25])
        assert crossover.crossover(rng, parent, parent.copy()) == parent

    def test_parents_not_modified(self, crossover, rng):
        parent_a = Chromosome([1.0, 2.0, 3.0])
        parent_b = Chromosome([4.0, 5.0, 6.0])

        child = crossover.crossover(rng, parent_a, parent_b)
        child[0] = 100.0

        assert parent_a.to_list() == [1.0, 2.0, 3.0]
        assert parent_b.to_list() == [4.0, 5.0, 6.0]

    def test_child_is_new_chromosome(self, crossover, scripted_rng):
        parent_a = Chromosome([1.0, 2.0])
        child = crossover.crossover(scripted_rng([0.0, 0.0]), parent_a, Chromosome([3.0, 4.0]))

        assert child == parent_a
        assert child is not parent_a
        assert child.genes.dtype == np.float32

    def test_empty_parents(self, crossover, scripted_rng):
        rng = scripted_rng([])
        child = crossover.crossover(rng, Chromosome(), Chromosome())
        assert len(child) == 0

    def test_same_seed_same_child(self, crossover):
        parent_a = Chromosome(np.zeros(20))
        parent_b = Chromosome(np.ones(20))

        child_1 = crossover.crossover(np.random.default_rng(9), parent_a, parent_b)
        child_2 = crossover.crossover(np.random.default_rng(9), parent_a, parent_b)

        assert child_1 == child_2

    def test_length_mismatch(self, crossover, rng):
        with pytest.raises(ArityMismatchError):
            crossover.crossover(rng, Chromosome([1.0, 2.0]), Chromosome([1.0, 2.0, 3.0]))
