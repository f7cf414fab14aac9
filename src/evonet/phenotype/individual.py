"""
Individual Module

This module defines the Individual capability consumed by the genetic
algorithm, and Organism, the concrete individual used by the evonet harness.

The genetic algorithm never needs to know what an individual really is: it
only reads its fitness and its chromosome, and asks the individual's class to
build a new individual from a freshly evolved chromosome. Any class providing
these three members can be evolved, without inheriting from anything.

Classes:
    Individual: Protocol describing what the genetic algorithm needs from a population member
    Organism:   A chromosome paired with a fitness, rehydratable into a Network
"""

from itertools import count
from typing    import Protocol, Sequence, TypeVar, runtime_checkable

from evonet.genotype          import Chromosome
from evonet.phenotype.network import Network

I = TypeVar('I', bound='Individual')

@runtime_checkable
class Individual(Protocol):
    """
    A member of an evolving population.

    Required members:
        fitness:           Fitness score; higher means more likely to reproduce
        chromosome:        The heritable genes; treated as read-only by the genetic algorithm
        create(chromosome): Build a new individual (with a fresh fitness) from a chromosome
    """

    @property
    def fitness(self) -> float: ...

    @property
    def chromosome(self) -> Chromosome: ...

    @classmethod
    def create(cls: type[I], chromosome: Chromosome) -> I: ...

class Organism:
    """
    An individual whose chromosome holds the parameters of a feed-forward network.

    The organism itself stores only its chromosome; its network is rebuilt on
    demand for a given topology. The fitness starts at 0.0 and is assigned by
    the caller once the organism has been evaluated.

    Public Attributes:
        ID:      Globally unique identifier for this organism
        fitness: Fitness score (0.0 until evaluated)

    Public Properties:
        chromosome: The organism's genes
        dna:        The chromosome encoded as a DNA string

    Public Methods:
        create(chromosome): Build a new organism from a chromosome (classmethod)
        network(topology):  Rebuild the network encoded by the chromosome
    """

    _id_generator = count(0)

    def __init__(self, chromosome: Chromosome, fitness: float = 0.0):
        self.ID         : int        = next(Organism._id_generator)
        self.fitness    : float      = fitness
        self._chromosome: Chromosome = chromosome

    @classmethod
    def create(cls, chromosome: Chromosome) -> 'Organism':
        return cls(chromosome)

    @property
    def chromosome(self) -> Chromosome:
        return self._chromosome

    @property
    def dna(self) -> str:
        return self._chromosome.to_dna()

    def network(self, topology: Sequence[int]) -> Network:
        """
        Rebuild the network encoded by this organism's chromosome.

        Parameters:
            topology: ordered layer widths, inputs first; must match the chromosome length
        """
        return Network.from_data(topology, self._chromosome)

    def __str__(self):
        return f"ID={self.ID}, fitness={self.fitness:.4f}\n{self._chromosome}"

    def __repr__(self):
        return f"Organism(chromosome={self._chromosome!r}, fitness={self.fitness!r})"
