"""
Chromosome Module

This module implements the Chromosome class, the heritable part of an
individual: the flat vector of parameters (biases and weights) of the neural
network that powers it.

Classes:
    Chromosome: Ordered vector of float32 genes, convertible to/from DNA strings
"""

from typing import Iterable, Iterator

import numpy as np

from evonet.genotype import dna

class Chromosome:
    """
    An ordered vector of real-valued genes.

    Genes are stored as 32-bit floats in a numpy array. The chromosome does not
    know which network topology it encodes, and it does not validate its own
    length: the operations consuming it (crossover, network hydration) enforce
    matching lengths.

    Public Properties:
        genes: The underlying float32 array; mutating it mutates the chromosome

    Public Methods:
        to_list():            Consume the chromosome into a list of floats
        copy():               Create an independent copy
        isclose(other, tol):  Compare gene-by-gene within an absolute tolerance
        to_dna():             Encode as a DNA string
        from_dna(dna):        Decode a DNA string (classmethod)
    """

    def __init__(self, genes: Iterable[float] = ()):
        """
        Parameters:
            genes: the gene values, in order; they are copied and converted to float32
        """
        if not isinstance(genes, np.ndarray):
            genes = list(genes)
        self._genes: np.ndarray = np.array(genes, dtype=np.float32).reshape(-1)

    @property
    def genes(self) -> np.ndarray:
        """Mutable view of the genes."""
        return self._genes

    def __len__(self) -> int:
        return len(self._genes)

    def __getitem__(self, index: int | slice) -> 'float | Chromosome':
        """A single gene as a float, or a slice as a new, independent Chromosome."""
        if isinstance(index, slice):
            return Chromosome(self._genes[index])
        return float(self._genes[index])

    def __setitem__(self, index: int, value: float) -> None:
        self._genes[index] = value

    def __iter__(self) -> Iterator[float]:
        return (float(gene) for gene in self._genes)

    def __eq__(self, other) -> bool:
        if not isinstance(other, Chromosome):
            return NotImplemented
        return np.array_equal(self._genes, other._genes)

    __hash__ = None  # mutable

    def to_list(self) -> list[float]:
        """Return the genes as a list of Python floats."""
        return [float(gene) for gene in self._genes]

    def copy(self) -> 'Chromosome':
        return Chromosome(self._genes)

    def isclose(self, other: 'Chromosome', tolerance: float = 1e-3) -> bool:
        """
        Check whether two chromosomes hold the same genes within an absolute tolerance.
        Chromosomes of different length are never close.
        """
        if len(self) != len(other):
            return False
        return bool(np.allclose(self._genes, other._genes, rtol=0.0, atol=tolerance))

    def to_dna(self) -> str:
        """Encode the chromosome as a DNA string (0.001 resolution)."""
        return dna.to_dna(self._genes)

    @classmethod
    def from_dna(cls, text: str) -> 'Chromosome':
        """Decode a DNA string into a new chromosome."""
        return cls(dna.from_dna(text))

    def __repr__(self):
        return f"Chromosome(genes={self.to_list()})"

    def __str__(self):
        return "[" + ", ".join(f"{gene:+.3f}" for gene in self._genes) + "]"
