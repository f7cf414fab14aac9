"""
Genotype Package

This package implements the genetic representation evolved by evonet: a flat
vector of real-valued genes holding every bias and weight of a feed-forward
network, plus the compact text ("DNA") codec for that vector.

Modules:
    chromosome: Chromosome class
    dna:        Base-52 DNA codec

Exported:
    Chromosome: Ordered vector of float32 genes
    to_dna:     Encode a gene vector as a DNA string
    from_dna:   Decode a DNA string into a gene vector
"""

from evonet.genotype.chromosome import Chromosome
from evonet.genotype.dna        import from_dna, to_dna

__all__ = ['Chromosome',
           'from_dna',
           'to_dna']
