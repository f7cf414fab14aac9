"""
Phenotype Package

This package implements the phenotype side of evonet: the feed-forward neural
networks expressed from chromosomes, and the individuals that carry them.

Modules:
    network:    Neuron, Layer and Network classes
    individual: Individual protocol and Organism class
    visualize:  Graphviz rendering of a Network

Exported Classes:
    Individual: Protocol describing a population member
    Layer:      An ordered group of neurons sharing the same inputs
    Network:    A feed-forward ReLU network
    Neuron:     A single ReLU unit
    Organism:   A chromosome paired with a fitness
"""

from evonet.phenotype.individual import Individual, Organism
from evonet.phenotype.network    import Layer, Network, Neuron, parameter_count
from evonet.phenotype.visualize  import visualize

__all__ = ['Individual',
           'Layer',
           'Network',
           'Neuron',
           'Organism',
           'parameter_count',
           'visualize']
