"""
Network Module

This module implements the phenotype of an evonet individual: a small fully
connected feed-forward neural network with ReLU activations.

A network is described by its topology, the ordered list of layer widths. The
first entry is the number of inputs, every following entry adds one layer of
neurons, each of which is connected to all the outputs of the previous layer:

    topology [3, 2]  =>  one layer of 2 neurons, each with 3 weights

A network can be flattened into a sequence of reals and rebuilt from one. The
order is layer by layer, neuron by neuron, and within a neuron the bias first,
followed by its weights in input order. This flat sequence is exactly what the
genetic algorithm evolves as a Chromosome.

Classes:
    Neuron:  A single ReLU unit (bias + weights)
    Layer:   An ordered group of neurons sharing the same inputs
    Network: An ordered sequence of layers

Functions:
    parameter_count(topology): Length of the flat sequence for a topology
"""

from typing import Iterable, Iterator, Sequence

import numpy as np

from evonet.errors import ArityMismatchError, DataExhaustedError, InvalidConfigError, TrailingDataError

_EXHAUSTED = object()

def _check_topology(topology: Sequence[int]) -> tuple[int, ...]:
    """
    Validate a topology and return it as a tuple of ints.
    """
    topology = tuple(topology)
    if len(topology) < 2:
        raise InvalidConfigError(f"A topology needs at least 2 layer widths, got {list(topology)}")
    for width in topology:
        if isinstance(width, bool) or not isinstance(width, (int, np.integer)) or width < 1:
            raise InvalidConfigError(f"Layer widths must be positive integers, got {list(topology)}")
    return tuple(int(width) for width in topology)

def parameter_count(topology: Sequence[int]) -> int:
    """
    Number of biases and weights in a network with the given topology.

    Parameters:
        topology: ordered layer widths, inputs first

    Returns:
        sum over layers of neurons * (inputs + 1)
    """
    topology = _check_topology(topology)
    return sum(n_out * (n_in + 1) for n_in, n_out in zip(topology[:-1], topology[1:]))

class Neuron:
    """
    A single neuron computing: max(0, bias + sum(inputs * weights))

    Public Attributes:
        bias:    The bias (float32)
        weights: The weights, one per input (float32 array)

    Public Methods:
        propagate(inputs): Compute the neuron output
    """

    def __init__(self, bias: float, weights: Iterable[float]):
        self.bias   : np.float32 = np.float32(bias)
        self.weights: np.ndarray = np.array(list(weights), dtype=np.float32)

    @classmethod
    def random(cls, rng: np.random.Generator, input_size: int) -> 'Neuron':
        """
        Create a neuron with bias and weights drawn uniformly from [-1, 1).
        The bias is drawn first, then the weights in input order.
        """
        bias    = rng.uniform(-1.0, 1.0)
        weights = [rng.uniform(-1.0, 1.0) for _ in range(input_size)]
        return cls(bias, weights)

    @classmethod
    def from_data(cls, input_size: int, data: Iterator[float]) -> 'Neuron':
        """
        Create a neuron by consuming one bias and 'input_size' weights from an iterator.
        """
        try:
            bias    = next(data)
            weights = [next(data) for _ in range(input_size)]
        except StopIteration:
            raise DataExhaustedError("Ran out of data while hydrating the network") from None
        return cls(bias, weights)

    @property
    def input_size(self) -> int:
        return len(self.weights)

    def propagate(self, inputs: Sequence[float]) -> float:
        """
        Compute the output of this neuron.

        Parameters:
            inputs: one value per weight

        Returns:
            The ReLU-activated weighted sum
        """
        inputs = np.asarray(inputs, dtype=np.float32)
        if inputs.shape != self.weights.shape:
            raise ArityMismatchError(f"Expected {len(self.weights)} inputs, got {inputs.size}")

        output = self.bias + np.dot(inputs, self.weights)
        return float(max(np.float32(0.0), np.float32(output)))

    def data(self) -> Iterator[float]:
        """Yield the bias, then the weights."""
        yield float(self.bias)
        yield from (float(weight) for weight in self.weights)

    def __repr__(self):
        return f"Neuron(bias={float(self.bias):+.4f}, weights={[round(float(w), 4) for w in self.weights]})"

class Layer:
    """
    An ordered group of neurons that all read the same inputs.

    Public Properties:
        neurons:    The neurons of this layer, in order
        input_size: The number of inputs each neuron expects

    Public Methods:
        propagate(inputs): Compute the output of every neuron
    """

    def __init__(self, neurons: Sequence[Neuron]):
        neurons = list(neurons)
        if not neurons:
            raise InvalidConfigError("A layer needs at least one neuron")

        input_size = neurons[0].input_size
        if any(neuron.input_size != input_size for neuron in neurons):
            raise ArityMismatchError("All neurons in a layer must have the same number of weights")

        self._neurons   : list[Neuron] = neurons
        self._input_size: int          = input_size

    @classmethod
    def random(cls, rng: np.random.Generator, input_size: int, output_size: int) -> 'Layer':
        return cls([Neuron.random(rng, input_size) for _ in range(output_size)])

    @classmethod
    def from_data(cls, input_size: int, output_size: int, data: Iterator[float]) -> 'Layer':
        return cls([Neuron.from_data(input_size, data) for _ in range(output_size)])

    @property
    def neurons(self) -> list[Neuron]:
        return self._neurons

    @property
    def input_size(self) -> int:
        return self._input_size

    @property
    def output_size(self) -> int:
        return len(self._neurons)

    def propagate(self, inputs: Sequence[float]) -> np.ndarray:
        """
        Parameters:
            inputs: one value per input of this layer

        Returns:
            The output of each neuron, in order (float32 array)
        """
        inputs = np.asarray(inputs, dtype=np.float32)
        if inputs.ndim != 1 or inputs.size != self._input_size:
            raise ArityMismatchError(f"Expected {self._input_size} inputs, got {inputs.size}")
        return np.array([neuron.propagate(inputs) for neuron in self._neurons], dtype=np.float32)

    def __repr__(self):
        return f"Layer(inputs={self._input_size}, neurons={len(self._neurons)})"

class Network:
    """
    A feed-forward neural network made of fully connected ReLU layers.

    Networks are created either randomly from a topology, or deterministically
    from a flat sequence of parameters (typically a Chromosome). The method
    data() is the exact inverse of from_data().

    Public Properties:
        layers:   The layers of the network, in order
        topology: The layer widths, inputs first

    Public Methods:
        random(rng, topology):          Create a network with random parameters (classmethod)
        from_data(topology, data):      Rebuild a network from a flat sequence (classmethod)
        propagate(inputs):              Compute the network outputs
        data():                         Flatten the network parameters
    """

    def __init__(self, layers: Sequence[Layer]):
        """
        Parameters:
            layers: the layers, in order; the input size of each layer must
                    match the number of neurons in the previous one
        """
        layers = list(layers)
        if not layers:
            raise InvalidConfigError("A network needs at least one layer")
        for previous, layer in zip(layers[:-1], layers[1:]):
            if layer.input_size != previous.output_size:
                raise ArityMismatchError(
                    f"Layer expects {layer.input_size} inputs but previous layer has {previous.output_size} neurons")
        self._layers: list[Layer] = layers

    @classmethod
    def random(cls, rng: np.random.Generator, topology: Sequence[int]) -> 'Network':
        """
        Create a network whose biases and weights are drawn uniformly from [-1, 1).

        Parameters:
            rng:      the random number generator; values are drawn layer by layer,
                      neuron by neuron, bias first
            topology: ordered layer widths, inputs first (at least 2 entries)
        """
        topology = _check_topology(topology)
        return cls([Layer.random(rng, n_in, n_out) for n_in, n_out in zip(topology[:-1], topology[1:])])

    @classmethod
    def from_data(cls, topology: Sequence[int], data: Iterable[float]) -> 'Network':
        """
        Rebuild a network from a flat sequence of parameters.

        Parameters:
            topology: ordered layer widths, inputs first (at least 2 entries)
            data:     the flat parameters, in the order produced by data()

        Raises:
            DataExhaustedError: if 'data' holds fewer values than the topology needs
            TrailingDataError:  if 'data' holds more values than the topology needs
        """
        topology = _check_topology(topology)
        data     = iter(data)
        layers   = [Layer.from_data(n_in, n_out, data) for n_in, n_out in zip(topology[:-1], topology[1:])]

        if next(data, _EXHAUSTED) is not _EXHAUSTED:
            raise TrailingDataError(
                f"Data holds more than the {parameter_count(topology)} values needed by topology {list(topology)}")
        return cls(layers)

    @property
    def layers(self) -> list[Layer]:
        return self._layers

    @property
    def topology(self) -> tuple[int, ...]:
        return (self._layers[0].input_size,) + tuple(layer.output_size for layer in self._layers)

    def propagate(self, inputs: Sequence[float]) -> np.ndarray:
        """
        Feed the inputs through every layer in order.

        Parameters:
            inputs: one value per network input

        Returns:
            The outputs of the last layer (float32 array)
        """
        outputs = np.asarray(inputs, dtype=np.float32)
        for layer in self._layers:
            outputs = layer.propagate(outputs)
        return outputs

    def data(self) -> np.ndarray:
        """
        Flatten the network: layer by layer, neuron by neuron, bias then weights.

        Returns:
            The flat parameters as a float32 array
        """
        values = [value for layer in self._layers for neuron in layer.neurons for value in neuron.data()]
        return np.array(values, dtype=np.float32)

    def __repr__(self):
        return f"Network(topology={list(self.topology)})"
