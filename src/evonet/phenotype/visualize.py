"""
Network Visualization Module

This module draws a Network with Graphviz: one cluster per layer, left to
right, with every connection labelled by its weight.

Functions:
    visualize(network, view): Build (and optionally display) the network graph
"""

import graphviz  # type: ignore

from evonet.phenotype.network import Network

_NODE_ATTRS = {
    'INPUT':  {'fillcolor': 'lightgrey', 'color': 'black', 'style': 'filled', 'shape': 'circle', 'penwidth': '0.5', 'fontsize': '5', 'width': '0.5', 'height': '0.5', 'fixedsize': 'true'},
    'HIDDEN': {'fillcolor': 'lightblue', 'color': 'black', 'style': 'filled', 'shape': 'circle', 'penwidth': '0.5', 'fontsize': '5', 'width': '0.5', 'height': '0.5', 'fixedsize': 'true'},
    'OUTPUT': {'fillcolor': 'white'    , 'color': 'black', 'style': 'filled', 'shape': 'circle', 'penwidth': '0.5', 'fontsize': '5', 'width': '0.5', 'height': '0.5', 'fixedsize': 'true'}
}

def _node_name(layer_index: int, neuron_index: int) -> str:
    """Graphviz node name: 'i{k}' for inputs, 'l{layer}n{k}' for neurons (layers counted from 1)."""
    if layer_index == 0:
        return f"i{neuron_index}"
    return f"l{layer_index}n{neuron_index}"

def visualize(network: Network, view: bool = False) -> graphviz.Digraph:
    """
    Visualize a network using Graphviz.

    Parameters:
        network: the network to draw
        view:    if True, render the graph and open it

    Returns:
        graphviz.Digraph object representing the network
    """
    dot = graphviz.Digraph()
    dot.attr(rankdir='LR')  # Left to right layout
    dot.attr('graph', labelloc='t')

    with dot.subgraph(name='cluster_input') as input_cluster:
        input_cluster.attr(rank='source', label='Inputs', style='invisible')
        for k in range(network.topology[0]):
            attrs = _NODE_ATTRS['INPUT'].copy()
            attrs['label'] = f"in={k}"
            input_cluster.node(_node_name(0, k), **attrs)

    num_layers = len(network.layers)
    for layer_index, layer in enumerate(network.layers, start=1):
        kind = 'OUTPUT' if layer_index == num_layers else 'HIDDEN'
        with dot.subgraph(name=f'cluster_layer{layer_index}') as cluster:
            cluster.attr(rank='same', label=f'Layer {layer_index}', style='invisible')
            for k, neuron in enumerate(layer.neurons):
                attrs = _NODE_ATTRS[kind].copy()
                attrs['label'] = f"n={k}\\nbias={float(neuron.bias):.2f}"
                cluster.node(_node_name(layer_index, k), **attrs)

    # every neuron is connected to every node of the previous layer
    for layer_index, layer in enumerate(network.layers, start=1):
        for k, neuron in enumerate(layer.neurons):
            for source, weight in enumerate(neuron.weights):
                edge_attrs = {
                    'label'     : f"w={float(weight):.2f}",
                    'fontsize'  : '5',
                    'penwidth'  : '0.5',
                    'arrowsize' : '0.5',
                    'labelfloat': 'false',
                    'color'     : 'black' if weight >= 0 else 'red'
                }
                dot.edge(_node_name(layer_index - 1, source), _node_name(layer_index, k), **edge_attrs)

    if view:
        dot.view(cleanup=True)

    return dot
