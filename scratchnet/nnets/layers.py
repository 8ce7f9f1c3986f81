"""
This module contains the pieces of a neural network: individual neurons, and
the layers which hold them.

Each Neuron stores
    * `activated_value` : The accumulated input to the neuron (see `nets.Network.forward_propagate`)
    * `transfer_value` : The neuron's output, after the transfer function is applied
    * `error` : The training signal from the most recent backpropagation
    * `weights_to_next_layer` : One weight for each neuron in the following layer

A Layer is an ordered list of Neurons with a single `bias`. The bias of a layer
is the starting value of the accumulated input of every neuron in that layer, so
the input layer's bias is never used. The output layer has no outgoing weights,
and its bias is always zero.
"""
from __future__ import division, print_function

import numpy as np

from ..util import netlog


log = netlog.setup_logging("nnets_layers", level="INFO")


def get_weight_init(n_units, n_next, random=True, mean=0., std=1., rng=None):
    """Initialize the outgoing weights of one layer of a network.

    **Parameters**

    * `n_units` <int>
        Number of neurons in this layer
    * `n_next` <int>
        Number of neurons in the next layer (zero for the output layer)

    **Optional Parameters**

    * `random` <bool|True>
        If True, draw weights from a normal distribution with the given `mean` and `std`.
        Otherwise every weight starts at `mean`.
    * `rng` <np.random.RandomState|int|None>

    **Returns**

    A list of `n_units` lists, each of length `n_next`.
    """
    if not random:
        return [n_next * [float(mean)] for _ in range(n_units)]

    if not isinstance(rng, np.random.RandomState):
        log.debug("Making a new RNG for weight initialization with seed {}.".format(rng))
        rng = np.random.RandomState(rng)
    W_values = rng.normal(loc=mean, scale=std, size=(n_units, n_next))

    return W_values.tolist()


class Neuron(object):
    """A single unit of a neural network."""
    def __init__(self, weights_to_next_layer=None):
        self.activated_value = 0.
        self.transfer_value = 0.
        self.error = 0.
        self.weights_to_next_layer = list(weights_to_next_layer or [])

    def __str__(self):
        weights = ", ".join("{:.6g}".format(w) for w in self.weights_to_next_layer)
        return ("activated={:.6g}, transfer={:.6g}, error={:.6g}, weights=[{}]".format(
                self.activated_value, self.transfer_value, self.error, weights))

    def __repr__(self):
        return "<Neuron {}>".format(self)


class Layer(object):
    """
    An ordered group of neurons which share one bias.

    **Parameters**

    * `n_units` <int>
        Number of neurons in this layer. Must be positive.

    **Optional Parameters**

    * `n_next` <int|0>
        Number of neurons in the next layer. Zero for the output layer.
    * `bias` <float|0>
        Starting value of the accumulated input of every neuron in this layer.
    * `random`, `weights_mean`, `weights_std`, `rng`
        Passed to `get_weight_init`.
    """
    def __init__(self, n_units, n_next=0, bias=0., random=True,
                 weights_mean=0., weights_std=1., rng=None):
        if n_units <= 0:
            raise ValueError("A layer must have at least one neuron; got {}.".format(n_units))
        if n_next < 0:
            raise ValueError("The next layer can't have a negative size.")
        self.bias = float(bias)
        self.n_next = n_next

        weights = get_weight_init(n_units, n_next, random=random,
                                  mean=weights_mean, std=weights_std, rng=rng)
        self.neurons = [Neuron(w) for w in weights]

    def __len__(self):
        return len(self.neurons)

    def __iter__(self):
        return iter(self.neurons)

    def __getitem__(self, index):
        return self.neurons[index]

    @property
    def size(self):
        return len(self.neurons)

    @property
    def transfer_values(self):
        return [neuron.transfer_value for neuron in self.neurons]

    @property
    def errors(self):
        return [neuron.error for neuron in self.neurons]

    def weight_column(self, index):
        """The weights from every neuron in this layer to neuron `index` of the next layer."""
        return [neuron.weights_to_next_layer[index] for neuron in self.neurons]

    def get_weights(self):
        return [list(neuron.weights_to_next_layer) for neuron in self.neurons]

    def set_weights(self, weights):
        """Replace this layer's outgoing weights with a list of one list per neuron."""
        if len(weights) != self.size:
            raise ValueError("Expected weights for {} neurons; got {}.".format(self.size, len(weights)))
        for neuron, w in zip(self.neurons, weights):
            if len(w) != self.n_next:
                raise ValueError("Each neuron needs {} weights to the next layer; "
                                 "got {}.".format(self.n_next, len(w)))
            neuron.weights_to_next_layer = [float(x) for x in w]

    def __str__(self):
        lines = ["  Bias: {:.6g}".format(self.bias)]
        lines += ["  Neuron {}: {}".format(i + 1, neuron) for i, neuron in enumerate(self.neurons)]
        return "\n".join(lines)
