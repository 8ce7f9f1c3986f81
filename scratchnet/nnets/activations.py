"""
This module defines transfer (activation) functions which provide nonlinearities for neural networks.

A transfer function is resolved once from its mode name by `get_transfer_function`, and
the resulting object is used for every neuron in a forward or backward pass.
Each object exposes `apply(z)` and `derivative(a)`. The derivative takes the value
after the transfer function has been applied, not the raw input.

Mode names ending in "_regression" (and the "none" mode) use the same math as the
classification modes, but mark the network outputs as continuous targets rather
than class labels.
"""
from __future__ import division, print_function

import math

from ..util import netlog

log = netlog.setup_logging("nnets_activations", level="INFO")


class UnknownTransferFunction(ValueError):
    """Raised when a transfer function mode name isn't recognized. This is a fatal
    configuration error; nothing has been computed when it's raised."""
    pass


class TransferFunction(object):
    """Base class for transfer functions.

    **Parameters**

    * `regression` <bool|False>
        If True, network outputs are continuous targets rather than class labels.
    """
    name = None

    def __init__(self, regression=False):
        self.regression = regression

    @property
    def mode(self):
        if self.regression and self.name != "none":
            return "{}_regression".format(self.name)
        return self.name

    def apply(self, z):
        raise NotImplementedError

    def derivative(self, activated_z):
        raise NotImplementedError

    def __call__(self, z):
        return self.apply(z)

    def __repr__(self):
        return "<{} mode={}>".format(self.__class__.__name__, self.mode)


class Relu(TransferFunction):
    name = "relu"

    def apply(self, z):
        return max(0., z)

    def derivative(self, activated_z):
        return 1. if activated_z > 0 else 0.


class Sigmoid(TransferFunction):
    name = "sigmoid"

    def apply(self, z):
        # Split on sign so that math.exp can't overflow.
        if z >= 0:
            return 1. / (1. + math.exp(-z))
        e_z = math.exp(z)
        return e_z / (1. + e_z)

    def derivative(self, activated_z):
        return activated_z * (1 - activated_z)


class Tanh(TransferFunction):
    name = "tanh"

    def apply(self, z):
        return math.tanh(z)

    def derivative(self, activated_z):
        return 1. - math.tanh(activated_z) ** 2


class Identity(TransferFunction):
    """No transfer function. Outputs are always treated as continuous."""
    name = "none"

    def __init__(self, regression=True):
        super(Identity, self).__init__(regression=True)

    def apply(self, z):
        return z

    def derivative(self, activated_z):
        return 1.


# Mode name -> (transfer function class, outputs are continuous)
TRANSFER_MODES = {"relu": (Relu, False),
                  "relu_regression": (Relu, True),
                  "sigmoid": (Sigmoid, False),
                  "sigmoid_regression": (Sigmoid, True),
                  "tanh": (Tanh, False),
                  "tanh_regression": (Tanh, True),
                  "none": (Identity, True)}


def get_transfer_function(transfer_function):
    """Turns a string transfer function mode name into a `TransferFunction`.
    `TransferFunction` instances are returned unchanged.

    **Raises**

    `UnknownTransferFunction` if the mode name is unrecognized.
    """
    if isinstance(transfer_function, TransferFunction):
        return transfer_function

    mode = str(transfer_function).lower()
    try:
        func_class, regression = TRANSFER_MODES[mode]
    except KeyError:
        log.critical("Invalid activation function: \"{}\". Choose one of "
                     "{}.".format(transfer_function, sorted(TRANSFER_MODES)))
        raise UnknownTransferFunction("Unrecognized transfer function: {}".format(transfer_function))

    return func_class(regression=regression)
