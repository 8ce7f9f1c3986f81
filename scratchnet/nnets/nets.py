"""This module describes a fully-functioning network created from the pieces in `layers`.

The `Network` does all of its arithmetic on plain Python lists, one neuron at a time.
A training step is a forward pass, a backward pass, and a weight update on a single
`datasets.Example`:

>>> net = Network([2, 3, 1], biases=[0.1, 0.1], random_state=42)
>>> net.train(dataset, "sigmoid", lr=0.5, dataset_type="max_index")
"""
from __future__ import division, print_function

import collections

import numpy as np

from ..nnets import activations as act
from ..nnets import layers
from ..nnets import training
from ..util import misc
from ..util import netlog


log = netlog.setup_logging("nnets_nets", level="INFO")


# A regression prediction is correct if it's within this distance of the target.
REGRESSION_TOLERANCE = 0.01


Evaluation = collections.namedtuple("Evaluation",
                                    ["mean_cost", "n_correct", "percent_correct", "class_counts"])


def classify(prediction):
    """Turn a raw prediction vector into a decision.

    A single output is a binary decision: 1 if the output is at least 0.5, else 0.
    With more than one output, the position of the largest output is set to 1 and
    the rest to 0. Ties go to the earliest position.

    **Returns**

    A new list of ints.
    """
    prediction = misc.as_list(prediction)
    if len(prediction) == 1:
        return [int(prediction[0] >= 0.5)]

    i_max = 0
    for i in range(1, len(prediction)):
        if prediction[i] > prediction[i_max]:
            i_max = i
    decision = len(prediction) * [0]
    decision[i_max] = 1
    return decision


def predicted_class(decision):
    """The class label of a decision from `classify`: the decision itself for a
    single output, otherwise the index of the chosen class."""
    if len(decision) == 1:
        return decision[0]
    return decision.index(1)


class Network(object):
    """
    A feed-forward neural network of fully-connected layers.

    **Parameters**

    * `layer_sizes` <list of ints>
        Number of neurons in each layer, starting with the input layer and
        ending with the output layer. Every size must be positive.

    **Optional Parameters**

    * `random` <bool|True>
        If True, draw initial weights from a normal distribution. Otherwise every
        weight starts at `weights_mean`.
    * `biases` <list of floats|None>
        One bias for each layer except the output layer. The bias of a layer is the
        starting value of the accumulated input of each neuron in that layer, so the
        first bias (on the input layer) is never used, and the output layer adds zero.
        Default zero.
    * `weights_mean`, `weights_std` <float|0, 1>
        Parameters of the initial weight distribution.
    * `random_state` <np.random.RandomState|int|None>
        Seed or generator for the initial weights.

    **Attributes**

    layers : list of layers.Layer
        The input layer first and the output layer last.
    trainer : training.SupervisedTraining
        Object used to train this network; present after calling `train`
    """
    def __init__(self, layer_sizes, random=True, biases=None, weights_mean=0., weights_std=1.,
                 random_state=None):
        layer_sizes = [int(n) for n in layer_sizes]
        if len(layer_sizes) < 2:
            raise ValueError("A network needs at least an input and an output layer.")
        if biases is None:
            biases = (len(layer_sizes) - 1) * [0.]
        if len(biases) != len(layer_sizes) - 1:
            raise ValueError("Supply one bias for each layer except the output layer: expected "
                             "{} biases, got {}.".format(len(layer_sizes) - 1, len(biases)))
        for n_units in layer_sizes:
            if n_units <= 0:
                raise ValueError("Every layer must have at least one neuron; "
                                 "got layer sizes {}.".format(layer_sizes))

        if isinstance(random_state, np.random.RandomState):
            self.rng = random_state
        else:
            self.rng = np.random.RandomState(random_state)

        self.layers = []
        for n_units, n_next, bias in zip(layer_sizes[:-1], layer_sizes[1:], biases):
            self.layers.append(layers.Layer(n_units, n_next=n_next, bias=bias, random=random,
                                            weights_mean=weights_mean, weights_std=weights_std,
                                            rng=self.rng))
        self.layers.append(layers.Layer(layer_sizes[-1], n_next=0, bias=0.))  # Output layer has no weights out.
        self.trainer = None

        log.debug("Built a network with layer sizes {}.".format(layer_sizes))

    @property
    def layer_sizes(self):
        return [layer.size for layer in self.layers]

    @property
    def n_in(self):
        return self.layers[0].size

    @property
    def n_out(self):
        return self.layers[-1].size

    def get_weights(self):
        """Returns the outgoing weights of each non-output layer, as a list
        (one per layer) of lists (one per neuron) of weights."""
        return [layer.get_weights() for layer in self.layers[:-1]]

    def set_weights(self, weights):
        if len(weights) != len(self.layers) - 1:
            raise ValueError("Expected weights for {} layers; got {}.".format(
                len(self.layers) - 1, len(weights)))
        for layer, layer_weights in zip(self.layers[:-1], weights):
            layer.set_weights(layer_weights)

    def check_example(self, example):
        if len(example.x) != self.n_in:
            raise ValueError("This network takes {} inputs, but the example has "
                             "{}.".format(self.n_in, len(example.x)))
        if len(example.y) != self.n_out:
            raise ValueError("This network has {} outputs, but the example has {} "
                             "targets.".format(self.n_out, len(example.y)))

    def forward_propagate(self, example, transfer_function):
        """Run the example's inputs through the network.

        The input layer is activated too: each input neuron's `activated_value` is the
        raw input and its `transfer_value` is the transfer function of the raw input.
        In each later layer, a neuron's input is its own layer's bias plus the
        weighted sum of the previous layer's transfer values. For classification modes,
        `activated_value` stores that sum; for regression modes it stores the transfer value.

        Only the `activated_value` and `transfer_value` of each neuron change.

        **Returns**

        A list of the output layer's transfer values.
        """
        transfer = act.get_transfer_function(transfer_function)
        self.check_example(example)

        for neuron, x in zip(self.layers[0], example.x):
            neuron.activated_value = x
            neuron.transfer_value = transfer.apply(x)

        for prev_layer, layer in zip(self.layers[:-1], self.layers[1:]):
            inputs = prev_layer.transfer_values
            for i_neuron, neuron in enumerate(layer):
                activated_value = misc.inner_product(prev_layer.weight_column(i_neuron), inputs,
                                                     initial=layer.bias)
                transfer_value = transfer.apply(activated_value)
                neuron.activated_value = transfer_value if transfer.regression else activated_value
                neuron.transfer_value = transfer_value

        return self.layers[-1].transfer_values

    def output_errors(self, example, transfer_function):
        """Error of each output neuron, `(y - t)**2 * derivative(t)` for target `y`
        and transfer value `t`, using the transfer values from the last forward pass.
        Doesn't modify the network.
        """
        transfer = act.get_transfer_function(transfer_function)
        errors = []
        for neuron, y in zip(self.layers[-1], example.y):
            diff = y - neuron.transfer_value
            # Multiply rather than `**`, which raises OverflowError instead of returning inf.
            errors.append(diff * diff * transfer.derivative(neuron.transfer_value))
        return errors

    def backpropagate(self, example, transfer_function):
        """Set the `error` of every neuron, starting from the output layer.

        Call this right after `forward_propagate` on the same example; errors computed
        from transfer values left over from a different example are meaningless.
        Each hidden or input neuron's error is the sum of the next layer's errors
        weighted by the neuron's outgoing weights, times the transfer function
        (not its derivative) of the neuron's own transfer value.

        Only the `error` of each neuron changes.

        **Returns**

        The cost: the sum of the output layer errors.
        """
        transfer = act.get_transfer_function(transfer_function)
        self.check_example(example)

        errors = self.output_errors(example, transfer)
        for neuron, error in zip(self.layers[-1], errors):
            neuron.error = error
        cost = sum(errors)

        for layer in reversed(self.layers[:-1]):
            new_errors = []
            for neuron in layer:
                weighted_error = misc.inner_product(errors, neuron.weights_to_next_layer)
                neuron.error = weighted_error * transfer.apply(neuron.transfer_value)
                new_errors.append(neuron.error)
            errors = new_errors

        return cost

    def update_weights(self, example, lr, normalize_lr=False):
        """Add `rate * error * input` to each weight, where `error` belongs to the
        neuron the weight leads to and `input` is the raw example input (for weights
        out of the input layer) or the transfer value of the neuron the weight leads from.

        If `normalize_lr`, the rate is `lr / (1 + lr * sum(x))`; otherwise it's `lr`.
        """
        self.check_example(example)
        if normalize_lr:
            rate = lr / (1 + lr * sum(example.x))
        else:
            rate = lr

        inputs = list(example.x)
        for layer, next_layer in zip(self.layers[:-1], self.layers[1:]):
            for i_next, next_neuron in enumerate(next_layer):
                step = rate * next_neuron.error
                for neuron, value in zip(layer, inputs):
                    neuron.weights_to_next_layer[i_next] += step * value
            inputs = next_layer.transfer_values

    def train(self, dataset, transfer_function, lr, dataset_type, normalize_lr=False,
              cost_log=training.DEFAULT_COST_LOG, dataset_provider=None):
        """Train the network on a list of `datasets.Example`s until the average
        cost falls below `training.CONVERGENCE_THRESHOLD`.
        See `training.SupervisedTraining` for the stopping rules.

        **Returns**

        True if training finished with a numeric cost, False if the cost became NaN.
        """
        self.trainer = training.SupervisedTraining(cost_log=cost_log,
                                                   dataset_provider=dataset_provider)
        return self.trainer.fit(self, dataset, transfer_function, lr, dataset_type,
                                normalize_lr=normalize_lr)

    def evaluate(self, dataset, transfer_function):
        """Score the network's predictions on a list of `datasets.Example`s.

        For classification modes, a prediction is correct if the decision from
        `classify` equals the target vector exactly. For regression modes, it's correct
        if every output is within `REGRESSION_TOLERANCE` of its target.

        **Returns**

        An `Evaluation`, with the mean output error per example, the number and
        percentage of correct predictions, and (classification only) a Counter of
        predicted class labels.
        """
        transfer = act.get_transfer_function(transfer_function)
        if len(dataset) == 0:
            raise ValueError("Can't evaluate an empty dataset.")

        total_cost, n_correct = 0., 0
        class_counts = collections.Counter()
        for i, example in enumerate(dataset, start=1):
            prediction = self.forward_propagate(example, transfer)
            total_cost += sum(self.output_errors(example, transfer))

            if transfer.regression:
                is_correct = all(abs(p - y) <= REGRESSION_TOLERANCE
                                 for p, y in zip(prediction, example.y))
                log.debug("Iteration {}, y = {}, z = {}".format(i, list(example.y), prediction))
            else:
                decision = classify(prediction)
                is_correct = (decision == list(example.y))
                class_counts[predicted_class(decision)] += 1
                log.debug("Iteration {}, y = {}, z = {}, prediction = {}".format(
                    i, list(example.y), prediction, decision))
            n_correct += int(is_correct)

        return Evaluation(mean_cost=total_cost / len(dataset),
                          n_correct=n_correct,
                          percent_correct=100. * n_correct / len(dataset),
                          class_counts=None if transfer.regression else dict(class_counts))

    def predict(self, dataset, transfer_function):
        """Evaluate the network on a dataset and log a report.

        **Returns**

        The mean output error per example.
        """
        result = self.evaluate(dataset, transfer_function)
        log.info("Total correct: {}, {:.2f}%".format(result.n_correct, result.percent_correct))
        if result.class_counts is not None:
            log.info("Prediction counts:")
            for label in sorted(result.class_counts):
                log.info("{}: {}".format(label, result.class_counts[label]))

        return result.mean_cost

    def __str__(self):
        blocks = []
        for i, layer in enumerate(self.layers, start=1):
            blocks.append("Layer {}: {} Neurons, {} Weights to Next Layer\n{}".format(
                i, layer.size, len(layer[0].weights_to_next_layer), layer))
        return "\n\n".join(blocks) + "\n"

    def __repr__(self):
        return "<Network layer_sizes={}>".format(self.layer_sizes)
