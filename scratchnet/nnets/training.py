"""
Take a network and a list of labeled examples, and use single-example stochastic
gradient steps to fit the network to the data.
"""
from __future__ import division

__author__ = 'shoover'


import math

from ..data import datasets
from ..data import files
from ..nnets import activations as act
from ..util import netlog


log = netlog.setup_logging("nnet_training", level="INFO")


# Training stops once the running average cost is below this.
CONVERGENCE_THRESHOLD = 0.001

# Number of examples to synthesize when a dataset is used up without converging.
REGENERATION_SIZE = 500000

# Datasets which can't be regenerated are re-used until this many iterations have run.
RETRY_ITERATION_CAP = 250000

# Log progress at "INFO" level this often. Every iteration is logged at "DEBUG".
PROGRESS_INTERVAL = 10000

DEFAULT_COST_LOG = "costs/cost_log.txt"


class TrainingState(object):
    RUNNING = "running"
    CONVERGED = "converged"  # Average cost below `CONVERGENCE_THRESHOLD`
    DIVERGED = "diverged"  # Average cost became NaN
    EXHAUSTED = "exhausted"  # Ran out of examples without converging


def is_converged(average_cost):
    """True if the cost is below the threshold. NaN is never converged."""
    return average_cost < CONVERGENCE_THRESHOLD


class SupervisedTraining(object):
    """Controller for a training run. Each training step is a forward pass, backpropagation,
    and weight update on one example.

    The run goes through the dataset in order until the running average cost
    (total absolute cost divided by the number of steps so far) falls below
    `CONVERGENCE_THRESHOLD`, or becomes NaN. If the dataset runs out first:

    * If the dataset mode allows it, replace the dataset with `REGENERATION_SIZE`
      new examples from the `dataset_provider` and keep going.
    * Otherwise, if fewer than `RETRY_ITERATION_CAP` steps have run, reset the total
      and average cost and go through the same dataset again. The step count is
      not reset.
    * Otherwise stop.

    **Optional Parameters**

    * `cost_log` <string|None>
        Write "<iteration> <average_cost>" to this file after every step.
        Set to None to skip the file.
    * `dataset_provider` <callable|None>
        Called as `dataset_provider(count, n_in, n_out, dataset_type)` to get
        a new list of examples. Defaults to `datasets.generate_dataset`, using the
        network's random number generator.

    **Attributes**

    state : string
        One of the `TrainingState` values
    iteration : int
        Number of training steps run
    cost : float
        Cost of the most recent training step
    average_cost : float
        Running average cost since the last reset
    train_loss : list of tuples
        (iteration, average_cost) after every step
    n_retries, n_regenerations : int
        Number of times the dataset was re-used or replaced
    """
    def __init__(self, cost_log=DEFAULT_COST_LOG, dataset_provider=None):
        self.cost_log = cost_log
        self.dataset_provider = dataset_provider
        self._reset()

    def _reset(self):
        self.state = TrainingState.RUNNING
        self.iteration = 0
        self.cost = 0.
        self.total_cost = 0.
        self.average_cost = 1.
        self.train_loss = []
        self.n_retries = 0
        self.n_regenerations = 0

    def _step(self, network, example, transfer, lr, normalize_lr):
        self.iteration += 1
        network.forward_propagate(example, transfer)
        self.cost = network.backpropagate(example, transfer)
        self.total_cost += abs(self.cost)
        self.average_cost = self.total_cost / self.iteration
        network.update_weights(example, lr, normalize_lr)
        self.train_loss.append((self.iteration, self.average_cost))

        msg = "Iteration {}, cost {:.6g}".format(self.iteration, self.average_cost)
        if self.iteration % PROGRESS_INTERVAL == 0:
            log.info(msg)
        else:
            log.debug(msg)

    def _get_provider(self, network):
        if self.dataset_provider is not None:
            return self.dataset_provider

        def provider(count, n_in, n_out, mode):
            return datasets.generate_dataset(count, n_in, n_out, mode, rng=network.rng)
        return provider

    def fit(self, network, dataset, transfer_function, lr, dataset_type, normalize_lr=False):
        """Train `network` on `dataset`, a sequence of `datasets.Example`s.

        **Returns**

        True if the cost of the last training step is a number, False if it's NaN.
        """
        transfer = act.get_transfer_function(transfer_function)
        dataset = list(dataset)
        if len(dataset) == 0:
            raise ValueError("Can't train on an empty dataset.")
        network.check_example(dataset[0])
        if (self.dataset_provider is None and datasets.allows_regeneration(dataset_type)
                and not datasets.can_generate(dataset_type)):
            raise ValueError("Unable to regenerate data for dataset mode \"{}\". Use one of {}, "
                             "a mode which is never regenerated ({}), or supply a `dataset_provider`."
                             "".format(dataset_type, sorted(datasets.SYNTHESIZERS),
                                       ", ".join(datasets.NO_REGENERATION_MODES)))

        self._reset()
        netlog.clear_debug_log()
        provider = self._get_provider(network)
        n_in, n_out = len(dataset[0].x), len(dataset[0].y)

        log.info("Beginning training with \"{}\" transfer function, learning rate {}{}.".format(
            transfer.mode, lr, " (normalized)" if normalize_lr else ""))
        with files.CostLog(self.cost_log) as cost_log:
            while self.state == TrainingState.RUNNING:
                for example in dataset:
                    if not self.average_cost >= CONVERGENCE_THRESHOLD:
                        break
                    self._step(network, example, transfer, lr, normalize_lr)
                    cost_log.write(self.iteration, self.average_cost)

                if math.isnan(self.average_cost):
                    self.state = TrainingState.DIVERGED
                elif is_converged(self.average_cost):
                    self.state = TrainingState.CONVERGED
                elif datasets.allows_regeneration(dataset_type):
                    log.info("Generating a new dataset after {} iterations; average cost is "
                             "{:.6g}.".format(self.iteration, self.average_cost))
                    dataset = list(provider(REGENERATION_SIZE, n_in, n_out, dataset_type))
                    if len(dataset) == 0:
                        raise ValueError("The dataset provider returned no examples.")
                    self.n_regenerations += 1
                elif self.iteration < RETRY_ITERATION_CAP:
                    log.debug("Re-using the dataset after {} iterations.".format(self.iteration))
                    self.total_cost = 0.
                    self.average_cost = 1.
                    self.n_retries += 1
                else:
                    self.state = TrainingState.EXHAUSTED

        log.info("Training {} after {} iterations with average cost {:.6g}.".format(
            self.state, self.iteration, self.average_cost))
        log.info("\n{}".format(network))

        if math.isnan(self.cost):
            log.info("The cost is NaN. Training failed.")
            return False
        log.info("Weights trained; ready to make predictions.")
        return True
