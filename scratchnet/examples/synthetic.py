"""
Train a network on synthesized data.
"""
__author__ = 'shoover'


from scratchnet.data import datasets
from scratchnet.nnets import nets
from scratchnet.nnets import training
from scratchnet.util import netlog


def fit_max_index(n_train=5000, n_test=1000, cost_log=training.DEFAULT_COST_LOG, screen_level="INFO"):
    """Classify which of four inputs is largest with a 4-8-4 sigmoid network.
    The training data may be regenerated if the network doesn't converge on the first pass.
    Set `screen_level` to "DEBUG" to print every training iteration.
    """
    netlog.set_screen_level(screen_level)
    train = datasets.generate_dataset(n_train, 4, 4, "max_index", rng=0)
    test = datasets.generate_dataset(n_test, 4, 4, "max_index", rng=1)

    net = nets.Network([4, 8, 4], random=True, biases=[0.1, 0.1],
                       weights_mean=0., weights_std=0.5, random_state=42)
    if not net.train(train, "sigmoid", lr=0.1, dataset_type="max_index",
                     normalize_lr=True, cost_log=cost_log):
        raise RuntimeError("Training diverged.")
    net.predict(test, "sigmoid")

    return net


if __name__ == "__main__":
    fit_max_index()
