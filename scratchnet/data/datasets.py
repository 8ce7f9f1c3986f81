"""
This module defines labeled examples and synthesizes or reads datasets of them.

A dataset is a list of `Example`s. The "dataset mode" names how a dataset was
synthesized, and tells the training loop whether it may ask for a fresh dataset
when it runs out of examples (see `allows_regeneration`).
"""
from __future__ import division

import collections

import numpy as np
import pandas as pd

from ..util import misc
from ..util import netlog
log = netlog.setup_logging("data_datasets", level="INFO")


# Seed for the "max_index_const" mode, which always makes the same dataset.
CONST_SEED = 1729

# Datasets in these modes are never replaced during training.
NO_REGENERATION_MODES = ("none", "max_index_const")


class Example(collections.namedtuple("Example", ["x", "y"])):
    """One labeled example: an input vector `x` and a target vector `y`."""
    __slots__ = ()

    def __new__(cls, x, y):
        return super(Example, cls).__new__(cls, tuple(float(v) for v in misc.as_list(x)),
                                           tuple(float(v) for v in misc.as_list(y)))


def allows_regeneration(mode):
    """True if the training loop may replace a dataset of this mode with a new one."""
    return mode not in NO_REGENERATION_MODES


def can_generate(mode):
    """True if `generate_dataset` can synthesize data for this mode."""
    return mode in SYNTHESIZERS


def _max_index_targets(features, n_out):
    i_max = np.argmax(features, axis=1)
    if n_out == 1:
        return (i_max == 0).astype(float)[:, None]
    targets = np.zeros((len(features), n_out))
    targets[np.arange(len(features)), i_max * n_out // features.shape[1]] = 1
    return targets


def _mean_targets(features, n_out):
    return np.repeat(features.mean(axis=1)[:, None], n_out, axis=1)


def _parity_targets(features, n_out):
    n_ones = np.round(features).astype(int).sum(axis=1)
    if n_out == 1:
        return (n_ones % 2).astype(float)[:, None]
    targets = np.zeros((len(features), n_out))
    targets[np.arange(len(features)), n_ones % n_out] = 1
    return targets


SYNTHESIZERS = {"max_index": _max_index_targets,
                "max_index_const": _max_index_targets,
                "mean": _mean_targets,
                "parity": _parity_targets}


def generate_dataset(count, n_in, n_out, mode, rng=None):
    """Synthesize a list of `count` Examples with `n_in` inputs and `n_out` targets.
    Inputs are drawn uniformly from [0, 1).

    **Parameters**

    * `mode` <string>
        "max_index" : Classify by the position of the largest input.
        "max_index_const" : As "max_index", but always the same dataset.
        "mean" : Regression; every target is the mean of the inputs.
        "parity" : Classify by the number of inputs which round to 1.

    **Optional Parameters**

    * `rng` <np.random.RandomState|int|None>
        Ignored for "max_index_const".

    **Raises**

    `ValueError` for an unknown mode or non-positive sizes.
    """
    if mode not in SYNTHESIZERS:
        raise ValueError("Unable to synthesize data for dataset mode \"{}\". Choose one of "
                         "{}.".format(mode, sorted(SYNTHESIZERS)))
    if count <= 0 or n_in <= 0 or n_out <= 0:
        raise ValueError("Dataset sizes must be positive; got count={}, n_in={}, "
                         "n_out={}.".format(count, n_in, n_out))

    if mode == "max_index_const":
        rng = np.random.RandomState(CONST_SEED)
    elif not isinstance(rng, np.random.RandomState):
        rng = np.random.RandomState(rng)

    log.debug("Synthesizing {} \"{}\" examples with {} inputs and {} "
              "outputs.".format(count, mode, n_in, n_out))
    features = rng.uniform(size=(count, n_in))
    targets = SYNTHESIZERS[mode](features, n_out)

    return [Example(x, y) for x, y in zip(features.tolist(), targets.tolist())]


def read_csv_dataset(fname, n_outputs=1, **kwargs):
    """Read a list of Examples from a CSV file. The last `n_outputs` columns
    are the targets and all other columns are inputs. Extra keyword arguments
    are passed to `pandas.read_csv`.
    """
    df = pd.read_csv(fname, **kwargs)
    if n_outputs <= 0 or n_outputs >= df.shape[1]:
        raise ValueError("Need at least one input column and one target column; the file has "
                         "{} columns and `n_outputs` is {}.".format(df.shape[1], n_outputs))
    values = df.to_numpy(dtype=float)
    log.info("Read {} examples from \"{}\".".format(len(values), fname))

    return [Example(row[:-n_outputs], row[-n_outputs:]) for row in values.tolist()]
