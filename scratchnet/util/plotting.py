"""
Utilities for plotting the progress of neural network training.
"""
__author__ = 'shoover'

from matplotlib import pyplot as plt
import numpy as np
import seaborn as sns

from ..data import files


def show_cost(cost_log, axes=None):
    """Plot the running average cost against iteration number.

    **Parameters**

    * `cost_log` <string|list>
        Either the name of a cost log file written during training, or
        a list of (iteration, average_cost) pairs.
    * `axes` <matplotlib.axes.Axes|None>
        Draw on these axes. Make a new figure if not provided.
    """
    if isinstance(cost_log, str):
        cost_log = files.read_cost_log(cost_log)
    train_iter, train_cost = np.asarray(cost_log, dtype=float).reshape(-1, 2).T

    # Create the canvas if we weren't given one.
    if axes is None:
        _, axes = plt.subplots()

    sns.lineplot(x=train_iter, y=train_cost, ax=axes, label="Average training cost")
    axes.set_xlabel("Iteration")
    axes.set_ylabel("Average cost")
    axes.set_yscale("log")

    return axes
