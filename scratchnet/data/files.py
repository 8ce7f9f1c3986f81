"""File interactions utilities for Scratchnet.
"""
from __future__ import division, print_function

import os

from ..util import netlog
log = netlog.setup_logging("nnets_files", level="INFO")


def tolerant_makedirs(dirname):
    """This is a wrapper around os.makedirs which will quietly continue without doing anything
    if the specified `dirname` is empty or is an existing directory.
    """
    if dirname:
        os.makedirs(dirname, exist_ok=True)


class CostLog(object):
    """Write the running average cost of a training run to a text file,
    one "<iteration> <average_cost>" line per training step.
    Use as a context manager; the file is truncated on entry and closed on exit.
    A `fname` of None makes a log which writes nothing.
    """
    def __init__(self, fname):
        self.fname = fname
        self.n_lines = 0
        self._file = None

    def __enter__(self):
        if self.fname is not None:
            tolerant_makedirs(os.path.dirname(self.fname))
            self._file = open(self.fname, "w")
            log.debug("Writing costs to \"{}\".".format(self.fname))
        return self

    def __exit__(self, exc_type, exc_value, traceback):
        if self._file is not None:
            self._file.close()
            self._file = None

    def write(self, iteration, average_cost):
        if self._file is not None:
            self._file.write("{} {}\n".format(iteration, average_cost))
        self.n_lines += 1


def read_cost_log(fname):
    """Read a file written by `CostLog`.

    **Returns**

    A list of (iteration, average_cost) tuples.
    """
    records = []
    with open(fname) as _in:
        for line in _in:
            if not line.strip():
                continue
            iteration, average_cost = line.split()
            records.append((int(iteration), float(average_cost)))
    return records
