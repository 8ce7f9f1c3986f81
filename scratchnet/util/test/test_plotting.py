import os
import shutil
import tempfile
import unittest

import matplotlib
matplotlib.use("Agg")
from matplotlib import pyplot as plt

from scratchnet.data import files
from scratchnet.util import plotting


class TestShowCost(unittest.TestCase):

    def setUp(self):
        self.tmpdir = tempfile.mkdtemp()

    def tearDown(self):
        shutil.rmtree(self.tmpdir)
        plt.close("all")

    def test_from_records(self):
        axes = plotting.show_cost([(1, 0.5), (2, 0.25), (3, 0.125)])
        self.assertEqual(axes.get_xlabel(), "Iteration")
        self.assertEqual(len(axes.get_lines()), 1)

    def test_from_file(self):
        fname = os.path.join(self.tmpdir, "costs.txt")
        with files.CostLog(fname) as cost_log:
            for i, cost in enumerate([0.5, 0.2, 0.1], start=1):
                cost_log.write(i, cost)
        _, axes = plt.subplots()
        self.assertIs(plotting.show_cost(fname, axes=axes), axes)


if __name__ == "__main__":
    unittest.main()
