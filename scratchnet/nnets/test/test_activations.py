import math
import unittest

from scratchnet.nnets import activations as act


class TestTransferFunctions(unittest.TestCase):

    def test_relu(self):
        relu = act.get_transfer_function("relu")
        self.assertEqual(relu.apply(2.5), 2.5)
        self.assertEqual(relu.apply(-1.), 0.)
        self.assertEqual(relu.derivative(0.3), 1.)
        self.assertEqual(relu.derivative(0.), 0.)

    def test_sigmoid(self):
        sigmoid = act.get_transfer_function("sigmoid")
        self.assertEqual(sigmoid.apply(0.), 0.5)
        self.assertAlmostEqual(sigmoid.apply(2.), 1 / (1 + math.exp(-2.)))
        self.assertAlmostEqual(sigmoid.apply(-2.), 1 / (1 + math.exp(2.)))
        self.assertEqual(sigmoid.derivative(0.5), 0.25)

    def test_sigmoid_extreme_inputs(self):
        sigmoid = act.get_transfer_function("sigmoid")
        self.assertEqual(sigmoid.apply(-1000.), 0.)
        self.assertEqual(sigmoid.apply(1000.), 1.)
        self.assertTrue(math.isnan(sigmoid.apply(float("nan"))))

    def test_tanh_derivative_uses_activated_value(self):
        tanh = act.get_transfer_function("tanh")
        self.assertAlmostEqual(tanh.apply(0.7), math.tanh(0.7))
        self.assertAlmostEqual(tanh.derivative(0.7), 1 - math.tanh(0.7) ** 2)

    def test_none(self):
        identity = act.get_transfer_function("none")
        self.assertEqual(identity.apply(-3.2), -3.2)
        self.assertEqual(identity.derivative(12.), 1.)
        self.assertTrue(identity.regression)

    def test_regression_variants_share_math(self):
        for name in ["relu", "sigmoid", "tanh"]:
            classifier = act.get_transfer_function(name)
            regressor = act.get_transfer_function(name + "_regression")
            self.assertIs(type(classifier), type(regressor))
            self.assertFalse(classifier.regression)
            self.assertTrue(regressor.regression)
            self.assertEqual(regressor.mode, name + "_regression")
            for z in [-1.5, 0., 0.25, 3.]:
                self.assertEqual(classifier.apply(z), regressor.apply(z))
                self.assertEqual(classifier.derivative(z), regressor.derivative(z))

    def test_every_mode_resolves(self):
        for mode in act.TRANSFER_MODES:
            self.assertEqual(act.get_transfer_function(mode).mode, mode)

    def test_names_are_case_insensitive(self):
        self.assertEqual(act.get_transfer_function("Sigmoid").mode, "sigmoid")

    def test_instances_pass_through(self):
        tanh = act.Tanh()
        self.assertIs(act.get_transfer_function(tanh), tanh)

    def test_unknown_mode(self):
        with self.assertRaises(act.UnknownTransferFunction):
            act.get_transfer_function("bogus")

    def test_unknown_mode_is_value_error(self):
        self.assertTrue(issubclass(act.UnknownTransferFunction, ValueError))


if __name__ == "__main__":
    unittest.main()
