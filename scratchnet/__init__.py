"""Scratchnet: feed-forward neural networks computed neuron by neuron.

**Subpackages**

`nnets` : Networks, layers, transfer functions, and training
`data` : Labeled examples, dataset synthesis, and cost log files
`util` : Logging, plotting, and small helpers
"""
__version__ = "0.1"
