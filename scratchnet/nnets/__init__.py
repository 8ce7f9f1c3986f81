"""Neural network code.

**Modules**

`nets` : The network which holds the layers and runs forward and backward passes
`layers` : Neurons and the layers which hold them
`activations` : Transfer functions which provide nonlinearities, and the lookup of them by name
`training` : Controller which runs the training loop on a network
"""
