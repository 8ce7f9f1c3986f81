"""
Utility functions which don't quite fit anywhere else.
"""
__author__ = 'shoover'

import collections.abc


def inner_product(a, b, initial=0.):
    """Sum of the element-wise products of `a` and `b`, starting from `initial`.
    The inputs must have the same length.
    """
    total = initial
    for a_i, b_i in zip(a, b):
        total += a_i * b_i
    return total


def as_list(x):
    """If an object is a string or non-iterable, returns it as a one-element list.
    Otherwise returns the object as a list.
    """
    if isinstance(x, str) or not isinstance(x, collections.abc.Iterable):
        x = [x]
    return list(x)
