"""Labeled examples, dataset synthesis and reading, and cost log files.
"""
