"""Shuffled frog-leaping search for the 0/1 knapsack problem."""

__version__ = "0.1.0"