"""Algorithms and data structures for competitive programming: number theory,
range queries, string matching, hashing, trees and graphs."""

__version__ = "0.1.0"