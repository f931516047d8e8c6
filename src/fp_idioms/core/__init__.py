"""
Core functional primitives, report models, and contracts.

This module contains the building blocks shared by the demo programs:
generic sequence operations, closures and higher-order helpers.
"""
