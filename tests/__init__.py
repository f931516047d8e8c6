"""
Test suite for fp-idioms

Contains:
- tests/unit/          : Unit tests for individual modules and demo programs
"""
