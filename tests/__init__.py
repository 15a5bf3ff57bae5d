"""
Test suite for bounded-random

Contains:
- tests/unit/          : Unit tests for individual modules
"""
