"""
Test suite for lazy-range

Contains:
- tests/unit/          : Unit tests for individual modules
"""
