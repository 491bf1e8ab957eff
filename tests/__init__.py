"""
Test suite for hof-numbers

Contains:
- tests/unit/          : Unit tests for individual modules
"""
