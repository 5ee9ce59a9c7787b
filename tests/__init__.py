"""
Test suite for exact-fraction

Contains:
- tests/unit/          : Unit tests for individual modules
"""
