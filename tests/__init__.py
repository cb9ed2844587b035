"""
Test suite for bigint-calc

Contains:
- tests/unit/          : Unit tests for individual modules
"""
