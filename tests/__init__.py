"""
Test suite for prelude runtime

Contains:
- tests/unit/          : Unit tests for individual modules
"""
