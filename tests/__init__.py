"""
Test suite for opticalc

Contains:
- tests/unit/          : Unit tests for individual modules
"""
