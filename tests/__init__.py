"""
Test suite for nicescale

Contains:
- tests/unit/          : Unit tests for individual modules
"""
