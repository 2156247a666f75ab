"""
Test suite for the PMML runtime

Contains:
- tests/unit/          : Unit tests for individual modules
"""
