"""
Test suite for ecoutils

Contains:
- tests/unit/          : Unit tests for individual modules
"""
