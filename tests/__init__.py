"""
Test suite for rt-core

Contains:
- tests/unit/          : Unit tests for individual modules
"""
