"""
Test suite for intervalkit

Contains:
- tests/unit/          : Unit tests for individual modules
- tests/testdata.py    : Test numeric types
"""
