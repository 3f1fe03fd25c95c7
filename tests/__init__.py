"""
Test suite for the ledger balance primitive

Contains:
- tests/unit/          : Unit tests for individual modules and scenario tests
"""
