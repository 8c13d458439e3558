"""
Test suite for exchange_account

Contains:
- tests/unit/          : Unit tests for individual modules
"""
