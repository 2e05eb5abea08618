"""
Test suite for fxcli

Contains:
- tests/unit/          : Unit tests (the rate feed is always mocked)
"""
