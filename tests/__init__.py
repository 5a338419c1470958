"""
Test suite for mmi-core

Contains:
- tests/unit/          : Unit tests for Percent, Interval and helpers
"""
