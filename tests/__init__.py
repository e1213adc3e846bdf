"""
Test suite for jalali-time

Contains:
- tests/unit/          : Unit tests for calendar core, value types, clock and contracts
"""
