"""
Test suite for ackermann-hyperop

Contains:
- tests/unit/          : Unit tests for individual modules
"""
