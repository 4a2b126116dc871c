"""
Test suite for chinese-format

Contains:
- tests/unit/          : Unit tests for individual modules
"""
