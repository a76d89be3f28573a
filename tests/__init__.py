"""
Test suite for the Elbonian/Arabic converter

Contains:
- tests/unit/          : Unit tests for numerals, checks, pipeline, converter and contracts
"""
