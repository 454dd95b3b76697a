"""
Test suite for matmul-safe

Contains:
- tests/unit/          : Unit tests for the core and the console layer
"""
