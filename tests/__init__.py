"""
Test suite for matrixcore

Contains:
- tests/unit/          : Unit tests for individual modules
"""
