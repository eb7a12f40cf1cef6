"""
Test suite for detmath

Contains:
- tests/unit/     : Unit tests for individual modules
- tests/vectors/  : Golden call vectors replayed through the dispatcher
"""
