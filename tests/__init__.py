"""
Test suite for affine2d

Contains:
- tests/unit/          : Unit tests for individual modules
"""
