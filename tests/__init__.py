"""
Test suite for PixelForge

Contains:
- tests/unit/          : Unit tests for individual modules
"""
