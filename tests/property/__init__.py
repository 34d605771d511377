"""
Property-based tests for Quickcheck-Kit.

Uses Hypothesis to generate generator configurations and verify that every
generator honours its bounds for all valid options.
"""
