"""Property-based testing for PageWire components.

This module contains property-based tests using the Hypothesis library to
check the laws of schema compatibility, binding resolution, page state and
page analysis over generated inputs rather than hand-picked examples.
"""
