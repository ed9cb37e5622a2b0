"""Indexed sequence container.

This module holds the growable fixed-slot container, its slice-address
parser, and the helpers used by its transformation combinators.
"""
