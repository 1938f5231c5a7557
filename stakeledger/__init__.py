"""Stake account rules: errors, instructions, authorities, lockups, delegation, splitting and merging."""

__version__ = "0.1.0"