"""Shared helpers for :mod:`curconv`."""
