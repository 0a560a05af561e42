"""Strength-training math: the rep / %1RM curve."""
