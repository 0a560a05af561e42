"""Prescription engine building blocks: history lookup and increments."""
