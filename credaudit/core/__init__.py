"""Audit engine: risk levels, strength scoring, credential rules."""
