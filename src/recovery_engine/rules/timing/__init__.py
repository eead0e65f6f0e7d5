"""Workout timing analyses."""
