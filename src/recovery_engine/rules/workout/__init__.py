"""Workout intensity and training volume analyses."""
