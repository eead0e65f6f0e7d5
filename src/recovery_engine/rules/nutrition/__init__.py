"""Meal pattern analyses."""
