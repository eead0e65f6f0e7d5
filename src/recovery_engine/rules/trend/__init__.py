"""Trend and risk detectors: plateau, overtraining, goal trajectory, protein gap."""
