"""Simulation core. NO UI DEPENDENCIES."""
