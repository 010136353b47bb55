"""
Reinforcement design engine.

Pure Python math. No I/O, no shared state.
Given member geometry, cover and stock constraints, produce bar picks,
grouped cut lists, fiber dosages and mesh sheet counts.
"""
