"""Concrete estimating backend — reinforcement design engine and API."""
