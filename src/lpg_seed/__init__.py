"""
LPG Seed - Synthetic relationship-tracking data for development and testing.

This package populates a mentorship domain (organizations, people,
relationships, milestones, interactions) with referentially valid sample
data. Generation runs in dependency order, each collection is seeded at most
once, and fixture records carry deterministic ids so tests can find them.
"""

__version__ = "0.1.0"
