"""
bdscore - Biotech BD scoring: weighting and aggregation engine.

Turns six pre-computed pillar scores and a weight configuration into a
normalized, explainable composite score; validates weight configurations,
manages named weight profiles and quantifies the impact of reweighting.
"""

__version__ = "1.0.0"
