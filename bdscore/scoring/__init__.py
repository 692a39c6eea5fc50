"""
scoring/ - Weighting & Aggregation Engine

Modules:
    utils.py              - Float/Decimal helpers
    weight_validator.py   - Weight configuration validator
    normalizer.py         - Sum-to-one weight normalization
    aggregator.py         - Pillar score aggregation and composite score
    impact_analyzer.py    - Reweighting impact analysis
    weighting_engine.py   - Facade over all of the above plus profile storage
"""
