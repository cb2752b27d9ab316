"""
scoring/ - Venue Compliance Scoring

Modules:
    utils.py              - Decimal rounding / clamping helpers
    score_config.py       - Weights, tier thresholds and config loading
    compliance_scorer.py  - Sub-scores, global score, venue tier
    perfect_serve.py      - Perfect Serve checklist percentage
"""
