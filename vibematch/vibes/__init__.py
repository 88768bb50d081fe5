"""
Vibe scoring and matching engine.

Responsibilities:
- Turn venue summaries and review snippets into noise / cozy / focus scores.
- Blend those text scores with structured venue attributes.
- Build a natural-language search query from slider preferences.
- Compute per-venue match percentages and rank venues by them.

Everything in this package is pure: no network, no persistence.
"""
