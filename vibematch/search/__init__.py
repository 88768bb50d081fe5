"""
Vibe search pipeline.

Responsibilities:
- Accept a free-text query, a location and slider preferences.
- Build the natural-language query and send it to Yelp AI.
- Score, match and rank every business the AI returns.
- Return structured results ready for API serialisation.
"""
