"""
Yelp integration layer.

Responsibilities:
- Manage Yelp API configuration and credentials.
- Call the Fusion business search / details endpoints.
- Call the Yelp AI chat endpoint with a natural-language vibe query.
- Surface transport and HTTP failures as typed errors.
"""
