"""Integration tests for components working together as a system.

Coverage:
    - /api/query through ASGITransport with a stubbed Gemini API
    - Widget client and state driven against the real endpoint
    - Optional live Gemini call (requires GEMINI_API_KEY)
"""
