"""Test package for Support Chat.

Structure:
    - unit/: Individual function and class tests
    - integration/: Endpoint and widget round trips through the real app

The Gemini API is stubbed with httpx.MockTransport except in the live test,
which is skipped unless GEMINI_API_KEY is set.
"""
