"""Unit tests for individual components in isolation.

Coverage:
    - relay/: configuration, knowledge loading, prompt assembly, Gemini client
    - ui/: state transitions, failure text, rendering, endpoint client
"""
