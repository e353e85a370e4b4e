"""Unit tests for individual components in isolation.

Coverage:
    - models/: Turn and Gemini payload schemas
    - agent/: Config, Gemini client, transcript, and turn controller

Uses fakes for the text generator. Leverages pytest-check for multiple
assertions per test.
"""
