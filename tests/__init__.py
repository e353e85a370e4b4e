"""Test package for Gemini Chat.

Structure:
    - unit/: Individual function and class tests
    - integration/: Full chat turns through the real client and the app shell

The Gemini API is never called; httpx.MockTransport stands in for it.
Leverages pytest with pytest-check for soft assertions.
"""
