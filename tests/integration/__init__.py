"""Integration tests: full chat turns and the application shell.

The Gemini API is replaced by httpx.MockTransport; everything else is real.
"""
