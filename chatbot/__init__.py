"""Gemini Chat - a minimal browser chat widget backed by the Gemini API.

Combines NiceGUI for the chat interface, httpx for the outbound Gemini call,
FastAPI for the application shell, and Pydantic for configuration and
wire-format validation.

Components:
    - agent: Gemini client, transcript state, and the turn controller
    - api: FastAPI application hosting the UI
    - ui: Web interface for chat interactions
    - models: Turn and Gemini payload schemas
"""

__version__ = "0.1.0"
