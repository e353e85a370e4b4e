"""NiceGUI interface - thin visualization layer for the chat widget.

Responsibilities:
    - Message bubbles with avatars for user and bot turns
    - Typing indicator for the pending turn
    - Auto-scroll to the newest turn on every transcript change
    - Disabling input while a request is in flight

Contains no business logic. Rendering is a pure function of the
controller's transcript and request state.
"""
