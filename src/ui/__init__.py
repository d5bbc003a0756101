"""NiceGUI interface - thin visualization layer for chat interactions.

Responsibilities:
    - Chat message display with streaming support
    - Typing indicator while a reply placeholder is still empty
    - Error banner and input disabling driven by controller state

Contains no business logic. Delegates all operations to ChatController.
"""
