"""Integration tests for components working together as a system.

Coverage:
    - Host application endpoints with real HTTP requests
    - Full chat turns against the live model provider (when configured)
    - Context retention across turns

External services may be required for live tests.
Requires environment variables for API keys.
"""
