"""Gemini Chat - streaming multi-turn chat client for hosted language models.

Combines Agno for model orchestration, NiceGUI for the browser UI,
FastAPI as the host application, and Pydantic for data validation.

Components:
    - chat: Transcript store, stream consumer and session controller
    - agent: Generation collaborator backed by an Agno agent
    - models: Message and state schemas
    - ui: Web interface for chat interactions
    - api: Host application and health check
"""

__version__ = "0.1.0"
