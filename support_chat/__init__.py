"""Support Chat - knowledge-grounded customer support assistant.

Combines FastAPI for the query relay, httpx for the Gemini API call,
NiceGUI for the chat widget, and Pydantic for data validation.

Components:
    - api: HTTP endpoint relaying questions to the model
    - relay: knowledge loading, prompt assembly and the Gemini client
    - ui: Web interface for chat interactions
    - models: Request/response schemas and error kinds
"""

__version__ = "0.1.0"
