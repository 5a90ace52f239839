"""NiceGUI interface - thin visualization layer for the support chat.

Responsibilities:
    - Chat message display with linkified URLs and email addresses
    - Loading indicator while a question is being answered
    - Friendly messages for quota and generic failures

Contains minimal business logic. Delegates answering to the API.
"""
