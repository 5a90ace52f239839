"""Chat widget state and its transitions.

The widget is either idle or awaiting a response. Transitions return a new
ChatState and never mutate the one passed in.
"""

from pydantic import BaseModel, Field

from support_chat.models.schemas import ChatMessage, Role
from support_chat.ui.client import RelayFailure
from support_chat.ui.messages import failure_text


class ChatState(BaseModel):
    """Messages shown in the widget and whether a request is in flight."""

    messages: list[ChatMessage] = Field(default_factory=list)
    is_loading: bool = False


def _append(state: ChatState, role: Role, content: str, is_loading: bool) -> ChatState:
    return state.model_copy(
        update={
            "messages": [*state.messages, ChatMessage(role=role, content=content)],
            "is_loading": is_loading,
        }
    )


def submit(state: ChatState, text: str) -> tuple[ChatState, str | None]:
    """Start a request for the typed text.

    Returns:
        The new state and the message to send, or the unchanged state and
        None when the text is blank or a request is already in flight.
    """
    message = text.strip()
    if not message or state.is_loading:
        return state, None
    return _append(state, Role.USER, message, is_loading=True), message


def receive_answer(state: ChatState, text: str) -> ChatState:
    """Append the assistant's answer and return to idle."""
    return _append(state, Role.ASSISTANT, text, is_loading=False)


def receive_failure(state: ChatState, failure: RelayFailure) -> ChatState:
    """Append the user-facing failure text and return to idle."""
    return _append(
        state, Role.ASSISTANT, failure_text(failure.kind, failure.message), is_loading=False
    )
