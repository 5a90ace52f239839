"""NiceGUI chat widget backed by the query endpoint."""

import logging
import os
from pathlib import Path

from nicegui import app, ui

from support_chat.models.schemas import ChatMessage, Role
from support_chat.ui.client import RelayFailure, query_relay
from support_chat.ui.messages import (
    BRAND_LABEL,
    DISCLAIMER,
    INPUT_PLACEHOLDER,
    LOADING_TEXT,
    PAGE_TITLE,
    WELCOME_HEADING,
)
from support_chat.ui.rendering import render_content
from support_chat.ui.state import ChatState, receive_answer, receive_failure, submit

logger = logging.getLogger(__name__)

STATIC_DIR = Path(__file__).resolve().parent.parent / "static"
LOGO_URL = "/assets/motion_logo.svg"

app.add_static_files("/assets", STATIC_DIR)

CUSTOM_CSS = """
<link href="https://fonts.googleapis.com/css2?family=Inter:wght@400;500;600&display=swap"
      rel="stylesheet">
<style>
    * { font-family: 'Inter', 'Segoe UI', sans-serif; }

    body { background: #ffffff; color: #333333; }

    .brand-label {
        position: fixed; top: 16px; left: 16px;
        font-size: 12px; color: #999999; z-index: 10;
    }

    .message-user {
        background: #18A3F2;
        color: white;
        border-radius: 20px 4px 20px 20px;
        box-shadow: 0 4px 15px rgba(0, 0, 0, 0.08);
    }

    .message-assistant {
        background: #ffffff;
        color: #333333;
        border: 1px solid #f0f0f0;
        border-radius: 4px 20px 20px 20px;
        box-shadow: 0 4px 15px rgba(0, 0, 0, 0.08);
    }

    .message-loading {
        background: #f3f4f6;
        color: #999999;
        border-radius: 0 16px 16px 16px;
    }

    .input-box {
        background: #ffffff;
        border: 2px solid #e5e7eb;
        border-radius: 16px;
        box-shadow: 0 10px 15px -3px rgba(0, 0, 0, 0.1);
        transition: border-color 0.2s;
    }
    .input-box:focus-within { border-color: #18A3F2; }

    .message-user a { color: #ffffff !important; }
</style>
"""


@ui.page("/", title=PAGE_TITLE)
def chat_page() -> None:
    """Main chat page."""
    ui.add_head_html(CUSTOM_CSS)
    state = ChatState()

    messages_container: ui.column
    scroll_area: ui.scroll_area
    input_field: ui.input
    send_btn: ui.button

    def render_message(msg: ChatMessage) -> None:
        is_user = msg.role is Role.USER
        align = "justify-end" if is_user else "justify-start"
        bubble = "message-user" if is_user else "message-assistant"

        with ui.row().classes(f"w-full {align}"):
            with ui.element("div").classes(f"max-w-[85%] px-5 py-4 {bubble}"):
                ui.html(render_content(msg.content), sanitize=False).classes(
                    "text-[15px] leading-relaxed"
                )

    def render_welcome() -> None:
        with ui.column().classes("w-full items-center justify-center gap-6 min-h-[60vh]"):
            ui.image(LOGO_URL).classes("w-[120px] opacity-90")
            ui.label(WELCOME_HEADING).classes("text-xl font-semibold text-gray-600")

    def refresh_messages() -> None:
        messages_container.clear()
        with messages_container:
            if not state.messages:
                render_welcome()
            else:
                for msg in state.messages:
                    render_message(msg)
                if state.is_loading:
                    with ui.row().classes("w-full justify-start"):
                        ui.label(LOADING_TEXT).classes("message-loading px-4 py-3")
        scroll_area.scroll_to(percent=1.0)

    def set_input_enabled(enabled: bool) -> None:
        for element in (input_field, send_btn):
            if enabled:
                element.enable()
            else:
                element.disable()

    async def send_message() -> None:
        nonlocal state
        state, message = submit(state, input_field.value or "")
        if message is None:
            return

        input_field.value = ""
        set_input_enabled(False)
        refresh_messages()

        try:
            text = await query_relay(message)
            state = receive_answer(state, text)
        except RelayFailure as e:
            logger.error(f"Query failed ({e.kind.value}): {e.message}")
            state = receive_failure(state, e)
        except Exception as e:
            logger.exception(f"Unexpected query failure: {e}")
            state = receive_failure(state, RelayFailure(str(e)))
        finally:
            set_input_enabled(True)
            refresh_messages()

    # === UI Layout ===
    ui.label(BRAND_LABEL).classes("brand-label")

    with ui.column().classes("w-full max-w-3xl mx-auto").style("height: calc(100vh - 2rem)"):
        # Messages
        with (
            ui.scroll_area().classes("flex-grow w-full") as scroll_area,
            ui.column().classes("w-full px-4 pt-16 pb-4"),
        ):
            messages_container = ui.column().classes("w-full gap-6")

        # Input
        with ui.column().classes("w-full max-w-2xl mx-auto px-4 pb-6 gap-2"):
            with ui.row().classes("w-full input-box px-4 py-2 items-center no-wrap"):
                input_field = (
                    ui.input(placeholder=INPUT_PLACEHOLDER)
                    .props("borderless dense")
                    .classes("flex-grow text-base")
                    .on("keydown.enter", send_message)
                )
                send_btn = (
                    ui.button(icon="send", on_click=send_message)
                    .props("flat round dense")
                    .style("color: #18A3F2")
                )
            ui.label(DISCLAIMER).classes("w-full text-center text-[10px] text-gray-400")

    refresh_messages()


def main() -> None:
    """Run the widget on its own, calling the API at API_BASE_URL."""
    ui.run(
        title=PAGE_TITLE,
        host=os.getenv("HOST", "0.0.0.0"),
        port=int(os.getenv("UI_PORT", "8080")),
        reload=False,
    )


if __name__ == "__main__":
    main()
