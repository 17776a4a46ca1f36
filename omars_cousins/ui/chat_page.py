"""NiceGUI chat interface with multiple persisted sessions."""

import os
from functools import partial

import httpx
from nicegui import app, ui

from omars_cousins.models.schemas import AnswerResponse, Message, Role
from omars_cousins.sessions.storage import MappingStorage
from omars_cousins.sessions.store import SessionStore

DEFAULT_API_BASE_URL = "http://localhost:8000"

CUSTOM_CSS = """
<link href="https://fonts.googleapis.com/css2?family=Inter:wght@400;500;600&display=swap"
      rel="stylesheet">
<style>
    * { font-family: 'Inter', sans-serif; }

    body { background: #f5f5f5; min-height: 100vh; }

    .app-container {
        background: white;
        border-radius: 12px;
        box-shadow: 0 2px 8px rgba(0, 0, 0, 0.1);
        overflow: hidden;
    }

    .header { background: linear-gradient(135deg, #f59e0b 0%, #b45309 100%); }

    .message-user {
        background: #dbeafe;
        color: #1f2937;
        border-radius: 18px 18px 4px 18px;
    }

    .message-assistant {
        background: #f3f4f6;
        color: #1f2937;
        border-radius: 18px 18px 18px 4px;
    }

    .message-system { color: #6b7280; font-style: italic; }

    .session-item { border-radius: 8px; cursor: pointer; }
    .session-item:hover { background: #f3f4f6; }
    .session-active { background: #fef3c7; }
</style>
"""


async def ask_cousins(
    question: str, transport: httpx.AsyncBaseTransport | None = None
) -> str:
    """POST a question to the /api/omars-cousins endpoint.

    The API address is read from API_BASE_URL on every call.

    Raises:
        httpx.HTTPError: If the API is unreachable or answers with an error.
        ValueError: If the response body is not a valid answer payload.
    """
    base_url = os.getenv("API_BASE_URL", DEFAULT_API_BASE_URL).rstrip("/")
    async with httpx.AsyncClient(timeout=120.0, transport=transport) as client:
        response = await client.post(
            f"{base_url}/api/omars-cousins",
            json={"question": question},
        )
        response.raise_for_status()
        return AnswerResponse.model_validate(response.json()).answer


@ui.page("/")
def chat_page() -> None:
    """Main chat page."""
    ui.add_head_html(CUSTOM_CSS)

    sessions_container: ui.column
    messages_container: ui.column
    send_btn: ui.button

    def render_message(msg: Message) -> None:
        if msg.role == Role.SYSTEM:
            ui.label(msg.content).classes("w-full text-center text-sm message-system")
            return

        is_user = msg.role == Role.USER
        align = "justify-end" if is_user else "justify-start"
        bubble = "message-user" if is_user else "message-assistant"
        with ui.row().classes(f"w-full {align}"):
            with ui.element("div").classes(f"px-4 py-3 max-w-[70%] {bubble}"):
                ui.label(msg.content).classes("text-sm leading-relaxed whitespace-pre-wrap")

    def refresh_sessions() -> None:
        sessions_container.clear()
        with sessions_container:
            for session in store.sessions:
                active = "session-active" if session.id == store.selected_id else ""
                ui.label(session.name).classes(
                    f"w-full px-3 py-2 text-sm session-item {active}"
                ).on("click", partial(store.select_session, session.id))

    def refresh_messages() -> None:
        messages_container.clear()
        selected = store.selected
        with messages_container:
            if selected is not None:
                for msg in selected.messages:
                    render_message(msg)
            if store.loading:
                ui.label("Omar's cousins are thinking...").classes(
                    "p-3 text-sm text-gray-500 italic"
                )

    def refresh() -> None:
        refresh_sessions()
        refresh_messages()
        send_btn.set_enabled(not store.loading)

    store = SessionStore(MappingStorage(app.storage.user), on_change=refresh)

    async def send_message() -> None:
        if not store.input_text.strip() or store.loading:
            return

        await store.submit(store.input_text, ask_cousins)

        if store.error:
            ui.notify("Omar's cousins could not be reached", type="negative")
        elif store.success:
            ui.notify("Omar's cousins have spoken", type="positive")

    # === UI Layout ===
    with (
        ui.element("div").classes("w-full min-h-screen p-4 md:p-8"),
        ui.row().classes("w-full max-w-5xl mx-auto app-container no-wrap gap-0").style(
            "height: calc(100vh - 4rem)"
        ),
    ):
        # Sessions
        with ui.column().classes("w-64 h-full border-r p-3 gap-2"):
            ui.button("New chat", icon="add", on_click=store.create_session).props(
                "unelevated color=amber-8"
            ).classes("w-full")
            with ui.scroll_area().classes("flex-grow w-full"):
                sessions_container = ui.column().classes("w-full gap-1")

        with ui.column().classes("flex-grow h-full gap-0"):
            # Header
            with ui.row().classes("w-full header px-5 py-4 items-center"):
                ui.icon("emoji_people").classes("text-white text-3xl")
                ui.label("Omar's Cousins").classes("text-lg font-semibold text-white")

            # Messages
            with (
                ui.scroll_area().classes("flex-grow w-full bg-gray-50"),
                ui.column().classes("w-full p-5"),
            ):
                messages_container = ui.column().classes("w-full gap-4")

            # Input
            with ui.row().classes("w-full p-4 gap-3 items-end bg-white border-t"):
                (
                    ui.textarea(placeholder="Type your question...")
                    .props("autogrow outlined dense rows=1")
                    .classes("flex-grow")
                    .bind_value(store, "input_text")
                    .on("keydown.enter.prevent", send_message)
                )
                send_btn = ui.button("Send", on_click=send_message).props(
                    "unelevated color=primary"
                )

    store.initialize()
    refresh()


def main() -> None:
    ui.run(
        title="Omar's Cousins",
        port=int(os.getenv("UI_PORT", "8080")),
        reload=False,
        storage_secret=os.getenv("NICEGUI_STORAGE_SECRET", "omars-cousins-secret"),
    )


if __name__ == "__main__":
    main()
