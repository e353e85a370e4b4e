"""NiceGUI chat page rendered from the controller's transcript."""

import logging

from nicegui import Client, context, ui

from chatbot.agent.config import ChatConfig
from chatbot.agent.controller import TurnController
from chatbot.agent.gemini_client import GeminiClient
from chatbot.agent.transcript import TranscriptListener
from chatbot.models.schemas import Sender, Turn

logger = logging.getLogger(__name__)

CUSTOM_CSS = """
<style>
    body {
        background: linear-gradient(135deg, #111827 0%, #000000 50%, #111827 100%);
        min-height: 100vh;
        color: white;
    }

    .chat-card {
        background: rgba(31, 41, 55, 0.8);
        backdrop-filter: blur(12px);
        border: 1px solid #374151;
        border-radius: 24px;
        box-shadow: 0 25px 50px -12px rgba(0, 0, 0, 0.5);
        overflow: hidden;
    }

    .chat-header { background: linear-gradient(90deg, #2563eb 0%, #9333ea 100%); }

    .bubble-user { background: #2563eb; color: white; border-radius: 16px; }
    .bubble-bot { background: #374151; color: #f3f4f6; border-radius: 16px; }

    .avatar-user { background: linear-gradient(135deg, #2563eb 0%, #0ea5e9 100%); }
    .avatar-bot { background: linear-gradient(135deg, #9333ea 0%, #6366f1 100%); }

    .typing-dot {
        width: 8px; height: 8px;
        background: #9ca3af;
        border-radius: 50%;
        animation: pulse 1.4s infinite ease-in-out;
    }
    .typing-dot:nth-child(2) { animation-delay: 0.2s; }
    .typing-dot:nth-child(3) { animation-delay: 0.4s; }

    @keyframes pulse {
        0%, 100% { opacity: 1; }
        50% { opacity: 0.4; }
    }

    .send-btn { background: linear-gradient(90deg, #2563eb 0%, #9333ea 100%) !important; }
</style>
"""


def render_avatar(sender: Sender) -> None:
    css = "avatar-user" if sender is Sender.USER else "avatar-bot"
    emoji = "👤" if sender is Sender.USER else "🤖"
    with ui.element("div").classes(
        f"w-8 h-8 rounded-full flex items-center justify-center text-xs {css}"
    ):
        ui.label(emoji)


def render_typing_indicator() -> None:
    with ui.row().classes("gap-1 py-1"):
        for _ in range(3):
            ui.element("div").classes("typing-dot")


def render_turn(turn: Turn) -> None:
    is_user = turn.sender is Sender.USER
    align = "justify-end" if is_user else "justify-start"
    bubble = "bubble-user" if is_user else "bubble-bot"

    with ui.row().classes(f"w-full {align} gap-2 items-end no-wrap"):
        if not is_user:
            render_avatar(Sender.BOT)
        with ui.element("div").classes(f"px-4 py-2 max-w-xs text-sm shadow-md {bubble}"):
            if turn.is_pending:
                render_typing_indicator()
            else:
                ui.label(turn.text).classes("whitespace-pre-wrap break-words")
        if is_user:
            render_avatar(Sender.USER)


def build_chat(controller: TurnController) -> None:
    """Lay out the chat widget for ``controller`` in the current page."""
    ui.add_head_html(CUSTOM_CSS)
    transcript = controller.transcript

    @ui.refreshable
    def render_turns() -> None:
        for turn in transcript:
            render_turn(turn)

    async def send() -> None:
        await controller.submit(input_field.value or "")

    with ui.column().classes(
        "w-full max-w-2xl mx-auto chat-card gap-0"
    ).style("height: 85vh"):
        ui.label("✨ Chatbot").classes(
            "w-full text-center text-2xl font-bold p-4 chat-header text-white"
        )

        scroll_area = ui.scroll_area().classes("flex-grow w-full p-4")
        with scroll_area, ui.column().classes("w-full gap-4"):
            render_turns()

        with ui.row().classes("w-full p-4 gap-2 items-center no-wrap bg-gray-900/60"):
            input_field = (
                ui.input(placeholder="Type your message...")
                .props("rounded outlined dense dark")
                .classes("flex-grow")
                .bind_value(controller, "draft")
                .bind_enabled_from(controller, "is_idle")
                .on("keydown.enter", send)
            )
            (
                ui.button("Send", on_click=send)
                .props("rounded unelevated")
                .classes("send-btn text-white")
                .bind_text_from(
                    controller, "is_sending", backward=lambda busy: "..." if busy else "Send"
                )
                .bind_enabled_from(controller, "is_idle")
            )

    def on_transcript_change() -> None:
        render_turns.refresh()
        scroll_area.scroll_to(percent=1.0)

    transcript.subscribe(on_transcript_change)
    attach_teardown(context.client, controller, on_transcript_change)


def attach_teardown(
    client: Client,
    controller: TurnController,
    listener: TranscriptListener,
) -> None:
    """Close ``controller`` once ``client`` is deleted.

    Socket drops that reconnect within the reconnect timeout keep the page
    alive, so only deletion counts as teardown.
    """

    def on_delete() -> None:
        controller.transcript.unsubscribe(listener)
        controller.close()
        logger.debug("Chat client deleted")

    client.on_delete(on_delete)


def register_chat_page(config: ChatConfig, path: str = "/") -> None:
    """Register the chat page; each browser client gets its own controller.

    Args:
        config: Gemini configuration shared by every page's client.
        path: Route for the page.
    """

    @ui.page(path)
    def chat_page() -> None:
        build_chat(TurnController(GeminiClient(config)))


def main(config: ChatConfig) -> None:
    """Serve only the chat page, without the FastAPI shell."""
    register_chat_page(config)
    ui.run(title="Chatbot", favicon="✨", port=8080, reload=False)
