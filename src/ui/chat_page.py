"""NiceGUI chat interface rendering ChatController state."""

from nicegui import ui

from src.agent.chat_agent import AgentService
from src.chat.controller import ChatController
from src.models.schemas import ChatState, Message, Role

CUSTOM_CSS = """
<link href="https://fonts.googleapis.com/css2?family=Inter:wght@400;500;600&display=swap"
      rel="stylesheet">
<style>
    * { font-family: 'Inter', sans-serif; }

    body { background: #f9fafb; min-height: 100vh; }

    .app-container {
        background: white;
        border-radius: 12px;
        box-shadow: 0 2px 8px rgba(0, 0, 0, 0.1);
        overflow: hidden;
    }

    .header { background: linear-gradient(135deg, #3b82f6 0%, #4f46e5 100%); }

    .message-user {
        background: #2563eb;
        color: white;
        border-radius: 18px 18px 4px 18px;
        white-space: pre-wrap;
    }

    .message-assistant {
        background: white;
        color: #1f2937;
        border: 1px solid #e5e7eb;
        border-radius: 18px 18px 18px 4px;
    }

    .avatar-user { background: #2563eb; }
    .avatar-assistant { background: linear-gradient(135deg, #3b82f6 0%, #4f46e5 100%); }

    .typing-dot {
        width: 8px; height: 8px;
        background: #4f46e5;
        border-radius: 50%;
        animation: bounce 1.4s infinite ease-in-out;
    }
    .typing-dot:nth-child(2) { animation-delay: 0.2s; }
    .typing-dot:nth-child(3) { animation-delay: 0.4s; }

    @keyframes bounce {
        0%, 60%, 100% { transform: translateY(0); }
        30% { transform: translateY(-6px); }
    }

    .input-box {
        background: #f9fafb;
        border: 1px solid #e5e7eb;
        border-radius: 12px;
        transition: border-color 0.2s;
    }
    .input-box:focus-within { border-color: #4f46e5; }

    .message-assistant pre { margin: 0.5rem 0; }
    .message-assistant code { font-family: 'Menlo', 'Monaco', monospace; }
</style>
"""


@ui.page("/")
def chat_page() -> None:
    """Main chat page. Each page load gets a fresh conversation."""
    ui.add_head_html(CUSTOM_CSS)
    controller = ChatController(AgentService())

    scroll_area: ui.scroll_area
    messages_container: ui.column
    input_field: ui.textarea
    send_btn: ui.button

    def render_avatar(is_user: bool) -> None:
        css = "avatar-user" if is_user else "avatar-assistant"
        icon = "person" if is_user else "auto_awesome"
        avatar_classes = f"w-9 h-9 rounded-full flex items-center justify-center {css}"
        with ui.element("div").classes(avatar_classes):
            ui.icon(icon).classes("text-white text-lg")

    def render_typing_indicator() -> None:
        with ui.row().classes("w-full justify-start gap-3 items-end"):
            render_avatar(False)
            with ui.element("div").classes("message-assistant px-4 py-3"):
                with ui.row().classes("gap-1"):
                    for _ in range(3):
                        ui.element("div").classes("typing-dot")

    def render_message(msg: Message) -> None:
        is_user = msg.role is Role.USER
        align = "justify-end" if is_user else "justify-start"
        bubble = "message-user" if is_user else "message-assistant"

        with ui.row().classes(f"w-full {align} gap-3 items-end"):
            if not is_user:
                render_avatar(False)
            with ui.column().classes("max-w-[75%] gap-1"):
                with ui.element("div").classes(f"px-4 py-3 {bubble}"):
                    # Markdown for assistant, plain text for user
                    if is_user:
                        ui.label(msg.content).classes("text-sm leading-relaxed")
                    else:
                        ui.markdown(msg.content).classes("text-sm leading-relaxed")
                ui.label(msg.timestamp.strftime("%I:%M %p")).classes(
                    f"text-[10px] text-gray-400 {'self-end' if is_user else 'self-start'}"
                )
            if is_user:
                render_avatar(True)

    def render_error(state: ChatState) -> None:
        with ui.row().classes("w-full justify-center my-2"):
            with ui.row().classes(
                "bg-red-50 text-red-600 px-4 py-2 rounded-lg text-sm items-center gap-2 "
                "border border-red-100"
            ):
                ui.icon("error_outline")
                ui.label(state.error)
                if state.is_initialized:
                    ui.button(icon="close", on_click=controller.dismiss_error).props(
                        "flat round dense size=sm color=red"
                    )

    def refresh(state: ChatState) -> None:
        messages_container.clear()
        with messages_container:
            if not state.messages and state.is_initialized:
                with ui.column().classes("w-full h-64 items-center justify-center gap-3"):
                    ui.icon("auto_awesome").classes("text-5xl text-gray-300")
                    ui.label("Start a conversation...").classes("text-lg text-gray-400")
            for msg in state.messages:
                if msg.is_streaming and not msg.content:
                    render_typing_indicator()
                else:
                    render_message(msg)
            if state.error:
                render_error(state)

        if state.accepts_input:
            input_field.enable()
            send_btn.enable()
        else:
            input_field.disable()
            send_btn.disable()
        scroll_area.scroll_to(percent=1.0)

    async def send_message() -> None:
        text = input_field.value or ""
        if not controller.state.accepts_input or not text.strip():
            return
        input_field.value = ""
        await controller.on_submit(text)

    # === UI Layout ===
    with (
        ui.element("div").classes("w-full min-h-screen p-4 md:p-8"),
        ui.column().classes("w-full max-w-4xl mx-auto app-container").style(
            "height: calc(100vh - 4rem)"
        ),
    ):
        # Header
        with ui.row().classes("w-full header px-5 py-4 items-center justify-between"):
            with ui.row().classes("items-center gap-3"):
                ui.icon("auto_awesome").classes("text-white text-3xl")
                with ui.column().classes("gap-0"):
                    ui.label("Gemini NLP Chatbot").classes("text-lg font-semibold text-white")
                    ui.label("Online & Ready").classes("text-xs text-white/80")
            with ui.row().classes("items-center gap-1 text-white/80"):
                ui.icon("forum").classes("text-sm")
                ui.label("Multi-turn Enabled").classes("text-xs")

        # Messages
        with ui.scroll_area().classes("flex-grow w-full bg-gray-50") as scroll_area:
            with ui.column().classes("w-full p-5"):
                messages_container = ui.column().classes("w-full gap-4")

        # Input
        with ui.row().classes("w-full p-4 gap-3 items-end bg-white border-t"):
            with ui.element("div").classes("flex-grow input-box px-3 py-2"):
                input_field = (
                    ui.textarea(placeholder="Type a message...")
                    .props("autogrow borderless dense rows=1")
                    .classes("w-full")
                    .on("keydown.enter.prevent", send_message)
                )
            send_btn = ui.button(icon="send", on_click=send_message).props(
                "round unelevated color=indigo"
            )

    controller.subscribe(refresh)
    controller.start()
    refresh(controller.state)
