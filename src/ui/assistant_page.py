"""NiceGUI page for uploading PDFs and asking questions about them."""

import logging

from nicegui import events, ui

from src.client.knowledge_client import get_knowledge_client
from src.controllers.keyboard import ENTER_KEY_JS_HANDLER, KeyPress
from src.controllers.query import QueryController
from src.controllers.upload import UploadController
from src.models.schemas import SelectedFile
from src.state.session import SessionState
from src.ui.history_view import answer_classes, render_history

logger = logging.getLogger(__name__)

CUSTOM_CSS = """
<link href="https://fonts.googleapis.com/css2?family=Inter:wght@400;500;600&display=swap"
      rel="stylesheet">
<style>
    * { font-family: 'Inter', sans-serif; }

    body { background: #f5f5f5; min-height: 100vh; }

    .card {
        background: white;
        border-radius: 16px;
        box-shadow: 0 2px 8px rgba(0, 0, 0, 0.1);
    }

    .header { background: linear-gradient(135deg, #667eea 0%, #764ba2 100%); }

    .ask-btn { background: linear-gradient(135deg, #667eea 0%, #764ba2 100%) !important; }
</style>
"""


async def selected_file_from_event(e: events.UploadEventArguments) -> SelectedFile:
    """Read an uploaded file out of a NiceGUI upload event."""
    return SelectedFile(
        name=e.file.name,
        content_type=e.file.content_type,
        content=await e.file.read(),
    )


@ui.page("/")
def assistant_page() -> None:
    """Main assistant page."""
    ui.add_head_html(CUSTOM_CSS)
    client = get_knowledge_client()
    session = SessionState()

    file_picker: ui.upload
    upload_controller = UploadController(
        session, client, reset_selection=lambda: file_picker.reset()
    )
    query_controller = QueryController(session, client)

    async def handle_upload(e: events.UploadEventArguments) -> None:
        await upload_controller.submit_upload(await selected_file_from_event(e))

    async def handle_keydown(e: events.GenericEventArguments) -> None:
        await query_controller.handle_key_press(KeyPress.model_validate(e.args))

    @ui.refreshable
    def upload_status_panel() -> None:
        status = session.upload_status
        if status is None:
            return
        colors = (
            "bg-green-50 border-green-200 text-green-700"
            if status.is_success
            else "bg-red-50 border-red-200 text-red-700"
        )
        with ui.row().classes(f"w-full mt-4 p-4 rounded-lg border items-center gap-2 {colors}"):
            ui.icon("check_circle" if status.is_success else "error").classes("text-xl")
            ui.label(status.message)

    @ui.refreshable
    def current_answer_panel() -> None:
        if not session.current_answer:
            return
        with ui.column().classes("w-full card p-6 mt-8"):
            ui.label("Current Answer").classes("text-xl font-semibold text-gray-800")
            with ui.element("div").classes(
                f"w-full p-4 rounded-lg {answer_classes(session.last_entry_is_error)}"
            ):
                ui.label(session.current_answer).classes("whitespace-pre-wrap")

    @ui.refreshable
    def history_panel() -> None:
        if not len(session.history):
            return
        with ui.column().classes("w-full card p-6 mt-8"):
            ui.label("Chat History").classes("text-xl font-semibold text-gray-800")
            with ui.scroll_area().classes("w-full h-96"):
                with ui.column().classes("w-full gap-4"):
                    render_history(session.history)

    def on_session_change() -> None:
        upload_status_panel.refresh()
        current_answer_panel.refresh()
        history_panel.refresh()

    session.subscribe(on_session_change)
    ui.context.client.on_disconnect(lambda: session.unsubscribe(on_session_change))

    # === UI Layout ===
    with ui.column().classes("w-full max-w-5xl mx-auto p-4 md:p-8 gap-0"):
        # Header
        with ui.column().classes("w-full header rounded-2xl px-6 py-5 items-center mb-8"):
            with ui.row().classes("items-center gap-3"):
                ui.icon("forum").classes("text-white text-4xl")
                ui.label("RAG Document Assistant").classes("text-3xl font-bold text-white")
            ui.label("Upload PDFs and ask questions about their content").classes(
                "text-white/80"
            )

        with ui.grid(columns=2).classes("w-full gap-8"):
            # Upload
            with ui.column().classes("card p-6"):
                with ui.row().classes("items-center gap-2"):
                    ui.icon("upload_file").classes("text-2xl text-indigo-500")
                    ui.label("Upload Documents").classes("text-2xl font-semibold text-gray-800")
                file_picker = (
                    ui.upload(
                        label="Click to upload PDF files",
                        on_upload=handle_upload,
                        auto_upload=True,
                        max_files=1,
                    )
                    .props("accept=.pdf flat bordered")
                    .classes("w-full")
                    .bind_enabled_from(session, "is_uploading", backward=lambda busy: not busy)
                )
                with ui.row().classes("items-center gap-2").bind_visibility_from(
                    session, "is_uploading"
                ):
                    ui.spinner(size="sm")
                    ui.label("Processing...").classes("text-sm text-gray-500")
                upload_status_panel()

            # Questions
            with ui.column().classes("card p-6 gap-4"):
                with ui.row().classes("items-center gap-2"):
                    ui.icon("chat").classes("text-2xl text-indigo-500")
                    ui.label("Ask Questions").classes("text-2xl font-semibold text-gray-800")
                (
                    ui.textarea(placeholder="Ask a question about your uploaded documents...")
                    .props("outlined rows=3")
                    .classes("w-full")
                    .bind_value(session, "question_draft")
                    .bind_enabled_from(session, "is_asking", backward=lambda busy: not busy)
                    .on("keydown", handle_keydown, js_handler=ENTER_KEY_JS_HANDLER)
                )
                (
                    ui.button(icon="send", on_click=query_controller.submit_draft)
                    .props("unelevated")
                    .classes("w-full ask-btn text-white")
                    .bind_text_from(
                        session,
                        "is_asking",
                        backward=lambda busy: "Getting Answer..." if busy else "Ask Question",
                    )
                    .bind_enabled_from(session, "can_ask")
                )

        current_answer_panel()
        history_panel()

        # Instructions
        with ui.column().classes("w-full card p-6 mt-8 gap-2"):
            ui.label("How to Use").classes("text-lg font-semibold text-gray-800")
            ui.markdown(
                "1. **Upload:** Select and upload PDF documents to build your knowledge base\n"
                "2. **Ask:** Type questions about the content of your uploaded documents\n"
                "3. **Review:** Get AI-powered answers based on document content"
            ).classes("text-gray-600")
            ui.label(
                f"Note: Ensure the knowledge service is running at {client.base_url}."
            ).classes("text-sm text-gray-500 p-3 rounded-lg bg-indigo-50")

    logger.debug("Assistant page created")
