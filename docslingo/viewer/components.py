"""NiceGUI building blocks for the spec browser.

Every function takes the active label set (see ``docslingo.viewer.labels``)
so the interface text follows the selected spec language.
"""

from __future__ import annotations

from typing import Callable

from nicegui import ui

from docslingo.viewer.markdown import render_markdown
from docslingo.viewer.state import Endpoint, ViewerState, get_operation, group_by_tag

METHOD_COLORS = {
    "get": "bg-blue-100 text-blue-800",
    "post": "bg-green-100 text-green-800",
    "put": "bg-yellow-100 text-yellow-800",
    "delete": "bg-red-100 text-red-800",
    "patch": "bg-purple-100 text-purple-800",
}

# description cells hold HTML from render_markdown
DESCRIPTION_SLOT = r"""
<q-td key="description" :props="props">
    <div v-html="props.value"></div>
</q-td>
"""


def method_color(method: str) -> str:
    return METHOD_COLORS.get(method.lower(), "bg-gray-100 text-gray-800")


def status_color(status: str) -> str:
    try:
        code = int(str(status)[:3])
    except ValueError:
        return "bg-gray-100 text-gray-800"
    if 200 <= code < 300:
        return "bg-green-100 text-green-800"
    if 300 <= code < 400:
        return "bg-blue-100 text-blue-800"
    if 400 <= code < 500:
        return "bg-yellow-100 text-yellow-800"
    if code >= 500:
        return "bg-red-100 text-red-800"
    return "bg-gray-100 text-gray-800"


def parameter_columns(text: dict[str, str]) -> list[dict]:
    return [
        {"name": key, "label": text[key], "field": key, "align": "left"}
        for key in ("name", "type", "in", "required", "description")
    ]


def parameter_rows(parameters: list[dict], text: dict[str, str]) -> list[dict]:
    rows = []
    for param in parameters or []:
        rows.append({
            "name": param.get("name", ""),
            "type": (param.get("schema") or {}).get("type", "any"),
            "in": param.get("in", ""),
            "required": text["yes"] if param.get("required") else text["no"],
            "description": render_markdown(param.get("description")) or "-",
        })
    return rows


def markdown_block(text: str, classes: str = "text-gray-700") -> None:
    ui.html(render_markdown(text)).classes(classes)


def loading_view(text: dict[str, str]) -> None:
    with ui.column().classes("w-full h-screen items-center justify-center"):
        ui.spinner(size="xl")
        ui.label(text["loading"]).classes("text-gray-600")


def error_view(message: str, text: dict[str, str]) -> None:
    with ui.column().classes("w-full h-screen items-center justify-center"):
        ui.label("⚠️").classes("text-5xl")
        ui.label(text["load_failed"]).classes("text-2xl font-bold text-gray-900")
        ui.label(message).classes("text-gray-600 max-w-md text-center")
        ui.label(text["generate_hint"]).classes("text-sm text-gray-500")


def header(
    state: ViewerState,
    text: dict[str, str],
    on_language: Callable,
    on_file: Callable,
) -> None:
    title = ((state.spec or {}).get("info") or {}).get("title") or text["api_documentation"]
    with ui.row().classes("w-full items-center justify-between bg-white border-b px-6 py-4"):
        with ui.row().classes("items-center gap-4"):
            ui.label(title).classes("text-2xl font-bold text-gray-900")
            if len(state.files) > 1:
                ui.select(
                    state.files,
                    value=state.filename,
                    on_change=lambda e: on_file(e.value),
                ).props("outlined dense")
        with ui.row().classes("items-center gap-2"):
            ui.label(text["language"]).classes("text-sm text-gray-600")
            ui.select(
                {lang: lang.upper() for lang in state.languages},
                value=state.language,
                on_change=lambda e: on_language(e.value),
            ).props("outlined dense")


def sidebar(state: ViewerState, text: dict[str, str], on_select: Callable[[Endpoint], None]) -> None:
    groups = group_by_tag(state.spec)
    with ui.column().classes("w-80 bg-white border-r overflow-y-auto p-4 gap-1"):
        if not groups:
            ui.label(text["no_endpoints"]).classes("text-gray-500 text-sm")
            return

        ui.label(text["endpoints"]).classes("text-xs font-semibold text-gray-500 uppercase tracking-wider mb-2")
        for tag, entries in groups.items():
            ui.label(tag).classes("text-sm font-semibold text-gray-900 mt-4")
            for entry in entries:
                selected = state.selected == entry.endpoint
                item = ui.element("div").classes(
                    "w-full cursor-pointer px-3 py-2 rounded-md text-sm "
                    + ("bg-blue-50 text-blue-700 font-medium" if selected else "text-gray-700 hover:bg-gray-50")
                )
                item.on("click", lambda _, ep=entry.endpoint: on_select(ep))
                with item:
                    with ui.row().classes("items-center gap-2 no-wrap"):
                        ui.label(entry.method).classes(
                            f"px-2 py-0.5 rounded text-xs font-semibold uppercase {method_color(entry.method)}"
                        )
                        ui.label(entry.path).classes("truncate")
                    if entry.operation.get("summary"):
                        ui.label(entry.operation["summary"]).classes("text-xs text-gray-500 truncate")


def overview(spec: dict, text: dict[str, str]) -> None:
    description = (spec.get("info") or {}).get("description")
    if not description:
        return
    with ui.column().classes("p-8 max-w-5xl"):
        ui.label(text["overview"]).classes("text-2xl font-bold text-gray-900")
        markdown_block(description, "bg-slate-50 rounded-lg p-6 border")


def endpoint_detail(spec: dict, endpoint: Endpoint, text: dict[str, str]) -> None:
    operation = get_operation(spec, endpoint)
    if not operation:
        return

    with ui.column().classes("p-8 max-w-4xl gap-6"):
        with ui.row().classes("items-center gap-3"):
            ui.label(endpoint.method).classes(
                f"px-3 py-1 rounded text-sm font-semibold uppercase {method_color(endpoint.method)}"
            )
            ui.label(endpoint.path).classes("text-lg font-mono text-gray-900")
        if operation.get("summary"):
            ui.label(operation["summary"]).classes("text-2xl font-bold text-gray-900")
        if operation.get("description"):
            markdown_block(operation["description"], "text-gray-600")

        parameters = operation.get("parameters") or []
        if parameters:
            ui.label(text["parameters"]).classes("text-lg font-semibold text-gray-900")
            table = ui.table(
                columns=parameter_columns(text),
                rows=parameter_rows(parameters, text),
                row_key="name",
            ).classes("w-full")
            table.add_slot("body-cell-description", DESCRIPTION_SLOT)

        body = operation.get("requestBody")
        if body:
            ui.label(text["request_body"]).classes("text-lg font-semibold text-gray-900")
            with ui.column().classes("bg-gray-50 border rounded-lg p-4 w-full"):
                if body.get("description"):
                    markdown_block(body["description"], "text-gray-600")
                if body.get("required"):
                    ui.label(text["required"]).classes("px-2 py-1 bg-red-100 text-red-800 text-xs font-semibold rounded")
                content_types(body.get("content"), text)

        responses = operation.get("responses") or {}
        if responses:
            ui.label(text["responses"]).classes("text-lg font-semibold text-gray-900")
            for status, response in responses.items():
                response = response or {}
                with ui.column().classes("border rounded-lg p-4 w-full"):
                    with ui.row().classes("items-center gap-3"):
                        ui.label(str(status)).classes(f"px-3 py-1 rounded font-semibold text-sm {status_color(status)}")
                        ui.label(response.get("description", "")).classes("text-gray-900 font-medium")
                    content_types(response.get("content"), text)


def content_types(content: dict | None, text: dict[str, str]) -> None:
    if not content:
        return
    ui.label(text["content_types"]).classes("text-sm text-gray-500")
    with ui.row().classes("gap-2"):
        for content_type in content:
            ui.label(content_type).classes("px-2 py-1 bg-white border rounded text-xs font-mono")
