"""Docslingo viewer - browse translated OpenAPI specs.

A single page built with NiceGUI. The page fetches the static assets that
``docslingo serve`` published under /trans-spec, the same way a browser
would, and renders them through ViewerStateMachine. Interface labels follow
the selected spec language (see ``docslingo.viewer.labels``).
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from docslingo.config import API_KEY_ENV, APP_NAME, DEFAULT_HOST, DEFAULT_PORT, STATIC_ROOT
from docslingo.viewer.labels import LabelCatalog, LingoLabelTranslator
from docslingo.viewer.loader import SpecLoader
from docslingo.viewer.state import (
    Endpoint,
    EndpointSelected,
    FileChanged,
    FilesListed,
    Initialized,
    InitFailed,
    LanguageChanged,
    LoadRequest,
    SpecLoaded,
    SpecLoadFailed,
    ViewerStateMachine,
    ViewStatus,
)

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger("docslingo-viewer")


@dataclass
class ViewerSettings:
    public_dir: Path
    host: str = DEFAULT_HOST
    port: int = DEFAULT_PORT
    api_key: Optional[str] = None


async def nicegui_io_bound(func, *args):
    from nicegui import run

    return await run.io_bound(func, *args)


class ViewerController:
    """Drives one page: performs the fetches the state machine asks for.

    Args:
        loader: SpecLoader bound to this page's server and browser language
        labels: Shared interface label catalog
        io_bound: Coroutine running a blocking call off the event loop
    """

    def __init__(
        self,
        loader: SpecLoader,
        machine: ViewerStateMachine | None = None,
        on_change=None,
        labels: LabelCatalog | None = None,
        io_bound=None,
    ):
        self.loader = loader
        self.machine = machine or ViewerStateMachine()
        self.on_change = on_change or (lambda: None)
        self.labels = labels or LabelCatalog()
        self.io_bound = io_bound or nicegui_io_bound

    @property
    def state(self):
        return self.machine.state

    @property
    def text(self) -> dict[str, str]:
        return self.labels.get(self.state.language)

    async def start(self) -> None:
        try:
            languages = await self.io_bound(self.loader.get_available_languages)
            language = await self.io_bound(self.loader.get_default_language)
            index = await self.io_bound(self.loader.get_spec_index)
        except Exception as e:
            logger.error("Could not initialize viewer: %s", e)
            self.machine.dispatch(InitFailed(str(e)))
            self.on_change()
            return

        await self.labels.prepare(language)
        files = index.get(language) or []
        request = self.machine.dispatch(Initialized(
            language=language,
            filename=files[0] if files else None,
            languages=languages.all,
            files=files,
        ))
        await self._load(request)

    async def change_language(self, language: str) -> None:
        if not language or language == self.state.language:
            return
        request = self.machine.dispatch(LanguageChanged(language))
        self.on_change()
        await self._refresh_files(language)
        await self.labels.prepare(language)
        await self._load(request)

    async def change_file(self, filename: str) -> None:
        if not filename or filename == self.state.filename:
            return
        await self._load(self.machine.dispatch(FileChanged(filename)))

    def select(self, endpoint: Endpoint) -> None:
        self.machine.dispatch(EndpointSelected(endpoint))
        self.on_change()

    async def _refresh_files(self, language: str) -> None:
        try:
            index = await self.io_bound(self.loader.get_spec_index)
        except Exception as e:
            # the current file list stays; the reload reports real failures
            logger.warning("Could not refresh spec list: %s", e)
            return
        self.machine.dispatch(FilesListed(language, index.get(language) or []))

    async def _load(self, request: LoadRequest | None) -> None:
        self.on_change()
        if request is None:
            return
        try:
            spec = await self.io_bound(self.loader.load_spec, request.language, request.filename)
        except Exception as e:
            self.machine.dispatch(SpecLoadFailed(request.request_id, str(e)))
        else:
            self.machine.dispatch(SpecLoaded(request.request_id, spec))
        self.on_change()


def label_catalog(settings: ViewerSettings) -> LabelCatalog:
    if not settings.api_key:
        logger.info("%s not set, interface labels stay in English", API_KEY_ENV)
        return LabelCatalog()
    logger.info("%s loaded from environment, interface labels follow the spec language", API_KEY_ENV)
    return LabelCatalog(LingoLabelTranslator(settings.api_key))


def build_app(settings: ViewerSettings) -> None:
    """Register static files and the page with NiceGUI."""
    from fastapi import Request
    from nicegui import app, ui

    from docslingo.viewer import components

    app.add_static_files(f"/{STATIC_ROOT}", str(settings.public_dir))
    labels = label_catalog(settings)

    @ui.page("/")
    async def index_page(request: Request):
        loader = SpecLoader(
            base_url=str(request.base_url),
            browser_language=request.headers.get("accept-language", ""),
        )
        controller = ViewerController(loader, labels=labels)

        @ui.refreshable
        def content():
            state = controller.state
            text = controller.text
            if state.status in (ViewStatus.IDLE, ViewStatus.LOADING):
                components.loading_view(text)
                return
            if state.status is ViewStatus.ERROR:
                components.error_view(state.error or text["unknown_error"], text)
                return

            with ui.column().classes("w-full h-screen gap-0 bg-gray-50"):
                components.header(state, text, controller.change_language, controller.change_file)
                with ui.row().classes("w-full flex-1 no-wrap gap-0 overflow-hidden"):
                    components.sidebar(state, text, controller.select)
                    with ui.column().classes("flex-1 overflow-y-auto"):
                        if state.selected:
                            components.endpoint_detail(state.spec, state.selected, text)
                        else:
                            components.overview(state.spec, text)

        controller.on_change = content.refresh
        content()
        ui.timer(0.1, controller.start, once=True)


def launch(settings: ViewerSettings) -> None:
    """Launch the viewer (blocks until the server stops)."""
    from nicegui import ui

    build_app(settings)
    logger.info("Serving %s at http://%s:%d", settings.public_dir, settings.host, settings.port)
    ui.run(
        host=settings.host,
        port=settings.port,
        title=APP_NAME,
        reload=False,
        show=False,
    )
