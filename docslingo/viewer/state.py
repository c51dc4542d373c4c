"""
Viewer state machine.

The browser page moves through four states:

    IDLE --Initialized--> LOADING --SpecLoaded-----> READY
     |                       |    --SpecLoadFailed-> ERROR
     +--InitFailed---------------------------------> ERROR
    READY/ERROR --LanguageChanged/FileChanged--> LOADING

Each entry into LOADING hands back a ``LoadRequest`` with a fresh
``request_id``. Results are matched against the latest id, so a slow
response for a language the user already switched away from is dropped
instead of overwriting the newer spec.

Also home to the small helpers that read a dereferenced OpenAPI document
(``group_by_tag``, ``first_endpoint``).
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, Union

HTTP_METHODS = ("get", "put", "post", "delete", "options", "head", "patch", "trace")
DEFAULT_TAG = "Default"


class ViewStatus(str, Enum):
    IDLE = "idle"
    LOADING = "loading"
    READY = "ready"
    ERROR = "error"


@dataclass(frozen=True)
class Endpoint:
    path: str
    method: str


@dataclass
class EndpointEntry:
    """Sidebar entry: an endpoint plus its operation object."""
    path: str
    method: str
    operation: dict

    @property
    def endpoint(self) -> Endpoint:
        return Endpoint(self.path, self.method)


# Events

@dataclass
class Initialized:
    language: str
    filename: Optional[str]
    languages: list[str] = field(default_factory=list)
    files: list[str] = field(default_factory=list)


@dataclass
class LanguageChanged:
    language: str


@dataclass
class FileChanged:
    filename: str


@dataclass
class FilesListed:
    language: str
    files: list[str]


@dataclass
class SpecLoaded:
    request_id: int
    spec: dict


@dataclass
class SpecLoadFailed:
    request_id: int
    message: str


@dataclass
class EndpointSelected:
    endpoint: Endpoint


@dataclass
class InitFailed:
    """The page could not read the project (index, languages) at all."""
    message: str


Event = Union[
    Initialized, LanguageChanged, FileChanged, FilesListed,
    SpecLoaded, SpecLoadFailed, EndpointSelected, InitFailed,
]


@dataclass(frozen=True)
class LoadRequest:
    """A spec fetch the caller should perform and report back."""
    request_id: int
    language: str
    filename: str


@dataclass
class ViewerState:
    status: ViewStatus = ViewStatus.IDLE
    language: Optional[str] = None
    filename: Optional[str] = None
    languages: list[str] = field(default_factory=list)
    files: list[str] = field(default_factory=list)
    spec: Optional[dict] = None
    selected: Optional[Endpoint] = None
    error: Optional[str] = None
    request_id: int = 0


class ViewerStateMachine:
    """Apply events to a ViewerState.

    Usage:
        machine = ViewerStateMachine()
        request = machine.dispatch(Initialized("en", "api.yaml", ["en"], ["api.yaml"]))
        spec = loader.load_spec(request.language, request.filename)
        machine.dispatch(SpecLoaded(request.request_id, spec))
    """

    def __init__(self, state: ViewerState | None = None):
        self.state = state or ViewerState()

    def dispatch(self, event: Event) -> Optional[LoadRequest]:
        """Apply an event; returns a LoadRequest when a fetch must start."""
        state = self.state

        if isinstance(event, Initialized):
            state.language = event.language
            state.filename = event.filename
            state.languages = list(event.languages)
            state.files = list(event.files)
            return self._begin_load()

        if isinstance(event, LanguageChanged):
            if state.status is ViewStatus.IDLE:
                return None
            state.language = event.language
            return self._begin_load()

        if isinstance(event, FileChanged):
            if state.status is ViewStatus.IDLE:
                return None
            state.filename = event.filename
            return self._begin_load()

        if isinstance(event, FilesListed):
            if event.language == state.language:
                state.files = list(event.files)
            return None

        if isinstance(event, SpecLoaded):
            if event.request_id != state.request_id:
                return None
            state.status = ViewStatus.READY
            state.spec = event.spec
            state.selected = first_endpoint(event.spec)
            state.error = None
            return None

        if isinstance(event, SpecLoadFailed):
            if event.request_id != state.request_id:
                return None
            state.status = ViewStatus.ERROR
            state.error = event.message
            return None

        if isinstance(event, EndpointSelected):
            if state.status is ViewStatus.READY:
                state.selected = event.endpoint
            return None

        if isinstance(event, InitFailed):
            state.request_id += 1
            state.status = ViewStatus.ERROR
            state.error = event.message
            return None

        raise TypeError(f"Unknown event: {event!r}")

    def _begin_load(self) -> Optional[LoadRequest]:
        state = self.state
        state.request_id += 1
        if not state.filename:
            state.status = ViewStatus.ERROR
            state.error = f"No spec files found for language '{state.language}'"
            return None

        state.status = ViewStatus.LOADING
        state.error = None
        return LoadRequest(state.request_id, state.language, state.filename)


def iter_operations(spec: dict | None):
    """Yield (path, method, operation) for every operation, in document order."""
    for path, path_item in ((spec or {}).get("paths") or {}).items():
        if not isinstance(path_item, dict):
            continue
        for method, operation in path_item.items():
            if method.lower() in HTTP_METHODS and isinstance(operation, dict):
                yield path, method, operation


def first_endpoint(spec: dict | None) -> Optional[Endpoint]:
    for path, method, _ in iter_operations(spec):
        return Endpoint(path, method)
    return None


def group_by_tag(spec: dict | None) -> dict[str, list[EndpointEntry]]:
    """Group operations by tag; untagged operations go under "Default".

    An operation with several tags appears once per tag.
    """
    groups: dict[str, list[EndpointEntry]] = {}
    for path, method, operation in iter_operations(spec):
        for tag in operation.get("tags") or [DEFAULT_TAG]:
            groups.setdefault(tag, []).append(EndpointEntry(path, method, operation))
    return groups


def get_operation(spec: dict | None, endpoint: Endpoint | None) -> Optional[dict]:
    if not spec or endpoint is None:
        return None
    return ((spec.get("paths") or {}).get(endpoint.path) or {}).get(endpoint.method)
