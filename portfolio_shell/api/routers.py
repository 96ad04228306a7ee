"""
FastAPI router definitions for the API endpoints.
"""

from fastapi import APIRouter, HTTPException, Query, Response

from portfolio_shell.adapters.desktop.queued_window_manager import QueuedWindowManager
from portfolio_shell.api.dependencies import (
    get_build_tree_uc,
    get_email_store,
    get_list_directory_uc,
    get_navigate_uc,
    get_search_nodes_uc,
    get_session_store,
    get_submit_command_uc,
    get_window_manager,
)
from portfolio_shell.api.schemas import (
    CommandRequest,
    CommandResponse,
    CwdResponse,
    DirectoryListingResponse,
    EffectInfo,
    EffectsResponse,
    EmailRequest,
    EmailsResponse,
    ErrorResponse,
    LogResponse,
    NavigateRequest,
    NodeInfo,
    OutputLineInfo,
    SearchResponse,
    SessionResponse,
    TreeResponse,
)
from portfolio_shell.entities.Command import EffectRequest
from portfolio_shell.exceptions import BaseAppError, SessionNotFoundError
from portfolio_shell.utils.paths import join

router = APIRouter()

NOT_FOUND = {404: {"model": ErrorResponse}}
BAD_REQUEST = {400: {"model": ErrorResponse}}


def _drain_effects(session_id: str) -> list[EffectRequest]:
    window_manager = get_window_manager()
    if isinstance(window_manager, QueuedWindowManager):
        return window_manager.drain(session_id)
    return []


def _get_session(session_id: str):
    try:
        return get_session_store().get(session_id)
    except SessionNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))


@router.get("/files", response_model=DirectoryListingResponse, responses=BAD_REQUEST)
def list_directory(
    path: str = Query("/", description="Folder path to list"),
):
    """
    List the children of a folder.

    Args:
        path: Absolute folder path

    Returns:
        DirectoryListingResponse: Children in display order

    Raises:
        HTTPException: If the path is missing or not a folder
    """
    try:
        target, children = get_list_directory_uc().execute(path)
        return DirectoryListingResponse(
            path=target,
            entries=[NodeInfo.from_entity(c, join(target, c.name)) for c in children],
        )
    except BaseAppError as e:
        raise HTTPException(status_code=400, detail=str(e))


@router.get("/files/tree", response_model=TreeResponse, responses=BAD_REQUEST)
def build_tree(
    path: str = Query("/", description="Root of the subtree to render"),
):
    """Render the subtree rooted at a path, one line per node."""
    try:
        target, lines = get_build_tree_uc().execute(path)
        return TreeResponse(path=target, lines=lines)
    except BaseAppError as e:
        raise HTTPException(status_code=400, detail=str(e))


@router.get("/files/search", response_model=SearchResponse, responses=BAD_REQUEST)
def search_nodes(
    term: str = Query(..., description="Case-insensitive name substring"),
):
    """
    Search the whole tree by name.

    Args:
        term: Substring to look for

    Returns:
        SearchResponse: Matches in traversal order, each with its full path
    """
    try:
        hits = get_search_nodes_uc().execute(term)
        return SearchResponse(
            results=[NodeInfo.from_entity(hit.node, hit.path) for hit in hits]
        )
    except BaseAppError as e:
        raise HTTPException(status_code=400, detail=str(e))


@router.post("/sessions", response_model=SessionResponse, status_code=201)
def create_session():
    """Open a new terminal session with its cursor at the root."""
    session = get_session_store().create()
    return SessionResponse(
        session_id=session.id,
        cwd=session.cwd,
        lines=[OutputLineInfo.from_entity(line) for line in session.log],
    )


@router.delete("/sessions/{session_id}", status_code=204, responses=NOT_FOUND)
def delete_session(session_id: str):
    try:
        get_session_store().delete(session_id)
    except SessionNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    window_manager = get_window_manager()
    if isinstance(window_manager, QueuedWindowManager):
        window_manager.discard(session_id)
    return Response(status_code=204)


@router.get("/sessions/{session_id}/cwd", response_model=CwdResponse, responses=NOT_FOUND)
def current_path(session_id: str):
    return CwdResponse(cwd=_get_session(session_id).cwd)


@router.post(
    "/sessions/{session_id}/navigate",
    response_model=CwdResponse,
    responses={**NOT_FOUND, **BAD_REQUEST},
)
def navigate_to_path(session_id: str, body: NavigateRequest):
    """
    Move a session cursor from outside the shell, e.g. from the file manager.

    Raises:
        HTTPException: 404 for an unknown session, 400 if the path is not a folder
    """
    session = _get_session(session_id)
    try:
        with session.lock:
            cwd = get_navigate_uc().execute(session, body.path)
        return CwdResponse(cwd=cwd)
    except BaseAppError as e:
        raise HTTPException(status_code=400, detail=str(e))


@router.post(
    "/sessions/{session_id}/commands",
    response_model=CommandResponse,
    responses=NOT_FOUND,
)
def submit_command(session_id: str, body: CommandRequest):
    """
    Run one command line in a session.

    Returns:
        CommandResponse: The appended lines, the new cursor and the window
        manager requests raised by the command
    """
    session = _get_session(session_id)
    lines = get_submit_command_uc().execute(session, body.command)
    return CommandResponse(
        cwd=session.cwd,
        lines=[OutputLineInfo.from_entity(line) for line in lines],
        effects=[EffectInfo.from_entity(e) for e in _drain_effects(session_id)],
    )


@router.get("/sessions/{session_id}/log", response_model=LogResponse, responses=NOT_FOUND)
def session_log(session_id: str):
    session = _get_session(session_id)
    return LogResponse(lines=[OutputLineInfo.from_entity(line) for line in session.log])


@router.get(
    "/sessions/{session_id}/effects", response_model=EffectsResponse, responses=NOT_FOUND
)
def pending_effects(session_id: str):
    """Drain the window manager requests not yet picked up by the desktop."""
    _get_session(session_id)
    return EffectsResponse(
        effects=[EffectInfo.from_entity(e) for e in _drain_effects(session_id)]
    )


@router.post("/emails", response_model=EmailsResponse, responses=BAD_REQUEST)
def collect_email(body: EmailRequest):
    """Record an address submitted through the desktop contact form."""
    store = get_email_store()
    try:
        store.add(body.email)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return EmailsResponse(emails=store.collected())


@router.get("/emails", response_model=EmailsResponse)
def list_emails():
    return EmailsResponse(emails=get_email_store().collected())
