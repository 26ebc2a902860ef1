"""Bind the route table to FastAPI.

Each endpoint loads SessionState from the signed session, runs the handler,
maps store lookup failures to flash + redirect, converts the outcome into a
Starlette response, and writes the state back to the session.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import TYPE_CHECKING, Any

from fastapi import APIRouter, Request, Response
from fastapi.responses import PlainTextResponse, RedirectResponse

from listkeeper.lists import (
    ListNotFoundError,
    SessionState,
    TodoNotFoundError,
    list_class,
    sort_for_display,
    todos_remaining,
)
from listkeeper.server.routes.lists import LIST_NOT_FOUND, TODO_NOT_FOUND
from listkeeper.server.routing import (
    Empty,
    Outcome,
    Redirect,
    Render,
    RequestContext,
    Route,
    Text,
)

if TYPE_CHECKING:
    from fastapi.templating import Jinja2Templates

logger = logging.getLogger(__name__)

XHR_HEADER = "x-requested-with"
XHR_VALUE = "XMLHttpRequest"


def install_template_helpers(templates: Jinja2Templates) -> None:
    """Expose list display helpers to every template."""
    templates.env.globals.update(
        list_class=list_class,
        sort_for_display=sort_for_display,
        todos_remaining=todos_remaining,
    )


def run_handler(route: Route, ctx: RequestContext) -> Outcome:
    """Run a handler, turning missing lists/todos into a flash + redirect."""
    try:
        return route.handler(ctx)
    except TodoNotFoundError as e:
        logger.info(
            "todo_not_found", extra={"list.id": e.list_id, "todo.id": e.todo_id}
        )
        ctx.state.flash_error(TODO_NOT_FOUND)
        return Redirect(f"/lists/{e.list_id}")
    except ListNotFoundError as e:
        logger.info("list_not_found", extra={"list.id": e.list_id})
        ctx.state.flash_error(LIST_NOT_FOUND)
        return Redirect("/lists")


def _to_response(
    request: Request,
    outcome: Outcome,
    state: SessionState,
    templates: Jinja2Templates,
) -> Response:
    if isinstance(outcome, Redirect):
        return RedirectResponse(outcome.location, status_code=outcome.status_code)
    if isinstance(outcome, Text):
        return PlainTextResponse(outcome.body, status_code=outcome.status_code)
    if isinstance(outcome, Empty):
        return Response(status_code=outcome.status_code)
    if isinstance(outcome, Render):
        # Rendering a page consumes the flash messages.
        context: dict[str, Any] = {"flash": state.pop_flash(), **outcome.context}
        return templates.TemplateResponse(
            request,
            outcome.template,
            context,
            status_code=outcome.status_code,
        )
    raise TypeError(f"unsupported outcome: {outcome!r}")


def _make_endpoint(route: Route, templates: Jinja2Templates):
    async def endpoint(request: Request) -> Response:
        state = SessionState.from_dict(request.session)
        form: dict[str, str] = {}
        if request.method == "POST":
            form_data = await request.form()
            form = {
                key: value
                for key, value in form_data.items()
                if isinstance(value, str)
            }

        ctx = RequestContext(
            state=state,
            params=dict(request.path_params),
            form=form,
            is_xhr=request.headers.get(XHR_HEADER) == XHR_VALUE,
        )
        outcome = run_handler(route, ctx)
        response = _to_response(request, outcome, state, templates)
        state.save(request.session)
        logger.debug(
            "request_handled",
            extra={
                "http.route": route.name,
                "http.status_code": response.status_code,
                "session.lists": len(state.lists),
            },
        )
        return response

    endpoint.__name__ = route.name
    return endpoint


def build_router(routes: Iterable[Route], templates: Jinja2Templates) -> APIRouter:
    """Create an APIRouter with one endpoint per route table entry."""
    router = APIRouter()
    for route in routes:
        router.add_api_route(
            route.path,
            _make_endpoint(route, templates),
            methods=[route.method],
            name=route.name,
            include_in_schema=False,
        )
    return router
