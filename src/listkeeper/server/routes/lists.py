"""List and todo routes.

Unknown list or todo ids raise from the store and are turned into a flash
message plus redirect by the dispatcher, except where a handler needs a
different answer for XHR callers.
"""

from __future__ import annotations

from listkeeper.lists import (
    ListNotFoundError,
    ListValidationError,
    TodoNotFoundError,
    sort_for_display,
    strip_name,
)
from listkeeper.server.routing import (
    Empty,
    Outcome,
    Redirect,
    Render,
    RequestContext,
    Route,
    Text,
)

LIST_NOT_FOUND = "The specified list was not found."
TODO_NOT_FOUND = "The specified todo was not found."


def _list_path(list_id: int) -> str:
    return f"/lists/{list_id}"


def _render_list(
    ctx: RequestContext, list_id: int | None, status_code: int = 200
) -> Render:
    lst = ctx.store.find_list(list_id)
    return Render(
        "list.html",
        {"list": lst, "todos": sort_for_display(lst.todos)},
        status_code=status_code,
    )


def home(ctx: RequestContext) -> Outcome:
    return Redirect("/lists")


def show_lists(ctx: RequestContext) -> Outcome:
    return Render("lists.html", {"lists": sort_for_display(ctx.state.lists)})


def new_list_form(ctx: RequestContext) -> Outcome:
    return Render("new_list.html", {"list_name": ""})


def create_list(ctx: RequestContext) -> Outcome:
    name = ctx.form.get("list_name", "")
    try:
        ctx.store.create_list(name)
    except ListValidationError as e:
        ctx.state.flash_error(str(e))
        return Render(
            "new_list.html", {"list_name": strip_name(name)}, status_code=422
        )

    ctx.state.flash_success("The list has been created.")
    return Redirect("/lists")


def show_list(ctx: RequestContext) -> Outcome:
    return _render_list(ctx, ctx.int_param("id"))


def edit_list_form(ctx: RequestContext) -> Outcome:
    lst = ctx.store.find_list(ctx.int_param("id"))
    return Render("edit_list.html", {"list": lst, "list_name": lst.name})


def update_list(ctx: RequestContext) -> Outcome:
    list_id = ctx.int_param("id")
    name = ctx.form.get("list_name", "")
    try:
        lst = ctx.store.rename_list(list_id, name)
    except ListValidationError as e:
        ctx.state.flash_error(str(e))
        lst = ctx.store.find_list(list_id)
        return Render(
            "edit_list.html",
            {"list": lst, "list_name": strip_name(name)},
            status_code=422,
        )

    ctx.state.flash_success("The list has been updated.")
    return Redirect(_list_path(lst.id))


def destroy_list(ctx: RequestContext) -> Outcome:
    try:
        ctx.store.delete_list(ctx.int_param("id"))
    except ListNotFoundError:
        ctx.state.flash_error(LIST_NOT_FOUND)
    else:
        if not ctx.is_xhr:
            ctx.state.flash_success("The list has been deleted.")

    if ctx.is_xhr:
        return Text("/lists")
    return Redirect("/lists")


def create_todo(ctx: RequestContext) -> Outcome:
    lst = ctx.store.find_list(ctx.int_param("list_id"))
    text = ctx.form.get("todo", "")
    try:
        ctx.store.add_todo(lst.id, text)
    except ListValidationError as e:
        ctx.state.flash_error(str(e))
        render = _render_list(ctx, lst.id, status_code=422)
        render.context["todo_text"] = strip_name(text)
        return render

    ctx.state.flash_success("The todo was added.")
    return Redirect(_list_path(lst.id))


def check_todo(ctx: RequestContext) -> Outcome:
    lst = ctx.store.find_list(ctx.int_param("list_id"))
    completed = ctx.form.get("completed") == "true"
    ctx.store.set_todo_completed(lst.id, ctx.int_param("todo_id"), completed)
    ctx.state.flash_success("The todo has been updated.")
    return Redirect(_list_path(lst.id))


def check_all_todos(ctx: RequestContext) -> Outcome:
    lst = ctx.store.set_all_completed(ctx.int_param("list_id"))
    ctx.state.flash_success("All todos have been completed.")
    return Redirect(_list_path(lst.id))


def destroy_todo(ctx: RequestContext) -> Outcome:
    try:
        todo_list = ctx.store.find_list(ctx.int_param("list_id"))
        ctx.store.delete_todo(todo_list.id, ctx.int_param("todo_id"))
    except (ListNotFoundError, TodoNotFoundError):
        if ctx.is_xhr:
            return Empty(status_code=404)
        raise

    if ctx.is_xhr:
        return Empty()
    ctx.state.flash_success("The todo has been deleted.")
    return Redirect(_list_path(todo_list.id))


ROUTES: list[Route] = [
    Route("GET", "/", home, "home"),
    Route("GET", "/lists", show_lists, "show_lists"),
    Route("GET", "/lists/new", new_list_form, "new_list_form"),
    Route("POST", "/lists/new", create_list, "create_list"),
    Route("GET", "/lists/{id}", show_list, "show_list"),
    Route("GET", "/lists/{id}/edit", edit_list_form, "edit_list_form"),
    Route("POST", "/lists/{id}/edit", update_list, "update_list"),
    Route("POST", "/lists/{id}/destroy", destroy_list, "destroy_list"),
    Route("POST", "/lists/{list_id}/todos", create_todo, "create_todo"),
    Route(
        "POST",
        "/lists/{list_id}/todos/{todo_id}/check",
        check_todo,
        "check_todo",
    ),
    Route("POST", "/lists/{list_id}/check_all", check_all_todos, "check_all_todos"),
    Route(
        "POST",
        "/lists/{list_id}/todos/{todo_id}/destroy",
        destroy_todo,
        "destroy_todo",
    ),
]
