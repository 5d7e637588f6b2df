"""
User Pages

HTML endpoints for listing, adding, deleting and editing users. Each handler
parses its form, calls exactly one repository operation and maps the outcome
to a redirect or an error response.
"""
import logging
from typing import Type

from fastapi import APIRouter, Depends, HTTPException, Request
from fastapi.responses import HTMLResponse, RedirectResponse

from userdesk.config import Settings
from userdesk.modules.users.api.dependencies import get_settings, get_user_repository
from userdesk.modules.users.api.forms import (
    AddUserForm,
    DeleteUserForm,
    EditUserForm,
    FormT,
    MalformedInput,
    parse_form,
)
from userdesk.modules.users.domain.outcomes import NotFound
from userdesk.modules.users.presentation.html_renderer import (
    render_user_detail_page,
    render_user_list_page,
)
from userdesk.modules.users.repositories.user_repository import UserRepository

logger = logging.getLogger("userdesk.users.api")

router = APIRouter(tags=["users"])


async def _read_form(request: Request, model: Type[FormT]) -> FormT:
    form = await request.form()
    try:
        return parse_form(model, form)
    except MalformedInput as e:
        logger.warning(f"[user_pages] rejected {request.url.path}: {e}")
        raise HTTPException(status_code=400, detail=str(e))


def _not_found(outcome: NotFound) -> HTTPException:
    logger.warning(f"[user_pages] {outcome.message}")
    return HTTPException(status_code=404, detail=outcome.message)


def _back_to_list() -> RedirectResponse:
    return RedirectResponse(url="/", status_code=303)


@router.get("/", response_class=HTMLResponse)
async def list_users(
    repository: UserRepository = Depends(get_user_repository),
    settings: Settings = Depends(get_settings),
):
    """Page listing every user, with the add/delete/edit forms."""
    users = repository.list_all()
    logger.debug(f"[user_pages.list_users] count={len(users)}")
    return HTMLResponse(render_user_list_page(users, settings.page_title))


@router.get("/users/{user_id}", response_class=HTMLResponse)
async def show_user(
    user_id: int,
    repository: UserRepository = Depends(get_user_repository),
):
    """Detail page for a single user."""
    logger.debug(f"[user_pages.show_user] user_id={user_id}")
    outcome = repository.get_by_id(user_id)
    if isinstance(outcome, NotFound):
        raise _not_found(outcome)
    return HTMLResponse(render_user_detail_page(outcome.value))


@router.post("/add")
async def add_user(
    request: Request,
    repository: UserRepository = Depends(get_user_repository),
):
    form = await _read_form(request, AddUserForm)
    user_id = repository.add(form.to_user())
    logger.info(f"[user_pages.add_user] added user_id={user_id}")
    return _back_to_list()


@router.post("/delete")
async def delete_user(
    request: Request,
    repository: UserRepository = Depends(get_user_repository),
):
    form = await _read_form(request, DeleteUserForm)
    outcome = repository.remove(form.id)
    if isinstance(outcome, NotFound):
        raise _not_found(outcome)
    logger.info(f"[user_pages.delete_user] removed user_id={form.id}")
    return _back_to_list()


@router.post("/edit")
async def edit_user(
    request: Request,
    repository: UserRepository = Depends(get_user_repository),
):
    form = await _read_form(request, EditUserForm)
    outcome = repository.edit(form.id, form.to_fields())
    if isinstance(outcome, NotFound):
        raise _not_found(outcome)
    logger.info(f"[user_pages.edit_user] edited user_id={form.id}")
    return _back_to_list()
