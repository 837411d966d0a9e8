from __future__ import annotations

import logging
import re

from fastapi import APIRouter, Body, Depends, HTTPException, Response

from user_service.deps import get_user_store
from user_service.models import UserIn, UserOut
from user_service.user_store import InMemoryUserStore, User

logger = logging.getLogger("user_service.users")

router = APIRouter(prefix="/users", tags=["users"])

_ID_RE = re.compile(r"[+-]?[0-9]+")

# Same range as a signed 64-bit id.
_ID_MIN = -(2**63)
_ID_MAX = 2**63 - 1

# Handlers are sync, so FastAPI runs them on its worker thread pool.


def _parse_user_id(raw: str) -> int:
    if not _ID_RE.fullmatch(raw or ""):
        raise HTTPException(status_code=400, detail="id is not a number")
    value = int(raw)
    if not _ID_MIN <= value <= _ID_MAX:
        raise HTTPException(status_code=400, detail="id is not a number")
    return value


def _not_found(user_id: int) -> HTTPException:
    logger.info("User not found", extra={"user_id": user_id})
    return HTTPException(status_code=404, detail="user not found")


def _to_out(user: User) -> UserOut:
    return UserOut.model_validate(user)


@router.get("", response_model=list[UserOut])
def list_users(store: InMemoryUserStore = Depends(get_user_store)) -> list[UserOut]:
    users = store.list()
    return [_to_out(u) for u in users]


@router.get("/{user_id}", response_model=UserOut)
def get_user(user_id: str, store: InMemoryUserStore = Depends(get_user_store)) -> UserOut:
    uid = _parse_user_id(user_id)
    user = store.get(uid)
    if user is None:
        raise _not_found(uid)
    return _to_out(user)


@router.post("", response_model=UserOut, status_code=201)
def create_user(
    payload: UserIn = Body(...),
    store: InMemoryUserStore = Depends(get_user_store),
) -> UserOut:
    user = store.create(name=payload.name, email=payload.email, age=payload.age)
    logger.info("Created user", extra={"user_id": user.id})
    return _to_out(user)


@router.put("/{user_id}", response_model=UserOut)
def update_user(
    user_id: str,
    payload: UserIn = Body(...),
    store: InMemoryUserStore = Depends(get_user_store),
) -> UserOut:
    uid = _parse_user_id(user_id)
    user = store.update(uid, name=payload.name, email=payload.email, age=payload.age)
    if user is None:
        raise _not_found(uid)
    logger.info("Replaced user", extra={"user_id": uid})
    return _to_out(user)


@router.delete("/{user_id}", status_code=204, response_class=Response)
def delete_user(user_id: str, store: InMemoryUserStore = Depends(get_user_store)) -> Response:
    uid = _parse_user_id(user_id)
    if not store.delete(uid):
        raise _not_found(uid)
    logger.info("Deleted user", extra={"user_id": uid})
    return Response(status_code=204)
