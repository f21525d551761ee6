from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, Form, HTTPException, Query
from fastapi.responses import PlainTextResponse
from sqlalchemy.exc import SQLAlchemyError

from userlookup.api.responses import user_response, users_response
from userlookup.models.schemas import SMALLINT_MAX, SMALLINT_MIN
from userlookup.services.filtering import UserCriteria, parse_filters, parse_name_grade, parse_user_id
from userlookup.services.user_store import UserStore, get_user_store

router = APIRouter(tags=["users"])

logger = logging.getLogger(__name__)


@router.get("/user/{user_id}", response_class=PlainTextResponse)
def get_user(user_id: str, store: UserStore = Depends(get_user_store)) -> PlainTextResponse:
    try:
        parsed_id = parse_user_id(user_id)
    except ValueError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc

    try:
        user = store.get(parsed_id)
    except SQLAlchemyError as exc:
        logger.exception("user.lookup_failed", extra={"user_id": str(parsed_id)})
        raise HTTPException(status_code=500, detail="User lookup failed") from exc

    if user is None:
        raise HTTPException(status_code=404, detail="User not found")
    return user_response(user)


@router.get("/users/{name_grade}", response_class=PlainTextResponse)
def find_users(
    name_grade: str,
    age: str | None = Query(default=None),
    active: str | None = Query(default=None),
    store: UserStore = Depends(get_user_store),
) -> PlainTextResponse:
    try:
        name, grade = parse_name_grade(name_grade)
        age_filter, active_filter = parse_filters(age, active)
    except ValueError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc

    criteria = UserCriteria(name=name, grade=grade, age=age_filter, active=active_filter)
    try:
        users = store.find(criteria)
    except SQLAlchemyError as exc:
        logger.exception("users.query_failed", extra={"user_name": name, "grade": grade})
        raise HTTPException(status_code=500, detail="User query failed") from exc

    if not users:
        raise HTTPException(status_code=404, detail="No matching users")
    return users_response(users)


@router.post("/post", response_class=PlainTextResponse)
def post_filters(
    age: int = Form(..., ge=SMALLINT_MIN, le=SMALLINT_MAX),
    active: bool = Form(...),
) -> str:
    logger.info("post.received", extra={"age": age, "active": active})
    return "POST Request"
