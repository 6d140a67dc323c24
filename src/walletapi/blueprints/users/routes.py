"""User registration and lookup endpoints."""

from __future__ import annotations

from flask import jsonify, request

from ...extensions import get_context
from ...logging_config import get_logger
from ...services import users as user_service
from . import bp
from .forms import CreateUserRequest

logger = get_logger(__name__)


@bp.post("")
def create_user():
    """Register a user and echo back the stored name."""

    payload = CreateUserRequest.model_validate(request.get_json(silent=True) or {})
    user = user_service.register_user(
        get_context().user_repo,
        email=payload.email,
        name=payload.name,
        password=payload.password,
    )
    return jsonify({"message": "User created successfully", "name": user.name}), 201


@bp.get("/<path:email>")
def get_user(email: str):
    """Return the public projection of the user registered under ``email``."""

    logger.debug("Looking up user", extra={"email": email})
    user = user_service.get_user(get_context().user_repo, email)
    return jsonify({"message": "User retrieved successfully", "user": user.projection()})


@bp.get("")
def list_users():
    """Return every registered user."""

    users = user_service.list_users(get_context().user_repo)
    return jsonify(
        {
            "message": "Users retrieved successfully",
            "users": [user.projection() for user in users],
        }
    )
