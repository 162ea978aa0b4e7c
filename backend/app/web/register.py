"""
Server-rendered sign-up form.

The password/confirmation check happens before any account work; a mismatch
re-renders the form with a visible alert instead of submitting.
"""
from pathlib import Path

from fastapi import APIRouter, Depends, Form, Request, status
from fastapi.templating import Jinja2Templates
from sqlalchemy.orm import Session

from backend.app.api.v1.users import REGISTER_RULES
from backend.app.core.dependencies import get_db
from backend.app.core.logging_config import get_logger
from backend.app.core.validation import collect_errors
from backend.app.services.auth_service import AuthService

logger = get_logger("web.register")
router = APIRouter()

templates = Jinja2Templates(directory=str(Path(__file__).resolve().parent.parent / "templates"))

PASSWORD_MISMATCH_MSG = "Passwords do not match"


def _render_form(request: Request, name: str = "", email: str = "", alerts: list[str] | None = None, status_code: int = 200):
    return templates.TemplateResponse(
        request,
        "register.html",
        {"name": name, "email": email, "alerts": alerts or []},
        status_code=status_code,
    )


@router.get("/register")
def register_form(request: Request):
    return _render_form(request)


@router.post("/register")
def submit_register_form(
    request: Request,
    name: str = Form(""),
    email: str = Form(""),
    password: str = Form(""),
    password_confirmation: str = Form(""),
    db: Session = Depends(get_db),
):
    if password != password_confirmation:
        logger.info("Sign-up rejected: password confirmation mismatch")
        return _render_form(request, name, email, [PASSWORD_MISMATCH_MSG], status.HTTP_400_BAD_REQUEST)

    errors = collect_errors({"name": name, "email": email, "password": password}, REGISTER_RULES)
    if errors:
        return _render_form(request, name, email, [e["msg"] for e in errors], status.HTTP_400_BAD_REQUEST)

    result = AuthService.register_user(db, name, email, password)
    if not result["success"]:
        return _render_form(request, name, email, [result["message"]], status.HTTP_400_BAD_REQUEST)

    logger.info("User registered via form user_id=%s", result["user"].id)
    return templates.TemplateResponse(
        request,
        "register_success.html",
        {"name": result["user"].name, "token": result["token"]},
        status_code=status.HTTP_201_CREATED,
    )
