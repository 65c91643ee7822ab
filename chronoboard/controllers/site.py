# File: chronoboard/controllers/site.py

"""
Site controller: the server-rendered pages behind the navbar.

    /, /site/index      home
    /site/about         about
    /site/mood-board    design system reference
    /site/contact       contact form (mails the site admin)
    /site/login         login form, sets the auth cookie
    /site/logout        POST only, clears the auth cookie
"""

from typing import Optional

import aiosmtplib
from fastapi import APIRouter, Depends, Request, status
from fastapi.responses import RedirectResponse
from pydantic import ValidationError as PydanticValidationError
from sqlalchemy.orm import Session

from chronoboard.api.deps import get_db, get_optional_user
from chronoboard.core.config import settings
from chronoboard.core.csrf import CSRF_PARAM, validate_csrf
from chronoboard.core.logging_config import get_logger
from chronoboard.models.user import User
from chronoboard.schemas.contact import ContactForm
from chronoboard.services.auth_service import authenticate_user, issue_token
from chronoboard.services.mail_service import Mailer, send_contact_message
from chronoboard.views import theme
from chronoboard.views.alerts import ALERT_TITLES, flash
from chronoboard.views.templating import render_page

router = APIRouter(tags=["site"])
logger = get_logger(__name__)

CONTACT_FIELDS = (
    ("name", "Name"),
    ("email", "Email"),
    ("subject", "Subject"),
    ("body", "Body"),
)

ALERT_EXAMPLES = {
    "success": "Your changes have been saved successfully.",
    "info": "Please review the updated terms and conditions.",
    "warning": "You are about to delete important data. This action cannot be undone.",
    "error": "An error occurred while processing your request. Please try again.",
}


def get_mailer() -> Mailer:
    return Mailer()


def _redirect(url: str) -> RedirectResponse:
    return RedirectResponse(url, status_code=status.HTTP_303_SEE_OTHER)


@router.get("/")
@router.get("/site/index")
def index(request: Request, user: Optional[User] = Depends(get_optional_user)):
    return render_page(request, "site/index.html", user=user, title=settings.app_name)


@router.get("/site/about")
def about(request: Request, user: Optional[User] = Depends(get_optional_user)):
    return render_page(
        request,
        "site/about.html",
        user=user,
        title="About",
        breadcrumbs=["About"],
        version=settings.VERSION,
    )


def mood_board_context() -> dict:
    alert_buttons = [
        {
            "label": kind.capitalize(),
            "icon": theme.ALERT_ICONS[kind],
            "btn_class": (
                f"bg-soft-{kind} {theme.ALERT_HOVER[kind]} px-6 py-3 border-2 border-soft-{kind}-text "
                f"rounded-card font-body font-semibold text-soft-{kind}-text transition-colors duration-200"
            ),
        }
        for kind in theme.ALERT_KINDS
    ]
    alert_examples = [
        {"kind": kind, "title": ALERT_TITLES[kind], "body": ALERT_EXAMPLES[kind]}
        for kind in theme.ALERT_KINDS
    ]
    brand = theme.BRAND_SWATCHES
    return {
        "swatches": theme.brand_swatches(),
        "alert_buttons": alert_buttons,
        "alert_examples": alert_examples,
        "class_examples": [
            ("Text Color", [f"text-{name}" for name in brand]),
            ("Background Color", [f"bg-{name}" for name in brand]),
            ("Border Color", [f"border-{name}" for name in brand[:2]]),
        ],
        "display_font": theme.FONT_FAMILIES["display"][0],
        "body_font": theme.FONT_FAMILIES["body"][0],
        "card_radius": theme.BORDER_RADIUS["card"],
    }


@router.get("/site/mood-board")
def mood_board(request: Request, user: Optional[User] = Depends(get_optional_user)):
    return render_page(
        request,
        "site/mood-board.html",
        user=user,
        title=f"{settings.app_name} Mood Board",
        breadcrumbs=["Mood Board"],
        **mood_board_context(),
    )


def _render_contact(request: Request, user: Optional[User], form: dict, errors=(), status_code: int = 200):
    return render_page(
        request,
        "site/contact.html",
        user=user,
        title="Contact",
        breadcrumbs=["Contact"],
        status_code=status_code,
        fields=CONTACT_FIELDS,
        form=form,
        errors=list(errors),
    )


@router.get("/site/contact")
def contact_form(request: Request, user: Optional[User] = Depends(get_optional_user)):
    form = {}
    if user is not None:
        form = {"name": user.full_name, "email": user.email}
    return _render_contact(request, user, form)


@router.post("/site/contact")
async def contact_submit(
    request: Request,
    user: Optional[User] = Depends(get_optional_user),
    mailer: Mailer = Depends(get_mailer),
):
    data = await request.form()
    validate_csrf(request, data.get(CSRF_PARAM))
    form = {name: str(data.get(name, "")).strip() for name, _ in CONTACT_FIELDS}

    try:
        contact = ContactForm(**form)
    except PydanticValidationError as exc:
        errors = [f"{str(err['loc'][0]).capitalize()}: {err['msg']}." for err in exc.errors()]
        return _render_contact(request, user, form, errors, status_code=status.HTTP_400_BAD_REQUEST)

    try:
        await send_contact_message(
            mailer,
            name=contact.name,
            email=contact.email,
            subject=contact.subject,
            body=contact.body,
        )
    except (aiosmtplib.SMTPException, OSError):
        logger.exception("Contact mail from %s could not be sent", contact.email)
        flash(request, "error", "There was an error sending your message.")
        return _render_contact(request, user, form, status_code=status.HTTP_503_SERVICE_UNAVAILABLE)

    flash(request, "success", "Thank you for contacting us. We will respond to you as soon as possible.")
    return _redirect("/site/contact")


def _render_login(request: Request, *, username: str = "", remember_me: bool = False,
                  error: Optional[str] = None, status_code: int = 200):
    return render_page(
        request,
        "site/login.html",
        user=None,
        title="Login",
        breadcrumbs=["Login"],
        status_code=status_code,
        username=username,
        remember_me=remember_me,
        error=error,
    )


@router.get("/site/login")
def login_form(request: Request, user: Optional[User] = Depends(get_optional_user)):
    if user is not None:
        return _redirect("/")
    return _render_login(request)


@router.post("/site/login")
async def login_submit(request: Request, db: Session = Depends(get_db)):
    data = await request.form()
    validate_csrf(request, data.get(CSRF_PARAM))

    username = str(data.get("username", "")).strip()
    password = str(data.get("password", ""))
    remember_me = data.get("remember_me") in ("1", "on", "true")

    if not username or not password:
        return _render_login(
            request,
            username=username,
            remember_me=remember_me,
            error="Username and password cannot be blank.",
            status_code=status.HTTP_400_BAD_REQUEST,
        )

    user = authenticate_user(db, login=username, password=password)
    if user is None:
        return _render_login(
            request,
            username=username,
            remember_me=remember_me,
            error="Incorrect username or password.",
            status_code=status.HTTP_400_BAD_REQUEST,
        )

    token, lifetime = issue_token(user, remember=remember_me)
    response = _redirect("/")
    response.set_cookie(
        settings.auth_cookie_name,
        token,
        # without "remember me" the cookie ends with the browser session
        max_age=lifetime if remember_me else None,
        httponly=True,
        samesite="lax",
        secure=settings.is_production,
    )
    return response


@router.post("/site/logout")
async def logout(request: Request, user: Optional[User] = Depends(get_optional_user)):
    data = await request.form()
    validate_csrf(request, data.get(CSRF_PARAM))

    if user is not None:
        logger.info("User %s logged out", user.username)
    response = _redirect("/")
    response.delete_cookie(settings.auth_cookie_name, httponly=True, samesite="lax")
    return response
