# File: chronoboard/views/templating.py

"""
Jinja2 environment for the HTML pages.

Pages extend ``layouts/main.html``; ``render_page`` supplies everything the
layout needs (navbar, breadcrumbs, pending alerts, CSRF token) so controller
actions only pass their own variables.
"""

from datetime import datetime
from pathlib import Path
from typing import Any, Iterable, Optional

from fastapi.templating import Jinja2Templates
from markupsafe import Markup
from starlette.requests import Request

from chronoboard.core.config import settings
from chronoboard.core.csrf import CSRF_PARAM, csrf_token
from chronoboard.models.user import User
from chronoboard.views import theme
from chronoboard.views.alerts import pop_flashes
from chronoboard.views.navigation import BreadcrumbLink, build_breadcrumbs, build_nav_items
from chronoboard.views.partials import get_partial

TEMPLATES_DIR = Path(__file__).parent / "templates"

templates = Jinja2Templates(directory=str(TEMPLATES_DIR))


def render_partial(name: str, **params: Any) -> Markup:
    """Render a registered partial with defaults filled in."""
    partial = get_partial(name)
    template = templates.env.get_template(partial.template)
    return Markup(template.render(partial.context(params)))


templates.env.globals.update(
    render_partial=render_partial,
    settings=settings,
    theme=theme,
    csrf_param=CSRF_PARAM,
    now=datetime.now,
)


def render_page(
    request: Request,
    name: str,
    *,
    user: Optional[User],
    title: str,
    breadcrumbs: Iterable[BreadcrumbLink] = (),
    status_code: int = 200,
    **context: Any,
):
    context.update(
        title=title,
        user=user,
        nav_items=build_nav_items(request.url.path, user),
        breadcrumbs=build_breadcrumbs(breadcrumbs),
        alerts=pop_flashes(request),
        csrf_token=csrf_token(request),
    )
    return templates.TemplateResponse(request, name, context, status_code=status_code)
