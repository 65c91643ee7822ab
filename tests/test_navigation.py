# File: tests/test_navigation.py

from chronoboard.models.user import User
from chronoboard.views.navigation import Crumb, build_breadcrumbs, build_nav_items
from chronoboard.views import theme


def test_guest_menu_ends_with_login():
    items = build_nav_items("/site/about", None)
    assert [i.label for i in items] == ["Home", "About", "Mood Board", "Contact", "Login"]
    assert [i.label for i in items if i.active] == ["About"]
    assert items[-1].kind == "link"


def test_home_is_active_on_root():
    items = build_nav_items("/", None)
    assert items[0].active


def test_signed_in_menu_ends_with_logout():
    user = User(username="alice", email="alice@example.com", role="user", password_hash="x")
    items = build_nav_items("/", user)
    assert items[-1].label == "Logout (alice)"
    assert items[-1].kind == "logout"
    assert items[-1].url == "/site/logout"


def test_breadcrumbs_start_at_home():
    crumbs = build_breadcrumbs([("Users", "/users"), "Edit"])
    assert crumbs == [Crumb("Home", "/"), Crumb("Users", "/users"), Crumb("Edit")]


def test_no_breadcrumbs_without_links():
    assert build_breadcrumbs([]) == []


def test_tailwind_config_carries_palette():
    config = theme.tailwind_config()["theme"]["extend"]
    assert config["colors"]["primary-dark"] == "#272727"
    assert config["fontFamily"]["display"] == ["Playfair Display", "serif"]
    assert config["borderRadius"]["card"] == "5px"


def test_brand_swatches():
    swatches = theme.brand_swatches()
    assert swatches[1] == {
        "title": "Primary Blue",
        "hex": "#90A9B7",
        "swatch_class": "bg-primary-blue",
        "code": "bg-primary-blue",
    }
