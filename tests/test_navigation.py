import pytest

from lunch_tray.errors import UnknownRouteError
from lunch_tray.navigation import AppRoute, NavigationStack, route_from_name


def test_route_titles():
    assert [route.title for route in AppRoute] == [
        "Start Order",
        "Choose Entree",
        "Choose Side Dish",
        "Choose Accompaniment",
        "Order Checkout",
    ]


def test_route_from_name_resolves_known_routes():
    for route in AppRoute:
        assert route_from_name(route.name) is route


def test_route_from_name_fails_fast_on_unknown_name():
    with pytest.raises(UnknownRouteError) as excinfo:
        route_from_name("Dessert_menu")
    assert isinstance(excinfo.value, LookupError)
    assert "Dessert_menu" in str(excinfo.value)


def test_navigate_and_navigate_up():
    stack = NavigationStack()
    assert stack.current is AppRoute.START
    assert not stack.can_navigate_back

    stack.navigate(AppRoute.ENTREE_MENU)
    stack.navigate(AppRoute.SIDE_DISH_MENU)
    assert stack.previous is AppRoute.ENTREE_MENU
    assert stack.can_navigate_back

    assert stack.navigate_up()
    assert stack.current is AppRoute.ENTREE_MENU
    assert stack.navigate_up()
    assert not stack.navigate_up()
    assert stack.entries == (AppRoute.START,)


def test_pop_back_stack_truncates_to_route():
    stack = NavigationStack()
    for route in (AppRoute.ENTREE_MENU, AppRoute.SIDE_DISH_MENU, AppRoute.ACCOMPANIMENT_MENU, AppRoute.CHECKOUT):
        stack.navigate(route)

    assert stack.pop_back_stack(AppRoute.SIDE_DISH_MENU)
    assert stack.current is AppRoute.SIDE_DISH_MENU

    assert stack.pop_back_stack(AppRoute.ENTREE_MENU, inclusive=True)
    assert stack.entries == (AppRoute.START,)


def test_pop_back_stack_keeps_root_and_ignores_missing_routes():
    stack = NavigationStack()
    stack.navigate(AppRoute.ENTREE_MENU)

    assert not stack.pop_back_stack(AppRoute.CHECKOUT)
    assert stack.entries == (AppRoute.START, AppRoute.ENTREE_MENU)

    assert stack.pop_back_stack(AppRoute.START, inclusive=True)
    assert stack.entries == (AppRoute.START,)


def test_navigate_rejects_values_that_are_not_routes():
    stack = NavigationStack()
    with pytest.raises(UnknownRouteError):
        stack.navigate("Dessert_menu")
    with pytest.raises(UnknownRouteError):
        NavigationStack("Start")
    assert stack.entries == (AppRoute.START,)
