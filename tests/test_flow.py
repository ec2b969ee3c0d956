import pytest

from lunch_tray.data import ACCOMPANIMENT_MENU_ITEMS, ENTREE_MENU_ITEMS, SIDE_DISH_MENU_ITEMS
from lunch_tray.errors import InvalidTransitionError
from lunch_tray.models import OrderState
from lunch_tray.navigation import AppRoute


def _walk_to(flow, target):
    picks = {
        AppRoute.ENTREE_MENU: ENTREE_MENU_ITEMS[0],
        AppRoute.SIDE_DISH_MENU: SIDE_DISH_MENU_ITEMS[0],
        AppRoute.ACCOMPANIMENT_MENU: ACCOMPANIMENT_MENU_ITEMS[0],
    }
    flow.start_order()
    while flow.current is not target:
        flow.select(picks[flow.current])
        flow.next()


def test_happy_path_reaches_checkout_with_all_selections(flow):
    _walk_to(flow, AppRoute.CHECKOUT)

    assert flow.stack.entries == (
        AppRoute.START,
        AppRoute.ENTREE_MENU,
        AppRoute.SIDE_DISH_MENU,
        AppRoute.ACCOMPANIMENT_MENU,
        AppRoute.CHECKOUT,
    )
    state = flow.controller.state
    assert state.entree == ENTREE_MENU_ITEMS[0]
    assert state.side_dish == SIDE_DISH_MENU_ITEMS[0]
    assert state.accompaniment == ACCOMPANIMENT_MENU_ITEMS[0]


@pytest.mark.parametrize(
    "route",
    [AppRoute.ENTREE_MENU, AppRoute.SIDE_DISH_MENU, AppRoute.ACCOMPANIMENT_MENU, AppRoute.CHECKOUT],
)
def test_cancel_resets_order_and_returns_to_start(flow, route):
    _walk_to(flow, route)
    if route is not AppRoute.CHECKOUT:
        flow.select({
            AppRoute.ENTREE_MENU: ENTREE_MENU_ITEMS[1],
            AppRoute.SIDE_DISH_MENU: SIDE_DISH_MENU_ITEMS[1],
            AppRoute.ACCOMPANIMENT_MENU: ACCOMPANIMENT_MENU_ITEMS[1],
        }[route])

    assert flow.cancel() is AppRoute.START
    assert flow.stack.entries == (AppRoute.START,)
    assert flow.controller.state == OrderState.empty()


def test_navigate_up_never_resets_order(flow):
    _walk_to(flow, AppRoute.CHECKOUT)
    before = flow.controller.state

    assert flow.navigate_up()
    assert flow.current is AppRoute.ACCOMPANIMENT_MENU
    assert flow.navigate_up()
    assert flow.navigate_up()
    assert flow.current is AppRoute.ENTREE_MENU
    assert flow.controller.state == before


def test_checkout_submit_resets_and_leaves_no_history(flow):
    _walk_to(flow, AppRoute.CHECKOUT)

    assert flow.next() is AppRoute.START
    assert flow.controller.state == OrderState.empty()
    assert not flow.can_navigate_back
    assert not flow.navigate_up()


def test_select_updates_the_category_of_the_current_screen(flow):
    flow.start_order()
    flow.select(ENTREE_MENU_ITEMS[2])
    assert flow.controller.state.entree == ENTREE_MENU_ITEMS[2]
    assert flow.controller.state.side_dish is None


def test_next_requires_a_selection(flow):
    flow.start_order()
    assert not flow.has_selection()
    with pytest.raises(InvalidTransitionError):
        flow.next()
    assert flow.current is AppRoute.ENTREE_MENU


def test_returning_via_back_keeps_selection_so_next_is_allowed(flow):
    _walk_to(flow, AppRoute.SIDE_DISH_MENU)
    flow.navigate_up()
    assert flow.has_selection()
    assert flow.next() is AppRoute.SIDE_DISH_MENU


def test_invalid_events_raise(flow):
    with pytest.raises(InvalidTransitionError):
        flow.next()
    with pytest.raises(InvalidTransitionError):
        flow.cancel()
    with pytest.raises(InvalidTransitionError):
        flow.select(ENTREE_MENU_ITEMS[0])

    flow.start_order()
    with pytest.raises(InvalidTransitionError):
        flow.start_order()

    _walk_to_checkout_from_entree(flow)
    with pytest.raises(InvalidTransitionError):
        flow.select(ENTREE_MENU_ITEMS[0])


def _walk_to_checkout_from_entree(flow):
    flow.select(ENTREE_MENU_ITEMS[0])
    flow.next()
    flow.select(SIDE_DISH_MENU_ITEMS[0])
    flow.next()
    flow.select(ACCOMPANIMENT_MENU_ITEMS[0])
    flow.next()
    assert flow.current is AppRoute.CHECKOUT
