"""Terminal session helper shared by the cart and checkout commands."""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager, nullcontext

import click

from pos.application.load_settings import LoadSettingsHandler
from pos.domain.exceptions import DomainException
from pos.domain.model.cart import Cart
from pos.domain.model.settings import StoreSettings
from pos.infrastructure.bootstrap import cart_store, settings_repository


@contextmanager
def open_cart(for_checkout: bool = False) -> Iterator[tuple[Cart, StoreSettings]]:
    """Load the open cart with tax config applied; save it on clean exit.

    Domain errors raised inside the block become ``ClickException`` and
    leave the stored cart untouched. With ``for_checkout`` the cart is
    held exclusively from load to save, so a second ``pos checkout``
    started meanwhile is refused instead of billing the same order twice.
    """
    store = cart_store()
    try:
        with store.checkout_guard() if for_checkout else nullcontext():
            cart = store.load()
            settings = LoadSettingsHandler(settings_repository()).handle(cart)
            yield cart, settings
            store.save(cart)
    except DomainException as exc:
        raise click.ClickException(str(exc))
