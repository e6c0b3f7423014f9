"""Tests for cart notifications"""
from unittest.mock import Mock

from rocketshoes.errors import CartErrorKind
from rocketshoes.services.notifications import CartNotifier, message_for


def test_notify_calls_subscribers():
    notifier = CartNotifier(lang="en")
    callback = Mock()
    notifier.subscribe(callback)

    notification = notifier.notify(CartErrorKind.OUT_OF_STOCK, product_id=1)

    callback.assert_called_once_with(notification)
    assert notification.message == "Requested quantity exceeds stock"
    assert notification.product_id == 1


def test_unsubscribe():
    notifier = CartNotifier(lang="en")
    callback = Mock()
    unsubscribe = notifier.subscribe(callback)

    unsubscribe()
    notifier.notify(CartErrorKind.NOT_FOUND, product_id=1)

    callback.assert_not_called()


def test_failing_subscriber_does_not_block_others():
    notifier = CartNotifier(lang="en")
    broken = Mock(side_effect=RuntimeError("ui gone"))
    healthy = Mock()
    notifier.subscribe(broken)
    notifier.subscribe(healthy)

    notifier.notify(CartErrorKind.PRODUCT_UNAVAILABLE, product_id=2)

    healthy.assert_called_once()


def test_storage_corruption_is_not_published():
    notifier = CartNotifier(lang="en")
    callback = Mock()
    notifier.subscribe(callback)

    assert notifier.notify(CartErrorKind.PERSISTENCE_READ_CORRUPT) is None
    callback.assert_not_called()
    assert notifier.recent == []


def test_history_is_bounded():
    notifier = CartNotifier(lang="en", history=2)

    for product_id in range(5):
        notifier.notify(CartErrorKind.NOT_FOUND, product_id=product_id)

    assert [n.product_id for n in notifier.recent] == [3, 4]


def test_portuguese_messages():
    assert message_for(CartErrorKind.OUT_OF_STOCK, "pt-BR") == "Quantidade solicitada fora de estoque"
    assert message_for(CartErrorKind.NOT_FOUND, "pt") == "Erro na remoção do produto"
