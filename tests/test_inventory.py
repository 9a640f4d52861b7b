import logging

import pytest

from boosterpack.domain.events import EventBus
from boosterpack.domain.exceptions import EmptyQueue, InvalidArgument
from boosterpack.domain.inventory import BoosterInventory, OwnedPack


def test_packs_are_served_in_fifo_order():
    inventory = BoosterInventory()
    inventory.add_pack(1, 3)
    inventory.add_pack(0, 2)
    inventory.add_pack(4, 5)
    assert len(inventory) == 3

    assert inventory.next_pack() == OwnedPack(pack_type=1, card_count=3)
    assert len(inventory) == 2
    assert inventory.next_pack() == OwnedPack(pack_type=0, card_count=2)
    assert inventory.next_pack() == OwnedPack(pack_type=4, card_count=5)
    assert len(inventory) == 0


@pytest.mark.parametrize(
    ("pack_type", "card_count"),
    [(-1, 2), (0, 0), (0, -3), (True, 2), ("1", 2), (1, 2.0), (None, 2)],
)
def test_invalid_arguments_do_not_mutate(pack_type, card_count):
    inventory = BoosterInventory()
    inventory.add_pack(0, 2)
    with pytest.raises(InvalidArgument):
        inventory.add_pack(pack_type, card_count)
    assert inventory.snapshot() == [(0, 2)]


def test_next_pack_on_empty_queue_raises():
    inventory = BoosterInventory()
    with pytest.raises(EmptyQueue):
        inventory.next_pack()


def test_has_packs_and_peek_do_not_mutate():
    inventory = BoosterInventory()
    assert not inventory.has_packs()
    assert inventory.peek() is None
    inventory.add_pack(2, 4)
    for _ in range(3):
        assert inventory.has_packs()
        assert inventory.peek() == OwnedPack(2, 4)
    assert len(inventory) == 1


def test_open_mode_defaults_to_single():
    inventory = BoosterInventory()
    assert inventory.is_single_mode()
    inventory.set_open_mode(False)
    assert not inventory.is_single_mode()
    inventory.set_open_mode(True)
    assert inventory.is_single_mode()


def test_single_card_pack_is_queued_with_warning(caplog):
    inventory = BoosterInventory(min_cards_per_open=2)
    with caplog.at_level(logging.WARNING, logger="boosterpack.domain.inventory"):
        inventory.add_pack(0, 1)
    assert inventory.snapshot() == [(0, 1)]
    assert "cannot be opened" in caplog.text


def test_add_pack_publishes_event():
    bus = EventBus()
    received = []
    bus.subscribe("booster.pack.added", received.append)
    inventory = BoosterInventory(event_bus=bus)
    inventory.add_pack(3, 5)
    assert received == [{"pack_type": 3, "card_count": 5, "queued": 1}]


def test_failing_listener_does_not_undo_add(caplog):
    bus = EventBus()
    received = []

    def explode(payload):
        raise RuntimeError("listener down")

    bus.subscribe("booster.pack.added", explode)
    bus.subscribe("booster.pack.added", received.append)
    inventory = BoosterInventory(event_bus=bus)
    with caplog.at_level(logging.ERROR, logger="boosterpack.domain.events"):
        inventory.add_pack(0, 2)
    assert inventory.snapshot() == [(0, 2)]
    assert received == [{"pack_type": 0, "card_count": 2, "queued": 1}]
    assert "listener down" in caplog.text
