from roster_bot import MessageRegistry, Slot


def test_bind_get_and_rebind():
    registry = MessageRegistry()
    assert registry.get(7, Slot.LIST) is None

    registry.bind(7, Slot.LIST, 100)
    registry.bind(7, Slot.STATUS, 101)
    registry.bind(7, Slot.LIST, 102)

    assert registry.get(7, Slot.LIST) == 102
    assert registry.bindings_for(7) == {Slot.LIST: 102, Slot.STATUS: 101}


def test_discard_removes_only_that_slot():
    registry = MessageRegistry()
    registry.bind(7, Slot.LIST, 100)
    registry.bind(7, Slot.STATUS, 101)

    assert registry.discard(7, Slot.LIST) == 100
    assert registry.get(7, Slot.LIST) is None
    assert registry.get(7, Slot.STATUS) == 101
    assert registry.discard(7, Slot.LIST) is None
    assert registry.discard(8, Slot.LIST) is None


def test_users_do_not_share_bindings():
    registry = MessageRegistry()
    registry.bind(1, Slot.LIST, 100)
    registry.bind(2, Slot.LIST, 200)

    registry.discard(1, Slot.LIST)

    assert registry.bindings_for(1) == {}
    assert registry.get(2, Slot.LIST) == 200
