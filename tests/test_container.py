import pytest

from pagebar.core.container import PaginationContainer, entry_key, paginate, render
from pagebar.core.entries import EntryRole
from pagebar.core.sequence import ELLIPSIS, generate


def _by_role(descriptors, role):
    return next(d for d in descriptors if d.role is role)


def test_arrows_disabled_on_first_page():
    descriptors = render(1, 5, generate(1, 5, 2, 2))

    assert _by_role(descriptors, EntryRole.FIRST).is_disabled
    assert _by_role(descriptors, EntryRole.PREV).is_disabled
    assert not _by_role(descriptors, EntryRole.NEXT).is_disabled
    assert not _by_role(descriptors, EntryRole.LAST).is_disabled


def test_arrows_disabled_on_last_page():
    descriptors = render(5, 5, generate(5, 5, 2, 2))

    assert not _by_role(descriptors, EntryRole.FIRST).is_disabled
    assert not _by_role(descriptors, EntryRole.PREV).is_disabled
    assert _by_role(descriptors, EntryRole.NEXT).is_disabled
    assert _by_role(descriptors, EntryRole.LAST).is_disabled


def test_composition_order_and_values():
    descriptors = render(5, 10, generate(5, 10, 2, 1))

    assert [d.key for d in descriptors] == [
        "first", "prev",
        "page-1", "page-2", "…-2", "page-4", "page-5", "page-6", "…-6", "page-9", "page-10",
        "next", "last",
    ]
    assert [d.value for d in descriptors[:2]] == [1, 4]
    assert [d.value for d in descriptors[-2:]] == [6, 10]
    assert [d.label for d in descriptors if d.role is not EntryRole.NORMAL] == ["«", "‹", "›", "»"]
    assert _by_role(descriptors, EntryRole.LAST).title == "Go to Last Page"


def test_only_current_page_is_flagged():
    descriptors = render(5, 10, generate(5, 10, 2, 1))
    assert [d.value for d in descriptors if d.is_current] == [5]


def test_arrows_can_be_hidden():
    sequence = generate(3, 10, 1, 1)

    assert [d.role for d in render(3, 10, sequence, show_first_last_arrows=False)][0] is EntryRole.PREV
    plain = render(3, 10, sequence, show_first_last_arrows=False, show_next_prev_arrows=False)
    assert all(d.role is EntryRole.NORMAL for d in plain)
    assert len(plain) == len(sequence)


def test_entry_key_disambiguates_ellipses():
    assert entry_key(7, 3) == "page-7"
    assert entry_key(ELLIPSIS, 2) != entry_key(ELLIPSIS, 6)


def test_keys_follow_values_across_renders():
    before = {d.key: d.value for d in render(5, 10, generate(5, 10, 2, 1))}
    after = {d.key: d.value for d in render(6, 10, generate(6, 10, 2, 1))}

    for key in before.keys() & after.keys():
        if key.startswith("page-"):
            assert before[key] == after[key]


def test_container_activation(clicks):
    container = PaginationContainer(3, 10, generate(3, 10, 2, 1), on_entry_click=clicks.append)

    container.activate("next")
    container.activate("page-10")
    container.activate("page-3")

    assert clicks == [4, 10, 3]


def test_container_disabled_arrow_activation(clicks):
    container = PaginationContainer(1, 10, generate(1, 10, 2, 1), on_entry_click=clicks.append)

    assert not container.activate("prev").handled
    assert not container.activate("first").handled
    assert clicks == []


def test_container_unknown_key():
    container = PaginationContainer(1, 3, generate(1, 3))
    with pytest.raises(KeyError):
        container.entry("page-99")


def test_paginate_uses_settings(settings, clicks):
    container = paginate(5, 10, on_entry_click=clicks.append, settings=settings)

    assert [d.value for d in container.descriptors if d.role is EntryRole.NORMAL] == [
        1, 2, ELLIPSIS, 4, 5, 6, ELLIPSIS, 9, 10,
    ]
    container.activate("prev")
    assert clicks == [4]


def test_paginate_without_arrows(settings):
    settings = settings.model_copy(update={"show_first_last_arrows": False, "show_next_prev_arrows": False})
    container = paginate(1, 1, settings=settings)
    assert [d.key for d in container.descriptors] == ["page-1"]


def test_empty_range_disables_every_arrow():
    descriptors = render(1, 0, [])

    assert [d.key for d in descriptors] == ["first", "prev", "next", "last"]
    assert all(d.is_disabled for d in descriptors)


def test_paginate_empty_range_has_nothing_to_click(settings, clicks):
    container = paginate(1, 0, on_entry_click=clicks.append, settings=settings)

    assert not any(d.is_interactive for d in container.descriptors)
    container.activate("last")
    container.activate("next")
    assert clicks == []
