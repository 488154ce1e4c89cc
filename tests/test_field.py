import pytest

from mcg_visual.card import DirectoryCardType, SimpleCard
from mcg_visual.field import DNDSelector, SimpleField, SimpleFieldKind
from mcg_visual.geometry import Rect, Vec2


def make_config():
    return DirectoryCardType("deck", ("a.png", "b.png", "c.png"), Vec2(200.0, 300.0))


def make_field(count=0, **kwargs):
    cards = [SimpleCard.opened(i % 3) for i in range(count)]
    return SimpleField(make_config(), cards, **kwargs)


def test_defaults():
    f = make_field()
    assert (f.kind, f.margin, f.max_cards) == (SimpleFieldKind.HORIZONTAL, 4, 5)
    assert f.selectable and f.draggable
    assert f.is_horizontal() and not f.is_stack()


def test_card_size_defaults_to_natural_size():
    f = make_field()
    assert f.card_size() == f.card_config.natural_size


def test_with_max_card_size_fits_and_keeps_aspect():
    f = make_field(2).with_max_card_size(Vec2(100.0, 100.0))
    size = f.card_size()
    assert size.x <= 100.0 and size.y <= 100.0
    assert size.x / size.y == pytest.approx(200.0 / 300.0)


def test_with_max_card_size_on_empty_field():
    f = make_field().with_max_card_size(Vec2(100.0, 150.0))
    assert f.card_size() == Vec2(100.0, 150.0)


def test_payload_is_taken_once():
    f = make_field(3)
    f.record_drag(1)
    f.record_drag(2)
    f.record_drop(0)
    assert f.take_payload() == (1, 0)
    assert f.take_payload() == (None, None)


def test_record_drop_replaces():
    f = make_field(3)
    f.record_drop(0)
    f.record_drop(2)
    assert f.take_payload() == (None, 2)


def test_push_pop_remove():
    f = make_field()
    f.push(SimpleCard.opened(1))
    f.push(SimpleCard.opened(2))
    assert f.remove(0) == SimpleCard.opened(1)
    assert f.pop() == SimpleCard.opened(2)
    assert f.pop() is None


def test_remove_out_of_range():
    f = make_field(1)
    with pytest.raises(IndexError):
        f.remove(1)
    with pytest.raises(IndexError):
        f.remove(-1)


def test_insert_past_end_appends():
    f = make_field(2)
    card = SimpleCard.masked(2)
    f.insert(99, card)
    assert f.cards[-1] == card
    f.insert(0, SimpleCard.opened(2))
    assert f.cards[0] == SimpleCard.opened(2)
    assert len(f.cards) == 4


def test_stack_positions_clamp():
    f = make_field(8, kind=SimpleFieldKind.STACK)
    assert f.card_pos(3) == Vec2(3.0, -3.0)
    assert f.card_pos(7) == f.card_pos(f.max_cards)


def test_stack_content_size():
    f = make_field(kind=SimpleFieldKind.STACK)
    assert f.content_size() - f.card_size() == Vec2(float(f.max_cards), float(f.max_cards))


def test_horizontal_positions_evenly_spaced():
    f = make_field(3)
    assert f.card_pos(0) == Vec2(0.0, 0.0)
    assert f.card_pos(2).x == 2 * f.card_pos(1).x
    assert f.horizontal_drag_size().x == f.card_size().x + f.margin
    assert f.horizontal_drag_size().y == f.card_size().y


def test_horizontal_overflow_squeezes_into_content():
    f = make_field(9)
    last = f.card_pos(len(f.cards) - 1)
    assert last.x + f.card_size().x == pytest.approx(f.content_size().x)
    assert f.card_pos(1).x < f.card_size().x + f.margin


def test_selection_at():
    f = make_field(9)
    area = Rect.from_min_size(Vec2(0.0, 0.0), f.content_size())
    assert f.selection_at(None, area) is None
    assert f.selection_at(Vec2(-1.0, 1.0), area) is None
    assert f.selection_at(Vec2(0.0, 1.0), area) == 0
    assert f.selection_at(Vec2(area.right() - 0.01, 1.0), area) == len(f.cards) - 1


def test_selector_equality_and_repr():
    assert DNDSelector.player(0, 1) == DNDSelector.player(0, 1)
    assert DNDSelector.player(0, 1) != DNDSelector.player(1, 0)
    assert DNDSelector.index(2) != DNDSelector.player(0, 2)
    assert DNDSelector.stack() == DNDSelector.stack()
    assert repr(DNDSelector.player(0, 1)) == "Player(0, 1)"
    assert repr(DNDSelector.stack()) == "Stack"


def test_selector_fields():
    sel = DNDSelector.player(1, 3)
    assert (sel.owner, sel.slot, sel.is_player) == (1, 3, True)
    assert DNDSelector.index(4).slot == 4 and DNDSelector.index(4).is_index


def test_field_repr_mentions_kind_and_cards():
    text = repr(make_field(1, kind=SimpleFieldKind.STACK))
    assert text.startswith("SimpleField(kind=Stack")
    assert "Open(0)" in text