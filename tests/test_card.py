import math

import pytest

from mcg_visual.card import CardImage, DirectoryCardType, SimpleCard
from mcg_visual.geometry import Vec2


def test_open_card_has_type():
    card = SimpleCard.opened(3)
    assert card.t() == 3
    assert card.is_open() is True
    assert card.is_masked() is False


def test_masked_card_hides_type():
    card = SimpleCard.masked(3)
    assert card.t() is None
    assert card.is_masked() is True
    assert card.is_open() is False


def test_mask_open_round_trip():
    card = SimpleCard.opened(7)
    assert card.mask().open() == card
    assert card.mask().is_masked() is True


def test_mask_is_idempotent_and_open_on_open_is_same():
    card = SimpleCard.masked(2)
    assert card.mask() == card
    assert SimpleCard.opened(2).open() == SimpleCard.opened(2)


def test_masked_without_type_stays_masked():
    card = SimpleCard.masked()
    assert card.open() == card
    assert card.open().is_masked() is True


def test_negative_type_rejected():
    with pytest.raises(ValueError):
        SimpleCard.opened(-1)


def test_open_card_without_type_rejected():
    with pytest.raises(ValueError):
        SimpleCard(None)


def _deck(count):
    names = [f"card_{i:02}.png" for i in range(count)]
    return DirectoryCardType("cards", names, Vec2(200.0, 300.0))


@pytest.mark.parametrize("count", range(0, 20))
def test_width_bits_is_smallest_power_of_two_exponent(count):
    deck = _deck(count)
    w = deck.width_bits()
    assert deck.type_count() == count
    assert 2**w >= count
    assert w == 0 or 2 ** (w - 1) < count


def test_width_bits_four_types():
    assert _deck(4).width_bits() == 2


def test_img_uri_for_open_and_masked():
    deck = DirectoryCardType("cards", ["a.png", "b.png"], Vec2(200.0, 300.0))
    assert deck.img(SimpleCard.opened(1)).uri == "http://127.0.0.1:8080/media/cards/b.png"
    assert deck.img(SimpleCard.masked(1)).uri == "http://127.0.0.1:8080/media/cards/a.png"
    image = deck.img(SimpleCard.opened(0))
    assert image.maintain_aspect_ratio is True
    assert image.show_loading_spinner is True


def test_img_out_of_range():
    deck = DirectoryCardType("cards", ["a.png"], Vec2(200.0, 300.0))
    with pytest.raises(IndexError):
        deck.img(SimpleCard.opened(5))


def test_all_images_in_order():
    deck = DirectoryCardType("cards", ["a.png", "b.png"], Vec2(1.0, 1.0))
    assert list(deck.all_images()) == ["a.png", "b.png"]


def test_from_file_listing_filters_and_sorts():
    files = [
        ("b.png", "deck/b.png", "image/png"),
        ("a.png", "deck/a.png", "image/png"),
        ("notes.txt", "deck/notes.txt", "text/plain"),
        ("c.jpg", "deck/c.jpg"),
    ]
    size = Vec2(200.0, 300.0)
    deck = DirectoryCardType.from_file_listing(files, size)
    assert deck.path == "deck"
    assert list(deck.all_images()) == ["a.png", "b.png"]
    assert deck.natural_size == size


def test_from_file_listing_bad_path():
    with pytest.raises(ValueError):
        DirectoryCardType.from_file_listing([("a.png", "deck/other.png", "image/png")], Vec2())


def test_from_file_listing_missing_path():
    with pytest.raises(ValueError):
        DirectoryCardType.from_file_listing([("a.png",)], Vec2())


def test_repr_shows_path_and_count():
    deck = DirectoryCardType("cards", ["a.png", "b.png"], Vec2(1.0, 1.0))
    text = repr(deck)
    assert "path='cards'" in text
    assert "T=2" in text


def test_calc_size_keeps_aspect_and_fits():
    natural = Vec2(200.0, 300.0)
    available = Vec2(100.0, 200.0)
    size = CardImage("x").calc_size(available, natural)
    assert size.x <= available.x and size.y <= available.y
    assert math.isclose(size.x / size.y, natural.x / natural.y)
    assert size.x == available.x or size.y == available.y


def test_calc_size_without_aspect_uses_available():
    available = Vec2(100.0, 200.0)
    image = CardImage("x", maintain_aspect_ratio=False)
    assert image.calc_size(available, Vec2(200.0, 300.0)) == available


def test_calc_size_unbounded_keeps_natural():
    natural = Vec2(200.0, 300.0)
    assert CardImage("x").calc_size(Vec2(math.inf, math.inf), natural) == natural


def test_calc_size_without_natural_is_square():
    size = CardImage("x").calc_size(Vec2(100.0, 50.0))
    assert size.x == size.y
    assert size.y == 50.0