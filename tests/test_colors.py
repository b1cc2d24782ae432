import pytest

from solong.colors import lookup_color, mask_shifts, text_to_rgb, to_visual_color


@pytest.mark.parametrize(
    "name, expected",
    [
        ("red", 0xFF0000),
        ("blue", 0xFF),
        ("black", 0x0),
        ("gray50", 0x7F7F7F),
        ("lightgoldenrodyellow", 0xFAFAD2),
        ("light green", 0x90EE90),
    ],
)
def test_lookup_known_names(name, expected):
    assert lookup_color(name) == expected


def test_lookup_ignores_case():
    assert lookup_color("ReD") == lookup_color("red") == 0xFF0000
    assert lookup_color("GHOST WHITE") == 0xF8F8FF


def test_lookup_first_duplicate_wins():
    assert lookup_color("dark slate") == 0x2F4F4F
    assert lookup_color("light goldenrod") == 0xFAFAD2


def test_lookup_none_is_transparent():
    assert lookup_color("none") == -1


def test_lookup_unknown_name():
    assert lookup_color("no such colour") is None


def test_text_hex_specification():
    assert text_to_rgb("#FFA500") == 0xFFA500
    assert text_to_rgb("#000000") == 0


def test_text_hex_stops_at_invalid_digit():
    assert text_to_rgb("#ffzz") == 0xFF
    assert text_to_rgb("#") == 0


def test_text_hex_wraps_to_32_bits():
    assert text_to_rgb("#ffffffff") == -1


def test_text_named_colour():
    assert text_to_rgb("tomato") == 0xFF6347
    assert text_to_rgb("None") == -1


def test_text_two_word_name_joined():
    assert text_to_rgb("navy", "blue") == 0x80
    assert text_to_rgb("light", "goldenrod") == 0xFAFAD2


def test_text_unknown_name_is_zero():
    assert text_to_rgb("chartreusish") == 0
    assert text_to_rgb("white", "noise") == 0


@pytest.mark.parametrize(
    "masks",
    [(0xFF0000, 0x00FF00, 0x0000FF), (0xF800, 0x07E0, 0x001F), (0x7C00, 0x03E0, 0x001F)],
)
def test_mask_shifts_rebuild_masks(masks):
    shifts = mask_shifts(*masks)
    assert len(shifts) == 6
    rebuilt = tuple(
        ((1 << shifts[2 * i + 1]) - 1) << shifts[2 * i] for i in range(3)
    )
    assert rebuilt == masks


@pytest.mark.parametrize("masks", [(0, 0xFF00, 0xFF), (0xFF0000, -1, 0xFF)])
def test_mask_shifts_rejects_empty_mask(masks):
    with pytest.raises(ValueError):
        mask_shifts(*masks)


@pytest.mark.parametrize("color", [0x000000, 0x123456, 0xFFFFFF, 0xFF6347])
def test_deep_visual_keeps_colour(color):
    shifts = mask_shifts(0xF800, 0x07E0, 0x001F)
    assert to_visual_color(color, 24, shifts) == color
    assert to_visual_color(color, 32, shifts) == color


@pytest.mark.parametrize("color", [0x000000, 0x123456, 0xFFFFFF, 0xA020F0])
def test_shallow_visual_with_full_masks_is_identity(color):
    shifts = mask_shifts(0xFF0000, 0x00FF00, 0x0000FF)
    assert to_visual_color(color, 16, shifts) == color


@pytest.mark.parametrize("color", [0x000000, 0x123456, 0xFFFFFF, 0x8B4513])
def test_shallow_visual_fits_in_masks(color):
    masks = (0xF800, 0x07E0, 0x001F)
    shifts = mask_shifts(*masks)
    pixel = to_visual_color(color, 16, shifts)
    assert pixel & ~(masks[0] | masks[1] | masks[2]) == 0


def test_shallow_visual_extremes():
    masks = (0xF800, 0x07E0, 0x001F)
    shifts = mask_shifts(*masks)
    assert to_visual_color(0x000000, 16, shifts) == 0
    assert to_visual_color(0xFFFFFF, 16, shifts) == masks[0] | masks[1] | masks[2]
    assert to_visual_color(0xFF0000, 16, shifts) == masks[0]


def test_shallow_visual_needs_six_shifts():
    with pytest.raises(ValueError):
        to_visual_color(0x123456, 16, (0, 8))