import pytest

from gfxutils.image import Image


class _Kernel:
    def __init__(self, width, height, values):
        self.width = width
        self.height = height
        self.values = values

    def get_value(self, x, y):
        return self.values[x + y * self.width]


def _solid(width, height, count, value):
    return Image(width, height, count, [value] * (width * height * count))


def test_default_image_is_blank_rgba():
    img = Image()
    assert (img.width, img.height, img.component_count) == (100, 100, 4)
    assert len(img.data) == 100 * 100 * 4
    assert not any(img.data)


def test_compute_index_covers_every_byte_once():
    img = Image(3, 2, 2)
    indices = sorted(
        img.compute_index(x, y, c) for y in range(2) for x in range(3) for c in range(2)
    )
    assert indices == list(range(len(img.data)))


def test_set_and_get_value_round_trip():
    img = Image(4, 4, 3)
    img.set_value(2, 3, 1, 200)
    assert img.get_value(2, 3, 1) == 200
    assert img.get_value(2, 3, 0) == 0


def test_set_gray_leaves_alpha():
    img = Image(2, 2, 4)
    img.set_value(1, 1, 3, 9)
    img.set_gray(1, 1, 42)
    assert [img.get_value(1, 1, c) for c in range(4)] == [42, 42, 42, 9]


def test_set_normalized_value_clamps():
    img = Image(2, 1, 3)
    img.set_normalized_value(0, 0, 2.0)
    img.set_normalized_value(1, 0, -1.0, component=2)
    assert [img.get_value(0, 0, c) for c in range(3)] == [255, 255, 255]
    assert img.get_value(1, 0, 2) == 0


def test_from_color():
    img = Image.from_color((1.0, 0.0, 0.5, 1.0))
    assert (img.width, img.height, img.component_count) == (1, 1, 4)
    assert list(img.data) == [255, 0, 127, 255]


def test_generate_alpha_adds_channel():
    img = Image(2, 1, 3, [1, 2, 3, 4, 5, 6])
    img.generate_alpha()
    assert img.component_count == 4
    assert list(img.data) == [1, 2, 3, 255, 4, 5, 6, 255]


def test_generate_alpha_sets_existing_channel():
    img = Image(1, 1, 4, [7, 8, 9, 10])
    img.generate_alpha(33)
    assert list(img.data) == [7, 8, 9, 33]


def test_generate_alpha_from_luminance_black_is_transparent():
    img = Image(2, 1, 3)
    img.generate_alpha_from_luminance()
    assert img.component_count == 4
    assert list(img.data) == [0] * 8


def test_multiply_identity_and_zero():
    original = Image.gen_test_image(6, 6)
    same = Image(6, 6, 4, original.data)
    same.multiply((1.0, 1.0, 1.0, 1.0))
    assert same == original
    zero = Image(6, 6, 4, original.data)
    zero.multiply((0.0, 0.0, 0.0, 0.0))
    assert not any(zero.data)


def test_multiply_rgb_gains_alpha():
    img = _solid(2, 2, 3, 200)
    img.multiply((1.0, 1.0, 1.0, 1.0))
    assert img.component_count == 4
    assert img.data[3::4] == bytearray([255] * 4)
    assert img.data[0::4] == bytearray([200] * 4)


def test_gen_test_image_corners():
    img = Image.gen_test_image(9, 9)
    assert [img.get_value(0, 0, c) for c in range(4)] == [255, 0, 0, 255]
    assert [img.get_value(3, 0, c) for c in range(4)] == [0, 255, 255, 255]
    assert [img.get_value(8, 0, c) for c in range(3)] == [0, 0, 0]
    assert [img.get_value(8, 8, c) for c in range(3)] == [255, 255, 255]


def test_flips_are_involutions():
    img = Image.gen_test_image(6, 5)
    assert img.flip_horizontal().flip_horizontal() == img
    assert img.flip_vertical().flip_vertical() == img


def test_flip_moves_pixels():
    img = Image(3, 2, 1, [1, 2, 3, 4, 5, 6])
    assert list(img.flip_horizontal().data) == [4, 5, 6, 1, 2, 3]
    assert list(img.flip_vertical().data) == [3, 2, 1, 6, 5, 4]


def test_crop_matches_source_pixels():
    img = Image.gen_test_image(9, 9)
    part = img.crop(2, 3, 7, 8)
    assert (part.width, part.height) == (5, 5)
    for y in range(5):
        for x in range(5):
            for c in range(4):
                assert part.get_value(x, y, c) == img.get_value(x + 2, y + 3, c)


def test_crop_to_aspect_same_size_is_copy():
    img = Image.gen_test_image(6, 6)
    copy = img.crop_to_aspect_and_resample(6, 6)
    assert copy == img
    copy.set_value(0, 0, 0, 1)
    assert img.get_value(0, 0, 0) == 255


def test_crop_to_aspect_downscale_constant():
    img = _solid(8, 4, 2, 77)
    out = img.crop_to_aspect_and_resample(2, 2)
    assert (out.width, out.height) == (2, 2)
    assert set(out.data) == {77}


def test_crop_to_aspect_upscale_raises():
    with pytest.raises(ValueError):
        _solid(2, 2, 1, 5).crop_to_aspect_and_resample(4, 4)


def test_resample_keeps_aspect_and_constant_values():
    img = _solid(8, 4, 3, 90)
    out = img.resample(4)
    assert (out.width, out.height) == (4, 2)
    assert set(out.data) == {90}


def test_sample_at_corners():
    img = Image(3, 3, 1, range(9))
    assert img.sample(0.0, 0.0, 0) == img.get_value(0, 0, 0)
    assert img.sample(1.0, 1.0, 0) == img.get_value(2, 2, 0)
    assert img.sample(1.0, 0.0, 0) == img.get_value(2, 0, 0)


def test_lumi_value_one_and_two_components():
    assert Image(1, 1, 1, [123]).get_lumi_value(0, 0) == 123
    assert Image(1, 1, 2, [100, 200]).get_lumi_value(0, 0) == 150


def test_to_grayscale_of_red():
    img = Image(1, 1, 3, [255, 0, 0])
    gray = img.to_grayscale()
    assert gray.component_count == 1
    assert list(gray.data) == [76]


def test_to_code_format():
    img = Image(2, 1, 1, [1, 2])
    expected = (
        "Image img {2,1,1,\n"
        "              {\n"
        "              1,2\n"
        "          }};\n"
    )
    assert img.to_code("img") == expected


def test_to_code_padding():
    code = Image(2, 1, 1, [1, 2]).to_code(padding=True)
    assert code.startswith("Image myImage {2,1,1,")
    assert "  1,  2\n" in code


def test_to_code_wraps_every_30_values():
    code = Image(31, 1, 1).to_code()
    assert code.count("\n              0") == 2


def test_ascii_art_extremes():
    assert _solid(4, 4, 1, 0).to_ascii_art() == "@@\n"
    assert _solid(4, 4, 1, 255).to_ascii_art() == "  \n"
    assert _solid(4, 4, 1, 0).to_ascii_art(small_table=False) == "$$\n"


def test_ascii_art_block_count():
    art = _solid(8, 12, 1, 0).to_ascii_art()
    lines = art.splitlines()
    assert len(lines) == 3
    assert all(len(line) == 4 for line in lines)


def test_filter_identity_kernel_copies_interior():
    img = Image(4, 4, 1, range(16))
    kernel = _Kernel(3, 3, [0, 0, 0, 0, 1, 0, 0, 0, 0])
    out = img.filter(kernel)
    for y in range(4):
        for x in range(4):
            interior = 1 <= x <= 2 and 1 <= y <= 2
            expected = img.get_value(x, y, 0) if interior else 0
            assert out.get_value(x, y, 0) == expected