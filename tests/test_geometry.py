import pytest

from gex_vfx import Vfx, VfxGeometry


def geometry(make_texture, make_vfx, **kwargs):
    (texture,) = Vfx(make_vfx(make_texture(**kwargs))).textures
    return texture.geometry()


def test_smallest_square(make_texture, make_vfx):
    g = geometry(make_texture, make_vfx, size=8, aspect_ratio=3)

    assert (g.width, g.height) == (1, 1)


def test_largest_square(make_texture, make_vfx):
    g = geometry(make_texture, make_vfx, size=0, aspect_ratio=3)

    assert (g.width, g.height) == (256, 256)


def test_aspect_above_three_shrinks_width(make_texture, make_vfx):
    g = geometry(make_texture, make_vfx, size=5, aspect_ratio=5)

    assert (g.width, g.height) == (2, 8)


def test_aspect_below_three_shrinks_height(make_texture, make_vfx):
    g = geometry(make_texture, make_vfx, size=5, aspect_ratio=1)

    assert (g.width, g.height) == (8, 2)


@pytest.mark.parametrize("format, stride", [(1, 1), (11, 2), (12, 2)])
def test_stride(make_texture, make_vfx, format, stride):
    g = geometry(make_texture, make_vfx, size=6, format=format)

    assert g.stride == stride
    assert g.pixel_count() == 16
    assert g.data_length() == 16 * stride


def test_oversized_size_code_gives_empty_geometry(make_texture, make_vfx):
    g = geometry(make_texture, make_vfx, size=9, aspect_ratio=3)

    assert (g.width, g.height) == (0, 0)
    assert g.data_length() == 0


def test_excessive_aspect_shift(make_texture, make_vfx):
    g = geometry(make_texture, make_vfx, size=4, aspect_ratio=0xFFFFFFFF)

    assert (g.width, g.height) == (0, 16)


def test_geometry_method_matches_class(make_texture, make_vfx):
    (texture,) = Vfx(make_vfx(make_texture(size=6, aspect_ratio=2))).textures

    a = texture.geometry()
    b = VfxGeometry(texture)

    assert (a.width, a.height, a.stride) == (b.width, b.height, b.stride) == (4, 2, 1)
