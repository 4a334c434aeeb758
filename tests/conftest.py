import struct

import pytest


def pack_texture(
    data=b"",
    size=7,
    aspect_ratio=3,
    format=1,
    brightness=bytes(16),
    rgb_0=((0, 0, 0),) * 4,
    rgb_1=((0, 0, 0),) * 4,
    unk_0=(0, 0),
    unk_1=(0,) * 24,
    size_1=None,
    data_count_1=None,
):
    return (
        struct.pack(
            "<4I2H16s12h12h24H2I",
            size,
            size if size_1 is None else size_1,
            aspect_ratio,
            format,
            *unk_0,
            bytes(brightness),
            *[c for rgb in rgb_0 for c in rgb],
            *[c for rgb in rgb_1 for c in rgb],
            *unk_1,
            len(data),
            len(data) if data_count_1 is None else data_count_1,
        )
        + data
    )


def pack_vfx(*textures):
    return struct.pack("<I", len(textures)) + b"".join(textures)


@pytest.fixture
def make_texture():
    return pack_texture


@pytest.fixture
def make_vfx():
    return pack_vfx
