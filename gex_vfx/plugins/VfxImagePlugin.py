"""
Pixel decoders for VFX container textures.

Three formats are supported: R7G6B5A1 and ARGB4 store one little-endian
16-bit word per pixel, RGB8A1 stores one byte per pixel which indexes a
brightness table and two signed colour palettes.

Pixels are stored column by column. The decoders visit them in that order and
write each one to the next 4 bytes of the RGBA output, so the k-th stored
pixel ends up at byte 4 * k of the buffer.
"""

from __future__ import annotations

import struct

from PIL import Image, ImageFile

from ..files.vfx import (
    DataLengthMismatch,
    UnsupportedFormat,
    VfxGeometry,
    VfxTexture,
    VfxTextureFormat,
)


def _r7g6b5a1(data: bytes, width: int, height: int) -> bytes:
    ret = bytearray(4 * width * height)

    for x in range(width):
        for y in range(height):
            i = y + x * height
            (p,) = struct.unpack_from("<H", data, 2 * i)

            r = (p & 0x7C00) >> 7
            g = (p & 0x03E0) >> 2
            b = (p & 0x001F) << 3
            # A set alpha bit on an otherwise black pixel is still transparent.
            if (p & 0x7FFF) == 0 or (p & 0x8000) == 0:
                a = 0
            else:
                a = 255

            ret[4 * i : 4 * i + 4] = struct.pack("4B", r, g, b, a)

    return bytes(ret)


def _argb4(data: bytes, width: int, height: int) -> bytes:
    ret = bytearray(4 * width * height)

    for x in range(width):
        for y in range(height):
            i = y + x * height
            (p,) = struct.unpack_from("<H", data, 2 * i)

            # Nibbles go into the high half of each channel, the low half
            # stays zero.
            r = (p & 0x0F00) >> 4
            g = p & 0x00F0
            b = (p & 0x000F) << 4
            a = (p & 0xF000) >> 8

            ret[4 * i : 4 * i + 4] = struct.pack("4B", r, g, b, a)

    return bytes(ret)


def _clamp(value: int) -> int:
    return max(0, min(255, value))


def _rgb8a1(
    data: bytes,
    width: int,
    height: int,
    brightness: bytes,
    rgb_0: list[tuple[int, int, int]],
    rgb_1: list[tuple[int, int, int]],
) -> bytes:
    ret = bytearray(4 * width * height)

    for x in range(width):
        for y in range(height):
            i = y + x * height
            p = data[i]

            l = brightness[p >> 4]
            r0, g0, b0 = rgb_0[(p >> 2) % 4]
            r1, g1, b1 = rgb_1[p % 4]

            r = _clamp(l + r0 + r1)
            g = _clamp(l + g0 + g1)
            b = _clamp(l + b0 + b1)
            a = 0 if (r | g | b) == 0 else 255

            ret[4 * i : 4 * i + 4] = struct.pack("4B", r, g, b, a)

    # The encoder gets the 2nd and 3rd pixels wrong, the game replaces them
    # with the 1st.
    for i in range(1, min(len(data), 3)):
        ret[4 * i : 4 * i + 4] = ret[0:4]

    return bytes(ret)


def decompress(texture: VfxTexture, geometry: VfxGeometry | None = None) -> bytes:
    """Decode a texture into a width * height * 4 byte RGBA buffer."""
    if geometry is None:
        geometry = VfxGeometry(texture)

    expected = geometry.data_length()
    if len(texture.data) != expected:
        raise DataLengthMismatch(expected, len(texture.data))

    width, height = geometry.width, geometry.height

    if texture.format == VfxTextureFormat.R7G6B5A1:
        return _r7g6b5a1(texture.data, width, height)
    elif texture.format == VfxTextureFormat.ARGB4:
        return _argb4(texture.data, width, height)
    elif texture.format == VfxTextureFormat.RGB8A1:
        return _rgb8a1(
            texture.data,
            width,
            height,
            texture.brightness,
            [rgb.sign_extended() for rgb in texture.rgb_0],
            [rgb.sign_extended() for rgb in texture.rgb_1],
        )

    msg = "Unsupported texture format {}".format(texture.format)
    raise UnsupportedFormat(msg)


class VfxDecoder(ImageFile.PyDecoder):
    """Pillow decoder for a single VFX texture.

    The compressed bytes are passed as the image data and the texture record
    as the only decoder argument.
    """

    def decode(self, buffer: bytes | Image.SupportsArrayInterface) -> tuple[int, int]:
        (texture,) = self.args
        geometry = VfxGeometry(texture)
        if (geometry.width, geometry.height) != (self.state.xsize, self.state.ysize):
            msg = "Image size does not match texture geometry"
            raise ValueError(msg)

        self.set_as_raw(decompress(texture, geometry))
        return -1, 0


Image.register_decoder("vfx", VfxDecoder)


def to_image(texture: VfxTexture) -> Image.Image:
    geometry = VfxGeometry(texture)

    # Pillow skips the decoder entirely for a zero-sized image, so the data
    # length has to be checked here as well.
    expected = geometry.data_length()
    if len(texture.data) != expected:
        raise DataLengthMismatch(expected, len(texture.data))

    return Image.frombytes(
        "RGBA", (geometry.width, geometry.height), texture.data, "vfx", texture
    )
