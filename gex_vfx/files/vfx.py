from enum import Enum
import struct

from .read import *


class VfxError(Exception):
    pass


class ParseError(VfxError):
    pass


class DataLengthMismatch(VfxError):
    def __init__(self, expected, actual):
        super().__init__(
            "expected {} bytes of texture data, got {}".format(expected, actual)
        )
        self.expected = expected
        self.actual = actual


class UnsupportedFormat(VfxError):
    pass


class VfxTextureFormat(Enum):
    RGB8A1 = 1
    R7G6B5A1 = 11
    ARGB4 = 12


class Vfx:
    """A VFX texture container: a u32 count followed by that many textures."""

    def __init__(self, data, offset=0):
        try:
            self.texture_count = read_u32(data, offset)
        except struct.error as e:
            raise ParseError("Truncated VFX header") from e

        self.textures = []
        texture_offset = offset + 0x04
        for i in range(self.texture_count):
            try:
                texture = VfxTexture(data, texture_offset)
            except ParseError as e:
                raise ParseError("Texture #{}: {}".format(i, e)) from e

            self.textures.append(texture)
            texture_offset += texture.size

        # Anything past the last texture is left alone.
        self.size = texture_offset - offset

    @classmethod
    def from_file(cls, file):
        return cls(file.read())

    def pack(self):
        return struct.pack("<I", len(self.textures)) + b"".join(
            texture.pack() for texture in self.textures
        )

    def __repr__(self):
        return "Vfx(textures = {})".format(self.textures)


class VfxTexture:
    HEADER_SIZE = 0x8C

    def __init__(self, data, offset):
        try:
            self.size_0 = read_u32(data, offset + 0x00)
            self.size_1 = read_u32(data, offset + 0x04)
            self.aspect_ratio = read_u32(data, offset + 0x08)
            format_value = read_u32(data, offset + 0x0C)
            self.unk_0 = read_array(read_u16, data, offset + 0x10, 2, 0x02)
            self.brightness = read_bytes(data, offset + 0x14, 16)
            self.rgb_0 = tuple(
                VfxRgb(data, offset + 0x24 + i * VfxRgb.SIZE) for i in range(4)
            )
            self.rgb_1 = tuple(
                VfxRgb(data, offset + 0x3C + i * VfxRgb.SIZE) for i in range(4)
            )
            self.unk_1 = read_array(read_u16, data, offset + 0x54, 24, 0x02)
            self.data_count_0 = read_u32(data, offset + 0x84)
            self.data_count_1 = read_u32(data, offset + 0x88)
        except struct.error as e:
            raise ParseError("Truncated texture header") from e

        try:
            self.format = VfxTextureFormat(format_value)
        except ValueError as e:
            raise ParseError("Unknown texture format {}".format(format_value)) from e

        if self.size_0 != self.size_1:
            raise ParseError(
                "size_0 ({}) != size_1 ({})".format(self.size_0, self.size_1)
            )
        if self.data_count_0 != self.data_count_1:
            raise ParseError(
                "data_count_0 ({}) != data_count_1 ({})".format(
                    self.data_count_0, self.data_count_1
                )
            )

        try:
            self.data = read_bytes(
                data, offset + VfxTexture.HEADER_SIZE, self.data_count_0
            )
        except struct.error as e:
            raise ParseError(
                "Truncated texture data, expected {} bytes".format(self.data_count_0)
            ) from e

        self.size = VfxTexture.HEADER_SIZE + self.data_count_0

    def geometry(self):
        return VfxGeometry(self)

    def pack(self):
        rgb_0 = [c for rgb in self.rgb_0 for c in (rgb.r, rgb.g, rgb.b)]
        rgb_1 = [c for rgb in self.rgb_1 for c in (rgb.r, rgb.g, rgb.b)]

        return (
            struct.pack(
                "<4I2H16s12h12h24H2I",
                self.size_0,
                self.size_1,
                self.aspect_ratio,
                self.format.value,
                *self.unk_0,
                bytes(self.brightness),
                *rgb_0,
                *rgb_1,
                *self.unk_1,
                self.data_count_0,
                self.data_count_1,
            )
            + self.data
        )

    def __repr__(self):
        return "VfxTexture(format = {}, size = {}, aspect_ratio = {}, data = {} bytes)".format(
            self.format, self.size_1, self.aspect_ratio, len(self.data)
        )


class VfxRgb:
    SIZE = 0x06

    def __init__(self, data, offset):
        self.r = read_i16(data, offset)
        self.g = read_i16(data, offset + 0x02)
        self.b = read_i16(data, offset + 0x04)

    def sign_extended(self):
        return (sign_extend_9(self.r), sign_extend_9(self.g), sign_extend_9(self.b))

    def __repr__(self):
        return "VfxRgb({}, {}, {})".format(self.r, self.g, self.b)


def sign_extend_9(value):
    # Only the low 9 bits of each 16-bit cell are meaningful.
    value &= 0x1FF
    if value >= 0x100:
        value -= 0x200

    return value


class VfxGeometry:
    def __init__(self, texture):
        # size_1 above 8 would be a negative shift. Nothing sensible comes out
        # of that, so let the data length check reject it.
        shift = 8 - texture.size_1
        size = 1 << shift if shift >= 0 else 0

        if texture.aspect_ratio > 3:
            self.width = size >> (texture.aspect_ratio - 3)
            self.height = size
        else:
            self.width = size
            self.height = size >> (3 - texture.aspect_ratio)

        if (
            texture.format == VfxTextureFormat.R7G6B5A1
            or texture.format == VfxTextureFormat.ARGB4
        ):
            self.stride = 2
        else:
            self.stride = 1

    def pixel_count(self):
        return self.width * self.height

    def data_length(self):
        return self.width * self.height * self.stride

    def __repr__(self):
        return "VfxGeometry(width = {}, height = {}, stride = {})".format(
            self.width, self.height, self.stride
        )
