import struct


def read_u32(data, offset):
    (u32,) = struct.unpack_from("<I", data, offset)
    return u32


def read_u16(data, offset):
    (u16,) = struct.unpack_from("<H", data, offset)
    return u16


def read_i16(data, offset):
    (i16,) = struct.unpack_from("<h", data, offset)
    return i16


def read_bytes(data, offset, size):
    raw = bytes(data[offset : offset + size])
    if len(raw) != size:
        raise struct.error(
            "read_bytes requires {} bytes at offset {}".format(size, offset)
        )

    return raw


def read_array(read, data, offset, count, item_size):
    return tuple(read(data, offset + i * item_size) for i in range(count))
