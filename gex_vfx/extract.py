import argparse
import os
import sys

from .files.vfx import Vfx, VfxError, VfxGeometry, VfxTextureFormat
from .plugins.VfxImagePlugin import to_image


class FormatInfo:
    FORMAT_INFO = {
        VfxTextureFormat.RGB8A1: "rgb8a1",
        VfxTextureFormat.R7G6B5A1: "r7g6b5a1",
        VfxTextureFormat.ARGB4: "argb4",
    }

    @staticmethod
    def name(texture_format):
        return FormatInfo.FORMAT_INFO[texture_format]


def main(argv=None):
    parser = argparse.ArgumentParser(prog="vfx-extract")
    parser.add_argument("paths", nargs="*")
    parser.add_argument(
        "--output-dir",
        help="directory to extract into instead of next to each container",
    )
    parser.add_argument(
        "--strict",
        action="store_true",
        help="stop at the first texture that fails to decode",
    )

    args = parser.parse_args(argv)

    failures = 0
    for vfx_path in scan_paths(args.paths):
        failures += extract_vfx(vfx_path, args.output_dir, args.strict)

    return 1 if failures else 0


def scan_paths(paths):
    vfx_paths = []
    for path in paths:
        if not os.path.isfile(path):
            continue

        _, ext = os.path.splitext(path)
        if ext.lower() == ".vfx":
            vfx_paths.append(path)

    return vfx_paths


def extract_vfx(vfx_path, output_dir=None, strict=False):
    """Write every texture in a container as PNG and return the failure count."""
    (path, filename) = os.path.split(vfx_path)
    (level_name, _) = os.path.splitext(filename)

    with open(vfx_path, "rb") as file:
        try:
            vfx = Vfx.from_file(file)
        except VfxError as e:
            if strict:
                raise
            print("Failed to parse: {} ({})".format(filename, e))
            return 1

    output_path = os.path.join(output_dir if output_dir else path, level_name)
    os.makedirs(output_path, exist_ok=True)

    failures = 0
    for index, texture in enumerate(vfx.textures):
        format_name = FormatInfo.name(texture.format)
        texture_path = os.path.join(output_path, "{}_{}.png".format(index, format_name))

        try:
            image = to_image(texture)
        except VfxError as e:
            if strict:
                raise
            print(
                "Failed to decode texture #{} ({}) in: {} ({})".format(
                    index, VfxGeometry(texture), filename, e
                )
            )
            failures += 1
            continue

        if image.width == 0 or image.height == 0:
            print("Skipping empty texture #{} in: {}".format(index, filename))
            failures += 1
            continue

        image.save(texture_path, "PNG")
        print(texture_path)

    return failures


if __name__ == "__main__":
    sys.exit(main())
