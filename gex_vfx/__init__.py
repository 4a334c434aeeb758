# gex-vfx
# Copyright (C) 2026 The gex-vfx contributors

# This program is free software: you can redistribute it and/or modify it under
# the terms of the GNU General Public License as published by the Free Software
# Foundation, version 3.

# This program is distributed in the hope that it will be useful, but WITHOUT
# ANY WARRANTY; without even the implied warranty of MERCHANTABILITY or
# FITNESS FOR A PARTICULAR PURPOSE. See the GNU General Public License for more
# details.

# You should have received a copy of the GNU General Public License along with
# this program. If not, see <https://www.gnu.org/licenses/>.

from .files.vfx import (
    DataLengthMismatch,
    ParseError,
    UnsupportedFormat,
    Vfx,
    VfxError,
    VfxGeometry,
    VfxRgb,
    VfxTexture,
    VfxTextureFormat,
)
from .plugins.VfxImagePlugin import decompress, to_image

__version__ = "0.1.0"
