"""
Conversion of RGBA pixels to monochrome bitmaps, and encoding of
bitmaps as ^GF (inline graphic) and ~DG (downloaded graphic) commands.

Bitmaps use 1 for a black dot and 0 for white. Rows are packed with the
leftmost pixel in the most significant bit and padded to whole bytes.
"""

import re
import warnings
from dataclasses import dataclass
from enum import Enum, unique

import numpy as np


@unique
class DitherMode(Enum):
    NONE = "none"
    THRESHOLD = "threshold"
    FLOYD_STEINBERG = "fs"
    ORDERED = "ordered"


DEFAULT_THRESHOLD = 200

# 4x4 Bayer matrix
BAYER_4X4 = np.array(
    [
        [0, 8, 2, 10],
        [12, 4, 14, 6],
        [3, 11, 1, 9],
        [15, 7, 13, 5],
    ]
)


@dataclass(frozen=True)
class MonoBitmap:
    width: int
    height: int
    data: bytes
    bytes_per_row: int

    @property
    def total_bytes(self):
        return len(self.data)

    def hex(self):
        return self.data.hex().upper()


@dataclass(frozen=True)
class EncodedGraphic:
    hex: str
    total_bytes: int
    bytes_per_row: int
    command: str


def as_rgba_array(rgba, width, height):
    if isinstance(rgba, (bytes, bytearray, memoryview)):
        array = np.frombuffer(rgba, dtype=np.uint8)
    elif isinstance(rgba, np.ndarray):
        array = rgba
        if array.dtype != np.uint8:
            warnings.warn(
                f"casting pixel data of dtype {array.dtype} to uint8",
                stacklevel=3,
            )
            array = np.clip(array, 0, 255).astype(np.uint8)
    else:
        array = np.clip(np.asarray(rgba), 0, 255).astype(np.uint8)
    if array.size != width * height * 4:
        raise ValueError(
            f"Expected {width * height * 4} RGBA values for a {width}x{height}"
            f" image, got {array.size}"
        )
    return array.reshape(height, width, 4)


def luminance(rgba):
    """
    ITU-R BT.601 luma (0-255) of an RGBA array of shape (height, width, 4).
    """
    channels = rgba[..., :3].astype(np.int32)
    luma = (channels * np.array([299, 587, 114])).sum(axis=-1) // 1000
    return np.clip(luma, 0, 255).astype(np.uint8)


def binarize_threshold(lum, threshold):
    return (lum < threshold).astype(np.uint8)


def dither_floyd_steinberg(lum, threshold):
    buf = lum.astype(np.float32)
    height, width = buf.shape
    bits = np.zeros((height, width), dtype=np.uint8)
    for y in range(height):
        for x in range(width):
            old = buf[y, x]
            new = 255.0 if old >= threshold else 0.0
            bits[y, x] = 1 if new == 0.0 else 0
            err = old - new
            if x + 1 < width:
                buf[y, x + 1] += err * 7 / 16
            if y + 1 < height:
                if x > 0:
                    buf[y + 1, x - 1] += err * 3 / 16
                buf[y + 1, x] += err * 5 / 16
                if x + 1 < width:
                    buf[y + 1, x + 1] += err * 1 / 16
    return bits


def dither_ordered(lum, threshold):
    height, width = lum.shape
    pattern = np.tile(BAYER_4X4, ((height + 3) // 4, (width + 3) // 4))[:height, :width]
    thresholds = (pattern + 0.5) * 255 / 16
    return (lum.astype(np.float64) + (threshold - 127) < thresholds).astype(np.uint8)


def mono_from_rgba(
    rgba, width, height, mode=DitherMode.THRESHOLD, threshold=None, invert=False
):
    """
    Convert interleaved RGBA pixels to a monochrome bitmap.

    :param rgba: Sequence (or numpy array) of width * height * 4 values.
    :param width: Width in pixels.
    :param height: Height in pixels.
    :param mode: The DitherMode used for quantization.
    :param threshold: Luminance (0-255) below which a pixel is black,
        defaults to 200.
    :param invert: Whether to swap black and white.
    """
    mode = DitherMode(mode)
    if threshold is None:
        threshold = DEFAULT_THRESHOLD
    lum = luminance(as_rgba_array(rgba, width, height))

    if mode == DitherMode.FLOYD_STEINBERG:
        bits = dither_floyd_steinberg(lum, threshold)
    elif mode == DitherMode.ORDERED:
        bits = dither_ordered(lum, threshold)
    else:
        bits = binarize_threshold(lum, threshold)

    if invert:
        bits ^= 1

    packed = np.packbits(bits, axis=1) if width else np.zeros((height, 0), np.uint8)
    return MonoBitmap(
        width=width,
        height=height,
        data=packed.tobytes(),
        bytes_per_row=(width + 7) // 8,
    )


def normalize_grf_name(name):
    """
    Normalize a graphic name to DEVICE:NAME.GRF in upper case, ie.
    "logo" becomes "R:LOGO.GRF".
    """
    normalized = str(name).strip()
    if not re.match(r"^[A-Z]:", normalized, re.IGNORECASE):
        normalized = f"R:{normalized}"
    if not re.search(r"\.GRF$", normalized, re.IGNORECASE):
        normalized = f"{normalized}.GRF"
    return normalized.upper()


def encode_gf(mono):
    """
    :returns: EncodedGraphic with the ^GFA (ascii hex) command for the bitmap.
    """
    hex_data = mono.hex()
    total = mono.total_bytes
    return EncodedGraphic(
        hex=hex_data,
        total_bytes=total,
        bytes_per_row=mono.bytes_per_row,
        command=f"^GFA,{total},{total},{mono.bytes_per_row},{hex_data}",
    )


def encode_dg(name, mono):
    """
    :returns: Tuple of EncodedGraphic with the ~DG command downloading
        the bitmap under the normalized name, and the ^XG command
        recalling it.
    """
    grf_name = normalize_grf_name(name)
    hex_data = mono.hex()
    total = mono.total_bytes
    download = EncodedGraphic(
        hex=hex_data,
        total_bytes=total,
        bytes_per_row=mono.bytes_per_row,
        command=f"~DG{grf_name},{total},{mono.bytes_per_row},{hex_data}",
    )
    return download, recall_command(grf_name)


def recall_command(grf_name, magnification_x=1, magnification_y=1):
    return f"^XG{grf_name},{magnification_x},{magnification_y}"


def build_gf_at(at, mono):
    x, y = at
    return f"^FO{x},{y}{encode_gf(mono).command}^FS"


def build_dg_and_recall(name, at, mono):
    """
    :param at: (x, y) in dots of the recall field, or None for just
        the ^XG command.
    :returns: Tuple of the ~DG download and the recall.
    """
    download, recall = encode_dg(name, mono)
    if at is not None:
        x, y = at
        recall = f"^FO{x},{y}{recall}^FS"
    return download.command, recall
