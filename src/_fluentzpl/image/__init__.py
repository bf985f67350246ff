from _fluentzpl.image.api import build_image_cached_tokens, build_image_inline_tokens
from _fluentzpl.image.encoder import (
    DitherMode,
    EncodedGraphic,
    MonoBitmap,
    build_dg_and_recall,
    build_gf_at,
    encode_dg,
    encode_gf,
    mono_from_rgba,
    normalize_grf_name,
)
from _fluentzpl.image.registry import ImageRegistry, bitmap_key

__all__ = [
    "DitherMode",
    "EncodedGraphic",
    "ImageRegistry",
    "MonoBitmap",
    "bitmap_key",
    "build_dg_and_recall",
    "build_gf_at",
    "build_image_cached_tokens",
    "build_image_inline_tokens",
    "encode_dg",
    "encode_gf",
    "mono_from_rgba",
    "normalize_grf_name",
]
