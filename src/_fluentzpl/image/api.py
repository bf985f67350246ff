"""
Builders for image fragments, positioned in the units of a
MeasurementContext.
"""

from _fluentzpl.image.encoder import (
    DitherMode,
    build_dg_and_recall,
    build_gf_at,
    mono_from_rgba,
    normalize_grf_name,
)
from _fluentzpl.image.registry import bitmap_key
from _fluentzpl.tokenizer import tokenize


def position_in_dots(context, at):
    x, y = at
    return context.to_dots(x), context.to_dots(y)


def build_image_inline_tokens(
    context,
    at,
    rgba,
    width,
    height,
    mode=DitherMode.THRESHOLD,
    threshold=None,
    invert=False,
):
    """
    Build tokens for a self contained ^GF image, ie.
    "^FO10,10^GFA,2,2,1,8040^FS".

    :param context: The MeasurementContext at is given in.
    :param at: (x, y) of the upper left corner.
    :param rgba: width * height * 4 interleaved RGBA values.
    :param width: Width in pixels.
    :param height: Height in pixels.
    """
    mono = mono_from_rgba(rgba, width, height, mode, threshold, invert)
    return tokenize(build_gf_at(position_in_dots(context, at), mono))


def build_image_cached_tokens(
    context,
    at,
    rgba,
    width,
    height,
    name,
    mode=DitherMode.THRESHOLD,
    threshold=None,
    invert=False,
    registry=None,
):
    """
    Build tokens that download the image as a graphic (~DG) and recall
    it (^XG) at the given position.

    When a registry is given and an identical bitmap has already been
    downloaded through it, only the recall is built.

    :param name: Graphic name, normalized with normalize_grf_name.
    :param registry: Optional ImageRegistry shared between labels.
    """
    mono = mono_from_rgba(rgba, width, height, mode, threshold, invert)
    position = position_in_dots(context, at)

    if registry is not None:
        key = bitmap_key(mono)
        if registry.has(key):
            return registry.recall_at(registry.get(key), position)
        registry.put(key, normalize_grf_name(name))

    download, recall = build_dg_and_recall(name, position, mono)
    return tokenize(download + recall)
