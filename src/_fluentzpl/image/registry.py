import hashlib

from _fluentzpl.tokenizer import tokenize


def bitmap_key(mono):
    """
    :returns: A key identifying the bitmap contents, such that equal
        bitmaps give equal keys.
    """
    digest = hashlib.sha256()
    digest.update(f"{mono.width}x{mono.height}:".encode("ascii"))
    digest.update(mono.data)
    return digest.hexdigest()


class ImageRegistry:
    """
    Remembers which graphics have already been downloaded to the printer
    (by key, see bitmap_key) so that repeated images are only recalled.
    Unlike labels, registries are mutable and meant to be shared across
    the labels of one print job.
    """

    def __init__(self):
        self._names = {}

    def has(self, key):
        return key in self._names

    def get(self, key):
        """
        :returns: The graphic name stored for key, or None.
        """
        return self._names.get(key)

    def put(self, key, grf_name):
        self._names[key] = grf_name

    def recall_at(self, grf_name, at):
        """
        :param grf_name: The name of a downloaded graphic, ie. "R:LOGO.GRF".
        :param at: (x, y) position in dots.
        :returns: Tokens recalling the graphic at the position.
        """
        x, y = at
        return tokenize(f"^FO{x},{y}^XG{grf_name},1,1^FS")
