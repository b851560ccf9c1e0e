"""Minifier plugin backed by csscompressor."""

import csscompressor

from .base import BasePlugin
from ..core.stylesheet import Stylesheet


class MinifierPlugin(BasePlugin):
    """Compress a stylesheet.

    ``/*! ... */`` comments are kept unless ``removeAllComments`` is set.
    """

    name = 'minifier'

    def process(self, stylesheet: Stylesheet) -> Stylesheet:
        keep_comments = not self.settings.get('removeAllComments', False)
        css = csscompressor.compress(
            stylesheet.css,
            preserve_exclamation_comments=keep_comments,
        )
        self.log_debug(f"Minified {len(stylesheet.css)} -> {len(css)} characters")
        return Stylesheet(css, stylesheet.source)


# Exported class
__all__ = ['MinifierPlugin']
