"""kanaweather - current weather with furigana tooltips for status bars."""

__version__ = "0.1.0"
__logo__ = "☂"
