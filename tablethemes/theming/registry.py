import pathlib
import sys
from typing import List, Sequence, Union

from tablethemes.exceptions import ThemeIndexOutOfRange
from tablethemes.theming.catalog import builtin_themes, load_themes
from tablethemes.theming.theme import ThemeDefinition

__all__ = [
    'CLEAR_THEME_INDEX',
    'ThemeRegistry',
]

# reserved selector meaning "clear the table"; never a catalog index
CLEAR_THEME_INDEX = sys.maxsize


class ThemeRegistry:
    r""" Lookup table mapping an index to an immutable ThemeDefinition. """

    def __init__(self, themes: Sequence[ThemeDefinition]):
        self._themes = tuple(themes)

    @classmethod
    def builtin(cls) -> "ThemeRegistry":
        return cls(builtin_themes())

    @classmethod
    def from_yaml(cls, fp: Union[str, pathlib.Path]) -> "ThemeRegistry":
        return cls(load_themes(fp))

    @property
    def count(self) -> int:
        return len(self._themes)

    def __len__(self):
        return len(self._themes)

    def get_theme(self, index: int) -> ThemeDefinition:
        r""" Get the theme at the given index.

        @param index: catalog index in [0, count)

        @raise ThemeIndexOutOfRange: if the index is outside of [0, count)
        """
        if index < 0 or index >= len(self._themes):
            raise ThemeIndexOutOfRange(index=index, count=len(self._themes))

        return self._themes[index]

    def names(self) -> List[str]:
        return [theme.name for theme in self._themes]
