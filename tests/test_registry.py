import sys

import pytest

from tablethemes.exceptions import (
    InvalidThemeIndexError, ThemeIndexOutOfRange
)
from tablethemes.theming import (
    CLEAR_THEME_INDEX, ThemeDefinition, ThemeRegistry, resolve_theme
)


class TestThemeRegistry:

    def test_count(self, registry, themes):
        assert registry.count == len(themes) == len(registry)
        assert registry.names() == [t.name for t in themes]

    def test_get_theme(self, registry, themes):
        for idx, theme in enumerate(themes):
            assert registry.get_theme(idx) is theme

    @pytest.mark.parametrize("offset", [0, 1, 100])
    def test_index_past_end(self, registry, offset):
        with pytest.raises(ThemeIndexOutOfRange):
            registry.get_theme(registry.count + offset)

    @pytest.mark.parametrize("index", [-1, -5])
    def test_negative_index(self, registry, index):
        with pytest.raises(ThemeIndexOutOfRange) as exc_info:
            registry.get_theme(index)

        assert exc_info.value.index == index
        assert exc_info.value.count == registry.count

    def test_out_of_range_is_index_error(self, registry):
        with pytest.raises(IndexError):
            registry.get_theme(-1)

    def test_empty_registry(self):
        registry = ThemeRegistry([])

        assert registry.count == 0
        with pytest.raises(ThemeIndexOutOfRange):
            registry.get_theme(0)

    def test_builtin(self):
        registry = ThemeRegistry.builtin()

        assert registry.count > 0
        assert all(registry.names())


class TestResolveTheme:

    def test_clear_sentinel_is_outside_the_catalog(self, registry):
        assert CLEAR_THEME_INDEX == sys.maxsize
        assert CLEAR_THEME_INDEX >= registry.count

    def test_clear_sentinel_yields_all_unset_theme(self, registry):
        selection = resolve_theme(CLEAR_THEME_INDEX, registry)

        assert selection.clear
        assert selection.theme == ThemeDefinition.clear()

    def test_valid_index(self, registry, themes):
        selection = resolve_theme(1, registry)

        assert not selection.clear
        assert selection.theme is themes[1]

    @pytest.mark.parametrize("selector", [-1, 3, sys.maxsize - 1])
    def test_invalid_index(self, registry, selector):
        with pytest.raises(InvalidThemeIndexError) as exc_info:
            resolve_theme(selector, registry)

        assert exc_info.value.selector == selector
        assert exc_info.value.count == registry.count
        assert isinstance(exc_info.value.__cause__, ThemeIndexOutOfRange)
