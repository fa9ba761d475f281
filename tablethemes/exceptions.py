__all__ = [
    "InvalidThemeIndexError",
    "NoTableSelectedError",
    "ThemeIndexOutOfRange",
    "ThemeDefinitionError",
    "UnsupportedTableLayoutError",
]


class InvalidThemeIndexError(Exception):
    r"""Raised when the theme selector is neither a valid catalog index nor the
    clear sentinel. Nothing has been mutated when this error is raised.
    """

    def __init__(self, selector: int, count: int):
        self.selector = selector
        self.count = count
        super().__init__(
            f"Invalid theme index {selector}; expected a value in "
            f"[0, {count}) or the clear sentinel."
        )

    def __repr__(self):
        return f"InvalidThemeIndexError(" \
               f"selector={self.selector}, count={self.count}" \
               f")"


class NoTableSelectedError(Exception):
    r"""Raised when no table matched the selection."""
    pass


class ThemeIndexOutOfRange(IndexError):
    r"""Raised by the theme registry when a lookup index is outside of
    [0, count)."""

    def __init__(self, index: int, count: int):
        self.index = index
        self.count = count
        super().__init__(f"Theme index {index} out of range [0, {count}).")

    def __repr__(self):
        return f"ThemeIndexOutOfRange(index={self.index}, count={self.count})"


class ThemeDefinitionError(ValueError):
    r"""Raised when a theme definition is malformed, e.g. an invalid color
    value, a rainbow fill on a field which only accepts solid colors, or an
    unknown theme key."""
    pass


class UnsupportedTableLayoutError(Exception):
    r"""Raised when the layout of a host table cannot be mapped to a
    rectangular grid of cells."""

    def __init__(self, msg: str):
        self.msg = msg
        super().__init__(msg)

    def __repr__(self):
        return f"UnsupportedTableLayoutError(msg={self.msg})"
