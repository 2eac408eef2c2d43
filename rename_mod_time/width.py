"""Terminal display width helpers for file names containing CJK characters."""


# CJK Unified Ideograph blocks as of Unicode 15.1, inclusive code point ranges.
# Each character in one of these blocks occupies two terminal cells.
CJK_UNIFIED_IDEOGRAPH_RANGES: tuple[tuple[int, int], ...] = (
    (0x4E00, 0x9FFF),  # basic block
    (0x3400, 0x4DBF),  # extension A
    (0x20000, 0x2A6DF),  # extension B
    (0x2A700, 0x2EE5F),  # extensions C, D, E, F, I
    (0x30000, 0x323AF),  # extensions G, H
    (0xF900, 0xFAFF),  # compatibility ideographs
)


def is_wide_char(char: str) -> bool:
    """Return True if the character falls in one of the CJK ideograph blocks."""
    if char.isascii():
        return False
    code_point = ord(char)
    return any(low <= code_point <= high for low, high in CJK_UNIFIED_IDEOGRAPH_RANGES)


def wide_char_offset(text: str) -> int:
    """Number of extra terminal cells taken by wide characters in `text`.

    Every wide character counts as one extra cell on top of its character count.
    Other non-ASCII characters are assumed to be single width.
    """
    return sum(1 for char in text if is_wide_char(char))
