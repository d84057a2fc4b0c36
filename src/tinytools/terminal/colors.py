"""
ANSI color and text-attribute samples for the colors tool.

Every section builder returns the lines to print; nothing here writes to the
terminal, so the exact escape sequences can be checked directly.
"""

from enum import Enum
from typing import Iterable, List

ESC = "\x1b"
RESET = f"{ESC}[0m"
SAMPLE_TEXT = "Hello, World!"

FORMATS = [
    (1, "Bold"),
    (2, "Dim"),
    (3, "Italic"),
    (4, "Underline"),
    (5, "Blink"),
    (7, "Reverse"),
    (9, "Strikethrough"),
]

NAMED_RGB = [
    (255, 0, 0, "Red"),
    (0, 255, 0, "Green"),
    (0, 0, 255, "Blue"),
    (255, 255, 0, "Yellow"),
    (255, 0, 255, "Magenta"),
    (0, 255, 255, "Cyan"),
]


class Section(str, Enum):
    BASIC = "basic"
    EXTENDED = "extended"
    PALETTE_256 = "256"
    RGB = "rgb"
    FORMAT = "format"
    TEST = "test"


DEFAULT_SECTIONS = [Section.BASIC, Section.EXTENDED, Section.FORMAT]


def sgr(code) -> str:
    return f"{ESC}[{code}m"


def header(title: str) -> List[str]:
    return ["", title, "=" * len(title)]


def _swatch_row(label: str, first_code: int) -> str:
    cells = "".join(f"{sgr(code)} {code - first_code:02d} {RESET}" for code in range(first_code, first_code + 8))
    return f"{label}{cells}"


def basic_colors() -> List[str]:
    return header("Basic Colors (0-7)") + [
        _swatch_row("Foreground: ", 30),
        _swatch_row("Background: ", 40),
    ]


def extended_colors() -> List[str]:
    return header("Extended Colors (8-15)") + [
        _swatch_row("Foreground: ", 90),
        _swatch_row("Background: ", 100),
    ]


def _bg256(color: int) -> str:
    return f"{ESC}[48;5;{color}m {color:3d} {RESET}"


def _rows_of_eight(colors: Iterable[int]) -> List[str]:
    colors = list(colors)
    return ["".join(_bg256(c) for c in colors[i:i + 8]) for i in range(0, len(colors), 8)]


def palette_256() -> List[str]:
    lines = header("256 Color Mode")

    lines.append("Standard colors:")
    lines.extend(_rows_of_eight(range(16)))

    # 6x6x6 cube, one green/blue plane per block
    lines.append("")
    lines.append("Color cube:")
    for red in range(6):
        blocks = []
        for green in range(6):
            blocks.append("".join(_bg256(16 + 36 * red + 6 * green + blue) for blue in range(6)))
        lines.append(" ".join(blocks) + " ")

    lines.append("")
    lines.append("Grayscale:")
    lines.extend(_rows_of_eight(range(232, 256)))
    return lines


def _bg_rgb(r: int, g: int, b: int, label: str) -> str:
    return f"{ESC}[48;2;{r};{g};{b}m {label} {RESET}"


def rgb_colors() -> List[str]:
    lines = header("RGB Color Examples")

    for name, channel in (("Red", 0), ("Green", 1), ("Blue", 2)):
        lines.append(f"{name} gradient:")
        cells = []
        for i in range(8):
            value = i * 31
            rgb = [0, 0, 0]
            rgb[channel] = value
            cells.append(_bg_rgb(*rgb, f"{value:3d}"))
        lines.append("".join(cells))

    lines.append("")
    lines.append("Some RGB colors:")
    lines.append("".join(_bg_rgb(r, g, b, name) + " " for r, g, b, name in NAMED_RGB))
    return lines


def formatting() -> List[str]:
    lines = header("Text Formatting")
    for code, name in FORMATS:
        lines.append(f"{sgr(code)}{name:<15}{RESET} - \\x1b[{code}m")
    return lines


def style_samples() -> List[str]:
    lines = header("Test Patterns")
    text = SAMPLE_TEXT

    lines.append(f"{'Normal:':<17}{text}")
    styles = FORMATS[:6] + [(8, "Hidden"), (9, "Strikethrough")]
    for code, name in styles:
        suffix = " (hidden)" if code == 8 else ""
        lines.append(f"{name + ':':<17}{sgr(code)}{text}{RESET}{suffix}")

    lines.append("")
    lines.append("Color combinations:")
    for label, codes in (
        ("Red on White:", "31;47"),
        ("Blue on Yellow:", "34;43"),
        ("White on Blue:", "37;44"),
        ("Yellow on Red:", "33;41"),
    ):
        lines.append(f"{label:<17}{sgr(codes)}{text}{RESET}")
    return lines


SECTION_BUILDERS = {
    Section.BASIC: basic_colors,
    Section.EXTENDED: extended_colors,
    Section.PALETTE_256: palette_256,
    Section.RGB: rgb_colors,
    Section.FORMAT: formatting,
    Section.TEST: style_samples,
}


def render(sections: Iterable[Section]) -> List[str]:
    """
    Build the output for the requested sections in display order.
    No sections selects basic, extended and format.
    """
    wanted = set(sections) or set(DEFAULT_SECTIONS)
    lines = []
    for section in Section:
        if section in wanted:
            lines.extend(SECTION_BUILDERS[section]())
    return lines
