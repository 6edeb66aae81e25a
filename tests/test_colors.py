"""Tests for style-to-terminal color translation and SGR encoding.

Covers the bright-color palette fallback and the color-choice policy.
"""

from __future__ import annotations

import unittest

from trelist import colors, styles


class ConvertColorTests(unittest.TestCase):
    def test_standard_named_colors_map_to_terminal_named_colors(self) -> None:
        for named in styles.STANDARD_COLORS:
            converted = colors.convert_color(named)
            self.assertIsInstance(converted, colors.TerminalNamedColor)
            self.assertEqual(converted.name, named.name)

    def test_bright_named_colors_fall_back_to_palette_indices(self) -> None:
        indices = [colors.convert_color(named) for named in styles.BRIGHT_COLORS]
        self.assertEqual(indices, [colors.Ansi256(i) for i in range(8, 16)])

    def test_rgb_and_fixed_pass_through(self) -> None:
        self.assertEqual(colors.convert_color(styles.Rgb(1, 2, 3)), colors.TerminalRgb(1, 2, 3))
        self.assertEqual(colors.convert_color(styles.Fixed(208)), colors.Ansi256(208))


class ConvertToColorSpecTests(unittest.TestCase):
    def test_missing_style_yields_none(self) -> None:
        self.assertIsNone(colors.convert_to_color_spec(None))

    def test_colors_and_flags_copy_through(self) -> None:
        style = styles.Style(
            foreground=styles.NamedColor.BRIGHT_CYAN,
            background=styles.Rgb(10, 20, 30),
            font_style=styles.FontStyle(bold=True, italic=True, underline=True),
        )
        spec = colors.convert_to_color_spec(style)
        self.assertEqual(
            spec,
            colors.TerminalColorSpec(
                foreground=colors.Ansi256(14),
                background=colors.TerminalRgb(10, 20, 30),
                bold=True,
                italic=True,
                underline=True,
            ),
        )

    def test_conversion_is_deterministic(self) -> None:
        style = styles.Style(foreground=styles.NamedColor.RED, font_style=styles.FontStyle(italic=True))
        self.assertEqual(colors.convert_to_color_spec(style), colors.convert_to_color_spec(style))

    def test_default_style_is_plain(self) -> None:
        spec = colors.convert_to_color_spec(styles.Style())
        self.assertIsNotNone(spec)
        self.assertTrue(spec.is_plain())


class SgrSequenceTests(unittest.TestCase):
    def test_named_foreground_with_bold(self) -> None:
        spec = colors.TerminalColorSpec(foreground=colors.TerminalNamedColor.BLUE, bold=True)
        self.assertEqual(colors.sgr_sequence(spec), "\033[0;1;34m")

    def test_palette_and_rgb_colors(self) -> None:
        spec = colors.TerminalColorSpec(foreground=colors.Ansi256(9), background=colors.TerminalRgb(1, 2, 3))
        self.assertEqual(colors.sgr_sequence(spec), "\033[0;38;5;9;48;2;1;2;3m")

    def test_italic_and_underline_are_independent(self) -> None:
        spec = colors.TerminalColorSpec(italic=True, underline=True)
        self.assertEqual(colors.sgr_sequence(spec), "\033[0;3;4m")


class ColorChoiceTests(unittest.TestCase):
    def test_always_and_never_ignore_environment(self) -> None:
        self.assertTrue(colors.should_colorize(colors.ColorChoice.ALWAYS, environ={"NO_COLOR": "1"}))
        self.assertFalse(colors.should_colorize(colors.ColorChoice.NEVER, environ={"TERM": "xterm"}))

    def test_auto_colors_without_a_tty(self) -> None:
        self.assertTrue(colors.should_colorize(environ={}))
        self.assertTrue(colors.should_colorize(environ={"TERM": "xterm"}))

    def test_auto_respects_no_color_and_dumb_terminal(self) -> None:
        self.assertFalse(colors.should_colorize(environ={"NO_COLOR": ""}))
        self.assertFalse(colors.should_colorize(environ={"TERM": "dumb"}))

    def test_normalize_color_choice_falls_back_to_auto(self) -> None:
        self.assertIs(colors.normalize_color_choice(" Always "), colors.ColorChoice.ALWAYS)
        self.assertIs(colors.normalize_color_choice("rainbow"), colors.ColorChoice.AUTO)
        self.assertIs(colors.normalize_color_choice(None), colors.ColorChoice.AUTO)


if __name__ == "__main__":
    unittest.main()
