"""Basic PixelPick usage examples.

Run directly with:
    python examples/basic_usage.py
"""
from pixelpick import (
    ColorHistory,
    ColorWheel,
    FormatOptions,
    NormalizedColor,
    Preferences,
    PreferenceKey,
    format_color,
    parse_hex,
)


def demonstrate_formatting() -> None:
    # Same color, every combination of the two switches.
    accent = NormalizedColor(1.0, 0.5, 0.25)
    for uppercase in (False, True):
        for legacy in (False, True):
            options = FormatOptions(uppercase_hex=uppercase, legacy_syntax=legacy)
            formatted = format_color(accent, options)
            print(f"uppercase={uppercase!s:5} legacy={legacy!s:5}", formatted.hex, formatted.rgb, formatted.hsl)

    print("Parsed back:", parse_hex("#FF8040"))


def demonstrate_wheel_and_history() -> None:
    wheel = ColorWheel(280, 280)
    history = ColorHistory()

    # Drag across the wheel and keep what was picked.
    for x, y in [(250, 140), (140, 250), (60, 100)]:
        picked = wheel.color_at(x, y)
        if picked is not None:
            history.add(picked)

    print("Recent:", history)
    print("Selector for most recent:", wheel.selector_position(history.most_recent))


def demonstrate_preferences() -> None:
    prefs = Preferences(appearance_sink=lambda appearance: print("Appearance ->", appearance.value))
    prefs.set(PreferenceKey.UPPERCASE_HEX, True)
    prefs.set(PreferenceKey.ENABLE_DARK_MODE, True)
    print("Hex with preferences:", format_color((0.0, 0.5, 1.0), prefs.format_options()).hex)


if __name__ == "__main__":
    demonstrate_formatting()
    demonstrate_wheel_and_history()
    demonstrate_preferences()
