"""
User preferences for the color picker.

Values live in a caller-supplied mutable mapping under the camelCase
``UserDefaults`` key names; keys never written read as ``False``. Setters
write the value and then run the key's side effect synchronously, returning
whether that side effect succeeded. Formatting code never reads this object
directly: it receives a :class:`FormatOptions` snapshot from
:meth:`Preferences.format_options`.
"""
from __future__ import annotations

import warnings
from enum import Enum
from typing import Callable, Dict, MutableMapping, Optional, Union

from .types.format_type import FormatOptions


class PreferenceKey(str, Enum):
    SHOW_IN_MENU_BAR = "showInMenuBar"
    LAUNCH_AT_LOGIN = "launchAtLogin"
    STAY_ON_TOP = "stayOnTop"
    SHOW_COLOR_SAMPLER_ON_OPEN = "showColorSamplerOnOpen"
    UPPERCASE_HEX = "uppercaseHex"
    USE_LEGACY_SYNTAX = "useLegacySyntax"
    ENABLE_DARK_MODE = "enableDarkMode"
    DYNAMIC_COLOR_ADAPTATION = "dynamicColorAdaptation"


class Appearance(str, Enum):
    SYSTEM = "system"
    DARK = "dark"
    LIGHT = "light"


def resolve_appearance(dark_mode: bool, dynamic: bool) -> Appearance:
    """Following the system theme wins over the manual dark mode switch."""
    if dynamic:
        return Appearance.SYSTEM
    return Appearance.DARK if dark_mode else Appearance.LIGHT


LoginItemHook = Callable[[bool], None]
AppearanceHook = Callable[[Appearance], None]
KeyLike = Union[PreferenceKey, str]


class Preferences:
    """
    Boolean settings over a key-value store.

    Args:
        store: Mapping the values are read from and written to. A fresh dict
            when omitted.
        login_item: Called with the new value whenever ``launchAtLogin`` is
            set; registers or unregisters the login item.
        appearance_sink: Called with the resolved :class:`Appearance` whenever
            ``enableDarkMode`` or ``dynamicColorAdaptation`` is set.
    """

    def __init__(
        self,
        store: Optional[MutableMapping[str, bool]] = None,
        login_item: Optional[LoginItemHook] = None,
        appearance_sink: Optional[AppearanceHook] = None,
    ) -> None:
        self._store = {} if store is None else store
        self._login_item = login_item
        self._appearance_sink = appearance_sink
        self._effects: Dict[PreferenceKey, Callable[[], None]] = {
            PreferenceKey.LAUNCH_AT_LOGIN: self._apply_login_item,
            PreferenceKey.ENABLE_DARK_MODE: self._apply_appearance,
            PreferenceKey.DYNAMIC_COLOR_ADAPTATION: self._apply_appearance,
        }

    @staticmethod
    def _key(key: KeyLike) -> PreferenceKey:
        try:
            return PreferenceKey(key)
        except ValueError:
            raise KeyError(f"Unknown preference: {key!r}") from None

    def get(self, key: KeyLike) -> bool:
        return bool(self._store.get(self._key(key).value, False))

    def set(self, key: KeyLike, value: bool) -> bool:
        """
        Store ``value`` under ``key`` and run the key's side effect.

        Returns:
            False if the side effect raised (a RuntimeWarning is emitted and
            the stored value is kept), True otherwise.
        """
        pref = self._key(key)
        if not isinstance(value, bool):
            raise TypeError(f"{pref.value} expects a bool, got {type(value).__name__}")
        self._store[pref.value] = value

        effect = self._effects.get(pref)
        if effect is None:
            return True
        try:
            effect()
        except Exception as e:
            warnings.warn(f"Failed to apply {pref.value}={value}: {e}", RuntimeWarning)
            return False
        return True

    def apply(self) -> bool:
        """Run the appearance side effect for the stored values, as done at startup."""
        try:
            self._apply_appearance()
        except Exception as e:
            warnings.warn(f"Failed to apply appearance: {e}", RuntimeWarning)
            return False
        return True

    def _apply_login_item(self) -> None:
        if self._login_item is not None:
            self._login_item(self.launch_at_login)

    def _apply_appearance(self) -> None:
        if self._appearance_sink is not None:
            self._appearance_sink(self.appearance)

    # ------------------ READ-ONLY PROPERTIES ------------------
    @property
    def show_in_menu_bar(self) -> bool:
        return self.get(PreferenceKey.SHOW_IN_MENU_BAR)

    @property
    def launch_at_login(self) -> bool:
        return self.get(PreferenceKey.LAUNCH_AT_LOGIN)

    @property
    def stay_on_top(self) -> bool:
        return self.get(PreferenceKey.STAY_ON_TOP)

    @property
    def show_color_sampler_on_open(self) -> bool:
        return self.get(PreferenceKey.SHOW_COLOR_SAMPLER_ON_OPEN)

    @property
    def uppercase_hex(self) -> bool:
        return self.get(PreferenceKey.UPPERCASE_HEX)

    @property
    def use_legacy_syntax(self) -> bool:
        return self.get(PreferenceKey.USE_LEGACY_SYNTAX)

    @property
    def enable_dark_mode(self) -> bool:
        return self.get(PreferenceKey.ENABLE_DARK_MODE)

    @property
    def dynamic_color_adaptation(self) -> bool:
        return self.get(PreferenceKey.DYNAMIC_COLOR_ADAPTATION)

    @property
    def appearance(self) -> Appearance:
        return resolve_appearance(self.enable_dark_mode, self.dynamic_color_adaptation)

    def format_options(self) -> FormatOptions:
        return FormatOptions(
            uppercase_hex=self.uppercase_hex,
            legacy_syntax=self.use_legacy_syntax,
        )
