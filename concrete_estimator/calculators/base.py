"""
Abstract base class for all reinforcement calculators.

Input: form fields dict from the caller (strings or numbers, blanks allowed)
Output: one of the frozen result models in schemas.py
"""

from abc import ABC, abstractmethod
from typing import Optional

from ..units import to_decimal_feet


class BaseCalculator(ABC):
    """All reinforcement calculators inherit from this."""

    kind = ""

    @abstractmethod
    def calculate(self, fields: dict):
        """
        Takes the raw form fields.
        Returns the calculator's result model.
        """
        pass

    # --- Helper methods for all calculators ---

    def _clean(self, value, *suffixes) -> str:
        s = str(value).strip().lower()
        for suffix in suffixes:
            if s.endswith(suffix):
                s = s[:-len(suffix)].strip()
        return s

    def parse_feet(self, value, default: float = 0.0) -> float:
        """Parse a feet value from user input. Handles '10', '10.5', "10'", '10 ft'."""
        if value is None or str(value).strip() == "":
            return default
        try:
            return float(self._clean(value, "'", "ft", "feet"))
        except (ValueError, TypeError):
            return default

    def parse_inches(self, value, default: float = 0.0) -> float:
        """Parse an inches value from user input. Handles '6', '6"', '6 in'."""
        if value is None or str(value).strip() == "":
            return default
        try:
            return float(self._clean(value, '"', "in", "inches"))
        except (ValueError, TypeError):
            return default

    def parse_int(self, value, default: int = 0) -> int:
        """Parse an integer from user input."""
        if value is None or str(value).strip() == "":
            return default
        try:
            return int(float(str(value).strip()))
        except (ValueError, TypeError, OverflowError):
            return default

    def parse_number(self, value, default: float = 0.0) -> float:
        """Parse a numeric value from user input."""
        if value is None or str(value).strip() == "":
            return default
        try:
            return float(str(value).strip())
        except (ValueError, TypeError):
            return default

    def parse_optional_inches(self, value) -> Optional[float]:
        """Blank → None so the calculator can apply its configured default."""
        return self.parse_inches(value, default=None)

    def parse_optional_int(self, value) -> Optional[int]:
        return self.parse_int(value, default=None)

    def parse_length_ft(self, fields: dict, key: str, default: float = 0.0) -> float:
        """
        Read a length in feet. Accepts either a single `key` value or the
        split entry `key_feet` / `key_inches` / `key_fraction`.
        """
        if fields.get(key) not in (None, ""):
            return self.parse_feet(fields.get(key), default)

        split_keys = (key + "_feet", key + "_inches", key + "_fraction")
        if not any(fields.get(k) not in (None, "") for k in split_keys):
            return default
        return to_decimal_feet(
            self.parse_number(fields.get(split_keys[0])),
            self.parse_number(fields.get(split_keys[1])),
            self.parse_number(fields.get(split_keys[2])),
        )

    def parse_choice(self, value, default: str = "") -> str:
        """Normalize a select-box value: 'Medium' → 'medium'."""
        if value is None or str(value).strip() == "":
            return default
        return str(value).strip().lower()

    def parse_geometry(self, fields: dict) -> dict:
        """Member dimensions present in the fields, parsed, for records."""
        geometry = {}
        for key in ("length", "width", "height"):
            if any(fields.get(k) not in (None, "") for k in (key, key + "_feet", key + "_inches")):
                geometry[key + "_ft"] = self.parse_length_ft(fields, key)
        if fields.get("thickness") not in (None, ""):
            geometry["thickness_in"] = self.parse_inches(fields.get("thickness"))
        return geometry

    def parse_cover(self, fields: dict) -> Optional[float]:
        """Concrete cover used by this calculator. None where cover doesn't apply."""
        return None

    def parse_manual_size(self, fields: dict):
        """Bar size chosen on the form, or None for automatic selection."""
        value = fields.get("bar_size") or fields.get("manual_size")
        if value is None or str(value).strip().lower() in ("", "auto", "automatic"):
            return None
        return value
