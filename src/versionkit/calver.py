# SPDX-License-Identifier: MIT
"""Calendar version parsing, comparison and incrementing.

A CalVer format binds two or three structural slots (major, minor and an
optional micro) to format tokens, e.g. "YYYY.0M.MICRO":
- YYYY (2023), YY (23), 0Y (023): year
- MM (4), 0M (04): month
- WW (15), 0W (15): ISO-8601 week
- DD (9), 0D (09): day of the month
- MAJOR, MINOR, MICRO: plain counters

Any version may carry a trailing modifier chain such as "-build.3".
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field, replace
from enum import Enum
from functools import lru_cache
from typing import Iterable, Optional, Union

from .clock import Clock, SystemClock
from .errors import (
    DuplicateTokenError,
    FormatError,
    IncompatibleFormatError,
    InvalidArityError,
    InvalidVersionError,
    PrefixMismatchError,
    TokenNotInFormatError,
    UnknownTokenError,
)
from .modifiers import (
    Modifier,
    compare_modifiers,
    increment_modifier,
    modifier_key,
    modifiers_to_string,
    parse_modifiers,
)

logger = logging.getLogger(__name__)

DEFAULT_BUILD_MODIFIER = "build"

MODIFIER_PATTERN = r"(?:-(?P<modifier>[0-9A-Za-z_-]+(?:\.[0-9A-Za-z_-]+)*))?"


class FormatToken(str, Enum):
    """Tokens that may appear in a CalVer format."""

    YYYY = "YYYY"
    YY = "YY"
    ZERO_Y = "0Y"
    MM = "MM"
    ZERO_M = "0M"
    WW = "WW"
    ZERO_W = "0W"
    DD = "DD"
    ZERO_D = "0D"
    MAJOR = "MAJOR"
    MINOR = "MINOR"
    MICRO = "MICRO"

    @property
    def is_calendar(self) -> bool:
        """Return True if the token is derived from the current date."""
        return self not in _COUNTER_TOKENS

    @property
    def capture(self) -> str:
        """Return the regex fragment matching this token's digits."""
        return _CAPTURES[self]

    def render(self, value: int) -> str:
        """Format a stored slot value the way this token is written."""
        if self in _COUNTER_TOKENS:
            return str(value)
        if self is FormatToken.YYYY:
            return str(value).zfill(4)
        if self is FormatToken.ZERO_Y:
            return str(value % 1000).zfill(3)
        if self is FormatToken.YY:
            return str(value % 1000)
        if self in _PADDED_TOKENS:
            return str(value % 100).zfill(2)
        return str(value % 100)

    def current_value(self, clock: Clock) -> Optional[int]:
        """Return the clock's value for a calendar token, None for counters."""
        if self is FormatToken.YYYY:
            return clock.year()
        if self in (FormatToken.YY, FormatToken.ZERO_Y):
            return clock.year() % 1000
        if self in (FormatToken.MM, FormatToken.ZERO_M):
            return clock.month()
        if self in (FormatToken.WW, FormatToken.ZERO_W):
            return clock.week()
        if self in (FormatToken.DD, FormatToken.ZERO_D):
            # Day tokens always run one day ahead of the calendar
            return clock.day() + 1
        return None


_COUNTER_TOKENS = frozenset({FormatToken.MAJOR, FormatToken.MINOR, FormatToken.MICRO})
_PADDED_TOKENS = frozenset({FormatToken.ZERO_M, FormatToken.ZERO_W, FormatToken.ZERO_D})

_CAPTURES = {
    FormatToken.YYYY: r"[0-9]{4}",
    FormatToken.YY: r"[0-9]{1,3}",
    FormatToken.ZERO_Y: r"[0-9]{3}",
    FormatToken.MM: r"[0-9]{1,2}",
    FormatToken.ZERO_M: r"[0-9]{2}",
    FormatToken.WW: r"[0-9]{1,2}",
    FormatToken.ZERO_W: r"[0-9]{2}",
    FormatToken.DD: r"[0-9]{1,2}",
    FormatToken.ZERO_D: r"[0-9]{2}",
    FormatToken.MAJOR: r"[0-9]+",
    FormatToken.MINOR: r"[0-9]+",
    FormatToken.MICRO: r"[0-9]+",
}


class Slot(str, Enum):
    """Structural positions of a CalVer version core."""

    MAJOR = "major"
    MINOR = "minor"
    MICRO = "micro"


class CalVerIncrement(str, Enum):
    """Parts of a calendar version that can be incremented."""

    CALENDAR = "CALENDAR"
    MAJOR = "MAJOR"
    MINOR = "MINOR"
    MICRO = "MICRO"
    MODIFIER = "MODIFIER"

    @classmethod
    def _missing_(cls, value: object) -> Optional["CalVerIncrement"]:
        if isinstance(value, str):
            for member in cls:
                if member.value == value.upper():
                    return member
        return None


@dataclass(frozen=True, slots=True)
class CalVerFormat:
    """A compiled CalVer format.

    Two formats are equal when they bind the same tokens to the same slots.

    Attributes:
        major: Token of the major slot
        minor: Token of the minor slot
        micro: Token of the micro slot, None for two-slot formats
        slots: (slot, token) pairs in version order
        pattern: Compiled regex matching versions of this format
    """

    major: FormatToken
    minor: FormatToken
    micro: Optional[FormatToken] = None
    slots: tuple[tuple[Slot, FormatToken], ...] = field(init=False, repr=False, compare=False)
    pattern: re.Pattern = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        raw_tokens = [getattr(self, slot.value) for slot in Slot]
        template = ".".join(getattr(t, "value", str(t)) for t in raw_tokens if t is not None)
        if self.major is None or self.minor is None:
            raise InvalidArityError(template, len([t for t in raw_tokens if t is not None]))

        slots: list[tuple[Slot, FormatToken]] = []
        for slot in Slot:
            raw = getattr(self, slot.value)
            if raw is None:
                continue
            try:
                token = FormatToken(raw)
            except ValueError:
                raise UnknownTokenError(template, str(raw)) from None
            if any(token is existing for _, existing in slots):
                raise DuplicateTokenError(template, token.value)
            object.__setattr__(self, slot.value, token)
            slots.append((slot, token))

        captures = [f"(?P<{slot.value}>{token.capture})" for slot, token in slots]
        object.__setattr__(self, "slots", tuple(slots))
        object.__setattr__(
            self, "pattern", re.compile("^" + r"\.".join(captures) + MODIFIER_PATTERN + "$")
        )

    def __str__(self) -> str:
        return ".".join(token.value for _, token in self.slots)

    def slot_for(self, token: FormatToken) -> Optional[Slot]:
        """Return the slot bound to ``token``, or None if the format lacks it."""
        matches = [slot for slot, bound in self.slots if bound is token]
        return matches[0] if len(matches) == 1 else None


@lru_cache(maxsize=128)
def compile_format(template: str) -> CalVerFormat:
    """Compile a CalVer format template such as "YYYY.0M.MICRO".

    Raises:
        InvalidArityError: If the template does not have 2 or 3 tokens
        UnknownTokenError: If a token is not a known format token
        DuplicateTokenError: If a token is used more than once

    Examples:
        >>> str(compile_format("YYYY.MINOR"))
        'YYYY.MINOR'
        >>> compile_format("YYYY.MINOR").micro is None
        True
    """
    if not isinstance(template, str):
        raise FormatError(str(template), f"CalVer format must be a string, got {type(template).__name__}")

    parts = template.split(".")
    if len(parts) not in (2, 3):
        raise InvalidArityError(template, len(parts))

    tokens: list[FormatToken] = []
    for part in parts:
        try:
            token = FormatToken(part)
        except ValueError:
            raise UnknownTokenError(template, part) from None
        if token in tokens:
            raise DuplicateTokenError(template, part)
        tokens.append(token)

    return CalVerFormat(*tokens)


def _as_format(fmt: Union[str, CalVerFormat]) -> CalVerFormat:
    return fmt if isinstance(fmt, CalVerFormat) else compile_format(fmt)


@dataclass(frozen=True, slots=True, eq=False)
class CalVer:
    """Represents a calendar version.

    Attributes:
        format: Format the version follows (a template string is compiled)
        major: Value of the major slot
        minor: Value of the minor slot
        micro: Value of the micro slot, None for two-slot formats
        modifiers: Trailing modifier chain (e.g., build.3)
        prefix: Optional literal rendered in front of the version
    """

    format: CalVerFormat
    major: int = 0
    minor: int = 0
    micro: Optional[int] = None
    modifiers: tuple[Modifier, ...] = ()
    prefix: Optional[str] = None

    def __post_init__(self) -> None:
        fmt = _as_format(self.format)
        object.__setattr__(self, "format", fmt)

        if self.micro is None and fmt.micro is not None:
            object.__setattr__(self, "micro", 0)
        elif self.micro is not None and fmt.micro is None:
            raise ValueError(f"CalVer format {fmt} has no micro slot")

        for slot, _ in fmt.slots:
            value = getattr(self, slot.value)
            if not isinstance(value, int) or value < 0:
                raise ValueError(f"{slot.value} must be a non-negative integer, got {value!r}")

        modifiers: Union[str, Iterable[Modifier]] = self.modifiers
        if isinstance(modifiers, str):
            modifiers = parse_modifiers(modifiers)
        object.__setattr__(self, "modifiers", tuple(modifiers))

    @classmethod
    def from_string(
        cls, fmt: Union[str, CalVerFormat], version: str, prefix: Optional[str] = None
    ) -> Optional["CalVer"]:
        """Parse a version string, returning None if it does not match the format.

        An invalid format still raises FormatError.

        Examples:
            >>> str(CalVer.from_string("YYYY.0M", "2023.04-rc.1"))
            '2023.04-rc.1'
            >>> CalVer.from_string("YYYY.0M", "2023.4") is None
            True
        """
        fmt = _as_format(fmt)
        try:
            return parse_calver(fmt, version, prefix)
        except InvalidVersionError:
            return None

    def __str__(self) -> str:
        """Return the version rendered according to its format."""
        cores = [token.render(getattr(self, slot.value)) for slot, token in self.format.slots]
        return f"{self.prefix or ''}{'.'.join(cores)}{modifiers_to_string(self.modifiers)}"

    def increment(
        self,
        kind: Union[str, CalVerIncrement],
        modifier: Optional[str] = None,
        *,
        clock: Optional[Clock] = None,
    ) -> "CalVer":
        """Return the next version for the given increment.

        - CALENDAR: move calendar slots to today. When the date moved, counter
          slots reset to 0 and modifiers are dropped. When it did not, the
          version is returned unchanged, or its ``modifier`` counter is bumped
          if one was requested.
        - MAJOR, MINOR, MICRO: bump the slot bound to that token and drop the
          modifiers; other slots keep their values.
        - MODIFIER: bump ``modifier`` (default "build") in the modifier chain.

        Args:
            kind: Part to increment
            modifier: Modifier identifier to bump
            clock: Source of the current date, the system clock if None

        Raises:
            TokenNotInFormatError: If MAJOR/MINOR/MICRO is not in the format
            ValueError: If kind is not a known increment
        """
        kind = CalVerIncrement(kind)

        if kind is CalVerIncrement.CALENDAR:
            return self._increment_calendar(modifier, clock or SystemClock())

        if kind is CalVerIncrement.MODIFIER:
            return replace(
                self,
                modifiers=increment_modifier(self.modifiers, modifier or DEFAULT_BUILD_MODIFIER),
            )

        slot = self.format.slot_for(FormatToken(kind.value))
        if slot is None:
            raise TokenNotInFormatError(kind.value, str(self.format))

        return replace(self, modifiers=(), **{slot.value: getattr(self, slot.value) + 1})

    def _increment_calendar(self, modifier: Optional[str], clock: Clock) -> "CalVer":
        updates = {}
        for slot, token in self.format.slots:
            value = token.current_value(clock)
            if value is not None:
                updates[slot.value] = value

        calendar = replace(self, **updates)
        if calendar.compare_to(self) == 0:
            if modifier is None:
                logger.debug("Calendar unchanged for %s", self)
                return self
            logger.debug("Calendar unchanged for %s, incrementing %s", self, modifier)
            return replace(self, modifiers=increment_modifier(self.modifiers, modifier))

        resets = {slot.value: 0 for slot, token in self.format.slots if not token.is_calendar}
        result = replace(calendar, modifiers=(), **resets)
        logger.debug("Calendar advanced: %s -> %s", self, result)
        return result

    def compare_to(self, other: "CalVer") -> int:
        """Compare with another version of the same format.

        Returns:
            -1 if self < other
            0 if self == other
            1 if self > other

        Resulting in the following ordering (taking YYYY.0M.MICRO as an
        example):

            2022.03.1 < 2022.11.1-alpha.1 < 2022.11.1-beta.1 < 2022.11.1 < 2023.01.1

        Raises:
            IncompatibleFormatError: If the formats differ
        """
        if self.format != other.format:
            raise IncompatibleFormatError(str(self.format), str(other.format))

        for attr in ("major", "minor"):
            val1 = getattr(self, attr)
            val2 = getattr(other, attr)
            if val1 != val2:
                return -1 if val1 < val2 else 1

        if self.micro is not None and other.micro is not None and self.micro != other.micro:
            return -1 if self.micro < other.micro else 1

        return compare_modifiers(self.modifiers, other.modifiers)

    def is_equal_to(self, other: "CalVer") -> bool:
        return self.compare_to(other) == 0

    def is_greater_than(self, other: "CalVer") -> bool:
        return self.compare_to(other) == 1

    def is_less_than(self, other: "CalVer") -> bool:
        return self.compare_to(other) == -1

    def sort_key(self) -> tuple:
        """Return a tuple ordering same-format versions like compare_to."""
        return (self.major, self.minor, self.micro or 0, modifier_key(self.modifiers))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CalVer):
            return NotImplemented
        return self.format == other.format and self.compare_to(other) == 0

    def __hash__(self) -> int:
        return hash((self.format, self.sort_key()))

    def __lt__(self, other: "CalVer") -> bool:
        if not isinstance(other, CalVer):
            return NotImplemented
        return self.compare_to(other) < 0

    def __le__(self, other: "CalVer") -> bool:
        if not isinstance(other, CalVer):
            return NotImplemented
        return self.compare_to(other) <= 0

    def __gt__(self, other: "CalVer") -> bool:
        if not isinstance(other, CalVer):
            return NotImplemented
        return self.compare_to(other) > 0

    def __ge__(self, other: "CalVer") -> bool:
        if not isinstance(other, CalVer):
            return NotImplemented
        return self.compare_to(other) >= 0


def parse_calver(
    fmt: Union[str, CalVerFormat], version_string: str, prefix: Optional[str] = None
) -> CalVer:
    """Parse a calendar version string.

    Args:
        fmt: Format template (e.g., "YYYY.MINOR") or a compiled CalVerFormat
        version_string: Version to parse (e.g., "2023.1-build.2")
        prefix: Literal the version must start with

    Returns:
        A CalVer object with parsed components

    Raises:
        FormatError: If the format template is invalid
        PrefixMismatchError: If prefix is given and the string lacks it
        InvalidVersionError: If the string does not match the format
    """
    fmt = _as_format(fmt)

    if not isinstance(version_string, str):
        raise InvalidVersionError(
            str(version_string), f"Version must be a string, got {type(version_string).__name__}"
        )

    version_string = version_string.strip()
    core = version_string
    if prefix is not None:
        if not version_string.startswith(prefix):
            raise PrefixMismatchError(version_string, prefix)
        core = version_string[len(prefix) :]

    match = fmt.pattern.match(core)
    if not match:
        raise InvalidVersionError(
            version_string, f"Version {version_string!r} does not match CalVer format {fmt}"
        )

    groups = match.groupdict()
    return CalVer(
        format=fmt,
        major=int(groups["major"]),
        minor=int(groups["minor"]),
        micro=int(groups["micro"]) if groups.get("micro") is not None else None,
        modifiers=parse_modifiers(groups["modifier"]),
        prefix=prefix,
    )


def is_valid_calver(
    fmt: Union[str, CalVerFormat], version_string: str, prefix: Optional[str] = None
) -> bool:
    """Check if a string is a valid calendar version for ``fmt``."""
    return CalVer.from_string(fmt, version_string, prefix) is not None
