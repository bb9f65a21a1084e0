# SPDX-License-Identifier: MIT
"""Modifier chains for pre-release and build suffixes.

A modifier chain is the dot-separated tail of a version, split into
identifier/counter pairs:
- alpha.1 -> (Modifier("alpha", 1, 1),)
- beta.01 -> (Modifier("beta", 1, 2),)
- alpha.beta.2 -> (Modifier("alpha", 0, 0), Modifier("beta", 2, 1))
- 0.3.7 -> three bare numeric modifiers
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Iterable, Optional


@dataclass(frozen=True, slots=True)
class Modifier:
    """One element of a modifier chain.

    Attributes:
        identifier: Text tag (e.g., "alpha", "build"), None for a bare number
        value: Numeric counter following the tag
        width: Digit count of the counter as written, 0 when there is none
    """

    identifier: Optional[str] = None
    value: int = 0
    width: int = 0

    def __str__(self) -> str:
        if self.identifier is None:
            return str(self.value)
        if self.width == 0:
            return self.identifier
        return f"{self.identifier}.{self.value}"


def _is_numeric(segment: str) -> bool:
    return segment.isascii() and segment.isdigit()


def parse_modifiers(text: Optional[str]) -> tuple[Modifier, ...]:
    """Parse a dot-separated modifier string into a chain.

    Args:
        text: Modifier text without the leading "-" (e.g., "rc.1"), or None

    Returns:
        The modifiers in order of appearance

    Examples:
        >>> parse_modifiers("alpha.1")
        (Modifier(identifier='alpha', value=1, width=1),)
        >>> parse_modifiers("")
        ()
    """
    modifiers: list[Modifier] = []
    pending: Optional[str] = None

    for segment in text.split(".") if text else ():
        if not _is_numeric(segment):
            if pending is not None:
                modifiers.append(Modifier(pending))
            pending = segment
        elif pending is None:
            modifiers.append(Modifier(None, int(segment), len(segment)))
        else:
            modifiers.append(Modifier(pending, int(segment), len(segment)))
            pending = None

    if pending is not None:
        modifiers.append(Modifier(pending))

    return tuple(modifiers)


def increment_modifier(modifiers: Iterable[Modifier], identifier: str) -> tuple[Modifier, ...]:
    """Bump the counter of the first modifier named ``identifier``.

    A modifier that is not present yet is appended with a counter of 1.

    Examples:
        >>> increment_modifier((), "alpha")
        (Modifier(identifier='alpha', value=1, width=1),)
    """
    chain = list(modifiers)
    for index, modifier in enumerate(chain):
        if modifier.identifier == identifier:
            value = modifier.value + 1
            chain[index] = replace(modifier, value=value, width=len(str(value)))
            return tuple(chain)

    chain.append(Modifier(identifier, 1, 1))
    return tuple(chain)


def compare_modifiers(left: Iterable[Modifier], right: Iterable[Modifier]) -> int:
    """Compare two modifier chains.

    Returns:
        -1 if left < right
        0 if left == right
        1 if left > right

    A shorter chain has higher precedence, so a version without modifiers is
    greater than one with modifiers (1.0.0 > 1.0.0-rc.1). Chains of equal
    length compare element by element: identifier first (ordinal, a bare
    number counts as ""), then the counter.
    """
    left = tuple(left)
    right = tuple(right)

    if len(left) != len(right):
        return 1 if len(left) < len(right) else -1

    for a, b in zip(left, right):
        a_id = a.identifier or ""
        b_id = b.identifier or ""
        if a_id != b_id:
            return -1 if a_id < b_id else 1
        if a.value != b.value:
            return -1 if a.value < b.value else 1

    return 0


def modifier_key(modifiers: Iterable[Modifier]) -> tuple:
    """Return a sort key ordering chains the same way as compare_modifiers."""
    chain = tuple(modifiers)
    # Negated length puts shorter chains last
    return (-len(chain), tuple((m.identifier or "", m.value) for m in chain))


def modifiers_to_string(modifiers: Iterable[Modifier]) -> str:
    """Render a modifier chain, including the leading "-".

    Examples:
        >>> modifiers_to_string((Modifier("alpha", 1, 1), Modifier("beta", 1, 1)))
        '-alpha.1.beta.1'
        >>> modifiers_to_string(())
        ''
    """
    elements = [str(modifier) for modifier in modifiers]
    return "-" + ".".join(elements) if elements else ""
