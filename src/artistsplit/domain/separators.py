"""Known artist separators and the band names that must survive splitting.

Exact exceptions are compared against the case-folded input. Pattern
exceptions are an extension point evaluated only when no exact exception
matched; they never take part in substring protection.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Final

if TYPE_CHECKING:
    from collections.abc import Iterable

DEFAULT_SEPARATORS: Final[tuple[str, ...]] = (
    " feat. ",
    " ft. ",
    " featuring ",
    " / ",
    "/",
    ", ",
    " & ",
    "&",
    " and ",
    " x ",
    " X ",
)

DEFAULT_EXCEPTIONS: Final[frozenset[str]] = frozenset(
    {
        "simon & garfunkel",
        "hall & oates",
        "earth, wind & fire",
        "emerson, lake & palmer",
        "crosby, stills, nash & young",
        "peter, paul and mary",
        "blood, sweat & tears",
        "up, bustle and out",
        "me first and the gimme gimmes",
        "hootie & the blowfish",
        "katrina and the waves",
        "kc and the sunshine band",
        "martha and the vandellas",
        "gladys knight & the pips",
        "bob seger & the silver bullet band",
        "huey lewis and the news",
        "echo & the bunnymen",
        "tom petty and the heartbreakers",
        "bob marley & the wailers",
        "sly & the family stone",
        "bruce springsteen & the e street band",
        "diana ross & the supremes",
        "smokey robinson & the miracles",
        "joan jett & the blackhearts",
        "prince & the revolution",
        "derek & the dominos",
        "sergio mendes & brasil '66",
        "tyler, the creator",
        "panic! at the disco",
        "florence + the machine",
        "florence and the machine",
    }
)


def _casefold_all(values: Iterable[str]) -> frozenset[str]:
    return frozenset(value.strip().casefold() for value in values if value.strip())


def _protection_forms(values: Iterable[str]) -> tuple[str, ...]:
    """Texts searched for when protecting exceptions inside a longer string.

    Each exception is searched both as given and case-folded, since
    case-insensitive matching does not equate ``ß`` with ``ss``.
    """

    forms: dict[str, str] = {}
    for value in values:
        text = value.strip()
        if not text:
            continue
        for form in (text, text.casefold()):
            forms.setdefault(form.lower(), form)
    return tuple(sorted(forms.values(), key=lambda form: (-len(form), form)))


@dataclass(frozen=True, slots=True)
class SeparatorPolicy:
    """Static splitting configuration shared by every query."""

    separators: tuple[str, ...] = DEFAULT_SEPARATORS
    exceptions: frozenset[str] = DEFAULT_EXCEPTIONS
    exception_patterns: tuple[re.Pattern[str], ...] = ()
    _exceptions_longest_first: tuple[str, ...] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        if not self.separators:
            raise ValueError("SeparatorPolicy needs at least one separator")
        if any(not token for token in self.separators):
            raise ValueError("Separators must be non-empty strings")
        object.__setattr__(self, "_exceptions_longest_first", _protection_forms(self.exceptions))
        object.__setattr__(self, "exceptions", _casefold_all(self.exceptions))

    @property
    def exceptions_longest_first(self) -> tuple[str, ...]:
        return self._exceptions_longest_first

    @property
    def separators_longest_first(self) -> tuple[str, ...]:
        # stable sort keeps the configured order between equal lengths
        return tuple(sorted(dict.fromkeys(self.separators), key=len, reverse=True))

    def is_exception(self, text: str) -> bool:
        if text.casefold() in self.exceptions:
            return True
        return any(pattern.fullmatch(text) for pattern in self.exception_patterns)

    def extended(
        self,
        *,
        separators: Iterable[str] = (),
        exceptions: Iterable[str] = (),
        patterns: Iterable[str | re.Pattern[str]] = (),
    ) -> SeparatorPolicy:
        """Return a copy with extra entries appended after the existing ones."""

        compiled = tuple(
            pattern if isinstance(pattern, re.Pattern) else re.compile(pattern, re.IGNORECASE)
            for pattern in patterns
        )
        return SeparatorPolicy(
            separators=self.separators + tuple(separators),
            exceptions=frozenset(self._exceptions_longest_first).union(exceptions),
            exception_patterns=self.exception_patterns + compiled,
        )


DEFAULT_POLICY: Final[SeparatorPolicy] = SeparatorPolicy()
