"""Separator policy configuration."""

from __future__ import annotations

import logging

from artistsplit.domain.separators import DEFAULT_POLICY, SeparatorPolicy

from .env import env_list

EXTRA_EXCEPTIONS_ENV = "ARTISTSPLIT_EXTRA_EXCEPTIONS"
EXTRA_SEPARATORS_ENV = "ARTISTSPLIT_EXTRA_SEPARATORS"

log = logging.getLogger(__name__)


def get_separator_policy(base: SeparatorPolicy = DEFAULT_POLICY) -> SeparatorPolicy:
    """Extend ``base`` with separators and exceptions from the environment."""

    exceptions = env_list(EXTRA_EXCEPTIONS_ENV)
    # separators are literal tokens; surrounding spaces are significant
    separators = env_list(EXTRA_SEPARATORS_ENV, strip=False)
    if not exceptions and not separators:
        return base
    log.info(
        "Extending separator policy: %d extra exceptions, %d extra separators",
        len(exceptions),
        len(separators),
    )
    return base.extended(separators=separators, exceptions=exceptions)
