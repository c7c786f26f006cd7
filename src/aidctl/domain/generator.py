"""AID generation with per-instance uniqueness.

INVARIANT: An ``AidGenerator`` never returns the same identifier twice.
Uniqueness comes from the issued set, not from timestamps, so it holds
for back-to-back calls with identical arguments. The set lives only as
long as the instance; construct a fresh generator for an empty one.
"""

from __future__ import annotations

import logging
import random
import threading

from aidctl.domain.errors import ExhaustedIdentifierSpaceError, InvalidPrefixError
from aidctl.domain.ids import SUFFIX_ALPHABET, SUFFIX_LENGTH
from aidctl.domain.registry import Prefix, is_registered_prefix, registered_prefixes
from aidctl.domain.types import EntityDescriptor

logger = logging.getLogger(__name__)

DEFAULT_MAX_ATTEMPTS = 4096


class AidGenerator:
    """Mints ``<prefix>-<suffix>`` identifiers unique to this instance.

    Args:
        rng: Random source for suffix draws. Defaults to a fresh
            OS-seeded :class:`random.Random`. Inject a seeded instance
            for reproducible output in tests.
        max_attempts: Draws allowed per call before giving up with
            :class:`ExhaustedIdentifierSpaceError`.
        alphabet: Suffix symbols. Must be a non-empty subset of
            ``[a-z0-9]`` so every result stays a valid AID; narrowing it
            makes exhaustion reachable in tests.

    A single instance may be shared between threads: the membership
    check, retry loop, and insert run under one lock.
    """

    def __init__(
        self,
        rng: random.Random | None = None,
        *,
        max_attempts: int = DEFAULT_MAX_ATTEMPTS,
        alphabet: str = SUFFIX_ALPHABET,
    ) -> None:
        if max_attempts < 1:
            msg = f"max_attempts must be at least 1, got {max_attempts}"
            raise ValueError(msg)
        if not alphabet or not set(alphabet) <= set(SUFFIX_ALPHABET):
            msg = f"alphabet must be a non-empty subset of {SUFFIX_ALPHABET!r}, got {alphabet!r}"
            raise ValueError(msg)
        self._rng = rng if rng is not None else random.Random()
        self._max_attempts = max_attempts
        self._alphabet = "".join(sorted(set(alphabet)))
        self._issued: set[str] = set()
        self._lock = threading.Lock()

    @property
    def issued_count(self) -> int:
        """Number of identifiers issued by this instance."""
        with self._lock:
            return len(self._issued)

    def is_issued(self, aid: str) -> bool:
        """Return True if *aid* was issued by this instance."""
        with self._lock:
            return aid in self._issued

    def generate(self, prefix: str, descriptor: EntityDescriptor) -> str:
        """Issue a new identifier for *prefix*.

        Raises:
            InvalidPrefixError: *prefix* is not a registered uppercase letter.
            ExhaustedIdentifierSpaceError: No free identifier was found
                within ``max_attempts`` draws.
        """
        if not is_registered_prefix(prefix):
            raise InvalidPrefixError(prefix, registered_prefixes())

        head = f"{prefix.lower()}-"
        with self._lock:
            for _ in range(self._max_attempts):
                candidate = head + self._draw_suffix()
                if candidate in self._issued:
                    logger.debug("AID collision on %s, redrawing", candidate)
                    continue
                self._issued.add(candidate)
                break
            else:
                raise ExhaustedIdentifierSpaceError(str(prefix), self._max_attempts)

        logger.debug(
            "Issued %s for %s (%s/%s)",
            candidate,
            descriptor.title,
            descriptor.kind,
            descriptor.status,
        )
        return candidate

    def generate_goal_id(self, title: str) -> str:
        """Issue a ``G`` identifier for a goal."""
        descriptor = EntityDescriptor(
            prefix=Prefix.G.value, title=title, kind="goal", status="todo"
        )
        return self.generate(Prefix.G, descriptor)

    def generate_document_id(self, title: str) -> str:
        """Issue an ``A`` identifier for a document."""
        descriptor = EntityDescriptor(
            prefix=Prefix.A.value, title=title, kind="document", status="draft"
        )
        return self.generate(Prefix.A, descriptor)

    def _draw_suffix(self) -> str:
        return "".join(self._rng.choice(self._alphabet) for _ in range(SUFFIX_LENGTH))
