"""IdService — generate, validate, and describe AIDs.

Wraps one :class:`AidGenerator` so every call made through the service
shares the same issued set. Domain exceptions become ``ServiceError``
codes here; nothing below this layer knows about ``ServiceResult``.
"""

from __future__ import annotations

import logging
import random
from collections.abc import Callable, Iterable
from typing import Any

from pydantic import ValidationError

from aidctl.config.models import IdsConfig
from aidctl.domain.errors import (
    ExhaustedIdentifierSpaceError,
    InvalidPrefixError,
    UnknownPrefixError,
)
from aidctl.domain.generator import AidGenerator
from aidctl.domain.ids import describe_prefix, extract_prefix
from aidctl.domain import registry
from aidctl.domain.types import EntityDescriptor
from aidctl.services.result import ServiceError, ServiceResult

logger = logging.getLogger(__name__)


def build_generator(config: IdsConfig) -> AidGenerator:
    """Create a generator from the ``[ids]`` config section."""
    rng = random.Random(config.seed) if config.seed is not None else None
    return AidGenerator(rng, max_attempts=config.max_attempts)


class IdService:
    """Service-layer entry point for identifier operations."""

    def __init__(self, generator: AidGenerator) -> None:
        self._generator = generator

    def generate(
        self,
        prefix: str,
        title: str,
        *,
        kind: str = "entity",
        status: str = "new",
        count: int = 1,
    ) -> ServiceResult:
        """Issue *count* identifiers for *prefix*."""
        op = "generate"
        if count < 1:
            return _error(op, "INVALID_COUNT", f"count must be at least 1, got {count}")
        try:
            descriptor = EntityDescriptor(prefix=prefix, title=title, kind=kind, status=status)
        except ValidationError as exc:
            return _error(op, "INVALID_DESCRIPTOR", _first_error(exc))
        return self._issue(op, prefix, descriptor, count)

    def generate_goal(self, title: str) -> ServiceResult:
        """Issue a goal identifier."""
        return self._issue_with(
            "generate_goal", "G", lambda: self._generator.generate_goal_id(title)
        )

    def generate_document(self, title: str) -> ServiceResult:
        """Issue a document identifier."""
        return self._issue_with(
            "generate_document", "A", lambda: self._generator.generate_document_id(title)
        )

    def validate(self, candidates: Iterable[str]) -> ServiceResult:
        """Check each candidate's format and report its entity type."""
        items: list[dict[str, Any]] = []
        for candidate in candidates:
            prefix = extract_prefix(candidate)
            items.append(
                {
                    "id": candidate,
                    "valid": prefix is not None,
                    "prefix": prefix.value if prefix else None,
                    "description": describe_prefix(prefix) if prefix else None,
                }
            )
        invalid = [item["id"] for item in items if not item["valid"]]
        data = {
            "items": items,
            "count": len(items),
            "valid_count": len(items) - len(invalid),
            "invalid_count": len(invalid),
        }
        if invalid:
            return ServiceResult(
                ok=False,
                op="validate",
                data=data,
                error=ServiceError(
                    code="INVALID_AID",
                    message=f"{len(invalid)} of {len(items)} identifiers are malformed",
                    detail={"invalid": invalid},
                ),
            )
        return ServiceResult(ok=True, op="validate", data=data)

    def describe(self, letter: str) -> ServiceResult:
        """Describe the entity type registered for *letter*."""
        try:
            description = registry.describe(letter)
        except UnknownPrefixError as exc:
            return _error("describe", "UNKNOWN_PREFIX", str(exc))
        return ServiceResult(
            ok=True, op="describe", data={"prefix": letter, "description": description}
        )

    def list_prefixes(self) -> ServiceResult:
        """Enumerate the full registry."""
        items = [
            {"prefix": prefix.value, "description": description}
            for prefix, description in registry.PREFIX_REGISTRY.items()
        ]
        return ServiceResult(
            ok=True, op="list_prefixes", data={"items": items, "count": len(items)}
        )

    # -- internals --

    def _issue(
        self, op: str, prefix: str, descriptor: EntityDescriptor, count: int
    ) -> ServiceResult:
        ids: list[str] = []
        try:
            for _ in range(count):
                ids.append(self._generator.generate(prefix, descriptor))
        except InvalidPrefixError as exc:
            return _error(op, "INVALID_PREFIX", str(exc))
        except ExhaustedIdentifierSpaceError as exc:
            logger.error("Identifier space exhausted for prefix %s", exc.prefix)
            return _error(
                op,
                "EXHAUSTED_ID_SPACE",
                str(exc),
                detail={"issued": ids, "attempts": exc.attempts},
            )
        data: dict[str, Any] = {
            "ids": ids,
            "prefix": prefix,
            "description": registry.describe(prefix),
            "title": descriptor.title,
        }
        if count == 1:
            data["id"] = ids[0]
        return ServiceResult(ok=True, op=op, data=data)

    def _issue_with(self, op: str, prefix: str, mint: Callable[[], str]) -> ServiceResult:
        try:
            aid = mint()
        except ValidationError as exc:
            return _error(op, "INVALID_DESCRIPTOR", _first_error(exc))
        except ExhaustedIdentifierSpaceError as exc:
            logger.error("Identifier space exhausted for prefix %s", exc.prefix)
            return _error(op, "EXHAUSTED_ID_SPACE", str(exc))
        return ServiceResult(
            ok=True,
            op=op,
            data={"id": aid, "prefix": prefix, "description": registry.describe(prefix)},
        )


def _error(
    op: str, code: str, message: str, *, detail: dict[str, Any] | None = None
) -> ServiceResult:
    return ServiceResult(
        ok=False,
        op=op,
        error=ServiceError(code=code, message=message, detail=detail or {}),
    )


def _first_error(exc: ValidationError) -> str:
    err = exc.errors()[0]
    field = ".".join(str(part) for part in err["loc"])
    return f"{field}: {err['msg']}" if field else err["msg"]
