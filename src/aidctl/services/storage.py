"""StorageService — bootstrap the on-disk storage layout."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

from aidctl.infrastructure.storage import init_storage
from aidctl.services.result import ServiceError, ServiceResult

if TYPE_CHECKING:
    from aidctl.config.settings import AidSettings


class StorageService:
    """Creates the ``[storage]`` root and its subdirectories."""

    def __init__(self, settings: AidSettings) -> None:
        self._settings = settings

    @property
    def root(self) -> Path:
        root = Path(self._settings.storage.root)
        if not root.is_absolute():
            root = self._settings.project_root / root
        return root

    def init_storage(self) -> ServiceResult:
        root = self.root
        try:
            created, existing = init_storage(root, self._settings.storage.subdirs)
        except (OSError, ValueError) as exc:
            return ServiceResult(
                ok=False,
                op="init_storage",
                error=ServiceError(
                    code="STORAGE_INIT_FAILED",
                    message=str(exc),
                    detail={"root": str(root)},
                ),
            )
        return ServiceResult(
            ok=True,
            op="init_storage",
            data={
                "root": str(root),
                "created": [str(p) for p in created],
                "existing": [str(p) for p in existing],
            },
        )
