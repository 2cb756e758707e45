"""
ResolvedDirectories — the canonical state directories for one host.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, model_validator


class ResolvedDirectories(BaseModel):
    """Absolute paths produced by the directory resolver.

    ``link_registry_directory`` and ``global_module_directory`` always live
    under ``config_directory``; ``cache_directory_candidates`` is ordered
    most-preferred first and always ends with a temp-dir fallback.
    """

    model_config = ConfigDict(frozen=True)

    config_directory: str
    cache_directory_candidates: tuple[str, ...]
    link_registry_directory: str
    global_module_directory: str
    fallback_global_prefix: str
    posix_global_prefix: str

    @model_validator(mode="after")
    def _check_layout(self) -> ResolvedDirectories:
        if not self.cache_directory_candidates:
            raise ValueError("cache_directory_candidates must not be empty")
        for name in ("link_registry_directory", "global_module_directory"):
            if not getattr(self, name).startswith(self.config_directory):
                raise ValueError(f"{name} must be inside config_directory")
        return self

    @property
    def preferred_cache_directory(self) -> str:
        """First cache candidate; callers still have to probe it."""
        return self.cache_directory_candidates[0]

    def to_dict(self) -> dict:
        return {
            "config_directory": self.config_directory,
            "cache_directory_candidates": list(self.cache_directory_candidates),
            "link_registry_directory": self.link_registry_directory,
            "global_module_directory": self.global_module_directory,
            "fallback_global_prefix": self.fallback_global_prefix,
            "posix_global_prefix": self.posix_global_prefix,
        }
