"""
Runtime context — the single source of truth for "which paths does this process use."

The snapshot is set ONCE at startup by whichever entry point launches
the tool:

    - CLI:    main.py   → context.set_runtime_config(build_runtime_config(host))
    - Tests:  fixtures  → context.set_runtime_config(...) / reset_runtime_config()

Design notes:
    - Module-level singleton (not a class).  Simple, no over-engineering.
    - Resolvers never read from here; they take their inputs explicitly.
      Only downstream consumers (install, cache, link) do.
    - Thread-safe for reads (Python GIL + simple reference assignment).
"""

from __future__ import annotations

from typing import Optional

from yarnenv.core.models.runtime import RuntimeConfig


_runtime_config: Optional[RuntimeConfig] = None


def set_runtime_config(config: RuntimeConfig) -> None:
    """Register the runtime snapshot for the current process."""
    global _runtime_config
    _runtime_config = config


def get_runtime_config() -> Optional[RuntimeConfig]:
    """Return the runtime snapshot, or None if not yet set."""
    return _runtime_config


def require_runtime_config() -> RuntimeConfig:
    """Return the runtime snapshot, failing loudly if startup skipped it."""
    if _runtime_config is None:
        raise RuntimeError("Runtime config not initialised; call set_runtime_config() first")
    return _runtime_config


def reset_runtime_config() -> None:
    """Forget the snapshot (tests only)."""
    global _runtime_config
    _runtime_config = None
