"""
Shared Gate utilities for telehost.

Provides the patterns every Gate in the harness leans on:
- GateLogger: namespaced loggers under the "telehost" root
- GateErrorHandler: logging wrapper for stub collaborators
- build_health_status: standard health dict
"""

from __future__ import annotations

import logging
from functools import wraps
from typing import Any, Callable, Dict, List, Optional


# =============================================================================
# GateLogger - Unified logging for all Gates
# =============================================================================


class GateLogger:
    """
    Unified logging for all Gates.

    Each gate gets its own logger below the "telehost" root logger.
    """

    _loggers: Dict[str, logging.Logger] = {}
    _configured = False

    @classmethod
    def _ensure_configured(cls):
        """Attach a stream handler to the root telehost logger once."""
        if cls._configured:
            return

        root_logger = logging.getLogger("telehost")
        if not root_logger.handlers:
            handler = logging.StreamHandler()
            formatter = logging.Formatter(
                "[%(name)s] %(levelname)s: %(message)s"
            )
            handler.setFormatter(formatter)
            root_logger.addHandler(handler)
            root_logger.setLevel(logging.INFO)

        cls._configured = True

    @classmethod
    def get(cls, gate_name: str) -> logging.Logger:
        """
        Get a logger for a specific gate.

        Args:
            gate_name: Name of the gate (e.g., "ServiceGate.Binding")

        Returns:
            Logger instance for the gate
        """
        cls._ensure_configured()

        logger_name = f"telehost.{gate_name}"
        if logger_name not in cls._loggers:
            cls._loggers[logger_name] = logging.getLogger(logger_name)

        return cls._loggers[logger_name]

    @classmethod
    def set_level(cls, level: int | str, gate_name: Optional[str] = None):
        """
        Set logging level.

        Args:
            level: Logging level (e.g., logging.DEBUG or "DEBUG")
            gate_name: Specific gate to set level for, or None for all
        """
        if isinstance(level, str):
            resolved = logging.getLevelName(level.upper())
            if not isinstance(resolved, int):
                cls.get("GateLogger").warning(f"Ignoring unknown log level: {level!r}")
                return
            level = resolved
        if gate_name:
            cls.get(gate_name).setLevel(level)
        else:
            cls._ensure_configured()
            logging.getLogger("telehost").setLevel(level)


# =============================================================================
# GateErrorHandler - Unified error handling
# =============================================================================


class GateErrorHandler:
    """
    Error handling for the stub collaborators around the core.

    The service core never goes through here: its errors always propagate.
    """

    @staticmethod
    def handle(
        gate_name: str,
        operation: str,
        exception: Exception,
        default_return: Any = None,
        log_level: int = logging.ERROR,
    ) -> Any:
        """
        Log a failed stub operation and return its fallback value.

        Args:
            gate_name: Name of the gate
            operation: Operation that failed
            exception: The exception that occurred
            default_return: Value to return on error
            log_level: Logging level to use

        Returns:
            The default_return value
        """
        logger = GateLogger.get(gate_name)
        logger.log(log_level, f"{operation} failed: {exception}")
        return default_return

    @staticmethod
    def wrap(
        gate_name: str,
        operation: str,
        default_return: Any = None,
        log_level: int = logging.ERROR,
        reraise: bool = False,
    ):
        """
        Decorator for wrapping stub operations with error handling.

        Args:
            gate_name: Name of the gate
            operation: Operation name for logging
            default_return: Value to return on error
            log_level: Logging level to use
            reraise: Whether to re-raise the exception after logging

        Returns:
            Decorator function
        """
        def decorator(func: Callable) -> Callable:
            @wraps(func)
            def wrapper(*args, **kwargs):
                try:
                    return func(*args, **kwargs)
                except Exception as e:
                    GateErrorHandler.handle(
                        gate_name, operation, e, default_return, log_level
                    )
                    if reraise:
                        raise
                    return default_return
            return wrapper
        return decorator


# =============================================================================
# Health status
# =============================================================================


def build_health_status(
    gate_name: str,
    initialized: bool,
    dependencies: List[str],
    checks: Dict[str, bool],
    details: Optional[Dict[str, Any]] = None,
) -> Dict[str, Any]:
    """
    Build a standardized health status dict.

    Args:
        gate_name: Name of the gate
        initialized: Whether the gate is initialized
        dependencies: List of dependency names
        checks: Dict of check name -> passed
        details: Additional details

    Returns:
        Standardized health status dict
    """
    all_checks_passed = all(checks.values()) if checks else True

    return {
        "gate": gate_name,
        "healthy": initialized and all_checks_passed,
        "initialized": initialized,
        "dependencies": dependencies,
        "checks": checks,
        "details": details or {},
    }


def get_logger(gate_name: str) -> logging.Logger:
    """Shortcut for GateLogger.get()."""
    return GateLogger.get(gate_name)
