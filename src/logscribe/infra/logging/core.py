from __future__ import annotations

"""
Diagnostics Logging Lifecycle.

Configures the ``logscribe`` logger namespace idempotently. Handlers sit
behind a QueueHandler/QueueListener pair so that diagnostics never block
the thread that emitted them.
"""

import atexit
import logging
import queue
from logging.handlers import QueueHandler, QueueListener
from typing import List, Optional

from logscribe.infra.logging.config import _LEVEL_MAP, LOGGER_NAMESPACE, LoggingConfig
from logscribe.infra.logging.handlers import (
    _create_rotating_file_handler,
    _create_stream_handler,
    _is_our_handler,
    _tag_handler,
)

_CONFIGURED_FLAG_ATTR: str = "_logscribe_configured"
_QUEUE_LISTENER_ATTR: str = "_logscribe_queue_listener"


# ==============================================================================
# PUBLIC API
# ==============================================================================

def configure_logging(cfg: LoggingConfig, *, force: bool = False) -> logging.Logger:
    """
    Attach diagnostics handlers to the ``logscribe`` logger.

    Repeated calls are no-ops unless ``force`` is set, in which case the
    previous handlers and listener are released first. If the queue
    infrastructure cannot be built, a plain stderr handler is installed
    instead so diagnostics are never lost silently.

    Args:
        cfg: Diagnostics settings.
        force: Re-create handlers even if already configured.

    Returns:
        logging.Logger: The configured package logger.
    """
    pkg_logger = logging.getLogger(LOGGER_NAMESPACE)

    if getattr(pkg_logger, _CONFIGURED_FLAG_ATTR, False) and not force:
        return pkg_logger

    try:
        return _install_queue_handlers(pkg_logger, cfg)
    except Exception:
        return _install_fallback_handler(pkg_logger)


def shutdown_logging() -> None:
    """Detach logscribe handlers and stop the listener, flushing pending records."""
    pkg_logger = logging.getLogger(LOGGER_NAMESPACE)
    _remove_our_handlers(pkg_logger)
    _stop_existing_listener(pkg_logger)
    pkg_logger.propagate = True
    setattr(pkg_logger, _CONFIGURED_FLAG_ATTR, False)


def get_logger(name: str) -> logging.Logger:
    """Return a named logger (usually ``__name__``) under the configured tree."""
    return logging.getLogger(name)


# ==============================================================================
# PRIVATE HELPERS
# ==============================================================================

def _install_queue_handlers(pkg_logger: logging.Logger, cfg: LoggingConfig) -> logging.Logger:
    """Route diagnostics through a QueueHandler drained by a background listener."""
    level_int = _parse_level(cfg.level)
    pkg_logger.setLevel(level_int)

    _remove_our_handlers(pkg_logger)
    _stop_existing_listener(pkg_logger)

    handlers_list: List[logging.Handler] = []
    if cfg.console:
        handlers_list.append(_create_stream_handler(level_int, logging.Formatter(cfg.console_fmt)))
    if cfg.log_file:
        fh = _create_rotating_file_handler(
            cfg.log_file,
            level_int,
            logging.Formatter(cfg.file_fmt, datefmt=cfg.datefmt),
            cfg.max_bytes,
            cfg.backup_count,
        )
        if fh:
            handlers_list.append(fh)

    if not handlers_list:
        return pkg_logger

    log_queue: queue.Queue[logging.LogRecord] = queue.Queue(-1)
    queue_handler = QueueHandler(log_queue)
    _tag_handler(queue_handler)

    listener = QueueListener(log_queue, *handlers_list, respect_handler_level=True)
    try:
        listener.start()
    except Exception:
        for h in handlers_list:
            h.close()
        raise

    pkg_logger.addHandler(queue_handler)
    pkg_logger.propagate = False

    setattr(pkg_logger, _QUEUE_LISTENER_ATTR, listener)
    setattr(pkg_logger, _CONFIGURED_FLAG_ATTR, True)

    # Flush pending diagnostics on interpreter shutdown
    atexit.register(_safe_stop_listener, listener)

    return pkg_logger


def _install_fallback_handler(pkg_logger: logging.Logger) -> logging.Logger:
    """Attach the emergency stderr handler after a failed configuration."""
    pkg_logger.setLevel(logging.INFO)
    _remove_our_handlers(pkg_logger)
    _stop_existing_listener(pkg_logger)

    sh = _create_stream_handler(
        logging.INFO,
        logging.Formatter("CRITICAL FALLBACK | %(levelname)s | %(message)s"),
    )
    pkg_logger.addHandler(sh)
    pkg_logger.propagate = False

    pkg_logger.warning("Diagnostics infrastructure failed. Switched to emergency console.")
    return pkg_logger


def _parse_level(level: str) -> int:
    if not level:
        return logging.WARNING
    return _LEVEL_MAP.get(str(level).strip().upper(), logging.WARNING)


def _remove_our_handlers(target: logging.Logger) -> None:
    for h in list(target.handlers):
        if _is_our_handler(h):
            target.removeHandler(h)
            h.close()


def _stop_existing_listener(target: logging.Logger) -> None:
    listener = getattr(target, _QUEUE_LISTENER_ATTR, None)
    if listener:
        _safe_stop_listener(listener)
        setattr(target, _QUEUE_LISTENER_ATTR, None)


def _safe_stop_listener(listener: Optional[QueueListener]) -> None:
    """Stop a listener, tolerating one that was already stopped."""
    if listener is None:
        return
    if getattr(listener, "_thread", None) is not None:
        listener.stop()
