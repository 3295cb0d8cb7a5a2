# -*- coding: utf-8 -*-
"""
Console + rotating file logging
ENV:
  LOG_LEVEL, LOG_DIR, LOG_FILE, LOG_MAX_BYTES, LOG_BACKUPS, LOG_CONSOLE
"""
from __future__ import annotations

import logging
import logging.handlers
import os
from dataclasses import dataclass
from typing import Optional, Tuple

from schemastore.core.env import load_env_chain

FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

_installed: list[logging.Handler] = []


def _get_env(key: str) -> Optional[str]:
    v = os.getenv(key)
    if v is None or not v.strip():
        return None
    return v.strip()


def _as_int(v: Optional[str], default: int) -> int:
    try:
        return int(v) if v is not None else default
    except ValueError:
        return default


# [ANCHOR:LOG_SETTINGS]
@dataclass
class LogSettings:
    level: int = logging.INFO
    log_dir: Optional[str] = None
    log_file: str = "schemastore.log"
    max_bytes: int = 10485760
    backups: int = 5
    console: bool = True

    @classmethod
    def from_env(cls) -> "LogSettings":
        base = cls()
        lvl = logging.getLevelName((_get_env("LOG_LEVEL") or "").upper())
        console = _get_env("LOG_CONSOLE")
        return cls(
            level=lvl if isinstance(lvl, int) else base.level,
            log_dir=_get_env("LOG_DIR"),
            log_file=_get_env("LOG_FILE") or base.log_file,
            max_bytes=_as_int(_get_env("LOG_MAX_BYTES"), base.max_bytes),
            backups=_as_int(_get_env("LOG_BACKUPS"), base.backups),
            console=base.console if console is None else console.lower() in ("1", "true", "on", "yes"),
        )


def setup_logging(env_paths: Optional[Tuple[str, ...]] = None) -> LogSettings:
    if env_paths is not None:
        load_env_chain(env_paths)
    cfg = LogSettings.from_env()

    fmt = logging.Formatter(FORMAT)
    root = logging.getLogger()
    root.setLevel(cfg.level)

    # re-running replaces our own handlers instead of stacking them
    for h in _installed:
        root.removeHandler(h)
        h.close()
    _installed.clear()

    if cfg.console:
        ch = logging.StreamHandler()
        ch.setFormatter(fmt)
        root.addHandler(ch)
        _installed.append(ch)

    if not cfg.log_dir:
        return cfg
    try:
        os.makedirs(cfg.log_dir, exist_ok=True)
        fh = logging.handlers.RotatingFileHandler(
            os.path.join(cfg.log_dir, cfg.log_file),
            maxBytes=cfg.max_bytes,
            backupCount=cfg.backups,
            encoding="utf-8",
        )
    except OSError as e:
        root.warning("[LOG] file handler init failed: %s", e)
        return cfg
    fh.setFormatter(fmt)
    root.addHandler(fh)
    _installed.append(fh)
    return cfg
