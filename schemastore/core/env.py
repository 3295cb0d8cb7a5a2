# -*- coding: utf-8 -*-
"""
ENV chain loader for the logging settings
- precedence: os.environ > first file > later files (default: just .env)
- missing files are skipped; parsing is python-dotenv's
"""
from __future__ import annotations

import os
from typing import Dict, Tuple

from dotenv import dotenv_values


# [ANCHOR:ENV_LOADER]
def load_env_chain(paths: Tuple[str, ...] = (".env",)) -> Dict[str, str]:
    env: Dict[str, str] = dict(os.environ)

    # earlier files win; keys already set (and non-empty) are never overridden
    for p in paths:
        if not os.path.isfile(p):
            continue
        for k, v in dotenv_values(p).items():
            if v is None:
                continue
            if env.get(k) in (None, ""):
                os.environ[k] = v
                env[k] = v

    return env
