from __future__ import annotations

OK = 0
ERR_USAGE = 2
ERR_CONFIG = 3
ERR_CONTEXT = 4
ERR_VALIDATION = 5
ERR_SOURCE = 6
ERR_INTERNAL = 99
