#!/usr/bin/env python3
"""Thin loader delegating CLI/TUI logic to the interface layer."""

import sys

from core.desktop.devtools.interface import gtd_app as _gtd_app

if __name__ != "__main__":
    # When imported, expose the full interface implementation directly.
    sys.modules[__name__] = _gtd_app
else:
    sys.exit(_gtd_app.main())
