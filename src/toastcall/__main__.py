"""toastcall CLI entry."""

from __future__ import annotations

from toastcall.cli import app

if __name__ == "__main__":
    app()
