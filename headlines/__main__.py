"""Package command-line entrypoint.

Enables running the application with:

    python -m headlines

or, once installed (via the console-script declared in *pyproject.toml*), simply:

    headlines
"""

from __future__ import annotations

from .main import main


def _run() -> None:  # pragma: no cover - thin wrapper
    """Invoke :pyfunc:`headlines.main.main`."""

    main()


if __name__ == "__main__":  # pragma: no cover
    _run()
