"""Module entrypoint for ``python -m termmouse``.

All argument parsing happens in ``termmouse.cli``.
"""

from .cli import main


if __name__ == "__main__":
    main()
