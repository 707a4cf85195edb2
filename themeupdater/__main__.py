"""Entry point for `python -m themeupdater`."""

import sys


def main():
    from themeupdater.app import run_app
    sys.exit(run_app())


if __name__ == "__main__":
    main()
