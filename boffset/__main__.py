"""Allow ``python -m boffset``."""

from boffset.cli import run

if __name__ == "__main__":
    run()
