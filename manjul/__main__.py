"""
Allow running the package directly: python -m manjul
"""
import logging

from .app import run


def main():
    logging.basicConfig(level=logging.INFO, format="%(levelname)s: %(message)s")
    run()


if __name__ == "__main__":
    main()
