"""Demo program: a client with a server address, a flag, and a screen size.

Usage:
    python -m argmatch --server=host:1 --reverseFluxPolarity --screen=800x600
    python -m argmatch --help
"""

import sys
from dataclasses import dataclass

from argmatch.options import Opt, parse_cmd_line
from argmatch.options.actions import flag, store, store_all


def log(msg):
    print(msg, flush=True)


@dataclass
class Settings:
    server: str = "localhost:10000"
    reverse_flux_polarity: bool = False
    width: int = 1280
    height: int = 1024


def build_options(settings):
    """The option table for the demo, writing into settings."""
    return [
        Opt(r"--server=(.*)",
            "address of server to connect to",
            store(settings, "server")),
        Opt(r"--reverseFluxPolarity",
            "operate with flux polarity reversed",
            flag(settings, "reverse_flux_polarity")),
        Opt(r"--screen=([0-9]+)x([0-9]+)",
            "screen width and height in pixels",
            store_all(settings, ["width", "height"], convert=int)),
    ]


def main(argv=None):
    """Parse argv (program name excluded) and print the settings. Returns exit code."""
    if argv is None:
        argv = sys.argv[1:]
    settings = Settings()
    if not parse_cmd_line(argv, build_options(settings), prog="argmatch"):
        return 1

    log(f"server: {settings.server}")
    log(f"reverse flux polarity: {'on' if settings.reverse_flux_polarity else 'off'}")
    log(f"screen: {settings.width}x{settings.height}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
