"""Option table matcher: matches each argv token against an ordered table of Opts.

For every token the first descriptor whose pattern fully matches wins and
its handler is called with the captured groups. "--help" and unrecognised
tokens make the parse fail and print a usage listing once at the end.

Example:
    server = ["localhost:10000"]
    ok = parse_cmd_line(["--server=host:1"], [
        Opt(r"--server=(.*)", "address of server to connect to",
            lambda g: server.__setitem__(0, g[0])),
    ])
"""

import os
import sys
from datetime import datetime

HELP_TOKEN = "--help"

# Request log; None disables it (set by the host program via set_log_path)
_log_path = None


def set_log_path(path):
    """Append a 2-line entry per token to this file. None turns logging off."""
    global _log_path
    _log_path = os.fspath(path) if path is not None else None


def _log_request(token, opt, groups):
    """Append a compact 2-line entry to the log file."""
    if _log_path is None:
        return
    ts = datetime.now().strftime("%Y-%m-%d %H:%M:%S")
    if opt is None:
        result_line = "  -> none"
    else:
        result_line = f"  -> {opt.source} groups={groups!r}"
    try:
        with open(_log_path, "a") as f:
            f.write(f"{ts} [argv]  {token}\n{result_line}\n")
    except OSError:
        pass


def find_opt(token, opts):
    """Return (opt, groups) for the first Opt matching token, or (None, None)."""
    for opt in opts:
        groups = opt.match(token)
        if groups is not None:
            return opt, groups
    return None, None


def usage(opts, prog):
    """Usage text: banner, one help line per Opt in table order, blank line."""
    lines = [f"Usage: {prog}"]
    lines.extend(opt.help_line for opt in opts)
    lines.append("")
    return "\n".join(lines) + "\n"


def parse_cmd_line(args, opts, prog=None):
    """Run every token in args through the option table.

    Args:
        args: Argument tokens, program name excluded. None means sys.argv[1:].
        opts: Ordered sequence of Opt; earlier entries win.
        prog: Program name for the usage banner. Defaults to sys.argv[0].

    Returns:
        False if "--help" was given or any token matched no Opt (usage is
        printed to stdout in that case), True otherwise.
    """
    if args is None:
        args = sys.argv[1:]
    if prog is None:
        prog = sys.argv[0] if sys.argv else ""
    opts = list(opts)

    show_usage = False
    for token in args:
        if token == HELP_TOKEN:
            show_usage = True
            continue

        opt, groups = find_opt(token, opts)
        _log_request(token, opt, groups)
        if opt is None:
            print(f"Unrecognised option: {token}", file=sys.stderr, flush=True)
            show_usage = True
        else:
            opt.handler(groups)

    if show_usage:
        sys.stdout.write(usage(opts, prog))
        sys.stdout.flush()

    return not show_usage


def parse_argv(argv, opts):
    """Like parse_cmd_line, but argv[0] is the program name."""
    argv = list(argv)
    if not argv:
        return parse_cmd_line([], opts, prog="")
    return parse_cmd_line(argv[1:], opts, prog=argv[0])
