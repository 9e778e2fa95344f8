"""Entry point for `python -m argmatch`."""

import sys


def _parse_cmd(tokens):
    """Show which option each token selects, in test_cases.txt format.

    Handlers are not called.
    """
    from argmatch.demo import Settings, build_options
    from argmatch.options import HELP_TOKEN, find_opt

    opts = build_options(Settings())
    for token in tokens:
        print(f"> {token}")
        if token == HELP_TOKEN:
            print("option: help")
            continue
        opt, groups = find_opt(token, opts)
        if opt is None:
            print("option: none")
            continue
        print(f"option: {opt.source}")
        for i, val in enumerate(groups, 1):
            if val is None:
                print(f"group{i}: none")
            else:
                print(f"group{i}: {val}")


if __name__ == "__main__" or not sys.argv[0]:
    if len(sys.argv) >= 3 and sys.argv[1] == "-parse":
        _parse_cmd(sys.argv[2:])
    else:
        from argmatch.demo import main
        sys.exit(main(sys.argv[1:]))
