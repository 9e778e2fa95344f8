"""Ready-made handlers that write captured groups into a settings object.

Instead of writing a closure per option, pass the object that holds the
parsed values (a dataclass, a SimpleNamespace, or a dict) and the name of
the field to set:

    Opt(r"--server=(.*)", "address of server", store(settings, "server"))
    Opt(r"--screen=([0-9]+)x([0-9]+)", "screen size",
        store_all(settings, ["width", "height"], convert=int))
"""

from collections.abc import MutableMapping


def _set(target, attr, value):
    if isinstance(target, MutableMapping):
        target[attr] = value
    else:
        setattr(target, attr, value)


def _get(target, attr):
    if isinstance(target, MutableMapping):
        return target[attr]
    return getattr(target, attr)


def store(target, attr, convert=str, group=0):
    """Handler: target.attr = convert(groups[group])."""
    def handler(groups):
        _set(target, attr, convert(groups[group]))
    return handler


def store_all(target, attrs, convert=str):
    """Handler: assign each captured group to the field at the same position."""
    attrs = list(attrs)

    def handler(groups):
        if len(groups) != len(attrs):
            raise ValueError(
                f"{len(groups)} group(s) captured but {len(attrs)} field(s) given")
        for attr, value in zip(attrs, groups):
            _set(target, attr, convert(value))
    return handler


def flag(target, attr, value=True):
    """Handler: target.attr = value, ignoring the groups."""
    def handler(groups):
        _set(target, attr, value)
    return handler


def append(target, attr, convert=str, group=0):
    """Handler: target.attr.append(convert(groups[group])) (repeatable options)."""
    def handler(groups):
        _get(target, attr).append(convert(groups[group]))
    return handler
