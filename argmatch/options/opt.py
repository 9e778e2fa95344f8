"""Option descriptor: one (pattern, help, handler) triple.

A table of these is passed to parse_cmd_line(). The matcher tries each
descriptor's pattern against a token and, on the first full match, calls
handler(groups) with the captured subgroups as a tuple.
"""

import re
from dataclasses import dataclass, field


@dataclass(frozen=True)
class Opt:
    pattern: object       # regex source string or compiled re.Pattern
    help: str
    handler: object       # callable(groups: tuple) -> None
    regex: re.Pattern = field(init=False, repr=False, compare=False)
    source: str = field(init=False, repr=False, compare=False)  # text shown in usage

    def __post_init__(self):
        if not callable(self.handler):
            raise TypeError(f"handler for {self.pattern!r} is not callable")
        if isinstance(self.pattern, re.Pattern):
            regex = self.pattern
        else:
            regex = re.compile(self.pattern)
        object.__setattr__(self, "regex", regex)
        object.__setattr__(self, "source", regex.pattern)

    @classmethod
    def from_template(cls, template, help, handler, greedy=False):
        """Build an Opt from a template like "--screen=$width[x]$height"."""
        from argmatch.options.template import template_regex
        opt = cls(template_regex(template, greedy), help, handler)
        object.__setattr__(opt, "source", template)
        return opt

    @property
    def help_line(self):
        return f"  {self.source}:\t{self.help}"

    def match(self, token):
        """Return the captured groups if the whole token matches, else None."""
        m = self.regex.fullmatch(token)
        if m is None:
            return None
        return m.groups()
