"""Template-based patterns for option tokens.

Converts templates like "--screen=$width[x]$height" into compiled regex,
so simple options can be declared without writing regex by hand.

Syntax:
    [alt1|alt2|alt3]  — matches any of the alternatives
    $name             — captures text into a named field (non-greedy)
    literal text      — matches literally (case-sensitive, whitespace included)

The same $name can appear in different alternatives of a [...] group;
each occurrence is its own capturing group, so a field matched in one
branch leaves the other branch's group as None.

Examples:
    >>> p = TemplatePattern("--server=$address")
    >>> p.match("--server=host:1")
    {'address': 'host:1'}
    >>> p = TemplatePattern("--[verbose|quiet]")
    >>> p.match("--quiet")
    {}
"""

import re


class TemplatePattern:
    """A compiled template pattern that can match a token and extract named fields."""

    def __init__(self, template, greedy=False):
        self.template = template
        self.regex, self._group_map = _compile(template, greedy)

    @property
    def fields(self):
        """Field names in capture order (repeats allowed)."""
        return [self._group_map[n] for n in sorted(self._group_map)]

    def match(self, token):
        """Match a whole token against this pattern. Returns dict of fields or None."""
        m = self.regex.fullmatch(token)
        if m is None:
            return None
        result = {}
        for group_num, field_name in self._group_map.items():
            value = m.group(group_num)
            if value is not None:
                result[field_name] = value
        return result

    def __repr__(self):
        return f"TemplatePattern({self.template!r})"


def template_regex(template, greedy=False):
    """Compile a template straight to a regex (for use as an Opt pattern)."""
    return _compile(template, greedy)[0]


# --- Compilation internals ---

class _Compiler:
    """Stateful compiler that tracks capturing group numbers."""

    def __init__(self, greedy=False):
        self.greedy = greedy
        self.group_count = 0
        self.group_map = {}  # group_number -> field_name

    def compile_template(self, template):
        """Compile a full template string. Returns (regex_str, group_map)."""
        return self._compile_fragment(template), self.group_map

    def _compile_fragment(self, fragment):
        parts = []
        i = 0
        s = fragment
        while i < len(s):
            if s[i] == '[':
                j = _closing_bracket(s, i)
                alts = _split_alternatives(s[i+1:j-1])
                alt_patterns = [self._compile_fragment(alt) for alt in alts]
                parts.append('(?:' + '|'.join(alt_patterns) + ')')
                i = j
            elif s[i] == '$':
                m = re.match(r'\$([a-zA-Z_]\w*)', s[i:])
                if m:
                    self.group_count += 1
                    self.group_map[self.group_count] = m.group(1)
                    capture = '.+' if self.greedy else '.+?'
                    parts.append(f'({capture})')
                    i += m.end()
                else:
                    parts.append(re.escape(s[i]))
                    i += 1
            else:
                parts.append(re.escape(s[i]))
                i += 1
        return ''.join(parts)


def _closing_bracket(s, start):
    """Index just past the ']' that closes the '[' at start."""
    depth = 1
    j = start + 1
    while j < len(s) and depth > 0:
        if s[j] == '[':
            depth += 1
        elif s[j] == ']':
            depth -= 1
        j += 1
    if depth:
        raise ValueError(f"unclosed '[' in template {s!r}")
    return j


def _split_alternatives(text):
    """Split on top-level | characters, respecting nested brackets."""
    alts = []
    depth = 0
    current = []
    for ch in text:
        if ch == '[':
            depth += 1
            current.append(ch)
        elif ch == ']':
            depth -= 1
            current.append(ch)
        elif ch == '|' and depth == 0:
            alts.append(''.join(current))
            current = []
        else:
            current.append(ch)
    alts.append(''.join(current))
    return alts


def _compile(template, greedy=False):
    """Compile a template string to a (compiled_regex, group_map) tuple."""
    compiler = _Compiler(greedy)
    pattern_str, group_map = compiler.compile_template(template)
    return re.compile(pattern_str), group_map


if __name__ == "__main__":
    tests = [
        ("--server=$address", "--server=host:1"),
        ("--screen=$w[x|X]$h", "--screen=800x600"),
        ("--[verbose|quiet]", "--quiet"),
        ("--level=$n", "--level"),
    ]
    for tmpl, token in tests:
        print(f"  {tmpl!r:25s} {token!r:20s} => {TemplatePattern(tmpl).match(token)}")
