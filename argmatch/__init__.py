"""argmatch — regex option tables for small command-line programs."""

from argmatch.options import (
    HELP_TOKEN, Opt, TemplatePattern, actions, find_opt, parse_argv,
    parse_cmd_line, set_log_path, template_regex, usage,
)

__version__ = "0.1.0"
