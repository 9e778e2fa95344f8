from argmatch.options.opt import Opt
from argmatch.options.matcher import (
    HELP_TOKEN, find_opt, parse_argv, parse_cmd_line, set_log_path, usage,
)
from argmatch.options.template import TemplatePattern, template_regex
from argmatch.options import actions
