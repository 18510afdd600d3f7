"""Pure step functions for the dispatch pipeline.

Public API: token parsing, argument classification and
console text rendering.
"""
from __future__ import annotations

from yacl.yacl_modules.steps.classify_arguments import (
    classify_arguments,
    required_argument_names,
)
from yacl.yacl_modules.steps.parse_arguments import (
    parse_argument_tokens,
    split_argument_token,
)
from yacl.yacl_modules.steps.render import (
    render_command_list,
    render_help,
    render_marked_list,
    render_usage,
)

__all__ = [
    "classify_arguments",
    "parse_argument_tokens",
    "render_command_list",
    "render_help",
    "render_marked_list",
    "render_usage",
    "required_argument_names",
    "split_argument_token",
]
