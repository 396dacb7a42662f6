# wolfram_query/query_api/decoder/template.py
"""Expansion of Wolfram|Alpha assumption templates.

Templates arrive from the API with ``${name}`` placeholders, e.g.
``Assuming "${word}" is ${desc1}. Use as ${desc2} instead``. The text between
``${`` and the next ``}`` is the placeholder name, taken verbatim; it is never
evaluated. Each template is turned into a jinja2 tree of literal text and
plain variable lookups and compiled once in a sandboxed environment.
"""

import re
from collections.abc import Mapping
from functools import lru_cache
from typing import Any

from jinja2 import Template, nodes
from jinja2.sandbox import SandboxedEnvironment

from wolfram_query.query_api.errors import RenderError

PLACEHOLDER_START = "${"
PLACEHOLDER_END = "}"

_PLACEHOLDER = re.compile(re.escape(PLACEHOLDER_START) + r"([^}]*)" + re.escape(PLACEHOLDER_END))

_ENV = SandboxedEnvironment(autoescape=False)


@lru_cache(maxsize=256)
def _compile(template: str) -> tuple[Template, dict[str, str]]:
    """Compile ``template`` and return it with the variable bound to each placeholder name."""
    variables: dict[str, str] = {}
    body: list[nodes.Expr] = []
    # split() alternates literal text and placeholder names
    for i, part in enumerate(_PLACEHOLDER.split(template)):
        if i % 2:
            variable = variables.setdefault(part, f"placeholder_{len(variables)}")
            body.append(nodes.Name(variable, "load", lineno=1))
        elif PLACEHOLDER_START in part:
            raise RenderError(f"invalid assumption template {template!r}: unterminated placeholder")
        elif part:
            body.append(nodes.TemplateData(part, lineno=1))

    tree = nodes.Template([nodes.Output(body, lineno=1)], lineno=1)
    tree.set_environment(_ENV)
    return _ENV.from_string(tree), variables


def render_template(template: str, mapping: Mapping[str, Any]) -> str:
    """Replace every ``${name}`` in ``template`` with ``str(mapping[name])``.

    Placeholders missing from ``mapping`` render as an empty string and extra
    keys are ignored. Substituted text is emitted as-is, never re-expanded.
    """
    if not template:
        return ""
    compiled, variables = _compile(template)
    values = {str(k): v for k, v in mapping.items()}
    return compiled.render({variable: values[name] for name, variable in variables.items() if name in values})
