"""
Shell-style placeholders in the manifests: ``$NAME`` and ``${NAME}``.

This is intentionally not a templating engine. It only parameterizes
the manifests before they are applied (e.g. with a namespace name or
an image tag), in the same way as a shell would expand the variables:

* ``${NAME}`` -- any non-empty name up to the closing brace.
* ``$NAME`` -- the longest run of letters, digits, underscores.
* ``$0``..``$9``, ``$*``, ``$#``, ``$$``, ``$@``, ``$!``, ``$?``, ``$-`` --
  single-character special names, same as in the shell.

The unknown names are replaced with empty strings. Everything that does not
look like a placeholder (e.g. ``${}``, an unclosed ``${``, a trailing ``$``)
is kept as is. The substituted values are never expanded again.
"""
import re

from kubefix._cogs.helpers import typedefs

PLACEHOLDER = re.compile(r'''
    \$(?:
        \{(?P<braced>[^}]+)\}
      | (?P<special>[*#$@!?\-0-9])
      | (?P<named>[A-Za-z_][A-Za-z0-9_]*)
    )
''', re.VERBOSE)


def render(
        document: str,
        params: typedefs.TemplateParameters,
) -> str:
    """
    Substitute the placeholders in a single pass, with no recursion.

    Usage::

        kubefix.render("name: $NAME", {"NAME": "ns1"})  # "name: ns1"
        kubefix.render("name: $NAME", {})               # "name: "
    """
    def substitute(match: re.Match[str]) -> str:
        name = match.group('braced') or match.group('special') or match.group('named')
        return params.get(name, '')

    return PLACEHOLDER.sub(substitute, document)
