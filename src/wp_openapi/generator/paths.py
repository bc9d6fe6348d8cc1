"""Route pattern conversion.

WordPress registers routes as regular expressions with named groups,
e.g. ``/wp/v2/posts/(?P<id>[\\d]+)``. Swagger wants ``/wp/v2/posts/{id}``.
"""

import re

from wp_openapi.generator.base import PathParameter

CAPTURE_GROUP = re.compile(r"\(\?P<([^>]+)>([^)]+)\)")


def rewrite_path(path: str) -> str:
    """Replace every ``(?P<name>regex)`` group with ``{name}``.

    Text outside the groups, including a malformed group, is kept as is.
    """
    return CAPTURE_GROUP.sub(r"{\1}", path)


def extract_path_parameters(path: str) -> list[PathParameter]:
    """List the capture groups of a WordPress route pattern, in order.

    A group whose regex uses ``\\d`` is an integer, anything else a string.
    """
    params = []
    for match in CAPTURE_GROUP.finditer(path):
        name, pattern = match.group(1), match.group(2)
        if "\\d" in pattern:
            params.append(PathParameter(name=name, type="integer", format="int64"))
        else:
            params.append(PathParameter(name=name, type="string"))
    return params
