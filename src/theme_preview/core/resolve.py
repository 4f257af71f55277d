"""Path normalization and ordered candidate lists for template lookups.

Lookups walk a candidate list in order and stop at the first path present in
the VFS, so the order of every list below is part of the contract.
"""

LIQUID_SUFFIX = ".liquid"
TEMPLATES_PREFIX = "templates/"
LAYOUT_PREFIX = "layout/"
SNIPPETS_PREFIX = "snippets/"
SECTIONS_PREFIX = "sections/"
DEFAULT_LAYOUT_NAME = "theme.liquid"


def normalize_template_path(template: str) -> str:
    """Map a user supplied template reference onto a VFS path.

    ``index`` -> ``templates/index.liquid``, ``index.liquid`` ->
    ``templates/index.liquid``, ``templates/product`` ->
    ``templates/product.liquid``. Already normalized paths are returned
    unchanged.
    """
    if "/" not in template and "." not in template:
        return f"{TEMPLATES_PREFIX}{template}{LIQUID_SUFFIX}"
    if "/" not in template:
        return f"{TEMPLATES_PREFIX}{template}"
    if not template.endswith(LIQUID_SUFFIX):
        return f"{template}{LIQUID_SUFFIX}"
    return template


def template_candidates(template: str) -> list[str]:
    path = normalize_template_path(template)
    if path.startswith(TEMPLATES_PREFIX):
        return [path, path[len(TEMPLATES_PREFIX) :]]
    return [path, f"{TEMPLATES_PREFIX}{path}"]


def include_candidates(name: str) -> list[str]:
    """Candidates for an ``include``/``render``/``section`` reference, in lookup order.

    Each location is tried with the name as written before ``.liquid`` is
    appended, so non-Liquid snippets such as ``icon.svg`` still resolve.
    """
    path = name[1:] if name.startswith("/") else name
    candidates: list[str] = []
    for base in (path, f"{SNIPPETS_PREFIX}{path}", f"{SECTIONS_PREFIX}{path}"):
        candidates.append(base)
        if not base.endswith(LIQUID_SUFFIX):
            candidates.append(f"{base}{LIQUID_SUFFIX}")
    return candidates


def section_path(name: str) -> str:
    path = name if name.startswith(SECTIONS_PREFIX) else f"{SECTIONS_PREFIX}{name}"
    return path if path.endswith(LIQUID_SUFFIX) else f"{path}{LIQUID_SUFFIX}"
