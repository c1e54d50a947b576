"""Optional project components and the template paths they own.

A component is a named slice of the template tree that is included or left
out as a unit. Every template path belongs to at most one component; paths
owned by no component are always generated.
"""

# Component name -> relative template path prefixes owned by that component.
# Declaration order is the preference order for the suggested run command.
COMPONENT_PATHS: dict[str, list[str]] = {
    "api": [
        "cmd/api",
        "internal/app/api",
        "internal/router/router_api",
    ],
    "admin": [
        "cmd/admin",
        "internal/app/admin",
        "internal/router/router_admin",
    ],
    "task": [
        "cmd/task",
        "internal/app/task",
    ],
}

DEFAULT_COMPONENTS = "api,admin,task"


def parse_components(value: str | None) -> set[str]:
    """Parse a comma-separated component list into a set of names.

    Whitespace around names is ignored and empty entries are dropped. Names
    are not checked against COMPONENT_PATHS.

    Examples:
        >>> sorted(parse_components(" api, task,,"))
        ['api', 'task']
        >>> parse_components("")
        set()
    """
    if not value:
        return set()
    return {name.strip() for name in value.split(",") if name.strip()}


def unknown_components(selected: set[str]) -> set[str]:
    """Return selected names that match no known component."""
    return {name for name in selected if name not in COMPONENT_PATHS}


def matches_prefix(rel_path: str, prefix: str) -> bool:
    """Check whether a relative template path belongs to a prefix.

    The path belongs to the prefix when it is the prefix itself, lies below
    it as a directory, or is a file named like the prefix plus an extension.

    Examples:
        >>> matches_prefix("cmd/api/main.go.tmpl", "cmd/api")
        True
        >>> matches_prefix("internal/router/router_api.go.tmpl", "internal/router/router_api")
        True
        >>> matches_prefix("cmd/apikeys", "cmd/api")
        False
    """
    return rel_path == prefix or rel_path.startswith(prefix + "/") or rel_path.startswith(prefix + ".")


def owning_component(rel_path: str) -> str | None:
    """Return the component owning a relative template path, if any."""
    for component, prefixes in COMPONENT_PATHS.items():
        if any(matches_prefix(rel_path, prefix) for prefix in prefixes):
            return component
    return None


def should_skip(rel_path: str, selected: set[str]) -> bool:
    """Check whether a template path belongs to a component that was not selected.

    Args:
        rel_path: Path relative to the template tree root, '/' separated
        selected: Selected component names

    Returns:
        True if the path (or, for directories, its whole subtree) must be skipped
    """
    for component, prefixes in COMPONENT_PATHS.items():
        if component in selected:
            continue
        for prefix in prefixes:
            if matches_prefix(rel_path, prefix):
                return True
    return False


def primary_component(selected: set[str]) -> str | None:
    """Return the first selected component in declaration order."""
    for component in COMPONENT_PATHS:
        if component in selected:
            return component
    return None
