"""
Component tree traversal.

A component can own children three ways: directly through ``components``,
through ``columns[*].components`` or through ``rows[*][*].components``.
Everything that walks a form tree goes through ``iter_components`` so the
three shapes are handled in one place.
"""

from typing import Any, Iterator


def _child_sequences(
    component: dict[str, Any], path: str
) -> Iterator[tuple[str, list[Any]]]:
    """Yield (path prefix, child list) for each nesting mechanism of a component."""
    children = component.get("components")
    if isinstance(children, list):
        yield path, children

    columns = component.get("columns")
    if isinstance(columns, list):
        for index, column in enumerate(columns):
            if isinstance(column, dict) and isinstance(column.get("components"), list):
                yield f"{path}.column_{index}", column["components"]

    rows = component.get("rows")
    if isinstance(rows, list):
        for row_index, row in enumerate(rows):
            if not isinstance(row, list):
                continue
            for cell_index, cell in enumerate(row):
                if isinstance(cell, dict) and isinstance(cell.get("components"), list):
                    yield f"{path}.row_{row_index}.cell_{cell_index}", cell["components"]


def _component_path(prefix: str, component: dict[str, Any], index: int) -> str:
    segment = component.get("key") or f"component_{index}"
    return f"{prefix}.{segment}" if prefix else str(segment)


def iter_components(schema: dict[str, Any]) -> Iterator[tuple[str, dict[str, Any]]]:
    """
    Walk every component of a schema depth-first, in document order.

    Yields ``(path, component)`` pairs where ``path`` is a dotted location
    built from component keys (``panel.column_0.email``). Entries that are
    not objects are skipped, so malformed candidates can still be measured.
    An explicit stack is used, so depth is bounded by memory only.
    """
    roots = schema.get("components") if isinstance(schema, dict) else None
    if not isinstance(roots, list):
        return

    stack: list[tuple[str, list[Any], int]] = [("", roots, 0)]
    while stack:
        prefix, siblings, index = stack.pop()
        if index >= len(siblings):
            continue
        stack.append((prefix, siblings, index + 1))

        component = siblings[index]
        if not isinstance(component, dict):
            continue

        path = _component_path(prefix, component, index)
        yield path, component

        nested = list(_child_sequences(component, path))
        for child_prefix, children in reversed(nested):
            stack.append((child_prefix, children, 0))


def extract_component_keys(schema: dict[str, Any]) -> list[str]:
    """Collect every component key in document order, duplicates included."""
    return [
        component["key"]
        for _, component in iter_components(schema)
        if isinstance(component.get("key"), str) and component["key"]
    ]


def find_duplicate_keys(schema: dict[str, Any]) -> list[str]:
    """Return each key that appears more than once, in first-repeat order."""
    seen: set[str] = set()
    duplicates: list[str] = []
    for key in extract_component_keys(schema):
        if key in seen:
            if key not in duplicates:
                duplicates.append(key)
        else:
            seen.add(key)
    return duplicates
