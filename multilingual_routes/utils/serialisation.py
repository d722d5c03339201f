import re


def pascal_case_to_snake_case(pascal: type | str) -> str:
    """
    Convert a class name (CamelCase or PascalCase) to snake_case.

    Args:
        pascal: The class or class name as a string.

    Returns:
        str: The snake_case version of the class name.
    """
    if not isinstance(pascal, str):
        pascal = pascal.__name__
    # Insert underscores before capital letters, except at the start
    s1 = re.sub('(.)([A-Z][a-z]+)', r'\1_\2', pascal)
    return re.sub('([a-z0-9])([A-Z])', r'\1_\2', s1).lower()


def get_exception_error_type(exception: Exception) -> str:
    """``UnresolvedRouteError`` -> ``unresolved_route``; ``NotFoundException`` -> ``not_found``."""
    name = exception.__class__.__name__
    for suffix in ("Exception", "Error"):
        if name.endswith(suffix) and name != suffix:
            name = name[: -len(suffix)]
            break
    return pascal_case_to_snake_case(name)


def parse_bool(value: str) -> bool | None:
    """Interpret common truthy/falsy spellings; ``None`` when unrecognised."""
    lowered = value.strip().lower()
    if lowered in ("1", "true", "yes", "on"):
        return True
    if lowered in ("0", "false", "no", "off", ""):
        return False
    return None
