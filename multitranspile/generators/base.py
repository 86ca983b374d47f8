"""Shared helpers for component templates"""


def void_return(is_typescript: bool) -> str:
    """Return-type annotation for hook callbacks (``: void`` in TypeScript)"""
    return ": void" if is_typescript else ""


def splice(global_code: str, indent: str) -> str:
    """Place the global code block inside a hook body

    The block is opaque: only its first line receives the body indentation,
    the remaining lines are pasted unchanged. An empty block gives an empty
    line so the hook still has a well-formed body.

    Args:
        global_code: Global code block
        indent: Indentation of the hook body

    Returns:
        Body line(s) without trailing newline
    """
    if not global_code:
        return ""
    return f"{indent}{global_code}"
