"""Display names for new projects."""

from coolname import generate_slug


def generate_project_name() -> str:
    """Random two-word kebab-case name, e.g. ``brave-otter``."""
    return generate_slug(2)
