"""Icons drawn at runtime with Pillow.

Submodules:
    icons: create_error_icon() and create_app_icon()

Icons are generated in memory, so no image files ship with the package.
"""

from .icons import create_app_icon, create_error_icon

__all__ = [
    "create_app_icon",
    "create_error_icon",
]
