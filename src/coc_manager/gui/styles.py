"""Theme and style constants for the GUI.

Constants:
    COLORS: Color palette for buttons, text and menu entries
    FONTS: Font family, size, and weight configurations
    PADDING: Spacing values for margins and padding
    WINDOW_SIZES: Default and minimum window dimensions
"""

COLORS = {
    "primary": "#1f538d",        # Main action buttons (blue)
    "primary_hover": "#14375e",  # Primary button hover state
    "text": "#000000",           # Regular menu entries
    "muted": "#6c757d",          # Empty slots and empty directories (gray)
    "danger": "#dc3545",         # Error status text (red)
}

FONTS = {
    "title": ("Segoe UI", 18, "bold"),
    "body": ("Segoe UI", 12),
    "small": ("Segoe UI", 10),
}

PADDING = {
    "small": 10,
    "medium": 18,
    "large": 30,
}

WINDOW_SIZES = {
    "main": (520, 260),
    "min_main": (420, 220),
}
