"""
Theme and stylesheet management.
"""

# Dark theme colors
DARK_COLORS = {
    "background": "#1B2636",
}

# Light theme colors
LIGHT_COLORS = {
    "background": "#F5F5F5",
}


def is_dark(theme_mode: str) -> bool:
    return theme_mode == "dark"


def get_theme_colors(theme_mode: str) -> dict:
    """Get color scheme based on theme mode."""
    if is_dark(theme_mode):
        return DARK_COLORS
    else:  # "light" or default
        return LIGHT_COLORS


def get_window_stylesheet(theme_mode: str = "light") -> str:
    colors = get_theme_colors(theme_mode)
    return f"""
        QWidget#centralWidget {{
            background-color: {colors['background']};
            border-radius: 8px;
        }}
    """


def label_style(color: str, font_px: int, bold: bool = True) -> str:
    """Stylesheet for a single widget label."""
    weight = "bold" if bold else "normal"
    return f"font-size: {font_px}px; font-weight: {weight}; color: {color};"
