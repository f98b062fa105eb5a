"""
SweetLogic Configuration Settings
"""
import os

# Application Settings
APP_NAME = "SweetLogic"
APP_SUBTITLE = "Let's Make Some Ice Cream!"
LAB_NAME = "Frances' Lab"
VERSION = "1.0.0"

# Display Settings
WINDOW_WIDTH = 900
WINDOW_HEIGHT = 640
DISPLAY_FONT = ("Consolas", 40, "bold")
BUTTON_FONT = ("Segoe UI", 14)
LABEL_FONT = ("Segoe UI", 11)
TITLE_FONT = ("Segoe UI", 24, "bold")

# ── Palettes ─────────────────────────────────────────────────────────────────

# LIGHT palette  – mint-cream background with dark green accents
THEME_LIGHT = {
    "bg":           "#F2FAF2",   # base surface
    "bg_dark":      "#E3F2DE",   # card / header surface
    "shadow_dark":  "#C5D9C0",
    "display_bg":   "#FFFFFF",
    "display_fg":   "#1A2A1F",
    "btn_bg":       "#FFFFFF",
    "btn_fg":       "#1A2A1F",
    "operator_bg":  "#0A6E40",   # dark green operator keys
    "operator_fg":  "#FFFFFF",
    "control_bg":   "#FFF1E0",   # AC / backspace
    "control_fg":   "#E08A00",
    "accent":       "#0A6E40",
    "text":         "#1A2A1F",
    "subtext":      "#6E7F72",
    "success":      "#0A6E40",
    "danger":       "#C0392B",
    "warning":      "#B07D1E",
    "income_fg":    "#1E9E4F",
    "entry_bg":     "#FFFFFF",
    "entry_fg":     "#1A2A1F",
    "tree_odd":     "#F7FBF6",
    "tree_even":    "#FFFFFF",
    "tree_fg":      "#1A2A1F",
}

# DARK palette  – deep slate with green accents
THEME_DARK = {
    "bg":           "#1E2530",
    "bg_dark":      "#161C26",
    "shadow_dark":  "#10161E",
    "display_bg":   "#161C26",
    "display_fg":   "#9ADDB0",
    "btn_bg":       "#283040",
    "btn_fg":       "#BDD0E0",
    "operator_bg":  "#2D8A58",
    "operator_fg":  "#FFFFFF",
    "control_bg":   "#3A3024",
    "control_fg":   "#F0A030",
    "accent":       "#4DB888",
    "text":         "#BDD0E0",
    "subtext":      "#6E8090",
    "success":      "#4DB888",
    "danger":       "#E55A4E",
    "warning":      "#D4A020",
    "income_fg":    "#4DB888",
    "entry_bg":     "#283040",
    "entry_fg":     "#BDD0E0",
    "tree_odd":     "#232E3C",
    "tree_even":    "#1A2330",
    "tree_fg":      "#BDD0E0",
}


def get_theme(dark: bool) -> dict:
    """Return the active colour palette."""
    return THEME_DARK if dark else THEME_LIGHT


# Settings file (UI preferences only)
SETTINGS_FILE = "settings.json"

# Database Settings
DB_PATH = os.path.join(os.path.dirname(__file__), "sweetlogic.db")

# Currency Settings
CURRENCY_SYMBOL = "$"

# Calculator Settings
ERROR_SENTINEL = "Error"
# Longest entry or result; stays under Python's 4300-digit int/str conversion limit
MAX_DIGITS = 4000

# Home menu: (name, icon, colour)
MENU_ITEMS = [
    ("Recipes", "\U0001F4D6", "#E0457B"),
    ("Calculator", "±", "#2F80ED"),
    ("Budget", "$", "#1E9E4F"),
]

# Graph settings
GRAPH_FIGSIZE = (6.5, 3.2)
GRAPH_DPI = 90

# Web Portal settings
WEB_PORTAL_ENABLED = True
WEB_HOST = '127.0.0.1'
WEB_PORT = 8888
