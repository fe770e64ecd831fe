"""
ListEdit Theme - Centralized color palette with semantic tinting.

Color Philosophy:
- Cyan (#48b0f7) marks anything interactive, teal marks saved content
- Each interaction mode carries its own tint so the active mode is obvious
- Text uses tinted grays for visual hierarchy while maintaining readability
"""

# =============================================================================
# PRIMARY ACCENT COLORS
# =============================================================================
CYAN_PRIMARY = "#48b0f7"       # Main accent, icons, highlights
TEAL_PRIMARY = "#4ECDC4"       # Success, saved items
GOLD_PRIMARY = "#3D60C8"       # Warnings, headings
RED_PRIMARY = "#FF6B6B"        # Destructive actions

# =============================================================================
# TEXT COLORS (Tinted grays for hierarchy)
# =============================================================================
TEXT_BRIGHT = "#AFC5D6"        # Item text
TEXT_MUTED = "#8A9BA8"         # Placeholders, hints
TEXT_MUTED_CYAN = "#8AB4C4"    # Labels
TEXT_SUBTLE_CYAN = "#7EB8C4"   # Very low emphasis icons

# =============================================================================
# LOG LEVEL COLORS
# =============================================================================
LOG_INFO = CYAN_PRIMARY
LOG_SUCCESS = TEAL_PRIMARY
LOG_WARNING = GOLD_PRIMARY
LOG_ERROR = RED_PRIMARY

# =============================================================================
# BACKGROUND COLORS
# =============================================================================
BG_GRADIENT_START = "#0d1528"  # Main gradient start
BG_GRADIENT_MID = "#0a0f1c"    # Main gradient middle
BG_GRADIENT_END = "#060a12"    # Main gradient end
BG_CARD = "rgba(255,255,255,0.025)"    # Row backgrounds
BG_PANEL = "rgba(20,20,20,0.98)"       # Activity panel
BG_ROW_DELETE = "rgba(255,107,107,0.08)"
BG_ROW_EDIT = "rgba(72,176,247,0.08)"

# =============================================================================
# BORDER COLORS
# =============================================================================
BORDER_SUBTLE = "rgba(255,255,255,0.06)"
BORDER_DIVIDER = "rgba(255,255,255,0.12)"

# =============================================================================
# SEMANTIC UI TOKENS
# =============================================================================

# --- Text ---
TEXT_TITLE = GOLD_PRIMARY             # Editor heading
TEXT_ITEM = TEXT_BRIGHT               # List item text
TEXT_LABEL = TEXT_MUTED_CYAN          # Field labels
TEXT_PLACEHOLDER = TEXT_MUTED         # Empty list text

# --- Buttons ---
BUTTON_TEXT_ACTIVE = CYAN_PRIMARY     # Selected mode, primary actions
BUTTON_TEXT_IDLE = TEXT_MUTED         # Unselected mode buttons
BUTTON_ICON_ACTIVE = CYAN_PRIMARY
BUTTON_ICON_DELETE = RED_PRIMARY

# --- Activity Panel ---
LOG_PANEL_TITLE = GOLD_PRIMARY
LOG_PANEL_TIME = TEXT_MUTED


# =============================================================================
# HELPER FUNCTIONS
# =============================================================================
def get_log_color(level: str) -> str:
    """Get the color for an activity log level."""
    colors = {
        "INFO": LOG_INFO,
        "SUCCESS": LOG_SUCCESS,
        "WARNING": LOG_WARNING,
        "ERROR": LOG_ERROR,
    }
    return colors.get(level.upper(), TEXT_MUTED)


def get_mode_color(mode: str) -> str:
    """Get the accent color for an interaction mode."""
    colors = {
        "normal": TEXT_ITEM,
        "delete": RED_PRIMARY,
        "edit": CYAN_PRIMARY,
    }
    return colors.get(mode.lower(), TEXT_MUTED)
