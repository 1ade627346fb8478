"""Theme definitions for the TUI.

To add a new theme, define it here and register it in the app.
"""

from textual.theme import Theme

# Dark theme built around Gemini's blue/violet accents
GEMINI_NIGHT = Theme(
    name="gemini-night",
    primary="#8ab4f8",      # Blue - chat and input accents
    secondary="#c58af9",    # Violet - assistant messages, editor border
    accent="#fdd663",       # Amber - highlights
    foreground="#e3e3e3",
    background="#131314",
    success="#81c995",      # Green - user messages, selection context
    warning="#fcad70",
    error="#f28b82",
    surface="#1e1f20",
    panel="#18191a",
    dark=True,
    variables={
        "border": "#444746",
        "border-blurred": "#2d2f31",
        "text-muted": "#8e918f",
        "footer-key-foreground": "#fdd663",
        "input-selection-background": "#8ab4f8 30%",
    },
)
