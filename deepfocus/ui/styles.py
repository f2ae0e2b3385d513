"""QSS stylesheet and colours for DeepFocus."""

from __future__ import annotations

from ..timer.modes import Mode

PALETTE: dict[str, str] = {
    "bg":         "#0B0B0D",
    "surface":    "#16161A",
    "border":     "#242429",
    "text":       "#F5F5F7",
    "text_muted": "#6E6E73",
    "track":      "#1F1F24",
}


def build_stylesheet(mode: Mode) -> str:
    """Window stylesheet tinted by *mode*'s accent colour."""
    p = PALETTE
    accent = mode.accent_color
    return f"""
    QWidget {{
        background-color: {p["bg"]};
        color: {p["text"]};
        font-size: 13px;
    }}
    QLabel#title {{
        font-size: 15px;
        font-weight: 600;
        letter-spacing: 4px;
    }}
    QLabel#subtitle, QLabel#sessionCaption {{
        color: {p["text_muted"]};
        font-size: 11px;
        letter-spacing: 2px;
    }}
    QFrame#sessionCard {{
        background-color: {p["surface"]};
        border: 1px solid {p["border"]};
        border-radius: 16px;
    }}
    QPushButton {{
        background-color: {p["surface"]};
        border: 1px solid {p["border"]};
        border-radius: 14px;
        padding: 8px 16px;
    }}
    QPushButton:disabled {{
        color: {p["text_muted"]};
    }}
    QPushButton#chip {{
        font-size: 11px;
        font-weight: 600;
        letter-spacing: 1px;
        color: {p["text_muted"]};
    }}
    QPushButton#chip:checked {{
        background-color: {accent};
        color: #111114;
        border-color: {accent};
    }}
    QPushButton#primaryButton {{
        background-color: {accent};
        color: #111114;
        font-weight: 600;
        min-width: 120px;
    }}
    """
