from __future__ import annotations

from dataclasses import dataclass

EVENT_COLORS = ("#3B82F6", "#EF4444", "#10B981", "#F59E0B", "#8B5CF6", "#EC4899")


@dataclass(frozen=True)
class AppPalette:
    background_primary: str = "#f9fafb"
    background_secondary: str = "#ffffff"
    surface: str = "#ffffff"
    surface_muted: str = "#f3f4f6"
    accent_primary: str = "#2563eb"
    accent_soft: str = "#eff6ff"
    accent_error: str = "#dc2626"
    text_primary: str = "#111827"
    text_secondary: str = "#4b5563"
    text_muted: str = "#9ca3af"
    border_subtle: str = "#e5e7eb"
    border_strong: str = "#d1d5db"

    def as_stylesheet(self) -> str:
        """Global stylesheet for the Qt application."""

        return f"""
        QWidget {{
            background-color: {self.background_primary};
            color: {self.text_primary};
            font-family: 'Helvetica Neue', 'Segoe UI', Arial, sans-serif;
            font-size: 13px;
        }}
        QPushButton {{
            background-color: {self.accent_primary};
            color: #ffffff;
            border: none;
            padding: 6px 12px;
            border-radius: 8px;
            font-weight: 600;
        }}
        QPushButton:hover {{
            background-color: #1d4ed8;
        }}
        QPushButton:disabled {{
            background-color: {self.border_subtle};
            color: {self.text_muted};
        }}
        QPushButton#secondaryButton, QPushButton#navButton {{
            background-color: {self.surface};
            color: {self.text_primary};
            border: 1px solid {self.border_strong};
        }}
        QPushButton#secondaryButton:hover, QPushButton#navButton:hover {{
            background-color: {self.surface_muted};
        }}
        QPushButton#modeButton {{
            background-color: {self.surface_muted};
            color: {self.text_secondary};
            border-radius: 6px;
        }}
        QPushButton#modeButton:checked {{
            background-color: {self.surface};
            color: {self.text_primary};
            border: 1px solid {self.border_subtle};
        }}
        QPushButton#colorSwatch {{
            border-radius: 12px;
            min-width: 24px;
            max-width: 24px;
            min-height: 24px;
            max-height: 24px;
            padding: 0;
        }}
        QPushButton#colorSwatch:checked {{
            border: 3px solid {self.text_muted};
        }}
        QLineEdit, QTextEdit, QTimeEdit {{
            background-color: {self.background_secondary};
            color: {self.text_primary};
            border: 1px solid {self.border_strong};
            border-radius: 8px;
            padding: 6px 8px;
        }}
        QLineEdit:focus, QTextEdit:focus, QTimeEdit:focus {{
            border-color: {self.accent_primary};
        }}
        QLabel#title {{
            font-size: 22px;
            font-weight: 700;
        }}
        QLabel#weekdayLabel {{
            color: {self.text_secondary};
            font-weight: 600;
        }}
        QLabel#overflowLabel, QLabel#emptyLabel {{
            color: {self.text_muted};
            font-size: 11px;
        }}
        QLabel#statusLabel {{
            color: {self.accent_error};
        }}
        QFrame#dayCell {{
            background-color: {self.surface};
            border: 1px solid {self.border_subtle};
        }}
        QFrame#dayCell[outside="true"] {{
            background-color: {self.surface_muted};
            color: {self.text_muted};
        }}
        QFrame#dayCell[today="true"] {{
            background-color: {self.accent_soft};
        }}
        QFrame#eventCard {{
            border-radius: 6px;
            padding: 2px 4px;
        }}
        """
