PALETTE = {
    "primary": "#76C7BE",
    "dark": "#3B7F7A",
    "accent_yellow": "#F2D45C",
    "accent_red": "#D94A4A",
    "accent_blue": "#5AA7FF",
    "text": "#123E3A",
    "panel": "#E6FBF4",
}

STYLE_SHEET = f"""
QWidget {{
    font-family: 'Fira Sans','Noto Sans','DejaVu Sans','Segoe UI';
    color: {PALETTE['text']};
    font-size: 14px;
}}
QMainWindow {{
    background: {PALETTE['primary']};
}}
QGroupBox {{
    background: {PALETTE['panel']};
    border-radius: 12px;
    margin-top: 18px;
    padding: 10px;
    font-weight: 600;
}}
QGroupBox::title {{
    subcontrol-origin: margin;
    left: 12px;
}}
QLineEdit#statField {{
    background: white;
    border: 2px solid {PALETTE['dark']};
    border-radius: 8px;
    padding: 4px 8px;
}}
QTextEdit#results {{
    background: #F8FFFD;
    border: 2px solid {PALETTE['dark']};
    border-radius: 12px;
    padding: 8px;
}}
QPushButton {{
    background: {PALETTE['dark']};
    color: white;
    border: none;
    border-radius: 14px;
    padding: 12px 18px;
    font-size: 15px;
}}
QPushButton#gameBtn {{
    background: {PALETTE['accent_blue']};
    color: white;
}}
QPushButton#danger {{
    background: {PALETTE['accent_red']};
    color: white;
}}
"""

THEMES = {
    "light": STYLE_SHEET,
    "plain": "",
}


def apply_theme(app, name: str = "light"):
    app.setStyleSheet(THEMES.get(name, STYLE_SHEET))
