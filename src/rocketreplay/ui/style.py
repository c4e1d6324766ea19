APP_QSS = """
/*
Night-sky replay theme
- Flat panels, no rounding
- Slate ramp + single blue accent shared with the landing platform
*/

/* ---- Palette (documentation) ----
BG:          #0C0F12
PANEL:       #10151A
WELL:        #0A0D10
BORDER:      #27313A
TEXT:        #D6DADF
DISABLED:    #66727D
ACCENT:      #7AA2FF
*/

QMainWindow, QDialog {
	background: #0C0F12;
	color: #D6DADF;
	font-family: sans-serif;
	font-size: 13px;
}

/* Navigation bar */
QMenuBar {
	background: #10151A;
	border-bottom: 2px solid #27313A;
	padding: 2px 6px;
}

QMenuBar::item {
	padding: 6px 12px;
	background: transparent;
	letter-spacing: 0.6px;
}

QMenuBar::item:selected, QMenu::item:selected {
	background: #1b2a34;
	color: #7AA2FF;
}

QMenu {
	background: #10151A;
	border: 2px solid #27313A;
}

QMenu::item {
	padding: 6px 24px 6px 14px;
}

QMenu::separator {
	height: 2px;
	background: #27313A;
	margin: 4px 0px;
}

QStatusBar {
	background: #10151A;
	border-top: 2px solid #27313A;
	color: #9AA6B2;
}

/* Import modal */
QLineEdit {
	background: #0A0D10;
	border: 2px solid #27313A;
	border-radius: 0px;
	padding: 6px;
	selection-background-color: #7AA2FF;
	selection-color: #0C0F12;
}

QLineEdit:focus {
	border: 2px solid #7AA2FF;
}

QPushButton {
	background: #10151A;
	border: 2px solid #27313A;
	border-radius: 0px;
	padding: 8px 14px;
	font-weight: 600;
}

QPushButton:hover {
	border: 2px solid #36424D;
}

QPushButton:pressed {
	background: #0A0D10;
}

QPushButton:focus {
	border: 2px solid #7AA2FF;
}

QPushButton:disabled {
	color: #66727D;
}
"""
