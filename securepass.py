# -*- coding: utf-8 -*-
"""
SecurePass - Password Strength Checker & Generator (PyQt5)

Key features
- Live heuristic strength scoring (0-100) with tier label and up to three improvement hints.
- Random password generation with per-class guarantees (uppercase, lowercase, numbers, symbols).
- Cryptographically secure randomness by default (secrets.SystemRandom); any random.Random may be injected.
- Show/hide toggle and clipboard copy for both panels.
- Generator options persisted via QSettings (passwords themselves are never stored).

Notes on the scoring heuristic
- The score is a simple additive checklist (length, character classes, repetition penalty), not an
  entropy estimate. It rewards variety of character classes and penalises runs like "aaa".
- Only ASCII letters and digits count towards the class bonuses.
"""

from __future__ import annotations

import logging
import random
import secrets
import string
import sys
from dataclasses import dataclass
from typing import List, Optional, Tuple

from PyQt5 import QtCore, QtGui, QtWidgets

# -------------------------
# Application Constants
# -------------------------

APP_ORG = "SecurePass"
APP_NAME = "SecurePass"
APP_TITLE = "SecurePass"
APP_SUBTITLE = "Check & Generate Your Passwords with Ease"

DEFAULT_LENGTH = 16
MIN_LENGTH = 8
MAX_LENGTH = 64

# Cosmetic pause between pressing "Generate" and showing the result.
GENERATE_DELAY_MS = 500
COPY_MESSAGE_MS = 2000

MAX_SUGGESTIONS = 3
REPEAT_RUN_LENGTH = 3

UPPERCASE = string.ascii_uppercase
LOWERCASE = string.ascii_lowercase
NUMBERS = string.digits
GENERATOR_SYMBOLS = "!@#$%^&*()_+-=[]{}|;:,.<>?"

# The scorer recognises a narrower symbol set than the generator draws from.
SCORER_SYMBOLS = frozenset('!@#$%^&*(),.?":{}|<>')

EMPTY_LABEL = "Enter a password"

# (minimum score, label, color tag), checked top-down.
STRENGTH_TIERS: Tuple[Tuple[int, str, str], ...] = (
    (80, "Very Strong", "neon-green"),
    (60, "Strong", "neon-cyan"),
    (40, "Medium", "neon-orange"),
    (20, "Weak", "neon-red"),
    (0, "Very Weak", "destructive"),
)

COLOR_TAGS = {
    "muted": "#9aa0a6",
    "neon-green": "#39ff14",
    "neon-cyan": "#00e5ff",
    "neon-orange": "#ff9100",
    "neon-red": "#ff1744",
    "destructive": "#d32f2f",
}


# -------------------------
# Logging (quiet by default)
# -------------------------

logger = logging.getLogger(__name__)


# =========================
#   CORE: ERRORS / MODELS
# =========================

class GenerationError(ValueError):
    """Raised when the generator options cannot produce a password."""


class NoCharacterTypeSelected(GenerationError):
    """All four character classes are switched off."""

    def __init__(self, message: str = "Please select at least one character type") -> None:
        super().__init__(message)


@dataclass(frozen=True)
class StrengthResult:
    score: int
    label: str
    color_tag: str
    suggestions: Tuple[str, ...] = ()


@dataclass(frozen=True)
class GeneratorOptions:
    length: int = DEFAULT_LENGTH
    include_uppercase: bool = True
    include_lowercase: bool = True
    include_numbers: bool = True
    include_symbols: bool = True

    def character_classes(self) -> List[str]:
        """Enabled alphabets in canonical order (uppercase, lowercase, numbers, symbols)."""
        classes: List[str] = []
        if self.include_uppercase:
            classes.append(UPPERCASE)
        if self.include_lowercase:
            classes.append(LOWERCASE)
        if self.include_numbers:
            classes.append(NUMBERS)
        if self.include_symbols:
            classes.append(GENERATOR_SYMBOLS)
        return classes


EMPTY_RESULT = StrengthResult(score=0, label=EMPTY_LABEL, color_tag="muted")


# =========================
#   CORE: STRENGTH SCORER
# =========================

# (alphabet, bonus, hint) in the order the hints are reported.
_CLASS_RULES: Tuple[Tuple[frozenset, int, str], ...] = (
    (frozenset(UPPERCASE), 20, "Add uppercase letters (A-Z)"),
    (frozenset(LOWERCASE), 20, "Add lowercase letters (a-z)"),
    (frozenset(NUMBERS), 20, "Add numbers (0-9)"),
    (SCORER_SYMBOLS, 15, "Add special characters (!@#$%^&*)"),
)


def has_repeated_run(password: str, run_length: int = REPEAT_RUN_LENGTH) -> bool:
    """True if any character occurs ``run_length`` or more times in a row."""
    count = 0
    previous: Optional[str] = None
    for char in password:
        count = count + 1 if char == previous else 1
        if count >= run_length:
            return True
        previous = char
    return False


def classify_score(value: int) -> Tuple[str, str]:
    """Map a clamped score to its (label, color tag) tier."""
    for minimum, label, color_tag in STRENGTH_TIERS:
        if value >= minimum:
            return label, color_tag
    return STRENGTH_TIERS[-1][1], STRENGTH_TIERS[-1][2]


def score(password: str) -> StrengthResult:
    """
    Score a password with the additive checklist heuristic.

    Length gives 25 points at 12+ characters or 15 at 8+. Uppercase, lowercase and digits
    give 20 each, a symbol gives 15, and a run of three identical characters costs 10.
    The result is clamped to 0..100 and only the first three hints are kept.
    """
    if not password:
        return EMPTY_RESULT

    points = 0
    suggestions: List[str] = []

    if len(password) >= 12:
        points += 25
    elif len(password) >= 8:
        points += 15
    else:
        suggestions.append("Use at least 8 characters (12+ recommended)")

    for alphabet, bonus, hint in _CLASS_RULES:
        if any(char in alphabet for char in password):
            points += bonus
        else:
            suggestions.append(hint)

    if has_repeated_run(password):
        points -= 10
        suggestions.append("Avoid repeating characters")

    points = max(0, min(100, points))
    label, color_tag = classify_score(points)

    return StrengthResult(
        score=points,
        label=label,
        color_tag=color_tag,
        suggestions=tuple(suggestions[:MAX_SUGGESTIONS]),
    )


# =========================
#   CORE: GENERATOR
# =========================

_SYSTEM_RNG = secrets.SystemRandom()


def generate(options: GeneratorOptions, rng: Optional[random.Random] = None) -> str:
    """
    Generate a password satisfying ``options``.

    One character is drawn from every enabled class first, the rest come from the combined
    pool, and the result is shuffled. When more classes are enabled than ``options.length``
    allows, the password is as long as the number of classes.

    Raises:
        NoCharacterTypeSelected if every class is disabled.
    """
    classes = options.character_classes()
    if not classes:
        raise NoCharacterTypeSelected()

    if rng is None:
        rng = _SYSTEM_RNG

    pool = "".join(classes)

    # Group guarantees (duplicates allowed)
    chars: List[str] = [rng.choice(group) for group in classes]

    remaining = options.length - len(chars)
    for _ in range(remaining):
        chars.append(rng.choice(pool))

    # Shuffle for uniform placement of "guarantee" chars.
    rng.shuffle(chars)
    return "".join(chars)


# =========================
#   UI HELPERS
# =========================

def _mono_font() -> QtGui.QFont:
    font = QtGui.QFont("Consolas")
    font.setStyleHint(QtGui.QFont.TypeWriter)
    return font


def _bar_stylesheet(color: str) -> str:
    return f"""
        QProgressBar {{
            border: 1px solid #555;
            border-radius: 4px;
            background-color: #303134;
        }}
        QProgressBar::chunk {{
            border-radius: 4px;
            margin: 0px;
            background-color: {color};
        }}
    """


def copy_to_clipboard(text: str) -> bool:
    """Put ``text`` on the system clipboard; returns False when there is nothing to copy."""
    if not text:
        return False
    QtWidgets.QApplication.clipboard().setText(text)
    logger.debug("Copied %d characters to clipboard.", len(text))
    return True


# =========================
#   CHECKER PANEL
# =========================

class CheckerPanel(QtWidgets.QGroupBox):
    """Password input with a live strength bar and improvement hints."""

    status_message = QtCore.pyqtSignal(str, int)

    def __init__(self, parent: Optional[QtWidgets.QWidget] = None) -> None:
        super().__init__("Password Strength Checker", parent)
        self._result: StrengthResult = EMPTY_RESULT
        self._build_ui()
        self._render(EMPTY_RESULT)

    @property
    def result(self) -> StrengthResult:
        return self._result

    def _build_ui(self) -> None:
        layout = QtWidgets.QVBoxLayout(self)

        # Input row
        input_row = QtWidgets.QHBoxLayout()
        self.password_edit = QtWidgets.QLineEdit()
        self.password_edit.setEchoMode(QtWidgets.QLineEdit.Password)
        self.password_edit.setPlaceholderText("Enter your password...")

        self.show_btn = QtWidgets.QPushButton("Show")
        self.show_btn.setCheckable(True)
        self.copy_btn = QtWidgets.QPushButton("Copy")
        self.copy_btn.setVisible(False)

        input_row.addWidget(self.password_edit, stretch=1)
        input_row.addWidget(self.show_btn)
        input_row.addWidget(self.copy_btn)
        layout.addLayout(input_row)

        # Tier row
        tier_row = QtWidgets.QHBoxLayout()
        self.icon_label = QtWidgets.QLabel()
        self.strength_label = QtWidgets.QLabel()
        self.percent_label = QtWidgets.QLabel()
        tier_row.addWidget(self.icon_label)
        tier_row.addWidget(self.strength_label, stretch=1)
        tier_row.addWidget(self.percent_label)
        layout.addLayout(tier_row)

        self.strength_bar = QtWidgets.QProgressBar()
        self.strength_bar.setRange(0, 100)
        self.strength_bar.setTextVisible(False)
        self.strength_bar.setFixedHeight(12)
        layout.addWidget(self.strength_bar)

        # Suggestions
        self.suggestions_box = QtWidgets.QGroupBox("Suggestions to improve:")
        suggestions_layout = QtWidgets.QVBoxLayout(self.suggestions_box)
        self.suggestions_list = QtWidgets.QListWidget()
        self.suggestions_list.setFocusPolicy(QtCore.Qt.NoFocus)
        suggestions_layout.addWidget(self.suggestions_list)
        layout.addWidget(self.suggestions_box)

        layout.addStretch(1)

        self.password_edit.textChanged.connect(self.on_text_changed)
        self.show_btn.toggled.connect(self.on_show_toggled)
        self.copy_btn.clicked.connect(self.on_copy_clicked)

    def _tier_icon(self, value: int) -> QtGui.QIcon:
        style = self.style()
        if value >= 80:
            return style.standardIcon(QtWidgets.QStyle.SP_DialogApplyButton)
        if value >= 60:
            return style.standardIcon(QtWidgets.QStyle.SP_MessageBoxInformation)
        if value >= 40:
            return style.standardIcon(QtWidgets.QStyle.SP_MessageBoxWarning)
        return style.standardIcon(QtWidgets.QStyle.SP_MessageBoxCritical)

    def _render(self, result: StrengthResult) -> None:
        color = COLOR_TAGS.get(result.color_tag, COLOR_TAGS["muted"])

        self.icon_label.setPixmap(self._tier_icon(result.score).pixmap(20, 20))
        self.strength_label.setText(result.label)
        self.strength_label.setStyleSheet(f"color: {color}; font-weight: 600;")
        self.percent_label.setText(f"{result.score}%")

        self.strength_bar.setValue(result.score)
        self.strength_bar.setStyleSheet(_bar_stylesheet(color))

        self.suggestions_list.clear()
        self.suggestions_list.addItems(list(result.suggestions))
        self.suggestions_box.setVisible(bool(result.suggestions))

    # ---------- ACTIONS ----------

    def on_text_changed(self, text: str) -> None:
        self._result = score(text)
        self.copy_btn.setVisible(bool(text))
        self._render(self._result)

    def on_show_toggled(self, checked: bool) -> None:
        mode = QtWidgets.QLineEdit.Normal if checked else QtWidgets.QLineEdit.Password
        self.password_edit.setEchoMode(mode)
        self.show_btn.setText("Hide" if checked else "Show")

    def on_copy_clicked(self) -> None:
        if copy_to_clipboard(self.password_edit.text()):
            self.status_message.emit("Password copied to clipboard", COPY_MESSAGE_MS)


# =========================
#   GENERATOR PANEL
# =========================

class GeneratorPanel(QtWidgets.QGroupBox):
    """Option controls, generate button and read-only output."""

    status_message = QtCore.pyqtSignal(str, int)

    def __init__(
        self,
        parent: Optional[QtWidgets.QWidget] = None,
        delay_ms: int = GENERATE_DELAY_MS,
        rng: Optional[random.Random] = None,
    ) -> None:
        super().__init__("Password Generator", parent)
        self.delay_ms = delay_ms
        self._rng = rng
        self._build_ui()

    def _build_ui(self) -> None:
        layout = QtWidgets.QVBoxLayout(self)

        # Output row (hidden until the first password arrives)
        self.output_row = QtWidgets.QWidget()
        output_layout = QtWidgets.QHBoxLayout(self.output_row)
        output_layout.setContentsMargins(0, 0, 0, 0)
        self.password_edit = QtWidgets.QLineEdit()
        self.password_edit.setReadOnly(True)
        self.password_edit.setFont(_mono_font())
        self.password_edit.setPlaceholderText("Your generated password will appear here...")
        self.copy_btn = QtWidgets.QPushButton("Copy")
        output_layout.addWidget(self.password_edit, stretch=1)
        output_layout.addWidget(self.copy_btn)
        self.output_row.setVisible(False)
        layout.addWidget(self.output_row)

        # Length row
        length_row = QtWidgets.QHBoxLayout()
        length_row.addWidget(QtWidgets.QLabel("Password Length"))
        length_row.addStretch(1)
        self.length_value_label = QtWidgets.QLabel(str(DEFAULT_LENGTH))
        self.length_value_label.setFont(_mono_font())
        length_row.addWidget(self.length_value_label)
        layout.addLayout(length_row)

        self.length_slider = QtWidgets.QSlider(QtCore.Qt.Horizontal)
        self.length_slider.setRange(MIN_LENGTH, MAX_LENGTH)
        self.length_slider.setSingleStep(1)
        self.length_slider.setValue(DEFAULT_LENGTH)
        layout.addWidget(self.length_slider)

        # Character classes
        grid = QtWidgets.QGridLayout()
        self.upper_cb = QtWidgets.QCheckBox("Uppercase (A-Z)")
        self.lower_cb = QtWidgets.QCheckBox("Lowercase (a-z)")
        self.numbers_cb = QtWidgets.QCheckBox("Numbers (0-9)")
        self.symbols_cb = QtWidgets.QCheckBox("Symbols (!@#$...)")
        for cb in (self.upper_cb, self.lower_cb, self.numbers_cb, self.symbols_cb):
            cb.setChecked(True)
        grid.addWidget(self.upper_cb, 0, 0)
        grid.addWidget(self.lower_cb, 0, 1)
        grid.addWidget(self.numbers_cb, 1, 0)
        grid.addWidget(self.symbols_cb, 1, 1)
        layout.addLayout(grid)

        self.generate_btn = QtWidgets.QPushButton("Generate Strong Password")
        layout.addWidget(self.generate_btn)

        tip = QtWidgets.QLabel(
            "Pro Tip: Use unique passwords for each account and consider using a password "
            "manager for ultimate security."
        )
        tip.setWordWrap(True)
        layout.addWidget(tip)

        layout.addStretch(1)

        self.length_slider.valueChanged.connect(lambda v: self.length_value_label.setText(str(v)))
        self.generate_btn.clicked.connect(self.on_generate_clicked)
        self.copy_btn.clicked.connect(self.on_copy_clicked)

    # ---------- OPTIONS ----------

    def options(self) -> GeneratorOptions:
        return GeneratorOptions(
            length=self.length_slider.value(),
            include_uppercase=self.upper_cb.isChecked(),
            include_lowercase=self.lower_cb.isChecked(),
            include_numbers=self.numbers_cb.isChecked(),
            include_symbols=self.symbols_cb.isChecked(),
        )

    def set_options(self, options: GeneratorOptions) -> None:
        self.length_slider.setValue(options.length)
        self.upper_cb.setChecked(options.include_uppercase)
        self.lower_cb.setChecked(options.include_lowercase)
        self.numbers_cb.setChecked(options.include_numbers)
        self.symbols_cb.setChecked(options.include_symbols)

    @property
    def generated_password(self) -> str:
        return self.password_edit.text()

    # ---------- ACTIONS ----------

    def on_generate_clicked(self) -> None:
        try:
            password = generate(self.options(), rng=self._rng)
        except GenerationError as e:
            logger.warning("Password generation refused: %s", e)
            QtWidgets.QMessageBox.warning(self, "Error", str(e))
            return

        logger.debug("Generated a %d-character password.", len(password))

        if self.delay_ms <= 0:
            self._show_password(password)
            return

        self.generate_btn.setEnabled(False)
        self.generate_btn.setText("Generating...")
        QtCore.QTimer.singleShot(self.delay_ms, lambda: self._show_password(password))

    def _show_password(self, password: str) -> None:
        self.password_edit.setText(password)
        self.output_row.setVisible(True)
        self.generate_btn.setEnabled(True)
        self.generate_btn.setText("Generate Strong Password")

    def on_copy_clicked(self) -> None:
        if copy_to_clipboard(self.password_edit.text()):
            self.status_message.emit("Password copied to clipboard", COPY_MESSAGE_MS)


# =========================
#        MAIN WINDOW
# =========================

class MainWindow(QtWidgets.QMainWindow):
    """
    Checker and generator side by side.

    Generator options and window geometry are restored from QSettings at startup
    and saved on close.
    """

    def __init__(self, settings: Optional[QtCore.QSettings] = None) -> None:
        super().__init__()

        self.settings = settings if settings is not None else QtCore.QSettings(APP_ORG, APP_NAME)

        self.setWindowTitle(APP_TITLE)
        self.setMinimumSize(900, 550)

        self._apply_global_styles()
        self._build_ui()
        self._load_settings()

    # ---------- UI CONSTRUCTION ----------

    def _build_ui(self) -> None:
        central = QtWidgets.QWidget(self)
        self.setCentralWidget(central)

        main_layout = QtWidgets.QVBoxLayout(central)

        title = QtWidgets.QLabel(APP_TITLE)
        title.setObjectName("title")
        title.setAlignment(QtCore.Qt.AlignCenter)
        subtitle = QtWidgets.QLabel(APP_SUBTITLE)
        subtitle.setAlignment(QtCore.Qt.AlignCenter)
        main_layout.addWidget(title)
        main_layout.addWidget(subtitle)

        panels = QtWidgets.QHBoxLayout()
        main_layout.addLayout(panels, stretch=1)

        self.checker = CheckerPanel()
        self.generator = GeneratorPanel()
        panels.addWidget(self.checker, stretch=1)
        panels.addWidget(self.generator, stretch=1)

        self.status_bar = self.statusBar()
        self.status_bar.showMessage("Ready.")

        self.checker.status_message.connect(self.status_bar.showMessage)
        self.generator.status_message.connect(self.status_bar.showMessage)

        menubar = self.menuBar()
        file_menu = menubar.addMenu("&File")
        exit_action = QtWidgets.QAction("E&xit", self)
        exit_action.setShortcut("Ctrl+Q")
        exit_action.triggered.connect(self.close)
        file_menu.addAction(exit_action)

    # ---------- STYLES ----------

    def _apply_global_styles(self) -> None:
        self.setStyleSheet(
            """
            QMainWindow { background-color: #202124; }

            QGroupBox {
                color: #ffffff;
                font-weight: 600;
                border: 1px solid #444;
                border-radius: 8px;
                margin-top: 10px;
            }
            QGroupBox::title {
                subcontrol-origin: margin;
                left: 8px;
                padding: 0 4px;
            }

            QLabel { color: #e8eaed; }
            QLabel#title { font-size: 32px; font-weight: 700; color: #00e5ff; }

            QLineEdit, QListWidget {
                background-color: #303134;
                color: #e8eaed;
                border-radius: 4px;
                padding: 4px;
                border: 1px solid #555;
            }

            QSlider, QCheckBox, QMenuBar, QMenu, QStatusBar {
                color: #e8eaed;
                background-color: #202124;
            }

            QPushButton {
                background-color: #1a73e8;
                color: #ffffff;
                border-radius: 4px;
                padding: 6px 12px;
                border: 1px solid #1a73e8;
            }
            QPushButton:hover { background-color: #4285f4; }
            QPushButton:pressed { background-color: #3367d6; }
            QPushButton:disabled { background-color: #5f6368; border-color: #5f6368; }
            """
        )

    # ---------- SETTINGS ----------

    def _load_settings(self) -> None:
        geometry = self.settings.value("geometry", b"")
        if geometry:
            self.restoreGeometry(geometry)

        length = self.settings.value("length", DEFAULT_LENGTH, type=int)
        self.generator.set_options(
            GeneratorOptions(
                length=max(MIN_LENGTH, min(MAX_LENGTH, length)),
                include_uppercase=self.settings.value("upper", True, type=bool),
                include_lowercase=self.settings.value("lower", True, type=bool),
                include_numbers=self.settings.value("numbers", True, type=bool),
                include_symbols=self.settings.value("symbols", True, type=bool),
            )
        )

    def _save_settings(self) -> None:
        options = self.generator.options()
        self.settings.setValue("geometry", self.saveGeometry())
        self.settings.setValue("length", options.length)
        self.settings.setValue("upper", options.include_uppercase)
        self.settings.setValue("lower", options.include_lowercase)
        self.settings.setValue("numbers", options.include_numbers)
        self.settings.setValue("symbols", options.include_symbols)
        self.settings.sync()

    def closeEvent(self, event: QtGui.QCloseEvent) -> None:
        self._save_settings()
        super().closeEvent(event)


# =========================
#          ENTRY
# =========================

def main() -> None:
    # High-DPI friendliness (must be set before app creation)
    QtWidgets.QApplication.setAttribute(QtCore.Qt.AA_EnableHighDpiScaling, True)
    QtWidgets.QApplication.setAttribute(QtCore.Qt.AA_UseHighDpiPixmaps, True)

    logging.basicConfig(level=logging.WARNING, format="%(levelname)s: %(message)s")

    app = QtWidgets.QApplication(sys.argv)
    app.setOrganizationName(APP_ORG)
    app.setApplicationName(APP_NAME)

    window = MainWindow()
    window.show()
    sys.exit(app.exec_())


if __name__ == "__main__":
    main()
