import sys
import argparse
import logging

from PySide6.QtWidgets import QApplication
from PySide6.QtCore import Qt
from PySide6.QtGui import QPalette, QColor
from tictactoe.ui.main_window import TicTacToeWindow

# -----------------------------------------------------------------------------
# COLOR CONSTANTS
# -----------------------------------------------------------------------------

WINDOW_COLOR = QColor(34, 34, 34)
WINDOW_TEXT_COLOR = Qt.white
BASE_COLOR = QColor(45, 45, 45)
TEXT_COLOR = Qt.white
BUTTON_COLOR = QColor(66, 66, 66)
BUTTON_TEXT_COLOR = Qt.white
HIGHLIGHT_COLOR = QColor(138, 202, 255)
HIGHLIGHTED_TEXT_COLOR = Qt.black
PLACEHOLDER_TEXT_COLOR = QColor(150, 150, 150)
DISABLED_TEXT_COLOR = QColor(120, 120, 120)

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
LOG_LEVELS = ('DEBUG', 'INFO', 'WARNING', 'ERROR')

# -----------------------------------------------------------------------------
# PALETTE SETUP
# -----------------------------------------------------------------------------

def apply_dark_palette(app: QApplication):
    """
    Dark theme matching the board colors.
    """
    palette = QPalette()
    palette.setColor(QPalette.Window, WINDOW_COLOR)
    palette.setColor(QPalette.WindowText, WINDOW_TEXT_COLOR)
    palette.setColor(QPalette.Base, BASE_COLOR)
    palette.setColor(QPalette.Text, TEXT_COLOR)
    palette.setColor(QPalette.Button, BUTTON_COLOR)
    palette.setColor(QPalette.ButtonText, BUTTON_TEXT_COLOR)
    palette.setColor(QPalette.Highlight, HIGHLIGHT_COLOR)
    palette.setColor(QPalette.HighlightedText, HIGHLIGHTED_TEXT_COLOR)
    palette.setColor(QPalette.PlaceholderText, PLACEHOLDER_TEXT_COLOR)
    # greyed out buttons and labels
    for role in (QPalette.Text, QPalette.ButtonText, QPalette.WindowText):
        palette.setColor(QPalette.Disabled, role, DISABLED_TEXT_COLOR)
    app.setPalette(palette)

# -----------------------------------------------------------------------------
# COMMAND LINE
# -----------------------------------------------------------------------------

def parse_args(argv=None):
    p = argparse.ArgumentParser(description="Two-player Tic-Tac-Toe with running score")
    p.add_argument("--log-level", choices=LOG_LEVELS, default="WARNING",
                   help="logging verbosity")
    p.add_argument("--player1", default="", help="prefill player 1 (X) name")
    p.add_argument("--player2", default="", help="prefill player 2 (O) name")
    return p.parse_args(argv)

# -----------------------------------------------------------------------------
# ENTRY POINT
# -----------------------------------------------------------------------------

def run(argv=None):
    args = parse_args(argv)
    logging.basicConfig(level=getattr(logging, args.log_level), format=LOG_FORMAT)

    app = QApplication(sys.argv[:1])
    app.setStyle('Fusion')
    apply_dark_palette(app)

    window = TicTacToeWindow(player1=args.player1, player2=args.player2)
    window.resize(420, 520)
    window.show()
    return app.exec()


if __name__ == '__main__':
    sys.exit(run())
