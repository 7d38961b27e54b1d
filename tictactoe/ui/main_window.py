import logging

from ..game_logic import Match, DEFAULT_NAMES
from ..ui.board_widget import BoardWidget

from PySide6.QtWidgets import (
    QMainWindow, QWidget, QVBoxLayout, QHBoxLayout, QFormLayout,
    QPushButton, QLabel, QMenuBar, QMenu, QLineEdit,
    QGroupBox, QSizePolicy, QStackedWidget
)
from PySide6.QtGui import QAction, QFont
from PySide6.QtCore import Qt, Slot

_logger = logging.getLogger(__name__)

SETUP_PAGE = 0
GAME_PAGE = 1


class TicTacToeWindow(QMainWindow):
    """
    main window: setup page, game page and the session's match
    """
    def __init__(self, match=None, player1="", player2=""):
        """
        init match, ui widgets, signals
        """
        super().__init__()
        self.match = match if match is not None else Match()
        self.board_widget = BoardWidget(self.match.board, parent=self)

        self._setup_ui()
        self.player1_input.setText(player1 or "")
        self.player2_input.setText(player2 or "")
        self._show_setup()

    def _setup_ui(self):
        '''window look + layout'''
        self.setWindowTitle("Tic-Tac-Toe")
        self.setStyleSheet("""
            QMainWindow { background-color: #222; }
            QLabel { color: #eee; }
            QGroupBox { color: #eee; font-weight: bold; }
            QLineEdit { padding: 4px; }
            QPushButton { padding: 6px 14px; }
        """)
        self.stack = QStackedWidget()
        self.setCentralWidget(self.stack)

        self._create_menu_bar()            # top menu
        self._create_setup_page()          # name inputs + start
        self._create_game_page()           # scores, board, controls
        self.stack.addWidget(self.setup_page)
        self.stack.addWidget(self.game_page)
        self.board_widget.cell_clicked.connect(self._on_cell_clicked)

    def _create_menu_bar(self):
        '''game menu actions'''
        menu_bar = QMenuBar()
        game_menu = QMenu("Game", self)
        new_action = QAction("New Game", self)
        new_action.triggered.connect(self.go_home)
        quit_action = QAction("Quit", self)
        quit_action.triggered.connect(self.close)
        game_menu.addAction(new_action)
        game_menu.addSeparator(); game_menu.addAction(quit_action)
        menu_bar.addMenu(game_menu)
        self.setMenuBar(menu_bar)

    def _create_setup_page(self):
        '''player names group + start button'''
        self.setup_page = QWidget()
        layout = QVBoxLayout(self.setup_page)
        group = QGroupBox("Players")
        form = QFormLayout()
        self.player1_input = QLineEdit()
        self.player1_input.setPlaceholderText(DEFAULT_NAMES[0])
        self.player2_input = QLineEdit()
        self.player2_input.setPlaceholderText(DEFAULT_NAMES[1])
        form.addRow(QLabel("Player 1 (X):"), self.player1_input)
        form.addRow(QLabel("Player 2 (O):"), self.player2_input)
        group.setLayout(form)
        layout.addStretch(1)
        layout.addWidget(group)
        self.start_button = QPushButton("Start Game")
        self.start_button.clicked.connect(self.start_game)
        layout.addWidget(self.start_button, alignment=Qt.AlignCenter)
        layout.addStretch(1)

    def _create_game_page(self):
        '''score line, board, status + buttons'''
        self.game_page = QWidget()
        layout = QVBoxLayout(self.game_page)

        scores = QHBoxLayout()
        f = QFont(); f.setPointSize(12); f.setBold(True)
        self.player1_name_label = QLabel(""); self.player1_score_label = QLabel("0")
        self.player2_name_label = QLabel(""); self.player2_score_label = QLabel("0")
        for w in (self.player1_name_label, self.player1_score_label, None,
                  self.player2_score_label, self.player2_name_label):
            if w:
                w.setFont(f); scores.addWidget(w)
            else:
                scores.addStretch(1)
        layout.addLayout(scores)
        layout.addWidget(self.board_widget, 1)

        bottom = QHBoxLayout()
        self.message_label = QLabel("")
        f = QFont(); f.setPointSize(12); self.message_label.setFont(f)
        self.message_label.setAlignment(Qt.AlignLeft | Qt.AlignVCenter)
        self.message_label.setSizePolicy(QSizePolicy.Expanding, QSizePolicy.Preferred)
        self.message_label.setWordWrap(True)
        self.restart_button = QPushButton("Restart"); self.restart_button.clicked.connect(self.restart_game)
        self.home_button = QPushButton("Home"); self.home_button.clicked.connect(self.go_home)
        for w in (self.message_label, None, self.restart_button, self.home_button):
            if w: bottom.addWidget(w)
            else: bottom.addStretch(1)
        layout.addLayout(bottom)

    @Slot(str)
    def _update_message(self, text, is_error=False,
                        is_success=False, is_turn=False):
        # set message text + style
        style = "color: #eee;"
        if is_error:   style = "color: #ff8a8a; font-weight: bold;"
        elif is_success: style = "color: lime; font-weight: bold;"
        elif is_turn:    style = "color: #8acaff; font-weight: bold;"
        self.message_label.setStyleSheet(style)
        self.message_label.setText(text)

    def _update_scores(self):
        s1, s2 = self.match.scores()
        self.player1_score_label.setText(str(s1))
        self.player2_score_label.setText(str(s2))

    def _announce_turn(self):
        self._update_message(f"{self.match.current_player().name}'s turn", is_turn=True)

    def _show_setup(self):
        # back to name entry
        self.home_button.setVisible(False)
        self.stack.setCurrentIndex(SETUP_PAGE)

    @Slot()
    def start_game(self):
        # first game of a session
        self.match.start_game(self.player1_input.text(), self.player2_input.text())
        p1, p2 = self.match.players
        _logger.info(f"New session: {p1.name} vs {p2.name}")
        self.player1_name_label.setText(p1.name)
        self.player2_name_label.setText(p2.name)
        self.home_button.setVisible(False)
        self.board_widget.clear_highlight()
        self.stack.setCurrentIndex(GAME_PAGE)
        self._update_scores()
        self._announce_turn()

    @Slot()
    def restart_game(self):
        # rematch: same names, opener alternates, scores kept
        self.match.start_game(self.player1_input.text(), self.player2_input.text(),
                              is_restart=True)
        self.home_button.setVisible(False)
        self.board_widget.clear_highlight()
        self._announce_turn()

    @Slot()
    def go_home(self):
        # drop scores and alternation, clear names
        self.match.reset_scores()
        self.player1_input.clear(); self.player2_input.clear()
        self._update_scores()
        self._show_setup()

    @Slot(int)
    def _on_cell_clicked(self, index):
        result = self.match.play_turn(index)
        if not result.success:
            self._update_message(result.message, is_error=True)
            return

        self.board_widget.update()
        if result.game_over:
            self.home_button.setVisible(True)
            if result.tie:
                self._update_message("It's a tie!", is_success=True)
            elif result.winner:
                self._update_message(f"{result.winner.name} wins!", is_success=True)
                self.board_widget.highlight_cells(result.winning_combination)
                self._update_scores()
        else:
            self._announce_turn()
