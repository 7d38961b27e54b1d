import pytest

from tictactoe.board import MARKER_X, MARKER_O
from tictactoe.game_logic import GAME_OVER_MESSAGE, INVALID_MOVE_MESSAGE
from tictactoe.ui.main_window import TicTacToeWindow, SETUP_PAGE, GAME_PAGE


@pytest.fixture
def window(qapp):
    w = TicTacToeWindow()
    yield w
    w.close()
    w.deleteLater()


def click(window, *indices):
    for index in indices:
        window.board_widget.cell_clicked.emit(index)


def test_opens_on_setup_page(window):
    assert window.stack.currentIndex() == SETUP_PAGE
    assert window.home_button.isHidden()


def test_prefilled_names(qapp):
    w = TicTacToeWindow(player1="Ann", player2="Ben")
    w.start_game()
    assert w.player1_name_label.text() == "Ann"
    assert w.player2_name_label.text() == "Ben"
    w.deleteLater()


def test_start_uses_default_names(window):
    window.start_game()
    assert window.stack.currentIndex() == GAME_PAGE
    assert window.player1_name_label.text() == "Player 1"
    assert window.player2_name_label.text() == "Player 2"
    assert window.message_label.text() == "Player 1's turn"
    assert window.player1_score_label.text() == "0"


def test_click_places_mark_and_passes_turn(window):
    window.player1_input.setText("Alice"); window.player2_input.setText("Bob")
    window.start_game()
    click(window, 4)
    assert window.match.board.cell(4) == MARKER_X
    assert window.message_label.text() == "Bob's turn"


def test_invalid_click_shows_message(window):
    window.start_game()
    click(window, 4, 4)
    assert window.message_label.text() == INVALID_MOVE_MESSAGE
    assert window.match.current_player().marker == MARKER_O


def test_win_updates_scores_and_shows_home(window):
    window.player1_input.setText("Alice")
    window.start_game()
    click(window, 0, 3, 1, 4, 2)
    assert window.message_label.text() == "Alice wins!"
    assert window.player1_score_label.text() == "1"
    assert window.player2_score_label.text() == "0"
    assert window.board_widget.highlighted_cells() == (0, 1, 2)
    assert not window.home_button.isHidden()
    click(window, 8)
    assert window.message_label.text() == GAME_OVER_MESSAGE


def test_tie_message(window):
    window.start_game()
    click(window, 0, 1, 2, 4, 3, 5, 7, 6, 8)
    assert window.message_label.text() == "It's a tie!"
    assert window.player1_score_label.text() == "0"
    assert not window.home_button.isHidden()


def test_restart_alternates_and_keeps_score(window):
    window.start_game()
    click(window, 0, 3, 1, 4, 2)
    window.restart_game()
    assert window.home_button.isHidden()
    assert window.board_widget.highlighted_cells() == ()
    assert window.message_label.text() == "Player 2's turn"
    assert window.player1_score_label.text() == "1"
    assert window.match.board.read() == ('',) * 9


def test_home_resets_session(window):
    window.player1_input.setText("Alice")
    window.start_game()
    click(window, 0, 3, 1, 4, 2)
    window.restart_game()
    window.go_home()
    assert window.stack.currentIndex() == SETUP_PAGE
    assert window.player1_input.text() == ""
    assert window.match.scores() == (0, 0)
    window.start_game()
    assert window.player1_score_label.text() == "0"
    assert window.message_label.text() == "Player 1's turn"


def test_index_at_maps_grid(window):
    window.board_widget.resize(300, 300)
    assert window.board_widget.index_at(10, 10) == 0
    assert window.board_widget.index_at(150, 150) == 4
    assert window.board_widget.index_at(290, 290) == 8
    assert window.board_widget.index_at(-1, 10) is None


def test_mouse_release_plays_the_clicked_cell(window):
    from PySide6.QtCore import Qt, QEvent, QPointF
    from PySide6.QtGui import QMouseEvent
    from PySide6.QtWidgets import QApplication

    window.start_game()
    widget = window.board_widget
    widget.resize(300, 300)
    pos = QPointF(150, 150)
    event = QMouseEvent(QEvent.MouseButtonRelease, pos, widget.mapToGlobal(pos),
                        Qt.LeftButton, Qt.NoButton, Qt.NoModifier)
    QApplication.sendEvent(widget, event)
    assert window.match.board.cell(4) == MARKER_X
    assert window.message_label.text() == "Player 2's turn"
