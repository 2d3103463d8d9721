import logging

from termcolor import colored

from cell import Cell
from game_of_life import Board

logger = logging.getLogger(__name__)

BANNER = "########### Welcome to the game of life ##########"
HEADER_COLOR = "blue"


def next_cell_state(alive, neighbors):
    """Survive on 2 or 3 live neighbours, birth on exactly 3."""
    if alive and neighbors in (2, 3):
        return Cell.ALIVE
    if not alive and neighbors == 3:
        return Cell.ALIVE
    return Cell.DEAD


def next_generation(board):
    """Advance the simulation by one generation.

    Every cell is computed from ``board`` alone and written to a fresh board,
    so ``board`` itself is left untouched.
    """
    new_board = Board.create_empty(board.size)
    for y in range(board.size):
        for x in range(board.size):
            state = next_cell_state(board.is_cell_alive(x, y), board.count_live_neighbors(x, y))
            new_board.set_cell(x, y, state)
    return new_board


def round_header(round_number):
    return colored(f"########## Round {round_number}: ##########", HEADER_COLOR)


def play_game(config, rng=None, stream=None):
    """Run ``config.rounds`` generations, printing every board along the way.

    The initial board and the board after each transition are printed, so
    ``rounds + 1`` boards are shown. Returns the last board.
    """
    board = Board.create_random(config.board_size, rng=rng)
    print(BANNER, file=stream)
    for round_number in range(config.rounds + 1):
        if round_number:
            board = next_generation(board)
        logger.info("Round %d", round_number)
        logger.debug("Round %d has %d live cells", round_number, board.count_alive())
        print(file=stream)
        print(round_header(round_number), file=stream)
        board.render(stream)
    return board
