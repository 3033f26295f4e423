"""
cli.py - Command-line interface for the Connect Four engine

Commands:
    play       Play against the computer in the terminal
    move       Apply a column to a serialized state and print the result
    suggest    Print the computer's column for a serialized state
    translate  Convert a serialized state between naming conventions

States are read from --state or, if it is omitted, from standard input.
"""

import argparse
import random
import sys
from typing import List, Optional, TextIO

from connect_four.ai.minimax import MinimaxPlayer
from connect_four.ai.search import choose_move
from connect_four.data.wire import WireFormat, dumps, loads
from connect_four.debug import DebugLevel, debug
from connect_four.errors import ConnectFourError
from connect_four.game.session import ConnectFourGame
from connect_four.game.state import apply_move
from connect_four.utils import COLS, Color, QualityLevel

QUALITY_CHOICES = [level.value for level in QualityLevel]
FORMAT_CHOICES = [fmt.value for fmt in WireFormat]


class SimpleCLI:
    """Command-line front end for the engine."""

    def __init__(self, stdin: TextIO = None, stdout: TextIO = None, stderr: TextIO = None):
        """Initialize the CLI. Streams default to the process's standard streams."""
        self.stdin = stdin or sys.stdin
        self.stdout = stdout or sys.stdout
        self.stderr = stderr or sys.stderr
        self.args = None

    def build_parser(self) -> argparse.ArgumentParser:
        parser = argparse.ArgumentParser(description='Connect Four engine')
        parser.add_argument('--debug-level', choices=[lvl.name.lower() for lvl in DebugLevel],
                            help='Logging level (default: warning, or CONNECT_FOUR_DEBUG_LEVEL)')
        parser.add_argument('--log-file', help='Also write log messages to this file')

        subparsers = parser.add_subparsers(dest='command', help='Command to run')

        play_parser = subparsers.add_parser('play', help='Play a game against the computer')
        play_parser.add_argument('--quality', choices=QUALITY_CHOICES, default='best',
                                 help='Computer strength')
        play_parser.add_argument('--first', choices=['human', 'computer'], default='human',
                                 help='Who moves first (the first player is red)')
        play_parser.add_argument('--seed', type=int, help='Seed for the "bad" quality tier')

        move_parser = subparsers.add_parser('move', help='Apply a move to a serialized state')
        move_parser.add_argument('column', type=int, help=f'Column 0-{COLS - 1}')
        self._add_state_arguments(move_parser)

        suggest_parser = subparsers.add_parser('suggest', help="Print the computer's column")
        suggest_parser.add_argument('--quality', choices=QUALITY_CHOICES, default='best',
                                    help='Computer strength')
        suggest_parser.add_argument('--seed', type=int, help='Seed for the "bad" quality tier')
        suggest_parser.add_argument('--scores', action='store_true',
                                    help='Also print the minimax score of every column')
        self._add_state_arguments(suggest_parser)

        translate_parser = subparsers.add_parser('translate',
                                                 help='Convert a state to the other convention')
        self._add_state_arguments(translate_parser)

        return parser

    @staticmethod
    def _add_state_arguments(parser: argparse.ArgumentParser) -> None:
        parser.add_argument('--state', help='Serialized state (default: read standard input)')
        parser.add_argument('--format', choices=FORMAT_CHOICES, default='snake',
                            help='Naming convention of the state')

    def parse_args(self, argv: Optional[List[str]] = None) -> None:
        """Parse command-line arguments and configure logging."""
        self.args = self.build_parser().parse_args(argv)

        debug.configure_from_env()
        if self.args.debug_level:
            debug.set_from_string(self.args.debug_level)
        if self.args.log_file:
            debug.configure(log_file=self.args.log_file)

    def run(self, argv: Optional[List[str]] = None) -> int:
        """
        Run the CLI.

        Returns:
            Process exit status
        """
        if self.args is None:
            self.parse_args(argv)

        commands = {
            'play': self.play_game,
            'move': self.apply_move,
            'suggest': self.suggest_move,
            'translate': self.translate_state,
        }
        command = commands.get(self.args.command)
        if command is None:
            self.stderr.write("Please specify a command. Use --help for options.\n")
            return 1

        try:
            command()
        except ConnectFourError as e:
            debug.debug(f"{self.args.command} failed: {e!r}", "cli")
            self.stderr.write(f"Error: {e}\n")
            return 2
        return 0

    def _read_state(self):
        text = self.args.state if self.args.state is not None else self.stdin.read()
        return loads(text.strip(), WireFormat(self.args.format))

    def _rng(self) -> Optional[random.Random]:
        seed = getattr(self.args, 'seed', None)
        return random.Random(seed) if seed is not None else None

    def apply_move(self) -> None:
        fmt = WireFormat(self.args.format)
        state = apply_move(self._read_state(), self.args.column)
        self.stdout.write(dumps(state, fmt) + "\n")

    def suggest_move(self) -> None:
        state = self._read_state()
        quality = QualityLevel(self.args.quality)
        column = choose_move(state, quality, self._rng())
        self.stdout.write(f"{column}\n")

        if self.args.scores:
            player = MinimaxPlayer(depth=4, pruning=False)
            for index, score in enumerate(player.score_moves(state)):
                shown = "full" if score is None else f"{score:g}"
                self.stdout.write(f"  column {index}: {shown}\n")

    def translate_state(self) -> None:
        source = WireFormat(self.args.format)
        target = WireFormat.CAMEL if source is WireFormat.SNAKE else WireFormat.SNAKE
        self.stdout.write(dumps(self._read_state(), target) + "\n")

    def play_game(self) -> None:
        """Play a Connect Four game interactively."""
        computer = Color.RED if self.args.first == 'computer' else Color.YELLOW
        game = ConnectFourGame(computer_color=computer,
                               quality=QualityLevel(self.args.quality), rng=self._rng())

        self._say(f"You are {game.human_color} ({game.human_color.symbol}). "
                  f"Enter a column number (0-{COLS - 1}) or 'q' to quit.")
        self._say(game.render())

        while not game.is_game_over():
            if game.is_computer_turn():
                column = game.computer_move()
                self._say(f"Computer plays column {column}")
                self._say(game.render())
                continue

            column = self.get_human_move()
            if column is None:
                self._say("Quitting game.")
                return
            try:
                game.play(column)
            except ConnectFourError as e:
                self._say(f"Invalid move: {e}")
                continue
            self._say(game.render())

        winner = game.get_winner()
        if winner is None:
            self._say("It's a draw!")
        elif winner is game.human_color:
            self._say("You win! Congratulations!")
        else:
            self._say("Computer wins! Better luck next time.")

    def get_human_move(self) -> Optional[int]:
        """
        Read a column from the player.

        Returns:
            A column number, or None if the player quits or input ends
        """
        while True:
            self.stdout.write("Your move: ")
            self.stdout.flush()
            line = self.stdin.readline()
            if not line:
                return None
            text = line.strip().lower()
            if text == 'q':
                return None
            try:
                return int(text)
            except ValueError:
                self._say("Please enter a column number or 'q'.")

    def _say(self, message: str) -> None:
        self.stdout.write(message + "\n")


def main(argv: Optional[List[str]] = None) -> int:
    return SimpleCLI().run(argv)


if __name__ == "__main__":
    sys.exit(main())
