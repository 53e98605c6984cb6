"""Three-in-a-row against a computer that plays random empty squares."""

from __future__ import annotations

import argparse
import random
from enum import Enum
from typing import Optional, Sequence

__all__ = ["SIZE", "PLAYER", "COMPUTER", "EMPTY", "Outcome", "Board", "main"]

SIZE = 3
PLAYER = "*"
COMPUTER = "#"
EMPTY = " "


class Outcome(Enum):
    """State of a game after a move."""

    PLAYER_WINS = "*"
    COMPUTER_WINS = "#"
    DRAW = "Q"
    CONTINUE = "C"


class Board:
    """A 3x3 board; squares are addressed from 1 to 3 in each direction."""

    def __init__(self) -> None:
        self._cells = [[EMPTY] * SIZE for _ in range(SIZE)]

    def __getitem__(self, position: tuple[int, int]) -> str:
        row, col = position
        self._check(row, col)
        return self._cells[row - 1][col - 1]

    @staticmethod
    def _check(row: int, col: int) -> None:
        if not (1 <= row <= SIZE and 1 <= col <= SIZE):
            raise ValueError(f"square ({row}, {col}) is off the board")

    def render(self) -> str:
        """Return the board drawn with '|' and '---' separators."""
        separator = "|".join(["---"] * SIZE)
        lines: list[str] = []
        for index, row in enumerate(self._cells):
            lines.append("|".join(f" {cell} " for cell in row))
            if index < SIZE - 1:
                lines.append(separator)
        return "\n".join(lines)

    def place(self, row: int, col: int, mark: str) -> None:
        """Put ``mark`` on an empty square; raise ValueError otherwise."""
        self._check(row, col)
        if self._cells[row - 1][col - 1] != EMPTY:
            raise ValueError(f"square ({row}, {col}) is already taken")
        self._cells[row - 1][col - 1] = mark

    def computer_move(self, rng: random.Random) -> tuple[int, int]:
        """Mark a random empty square for the computer and return it."""
        if self.is_full():
            raise ValueError("no empty square left")
        while True:
            row = rng.randrange(SIZE)
            col = rng.randrange(SIZE)
            if self._cells[row][col] == EMPTY:
                self._cells[row][col] = COMPUTER
                return row + 1, col + 1

    def is_full(self) -> bool:
        """Return True when no square is empty."""
        return all(cell != EMPTY for row in self._cells for cell in row)

    def outcome(self) -> Outcome:
        """Return who has three in a row, a draw, or that play continues."""
        c = self._cells
        lines = [row for row in c]
        lines.extend([c[r][col] for r in range(SIZE)] for col in range(SIZE))
        lines.append([c[i][i] for i in range(SIZE)])
        lines.append([c[i][SIZE - 1 - i] for i in range(SIZE)])
        for line in lines:
            if line[0] != EMPTY and all(cell == line[0] for cell in line):
                return Outcome(line[0])
        if self.is_full():
            return Outcome.DRAW
        return Outcome.CONTINUE


_MENU = "\n".join(
    [
        "******************************",
        "****** 1.play    0.exit ******",
        "******************************",
    ]
)


def _player_move(board: Board) -> None:
    print("玩家走:>")
    while True:
        parts = input("请输入要下的坐标:>\n").split()
        try:
            row, col = (int(part) for part in parts)
            board.place(row, col, PLAYER)
            return
        except ValueError:
            if len(parts) == 2 and all(p.lstrip("-").isdigit() for p in parts):
                row, col = int(parts[0]), int(parts[1])
                if 1 <= row <= SIZE and 1 <= col <= SIZE:
                    print("该坐标已经被占用")
                    continue
            print("坐标非法,请重新输入!")


def _play(rng: random.Random) -> Outcome:
    board = Board()
    print(board.render())
    while True:
        _player_move(board)
        print(board.render())
        result = board.outcome()
        if result is not Outcome.CONTINUE:
            return result
        print("电脑走:>")
        board.computer_move(rng)
        print(board.render())
        result = board.outcome()
        if result is not Outcome.CONTINUE:
            return result


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the game menu until the player chooses to exit."""
    parser = argparse.ArgumentParser(description="Play three in a row.")
    parser.add_argument("--seed", type=int, default=None, help="random seed")
    args = parser.parse_args(argv)
    rng = random.Random(args.seed)

    while True:
        print(_MENU)
        try:
            text = input("请选择：>").strip()
        except EOFError:
            print("退出游戏")
            return 0
        if text == "1":
            try:
                result = _play(rng)
            except EOFError:
                print("退出游戏")
                return 0
            if result is Outcome.PLAYER_WINS:
                print("玩家赢")
            elif result is Outcome.COMPUTER_WINS:
                print("电脑赢")
            else:
                print("平局")
        elif text == "0":
            print("退出游戏")
            return 0
        else:
            print("选择错误,请重新选择-_-!")