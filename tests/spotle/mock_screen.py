import curses

from spotle.state import Snapshot


class MockScreen:
    def __init__(self, keys: list[int | str] | None = None, height: int = 40, width: int = 40) -> None:
        self.keys = list(keys or [])
        self.height = height
        self.width = width
        self.cells = [[" "] * width for _ in range(height)]
        self.refreshes = 0

    def get_wch(self) -> int | str:
        return self.keys.pop(0)

    def getmaxyx(self) -> tuple[int, int]:
        return self.height, self.width

    def erase(self) -> None:
        self.cells = [[" "] * self.width for _ in range(self.height)]

    def refresh(self) -> None:
        self.refreshes += 1

    def addstr(self, y: int, x: int, text: str, attr: int = 0) -> None:
        if not 0 <= y < self.height:
            raise curses.error("row out of range")
        for offset, char in enumerate(text):
            if x + offset >= self.width:
                raise curses.error("column out of range")
            self.cells[y][x + offset] = char

    def lines(self) -> list[str]:
        return ["".join(row) for row in self.cells]


class MockPainter:
    def __init__(self) -> None:
        self.snapshots: list[Snapshot] = []

    def draw(self, snapshot: Snapshot) -> None:
        self.snapshots.append(snapshot)
