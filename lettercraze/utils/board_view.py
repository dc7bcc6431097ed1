"""Plain-text rendering of a level attempt, driven by engine events."""

from typing import TYPE_CHECKING, List, Optional, Set, Tuple

if TYPE_CHECKING:
    from ..engine.models import RemovalResult, TickResult


class TextBoardView:
    """
    Terminal stand-in for the level player screen.

    Keeps its own copy of what is shown and updates it from the events in
    each result, the way a GUI view would repaint labels.
    """

    def __init__(self, board: List[List[Optional[str]]], max_stars: int = 3):
        self.cells = [list(row) for row in board]
        self.max_stars = max_stars
        self.highlighted: Set[Tuple[int, int]] = set()
        self.score = 0
        self.star_count = 0
        self.found_words: List[str] = []
        self.remaining_time: Optional[float] = None
        self.message = ""
        self.ended = False

    def highlight(self, positions: List[Tuple[int, int]]) -> None:
        self.highlighted = set(positions)

    def apply(self, result: "RemovalResult") -> None:
        """Update the view from a removal result."""
        for event in result.events:
            if event.kind == "highlight_cleared":
                self.highlighted.difference_update(event.positions)
            elif event.kind == "selection_cleared":
                self.highlighted.clear()
            elif event.kind == "word_rejected":
                self.message = f"Rejected {event.word or '(no word)'}: {event.reason}"
            elif event.kind == "score_changed":
                self.score = int(event.value)
            elif event.kind == "word_found":
                self.found_words.append(event.word)
                self.message = f"Found {event.word} (+{result.points})"
            elif event.kind == "stars_changed":
                self.star_count = int(event.value)
            elif event.kind == "level_ended":
                self.ended = True
                self.message = f"Level over ({event.reason})"
        if result.error is not None:
            self.message = f"Error: {result.error.message}"
        self.cells = [list(row) for row in result.board]

    def apply_tick(self, result: "TickResult") -> None:
        """Update the clock and the end flag from a tick."""
        self.remaining_time = result.remaining
        for event in result.events:
            if event.kind == "level_ended":
                self.ended = True
                self.message = f"Level over ({event.reason})"

    def render_board(self) -> str:
        """Grid with row and column indices; selected squares in brackets."""
        if not self.cells:
            return ""
        width = len(self.cells[0])
        lines = ["    " + "".join(f"{c:^4}" for c in range(width))]
        for r, row in enumerate(self.cells):
            parts = [f"{r:>2} |"]
            for c, cell in enumerate(row):
                text = "." if cell is None else cell
                if (r, c) in self.highlighted:
                    parts.append(f"[{text:<2}]")
                else:
                    parts.append(f" {text:<2} ")
            lines.append("".join(parts).rstrip())
        return "\n".join(lines)

    def render(self) -> str:
        stars = "*" * self.star_count + "-" * max(0, self.max_stars - self.star_count)
        header = f"Score: {self.score}  Stars: {stars}  Words: {len(self.found_words)}"
        if self.remaining_time is not None:
            header += f"  Time left: {self.remaining_time:.0f}s"
        lines = [header, self.render_board()]
        if self.found_words:
            lines.append("Found: " + ", ".join(self.found_words))
        if self.message:
            lines.append(self.message)
        return "\n".join(lines)
