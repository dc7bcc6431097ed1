import random
from typing import Dict, List, Optional, Tuple
from pydantic import BaseModel, Field

from ..model.board import Tile


# English letter frequencies (percent) and tile scores. "Qu" is a single tile.
LETTER_TABLE: Dict[str, Tuple[float, int]] = {
    "E": (12.70, 1), "T": (9.06, 1), "A": (8.17, 2), "O": (7.51, 2),
    "I": (6.97, 2), "N": (6.75, 2), "S": (6.33, 2), "H": (6.09, 2),
    "R": (5.99, 2), "D": (4.25, 3), "L": (4.03, 3), "C": (2.78, 3),
    "U": (2.76, 3), "M": (2.41, 3), "W": (2.36, 3), "F": (2.23, 4),
    "G": (2.02, 4), "Y": (1.97, 4), "P": (1.93, 4), "B": (1.29, 4),
    "V": (0.98, 5), "K": (0.77, 5), "J": (0.15, 7), "X": (0.15, 7),
    "Qu": (0.10, 8), "Z": (0.07, 8),
}


class LetterDictionary(BaseModel):
    """
    Frequency and score table for the letters that appear on tiles.

    The same instance is used to fill a board when a session starts and to
    refill it after every removal, so tile density stays consistent.

    Attributes:
        frequencies: Relative sampling weight per letter
        scores: Point value per letter
        seed: Optional random seed for reproducible boards
    """

    frequencies: Dict[str, float] = Field(
        default_factory=lambda: {k: v[0] for k, v in LETTER_TABLE.items()}
    )
    scores: Dict[str, int] = Field(
        default_factory=lambda: {k: v[1] for k, v in LETTER_TABLE.items()}
    )
    seed: Optional[int] = None
    _rng: random.Random = None
    _letters: List[str] = None
    _weights: List[float] = None
    _index: Dict[str, str] = None

    def model_post_init(self, __context) -> None:
        """Check the table and set up the sampler."""
        if not self.frequencies:
            raise ValueError("Letter dictionary needs at least one letter")
        if set(self.frequencies) != set(self.scores):
            missing = set(self.frequencies) ^ set(self.scores)
            raise ValueError(f"Letters without both frequency and score: {sorted(missing)}")
        if any(weight <= 0 for weight in self.frequencies.values()):
            raise ValueError("Letter frequencies must be positive")
        if any(score < 0 for score in self.scores.values()):
            raise ValueError("Letter scores must be non-negative")

        self._rng = random.Random(self.seed)
        self._letters = list(self.frequencies)
        self._weights = [self.frequencies[letter] for letter in self._letters]
        self._index = {letter.upper(): letter for letter in self._letters}

    @classmethod
    def from_scores(cls, scores: Dict[str, int], seed: Optional[int] = None) -> "LetterDictionary":
        """Build a dictionary where every letter is equally likely."""
        return cls(
            frequencies={letter: 1.0 for letter in scores},
            scores=dict(scores),
            seed=seed,
        )

    def reseed(self, seed: Optional[int]) -> None:
        """Restart the sampler from ``seed``."""
        self.seed = seed
        self._rng = random.Random(seed)

    def canonical(self, letter: str) -> str:
        """
        Return the table spelling of ``letter`` (``"QU"`` -> ``"Qu"``).

        Raises:
            KeyError: If the letter is not in the table
        """
        return self._index[letter.upper()]

    def score(self, letter: str) -> int:
        """Point value of ``letter`` (case-insensitive)."""
        return self.scores[self.canonical(letter)]

    def random_letter(self) -> str:
        """Sample a letter according to the frequency weights."""
        return self._rng.choices(self._letters, weights=self._weights, k=1)[0]

    def random_tile(self) -> Tile:
        """Create a new tile holding a weighted random letter."""
        letter = self.random_letter()
        return Tile(content=letter, score=self.scores[letter])

    def make_tile(self, letter: str) -> Tile:
        """Create a tile for a fixed letter, scored from this table."""
        canonical = self.canonical(letter)
        return Tile(content=canonical, score=self.scores[canonical])
