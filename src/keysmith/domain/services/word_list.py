"""Word list for memorable passwords."""

from dataclasses import dataclass
from pathlib import Path

DEFAULT_WORDS: tuple[str, ...] = (
    "able", "acid", "also", "atom", "Asia", "aunt", "back", "band", "bank", "base",
    "bath", "bean", "beat", "been", "bell", "best", "bird", "bite", "black", "blank",
    "blind", "blow", "boat", "boil", "bomb", "bone", "book", "both", "box", "brand",
    "bread", "brew", "brief", "bring", "brown", "build", "burn", "busy", "call", "calm",
    "camp", "card", "care", "cart", "case", "city", "clan", "claw", "clay", "coal",
    "code", "coil", "colt", "come", "cool", "copy", "core", "corn", "cost", "couch",
    "cove", "cowl", "cube", "cure", "curl", "curr", "cute", "cyber", "data", "deal",
    "dear", "dean", "deep", "dial", "diet", "disc", "disk", "dock", "dome", "done",
    "down", "draw", "drop", "drug", "drum", "dual", "duty", "each", "edit", "else",
    "emit", "ends", "envy", "epic", "euro", "even", "ever", "exam", "exit", "face",
    "fact", "fail", "fair", "fake", "fall", "fame", "fang", "farm", "fast", "feast",
    "feat",
)


@dataclass(frozen=True)
class WordList:
    """Immutable ordered sequence of dictionary words.

    Attributes:
        words: The words, in their original order.
    """

    words: tuple[str, ...] = DEFAULT_WORDS

    def __post_init__(self) -> None:
        """Drop repeated words, ignoring case, keeping the first occurrence.

        Capitalization makes "apple" and "Apple" identical in a password,
        so the list must hold each word once for distinct indices to mean
        distinct words.
        """
        seen: set[str] = set()
        unique = []
        for word in self.words:
            key = word.lower()
            if key not in seen:
                seen.add(key)
                unique.append(word)
        object.__setattr__(self, "words", tuple(unique))

    def __len__(self) -> int:
        return len(self.words)

    def __getitem__(self, index: int) -> str:
        return self.words[index]

    @classmethod
    def from_file(cls, path: str | Path) -> "WordList":
        """Load a word list from a UTF-8 text file.

        One word per line. Blank lines and lines starting with '#' are skipped.

        Args:
            path: Path to the word list file.

        Returns:
            A WordList with the file's words in order.
        """
        words = []
        for line in Path(path).read_text(encoding="utf-8").splitlines():
            word = line.strip()
            if word and not word.startswith("#"):
                words.append(word)
        return cls(words=tuple(words))


DEFAULT_WORD_LIST = WordList()
