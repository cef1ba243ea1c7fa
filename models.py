# models.py
from dataclasses import dataclass, field
from typing import List

@dataclass(frozen=True)
class ChapterFile:
    filename: str
    book: str
    chapter: int
    verses: List[str]

    @property
    def verse_count(self):
        return len(self.verses)

    def verse(self, number):
        """Return verse `number` (1-indexed) or None when out of range."""
        if 1 <= number <= len(self.verses):
            return self.verses[number - 1]
        return None

@dataclass
class BookIndexEntry:
    book: str
    chapters: List[int] = field(default_factory=list)
    files: List[str] = field(default_factory=list)

    @property
    def chapter_count(self):
        return len(self.chapters)
