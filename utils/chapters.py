# utils/chapters.py
import re
import logging
from pathlib import Path

from models import ChapterFile, BookIndexEntry

logger = logging.getLogger(__name__)

# NNN_BBB_CC.txt, e.g. 001_GEN_01.txt, 014_2CH_36.txt, 019_PSA_119.txt
CHAPTER_FILE_RE = re.compile(r'^(\d{3})_([A-Z]{3}|\d[A-Z]{2})_(\d{2,3})\.txt$')

HEADER_LINES = 2

def parse_chapter_filename(filename):
    """Return (book, chapter) for a valid chapter filename, else None."""
    match = CHAPTER_FILE_RE.match(filename)
    if not match:
        return None
    chapter = int(match.group(3))
    if chapter < 1:
        return None
    return match.group(2), chapter

def split_verses(content):
    """Drop the header lines and return one string per remaining line.

    Only newlines separate verses; a final newline does not add an empty verse.
    """
    lines = re.split(r'\r?\n', content)
    if lines and lines[-1] == '':
        lines.pop()
    return lines[HEADER_LINES:]

class ChapterIndex:
    """File-driven index over a directory of chapter text files.

    Nothing is cached: every call walks the directory again, so edits on
    disk are visible to the next request.
    """

    def __init__(self, bible_dir):
        self.bible_dir = Path(bible_dir)

    def exists(self):
        return self.bible_dir.is_dir()

    def list_chapter_files(self):
        try:
            names = [entry.name for entry in self.bible_dir.iterdir() if entry.is_file()]
        except OSError as e:
            logger.warning(f"Cannot list chapter directory {self.bible_dir}: {e}")
            return []
        return sorted(name for name in names if parse_chapter_filename(name))

    def parse_chapter_file(self, filename):
        parsed = parse_chapter_filename(filename)
        if parsed is None:
            return None
        book, chapter = parsed
        try:
            with open(self.bible_dir / filename, 'r', encoding='utf-8', newline='') as f:
                content = f.read()
        except (OSError, UnicodeDecodeError) as e:
            logger.warning(f"Cannot read chapter file {filename}: {e}")
            return None
        return ChapterFile(filename=filename, book=book, chapter=chapter, verses=split_verses(content))

    def index_books(self, files=None):
        if files is None:
            files = self.list_chapter_files()
        index = {}
        seen = {}
        for filename in files:
            book, chapter = parse_chapter_filename(filename)
            entry = index.setdefault(book, BookIndexEntry(book=book))
            entry.files.append(filename)
            if (book, chapter) in seen:
                logger.warning(
                    f"Duplicate chapter {book} {chapter}: using {seen[(book, chapter)]}, ignoring {filename}"
                )
                continue
            seen[(book, chapter)] = filename
            entry.chapters.append(chapter)
        for entry in index.values():
            entry.chapters.sort()
        return index

    def duplicate_chapters(self, files=None):
        """Return {(book, chapter): [filenames]} for chapters claimed by more than one file."""
        if files is None:
            files = self.list_chapter_files()
        claims = {}
        for filename in files:
            claims.setdefault(parse_chapter_filename(filename), []).append(filename)
        return {key: names for key, names in claims.items() if len(names) > 1}

    def find_chapter_file(self, book, chapter, files=None):
        if files is None:
            files = self.list_chapter_files()
        for filename in files:
            if parse_chapter_filename(filename) == (book, chapter):
                return filename
        return None

    def files_for_book(self, book, files=None):
        if files is None:
            files = self.list_chapter_files()
        return [name for name in files if parse_chapter_filename(name)[0] == book]

    def verse_count(self, filename):
        chapter_file = self.parse_chapter_file(filename)
        return chapter_file.verse_count if chapter_file else 0

    def chapter_file_size(self, filename):
        return (self.bible_dir / filename).stat().st_size
