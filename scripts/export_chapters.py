# scripts/export_chapters.py
import json
import sys
from pathlib import Path

# Canonical order; the position gives the NNN ordinal of each chapter file
BOOKS = [
    ('Genesis', 'GEN'), ('Exodus', 'EXO'), ('Leviticus', 'LEV'), ('Numbers', 'NUM'),
    ('Deuteronomy', 'DEU'), ('Joshua', 'JOS'), ('Judges', 'JDG'), ('Ruth', 'RUT'),
    ('1 Samuel', '1SA'), ('2 Samuel', '2SA'), ('1 Kings', '1KI'), ('2 Kings', '2KI'),
    ('1 Chronicles', '1CH'), ('2 Chronicles', '2CH'), ('Ezra', 'EZR'), ('Nehemiah', 'NEH'),
    ('Esther', 'EST'), ('Job', 'JOB'), ('Psalms', 'PSA'), ('Proverbs', 'PRO'),
    ('Ecclesiastes', 'ECC'), ('Song of Solomon', 'SNG'), ('Isaiah', 'ISA'), ('Jeremiah', 'JER'),
    ('Lamentations', 'LAM'), ('Ezekiel', 'EZK'), ('Daniel', 'DAN'), ('Hosea', 'HOS'),
    ('Joel', 'JOL'), ('Amos', 'AMO'), ('Obadiah', 'OBA'), ('Jonah', 'JON'),
    ('Micah', 'MIC'), ('Nahum', 'NAM'), ('Habakkuk', 'HAB'), ('Zephaniah', 'ZEP'),
    ('Haggai', 'HAG'), ('Zechariah', 'ZEC'), ('Malachi', 'MAL'),
    ('Matthew', 'MAT'), ('Mark', 'MRK'), ('Luke', 'LUK'), ('John', 'JHN'),
    ('Acts', 'ACT'), ('Romans', 'ROM'), ('1 Corinthians', '1CO'), ('2 Corinthians', '2CO'),
    ('Galatians', 'GAL'), ('Ephesians', 'EPH'), ('Philippians', 'PHP'), ('Colossians', 'COL'),
    ('1 Thessalonians', '1TH'), ('2 Thessalonians', '2TH'), ('1 Timothy', '1TI'), ('2 Timothy', '2TI'),
    ('Titus', 'TIT'), ('Philemon', 'PHM'), ('Hebrews', 'HEB'), ('James', 'JAS'),
    ('1 Peter', '1PE'), ('2 Peter', '2PE'), ('1 John', '1JN'), ('2 John', '2JN'),
    ('3 John', '3JN'), ('Jude', 'JUD'), ('Revelation', 'REV'),
]

BOOKS_MAP = {name: (code, ordinal) for ordinal, (name, code) in enumerate(BOOKS, start=1)}
BOOKS_MAP["Solomon's Song"] = BOOKS_MAP['Song of Solomon']  # Alternate name

def parse_reference(ref):
    """Parse a reference like 'Genesis 1:1' into (book_name, chapter, verse)"""
    book_chapter, verse = ref.rsplit(':', 1)
    book_parts = book_chapter.rsplit(' ', 1)
    chapter = book_parts[-1]
    book_name = ' '.join(book_parts[:-1])
    return book_name, int(chapter), int(verse)

def clean_verse_text(text):
    """Clean verse text by removing any leading '#' and trimming whitespace"""
    return text.lstrip('#').strip()

def chapter_filename(book_name, chapter):
    code, ordinal = BOOKS_MAP[book_name]
    return f"{ordinal:03d}_{code}_{chapter:02d}.txt"

def group_chapters(verses_data):
    """Group a {"Book C:V": text} mapping into {(book_name, chapter): {verse: text}}.

    Returns the grouping and the list of references that were skipped.
    """
    chapters = {}
    skipped = []
    for ref, text in verses_data.items():
        try:
            book_name, chapter, verse = parse_reference(ref)
        except ValueError as e:
            print(f"Error processing reference '{ref}': {e}")
            skipped.append(ref)
            continue
        if book_name not in BOOKS_MAP:
            print(f"Warning: Unknown book '{book_name}' in reference '{ref}'")
            skipped.append(ref)
            continue
        chapters.setdefault((book_name, chapter), {})[verse] = clean_verse_text(text)
    return chapters, skipped

def write_chapter_files(chapters, output_dir):
    """Write one NNN_BBB_CC.txt file per chapter: two header lines, then one verse per line"""
    output_dir = Path(output_dir)
    output_dir.mkdir(parents=True, exist_ok=True)
    written = []
    for (book_name, chapter), verses in sorted(chapters.items(), key=lambda item: (BOOKS_MAP[item[0][0]][1], item[0][1])):
        lines = [book_name, f"Chapter {chapter}"]
        lines.extend(verses[number] for number in sorted(verses))
        filename = chapter_filename(book_name, chapter)
        (output_dir / filename).write_text('\n'.join(lines) + '\n', encoding='utf-8')
        written.append(filename)
    return written

def export_kjv_chapters(json_path, output_dir):
    """Split a KJV JSON file into chapter text files"""
    print(f"Reading JSON file from: {json_path}")
    with open(json_path, 'r', encoding='utf-8') as f:
        verses_data = json.load(f)

    chapters, skipped = group_chapters(verses_data)
    written = write_chapter_files(chapters, output_dir)

    print(f"\nExport complete!")
    print(f"Wrote {len(written)} chapter files to {output_dir}")
    if skipped:
        print(f"Skipped {len(skipped)} verses due to unknown book names or bad references")
    return written

if __name__ == '__main__':
    if len(sys.argv) != 3:
        print("Usage: python scripts/export_chapters.py <path_to_kjv.json> <output_dir>")
        sys.exit(1)

    export_kjv_chapters(sys.argv[1], sys.argv[2])
