# routes/bible.py
from flask import Blueprint, jsonify, request, current_app
import logging
import random

from schemas.query_schemas import (
    BookQuery, ChapterQuery, VerseQuery, RangeQuery, RandomVerseQuery, SearchQuery, parse_query,
)
from utils.chapters import ChapterIndex, parse_chapter_filename
from utils.errors import NotFoundError, DataDirectoryError
from utils.search import BibleSearchEngine

bible_bp = Blueprint('bible', __name__)

logger = logging.getLogger(__name__)

def get_index():
    return ChapterIndex(current_app.config['BIBLE_DIR'])

def _require_book(index_map, book):
    entry = index_map.get(book)
    if entry is None:
        raise NotFoundError("book not found", book=book)
    return entry

def _load_chapter(index, book, chapter, files=None):
    filename = index.find_chapter_file(book, chapter, files)
    if filename is None:
        raise NotFoundError("chapter not found", book=book, requestedChapter=chapter)
    chapter_file = index.parse_chapter_file(filename)
    if chapter_file is None:
        raise DataDirectoryError("could not read chapter file", file=filename)
    return chapter_file

@bible_bp.route('/health', methods=['GET'])
def health():
    index = get_index()
    files = index.list_chapter_files()
    exists = index.exists()
    payload = {
        'ok': exists and bool(files),
        'bibleDir': str(index.bible_dir),
        'exists': exists,
        'files': len(files),
        'duplicates': len(index.duplicate_chapters(files)),
    }
    if not payload['ok']:
        logger.warning(f"Health check failed: {index.bible_dir} missing or empty")
        payload['error'] = "bible directory missing or empty"
        return jsonify(payload), 500
    return jsonify(payload)

@bible_bp.route('/books', methods=['GET'])
def get_books():
    books = get_index().index_books()
    items = [{'book': entry.book, 'chapters': entry.chapter_count} for entry in books.values()]
    return jsonify({'ok': True, 'count': len(items), 'items': items})

@bible_bp.route('/book/chapters', methods=['GET'])
def get_book_chapters():
    query = parse_query(BookQuery, request.args)
    entry = _require_book(get_index().index_books(), query.book)
    return jsonify({
        'ok': True,
        'book': entry.book,
        'count': entry.chapter_count,
        'chapters': entry.chapters,
    })

@bible_bp.route('/book/meta', methods=['GET'])
def get_book_meta():
    query = parse_query(BookQuery, request.args)
    index = get_index()
    entry = _require_book(index.index_books(), query.book)
    total_verses = sum(index.verse_count(filename) for filename in entry.files)
    return jsonify({
        'ok': True,
        'book': entry.book,
        'chapters': entry.chapter_count,
        'chapterNumbers': entry.chapters,
        'files': entry.files,
        'totalVerses': total_verses,
    })

@bible_bp.route('/chapter', methods=['GET'])
def get_chapter():
    query = parse_query(ChapterQuery, request.args)
    chapter_file = _load_chapter(get_index(), query.book, query.chapter)
    return jsonify({
        'ok': True,
        'book': chapter_file.book,
        'chapter': chapter_file.chapter,
        'file': chapter_file.filename,
        'count': chapter_file.verse_count,
        'verses': chapter_file.verses,
    })

@bible_bp.route('/chapter/verses', methods=['GET'])
def get_chapter_verses():
    query = parse_query(ChapterQuery, request.args)
    index = get_index()
    chapter_file = _load_chapter(index, query.book, query.chapter)
    engine = BibleSearchEngine(index)
    items = [
        {'verse': number, **engine.verse_stats(text)}
        for number, text in enumerate(chapter_file.verses, start=1)
    ]
    return jsonify({
        'ok': True,
        'book': chapter_file.book,
        'chapter': chapter_file.chapter,
        'count': len(items),
        'items': items,
    })

@bible_bp.route('/verse/random', methods=['GET'])
def get_random_verse():
    query = parse_query(RandomVerseQuery, request.args)
    index = get_index()
    files = index.list_chapter_files()
    if not files:
        raise DataDirectoryError("bible directory missing or empty")

    candidates = files
    if query.book:
        candidates = index.files_for_book(query.book, candidates)
    if query.chapter:
        candidates = [name for name in candidates if parse_chapter_filename(name)[1] == query.chapter]
    if not candidates:
        raise NotFoundError("no chapters match the given filters", book=query.book, chapter=query.chapter)

    # A seeded generator makes the pick reproducible for the same files and filters
    rng = random.Random(query.seed) if query.seed is not None else random
    filename = rng.choice(candidates)
    chapter_file = index.parse_chapter_file(filename)
    if chapter_file is None:
        raise DataDirectoryError("could not read chapter file", file=filename)
    if not chapter_file.verses:
        raise NotFoundError("chapter has no verses", book=chapter_file.book, chapter=chapter_file.chapter)

    position = rng.randrange(chapter_file.verse_count)
    return jsonify({
        'ok': True,
        'book': chapter_file.book,
        'chapter': chapter_file.chapter,
        'verse': position + 1,
        'text': chapter_file.verses[position],
        'file': filename,
        'seed': query.seed,
    })

@bible_bp.route('/search', methods=['GET'])
def search_bible():
    query = parse_query(SearchQuery, request.args)
    index = get_index()
    limit = min(query.limit or current_app.config['SEARCH_DEFAULT_LIMIT'],
                current_app.config['SEARCH_MAX_LIMIT'])

    if query.book and not index.files_for_book(query.book):
        raise NotFoundError("book not found", book=query.book)

    items = BibleSearchEngine(index).search(query.q, book=query.book, limit=limit)
    return jsonify({
        'ok': True,
        'q': query.q,
        'book': query.book,
        'limit': limit,
        'count': len(items),
        'items': items,
    })

@bible_bp.route('/files', methods=['GET'])
def get_files():
    index = get_index()
    items = []
    for filename in index.list_chapter_files():
        try:
            size = index.chapter_file_size(filename)
        except OSError as e:
            logger.error(f"Cannot stat {filename}: {str(e)}")
            raise DataDirectoryError(f"cannot stat {filename}", file=filename)
        items.append({'file': filename, 'bytes': size})
    return jsonify({'ok': True, 'count': len(items), 'items': items})

@bible_bp.route('/stats', methods=['GET'])
def get_stats():
    index = get_index()
    files = index.list_chapter_files()
    books = index.index_books(files)
    return jsonify({
        'ok': True,
        'books': len(books),
        'chapters': sum(entry.chapter_count for entry in books.values()),
        'verses': sum(index.verse_count(filename) for filename in files),
    })

@bible_bp.route('/range', methods=['GET'])
def get_range():
    query = parse_query(RangeQuery, request.args)
    index = get_index()
    files = index.list_chapter_files()
    entry = index.index_books(files).get(query.book)
    chapters = [c for c in entry.chapters if query.from_ <= c <= query.to] if entry else []
    if not chapters:
        raise NotFoundError("no chapters found in range", book=query.book, **{'from': query.from_, 'to': query.to})

    preview_chars = current_app.config['PREVIEW_CHARS']
    items = []
    for chapter in chapters:
        chapter_file = index.parse_chapter_file(index.find_chapter_file(query.book, chapter, files))
        verses = chapter_file.verses if chapter_file else []
        items.append({
            'chapter': chapter,
            'verses': len(verses),
            'preview': verses[0][:preview_chars] if verses else '',
        })
    return jsonify({
        'ok': True,
        'book': query.book,
        'from': query.from_,
        'to': query.to,
        'count': len(items),
        'items': items,
    })

@bible_bp.route('/verse', methods=['GET'])
def get_single_verse():
    query = parse_query(VerseQuery, request.args)
    index = get_index()
    files = index.list_chapter_files()
    entry = _require_book(index.index_books(files), query.book)
    if query.chapter not in entry.chapters:
        raise NotFoundError(
            "chapter not found",
            book=query.book,
            requestedChapter=query.chapter,
            availableChapters=entry.chapters,
        )

    chapter_file = _load_chapter(index, query.book, query.chapter, files)
    text = chapter_file.verse(query.verse)
    if text is None:
        raise NotFoundError(
            "verse not found",
            book=query.book,
            chapter=query.chapter,
            requestedVerse=query.verse,
            verseCount=chapter_file.verse_count,
        )
    return jsonify({
        'ok': True,
        'book': query.book,
        'chapter': query.chapter,
        'verse': query.verse,
        'text': text,
    })
