# utils/search.py
import re

class BibleSearchEngine:
    def __init__(self, index):
        self.index = index

    def tokenize(self, text):
        """Split text into words"""
        return re.findall(r"\w+(?:'\w+)*", text)

    def verse_stats(self, text):
        """Word and character counts for one verse"""
        return {
            'words': len(self.tokenize(text)),
            'chars': len(text),
        }

    def text_search(self, query, book=None, limit=25):
        """Case-insensitive substring search over chapter files in filename order.

        Stops reading files as soon as `limit` hits have been collected.
        """
        needle = query.lower()
        results = []
        if limit <= 0:
            return results

        files = self.index.list_chapter_files()
        if book:
            files = self.index.files_for_book(book, files)

        for filename in files:
            chapter_file = self.index.parse_chapter_file(filename)
            if chapter_file is None:
                continue
            for number, text in enumerate(chapter_file.verses, start=1):
                if needle in text.lower():
                    results.append({
                        'book': chapter_file.book,
                        'chapter': chapter_file.chapter,
                        'verse': number,
                        'text': text,
                    })
                    if len(results) >= limit:
                        return results
        return results

    def search(self, query, book=None, limit=25):
        """Main search method"""
        return self.text_search(query.strip(), book=book, limit=limit)
