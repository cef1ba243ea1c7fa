import pytest

from app import create_app

CHAPTERS = {
    '001_GEN_01.txt': ('Genesis', 1, [
        "In the beginning God created the heaven and the earth.",
        "And the earth was without form, and void; and darkness was upon the face of the deep.",
        "And God said, Let there be light: and there was light.",
        "And God saw the light, that it was good: and God divided the light from the darkness.",
    ]),
    '001_GEN_02.txt': ('Genesis', 2, [
        "Thus the heavens and the earth were finished, and all the host of them.",
        "And on the seventh day God ended his work which he had made.",
    ]),
    '001_GEN_03.txt': ('Genesis', 3, [
        "Now the serpent was more subtil than any beast of the field which the LORD God had made. "
        "And he said unto the woman, Yea, hath God said?",
    ]),
    '014_2CH_01.txt': ('2 Chronicles', 1, [
        "And Solomon the son of David was strengthened in his kingdom.",
        "Then Solomon spake unto all Israel.",
    ]),
    '019_PSA_01.txt': ('Psalms', 1, [
        "Blessed is the man that walketh not in the counsel of the ungodly.",
        "But his delight is in the law of the LORD.",
    ]),
    '019_PSA_119.txt': ('Psalms', 119, [
        "Blessed are the undefiled in the way, who walk in the law of the LORD.",
        "Thy word is a lamp unto my feet, and a light unto my path.",
    ]),
}

TOTAL_VERSES = sum(len(verses) for _, _, verses in CHAPTERS.values())


def write_chapter(directory, filename, book_name, chapter, verses):
    lines = [book_name, f"Chapter {chapter}", *verses]
    (directory / filename).write_text('\n'.join(lines) + '\n', encoding='utf-8')


@pytest.fixture
def bible_dir(tmp_path):
    directory = tmp_path / 'data' / 'bible'
    directory.mkdir(parents=True)
    for filename, (book_name, chapter, verses) in CHAPTERS.items():
        write_chapter(directory, filename, book_name, chapter, verses)
    # Ignored: wrong pattern
    (directory / 'README.md').write_text('not a chapter\n', encoding='utf-8')
    (directory / '001_gen_04.txt').write_text('lower\ncase\nbook code\n', encoding='utf-8')
    (directory / 'GEN_05.txt').write_text('no\nordinal\nhere\n', encoding='utf-8')
    return directory


@pytest.fixture
def public_dir(tmp_path):
    directory = tmp_path / 'public'
    (directory / 'css').mkdir(parents=True)
    (directory / 'index.html').write_text('<h1>Bible Vision</h1>\n', encoding='utf-8')
    (directory / 'css' / 'site.css').write_text('body { margin: 0; }\n', encoding='utf-8')
    (tmp_path / 'secret.txt').write_text('do not serve\n', encoding='utf-8')
    return directory


@pytest.fixture
def make_app(bible_dir, public_dir):
    def _make_app(**overrides):
        config = {
            'TESTING': True,
            'BIBLE_DIR': bible_dir,
            'PUBLIC_DIR': public_dir,
        }
        config.update(overrides)
        return create_app(config)
    return _make_app


@pytest.fixture
def app(make_app):
    return make_app()


@pytest.fixture
def client(app):
    return app.test_client()
