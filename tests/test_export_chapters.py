import json

from scripts.export_chapters import (
    chapter_filename, export_kjv_chapters, group_chapters, parse_reference,
)
from utils.chapters import ChapterIndex


def test_parse_reference():
    assert parse_reference('Genesis 1:1') == ('Genesis', 1, 1)
    assert parse_reference('1 Kings 2:10') == ('1 Kings', 2, 10)
    assert parse_reference('Song of Solomon 8:14') == ('Song of Solomon', 8, 14)


def test_chapter_filename():
    assert chapter_filename('Genesis', 1) == '001_GEN_01.txt'
    assert chapter_filename('2 Chronicles', 36) == '014_2CH_36.txt'
    assert chapter_filename('Psalms', 119) == '019_PSA_119.txt'
    assert chapter_filename("Solomon's Song", 2) == '022_SNG_02.txt'
    assert chapter_filename('Revelation', 22) == '066_REV_22.txt'


def test_group_chapters_skips_unknown_books():
    chapters, skipped = group_chapters({
        'Genesis 1:2': 'second',
        'Genesis 1:1': '# first ',
        'Tobit 1:1': 'apocrypha',
        'nonsense': 'x',
    })
    assert chapters == {('Genesis', 1): {1: 'first', 2: 'second'}}
    assert sorted(skipped) == ['Tobit 1:1', 'nonsense']


def test_export_round_trips_through_index(tmp_path):
    source = tmp_path / 'kjv.json'
    source.write_text(json.dumps({
        'Genesis 1:2': 'And the earth was without form, and void.',
        'Genesis 1:1': 'In the beginning God created the heaven and the earth.',
        '2 Chronicles 1:1': 'And Solomon the son of David was strengthened.',
        'Psalms 119:1': 'Blessed are the undefiled in the way.',
    }), encoding='utf-8')
    output = tmp_path / 'data' / 'bible'

    written = export_kjv_chapters(source, output)

    assert written == ['001_GEN_01.txt', '014_2CH_01.txt', '019_PSA_119.txt']
    index = ChapterIndex(output)
    assert index.list_chapter_files() == written
    genesis = index.parse_chapter_file('001_GEN_01.txt')
    assert genesis.verses == [
        'In the beginning God created the heaven and the earth.',
        'And the earth was without form, and void.',
    ]
    assert (output / '001_GEN_01.txt').read_text(encoding='utf-8').splitlines()[:2] == ['Genesis', 'Chapter 1']
    assert list(index.index_books()) == ['GEN', '2CH', 'PSA']
