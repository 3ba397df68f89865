import logging
from collections import Counter
import pytest
from pretoken_scanner.pretoken_counter import PretokenCounter
from pretoken_scanner.pretokenizer import Pretokenizer

def test_count_small_file(tmp_path):
    path = tmp_path / "corpus.txt"
    path.write_text("the cat<|endoftext|>the dog", encoding="utf-8")
    pretokens = PretokenCounter().count(str(path), ["<|endoftext|>"])
    assert pretokens == Counter({"the": 2, " cat": 1, " dog": 1})

def test_count_matches_sequential_pretokenizer(tmp_path, monkeypatch):
    monkeypatch.setattr(PretokenCounter, "chunk_min_size", 64)
    monkeypatch.setattr(PretokenCounter, "buffer_size", 32)
    special_tokens = ["<|endoftext|>"]
    stories = [f"Story {i}: Tom's dog ran {i * 37} miles.\n\nIt was {'very ' * (i % 4)}tired!" for i in range(200)]
    text = "<|endoftext|>".join(stories)
    path = tmp_path / "corpus.txt"
    path.write_text(text, encoding="utf-8")
    expected = Counter(Pretokenizer(special_tokens).next_token(text))
    del expected["<|endoftext|>"]
    counter = PretokenCounter()
    assert counter.count(str(path), special_tokens) == expected
    assert counter.pretokens == expected

def test_count_without_special_tokens(tmp_path):
    path = tmp_path / "corpus.txt"
    path.write_text("a b a b a", encoding="utf-8")
    assert PretokenCounter().count(str(path)) == Counter({"a": 1, " b": 2, " a": 2})

def test_count_replaces_invalid_utf8(tmp_path):
    path = tmp_path / "corpus.txt"
    path.write_bytes(b"ab\xffcd")
    assert PretokenCounter().count(str(path), []) == Counter({"ab": 1, chr(0xFFFD) + "cd": 1})

def test_count_empty_file(tmp_path):
    path = tmp_path / "empty.txt"
    path.write_bytes(b"")
    assert PretokenCounter().count(str(path), ["<|endoftext|>"]) == Counter()

def test_count_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        PretokenCounter().count(str(tmp_path / "missing.txt"), [])

def test_count_logs_progress(tmp_path, caplog):
    caplog.set_level(logging.INFO, logger="PretokenCounter")
    path = tmp_path / "corpus.txt"
    path.write_text("hello world", encoding="utf-8")
    PretokenCounter().count(str(path), [])
    assert any("Finished counting pretokens" in record.getMessage() for record in caplog.records)
