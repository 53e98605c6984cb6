import io

import pytest

from dsworkbench.contact import RECORD, Contact, Person, main


def _alice():
    return Person("alice", "f", 30, "555", "home")


def _bob():
    return Person("bob", "m", 25, "556", "work")


def test_add_and_find():
    book = Contact()
    book.add(_alice())
    assert book.find("alice") == _alice()
    assert book.find("carol") is None
    assert len(book) == 1


def test_delete_returns_person_and_shifts():
    book = Contact()
    book.add(_alice())
    book.add(_bob())
    removed = book.delete("alice")
    assert removed == _alice()
    assert [p.name for p in book] == ["bob"]


def test_delete_missing_raises():
    book = Contact()
    book.add(_alice())
    with pytest.raises(KeyError):
        book.delete("zed")


def test_clear_empties():
    book = Contact()
    book.add(_alice())
    book.add(_bob())
    book.clear()
    assert len(book) == 0


def test_modify_replaces_entry():
    book = Contact()
    book.add(_alice())
    book.modify("alice", _bob())
    assert list(book) == [_bob()]
    with pytest.raises(KeyError):
        book.modify("alice", _alice())


def test_sort_by_name_and_age():
    book = Contact()
    book.add(_bob())
    book.add(_alice())
    book.sort_by_name()
    assert [p.name for p in book] == ["alice", "bob"]
    book.sort_by_age()
    assert [p.age for p in book] == [25, 30]


def test_format_table_has_header_and_rows():
    book = Contact()
    book.add(_alice())
    lines = book.format_table().splitlines()
    assert lines[0].startswith("名字")
    assert len(lines) == 2
    assert lines[1].split() == ["alice", "f", "30", "555", "home"]


def test_field_limits():
    with pytest.raises(ValueError):
        Person("x" * 20, "m", 1, "1", "a")
    with pytest.raises(ValueError):
        Person("x", "m", 1, "1" * 12, "a")
    assert Person("x" * 19, "m", 1, "1" * 11, "a" * 29).name == "x" * 19


def test_record_round_trip():
    person = _alice()
    data = person.to_bytes()
    assert len(data) == RECORD.size
    assert Person.from_bytes(data) == person


def test_save_and_load(tmp_path):
    path = tmp_path / "contact.dat"
    book = Contact()
    book.add(_alice())
    book.add(_bob())
    book.save(path)
    assert path.stat().st_size == 2 * RECORD.size
    loaded = Contact()
    loaded.load(path)
    assert list(loaded) == [_alice(), _bob()]


def test_load_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        Contact().load(tmp_path / "missing.dat")


def test_main_adds_and_saves(tmp_path, monkeypatch, capsys):
    path = tmp_path / "book.dat"
    script = "1\ncarol\nf\n41\n557\ncity\n6\n0\n"
    monkeypatch.setattr("sys.stdin", io.StringIO(script))
    assert main([str(path)]) == 0
    out = capsys.readouterr().out
    assert "*** 添加成功 ***" in out
    assert "*** 退出通讯录 ***" in out
    loaded = Contact()
    loaded.load(path)
    assert [p.name for p in loaded] == ["carol"]


def test_main_delete_all(tmp_path, monkeypatch, capsys):
    path = tmp_path / "book.dat"
    book = Contact()
    book.add(_alice())
    book.save(path)
    monkeypatch.setattr("sys.stdin", io.StringIO("2\n2\n0\n"))
    main([str(path)])
    assert "*** 全部联系人已全部清空 ***" in capsys.readouterr().out
    assert path.stat().st_size == 0