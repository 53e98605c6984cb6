"""An address book of people, stored as fixed-size binary records."""

from __future__ import annotations

import argparse
import struct
from dataclasses import dataclass
from enum import IntEnum
from pathlib import Path
from typing import Callable, Iterator, Optional, Sequence, Union

__all__ = [
    "NAME_MAX",
    "SEX_MAX",
    "TELE_MAX",
    "ADDR_MAX",
    "RECORD",
    "Option",
    "Person",
    "Contact",
    "main",
]

PathLike = Union[str, Path]

NAME_MAX = 20
SEX_MAX = 5
TELE_MAX = 12
ADDR_MAX = 30

#: One person on disk: name, sex, padding, age, phone, address, padding.
RECORD = struct.Struct(f"<{NAME_MAX}s{SEX_MAX}s3xi{TELE_MAX}s{ADDR_MAX}s2x")

_INT_MIN = -(2**31)
_INT_MAX = 2**31 - 1

_HEADER = ("名字", "性别", "年龄", "电话", "地址")
_ROW_FORMAT = "{:<20} {:<5} {:<5} {:<13} {:<30}"

DEFAULT_PATH = "contact.dat"


class Option(IntEnum):
    """Menu choices of the interactive address book."""

    EXIT = 0
    ADD = 1
    DEL = 2
    SEARCH = 3
    MODIFY = 4
    SORT = 5
    PRINT = 6


def _check_text(field: str, value: str, limit: int) -> None:
    # The record keeps one byte for the terminating NUL.
    encoded = value.encode("utf-8")
    if len(encoded) > limit - 1 or b"\0" in encoded:
        raise ValueError(f"{field} must fit in {limit - 1} bytes without NUL: {value!r}")


def _decode(raw: bytes) -> str:
    return raw.split(b"\0", 1)[0].decode("utf-8", errors="replace")


@dataclass
class Person:
    """One entry of the address book."""

    name: str
    sex: str
    age: int
    tele: str
    addr: str

    def __post_init__(self) -> None:
        _check_text("name", self.name, NAME_MAX)
        _check_text("sex", self.sex, SEX_MAX)
        _check_text("tele", self.tele, TELE_MAX)
        _check_text("addr", self.addr, ADDR_MAX)
        if not _INT_MIN <= self.age <= _INT_MAX:
            raise ValueError(f"age out of range: {self.age}")

    def to_bytes(self) -> bytes:
        """Encode as one fixed-size record."""
        return RECORD.pack(
            self.name.encode("utf-8"),
            self.sex.encode("utf-8"),
            self.age,
            self.tele.encode("utf-8"),
            self.addr.encode("utf-8"),
        )

    @classmethod
    def from_bytes(cls, data: bytes) -> "Person":
        """Decode one fixed-size record."""
        name, sex, age, tele, addr = RECORD.unpack(data)
        return cls(_decode(name), _decode(sex), age, _decode(tele), _decode(addr))

    def format_row(self) -> str:
        return _ROW_FORMAT.format(self.name, self.sex, self.age, self.tele, self.addr)


class Contact:
    """An ordered collection of people, looked up by name."""

    def __init__(self) -> None:
        self._people: list[Person] = []

    def add(self, person: Person) -> None:
        """Append ``person``."""
        self._people.append(person)

    def _index(self, name: str) -> int:
        for index, person in enumerate(self._people):
            if person.name == name:
                return index
        raise KeyError(name)

    def delete(self, name: str) -> Person:
        """Remove and return the first person called ``name``; raise KeyError if absent."""
        return self._people.pop(self._index(name))

    def clear(self) -> None:
        """Remove everyone."""
        self._people.clear()

    def find(self, name: str) -> Optional[Person]:
        """Return the first person called ``name``, or None."""
        try:
            return self._people[self._index(name)]
        except KeyError:
            return None

    def modify(self, name: str, person: Person) -> None:
        """Replace the first person called ``name``; raise KeyError if absent."""
        self._people[self._index(name)] = person

    def sort_by_name(self) -> None:
        """Order people by name."""
        self._people.sort(key=lambda person: person.name.encode("utf-8"))

    def sort_by_age(self) -> None:
        """Order people by age."""
        self._people.sort(key=lambda person: person.age)

    def format_table(self) -> str:
        """Return a header line followed by one line per person."""
        lines = [_ROW_FORMAT.format(*_HEADER)]
        lines.extend(person.format_row() for person in self._people)
        return "\n".join(lines)

    def save(self, path: PathLike) -> None:
        """Write every person to ``path`` as binary records."""
        with open(path, "wb") as handle:
            for person in self._people:
                handle.write(person.to_bytes())

    def load(self, path: PathLike) -> None:
        """Append the people stored in ``path``; a trailing partial record is ignored."""
        with open(path, "rb") as handle:
            while len(chunk := handle.read(RECORD.size)) == RECORD.size:
                self._people.append(Person.from_bytes(chunk))

    def __len__(self) -> int:
        return len(self._people)

    def __iter__(self) -> Iterator[Person]:
        return iter(self._people)

    def __repr__(self) -> str:
        return f"Contact({self._people!r})"


_MENU = "\n".join(
    [
        "*************************",
        "*** 1.add    2.del    ***",
        "*** 3.search 4.modify ***",
        "*** 5.sort   6.print  ***",
        "*** 0.exit            ***",
        "*************************",
    ]
)


def _read_int(prompt: str) -> int:
    while True:
        text = input(prompt).strip()
        try:
            return int(text)
        except ValueError:
            print("输入有误,请重新输入")


def _read_choice(prompt: str) -> int:
    while True:
        choice = _read_int(prompt)
        if choice in (1, 2):
            return choice
        print("输入有误,请重新输入")


def _read_person(verb: str) -> Person:
    while True:
        name = input(f"请{verb}名字:>").strip()
        sex = input(f"请{verb}性别:>").strip()
        age = _read_int(f"请{verb}年龄:>")
        tele = input(f"请{verb}电话:>").strip()
        addr = input(f"请{verb}地址:>").strip()
        try:
            return Person(name, sex, age, tele, addr)
        except ValueError as error:
            print(f"*** 输入有误: {error} ***")


def _ask_name() -> str:
    return input("请输入要查找的联系人名字:>").strip()


def _show_one(person: Person) -> None:
    print(_ROW_FORMAT.format(*_HEADER))
    print(person.format_row())


def _do_add(book: Contact) -> None:
    book.add(_read_person("输入"))
    print("*** 添加成功 ***")


def _do_delete(book: Contact) -> None:
    if not len(book):
        print("*** 通讯录已空,无法删除 ***")
        return
    choice = _read_choice("可选择的删除方式: 1.指定联系人  2.全部联系人 \n请输入编号:>")
    if choice == 1:
        try:
            book.delete(_ask_name())
        except KeyError:
            print("*** 没找到相对应的联系人 ***")
            return
        print("*** 指定联系人已删除成功 ***")
    else:
        book.clear()
        print("*** 全部联系人已全部清空 ***")


def _do_search(book: Contact) -> None:
    if not len(book):
        print("*** 通讯录为空 ***")
        return
    person = book.find(_ask_name())
    if person is None:
        print("*** 没找到相对应的联系人 ***")
        return
    _show_one(person)


def _do_modify(book: Contact) -> None:
    if not len(book):
        print("*** 通讯录为空 ***")
        return
    name = _ask_name()
    person = book.find(name)
    if person is None:
        print("*** 没找到相对应的联系人 ***")
        return
    _show_one(person)
    book.modify(name, _read_person("修改"))
    print("*** 修改成功 ***")


def _do_sort(book: Contact) -> None:
    choice = _read_choice("可选择的排序方式: 1.名字  2.年龄 \n请输入编号:>")
    if choice == 1:
        book.sort_by_name()
    else:
        book.sort_by_age()
    print("*** 排序成功 ***")


def _do_print(book: Contact) -> None:
    if not len(book):
        print("*** 通讯录为空 ***")
        return
    print(book.format_table())


_ACTIONS: dict[Option, Callable[[Contact], None]] = {
    Option.ADD: _do_add,
    Option.DEL: _do_delete,
    Option.SEARCH: _do_search,
    Option.MODIFY: _do_modify,
    Option.SORT: _do_sort,
    Option.PRINT: _do_print,
}


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the interactive address book; the data file is saved on exit."""
    parser = argparse.ArgumentParser(description="Interactive address book.")
    parser.add_argument("path", nargs="?", default=DEFAULT_PATH, help="data file")
    args = parser.parse_args(argv)

    book = Contact()
    try:
        book.load(args.path)
    except OSError as error:
        print(f"LoadContact: {error}")

    while True:
        print(_MENU)
        try:
            text = input("请选择:>").strip()
        except EOFError:
            text = str(int(Option.EXIT))
        try:
            option = Option(int(text))
        except ValueError:
            print("*** 输入有误,请重新输入 ***")
            continue
        if option is Option.EXIT:
            try:
                book.save(args.path)
            except OSError as error:
                print(f"SaveContact: {error}")
            print("*** 销毁成功 ***")
            print("*** 退出通讯录 ***")
            return 0
        try:
            _ACTIONS[option](book)
        except EOFError:
            continue