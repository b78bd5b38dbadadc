from DigitList import DigitList
from DigitListErrors import (
    ConcurrentModificationError,
    IllegalStateError,
    IndexOutOfRangeError,
    InvalidDigitError,
    NoSuchElementError,
)

import pytest


def test_Traversal():
    llist = DigitList([0, 1, 2], radix=3)
    cursor = llist.cursor()

    assert not cursor.hasPrevious()
    assert cursor.next() == 0
    assert cursor.next() == 1
    assert cursor.nextIndex() == 2
    assert cursor.previousIndex() == 1
    assert cursor.hasNext()

    assert cursor.previous() == 1
    assert cursor.previous() == 0
    assert not cursor.hasPrevious()
    with pytest.raises(NoSuchElementError):
        cursor.previous()

    assert [cursor.next() for _ in range(3)] == [0, 1, 2]
    assert not cursor.hasNext()
    with pytest.raises(NoSuchElementError):
        cursor.next()


def test_StartPosition():
    llist = DigitList([0, 1, 2], radix=3)

    cursor = llist.cursor(3)
    assert not cursor.hasNext()
    assert cursor.previous() == 2

    cursor = llist.cursor(1)
    assert cursor.next() == 1

    with pytest.raises(IndexOutOfRangeError):
        llist.cursor(4)
    with pytest.raises(IndexOutOfRangeError):
        llist.cursor(-1)


def test_RemoveAfterNext():
    llist = DigitList([0, 1, 2], radix=3)
    cursor = llist.cursor()

    assert cursor.next() == 0
    cursor.remove()
    assert [e for e in llist] == [1, 2]
    assert cursor.nextIndex() == 0
    assert cursor.next() == 1

    cursor.remove()
    with pytest.raises(IllegalStateError):
        cursor.remove()
    assert [e for e in llist] == [2]


def test_RemoveAfterPrevious():
    llist = DigitList([0, 1, 2], radix=3)
    cursor = llist.cursor(3)

    assert cursor.previous() == 2
    cursor.remove()
    assert [e for e in llist] == [0, 1]
    assert cursor.nextIndex() == 2
    assert not cursor.hasNext()
    assert cursor.previous() == 1

    cursor.remove()
    assert [e for e in llist] == [0]
    assert cursor.previous() == 0


def test_RemoveWhileIterating():
    llist = DigitList([0, 1, 2, 3, 4, 5, 6], radix=7)
    cursor = llist.cursor()

    while cursor.hasNext():
        if cursor.next() % 2 == 0:
            cursor.remove()

    assert [e for e in llist] == [1, 3, 5]
    assert llist.headNode.value == 1
    assert llist.tailNode.value == 5


def test_Set():
    llist = DigitList([0, 1, 2], radix=3)
    modCount = llist.modCount

    cursor = llist.cursor()
    with pytest.raises(IllegalStateError):
        cursor.set(1)
    with pytest.raises(InvalidDigitError):
        cursor.set(5)

    cursor.next()
    cursor.set(2)
    assert [e for e in llist] == [2, 1, 2]

    cursor.next()
    cursor.previous()
    cursor.set(0)
    assert [e for e in llist] == [2, 0, 2]
    assert llist.modCount == modCount

    with pytest.raises(InvalidDigitError):
        cursor.set(3)

    cursor.remove()
    with pytest.raises(IllegalStateError):
        cursor.set(1)


def test_Add():
    llist = DigitList([0, 1, 2], radix=3)
    cursor = llist.cursor()

    cursor.add(2)
    assert [e for e in llist] == [2, 0, 1, 2]
    assert cursor.nextIndex() == 1
    assert cursor.next() == 0

    cursor.add(1)
    with pytest.raises(IllegalStateError):
        cursor.remove()
    assert cursor.previous() == 1

    end = llist.cursor(llist.size)
    end.add(0)
    assert [e for e in llist] == [2, 0, 1, 1, 2, 0]
    assert not end.hasNext()

    with pytest.raises(InvalidDigitError):
        end.add(3)


def test_AddToEmpty():
    llist = DigitList(radix=3)
    cursor = llist.cursor()

    cursor.add(1)
    cursor.add(2)
    assert [e for e in llist] == [1, 2]
    assert llist.headNode.value == 1
    assert llist.tailNode.value == 2
    assert cursor.previous() == 2


def test_TwoCursors():
    llist = DigitList([0, 1, 2], radix=3)
    first = llist.cursor()
    second = llist.cursor()

    first.next()
    second.next()
    second.remove()

    with pytest.raises(ConcurrentModificationError):
        first.next()
    with pytest.raises(ConcurrentModificationError):
        first.previous()
    with pytest.raises(ConcurrentModificationError):
        first.remove()
    with pytest.raises(ConcurrentModificationError):
        first.add(0)

    # The cursor that made the change is still valid.
    assert second.next() == 1
    second.add(0)
    assert second.next() == 2
    assert [e for e in llist] == [1, 0, 2]


def test_DirectMutationInvalidatesCursor():
    llist = DigitList([0, 1, 2], radix=3)
    cursor = llist.cursor()
    cursor.next()

    llist.append(1)
    with pytest.raises(ConcurrentModificationError):
        cursor.next()

    # Digit validation comes before the modification check.
    with pytest.raises(InvalidDigitError):
        cursor.add(3)

    shifted = llist.cursor()
    llist.shiftLeft()
    with pytest.raises(ConcurrentModificationError):
        shifted.next()


def test_ValueChangesKeepCursorValid():
    llist = DigitList([2, 0, 1], radix=3)
    cursor = llist.cursor()
    cursor.next()

    llist.set(1, 2)
    llist.swap(0, 2)
    llist.sortAscending()
    assert [e for e in llist] == [1, 2, 2]

    assert cursor.next() == 2
    assert cursor.next() == 2
    assert not cursor.hasNext()


def test_ClearOfEmptyListKeepsCursorValid():
    llist = DigitList(radix=3)
    cursor = llist.cursor()

    llist.clear()
    cursor.add(1)
    assert [e for e in llist] == [1]


def test_IteratorProtocol():
    llist = DigitList([1, 0, 1], radix=2)
    cursor = llist.cursor()

    assert iter(cursor) is cursor
    assert list(cursor) == [1, 0, 1]
    with pytest.raises(StopIteration):
        next(cursor)

    cursor = llist.cursor()
    next(cursor)
    llist.removeValue(0)
    with pytest.raises(ConcurrentModificationError):
        next(cursor)


if __name__ == "__main__":
    test_Traversal()
    test_TwoCursors()
