from DigitListErrors import (
    ConcurrentModificationError,
    IllegalStateError,
    NoSuchElementError,
)


class DigitCursor:
    """
    A bidirectional, fail-fast cursor over a DigitList.

    The cursor sits between two digits of the list. next() returns the digit
    after the cursor and moves past it, previous() returns the digit before
    the cursor and moves back over it. The digit returned last can be replaced
    with set() or removed with remove(), and add() inserts a digit at the
    cursor position.

    On creation the cursor records the list's modCount. Every structural
    change made through the cursor refreshes that snapshot. A structural change
    made any other way (directly on the list, or through another cursor) leaves
    the snapshot stale, and the cursor's next move raises
    ConcurrentModificationError.

    Attributes:
        digitList (DigitList): The list this cursor walks.
        nextNode (DigitListNode): The node next() will return, or None at the end of the list.
        lastReturned (DigitListNode): The node returned by the last next()/previous() call, if any.
        nextIdx (int): Position of nextNode within the list.
        expectedModCount (int): The list's modCount as last seen by this cursor.
    """
    def __init__(self, digitList, index=0):
        """
        Initialize a cursor positioned before the digit at index.

        Args:
            digitList (DigitList): The list to walk.
            index (int, optional): Position of the first digit next() will return, in [0, size]. Defaults to 0.

        Raises:
            IndexOutOfRangeError: If index is not in [0, size].
        """
        digitList.checkPositionIndex(index)

        self.digitList = digitList
        if index == digitList.size:
            self.nextNode = None
        else:
            self.nextNode = digitList.nodeAt(index)
        self.lastReturned = None
        self.nextIdx = int(index)
        self.expectedModCount = digitList.modCount

    def hasNext(self):
        return self.nextIdx < self.digitList.size

    def hasPrevious(self):
        return self.nextIdx > 0

    def nextIndex(self):
        return self.nextIdx

    def previousIndex(self):
        return self.nextIdx - 1

    def next(self):
        """
        Return the digit after the cursor and move the cursor past it.

        Returns:
            int: The next digit.

        Raises:
            ConcurrentModificationError: If the list was structurally modified outside this cursor.
            NoSuchElementError: If the cursor is at the end of the list.
        """
        self.checkForComodification()
        if not self.hasNext():
            raise NoSuchElementError(f"No digit after index {self.previousIndex()}")

        self.lastReturned = self.nextNode
        self.nextNode = self.nextNode.nextNode
        self.nextIdx += 1
        return self.lastReturned.value

    def previous(self):
        """
        Return the digit before the cursor and move the cursor back over it.

        Returns:
            int: The previous digit.

        Raises:
            ConcurrentModificationError: If the list was structurally modified outside this cursor.
            NoSuchElementError: If the cursor is at the start of the list.
        """
        self.checkForComodification()
        if not self.hasPrevious():
            raise NoSuchElementError("No digit before index 0")

        if self.nextNode is None:
            self.nextNode = self.digitList.tailNode
        else:
            self.nextNode = self.nextNode.prevNode
        self.lastReturned = self.nextNode
        self.nextIdx -= 1
        return self.lastReturned.value

    def remove(self):
        """
        Remove the digit returned by the last next()/previous() call.

        Raises:
            ConcurrentModificationError: If the list was structurally modified outside this cursor.
            IllegalStateError: If no digit was returned since the last remove()/add().
        """
        self.checkForComodification()
        if self.lastReturned is None:
            raise IllegalStateError("remove() requires a preceding next() or previous()")

        lastNext = self.lastReturned.nextNode
        self.digitList.unlink(self.lastReturned)
        if self.nextNode is self.lastReturned:
            # Removed after previous(): the cursor stays at the same index.
            self.nextNode = lastNext
        else:
            self.nextIdx -= 1

        self.lastReturned = None
        self.expectedModCount = self.digitList.modCount

    def set(self, digit):
        """
        Replace the digit returned by the last next()/previous() call.

        This is not a structural change.

        Raises:
            InvalidDigitError: If digit is not in [0, radix).
            IllegalStateError: If no digit was returned since the last remove()/add().
        """
        value = self.digitList.checkDigit(digit)
        if self.lastReturned is None:
            raise IllegalStateError("set() requires a preceding next() or previous()")
        self.lastReturned.value = value

    def add(self, digit):
        """
        Insert a digit at the cursor position.

        The new digit is placed before the digit next() would return, so a
        following next() is unaffected and a following previous() returns the
        new digit.

        Raises:
            InvalidDigitError: If digit is not in [0, radix).
            ConcurrentModificationError: If the list was structurally modified outside this cursor.
        """
        value = self.digitList.checkDigit(digit)
        self.checkForComodification()

        self.lastReturned = None
        if self.nextNode is None:
            self.digitList.linkLast(value)
        else:
            self.digitList.linkBefore(value, self.nextNode)
        self.nextIdx += 1
        self.expectedModCount = self.digitList.modCount

    def checkForComodification(self):
        if self.digitList.modCount != self.expectedModCount:
            self.digitList.logger.debug(
                "Cursor expected modification count %s but the list is at %s.",
                self.expectedModCount,
                self.digitList.modCount,
            )
            raise ConcurrentModificationError(
                "The list was structurally modified outside of this cursor"
            )

    def __iter__(self):
        return self

    def __next__(self):
        self.checkForComodification()
        if not self.hasNext():
            raise StopIteration
        return self.next()
