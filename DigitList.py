import logging

import numpy as np

from DigitCursor import DigitCursor
from DigitListErrors import InvalidDigitError, InvalidRadixError, IndexOutOfRangeError
from SortOrder import SortOrder

MIN_RADIX = 2
MAX_RADIX = 36
PRIMARY_RADIX = 3
SECONDARY_RADIX = 8


class DigitListNode:
    """
    A node in a doubly-linked list of digits.

    Attributes:
        value (int): The digit stored in this node.
        nextNode (DigitListNode): Reference to the next (less significant) node.
        prevNode (DigitListNode): Reference to the previous (more significant) node.
    """
    def __init__(self,value,prevNode=None):
        self.value = value

        self.nextNode = None
        self.prevNode = prevNode


class DigitList:
    """
    A doubly-linked list of digits in a fixed radix.

    The head of the list holds the most-significant digit and the tail the
    least-significant one. Every digit stored in the list lies in [0, radix).
    Structural changes (linking, unlinking, clearing and rotating nodes) bump
    modCount so that cursors created before the change can detect it and fail
    on their next move. Replacing the value of an existing node is not a
    structural change.

    Attributes:
        radix (int): The base of the digits in this list. Fixed at construction.
        size (int): Number of digits in the list.
        headNode (DigitListNode): First (most-significant) node in the list.
        tailNode (DigitListNode): Last (least-significant) node in the list.
        modCount (int): Number of structural changes made to the list so far.
        reverseIteration (bool): Whether iteration should run from tail to head.
        logger (logging.Logger): Logger for list output and debugging.
    """
    loggerName = "DIGIT_LIST"

    def __init__(
        self,
        arr=None,
        radix=PRIMARY_RADIX,
        reverseIteration=False,
        logFile=None,
        logLevel=logging.WARNING,
        logger: logging.Logger = None,
    ):
        """
        Initialize a new digit list.

        Args:
            arr (iterable, optional): Initial digits to append to the list. Defaults to None.
            radix (int, optional): The base of the digits. Defaults to PRIMARY_RADIX.
            reverseIteration (bool, optional): Whether to iterate in reverse order. Defaults to False.
            logFile (str, optional): Path to log file. If None, no file logging. Defaults to None.
            logLevel (int, optional): Logging level (e.g., logging.INFO). Defaults to logging.WARNING.
            logger (logging.Logger, optional): Custom logger instance. If None, creates new one. Defaults to None.

        Raises:
            InvalidRadixError: If radix is not an integer in [MIN_RADIX, MAX_RADIX].
            InvalidDigitError: If any digit of arr is not valid for radix.
        """
        if not IsRadix(radix):
            raise InvalidRadixError(f"Unsupported radix: {radix!r}")
        self._radix = int(radix)

        self.size = 0
        self.headNode = None
        self.tailNode = None
        self.modCount = 0
        self.reverseIteration = reverseIteration

        if logger is None:
            self.logger = logging.getLogger(self.loggerName)
            self.logger.setLevel(logLevel)

            if logFile is not None:
                file_handler = logging.FileHandler(logFile)
                file_handler.setLevel(logLevel)

                formatter = logging.Formatter(
                    "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
                )
                file_handler.setFormatter(formatter)

                self.logger.addHandler(file_handler)
        else:
            self.logger = logger

        if arr is not None:
            self.extend(arr)

    @property
    def radix(self):
        return self._radix

    def emptyCopy(self):
        """
        Create an empty list of the same class, radix, iteration order and logger as this one.

        Returns:
            DigitList: A new, empty list.
        """
        return type(self)(
            radix=self._radix,
            reverseIteration=self.reverseIteration,
            logger=self.logger,
        )

    # ~~~ Validation ~~~

    def isDigit(self, digit):
        """
        Determine whether a value is a valid digit for this list.

        Integers (including numpy integers) in [0, radix) are digits. Booleans are not.

        Args:
            digit: The value to test.

        Returns:
            bool: True if digit can be stored in this list.
        """
        if isinstance(digit, bool) or not isinstance(digit, (int, np.integer)):
            return False
        return 0 <= digit < self._radix

    def checkDigit(self, digit):
        """
        Validate a digit for this list.

        Args:
            digit: The value to validate.

        Returns:
            int: The digit as a plain python int.

        Raises:
            InvalidDigitError: If digit is not in [0, radix).
        """
        if not self.isDigit(digit):
            raise InvalidDigitError(
                f"Digit {digit!r} is out of range for radix {self._radix}"
            )
        return int(digit)

    def isElementIndex(self, index):
        return isinstance(index, (int, np.integer)) and 0 <= index < self.size

    def isPositionIndex(self, index):
        return isinstance(index, (int, np.integer)) and 0 <= index <= self.size

    def checkElementIndex(self, index):
        if not self.isElementIndex(index):
            raise IndexOutOfRangeError(f"Index: {index}, Size: {self.size}")

    def checkPositionIndex(self, index):
        if not self.isPositionIndex(index):
            raise IndexOutOfRangeError(f"Index: {index}, Size: {self.size}")

    # ~~~ Structural primitives ~~~

    def nodeAt(self, index):
        """
        Locate the node at a given position.

        Walks from whichever end of the list is closer to index, so at most
        size / 2 links are followed. The index is assumed to be valid.

        Args:
            index (int): Position of the node, in [0, size).

        Returns:
            DigitListNode: The node at that position.
        """
        if index < (self.size >> 1):
            nodei = self.headNode
            for _ in range(index):
                nodei = nodei.nextNode
        else:
            nodei = self.tailNode
            for _ in range(self.size - 1 - index):
                nodei = nodei.prevNode
        return nodei

    def linkLast(self, value):
        """
        Link a new node holding an already-validated digit at the end of the list.

        Args:
            value (int): The digit to link.

        Returns:
            DigitListNode: The new node.
        """
        newNode = DigitListNode(value, self.tailNode)

        if self.headNode is None:
            self.headNode = newNode
        else:
            self.tailNode.nextNode = newNode
        self.tailNode = newNode

        self.size += 1
        self.modCount += 1
        return newNode

    def linkBefore(self, value, node: DigitListNode):
        """
        Link a new node holding an already-validated digit directly before an existing node.

        Args:
            value (int): The digit to link.
            node (DigitListNode): The node that will follow the new node.

        Returns:
            DigitListNode: The new node.
        """
        newNode = DigitListNode(value, node.prevNode)
        newNode.nextNode = node

        if node.prevNode is None:
            self.headNode = newNode
        else:
            node.prevNode.nextNode = newNode
        node.prevNode = newNode

        self.size += 1
        self.modCount += 1
        return newNode

    def unlink(self, node: DigitListNode):
        """
        Remove a specific node from the list.

        Args:
            node (DigitListNode): The node to remove from the list.

        Returns:
            int: The digit the node held.
        """
        nextNode = node.nextNode
        prevNode = node.prevNode

        if prevNode is None:
            self.headNode = nextNode
        else:
            prevNode.nextNode = nextNode

        if nextNode is None:
            self.tailNode = prevNode
        else:
            nextNode.prevNode = prevNode

        node.nextNode = None
        node.prevNode = None

        self.size -= 1
        self.modCount += 1
        return node.value

    # ~~~ Positional access ~~~

    def isEmpty(self):
        return self.size == 0

    def get(self, index):
        """
        Return the digit at a given position.

        Raises:
            IndexOutOfRangeError: If index is not in [0, size).
        """
        self.checkElementIndex(index)
        return self.nodeAt(index).value

    def set(self, index, digit):
        """
        Replace the digit at a given position.

        This is not a structural change, so modCount is left untouched.

        Args:
            index (int): Position to overwrite, in [0, size).
            digit (int): The new digit.

        Returns:
            int: The digit previously stored at index.

        Raises:
            InvalidDigitError: If digit is not in [0, radix).
            IndexOutOfRangeError: If index is not in [0, size).
        """
        value = self.checkDigit(digit)
        self.checkElementIndex(index)

        nodei = self.nodeAt(index)
        old = nodei.value
        nodei.value = value
        return old

    def append(self, digit):
        """
        Add a new digit to the end (least-significant position) of the list.

        Args:
            digit (int): The digit to append.

        Raises:
            InvalidDigitError: If digit is not in [0, radix).
        """
        self.linkLast(self.checkDigit(digit))

    def prepend(self, digit):
        """
        Add a new digit to the beginning (most-significant position) of the list.

        Args:
            digit (int): The digit to prepend.

        Raises:
            InvalidDigitError: If digit is not in [0, radix).
        """
        value = self.checkDigit(digit)
        if self.headNode is None:
            self.linkLast(value)
        else:
            self.linkBefore(value, self.headNode)

    def insert(self, index, digit):
        """
        Insert a digit before the given position.

        Args:
            index (int): Insertion point, in [0, size]. An index of size appends.
            digit (int): The digit to insert.

        Raises:
            InvalidDigitError: If digit is not in [0, radix).
            IndexOutOfRangeError: If index is not in [0, size].
        """
        value = self.checkDigit(digit)
        self.checkPositionIndex(index)

        if index == self.size:
            self.linkLast(value)
        else:
            self.linkBefore(value, self.nodeAt(index))

    def remove(self, index):
        """
        Remove the digit at a given position.

        Args:
            index (int): Position to remove, in [0, size).

        Returns:
            int: The removed digit.

        Raises:
            IndexOutOfRangeError: If index is not in [0, size).
        """
        self.checkElementIndex(index)
        return self.unlink(self.nodeAt(index))

    def removeValue(self, digit):
        """
        Remove the first occurrence of a digit.

        Returns:
            bool: True if a digit was removed, False if it was not present.
        """
        if not self.isDigit(digit):
            return False

        nodei = self.headNode
        while nodei is not None:
            if nodei.value == digit:
                self.unlink(nodei)
                return True
            nodei = nodei.nextNode
        return False

    def indexOf(self, digit):
        if not self.isDigit(digit):
            return -1

        index = 0
        nodei = self.headNode
        while nodei is not None:
            if nodei.value == digit:
                return index
            index += 1
            nodei = nodei.nextNode
        return -1

    def lastIndexOf(self, digit):
        if not self.isDigit(digit):
            return -1

        index = self.size - 1
        nodei = self.tailNode
        while nodei is not None:
            if nodei.value == digit:
                return index
            index -= 1
            nodei = nodei.prevNode
        return -1

    def contains(self, digit):
        return self.indexOf(digit) != -1

    def containsAll(self, digits):
        return all(self.contains(d) for d in digits)

    def clear(self):
        """
        Remove every digit from the list.

        modCount is only bumped when there was something to remove.
        """
        nodei = self.headNode
        while nodei is not None:
            nextNode = nodei.nextNode
            nodei.nextNode = None
            nodei.prevNode = None
            nodei = nextNode

        self.headNode = None
        self.tailNode = None
        if self.size != 0:
            self.size = 0
            self.modCount += 1

    def subList(self, fromIndex, toIndex):
        """
        Copy a range of digits into a new list of the same radix.

        Args:
            fromIndex (int): First position to copy (inclusive).
            toIndex (int): Last position to copy (exclusive).

        Returns:
            DigitList: A new list holding the digits in [fromIndex, toIndex).

        Raises:
            IndexOutOfRangeError: If fromIndex < 0, toIndex > size or fromIndex > toIndex.
        """
        if (
            not isinstance(fromIndex, (int, np.integer))
            or not isinstance(toIndex, (int, np.integer))
            or fromIndex < 0
            or toIndex > self.size
            or fromIndex > toIndex
        ):
            raise IndexOutOfRangeError(
                f"From: {fromIndex}, To: {toIndex}, Size: {self.size}"
            )

        result = self.emptyCopy()
        if fromIndex == toIndex:
            return result

        nodei = self.nodeAt(fromIndex)
        for _ in range(toIndex - fromIndex):
            result.linkLast(nodei.value)
            nodei = nodei.nextNode
        return result

    # ~~~ Bulk operations ~~~

    def extend(self, digits):
        """
        Append every digit of an iterable to the end of the list.

        Digits are copied into new nodes; no nodes are shared with the source.

        Args:
            digits (iterable): The digits to append.

        Returns:
            bool: True if the list changed.

        Raises:
            InvalidDigitError: If any digit is not in [0, radix). The list is left untouched.
        """
        return self.insertAll(self.size, digits)

    def insertAll(self, index, digits):
        """
        Insert every digit of an iterable before the given position, preserving their order.

        All digits are validated before any of them is linked.

        Args:
            index (int): Insertion point, in [0, size].
            digits (iterable): The digits to insert.

        Returns:
            bool: True if the list changed.

        Raises:
            InvalidDigitError: If any digit is not in [0, radix).
            IndexOutOfRangeError: If index is not in [0, size].
        """
        values = [self.checkDigit(d) for d in digits]
        self.checkPositionIndex(index)

        if len(values) == 0:
            return False

        if index == self.size:
            for v in values:
                self.linkLast(v)
        else:
            successor = self.nodeAt(index)
            for v in values:
                self.linkBefore(v, successor)
        return True

    def removeAll(self, digits):
        """
        Remove every occurrence of every digit in an iterable.

        Returns:
            bool: True if the list changed.
        """
        targets = set(int(d) for d in digits if self.isDigit(d))
        return self._removeWhere(lambda value: value in targets)

    def retainAll(self, digits):
        """
        Remove every digit that does not occur in an iterable.

        Returns:
            bool: True if the list changed.
        """
        keep = set(int(d) for d in digits if self.isDigit(d))
        return self._removeWhere(lambda value: value not in keep)

    def _removeWhere(self, predicate):
        modified = False
        nodei = self.headNode
        while nodei is not None:
            nextNode = nodei.nextNode
            if predicate(nodei.value):
                self.unlink(nodei)
                modified = True
            nodei = nextNode
        return modified

    def toArray(self):
        """
        Copy the digits into a numpy array, most-significant digit first.

        Returns:
            np.array: A uint8 array of length size.
        """
        arr = np.zeros(self.size, dtype=np.uint8)
        nodei = self.headNode
        i = 0
        while nodei is not None:
            arr[i] = nodei.value
            i += 1
            nodei = nodei.nextNode
        return arr

    # ~~~ Digit algorithms ~~~

    def swap(self, index1, index2):
        """
        Swap the digits stored at two positions.

        Only values move; the nodes stay where they are and modCount is unchanged.

        Args:
            index1 (int): First position.
            index2 (int): Second position.

        Returns:
            bool: False (and no change) if either index is not in [0, size), True otherwise.
        """
        if not self.isElementIndex(index1) or not self.isElementIndex(index2):
            return False
        if index1 == index2:
            return True

        node1 = self.nodeAt(index1)
        node2 = self.nodeAt(index2)
        node1.value, node2.value = node2.value, node1.value
        return True

    def sort(self, order: SortOrder = SortOrder.ASCENDING):
        """
        Sort the digits of the list with a counting sort.

        The digits are counted in one pass over the list and then written back
        in sorted order in a second pass. Since the alphabet only holds radix
        values this takes O(size + radix) time and O(radix) extra space. Node
        values are overwritten in place; no node is relinked and modCount is
        unchanged.

        Args:
            order (SortOrder, optional): Direction to sort in. Defaults to SortOrder.ASCENDING.
        """
        assert isinstance(order, SortOrder), f"Error! \"sort\" requires a SortOrder, not \"{type(order)}\""
        if self.size < 2:
            return

        counts = np.bincount(self.toArray(), minlength=self._radix)
        alphabet = np.arange(self._radix)
        if order == SortOrder.DESCENDING:
            alphabet = alphabet[::-1]
            counts = counts[::-1]

        nodei = self.headNode
        for value in np.repeat(alphabet, counts):
            nodei.value = int(value)
            nodei = nodei.nextNode

        self.logger.debug("Sorted %s digits in %s order.", self.size, order.name)

    def sortAscending(self):
        self.sort(SortOrder.ASCENDING)

    def sortDescending(self):
        self.sort(SortOrder.DESCENDING)

    def shiftLeft(self):
        """
        Rotate the list left by one position: the head becomes the new tail.

        Only the links around the two ends change, so this is O(1).
        """
        if self.size <= 1:
            return

        first = self.headNode
        self.headNode = first.nextNode
        self.headNode.prevNode = None

        self.tailNode.nextNode = first
        first.prevNode = self.tailNode
        first.nextNode = None
        self.tailNode = first

        self.modCount += 1
        self.logger.debug("Shifted %s digits left.", self.size)

    def shiftRight(self):
        """
        Rotate the list right by one position: the tail becomes the new head.

        Only the links around the two ends change, so this is O(1).
        """
        if self.size <= 1:
            return

        last = self.tailNode
        self.tailNode = last.prevNode
        self.tailNode.nextNode = None

        last.prevNode = None
        last.nextNode = self.headNode
        self.headNode.prevNode = last
        self.headNode = last

        self.modCount += 1
        self.logger.debug("Shifted %s digits right.", self.size)

    # ~~~ Iteration ~~~

    def cursor(self, index=0):
        """
        Create a bidirectional cursor over the list.

        Args:
            index (int, optional): Position of the first digit the cursor's next() will return, in [0, size]. Defaults to 0.

        Returns:
            DigitCursor: A cursor bound to this list.

        Raises:
            IndexOutOfRangeError: If index is not in [0, size].
        """
        self.checkPositionIndex(index)
        return DigitCursor(self, index)

    def __iter__(self):
        """
        Make the DigitList iterable.

        Returns:
            iterator: A fail-fast iterator over the digits in forward or reverse
                      order depending on the reverseIteration setting.
        """
        if not self.reverseIteration:
            return DigitCursor(self)
        else:
            return reversed(self)

    def __reversed__(self):
        cursor = DigitCursor(self, self.size)
        while cursor.hasPrevious():
            yield cursor.previous()

    def __len__(self):
        return self.size

    def __contains__(self, digit):
        return self.contains(digit)

    def __getitem__(self, index):
        return self.get(index)

    def __setitem__(self, index, digit):
        self.set(index, digit)

    def __delitem__(self, index):
        self.remove(index)

    def __eq__(self, other):
        if type(other) is not type(self):
            return NotImplemented
        if self._radix != other._radix or self.size != other.size:
            return False

        left = self.headNode
        right = other.headNode
        while left is not None:
            if left.value != right.value:
                return False
            left = left.nextNode
            right = right.nextNode
        return True

    __hash__ = None

    def __repr__(self):
        digits = ", ".join(str(d) for d in self.toArray())
        return f"{type(self).__name__}(radix={self._radix}, digits=[{digits}])"


def IsRadix(radix):
    """
    Determine whether a value is a supported radix.

    Args:
        radix: The value to test.

    Returns:
        bool: True if radix is an integer in [MIN_RADIX, MAX_RADIX].
    """
    if isinstance(radix, bool) or not isinstance(radix, (int, np.integer)):
        return False
    return MIN_RADIX <= radix <= MAX_RADIX
