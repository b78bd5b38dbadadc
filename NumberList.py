from DigitList import DigitList, IsRadix, PRIMARY_RADIX, SECONDARY_RADIX
from DigitListErrors import InvalidDigitError, InvalidRadixError

import numpy as np
import logging, os

DIGITS = "0123456789ABCDEFGHIJKLMNOPQRSTUVWXYZ"
DECIMAL_CHARACTERS = frozenset("0123456789")

# Python refuses int <-> str conversions past a few thousand decimal digits,
# so long decimal strings are converted in chunks of this many digits.
DECIMAL_CHUNK = 1000


class NumberList(DigitList):
    """
    A non-negative arbitrary-precision integer stored as a DigitList.

    Extends DigitList with the numeric meaning of its digits: the head is the
    most-significant digit, so the list [d0, d1, ..., dn] in radix r represents
    d0 * r^n + d1 * r^(n-1) + ... + dn. An empty list represents zero.

    Values are materialized as python ints, which makes conversion between
    radices, decimal (de)serialization and the bitwise OR combination exact for
    numbers of any size.

    Attributes:
        (Inherits all attributes from DigitList)
    """
    loggerName = "NUMBER_LIST"

    def __init__(
        self,
        arr=None,
        radix=PRIMARY_RADIX,
        value=None,
        reverseIteration=False,
        logFile=None,
        logLevel=logging.WARNING,
        logger: logging.Logger = None,
    ):
        """
        Initialize a number list.

        Args:
            arr (iterable, optional): Initial digits, most-significant first. Defaults to None.
            radix (int, optional): The base of the digits. Defaults to PRIMARY_RADIX.
            value (int or str, optional): A non-negative int, or a decimal string parsed leniently
                (see FromDecimalString). Cannot be combined with arr. Defaults to None.
            reverseIteration (bool, optional): Whether to iterate in reverse order. Defaults to False.
            logFile (str, optional): Path to log file. Defaults to None.
            logLevel (int, optional): Logging level. Defaults to logging.WARNING.
            logger (logging.Logger, optional): Custom logger. If None, creates new one. Defaults to None.
        """
        if arr is not None and value is not None:
            raise ValueError("Provide either the digits (arr) or the value of a NumberList, not both")

        super().__init__(arr, radix, reverseIteration, logFile, logLevel, logger)

        if isinstance(value, str):
            self.populateFromDecimalString(value)
        elif value is not None:
            self.populateFromValue(value)

    # ~~~ Codec ~~~

    def populateFromValue(self, value):
        """
        Replace the contents of the list with the digits of a non-negative integer.

        The digits are found by repeated division by the radix, least-significant
        first, and then appended most-significant first. The result never has
        leading zeros, except for zero itself which becomes the single digit 0.
        A negative value leaves the list empty.

        Args:
            value (int): The integer to store.

        Raises:
            TypeError: If value is not an integer.
        """
        if isinstance(value, bool) or not isinstance(value, (int, np.integer)):
            raise TypeError(f"Expected a non-negative integer, not \"{type(value)}\"")
        value = int(value)

        self.clear()
        if value < 0:
            self.logger.warning("Negative value %s cannot be stored; the list is left empty.", value)
            return
        if value == 0:
            self.linkLast(0)
            return

        remainders = []
        while value > 0:
            value, remainder = divmod(value, self.radix)
            remainders.append(remainder)

        for digit in reversed(remainders):
            self.linkLast(digit)

    def populateFromDecimalString(self, text):
        """
        Replace the contents of the list with the value of a decimal string.

        Malformed text leaves the list empty instead of raising.

        Args:
            text (str): The decimal string.
        """
        self.clear()
        normalized = NormalizeDecimal(text)
        if normalized is None:
            self.logger.debug("Rejected malformed decimal input %r.", text)
            return
        self.populateFromValue(DecimalToInt(normalized))

    def ToValue(self):
        """
        Materialize the number stored in the list.

        Returns:
            int: The value of the digits in this list's radix. An empty list is 0.
        """
        total = 0
        nodei = self.headNode
        while nodei is not None:
            total = total * self.radix + nodei.value
            nodei = nodei.nextNode
        return total

    @staticmethod
    def FromValue(value, radix=PRIMARY_RADIX, logger: logging.Logger = None):
        """
        Create a number list holding the digits of a non-negative integer.

        Args:
            value (int): The integer to store. A negative value produces an empty list.
            radix (int, optional): The base of the digits. Defaults to PRIMARY_RADIX.
            logger (logging.Logger, optional): Logger for the new list. Defaults to None.

        Returns:
            NumberList: The new list.
        """
        numberList = NumberList(radix=radix, logger=logger)
        numberList.populateFromValue(value)
        return numberList

    def ToDecimalString(self):
        """
        Render the number in decimal.

        Returns:
            str: Base-10 digits without sign or leading zeros. Zero (and the empty list) is "0".
        """
        return IntToDecimal(self.ToValue())

    @staticmethod
    def FromDecimalString(text, radix=PRIMARY_RADIX, logger: logging.Logger = None):
        """
        Create a number list from a decimal string.

        Surrounding whitespace and a single leading "+" are accepted, as are leading
        zeros. Anything else that is not an ASCII digit (including a "-" sign) makes
        the text malformed, in which case the list is empty rather than an error
        being raised.

        Args:
            text (str): The decimal string.
            radix (int, optional): The base of the digits of the new list. Defaults to PRIMARY_RADIX.
            logger (logging.Logger, optional): Logger for the new list. Defaults to None.

        Returns:
            NumberList: The new list.
        """
        numberList = NumberList(radix=radix, logger=logger)
        numberList.populateFromDecimalString(text)
        return numberList

    def ChangeRadix(self, newRadix=SECONDARY_RADIX):
        """
        Create a number list holding the same value in another radix.

        Args:
            newRadix (int, optional): The base of the new list. Defaults to SECONDARY_RADIX.

        Returns:
            NumberList: The converted list.

        Raises:
            InvalidRadixError: If newRadix is not supported.
        """
        self.logger.debug("Changing radix from %s to %s.", self.radix, newRadix)
        return NumberList.FromValue(self.ToValue(), newRadix, logger=self.logger)

    def Combine(self, other, otherRadix=10):
        """
        Combine this number with another one with a bitwise OR.

        The operand is interpreted as follows:
            - NumberList: its own value, in its own radix.
            - int: the int itself. It must be non-negative.
            - None: zero.
            - any other iterable of digits (a plain DigitList, a list, a numpy array):
              its digits, most-significant first, in otherRadix. This defaults to
              decimal, but can be given explicitly.

        Args:
            other: The second operand.
            otherRadix (int, optional): Radix of a plain digit sequence operand. Defaults to 10.

        Returns:
            NumberList: A new list holding (self | other) in this list's radix.
        """
        left = self.ToValue()
        right = NumberList.OperandValue(other, otherRadix)

        self.logger.debug("Combining %s with %s.", left, right)
        return NumberList.FromValue(left | right, self.radix, logger=self.logger)

    @staticmethod
    def OperandValue(other, otherRadix=10):
        """
        Determine the integer value of a Combine operand.

        Raises:
            ValueError: If other is a negative int.
            InvalidRadixError: If otherRadix is needed and not supported.
            InvalidDigitError: If a digit of a plain digit sequence is not in [0, otherRadix).
        """
        if other is None:
            return 0
        if isinstance(other, NumberList):
            return other.ToValue()
        if isinstance(other, (int, np.integer)) and not isinstance(other, bool):
            if other < 0:
                raise ValueError(f"Cannot combine with negative value {other}")
            return int(other)

        if not IsRadix(otherRadix):
            raise InvalidRadixError(f"Unsupported radix: {otherRadix!r}")

        if isinstance(other, DigitList):
            # Iteration may run tail to head; the fold needs head to tail.
            other = other.toArray()

        total = 0
        for digit in other:
            if (
                isinstance(digit, bool)
                or not isinstance(digit, (int, np.integer))
                or not 0 <= digit < otherRadix
            ):
                raise InvalidDigitError(
                    f"Digit {digit!r} is out of range for radix {otherRadix}"
                )
            total = total * otherRadix + int(digit)
        return total

    def ToString(self):
        """
        Render the digits of the list in its own radix.

        Digit d is rendered as DIGITS[d], so radix 16 uses 0-9 and A-F.

        Returns:
            str: The rendered digits, most-significant first. Empty for an empty list.
        """
        chars = []
        nodei = self.headNode
        while nodei is not None:
            chars.append(DIGITS[nodei.value])
            nodei = nodei.nextNode
        return "".join(chars)

    # ~~~ Persistence ~~~

    def Save(self, fileName: str):
        """
        Save the number to a file as a single line of decimal digits.

        Nothing is written when the decimal rendering is empty. Failures to write are logged and
        reported through the return value, never raised.

        Args:
            fileName (str): Name of the file to write.

        Returns:
            bool: True if the file was written.
        """
        try:
            decimal = self.ToDecimalString()
            with open(fileName, "w", encoding="ascii") as f:
                if len(decimal) > 0:
                    f.write(decimal)
        except OSError as e:
            self.logger.warning("Could not save number to \"%s\": %s", fileName, e)
            return False

        self.logger.info("Saved number to \"%s\".", fileName)
        return True

    @staticmethod
    def Load(
        fileName: str,
        radix=PRIMARY_RADIX,
        logFile=None,
        logLevel=logging.WARNING,
        logger: logging.Logger = None,
    ):
        """
        Load a number from a file holding a decimal string on its first line.

        A missing or unreadable file, or a malformed first line, produces an empty list.

        Args:
            fileName (str): Name of the file to read.
            radix (int, optional): The base of the digits of the new list. Defaults to PRIMARY_RADIX.
            logFile (str, optional): Path to log file. Defaults to None.
            logLevel (int, optional): Logging level. Defaults to logging.WARNING.
            logger (logging.Logger, optional): Custom logger. Defaults to None.

        Returns:
            NumberList: The loaded list.
        """
        numberList = NumberList(radix=radix, logFile=logFile, logLevel=logLevel, logger=logger)

        if not os.path.isfile(fileName):
            numberList.logger.warning("No number file found at \"%s\".", fileName)
            return numberList

        try:
            with open(fileName, "r", encoding="ascii") as f:
                line = f.readline()
        except (OSError, UnicodeDecodeError) as e:
            numberList.logger.warning("Could not load number from \"%s\": %s", fileName, e)
            return numberList

        numberList.populateFromDecimalString(line)
        numberList.logger.info("Loaded %s digits from \"%s\".", numberList.size, fileName)
        return numberList

    # ~~~ Python protocol ~~~

    def __int__(self):
        return self.ToValue()

    def __str__(self):
        return self.ToString()

    def __or__(self, other):
        return self.Combine(other)

    __ror__ = __or__

    # Keeps numpy from broadcasting `array | number` element-wise, so the
    # reflected OR above is used instead.
    __array_ufunc__ = None


def NormalizeDecimal(text):
    """
    Normalize a decimal string.

    Args:
        text (str): The text to normalize.

    Returns:
        str: The digits of text with surrounding whitespace, one leading "+" and
             leading zeros removed ("0" for zero), or None if text is not a
             non-negative decimal integer.
    """
    if not isinstance(text, str):
        return None

    trimmed = text.strip()
    if trimmed.startswith("+"):
        trimmed = trimmed[1:]
    if len(trimmed) == 0 or any(c not in DECIMAL_CHARACTERS for c in trimmed):
        return None

    stripped = trimmed.lstrip("0")
    return stripped if stripped else "0"


def DecimalToInt(digits):
    """Parse a string of ASCII decimal digits of any length."""
    total = 0
    for start in range(0, len(digits), DECIMAL_CHUNK):
        chunk = digits[start : start + DECIMAL_CHUNK]
        total = total * 10 ** len(chunk) + int(chunk)
    return total


def IntToDecimal(value):
    """Render a non-negative int of any size in decimal."""
    if value < 10**DECIMAL_CHUNK:
        return str(value)

    chunks = []
    base = 10**DECIMAL_CHUNK
    while value >= base:
        value, chunk = divmod(value, base)
        chunks.append(str(chunk).zfill(DECIMAL_CHUNK))
    chunks.append(str(value))
    return "".join(reversed(chunks))
