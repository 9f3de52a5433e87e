from enum import Enum

import numpy as np

class ListMode(Enum):
    """
    Enumeration of the element kinds a SortedLinkedList can hold.

    A list starts out UNSET. The first value inserted locks the list into
    either INTEGER or STRING mode, and the list keeps that mode until it is
    cleared.

    Values:
        UNSET: The list is empty and has not yet been locked to a kind.
        INTEGER: The list holds signed 64-bit integers.
        STRING: The list holds text strings.
    """
    UNSET = 0
    INTEGER = 1
    STRING = 2

    @property
    def label(self):
        return self.name.lower()

    @staticmethod
    def Of(value):
        """
        Classify a value as INTEGER or STRING.

        Args:
            value: The value to classify.

        Returns:
            ListMode: INTEGER for ints (including numpy integer scalars), STRING for strings.

        Raises:
            OverflowError: If an integer falls outside the signed 64-bit range.
            TypeError: If the value is neither an integer nor a string.
        """
        if isinstance(value, str):
            return ListMode.STRING

        # bool is an int subclass but not an integer value here
        if isinstance(value, (int, np.integer)) and not isinstance(value, (bool, np.bool_)):
            bounds = np.iinfo(np.int64)
            if not (bounds.min <= int(value) <= bounds.max):
                raise OverflowError(f"{value} does not fit in a signed 64-bit integer")
            return ListMode.INTEGER

        raise TypeError(f"Unsupported value type: \"{type(value).__name__}\"")

    def LessOrEqual(self, a, b) -> bool:
        """
        Compare two values under this mode's ordering.

        Integers compare numerically, strings compare by code point (case-sensitive).

        Args:
            a: Left-hand value.
            b: Right-hand value.

        Returns:
            bool: True if a <= b.
        """
        if self is ListMode.INTEGER:
            return int(a) <= int(b)
        elif self is ListMode.STRING:
            return str(a) <= str(b)
        else:
            raise ValueError("An UNSET list has no ordering")
