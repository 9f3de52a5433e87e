from ListMode import ListMode

import logging, os
import numpy as np


class TypeMismatchError(TypeError):
    """
    Exception raised when a value's kind conflicts with the list's locked mode.

    Attributes:
        offendingMode (ListMode): The kind of the rejected value.
        establishedMode (ListMode): The kind the list is locked to.
    """

    def __init__(self, offendingMode: ListMode, establishedMode: ListMode):
        self.offendingMode = offendingMode
        self.establishedMode = establishedMode
        super().__init__(
            f"Type mismatch: cannot add {offendingMode.label} when list contains {establishedMode.label} values"
        )


class OutOfRangeError(IndexError):
    """
    Exception raised when a position lies outside the list.

    Attributes:
        position (int): The requested position.
        validRange (tuple): The valid inclusive range (0, count-1), or None if the list is empty.
    """

    def __init__(self, position, count: int):
        self.position = position
        if count > 0:
            self.validRange = (0, count - 1)
            message = f"Position {position} is outside valid range [0..{count - 1}]"
        else:
            self.validRange = None
            message = f"Position {position} is outside valid range (list is empty)"
        super().__init__(message)


class LinkedListNode:
    """
    A node in a singly-linked list structure.

    Each node holds one value and the only reference to the node that follows it.

    Attributes:
        value: The data stored in this node.
        nextNode (LinkedListNode): Reference to the next node in the list, or None at the tail.
    """
    def __init__(self,value,nextNode=None):
        self.value = value
        self.nextNode = nextNode


class SortedLinkedList:
    """
    A singly-linked list that keeps its elements in ascending order at all times.

    The list holds either integers or strings. The kind is decided by the first
    value inserted and stays locked until the list is cleared or emptied. Inserting a value
    of the other kind raises a TypeMismatchError and leaves the list untouched.

    Every operation walks the chain from the head; there is no index. The list is
    not safe to mutate while an iteration over it is in progress, and callers
    sharing one instance between threads must serialize access themselves.

    Attributes:
        size (int): Number of elements in the list.
        headNode (LinkedListNode): First node in the list.
        logger (logging.Logger): Logger instance for list operations.
    """
    def __init__(
        self,
        arr=[],
        logFile=None,
        logLevel=logging.WARNING,
        logger: logging.Logger = None,
    ):
        """
        Initialize a sorted linked list.

        Args:
            arr (list, optional): Initial elements to insert (will be sorted). Defaults to [].
            logFile (str, optional): Path to log file. If None, no file logging. Defaults to None.
            logLevel (int, optional): Logging level (e.g., logging.DEBUG). Defaults to logging.WARNING.
            logger (logging.Logger, optional): Custom logger instance. If None, creates new one. Defaults to None.

        Raises:
            TypeMismatchError: If arr mixes integers and strings.
        """
        if logger is None:
            self.logger = logging.getLogger("SORTED_LINKED_LIST")
            # lists share this logger, so a later list may only make it more verbose
            if self.logger.level == logging.NOTSET or logLevel < self.logger.level:
                self.logger.setLevel(logLevel)

            logPaths = [
                handler.baseFilename
                for handler in self.logger.handlers
                if isinstance(handler, logging.FileHandler)
            ]
            if logFile is not None and os.path.abspath(logFile) not in logPaths:
                file_handler = logging.FileHandler(logFile)
                file_handler.setLevel(logLevel)

                formatter = logging.Formatter(
                    "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
                )
                file_handler.setFormatter(formatter)

                self.logger.addHandler(file_handler)
        else:
            self.logger = logger

        self.size = 0
        self.headNode = None
        self._mode = ListMode.UNSET

        self.insertMany(arr)

    @property
    def mode(self) -> ListMode:
        """The element kind this list is locked to (UNSET while empty)."""
        return self._mode

    def _establishMode(self, item) -> ListMode:
        itemMode = ListMode.Of(item)

        if self.size == 0:
            return itemMode

        if itemMode is not self._mode:
            error = TypeMismatchError(itemMode, self._mode)
            self.logger.error(str(error))
            raise error

        return itemMode

    def insert(self,item):
        """
        Insert a value in its sorted position.

        A value less than or equal to the head becomes the new head. Otherwise
        the value is placed after every existing value less than or equal to it.

        Args:
            item (int | str): The value to insert.

        Raises:
            TypeMismatchError: If the list is non-empty and item is of the other kind.
            TypeError: If item is neither an integer nor a string.
            OverflowError: If item is an integer outside the signed 64-bit range.
        """
        itemMode = self._establishMode(item)
        if self._mode is not itemMode:
            self.logger.debug("Locking list to %s mode", itemMode.label)
            self._mode = itemMode

        item = int(item) if itemMode is ListMode.INTEGER else str(item)

        if self.headNode is None or self._mode.LessOrEqual(item, self.headNode.value):
            self.headNode = LinkedListNode(item, self.headNode)
            self.size += 1
            self.logger.debug("Inserted %r at head", item)
            return

        nodei = self.headNode
        position = 1
        while nodei.nextNode is not None and self._mode.LessOrEqual(nodei.nextNode.value, item):
            nodei = nodei.nextNode
            position += 1

        nodei.nextNode = LinkedListNode(item, nodei.nextNode)
        self.size += 1
        self.logger.debug("Inserted %r at position %d", item, position)

    def insertMany(self,items):
        """
        Insert each value of items in order.

        Stops at the first value that fails the type check. Values inserted
        before the failure stay in the list.

        Args:
            items (iterable): The values to insert.

        Raises:
            TypeMismatchError: If any value is of a different kind than the list.
        """
        for item in items:
            self.insert(item)

    def _matches(self, item):
        # A value of the other kind (or of no supported kind) never matches
        try:
            return self.size > 0 and ListMode.Of(item) is self._mode
        except (TypeError, OverflowError):
            return False

    def contains(self,item) -> bool:
        """
        Check whether a value equal to item is in the list.

        Args:
            item: The value to look for.

        Returns:
            bool: True if some element equals item. False for values of the other kind.
        """
        if not self._matches(item):
            return False

        nodei = self.headNode
        while nodei is not None:
            if nodei.value == item:
                return True
            nodei = nodei.nextNode
        return False

    def delete(self,item) -> bool:
        """
        Remove the first element equal to item.

        Args:
            item: The value to remove.

        Returns:
            bool: True if an element was removed, False if none matched.
        """
        if not self._matches(item):
            return False

        if self.headNode.value == item:
            self.headNode = self.headNode.nextNode
            self._shrink()
            self.logger.debug("Deleted %r from head", item)
            return True

        nodei = self.headNode
        while nodei.nextNode is not None:
            if nodei.nextNode.value == item:
                nodei.nextNode = nodei.nextNode.nextNode
                self._shrink()
                self.logger.debug("Deleted %r", item)
                return True
            nodei = nodei.nextNode

        return False

    def _shrink(self):
        """Account for one unlinked node."""
        self.size -= 1
        # an emptied list is unlocked, same as after clear()
        if self.size == 0:
            self.logger.debug("Last element deleted, unlocking %s mode", self._mode.label)
            self._mode = ListMode.UNSET

    def deleteAll(self,item) -> int:
        """
        Remove every element equal to item.

        Args:
            item: The value to remove.

        Returns:
            int: The number of elements removed.
        """
        removed = 0
        while self.delete(item):
            removed += 1
        return removed

    def at(self,position:int):
        """
        Return the value at a zero-based position.

        Args:
            position (int): The position to read.

        Returns:
            int | str: The value stored at position.

        Raises:
            OutOfRangeError: If position < 0 or position >= length().
        """
        if position < 0 or position >= self.size:
            error = OutOfRangeError(position, self.size)
            self.logger.error(str(error))
            raise error

        nodei = self.headNode
        for _ in range(position):
            nodei = nodei.nextNode

        return nodei.value

    def isEmpty(self) -> bool:
        """
        Returns:
            bool: True if the list holds no elements.
        """
        return self.size == 0

    def length(self) -> int:
        """
        Returns:
            int: The number of elements in the list.
        """
        return self.size

    def clear(self):
        """
        Remove every element and unlock the list's mode.
        """
        self.logger.info("Clearing %d elements", self.size)
        self.headNode = None
        self.size = 0
        self._mode = ListMode.UNSET

    def toArray(self) -> list:
        """
        Copy the list's values, head to tail, into a new python list.

        Returns:
            list: A snapshot of the values; later changes to the list do not affect it.
        """
        result = []
        nodei = self.headNode
        while nodei is not None:
            result.append(nodei.value)
            nodei = nodei.nextNode
        return result

    def toNumpy(self) -> np.ndarray:
        """
        Copy the list's values into a numpy array.

        Returns:
            np.ndarray: An int64 array in integer mode, a unicode array in string mode,
                        an empty array if the list is empty.
        """
        if self._mode is ListMode.INTEGER:
            return np.array(self.toArray(), dtype=np.int64)
        elif self._mode is ListMode.STRING:
            return np.array(self.toArray(), dtype=str)
        else:
            return np.array([])

    def iterate(self):
        """
        Lazily yield the list's values from head to tail.

        Each call starts a fresh walk from the head. Inserting or deleting while a
        walk is in progress may cause it to skip or repeat nearby values.
        """
        nodei = self.headNode
        while nodei is not None:
            yield nodei.value
            nodei = nodei.nextNode

    def append(self, newVal):
        """
        Append operation is not supported for SortedLinkedList.

        Raises:
            NotImplementedError: Always, since append would violate sort order.
        """
        raise NotImplementedError("\"append\" is intentionally not implemented for a SortedLinkedList. Please use \"insert\" instead.")

    def prepend(self, newVal):
        """
        Prepend operation is not supported for SortedLinkedList.

        Raises:
            NotImplementedError: Always, since prepend would violate sort order.
        """
        raise NotImplementedError("\"prepend\" is intentionally not implemented for a SortedLinkedList. Please use \"insert\" instead.")

    def __iter__(self):
        """Iterate over the values from head to tail (see iterate)."""
        return self.iterate()

    def __len__(self):
        """Return the number of elements in the list."""
        return self.size

    def __bool__(self):
        """Return True if the list holds at least one element."""
        return not self.isEmpty()

    def __contains__(self, item):
        """Support the `in` operator (see contains)."""
        return self.contains(item)

    def __getitem__(self, position):
        """Return the value at position (see at). Negative positions are out of range."""
        return self.at(position)

    def __repr__(self):
        """Return the mode and the values, head to tail."""
        return f"SortedLinkedList({self._mode.label}, {self.toArray()!r})"
