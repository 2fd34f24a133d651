"""
String tables for the LZW codec.

The encoder looks strings up by (prefix code, next byte), so it keeps them in
an open-addressing hash table. The decoder always knows the code it needs,
so its table is indexed by code directly.
"""

from .errors import MalformedStreamError

FIRST_CODE = 256  # codes 0-255 are the literal bytes
UNUSED = -1


class EncoderDictionary:
    """
    Fixed-capacity hash table mapping (prefix, char) to a learned code.

    Three parallel tables are indexed by hash slot, not by code:
    code_table marks a slot as taken and holds its code, prefix_table and
    char_table hold the key. Entries are never removed or overwritten.
    """

    def __init__(self, bits: int, table_size: int) -> None:
        """
        Args:
            bits: Code width in bits
            table_size: Number of hash slots, a prime larger than the largest code

        Raises:
            ValueError: If the table cannot hold every code
        """
        self.bits = bits
        self.hash_shift = bits - 8
        self.max_value = (1 << bits) - 1
        self.max_code = self.max_value - 1
        if table_size <= self.max_value:
            raise ValueError(
                f"Table size {table_size} must be larger than {self.max_value}"
            )
        self.table_size = table_size
        self.code_table = [UNUSED] * table_size
        self.prefix_table = [0] * table_size
        self.char_table = [0] * table_size
        self.next_code = FIRST_CODE

    def __len__(self) -> int:
        return self.next_code - FIRST_CODE

    @property
    def is_full(self) -> bool:
        return self.next_code > self.max_code

    def find_slot(self, prefix: int, char: int) -> int:
        """
        Probe for (prefix, char) and return either the slot holding it
        or the first empty slot on its probe sequence.
        """
        index = (char << self.hash_shift) ^ prefix
        offset = 1 if index == 0 else self.table_size - index

        while True:
            if self.code_table[index] == UNUSED:
                return index
            if self.prefix_table[index] == prefix and self.char_table[index] == char:
                return index
            index -= offset
            if index < 0:
                index += self.table_size

    def lookup(self, prefix: int, char: int) -> tuple[int | None, int]:
        """
        Look up the string prefix + char.

        Returns:
            (code, slot) where code is None when the string is unknown and
            slot is where insert() should store it
        """
        slot = self.find_slot(prefix, char)
        code = self.code_table[slot]
        return (None if code == UNUSED else code), slot

    def insert(self, slot: int, prefix: int, char: int) -> int | None:
        """
        Store prefix + char under the next free code.

        Does nothing once every code up to max_code has been handed out.

        Returns:
            The assigned code, or None if the dictionary is full
        """
        if self.is_full:
            return None
        code = self.next_code
        self.code_table[slot] = code
        self.prefix_table[slot] = prefix
        self.char_table[slot] = char
        self.next_code += 1
        return code


class DecoderDictionary:
    """Code-indexed inverse of EncoderDictionary: code -> (prefix, char)."""

    def __init__(self, bits: int) -> None:
        self.bits = bits
        self.max_value = (1 << bits) - 1
        self.max_code = self.max_value - 1
        self.prefix_table = [0] * self.max_value
        self.char_table = [0] * self.max_value
        self.next_code = FIRST_CODE

    def __len__(self) -> int:
        return self.next_code - FIRST_CODE

    @property
    def is_full(self) -> bool:
        return self.next_code > self.max_code

    def add(self, prefix: int, char: int) -> int | None:
        """Register the next code as prefix + char; no-op when full."""
        if self.is_full:
            return None
        code = self.next_code
        self.prefix_table[code] = prefix
        self.char_table[code] = char
        self.next_code += 1
        return code

    def expand(self, code: int, stack: bytearray) -> None:
        """
        Append the string for code to stack, last byte first.

        Args:
            code: A literal or an already registered code
            stack: Scratch buffer; the string ends up reversed at its tail

        Raises:
            MalformedStreamError: If the prefix chain is longer than any
                string this dictionary can hold
        """
        while code > 255:
            stack.append(self.char_table[code])
            if len(stack) >= self.max_code:
                raise MalformedStreamError(
                    f"Code chain exceeds {self.max_code} entries"
                )
            code = self.prefix_table[code]
        stack.append(code)
