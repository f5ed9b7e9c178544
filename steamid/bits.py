"""
Layout of a packed 64-bit Steam ID, low bit to high bit

.. code:: text

    | universe (8) | type (4) | instance (20) | account id (32) |
    63           56 55      52 51           32 31               0

No range checking happens here, callers are expected to validate values.
"""
from collections import namedtuple


__all__ = ['BitField', 'ACCOUNT_ID', 'ACCOUNT_INSTANCE', 'ACCOUNT_TYPE', 'ACCOUNT_UNIVERSE']


class BitField(namedtuple('BitField', 'offset mask')):
    __slots__ = ()

    def get(self, word: int) -> int:
        """Extract the field value from ``word``"""

        return (word >> self.offset) & self.mask

    def set(self, word: int, value: int) -> int:
        """Return ``word`` with the field replaced by ``value``"""

        return (word & ~(self.mask << self.offset)) | ((value & self.mask) << self.offset)


ACCOUNT_ID = BitField(0, 0xFFFFFFFF)
ACCOUNT_INSTANCE = BitField(32, 0xFFFFF)
ACCOUNT_TYPE = BitField(52, 0xF)
ACCOUNT_UNIVERSE = BitField(56, 0xFF)
