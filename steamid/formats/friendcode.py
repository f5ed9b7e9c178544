"""
CS:GO friend codes (e.g. ``AJJJS-ABAA``)

The account id is split into nibbles, each followed by one bit of
an MD5 digest of the account id, and the result is written in base32.
The digest bits are not checked when decoding.
"""
from hashlib import md5
import struct

from steamid.exceptions import InvalidStateError, MalformedInputError
from steamid.patterns import FRIEND_CODE, FRIEND_CODE_ALPHABET

MIN = 'AJJJS-ABAA'
MAX = 'S9ZZR-999P'

dictionary = FRIEND_CODE_ALPHABET
DELIMITER = '-'
CODE_LENGTH = 13
#: positions of the delimiters in the full code
CODE_POINTS = (4, 9)
#: always zero, stripped from the public code
CODE_PREFIX = 'AAAA' + DELIMITER

_tag = int.from_bytes(b'CSGO', 'big') << 32
_bitmask64 = 2 ** 64 - 1

_MIN_ACCOUNT_ID = 1
_MAX_ACCOUNT_ID = 0xFFFFFFFF


def _swap_endianness(number):
    return struct.unpack('<Q', struct.pack('>Q', number & _bitmask64))[0]


def _hash(account_id):
    digest = md5(struct.pack('<Q', _tag | account_id)).digest()

    return struct.unpack('<Q', digest[:8])[0]


def _to_base32(number):
    number = _swap_endianness(number)

    code = ''
    for i in range(CODE_LENGTH):
        if i in CODE_POINTS:
            code += DELIMITER

        code += dictionary[number & 0x1F]
        number >>= 5

    return code


def _from_base32(code):
    code = code.replace(DELIMITER, '')

    number = 0
    for i, c in enumerate(code[:CODE_LENGTH]):
        number |= dictionary.index(c) << (5 * i)

    return _swap_endianness(number)


def pack(account_id: int) -> int:
    """
    Interleave the nibbles of ``account_id`` with the low bits of its hash

    :return: 40-bit payload in a 64-bit word
    :rtype: int
    """
    h = _hash(account_id)

    result = 0
    for i in range(8):
        id_nibble = account_id & 0xF
        hash_bit = (h >> i) & 1

        result = (result << 5) | (id_nibble << 1) | hash_bit
        account_id >>= 4

    return result & _bitmask64


def unpack(number: int) -> int:
    """Reverse of :func:`pack`, the hash bits are dropped"""

    account_id = 0
    for _ in range(8):
        number >>= 1
        account_id = (account_id << 4) | (number & 0xF)
        number >>= 4

    return account_id


def encode(account_id: int) -> str:
    """
    Encodes an account id to a friend code

    :param account_id: account id
    :type account_id: int
    :raises: :class:`.MalformedInputError`, :class:`.InvalidStateError`
    :return: friend code (e.g. ``AJJJS-ABAA``)
    :rtype: str
    """
    if isinstance(account_id, bool) or not isinstance(account_id, int) \
            or not _MIN_ACCOUNT_ID <= account_id <= _MAX_ACCOUNT_ID:
        raise MalformedInputError(f'Account id out of range: {account_id!r}')

    code = _to_base32(pack(account_id))

    if not code.startswith(CODE_PREFIX):
        raise InvalidStateError(f'Invalid friend code: {code}')

    code = code.removeprefix(CODE_PREFIX)

    if not FRIEND_CODE.match(code):
        raise InvalidStateError(f'Invalid friend code: {code}')

    return code


def decode(code: str) -> int:
    """
    Decodes a friend code

    :param code: friend code (e.g. ``AJJJS-ABAA``)
    :type code: str
    :raises: :class:`.MalformedInputError`, :class:`.InvalidStateError`
    :return: account id
    :rtype: int
    """
    if not isinstance(code, str) or not FRIEND_CODE.match(code.strip()):
        raise MalformedInputError(f'Invalid friend code: {code!r}')

    account_id = unpack(_from_base32(CODE_PREFIX + code.strip()))

    if not _MIN_ACCOUNT_ID <= account_id <= _MAX_ACCOUNT_ID:
        raise InvalidStateError(f'Friend code out of range: {code!r}')

    return account_id
