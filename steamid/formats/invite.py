"""
Invite codes, as used in ``https://s.team/p/<code>``

The hex digits of the account id are substituted one to one,
and a ``-`` is put in the middle of codes longer than two characters.

.. code:: python

    >>> encode(1266042636)
    'gqkj-gkbr'
    >>> decode('gqkj-gkbr')
    1266042636
"""
from steamid.exceptions import InvalidStateError, MalformedInputError
from steamid.patterns import INVITE_CODE, INVITE_CODE_ALPHABET

MIN = 'c'
MAX = 'wwww-wwww'

DELIMITER = '-'
hex_alphabet = '0123456789abcdef'

_encode_table = str.maketrans(hex_alphabet, INVITE_CODE_ALPHABET)
_decode_table = str.maketrans(INVITE_CODE_ALPHABET, hex_alphabet)

_MIN_ACCOUNT_ID = 1
_MAX_ACCOUNT_ID = 0xFFFFFFFF


def encode(account_id: int) -> str:
    """
    Encodes an account id to an invite code

    :param account_id: account id
    :type account_id: int
    :raises: :class:`.MalformedInputError`, :class:`.InvalidStateError`
    :return: invite code (e.g. ``gqkj-gkbr``)
    :rtype: str
    """
    if isinstance(account_id, bool) or not isinstance(account_id, int) \
            or not _MIN_ACCOUNT_ID <= account_id <= _MAX_ACCOUNT_ID:
        raise MalformedInputError(f'Account id out of range: {account_id!r}')

    code = f'{account_id:x}'.translate(_encode_table)

    if len(code) > 2:
        split = len(code) // 2
        code = code[:split] + DELIMITER + code[split:]

    if not INVITE_CODE.match(code):
        raise InvalidStateError(f'Invalid invite code: {code}')

    return code


def decode(code: str) -> int:
    """
    Decodes an invite code

    :param code: invite code, the delimiter is optional (e.g. ``gqkj-gkbr`` or ``gqkjgkbr``)
    :type code: str
    :raises: :class:`.MalformedInputError`
    :return: account id
    :rtype: int
    """
    if not isinstance(code, str) or not INVITE_CODE.match(code.strip()):
        raise MalformedInputError(f'Invalid invite code: {code!r}')

    account_id = int(code.strip().replace(DELIMITER, '').translate(_decode_table), 16)

    if not _MIN_ACCOUNT_ID <= account_id <= _MAX_ACCOUNT_ID:
        raise MalformedInputError(f'Invite code out of range: {code!r}')

    return account_id
