from steamid.enums import EAccountType, EAuth, EInstance, EUniverse
from steamid.exceptions import InvalidStateError, MalformedInputError
from steamid.patterns import STEAM2

MIN = 'STEAM_1:1:0'
MAX = 'STEAM_1:1:2147483647'

_MAX_ACCOUNT_ID = 0xFFFFFFFF


def _parse(text):
    if not isinstance(text, str):
        return None

    match = STEAM2.match(text.strip())

    if not match:
        return None

    return (int(match.group('id')) << 1) | EAuth(int(match.group('auth')))


def is_valid(text) -> bool:
    """Check that ``text`` is a ``STEAM_X:Y:Z`` string naming an account id in range"""

    account_id = _parse(text)

    return account_id is not None and 1 <= account_id <= _MAX_ACCOUNT_ID


def encode(account_id: int, universe: EUniverse, account_type: EAccountType = EAccountType.Individual) -> str:
    """
    Render an individual account as ``STEAM_X:Y:Z``

    :param account_id: account id
    :type account_id: :class:`int`
    :param universe: universe, used as ``X``
    :type universe: :class:`.EUniverse`
    :param account_type: only ``Individual`` can be written in this notation
    :type account_type: :class:`.EAccountType`
    :raises: :class:`.InvalidStateError`
    :return: e.g. ``STEAM_1:1:0``
    :rtype: str
    """

    if account_type != EAccountType.Individual:
        raise InvalidStateError(f'Steam2 cannot express account type {account_type!r}')

    text = f'STEAM_{universe:d}:{account_id & 1:d}:{account_id >> 1:d}'

    if not is_valid(text):
        raise InvalidStateError(f'Invalid Steam2: {text}')

    return text


def decode(text: str) -> dict:
    """
    Decode ``STEAM_X:Y:Z``

    The universe digit is not kept, ``STEAM_0`` and ``STEAM_1`` both name public accounts.

    :param text: e.g. ``STEAM_1:1:0``
    :type text: str
    :raises: :class:`.MalformedInputError`
    :return: dict with account_id, universe, instance and account_type
    """

    account_id = _parse(text)

    if account_id is None or account_id > _MAX_ACCOUNT_ID:
        raise MalformedInputError(f'Invalid Steam2: {text!r}')

    return {'account_id': account_id,
            'universe': EUniverse.Public,
            'instance': EInstance.Desktop,
            'account_type': EAccountType.Individual,
            }
