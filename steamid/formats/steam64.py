from steamid import bits
from steamid.enums import EAccountType, EInstance, EUniverse
from steamid.exceptions import InvalidStateError, MalformedInputError
from steamid.patterns import STEAM64

#: lowest public individual desktop account
MIN = 0x0110000100000001
#: highest public individual desktop account
MAX = 0x01100001FFFFFFFF

_bitmask64 = 2 ** 64 - 1


def is_valid(value) -> bool:
    """
    Check whether ``value`` falls into the public individual range

    :param value: 64-bit id or its 17 digit string form
    :type value: :class:`int`, :class:`str`
    :rtype: :class:`bool`
    """

    if isinstance(value, str):
        value = value.strip()

        if not STEAM64.match(value):
            return False

        value = int(value)

    return isinstance(value, int) and MIN <= value <= MAX


def encode(account_id: int, universe: EUniverse, instance: EInstance, account_type: EAccountType) -> int:
    """
    Pack the four fields into a 64-bit id

    :raises: :class:`.InvalidStateError` when the result is outside :data:`MIN` - :data:`MAX`
    :return: 64-bit id (e.g. ``76561197960265729``)
    :rtype: :class:`int`
    """

    value = 0
    value = bits.ACCOUNT_ID.set(value, account_id)
    value = bits.ACCOUNT_INSTANCE.set(value, instance)
    value = bits.ACCOUNT_TYPE.set(value, account_type)
    value = bits.ACCOUNT_UNIVERSE.set(value, universe)

    if not MIN <= value <= MAX:
        raise InvalidStateError(f'Steam64 out of range: {value}')

    return value


def decode(value) -> dict:
    """
    Unpack a 64-bit id

    :param value: 64-bit id or its 17 digit string form
    :type value: :class:`int`, :class:`str`
    :raises: :class:`.MalformedInputError`, :class:`.InvalidStateError`
    :return: dict with account_id, universe, instance and account_type

    .. code:: python

        {'account_id': 1,
         'universe': EUniverse.Public,
         'instance': EInstance.Desktop,
         'account_type': EAccountType.Individual,
         }
    """

    if isinstance(value, str):
        value = value.strip()

        if not STEAM64.match(value):
            raise MalformedInputError(f'Invalid Steam64: {value!r}')

        value = int(value)

    if isinstance(value, bool) or not isinstance(value, int) or not 0 <= value <= _bitmask64:
        raise MalformedInputError(f'Invalid Steam64: {value!r}')

    fields = {'account_id': bits.ACCOUNT_ID.get(value),
              'universe': EUniverse.from_value(bits.ACCOUNT_UNIVERSE.get(value)),
              'instance': EInstance.from_value(bits.ACCOUNT_INSTANCE.get(value)),
              'account_type': EAccountType.from_value(bits.ACCOUNT_TYPE.get(value)),
              }

    if None in fields.values():
        raise InvalidStateError(f'Unknown field value in Steam64: {value}')

    return fields
