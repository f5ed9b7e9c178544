from steamid.enums import CLAN_CHAT_CHAR, LOBBY_CHAT_CHAR, EAccountType, EInstance, EUniverse
from steamid.exceptions import InvalidStateError, MalformedInputError
from steamid.patterns import STEAM3

MIN = '[U:1:1]'
MAX = '[U:1:4294967295]'

_MAX_ACCOUNT_ID = 0xFFFFFFFF

# characters whose instance is ALL when no instance is written
_CHAT_LIKE_CHARS = (EAccountType.Clan.char, EAccountType.Chat.char, CLAN_CHAT_CHAR, LOBBY_CHAT_CHAR)

# chat variants, the instance is implied by the character
_CHAT_CHAR_INSTANCES = {
    CLAN_CHAT_CHAR: EInstance.Clan,
    LOBBY_CHAT_CHAR: EInstance.Lobby,
}


def _default_instance(type_char):
    if type_char in _CHAT_CHAR_INSTANCES:
        return _CHAT_CHAR_INSTANCES[type_char]

    return EInstance.All if type_char in _CHAT_LIKE_CHARS else EInstance.Desktop


def is_valid(text) -> bool:
    """Check that ``text`` is a ``[C:U:N]`` string naming an account id in range"""

    if not isinstance(text, str):
        return False

    match = STEAM3.match(text.strip())

    return bool(match) and 1 <= int(match.group('id')) <= _MAX_ACCOUNT_ID


def encode(account_id: int, universe: EUniverse, instance: EInstance, account_type: EAccountType) -> str:
    """
    Render as ``[C:U:N]`` or ``[C:U:N:I]``

    Chat accounts in a clan or lobby instance use ``c`` and ``L`` respectively.
    The instance is only written for ``AnonGameServer`` and ``Multiseat``.

    :raises: :class:`.InvalidStateError` when the account type has no character (e.g. ``ConsoleUser``)
    :return: e.g. ``[U:1:1]``
    :rtype: str
    """

    type_char = account_type.char

    if account_type == EAccountType.Chat:
        if instance == EInstance.Clan:
            type_char = CLAN_CHAT_CHAR
        elif instance == EInstance.Lobby:
            type_char = LOBBY_CHAT_CHAR

    if type_char is None:
        raise InvalidStateError(f'Steam3 cannot express account type {account_type!r}')

    with_instance = account_type in (EAccountType.AnonGameServer, EAccountType.Multiseat)

    text = f'[{type_char}:{universe:d}:{account_id:d}'

    if with_instance:
        text += f':{instance:d}'

    text += ']'

    if not is_valid(text):
        raise InvalidStateError(f'Invalid Steam3: {text}')

    return text


def decode(text: str) -> dict:
    """
    Decode ``[C:U:N]`` or ``[C:U:N:I]``

    Without ``I`` the instance is ``All`` for clan and chat characters and ``Desktop`` otherwise.
    ``c`` and ``L`` decode to ``Chat`` with the ``Clan`` and ``Lobby`` instance.

    :param text: e.g. ``[U:1:1]``
    :type text: str
    :raises: :class:`.MalformedInputError`, :class:`.InvalidStateError`
    :return: dict with account_id, universe, instance and account_type
    """

    match = STEAM3.match(text.strip()) if isinstance(text, str) else None

    if not match:
        raise MalformedInputError(f'Invalid Steam3: {text!r}')

    account_id = int(match.group('id'))

    if account_id > _MAX_ACCOUNT_ID:
        raise MalformedInputError(f'Steam3 account id out of range: {text!r}')

    type_char = match.group('type')

    if type_char in _CHAT_CHAR_INSTANCES:
        account_type = EAccountType.Chat
        instance = _CHAT_CHAR_INSTANCES[type_char]
    else:
        account_type = EAccountType.from_char(type_char)

        if match.group('instance') is None:
            instance = _default_instance(type_char)
        else:
            instance = EInstance.from_value(int(match.group('instance')))

    if instance is None:
        raise InvalidStateError(f'Unknown instance in Steam3: {text!r}')

    return {'account_id': account_id,
            'universe': EUniverse(int(match.group('universe'))),
            'instance': instance,
            'account_type': account_type,
            }
