from steam.enums.base import SteamIntEnum


__all__ = ['EUniverse', 'EInstance', 'EAccountType', 'EAuth', 'EVanityType',
           'CHAT_INSTANCES', 'ACCOUNT_TYPE_CHARS', 'CLAN_CHAT_CHAR', 'LOBBY_CHAT_CHAR']


CLAN_CHAT_CHAR = 'c'
LOBBY_CHAT_CHAR = 'L'


class _LookupMixin:
    @classmethod
    def from_value(cls, value):
        """
        Resolve a member by its integer value

        :param value: integer value
        :type value: :class:`int`
        :return: member or ``None``
        """

        try:
            return cls(value)
        except (ValueError, TypeError):
            return None

    @classmethod
    def from_index(cls, index):
        """
        Resolve a member by its declaration order

        :param index: position, starting at ``0``
        :type index: :class:`int`
        :return: member or ``None``
        """

        members = list(cls)

        if not isinstance(index, int) or not 0 <= index < len(members):
            return None

        return members[index]


class EUniverse(_LookupMixin, SteamIntEnum):
    Invalid = 0
    Public = 1
    Beta = 2
    Internal = 3
    Dev = 4
    RC = 5


class EInstance(_LookupMixin, SteamIntEnum):
    All = 0
    Desktop = 1
    Console = 2
    Web = 4
    # chat flags, top bits of the 20-bit instance field
    Clan = 0x100000 >> 1
    Lobby = 0x100000 >> 2
    MMLobby = 0x100000 >> 3


#: instance flags only found on chat accounts
CHAT_INSTANCES = (EInstance.Clan, EInstance.Lobby, EInstance.MMLobby)


class EAccountType(_LookupMixin, SteamIntEnum):
    Invalid = 0
    Individual = 1
    Multiseat = 2
    GameServer = 3
    AnonGameServer = 4
    Pending = 5
    ContentServer = 6
    Clan = 7
    Chat = 8
    ConsoleUser = 9
    AnonUser = 10
    Unknown = 11

    @property
    def char(self):
        """Display character used in the ``[C:U:N]`` notation, ``None`` when there is none"""

        return _ACCOUNT_TYPE_CHARS.get(self)

    @classmethod
    def from_char(cls, char):
        """
        Resolve an account type by its display character

        .. note::
            ``c`` and ``L`` are not resolved here, they are chat variants
            and carry their meaning in the instance field

        :param char: single character
        :type char: :class:`str`
        :return: member or ``None``
        """

        for account_type, type_char in _ACCOUNT_TYPE_CHARS.items():
            if type_char == char:
                return account_type

        return None


_ACCOUNT_TYPE_CHARS = {
    EAccountType.Invalid: 'I',
    EAccountType.Individual: 'U',
    EAccountType.Multiseat: 'M',
    EAccountType.GameServer: 'G',
    EAccountType.AnonGameServer: 'A',
    EAccountType.Pending: 'P',
    EAccountType.ContentServer: 'C',
    EAccountType.Clan: 'g',
    EAccountType.Chat: 'T',
    EAccountType.AnonUser: 'a',
    EAccountType.Unknown: 'i',
}

#: every character accepted at the head of ``[C:U:N]``
ACCOUNT_TYPE_CHARS = ''.join(_ACCOUNT_TYPE_CHARS.values()) + CLAN_CHAT_CHAR + LOBBY_CHAT_CHAR


class EAuth(_LookupMixin, SteamIntEnum):
    No = 0
    Yes = 1


class EVanityType(_LookupMixin, SteamIntEnum):
    Individual = 1
    Group = 2
    GameGroup = 3
