"""
:class:`SteamID` ties the account id, universe, instance and account type together
and converts them from and to every supported notation.

.. code:: python

    sid = SteamID.from_any('STEAM_1:1:0')

    sid.as_steam64()           # 76561197960265729
    sid.as_steam3()            # '[U:1:1]'
    sid.as_invite_code()       # 'c'
    sid.as_csgo_friend_code()  # 'AJJJS-ABAA'

Every constructor, setter and renderer raises :class:`.SteamIDError` on failure.
Pass ``raises=False`` to get ``None`` instead.
"""
from __future__ import annotations

from functools import wraps
import logging

from steamid.enums import EAccountType, EInstance, EUniverse
from steamid.exceptions import InvalidStateError, MalformedInputError, SteamIDError
from steamid.formats import friendcode, invite, steam2, steam3, steam64
from steamid.patterns import PROFILE_URL, USER_URL, VANITY_URL
from steamid.urls import EUrl


__all__ = ['SteamID', 'vanity_from_url']

_LOG = logging.getLogger(__name__)

MIN_ACCOUNT_ID = 0x00000001
MAX_ACCOUNT_ID = 0xFFFFFFFF


def _optional_raise(func):
    # adds the ``raises`` keyword, failures become None when it's False
    @wraps(func)
    def wrapper(*args, raises: bool = True, **kwargs):
        try:
            return func(*args, **kwargs)
        except SteamIDError as exp:
            if raises:
                raise

            _LOG.debug(f'{func.__name__} failed: {exp}')
            return None

    return wrapper


def vanity_from_url(url: str):
    """
    Extract the vanity name from ``https://steamcommunity.com/id/<name>``

    Resolving the name to an id requires the Web API and is not done here.

    :rtype: :class:`str` or ``None``
    """

    match = VANITY_URL.match(url.strip()) if isinstance(url, str) else None

    return match.group('id') if match else None


class SteamID:
    """
    :param account_id: when given, the ID is an individual public desktop account
    :type account_id: :class:`int`
    """

    MIN_ACCOUNT_ID = MIN_ACCOUNT_ID
    MAX_ACCOUNT_ID = MAX_ACCOUNT_ID

    #: :class:`int` or ``None``
    account_id = None
    #: :class:`.EUniverse` or ``None``
    universe = None
    #: :class:`.EInstance` or ``None``
    instance = None
    #: :class:`.EAccountType` or ``None``
    account_type = None

    def __init__(self, account_id: int = None):
        if account_id is not None:
            self._assign(account_id, EUniverse.Public, EInstance.Desktop, EAccountType.Individual)

    def __repr__(self):
        return (f'<{self.__class__.__name__}(account_id={self.account_id!r}, universe={self.universe!r}, '
                f'instance={self.instance!r}, account_type={self.account_type!r})>')

    def __eq__(self, other):
        if not isinstance(other, SteamID):
            return NotImplemented

        return self._fields() == other._fields()

    def __hash__(self):
        return hash(self._fields())

    def __int__(self):
        return self.as_steam64()

    def _fields(self):
        return self.account_id, self.universe, self.instance, self.account_type

    def _assign(self, account_id, universe, instance, account_type):
        self.account_id = account_id
        self.universe = universe
        self.instance = instance
        self.account_type = account_type

    def copy(self) -> SteamID:
        """Return an independent copy of this ID"""

        other = SteamID()
        other._assign(*self._fields())
        return other

    def with_account_id(self, account_id: int) -> SteamID:
        """Return a copy with ``account_id`` replaced, the copy is not validated"""

        other = self.copy()
        other.account_id = account_id
        return other

    def with_universe(self, universe: EUniverse) -> SteamID:
        other = self.copy()
        other.universe = universe
        return other

    def with_instance(self, instance: EInstance) -> SteamID:
        other = self.copy()
        other.instance = instance
        return other

    def with_account_type(self, account_type: EAccountType) -> SteamID:
        other = self.copy()
        other.account_type = account_type
        return other

    def is_valid(self) -> bool:
        """
        Check whether the fields form a legal Steam ID

        :rtype: :class:`bool`
        """

        account_id, universe, instance, account_type = self._fields()

        if not isinstance(account_id, int) or not 0 <= account_id <= MAX_ACCOUNT_ID:
            return False
        if universe in (None, EUniverse.Invalid) or instance is None:
            return False
        if account_type in (None, EAccountType.Invalid):
            return False

        if account_type == EAccountType.Individual:
            return account_id >= MIN_ACCOUNT_ID and instance != EInstance.Web
        if account_type == EAccountType.Clan:
            return account_id >= MIN_ACCOUNT_ID and instance != EInstance.All
        if account_type == EAccountType.GameServer:
            return account_id >= MIN_ACCOUNT_ID

        return True

    def _require_valid(self):
        if not self.is_valid():
            raise InvalidStateError(f'Invalid Steam ID: {self!r}')

    def _set_fields(self, account_id, universe, instance, account_type):
        candidate = SteamID()
        candidate._assign(account_id, universe, instance, account_type)

        if not candidate.is_valid():
            raise InvalidStateError(f'Invalid Steam ID: {candidate!r}')

        self._assign(account_id, universe, instance, account_type)
        return self

    # setters, the ID is left untouched on failure

    @_optional_raise
    def set_as_individual(self, account_id: int) -> SteamID:
        """
        Turn this ID into an individual public desktop account

        :param account_id: account id
        :type account_id: :class:`int`
        :raises: :class:`.InvalidStateError`
        :return: ``self``
        """

        return self._set_fields(account_id, EUniverse.Public, EInstance.Desktop, EAccountType.Individual)

    @_optional_raise
    def set_as_steam64(self, value) -> SteamID:
        """
        :param value: 64-bit id or its 17 digit string form
        :type value: :class:`int`, :class:`str`
        :return: ``self``
        """

        return self._set_fields(**steam64.decode(value))

    @_optional_raise
    def set_as_steam2(self, text: str) -> SteamID:
        """
        :param text: e.g. ``STEAM_1:1:0``
        :return: ``self``
        """

        return self._set_fields(**steam2.decode(text))

    @_optional_raise
    def set_as_steam3(self, text: str) -> SteamID:
        """
        :param text: e.g. ``[U:1:1]``
        :return: ``self``
        """

        return self._set_fields(**steam3.decode(text))

    @_optional_raise
    def set_as_invite_code(self, code: str) -> SteamID:
        """
        :param code: e.g. ``gqkj-gkbr``
        :return: ``self``
        """

        return self.set_as_individual(invite.decode(code))

    @_optional_raise
    def set_as_csgo_friend_code(self, code: str) -> SteamID:
        """
        :param code: e.g. ``AEVDG-WQTQ``
        :return: ``self``
        """

        return self.set_as_individual(friendcode.decode(code))

    @_optional_raise
    def set_as_profile_url(self, url: str) -> SteamID:
        """
        :param url: e.g. ``https://steamcommunity.com/profiles/76561197960265729``
            or ``https://steamcommunity.com/profiles/[U:1:1]``
        :return: ``self``
        """

        match = PROFILE_URL.match(url.strip()) if isinstance(url, str) else None

        if not match:
            raise MalformedInputError(f'Invalid profile url: {url!r}')

        for parser in (self.set_as_steam64, self.set_as_steam3):
            if parser(match.group('id'), raises=False) is not None:
                return self

        raise MalformedInputError(f'No Steam ID in profile url: {url!r}')

    @_optional_raise
    def set_as_user_url(self, url: str) -> SteamID:
        """
        :param url: e.g. ``https://s.team/p/gqkj-gkbr``
        :return: ``self``
        """

        match = USER_URL.match(url.strip()) if isinstance(url, str) else None

        if not match:
            raise MalformedInputError(f'Invalid user url: {url!r}')

        return self.set_as_invite_code(match.group('id'))

    @_optional_raise
    def set_as_url(self, url: str) -> SteamID:
        """Try :meth:`set_as_profile_url`, then :meth:`set_as_user_url`"""

        return self._first_of((self.set_as_profile_url, self.set_as_user_url), url)

    @_optional_raise
    def set_as_any(self, text) -> SteamID:
        """
        Accept any supported notation

        Tried in order: Steam64, Steam2, Steam3, invite code, CS:GO friend code, url.
        """

        return self._first_of((self.set_as_steam64,
                               self.set_as_steam2,
                               self.set_as_steam3,
                               self.set_as_invite_code,
                               self.set_as_csgo_friend_code,
                               self.set_as_url,
                               ), text)

    def _first_of(self, parsers, value):
        for parser in parsers:
            if parser(value, raises=False) is not None:
                return self

        raise MalformedInputError(f'Unrecognized Steam ID: {value!r}')

    # constructors

    @classmethod
    def from_steam64(cls, value, raises: bool = True):
        """:rtype: :class:`SteamID` or ``None``"""

        return cls().set_as_steam64(value, raises=raises)

    @classmethod
    def from_steam2(cls, text: str, raises: bool = True):
        """:rtype: :class:`SteamID` or ``None``"""

        return cls().set_as_steam2(text, raises=raises)

    @classmethod
    def from_steam3(cls, text: str, raises: bool = True):
        """:rtype: :class:`SteamID` or ``None``"""

        return cls().set_as_steam3(text, raises=raises)

    @classmethod
    def from_invite_code(cls, code: str, raises: bool = True):
        """:rtype: :class:`SteamID` or ``None``"""

        return cls().set_as_invite_code(code, raises=raises)

    @classmethod
    def from_csgo_friend_code(cls, code: str, raises: bool = True):
        """:rtype: :class:`SteamID` or ``None``"""

        return cls().set_as_csgo_friend_code(code, raises=raises)

    @classmethod
    def from_profile_url(cls, url: str, raises: bool = True):
        """:rtype: :class:`SteamID` or ``None``"""

        return cls().set_as_profile_url(url, raises=raises)

    @classmethod
    def from_user_url(cls, url: str, raises: bool = True):
        """:rtype: :class:`SteamID` or ``None``"""

        return cls().set_as_user_url(url, raises=raises)

    @classmethod
    def from_url(cls, url: str, raises: bool = True):
        """:rtype: :class:`SteamID` or ``None``"""

        return cls().set_as_url(url, raises=raises)

    @classmethod
    def from_any(cls, text, raises: bool = True):
        """
        Build a :class:`SteamID` from any supported notation, see :meth:`set_as_any`

        :param text: Steam64, Steam2, Steam3, invite code, CS:GO friend code or url
        :param raises: when ``False`` returns ``None`` on failure instead of raising
        :type raises: :class:`bool`
        :rtype: :class:`SteamID` or ``None``
        :raises: :class:`.SteamIDError`
        """

        return cls().set_as_any(text, raises=raises)

    # renderers

    @_optional_raise
    def as_steam64(self) -> int:
        """
        :return: e.g. ``76561197960265729``
        :rtype: :class:`int`
        """

        self._require_valid()
        return steam64.encode(*self._fields())

    @_optional_raise
    def as_steam2(self) -> str:
        """
        :return: e.g. ``STEAM_1:1:0``
        :rtype: :class:`str`
        """

        self._require_valid()
        return steam2.encode(self.account_id, self.universe, self.account_type)

    @_optional_raise
    def as_steam3(self) -> str:
        """
        :return: e.g. ``[U:1:1]``
        :rtype: :class:`str`
        """

        self._require_valid()
        return steam3.encode(*self._fields())

    @_optional_raise
    def as_invite_code(self) -> str:
        """
        :return: e.g. ``c``
        :rtype: :class:`str`
        """

        self._require_valid()
        return invite.encode(self.account_id)

    @_optional_raise
    def as_csgo_friend_code(self) -> str:
        """
        :return: e.g. ``AJJJS-ABAA``
        :rtype: :class:`str`
        """

        self._require_valid()
        return friendcode.encode(self.account_id)

    @_optional_raise
    def as_steam64_url(self) -> str:
        return EUrl.Profile.value + str(self.as_steam64())

    @_optional_raise
    def as_steam3_url(self) -> str:
        return EUrl.Profile.value + self.as_steam3()

    @_optional_raise
    def as_user_url(self) -> str:
        return EUrl.User.value + self.as_invite_code()

    @_optional_raise
    def as_invite_url(self) -> str:
        return EUrl.Invite.value + self.as_invite_code()

    @_optional_raise
    def as_china_url(self) -> str:
        return EUrl.China.value + str(self.as_steam64())
