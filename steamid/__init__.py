__version__ = "1.0.0"
__author__ = "u004"

from steamid.enums import EAccountType, EInstance, EUniverse
from steamid.exceptions import InvalidStateError, MalformedInputError, SteamIDError
from steamid.steamid import SteamID, vanity_from_url

__all__ = ['SteamID', 'vanity_from_url',
           'EAccountType', 'EInstance', 'EUniverse',
           'SteamIDError', 'MalformedInputError', 'InvalidStateError']
