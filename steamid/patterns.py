"""Compiled patterns for every textual Steam ID notation"""
import re

from steamid.enums import ACCOUNT_TYPE_CHARS, EUniverse, EAuth


__all__ = ['STEAM64', 'STEAM2', 'STEAM3', 'INVITE_CODE', 'FRIEND_CODE',
           'VANITY_ID', 'PROFILE_URL', 'USER_URL', 'VANITY_URL']

INVITE_CODE_ALPHABET = 'bcdfghjkmnpqrtvw'
FRIEND_CODE_ALPHABET = 'ABCDEFGHJKLMNPQRSTUVWXYZ23456789'

_UNIVERSE = f'[{EUniverse.Invalid:d}-{EUniverse.RC:d}]'

STEAM64 = re.compile(r'[0-9]{17}$')
STEAM2 = re.compile(r'STEAM_(?P<universe>%s):(?P<auth>[%d-%d]):(?P<id>[0-9]+)$'
                    % (_UNIVERSE, EAuth.No, EAuth.Yes))
STEAM3 = re.compile(r'\[(?P<type>[%s]):(?P<universe>%s):(?P<id>[0-9]+)(?::(?P<instance>[0-9]+))?\]$'
                    % (re.escape(ACCOUNT_TYPE_CHARS), _UNIVERSE))
INVITE_CODE = re.compile(r'[{0}]+(?:-[{0}]+)?$'.format(INVITE_CODE_ALPHABET))
FRIEND_CODE = re.compile(r'[{0}]{{5}}-[{0}]{{4}}$'.format(FRIEND_CODE_ALPHABET))
VANITY_ID = re.compile(r'[a-zA-Z0-9_-]{2,32}$')

PROFILE_URL = re.compile(r'https?://(?:www\.)?(?:my\.steamchina|steamcommunity)\.com'
                         r'/(?:profiles|gid)/(?P<id>[^/]+?)/?$')
USER_URL = re.compile(r'https?://(?:(?:www\.)?(?:my\.steamchina|steamcommunity)\.com/user|s\.team/p)'
                      r'/(?P<id>[\w-]+)/?$')
VANITY_URL = re.compile(r'https?://(?:www\.)?steamcommunity\.com/id/(?P<id>[a-zA-Z0-9_-]{2,32})/?$')
