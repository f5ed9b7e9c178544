from enum import Enum


__all__ = ['EDomain', 'EEndpoint', 'EUrl']


class EDomain(str, Enum):
    Community = 'steamcommunity.com'
    Invite = 's.team'
    China = 'my.steamchina.com'


class EEndpoint(str, Enum):
    Id = 'id'
    Profiles = 'profiles'
    User = 'user'
    P = 'p'


def _url(domain: EDomain, endpoint: EEndpoint) -> str:
    return f'https://{domain.value}/{endpoint.value}/'


class EUrl(str, Enum):
    """URL prefixes, the id or code is appended as is"""

    Vanity = _url(EDomain.Community, EEndpoint.Id)
    Profile = _url(EDomain.Community, EEndpoint.Profiles)
    User = _url(EDomain.Community, EEndpoint.User)
    Invite = _url(EDomain.Invite, EEndpoint.P)
    China = _url(EDomain.China, EEndpoint.Profiles)
