class SteamIDError(ValueError):
    """Base for every error raised while converting Steam IDs"""


class MalformedInputError(SteamIDError):
    """Input is empty, doesn't match the expected notation, or a raw number is out of range"""


class InvalidStateError(SteamIDError):
    """Input was well-formed, but the resulting Steam ID or code fails validation"""
