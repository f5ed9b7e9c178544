"""
Codecs for the notations a Steam ID can be written in.
Each submodule works on plain values, validation of the whole ID is left to :class:`steamid.SteamID`.
"""
