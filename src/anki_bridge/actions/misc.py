"""Miscellaneous actions: protocol version, sync and profiles."""

from anki_bridge.action import AnkiAction


class Version(AnkiAction[int]):
    """Protocol version supported by the running AnkiConnect."""

    ACTION = "version"


class Sync(AnkiAction[None]):
    """Synchronize the local collection with AnkiWeb."""

    ACTION = "sync"


class GetProfiles(AnkiAction[list[str]]):
    """Names of all Anki profiles."""

    ACTION = "getProfiles"


class ReloadCollection(AnkiAction[None]):
    """Reload the collection from disk."""

    ACTION = "reloadCollection"
