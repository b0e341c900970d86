"""
Custom exceptions for banner roster extraction.

Every pipeline failure derives from BannerRosterError so the dispatcher can
collapse them into an empty roster in one place.
"""


class BannerRosterError(Exception):
    pass


class FetchError(BannerRosterError):
    def __init__(self, message: str, url: str, status_code: int | None = None):
        self.url = url
        self.status_code = status_code
        super().__init__(message)


class LocatorMiss(BannerRosterError):
    pass


class EmptyExtraction(BannerRosterError):
    pass


class VocabularyError(BannerRosterError):
    pass


class RosterUnavailableError(BannerRosterError):
    def __init__(self, game: str | None):
        self.game = game
        super().__init__(f"No current banner characters available for game '{game}'")
