class MarketplaceError(Exception):
    """Base class for errors raised by the status and search services."""


class LocationUnavailable(MarketplaceError):
    """
    No coordinate could be obtained for going live.
    Recoverable: the caller should offer manual address search.
    """

    def __init__(self, message="We could not get your location. Please search for it manually."):
        super().__init__(message)


class AddressSearchError(MarketplaceError):
    pass


class NoResult(AddressSearchError):
    def __init__(self, query=""):
        self.query = query
        super().__init__(f"No location found for '{query}'. Try a more specific address.")


class ProviderUnavailable(AddressSearchError):
    def __init__(self, message="Location search is unavailable right now. Please try again."):
        super().__init__(message)


class PersistenceError(MarketplaceError):
    """A store read or write failed; the requested transition did not happen."""


class InvalidTransition(MarketplaceError):
    def __init__(self, current, requested):
        self.current = current
        self.requested = requested
        super().__init__(f"Cannot change status from '{current}' to '{requested}'.")
