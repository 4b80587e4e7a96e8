class FetchError(RuntimeError):
    """The upstream file API could not be reached or returned an unusable response."""
