from typing import Optional


class RefreshError(Exception):
    """Base class for errors raised while refreshing a lead."""


class MalformedUrlError(RefreshError):
    """The company profile URL does not look like a LinkedIn company page."""

    def __init__(self, url: str):
        self.url = url
        super().__init__(f"Wrong url format: {url}")


class CacheLookupError(RefreshError):
    """The scrapers cache could not return a usable document."""

    def __init__(self, message: str, upstream_message: Optional[str] = None):
        self.upstream_message = upstream_message
        super().__init__(message)


class CrmLookupError(RefreshError):
    """Searching Close for a lead failed."""


class CrmUpdateError(RefreshError):
    """A partial update of a Close lead failed."""

    def __init__(self, lead_id: str, message: str):
        self.lead_id = lead_id
        super().__init__(f"Lead {lead_id} update failed: {message}")
