class APIError(Exception):
    """Base API error with status code and message"""

    def __init__(self, message, status_code=400, payload=None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.payload = payload

    def to_dict(self):
        rv = dict(self.payload or ())
        rv["message"] = self.message
        return rv


class NotFoundError(APIError):
    """Resource not found errors"""

    def __init__(self, message="Resource not found", status_code=404):
        super().__init__(message, status_code)


class ValidationError(APIError):
    """Request data failed validation"""

    def __init__(self, message, status_code=422):
        super().__init__(message, status_code)


class CatalogUnavailableError(APIError):
    """A catalog could not be read from the database"""

    def __init__(self, catalog, message=None, status_code=503):
        super().__init__(message or f"Failed to fetch {catalog}", status_code)
        self.catalog = catalog


class InvalidSearchQuery(APIError):
    """Search query missing or not a string"""

    def __init__(self, message="Missing or invalid search query", status_code=400):
        super().__init__(message, status_code)
