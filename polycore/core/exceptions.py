from typing import Optional


class PolyCoreError(Exception):
    status_code = 500

    def __init__(self, message: str, details: Optional[str] = None):
        self.message = message
        self.details = details
        super().__init__(message)


class ValidationError(PolyCoreError):
    status_code = 400


class ProviderError(PolyCoreError):
    status_code = 500


class AdapterLoadError(PolyCoreError):
    status_code = 500
