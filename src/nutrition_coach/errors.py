"""Errors raised by the food search client."""


class FoodSearchError(Exception):
    """Base error for failed calls to the food database vendor."""

    def __init__(self, message: str, status_code: int) -> None:
        super().__init__(message)
        self.status_code = status_code


class AuthError(FoodSearchError):
    """Raised when the credential exchange returns a non-success status."""

    def __init__(self, status_code: int) -> None:
        super().__init__(f"FatSecret auth failed: {status_code}", status_code)


class SearchError(FoodSearchError):
    """Raised when the search request returns a non-success status."""

    def __init__(self, status_code: int) -> None:
        super().__init__(f"FatSecret API error: {status_code}", status_code)
