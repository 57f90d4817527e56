"""Domain-specific exceptions."""


class ServiceError(Exception):
    pass


class GymApiError(ServiceError):
    """Remote place API call failed; ``status_code`` is None for transport errors."""

    def __init__(self, message: str, *, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code

    @property
    def code(self) -> str:
        return str(self.status_code) if self.status_code is not None else "network"


class PlaceNotFound(ServiceError):
    pass
