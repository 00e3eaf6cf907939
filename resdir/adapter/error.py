"""Infrastructure layer errors."""

from resdir.domain.service.suggestion_service import ClassifierError


class AdapterError(Exception):
    """Base infrastructure error."""

    pass


class ProviderError(AdapterError):
    """External provider error."""

    pass


class ClassifierProviderError(ProviderError, ClassifierError):
    """The external tag classifier failed or answered nonsense."""

    pass
