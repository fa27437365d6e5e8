"""Custom exceptions."""


class DependencyGateError(Exception):
    """Base class for all custom exceptions.

    Useful to catch all of them.
    """


class ClientConfigError(DependencyGateError):
    """A required client endpoint setting is missing."""

    def __init__(self, service_key: str, field: str):
        """Raise the ClientConfigError.

        Args:
            service_key (str): Key of the client whose configuration is incomplete.
            field (str): Name of the missing setting, e.g. "Host" or "Port".
        """
        self.service_key = service_key
        self.field = field
        msg = f"fatal error; {field} setting for {service_key} client not configured"
        super().__init__(msg)


class RegistryError(DependencyGateError):
    """The service registry could not confirm a service as available."""
