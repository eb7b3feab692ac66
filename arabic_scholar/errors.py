"""Exception hierarchy for the Arabic dictionary client."""


class ScholarError(Exception):
    """Base class for all errors raised by this package."""


class ConfigError(ScholarError):
    """Required configuration (e.g. the API key) is missing."""


class LookupFailedError(ScholarError):
    """A dictionary lookup could not produce an entry."""


class QueryValidationError(LookupFailedError):
    """The query was blank; raised before any external call is made."""


class TransportError(LookupFailedError):
    """The model provider was unreachable or answered with an error status."""


class SchemaError(LookupFailedError):
    """The reply parsed as JSON but does not match the lookup schema."""


class InvalidResponseError(SchemaError):
    """The reply was not JSON at all."""


class AudioError(ScholarError):
    """Pronunciation audio could not be produced. Never fatal."""


class ChatInputError(ScholarError):
    """A chat message was blank."""


class ChatBusyError(ScholarError):
    """A chat message was sent while the previous one is still pending."""


class StorageError(ScholarError):
    """The key-value store could not be read or written."""
