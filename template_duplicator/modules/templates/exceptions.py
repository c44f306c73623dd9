"""Template asset specific exceptions."""


class TemplateAssetError(Exception):
    """Base class for template asset errors."""

    public_message = "Request failed"


class InvalidInputError(TemplateAssetError):
    """Raised when the source key or theme id is missing."""


class UpstreamFetchError(TemplateAssetError):
    """Raised when themes or assets could not be listed."""

    public_message = "Failed to fetch"


class UpstreamCreateError(TemplateAssetError):
    """Raised when the theme store rejected the duplicated asset."""

    public_message = "Failed to duplicate"


class ExhaustedKeyspaceError(TemplateAssetError):
    """Raised when no free key was found within the configured attempts."""

    public_message = "Failed to duplicate"
