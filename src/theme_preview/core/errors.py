class ThemePreviewError(Exception):
    """Base class for errors raised by theme-preview."""


class ArchiveError(ThemePreviewError):
    """The uploaded archive could not be opened or one of its entries could not be decoded."""


class TemplateRenderError(ThemePreviewError):
    """The template engine rejected or failed to render a template."""
