"""Exceptions raised by the extraction pipeline and the template service."""


class NewsforgeError(Exception):
    pass


class BrowserUnavailable(NewsforgeError):
    """The shared browser could not be started. Not retried internally."""


class ExtractionFailed(NewsforgeError):
    """Navigation or in-page evaluation failed while extracting a template."""

    def __init__(self, url: str, reason: str):
        self.url = url
        self.reason = reason
        super().__init__(f"Failed to extract template from {url}: {reason}")


class TemplateNotFound(NewsforgeError):
    def __init__(self, template_id: str):
        self.template_id = template_id
        super().__init__(f"Template {template_id} not found")
