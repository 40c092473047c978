"""Exceptions raised while building the API document."""


class ApiDocError(Exception):
    """Base class for every error reported by apidoc."""


class ConfigurationMissingError(ApiDocError):
    """Required configuration (application URL, config file) is absent or invalid."""


class ManifestError(ApiDocError):
    """The route manifest could not be read or has the wrong shape."""


class AnnotationError(ApiDocError):
    """An @apiParam declaration on a controller action is malformed."""

    def __init__(self, controller: str, action: str, message: str):
        self.controller = controller
        self.action = action
        super().__init__(message)


class MissingTypeError(AnnotationError):
    def __init__(self, controller: str, action: str, param: str | None):
        self.param = param
        super().__init__(
            controller,
            action,
            f"Missing type for {controller}@{action} with param {param or ''}",
        )


class MissingNameError(AnnotationError):
    def __init__(self, controller: str, action: str, declaration: str):
        self.declaration = declaration
        super().__init__(
            controller,
            action,
            f"Missing $name for {controller}@{action} in '{declaration}'",
        )
