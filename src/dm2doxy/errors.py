class Dm2DoxyError(Exception):
    """Base class for failures that abort a dm2doxy run."""


class ConfigurationError(Dm2DoxyError):
    pass


class ParseError(Dm2DoxyError):
    """The environment parser failed or produced output we could not read."""


class PseudoSourceNotFoundError(Dm2DoxyError):
    def __init__(self, source: str, pseudo_source: str) -> None:
        super().__init__(f"no pseudo-source for {source} (expected {pseudo_source}); run dm2doxy on the .dme first")
        self.source = source
        self.pseudo_source = pseudo_source
