class TermdeckError(Exception):
    pass


class DocumentNotFoundError(TermdeckError):
    pass


class ThemeNotFoundError(TermdeckError):
    pass
