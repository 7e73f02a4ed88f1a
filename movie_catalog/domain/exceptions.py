class DomainError(Exception):
    pass


class RepositoryError(DomainError):
    pass
