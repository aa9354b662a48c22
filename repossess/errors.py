"""Errors raised while resolving and downloading a repository archive."""


class RepoError(Exception):
    message = 'Repository error'

    def __init__(self, url: str) -> None:
        super().__init__(url)
        self.url = url

    def __str__(self) -> str:
        return f'{self.message}: {self.url}'


class ClassifyError(RepoError):
    message = 'Could not classify URL'


class MalformedURLError(ClassifyError):
    message = 'Could not parse URL'


class NoHostError(ClassifyError):
    message = 'Please enter a valid URL'


class UnsupportedHostError(ClassifyError):
    message = 'Please enter only GitHub or GitLab URLs'


class NotARepoURLError(ClassifyError):
    message = 'The URL does not seem to be a valid repo URL'


class DownloadFailedError(RepoError):
    message = 'The Git Repo could not be downloaded'

    def __init__(self, url: str, reason: str) -> None:
        super().__init__(url)
        self.reason = reason

    def __str__(self) -> str:
        return f'{self.message}: {self.url} ({self.reason})'
