import logging
from urllib.parse import SplitResult, urlsplit, urlunsplit

from .errors import (
    MalformedURLError,
    NoHostError,
    NotARepoURLError,
    UnsupportedHostError,
)
from .schemas import DEFAULT_BRANCH, RepoDescriptor, RepoHost

logger = logging.getLogger(__name__)

SUPPORTED_HOSTS = {host.value: host for host in RepoHost}
DEFAULT_PORTS = {'http': 80, 'https': 443}


def classify(
    raw_url: str,
    branch: str | None = DEFAULT_BRANCH,
) -> RepoDescriptor:
    """Resolve a GitHub or GitLab repository URL into a descriptor.

    Only the first two non-empty path segments are used, as owner and
    repository name. ``branch`` falls back to ``master`` when empty.

    Raises a ``ClassifyError`` subclass when the URL can't be parsed, has no
    host, points at an unsupported host, or lacks an owner/name pair.
    """
    parsed_url = _parse(raw_url.strip().rstrip('/'))
    if not parsed_url.hostname:
        raise NoHostError(raw_url)
    host = SUPPORTED_HOSTS.get(parsed_url.hostname)
    if host is None:
        raise UnsupportedHostError(raw_url)
    segments = [segment for segment in parsed_url.path.split('/') if segment]
    if len(segments) < 2:
        raise NotARepoURLError(raw_url)
    repo = RepoDescriptor(
        original_url=_normalize(parsed_url),
        owner=segments[0],
        name=segments[1],
        host=host,
        branch=branch or DEFAULT_BRANCH,
    )
    logger.debug(
        'Classified %s as %s repo %s/%s',
        raw_url, repo.host.value, repo.owner, repo.name,
    )
    return repo


def synthesize_archive_url(repo: RepoDescriptor) -> str:
    """Build the zip archive URL of ``repo.branch`` for the repo's host."""
    if repo.host is RepoHost.GITHUB:
        return f'{repo.original_url}/archive/{repo.branch}.zip'
    return (
        f'{repo.original_url}/-/archive/{repo.branch}/'
        f'{repo.name}-{repo.branch}.zip'
    )


def _parse(url: str) -> SplitResult:
    """Split ``url``, also checking its port, which urlsplit reads lazily."""
    try:
        parsed_url = urlsplit(url)
        parsed_url.port
    except ValueError as err:
        raise MalformedURLError(url) from err
    if not parsed_url.scheme:
        raise MalformedURLError(url)
    return parsed_url


def _normalize(parsed_url: SplitResult) -> str:
    netloc = parsed_url.hostname or ''
    port = parsed_url.port
    if port is not None and DEFAULT_PORTS.get(parsed_url.scheme) != port:
        netloc = f'{netloc}:{port}'
    userinfo, at, _ = parsed_url.netloc.rpartition('@')
    if at:
        netloc = f'{userinfo}@{netloc}'
    return urlunsplit((
        parsed_url.scheme,
        netloc,
        parsed_url.path,
        parsed_url.query,
        parsed_url.fragment,
    ))
