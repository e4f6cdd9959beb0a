"""Repositories API."""

from __future__ import annotations

from dataclasses import replace
from typing import Any

from repos_client.domain.context import ResourceContext
from repos_client.domain.entities import CallContract, Endpoint, HttpVerb, ResultShape
from repos_client.interface.registry import SubResourceRegistry, default_registry
from repos_client.interface.resource_api import ResourceApi
from repos_client.services.argument_normalizer import (
    CallInvocation,
    OnEach,
    check_identifier,
)
from repos_client.services.request_engine import RequestEngine

DEFAULT_REPO_OPTIONS: dict[str, Any] = {
    "homepage": "https://github.com",
    "private": False,
    "has_issues": True,
    "has_wiki": True,
    "has_downloads": True,
}

VALID_REPO_OPTIONS = frozenset(
    {
        "name",
        "description",
        "homepage",
        "private",
        "has_issues",
        "has_wiki",
        "has_downloads",
        "team_id",
        "auto_init",
        "gitignore_template",
    }
)

REQUIRED_REPO_OPTIONS = frozenset({"name"})

VALID_REPO_TYPES = ("all", "public", "private", "member")

_LISTING_OPTIONS = frozenset({"type", "sort", "direction"})
_REPO = CallContract(required_positional=("user", "repo"))
_REPO_PATH = "/repos/{user}/{repo}"

# ── Listing ─────────────────────────────────────────────────────────────────

# Calls are normalized against LIST_CONTRACT; the per-path endpoints carry verb and path only.
LIST_CONTRACT = CallContract(allowed_options=_LISTING_OPTIONS | {"user", "org"})
LIST_FOR_USER = Endpoint(HttpVerb.GET, "/users/{user}/repos", shape=ResultShape.LIST)
LIST_FOR_ORG = Endpoint(HttpVerb.GET, "/orgs/{org}/repos", shape=ResultShape.LIST)
LIST_MINE = Endpoint(HttpVerb.GET, "/user/repos", shape=ResultShape.LIST)

# ── Single repository ───────────────────────────────────────────────────────

# Normalized against CREATE_CONTRACT, then routed to one of the two paths below.
CREATE_CONTRACT = CallContract(
    allowed_options=VALID_REPO_OPTIONS | {"org"},
    required_options=REQUIRED_REPO_OPTIONS,
    default_options=DEFAULT_REPO_OPTIONS,
)
CREATE_FOR_ORG = Endpoint(HttpVerb.POST, "/orgs/{org}/repos")
CREATE_MINE = Endpoint(HttpVerb.POST, "/user/repos")

GET = Endpoint(HttpVerb.GET, _REPO_PATH, _REPO)
EDIT = Endpoint(
    HttpVerb.PATCH,
    _REPO_PATH,
    CallContract(
        required_positional=("user", "repo"),
        allowed_options=VALID_REPO_OPTIONS,
        required_options=REQUIRED_REPO_OPTIONS,
        default_options=DEFAULT_REPO_OPTIONS,
    ),
)
DELETE = Endpoint(HttpVerb.DELETE, _REPO_PATH, _REPO)

# ── Collections under a repository ──────────────────────────────────────────

CONTRIBUTORS = Endpoint(
    HttpVerb.GET,
    _REPO_PATH + "/contributors",
    CallContract(required_positional=("user", "repo"), allowed_options={"anon"}),
    ResultShape.LIST,
)
BRANCHES = Endpoint(HttpVerb.GET, _REPO_PATH + "/branches", _REPO, ResultShape.LIST)
BRANCH = Endpoint(
    HttpVerb.GET,
    _REPO_PATH + "/branches/{branch}",
    CallContract(required_positional=("user", "repo", "branch")),
)
LANGUAGES = Endpoint(HttpVerb.GET, _REPO_PATH + "/languages", _REPO, ResultShape.LIST)
TAGS = Endpoint(HttpVerb.GET, _REPO_PATH + "/tags", _REPO, ResultShape.LIST)
TEAMS = Endpoint(HttpVerb.GET, _REPO_PATH + "/teams", _REPO, ResultShape.LIST)


class Repos(ResourceApi):
    """Repositories, plus access to their sub-resources.

    Examples
    --------
    >>> repos.get("acme", "widget")                     # doctest: +SKIP
    >>> repos.branches(on_each=print)                   # doctest: +SKIP
    >>> repos.create(name="widget", private=True)       # doctest: +SKIP
    """

    def __init__(
        self,
        engine: RequestEngine,
        context: ResourceContext | None = None,
        registry: SubResourceRegistry | None = None,
        **bindings: Any,
    ) -> None:
        super().__init__(engine, context, **bindings)
        self._registry = registry if registry is not None else default_registry()
        self._sub_resources = self._registry.build_all(engine, self.context)

    # ── Sub-resources ───────────────────────────────────────────────────

    def sub_resource(self, name: str) -> ResourceApi:
        try:
            return self._sub_resources[name]
        except KeyError:
            raise KeyError(
                f"Unknown sub-resource '{name}'. Known: {', '.join(self._registry.names())}"
            ) from None

    @property
    def collaborators(self) -> Any:
        return self.sub_resource("collaborators")

    @property
    def comments(self) -> Any:
        return self.sub_resource("comments")

    @property
    def commits(self) -> Any:
        return self.sub_resource("commits")

    @property
    def contents(self) -> Any:
        return self.sub_resource("contents")

    @property
    def downloads(self) -> Any:
        return self.sub_resource("downloads")

    @property
    def forks(self) -> Any:
        return self.sub_resource("forks")

    @property
    def hooks(self) -> Any:
        return self.sub_resource("hooks")

    @property
    def keys(self) -> Any:
        return self.sub_resource("keys")

    @property
    def merging(self) -> Any:
        return self.sub_resource("merging")

    @property
    def statuses(self) -> Any:
        return self.sub_resource("statuses")

    # ── Repositories ────────────────────────────────────────────────────

    def list(self, *args: Any, on_each: OnEach | None = None, **options: Any) -> Any:
        """List repositories of ``user``, of ``org``, or of the authenticated user.

        ``user``/``org`` fall back to the values bound on this instance.
        """
        invocation = CallInvocation.from_call(args, options, on_each)
        call = self._engine.prepare(LIST_CONTRACT, self.context, invocation)
        params = dict(call.params)
        user = params.pop("user", None) or self.context.get("user")
        org = params.pop("org", None) or self.context.get("org")

        if user:
            check_identifier("user", user)
            endpoint, ids = LIST_FOR_USER, {"user": user}
        elif org:
            check_identifier("org", org)
            endpoint, ids = LIST_FOR_ORG, {"org": org}
        else:
            endpoint, ids = LIST_MINE, {}
        call = replace(call, positional_values=ids, params=params)
        return self._engine.execute(endpoint, call, self.context, on_each)

    def get(self, *args: Any, **options: Any) -> Any:
        return self._call(GET, args, options)

    def create(self, *args: Any, **options: Any) -> Any:
        """Create a repository for the authenticated user, or inside ``org``."""
        invocation = CallInvocation.from_call(args, options)
        call = self._engine.prepare(CREATE_CONTRACT, self.context, invocation)
        params = dict(call.params)
        org = params.pop("org", None)
        if org:
            check_identifier("org", org)

        endpoint = CREATE_FOR_ORG if org else CREATE_MINE
        call = replace(call, positional_values={"org": org} if org else {}, params=params)
        return self._engine.execute(endpoint, call, self.context)

    def edit(self, *args: Any, **options: Any) -> Any:
        return self._call(EDIT, args, options)

    def delete(self, *args: Any, **options: Any) -> Any:
        """Requires admin access (``delete_repo`` scope under OAuth)."""
        return self._call(DELETE, args, options)

    def contributors(self, *args: Any, on_each: OnEach | None = None, **options: Any) -> Any:
        """``anon=True`` includes anonymous contributors."""
        return self._call(CONTRIBUTORS, args, options, on_each)

    def branches(self, *args: Any, on_each: OnEach | None = None, **options: Any) -> Any:
        return self._call(BRANCHES, args, options, on_each)

    def branch(self, *args: Any, **options: Any) -> Any:
        return self._call(BRANCH, args, options)

    def languages(self, *args: Any, on_each: OnEach | None = None, **options: Any) -> Any:
        return self._call(LANGUAGES, args, options, on_each)

    def tags(self, *args: Any, on_each: OnEach | None = None, **options: Any) -> Any:
        return self._call(TAGS, args, options, on_each)

    def teams(self, *args: Any, on_each: OnEach | None = None, **options: Any) -> Any:
        return self._call(TEAMS, args, options, on_each)

    # ── Aliases ─────────────────────────────────────────────────────────

    all = list
    find = get
    remove = delete
    list_contributors = contribs = contributors
    list_branches = branches
    list_languages = languages
    list_tags = repo_tags = repository_tags = tags
    list_teams = repo_teams = repository_teams = teams
