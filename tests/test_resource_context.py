from repos_client.domain.context import ResourceContext


def test_get_returns_default_when_unbound() -> None:
    context = ResourceContext()

    assert context.get("user") is None
    assert context.get("user", "fallback") == "fallback"


def test_last_write_wins() -> None:
    context = ResourceContext({"repo": "widget"})
    context.set("repo", "gadget")
    context.set("repo", "gizmo")

    assert context.get("repo") == "gizmo"


def test_bind_skips_none() -> None:
    context = ResourceContext({"user": "acme"})
    context.bind({"user": None, "repo": "widget"})

    assert context.snapshot() == {"user": "acme", "repo": "widget"}


def test_set_none_unbinds() -> None:
    context = ResourceContext({"user": "acme"})
    context.set("user", None)

    assert "user" not in context


def test_child_reads_through_but_writes_locally() -> None:
    parent = ResourceContext({"user": "acme", "repo": "widget"})
    child = parent.child()
    child.set("id", 7)
    child.set("repo", "gadget")

    assert child.get("user") == "acme"
    assert child.snapshot() == {"user": "acme", "repo": "gadget", "id": 7}
    assert parent.snapshot() == {"user": "acme", "repo": "widget"}


def test_child_sees_later_parent_bindings() -> None:
    parent = ResourceContext()
    child = parent.child()
    parent.set("user", "acme")

    assert child.get("user") == "acme"
