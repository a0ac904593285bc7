"""Request shaping for each command, driven through ``main``."""

import json

import pytest

from notion_cli.__main__ import main

from conftest import BASE


def run(argv):
    return main(argv)


def test_search_with_filter_and_pagination(server):
    server.queue(body={"results": []})
    assert run(["search", "roadmap", "--filter", "page", "--page-size", "10", "--start-cursor", "c1"]) == 0
    assert server.calls == [("POST", f"{BASE}/v1/search")]
    assert server.json_body() == {
        "query": "roadmap",
        "filter": {"value": "page", "property": "object"},
        "page_size": 10,
        "start_cursor": "c1",
    }


def test_user_commands(server):
    server.queue(body={"object": "user"}).queue(body={"id": "u1"}).queue(body={"results": []})
    run(["user", "me"])
    run(["user", "get", "u1"])
    run(["--page-size", "5", "user", "list"])
    assert server.calls == [
        ("GET", f"{BASE}/v1/users/me"),
        ("GET", f"{BASE}/v1/users/u1"),
        ("GET", f"{BASE}/v1/users?page_size=5"),
    ]


def test_page_get_filter_properties(server):
    server.queue(body={"id": "p1"})
    run(["page", "get", "p1", "--filter-properties", "title,abc", "--filter-properties", "xyz"])
    assert server.calls == [
        (
            "GET",
            f"{BASE}/v1/pages/p1?filter_properties=title&filter_properties=abc&filter_properties=xyz",
        )
    ]


def test_page_create_under_page(server):
    server.queue(body={"id": "new"})
    props = '{"title": [{"text": {"content": "Hi"}}]}'
    children = '[{"object": "block", "type": "paragraph"}]'
    assert run(["page", "create", "--parent", "p0", "--properties", props, "--children", children]) == 0
    assert server.json_body() == {
        "parent": {"page_id": "p0"},
        "properties": json.loads(props),
        "children": json.loads(children),
    }


def test_page_create_under_database(server):
    server.queue(body={"id": "new"})
    run(["page", "create", "--parent", "db1", "--properties", "{}", "--database-parent"])
    assert server.json_body()["parent"] == {"database_id": "db1"}


def test_page_create_rejects_bad_json_before_any_request(server, capsys):
    assert run(["page", "create", "--parent", "p0", "--properties", "{oops"]) == 2
    assert server.requests == []
    assert "Invalid JSON for properties" in capsys.readouterr().err


def test_page_update_archived(server):
    server.queue(body={"id": "p1"})
    run(["page", "update", "p1", "--properties", "{}", "--archived", "true"])
    assert server.calls == [("PATCH", f"{BASE}/v1/pages/p1")]
    assert server.json_body() == {"properties": {}, "archived": True}


@pytest.mark.parametrize(
    "argv, parent",
    [
        (["--to", "p2"], {"type": "page_id", "page_id": "p2"}),
        (["--parent-type", "database", "--to", "d1"], {"type": "database_id", "database_id": "d1"}),
        (["--parent-type", "workspace"], {"type": "workspace"}),
    ],
)
def test_page_move(server, argv, parent):
    server.queue(body={"id": "p1"})
    run(["page", "move", "p1", *argv])
    assert server.calls == [("POST", f"{BASE}/v1/pages/p1/move")]
    assert server.json_body() == {"parent": parent}


def test_page_move_requires_destination(server):
    assert run(["page", "move", "p1"]) == 2
    assert server.requests == []


def test_page_property_paginates(server):
    server.queue(body={"results": []})
    run(["page", "property", "p1", "title", "--start-cursor", "abc"])
    assert server.calls == [("GET", f"{BASE}/v1/pages/p1/properties/title?start_cursor=abc")]


def test_block_commands(server):
    for _ in range(5):
        server.queue(body={"ok": True})
    run(["block", "get", "b1"])
    run(["block", "children", "b1", "--page-size", "50"])
    run(["block", "append", "b1", "--children", "[]", "--after", "b0"])
    run(["block", "update", "b1", "--data", '{"paragraph": {}}', "--archived", "false"])
    run(["block", "delete", "b1"])
    assert server.calls == [
        ("GET", f"{BASE}/v1/blocks/b1"),
        ("GET", f"{BASE}/v1/blocks/b1/children?page_size=50"),
        ("PATCH", f"{BASE}/v1/blocks/b1/children"),
        ("PATCH", f"{BASE}/v1/blocks/b1"),
        ("DELETE", f"{BASE}/v1/blocks/b1"),
    ]
    assert server.json_body(2) == {"children": [], "after": "b0"}
    assert server.json_body(3) == {"paragraph": {}, "archived": False}


def test_comment_commands(server):
    server.queue(body={"results": []}).queue(body={"id": "c1"})
    run(["comment", "list", "--block-id", "b1"])
    run(["comment", "create", "--page-id", "p1", "--text", "Looks good"])
    assert server.calls == [
        ("GET", f"{BASE}/v1/comments?block_id=b1"),
        ("POST", f"{BASE}/v1/comments"),
    ]
    assert server.json_body() == {
        "parent": {"page_id": "p1"},
        "rich_text": [{"type": "text", "text": {"content": "Looks good"}}],
    }


def test_db_and_ds_commands(server):
    for _ in range(6):
        server.queue(body={"ok": True})
    run(["db", "get", "d1"])
    run(["ds", "get", "s1"])
    run(["ds", "create", "--parent", "p1", "--title", "Tasks", "--properties", '{"Name": {"title": {}}}'])
    run(["ds", "update", "s1", "--data", '{"title": []}'])
    run(["ds", "query", "s1", "--filter", '{"property": "Done"}', "--sorts", "[]", "--page-size", "3"])
    run(["ds", "templates", "s1"])
    assert server.calls == [
        ("GET", f"{BASE}/v1/databases/d1"),
        ("GET", f"{BASE}/v1/data_sources/s1"),
        ("POST", f"{BASE}/v1/data_sources"),
        ("PATCH", f"{BASE}/v1/data_sources/s1"),
        ("POST", f"{BASE}/v1/data_sources/s1/query"),
        ("GET", f"{BASE}/v1/data_sources/s1/templates"),
    ]
    assert server.json_body(2) == {
        "parent": {"page_id": "p1"},
        "title": [{"type": "text", "text": {"content": "Tasks"}}],
        "properties": {"Name": {"title": {}}},
    }
    assert server.json_body(4) == {"filter": {"property": "Done"}, "sorts": [], "page_size": 3}


def test_api_error_exit_code_and_message(server, capsys):
    server.queue(404, {"code": "object_not_found", "message": "Could not find page"})
    assert run(["page", "get", "missing"]) == 1
    err = capsys.readouterr().err
    assert err.startswith("✗ Notion API error (404 Not Found): [object_not_found]")


def test_missing_token_exit_code(server, monkeypatch, capsys):
    monkeypatch.delenv("NOTION_API_TOKEN")
    assert run(["user", "me"]) == 2
    assert server.requests == []
    assert "notion init" in capsys.readouterr().err


def test_dry_run_flag_after_subcommand(server, capsys):
    assert run(["block", "delete", "b1", "--dry-run"]) == 0
    assert server.requests == []
    out = json.loads(capsys.readouterr().out)
    assert out == {"dry_run": True, "method": "DELETE", "path": "/v1/blocks/b1"}


def test_raw_output(server, capsys):
    server.queue(body={"object": "user", "name": "Bot"})
    run(["--raw", "user", "me"])
    assert capsys.readouterr().out == '{"object":"user","name":"Bot"}\n'
