import json


def test_import_faculty_command(app, tmp_path):
    src = tmp_path / "faculty.txt"
    src.write_text("# faculty numbers\nFAC1001\nFAC1002\nFAC1001\n", encoding="utf-8")

    result = app.test_cli_runner().invoke(args=["import-faculty", str(src)])
    assert result.exit_code == 0, result.output
    assert "Imported 2 faculty number(s), 1 skipped." in result.output

    client = app.test_client()
    assert client.get("/api/check-faculty/FAC1002").get_json() == {"valid": True}


def test_seed_pending_command(app, tmp_path):
    src = tmp_path / "pending.json"
    src.write_text(json.dumps([{"name": "A"}, {"name": "B", "rollNumber": "7"}]), encoding="utf-8")

    result = app.test_cli_runner().invoke(args=["seed-pending", str(src)])
    assert result.exit_code == 0, result.output
    assert "Inserted 2 pending request(s)." in result.output

    items = app.test_client().get("/api/pending").get_json()
    assert sorted(i["name"] for i in items) == ["A", "B"]


def test_seed_pending_rejects_non_array(app, tmp_path):
    src = tmp_path / "pending.json"
    src.write_text('{"name": "A"}', encoding="utf-8")

    result = app.test_cli_runner().invoke(args=["seed-pending", str(src)])
    assert result.exit_code != 0
    assert "Expected a JSON array of objects" in result.output
