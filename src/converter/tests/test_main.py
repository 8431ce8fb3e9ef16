"""Tests for the as2cs command line."""

import json

from src.converter.main import main


def write_input(tmp_path, types):
    path = tmp_path / "types.json"
    path.write_text(json.dumps({"types": types}), encoding="utf-8")
    return str(path)


FOO = {"name": "Foo", "package": "app", "functions": [
    {"name": "width", "returns": "int", "getter": True, "body": ["return 1;"]}]}
BROKEN = {"name": "Broken", "package": "app",
          "fields": [{"name": "x", "type": "int", "initializer": "f()"}]}


class TestMain:
    def test_converts_to_output_root(self, tmp_path, capsys):
        out = tmp_path / "out"
        code = main([write_input(tmp_path, [FOO]), "-o", str(out)])
        assert code == 0
        assert (out / "app" / "Foo.cs").exists()
        assert "Converted 1 type(s), skipped 0, failed 0" in capsys.readouterr().out

    def test_missing_input(self, tmp_path, capsys):
        code = main([str(tmp_path / "nope.json")])
        assert code == 1
        assert "not found" in capsys.readouterr().err

    def test_invalid_input(self, tmp_path, capsys):
        path = tmp_path / "types.json"
        path.write_text("[]", encoding="utf-8")
        assert main([str(path)]) == 1
        assert "error:" in capsys.readouterr().err

    def test_malformed_initializer_reported(self, tmp_path, capsys):
        bad = {"name": "Foo", "fields": [{"name": "x", "type": "int", "initializer": 0}]}
        assert main([write_input(tmp_path, [bad]), "-o", str(tmp_path / "out")]) == 1
        err = capsys.readouterr().err
        assert "error:" in err
        assert "fields[0].initializer" in err

    def test_failure_continues_by_default(self, tmp_path, capsys):
        out = tmp_path / "out"
        code = main([write_input(tmp_path, [BROKEN, FOO]), "-o", str(out)])
        assert code == 1
        assert (out / "app" / "Foo.cs").exists()
        assert "failed 1" in capsys.readouterr().out

    def test_fail_fast_stops(self, tmp_path, capsys):
        out = tmp_path / "out"
        code = main([write_input(tmp_path, [BROKEN, FOO]), "-o", str(out), "--fail-fast"])
        assert code == 1
        assert not (out / "app" / "Foo.cs").exists()
        assert "Broken: render:" in capsys.readouterr().err

    def test_dry_run_prints_source(self, tmp_path, capsys):
        out = tmp_path / "out"
        skipped = {"name": "Hidden", "metadata": ["NoConversion"]}
        code = main([write_input(tmp_path, [FOO, skipped]), "-o", str(out), "--dry-run"])
        printed = capsys.readouterr().out
        assert code == 0
        assert not out.exists()
        assert "public virtual int getWidth()" in printed
        assert "Hidden" not in printed

    def test_accessor_prefixes(self, tmp_path, capsys):
        code = main([write_input(tmp_path, [FOO]), "--dry-run", "--getter-prefix", "Get"])
        assert code == 0
        assert "int GetWidth()" in capsys.readouterr().out

    def test_default_namespace(self, tmp_path, capsys):
        main([write_input(tmp_path, [{"name": "Bare"}]), "--dry-run", "--default-namespace", "Game"])
        assert "namespace Game\n" in capsys.readouterr().out

    def test_parallel_jobs(self, tmp_path):
        types = [{"name": f"C{i}", "package": "app"} for i in range(6)]
        out = tmp_path / "out"
        assert main([write_input(tmp_path, types), "-o", str(out), "-j", "3"]) == 0
        assert sorted(p.name for p in (out / "app").iterdir()) == [f"C{i}.cs" for i in range(6)]
