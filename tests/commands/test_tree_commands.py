"""Tests for the sort, labels, path and orphans commands."""

import json

import pytest


@pytest.fixture
def run_cli(tmp_path, monkeypatch):
    """Run categree.cli.main from an empty directory (no config file)."""
    from categree.cli import main

    monkeypatch.chdir(tmp_path)
    return main


@pytest.fixture
def categories_json(catalog_fixture):
    return str(catalog_fixture / "categories.json")


class TestSortCommand:
    """Tests for categree sort."""

    def test_text(self, run_cli, categories_json, capsys):
        assert run_cli(["sort", categories_json]) == 0

        lines = capsys.readouterr().out.splitlines()
        assert [line.split("\t")[0] for line in lines] == ["1", "2", "4", "3", "6", "7", "5"]
        assert lines[0] == "1\t0\tApparel"

    def test_ignore_orphans(self, run_cli, categories_json, capsys):
        assert run_cli(["sort", categories_json, "--ignore-orphans"]) == 0

        lines = capsys.readouterr().out.splitlines()
        assert [line.split("\t")[0] for line in lines] == ["1", "2", "4", "3", "6", "7"]

    def test_root(self, run_cli, categories_json, capsys):
        assert run_cli(["sort", categories_json, "--root", "1", "--ignore-orphans"]) == 0

        lines = capsys.readouterr().out.splitlines()
        assert [line.split("\t")[0] for line in lines] == ["2", "4", "3"]

    def test_json(self, run_cli, categories_json, capsys):
        assert run_cli(["sort", categories_json, "--format", "json"]) == 0

        rows = json.loads(capsys.readouterr().out)
        assert [r["id"] for r in rows] == [1, 2, 4, 3, 6, 7, 5]
        assert rows[1]["alias"] == "footwear"

    def test_csv(self, run_cli, catalog_fixture, capsys):
        csv_file = str(catalog_fixture / "categories.csv")
        assert run_cli(["sort", csv_file, "--format", "csv"]) == 0

        lines = capsys.readouterr().out.splitlines()
        assert lines[0] == "id,parent_id,name,alias,published"
        assert lines[2] == "2,1,Shoes,footwear,true"

    def test_config_ignore_orphans(self, run_cli, categories_json, tmp_path, capsys):
        """Test ignore_orphans is read from the config file."""
        (tmp_path / ".categree.toml").write_text("[sort]\nignore_orphans = true\n")

        assert run_cli(["sort", categories_json]) == 0
        assert "Clearance" not in capsys.readouterr().out

    def test_cycle_reports_error(self, run_cli, tmp_path, capsys):
        path = tmp_path / "cyclic.json"
        path.write_text('[{"id": 1, "parent_id": 2}, {"id": 2, "parent_id": 1}]')

        assert run_cli(["sort", str(path), "--root", "1"]) == 1
        assert "Cyclic category structure" in capsys.readouterr().err

    def test_duplicate_ids_report_error(self, run_cli, tmp_path, capsys):
        path = tmp_path / "dupes.json"
        path.write_text('[{"id": 1}, {"id": 1}]')

        assert run_cli(["sort", str(path)]) == 1
        assert "Duplicate category id 1" in capsys.readouterr().err

    def test_missing_file(self, run_cli, tmp_path, capsys):
        assert run_cli(["sort", str(tmp_path / "nope.json")]) == 1
        assert capsys.readouterr().err.startswith("Error:")


class TestLabelsCommand:
    """Tests for categree labels."""

    def test_default_labels(self, run_cli, categories_json, capsys):
        assert run_cli(["labels", categories_json]) == 0

        assert capsys.readouterr().out.splitlines() == [
            "Apparel",
            "--Shoes (footwear)",
            "----Sneakers (kicks)",
            "--Jackets",
            "Electronics",
            "--Phones",
        ]

    def test_options(self, run_cli, categories_json, capsys):
        assert run_cli(["labels", categories_json, "--indent=..", "--language", "2", "--no-alias"]) == 0

        assert capsys.readouterr().out.splitlines()[:3] == [
            "Bekleidung",
            "..Schuhe",
            "....Sneakers",
        ]

    def test_config_file(self, run_cli, categories_json, catalog_fixture, capsys):
        """Test indent comes from the --config file."""
        config = str(catalog_fixture / ".categree.toml")
        assert run_cli(["--config", config, "labels", categories_json]) == 0

        assert capsys.readouterr().out.splitlines()[1] == "..Shoes (footwear)"

    def test_hidden_excluded_by_config(self, run_cli, categories_json, tmp_path, capsys):
        (tmp_path / ".categree.toml").write_text("[tree]\ninclude_hidden = false\n")

        assert run_cli(["labels", categories_json]) == 0
        assert "Electronics" not in capsys.readouterr().out


class TestPathCommand:
    """Tests for categree path."""

    def test_path(self, run_cli, categories_json, capsys):
        assert run_cli(["path", categories_json, "4"]) == 0
        assert capsys.readouterr().out.strip() == "Apparel · Shoes · Sneakers"

    def test_path_options(self, run_cli, categories_json, capsys):
        args = [
            "path",
            categories_json,
            "4",
            "--separator",
            " / ",
            "--alias-pattern",
            "{name} ({alias})",
            "--language",
            "2",
        ]
        assert run_cli(args) == 0
        assert capsys.readouterr().out.strip() == "Bekleidung / Schuhe (footwear) / Sneakers (kicks)"

    def test_unknown_category(self, run_cli, categories_json, capsys):
        assert run_cli(["path", categories_json, "999"]) == 1
        assert "not found" in capsys.readouterr().err

    def test_orphan_category(self, run_cli, categories_json, capsys):
        """Test an orphan has no breadcrumb."""
        assert run_cli(["path", categories_json, "5"]) == 1
        assert "not reachable" in capsys.readouterr().err


class TestOrphansCommand:
    """Tests for categree orphans."""

    def test_reports_orphans(self, run_cli, categories_json, capsys):
        assert run_cli(["orphans", categories_json]) == 0

        out = capsys.readouterr().out
        assert "Orphaned Categories (1):" in out
        assert "5: Clearance" in out
        assert "Parent: 99 (missing)" in out

    def test_reports_cycles(self, run_cli, tmp_path, capsys):
        path = tmp_path / "cyclic.json"
        path.write_text(
            '[{"id": 1}, {"id": 2, "parent_id": 3}, {"id": 3, "parent_id": 2},'
            ' {"id": 4, "parent_id": 2}]'
        )

        assert run_cli(["orphans", str(path)]) == 0

        out = capsys.readouterr().out
        assert "Parent: 2 (unreachable)" in out
        assert "2 -> 3 -> 2" in out

    def test_no_orphans(self, run_cli, tmp_path, capsys):
        path = tmp_path / "clean.json"
        path.write_text('[{"id": 1}, {"id": 2, "parent_id": 1}]')

        assert run_cli(["orphans", str(path)]) == 0
        assert "No orphaned categories found" in capsys.readouterr().out


class TestConfigCommand:
    """Tests for categree config."""

    def test_show(self, run_cli, capsys):
        assert run_cli(["config", "show"]) == 0
        out = capsys.readouterr().out
        assert "[sort]" in out
        assert "root_parent_id = 0" in out

    def test_show_invalid(self, run_cli, tmp_path, capsys):
        (tmp_path / ".categree.toml").write_text('[sort]\nroot_parent_id = "x"\n')

        assert run_cli(["config", "show"]) == 1
        assert "sort.root_parent_id must be an integer" in capsys.readouterr().err

    def test_path(self, run_cli, tmp_path, capsys):
        (tmp_path / ".categree.toml").write_text("[project]\n")

        assert run_cli(["config", "path"]) == 0
        assert capsys.readouterr().out.strip().endswith(".categree.toml")

    def test_path_missing(self, run_cli, capsys):
        assert run_cli(["config", "path"]) == 1


class TestInputAndConfigErrors:
    """Tests for bad input files and bad settings reaching the commands."""

    def test_non_utf8_file(self, run_cli, tmp_path, capsys):
        path = tmp_path / "cats.csv"
        path.write_bytes(b"id,name\n1,\xff\n")

        assert run_cli(["sort", str(path)]) == 1
        assert "not valid UTF-8" in capsys.readouterr().err

    def test_invalid_env_override(self, run_cli, categories_json, monkeypatch, capsys):
        """Test a bad override is reported instead of orphaning every record."""
        monkeypatch.setenv("CATEGREE_SORT_ROOT_PARENT_ID", "abc")

        assert run_cli(["sort", categories_json]) == 1

        captured = capsys.readouterr()
        assert captured.out == ""
        assert "sort.root_parent_id must be an integer" in captured.err
