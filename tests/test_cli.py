"""End-to-end tests for the diff run and the command line entry point."""

import os
import sys
from pathlib import Path
from unittest.mock import patch

import pytest
import yaml

from apidiff.cli import main
from apidiff.load_config import load_config
from apidiff.run_diff import run_diff


def write_inputs(root: Path) -> None:
    """Write a description set and a docs set with a few known gaps."""
    desc = root / "desc"
    desc.mkdir()
    (desc / "APIDesc.yml").write_text(
        "Classes:\n"
        "  cWorld:\n"
        "    Functions:\n"
        "      constructor: {Params: '', Notes: Creates a world}\n"
        "      GetBlock: {Params: 'X, Y, Z', Return: number, Notes: Block type}\n"
        "    Constants:\n"
        "      E_DONE: {Notes: ''}\n"
        "      E_BLANK: {Notes: ''}\n"
        "  cItem:\n"
        "    Functions:\n"
        "      GetCount: {Params: '', Return: number, Notes: Count}\n",
        encoding="utf-8",
    )
    docs = root / "docs"
    docs.mkdir()
    (docs / "_files.yml").write_text("- World.yml\n- Entity.yml\n", encoding="utf-8")
    (docs / "World.yml").write_text(
        "cWorld:\n"
        "  Functions:\n"
        "    new:\n"
        "      - {Params: [], Returns: [], Desc: Creates a world}\n"
        "    delete:\n"
        "      - {Params: [], Returns: []}\n"
        "    GetBlock:\n"
        "      - Params:\n"
        "          - {Type: int, Name: a_BlockX}\n"
        "          - {Type: int, Name: a_BlockY}\n"
        "          - {Type: int, Name: a_BlockZ}\n"
        "        Returns: [{Type: Byte}]\n"
        "      - Params:\n"
        "          - {Type: 'Vector3<int>', Name: a_Pos}\n"
        "        Returns: [{Type: Byte}]\n"
        "        Desc: |\n"
        "          Returns the block type.\n"
        "          Uses absolute coords\n"
        "  Constants:\n"
        "    E_DONE: {Desc: 'Finished'}\n"
        "    E_BLANK: {Desc: ''}\n",
        encoding="utf-8",
    )
    (docs / "Entity.yml").write_text(
        "cEntity:\n"
        "  Functions:\n"
        "    GetWorld:\n"
        "      - {Params: [], Returns: [{Type: cWorld}], Desc: Owning world}\n"
        "    Give:\n"
        "      - Params: [{Type: cItem, Name: a_Item}]\n"
        "        Desc: Gives an item\n"
        "  Variables:\n"
        "    m_Type: {Type: 'cEntity::eEntityType', Desc: ''}\n",
        encoding="utf-8",
    )


def make_config(root: Path) -> dict:
    """Create a config pointing at the inputs under root."""
    config = load_config(None)
    config["paths"] = {
        "api_desc": str(root / "desc"),
        "docs": str(root / "docs"),
        "output": str(root / "out" / "APIDiff.yml"),
    }
    return config


def test_run_diff(tmp_path: Path) -> None:
    """Verify the written diff contains exactly the undescribed entries."""
    write_inputs(tmp_path)
    out = run_diff(make_config(tmp_path))
    data = yaml.safe_load(out.read_text(encoding="utf-8"))
    assert set(data) == {"cWorld", "cEntity"}
    assert data["cWorld"]["Functions"] == {
        "GetBlock": {
            "Params": "Pos",
            "Return": "number",
            "Notes": "Returns the block type. Uses absolute coords",
        }
    }
    assert data["cWorld"]["Constants"] == {"E_DONE": {"Notes": "Finished"}}
    assert data["cEntity"]["Functions"]["GetWorld"]["Return"] == "{{cWorld}}"
    # cItem is fully described, so it is not in the diff and is not linked
    assert "cItem" not in data
    assert data["cEntity"]["Functions"]["Give"]["Params"] == "Item"
    assert data["cEntity"]["Variables"]["m_Type"] == {
        "Type": "{{cEntity#eEntityType}}",
        "Notes": "",
    }


def test_run_diff_is_deterministic(tmp_path: Path) -> None:
    """Verify that two runs produce byte-identical output."""
    write_inputs(tmp_path)
    config = make_config(tmp_path)
    first = run_diff(config).read_bytes()
    second = run_diff(config).read_bytes()
    assert first == second


def test_main_with_config(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    """Verify the CLI with a config file."""
    write_inputs(tmp_path)
    config_file = tmp_path / "config.yml"
    config_file.write_text(yaml.dump({"paths": make_config(tmp_path)["paths"]}))

    with patch.object(sys, "argv", ["apidiff", "--config", str(config_file)]):
        ret = main()
    assert ret == 0
    assert (tmp_path / "out" / "APIDiff.yml").exists()
    assert "Diff has been output to file" in capsys.readouterr().out


def test_main_default_location(tmp_path: Path) -> None:
    """Verify the bare invocation writes APIDiff.yml in the working directory."""
    write_inputs(tmp_path)
    (tmp_path / "desc").rename(tmp_path / "APIDump")
    config_file = tmp_path / "config.yml"
    config_file.write_text(yaml.dump({"paths": {"api_desc": "APIDump"}}))

    cwd = Path.cwd()
    os.chdir(tmp_path)
    try:
        ret = main(["--config", "config.yml"])
    finally:
        os.chdir(cwd)
    assert ret == 0
    assert (tmp_path / "APIDiff.yml").exists()


def test_main_load_failure_writes_nothing(tmp_path: Path) -> None:
    """Verify that a load failure aborts before any output is written."""
    write_inputs(tmp_path)
    (tmp_path / "docs" / "_files.yml").unlink()
    config_file = tmp_path / "config.yml"
    config_file.write_text(yaml.dump({"paths": make_config(tmp_path)["paths"]}))

    with pytest.raises(SystemExit) as exc_info:
        main(["--config", str(config_file)])
    assert exc_info.value.code == 1
    assert not (tmp_path / "out").exists()


def test_main_null_paths_in_config(tmp_path: Path) -> None:
    """Verify that a malformed config aborts with a logged error, not a traceback."""
    config_file = tmp_path / "config.yml"
    config_file.write_text("paths: null\n", encoding="utf-8")

    with pytest.raises(SystemExit) as exc_info:
        main(["--config", str(config_file)])
    assert exc_info.value.code == 1
