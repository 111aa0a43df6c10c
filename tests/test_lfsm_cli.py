import io

from pctoolkit.functions import mayia, print_binary
from pctoolkit.lfsm_cli import main, run


def _run(text):
    out = io.StringIO()
    code = run(io.StringIO(text), out)
    return code, out.getvalue()


def test_quit_immediately():
    code, output = _run("q\n")
    assert code == 0
    assert "write string with number or instruction : " in output
    assert f"[Input ->  {print_binary(8, 0)}  ]" in output


def test_end_of_input_stops_loop():
    code, output = _run("")
    assert code == 0
    assert "[Input ->" not in output


def test_help_lists_commands():
    _, output = _run("h\nq\n")
    assert "\tlearn - l\n" in output
    assert "\tdelete all - d\n" in output


def test_options():
    _, output = _run("options\nq\n")
    assert "remove or r\n" in output


def test_read_without_programs_not_recognized():
    _, output = _run("5\nq\n")
    assert "LFSMread: [3] Entry Not recognized" in output
    assert f"[Output ->  {print_binary(8, 0)}  ]" in output


def test_read_zero_is_no_entry():
    _, output = _run("0\nq\n")
    assert "LFSMread: [0] No entry" in output


def test_learn_then_read_global():
    _, output = _run("l\n1\n3\n1\n1\nq\n")
    assert "Entered values 1 3 1" in output
    assert "succesfully added" in output
    assert "LFSMread: [1] Global logic" in output
    assert f"[Output ->  {print_binary(8, 3)}  ]" in output


def test_learn_with_page_zero_is_no_operation():
    _, output = _run("l\n1\n3\n0\nn\nq\n")
    assert "LFSMlearn: [0] No Operation." in output
    assert "------ 0 ------" in output


def test_how_many_counts_programs():
    _, output = _run("l\n1\n3\n1\nn\nq\n")
    assert "------ 1 ------" in output
    assert "page:1 feedback:0" in output


def test_delete_all_empties_memory():
    _, output = _run("l\n1\n3\n1\nd\nn\nq\n")
    assert "LFSMdeleteall: Done" in output
    assert "------ 0 ------" in output


def test_remove_program():
    _, output = _run("l\n1\n3\n1\nr\n1\nn\nq\n")
    assert "LFSMremove: [1] Removed" in output
    assert "------ 0 ------" in output


def test_duplicate_learn_not_permitted():
    _, output = _run("l\n1\n3\n1\nl\n1\n2\n1\nn\nq\n")
    assert "LFSMlearn: [1] Not permitted." in output
    assert "------ 1 ------" in output


def test_main_runs_file_demo(tmp_path, monkeypatch, capsys):
    target = tmp_path / "demo.txt"
    monkeypatch.setattr("sys.stdin", io.StringIO("q\n"))
    code = main(["--file", str(target)])
    output = capsys.readouterr().out
    assert code == 0
    assert target.read_bytes() == b"A qualquer coisa\n"
    assert "string in file:\nA qualquer coisa\n" in output
    assert f"magic: {mayia(0, 1, 4)}" in output
    assert "sizeeeprom: 128" in output


def test_main_size_option(tmp_path, monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO(""))
    code = main(["--file", str(tmp_path / "x.txt"), "--size", "4"])
    assert code == 0
    assert "sizeeeprom: 4" in capsys.readouterr().out