import io
import sys

import pytest

from robco.hacker import CandidatePool
from robco.terminal import App, TextStreamUser
from robco.terminal.commands import HELP_TEXT


def _app(words, script):
    out, err = io.StringIO(), io.StringIO()
    user = TextStreamUser(io.StringIO(script), out, err)
    return App(CandidatePool(words), user), out, err


def test_session_solves():
    app, out, err = _app(["aaaa", "aabb", "abab"],
                         "view\nrecommend\nguess aaaa 2\nguess aabb 4\n")
    assert app.run() == "aabb"
    assert out.getvalue() == " * aaaa\n * aabb\n * abab\naaaa\naabb\n"
    assert "Remaining candidate passwords: (3)" in err.getvalue()
    assert "Password deduced: " in err.getvalue()


def test_session_reports_errors_and_keeps_going():
    app, out, err = _app(["ab", "ba"],
                         "guess zz 1\nguess ab 3\nadd ab\nremove xy\nfly\nanswer\nexit\n")
    assert app.run() is None
    e = err.getvalue()
    assert 'Error: "zz" is not in the list of available passwords.' in e
    assert 'Error: "ab" cannot have 3 characters correct.' in e
    assert 'Error: cannot add "ab": already present.' in e
    assert 'Error: "xy" is not in the list of available passwords.' in e
    assert "Error: command not recognised: fly" in e
    assert "not yet determined" in e
    assert list(app.pool) == ["ab", "ba"]


def test_session_add_remove_and_help():
    app, out, err = _app(["ab", "ba"], "help\nadd cd\nremove ab\nremove ba\n")
    assert app.run() == "cd"
    assert HELP_TEXT in err.getvalue()


def test_session_end_of_input_exits():
    app, out, err = _app(["ab", "ba"], "view\n")
    assert app.run() is None
    assert out.getvalue() == " * ab\n * ba\n"


def test_session_already_solved():
    app, out, err = _app(["solo"], "")
    assert app.run() == "solo"
    assert out.getvalue() == "solo\n"


def test_get_candidates():
    user = TextStreamUser(io.StringIO("\nabc\nabd\nabc\n\nignored\n"), io.StringIO(), io.StringIO())
    assert user.get_candidates() == ["abc", "abd"]

    user = TextStreamUser(io.StringIO("abc\n"), io.StringIO(), io.StringIO())
    assert user.get_candidates() == ["abc"]

    user = TextStreamUser(io.StringIO(""), io.StringIO(), io.StringIO())
    assert user.get_candidates() == []


def test_hack_cli(monkeypatch, capsys):
    from apps.cli import hack
    monkeypatch.setattr(sys, "stdin", io.StringIO("guess aaaa 2\nguess aabb 4\n"))
    assert hack.main(["aaaa", "aabb", "abab"]) == 0
    assert capsys.readouterr().out == "aabb\n"


def test_hack_cli_prompts_for_candidates(monkeypatch, capsys):
    from apps.cli import hack
    monkeypatch.setattr(sys, "stdin", io.StringIO(""))
    assert hack.main([]) == 1


def test_hack_cli_from_file(tmp_path, monkeypatch, capsys):
    from apps.cli import hack
    f = tmp_path / "t.txt"
    f.write_text("aaaa\naabb\nabab\n", encoding="utf-8")
    monkeypatch.setattr(sys, "stdin", io.StringIO("remove aaaa\nremove abab\n"))
    assert hack.main(["--file", str(f)]) == 0
    assert capsys.readouterr().out == "aabb\n"


def test_bench_cli(tmp_path, capsys):
    from apps.cli import run
    f = tmp_path / "t.txt"
    f.write_text("tires\ntimes\ntiles\nspies\nfries\n", encoding="utf-8")
    outdir = tmp_path / "reports"
    rc = run.main(["--candidates", str(f), "--outdir", str(outdir),
                   "--progress", "off", "--max-attempts", "5"])
    assert rc == 0
    assert "Solved 5/5 terminals" in capsys.readouterr().out
    assert len(list(outdir.glob("run_*.csv"))) == 1
    assert len(list(outdir.glob("run_*_manifest.json"))) == 1


def test_hack_cli_rejects_passwords_and_file_together(tmp_path, monkeypatch, capsys):
    from apps.cli import hack
    f = tmp_path / "t.txt"
    f.write_text("aaaa\naabb\n", encoding="utf-8")
    monkeypatch.setattr(sys, "stdin", io.StringIO(""))
    with pytest.raises(SystemExit) as ei:
        hack.main(["abab", "--file", str(f)])
    assert ei.value.code == 2
    assert "not both" in capsys.readouterr().err


@pytest.mark.parametrize("sample", ["0", "-2"])
def test_bench_cli_rejects_non_positive_sample(tmp_path, capsys, sample):
    from apps.cli import run
    f = tmp_path / "t.txt"
    f.write_text("tires\ntimes\ntiles\nspies\nfries\n", encoding="utf-8")
    with pytest.raises(SystemExit) as ei:
        run.main(["--candidates", str(f), "--outdir", str(tmp_path / "r"),
                  "--progress", "off", "--sample", sample])
    assert ei.value.code == 2
    assert "--sample must be at least 1" in capsys.readouterr().err


def test_bench_cli_sample(tmp_path, capsys):
    from apps.cli import run
    f = tmp_path / "t.txt"
    f.write_text("tires\ntimes\ntiles\nspies\nfries\n", encoding="utf-8")
    rc = run.main(["--candidates", str(f), "--outdir", str(tmp_path / "r"),
                   "--progress", "plain", "--max-attempts", "5", "--sample", "2"])
    assert rc == 0
    assert "Solved 2/2 terminals" in capsys.readouterr().out
