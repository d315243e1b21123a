import pytest
from apps.cli import play as play_cli
from apps.cli import replay as replay_cli
from packages.harness import GameSession


def _feeder(lines):
    it = iter(lines)

    def read(prompt):
        try:
            return next(it)
        except StopIteration:
            raise EOFError

    return read


def test_play_loop(dictionary):
    session = GameSession(["silkworm"], dictionary)
    out = []
    score = play_cli.play(session, read=_feeder(["silk", "silk", "", ":quit", "worm"]),
                          write=out.append)
    assert score == 5
    text = "\n".join(out)
    assert "== silkworm ==" in text
    assert "(4) silk" in text
    assert "Word used already! Be more original." in text
    assert out[-1] == "Final score: 5"


def test_play_reset_and_eof(dictionary):
    session = GameSession(["silkworm"], dictionary)
    out = []
    score = play_cli.play(session, read=_feeder(["silk", ":reset"]), write=out.append)
    assert score == 0 and session.used_words == ()


def test_make_session_fatal_without_start_words(tmp_path, capsys):
    args = play_cli.build_parser().parse_args(
        ["--start-words", str(tmp_path / "missing.txt"), "--dictionary", "wordlist",
         "--words", str(tmp_path / "missing.txt")])
    with pytest.raises(SystemExit) as exc:
        play_cli.make_session(args)
    assert exc.value.code == 1
    assert "error:" in capsys.readouterr().err


def test_replay_writes_reports(tmp_path, capsys):
    words = tmp_path / "words.txt"
    words.write_text("silk\nworm\nworms\n", encoding="utf-8")
    subs = tmp_path / "subs.txt"
    subs.write_text("silk\nmix\nworms\n", encoding="utf-8")
    outdir = tmp_path / "reports"

    replay_cli.main([
        "--dictionary", "wordlist", "--words", str(words), "--root", "silkworm",
        "--submissions", str(subs), "--outdir", str(outdir),
    ])

    out = capsys.readouterr().out
    assert "root=silkworm | attempts=3 | accepted=2 | score=11" in out
    assert len(list(outdir.glob("replay_*.csv"))) == 1
    assert len(list(outdir.glob("replay_*_manifest.json"))) == 1
