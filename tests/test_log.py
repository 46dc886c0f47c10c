from primegen import config
from primegen.engine import SearchEngine, SearchTarget
from primegen.log import log

def test_quiet_by_default(monkeypatch, capsys):
    monkeypatch.setattr(config, "LOG_PATH", "")
    monkeypatch.setattr(config, "VERBOSE", False)
    log("nothing to see")
    out = capsys.readouterr()
    assert out.out == "" and out.err == ""

def test_file_and_stderr(monkeypatch, capsys, tmp_path):
    path = tmp_path / "primegen.log"
    monkeypatch.setattr(config, "LOG_PATH", str(path))
    monkeypatch.setattr(config, "VERBOSE", True)
    log("hello\n")
    log("again")
    lines = path.read_text(encoding="utf-8").splitlines()
    assert [l.split(" ", 1)[1] for l in lines] == ["hello", "again"]
    err = capsys.readouterr().err
    assert "hello" in err and "again" in err

def test_engine_logs_progress(monkeypatch, tmp_path):
    path = tmp_path / "run.log"
    monkeypatch.setattr(config, "LOG_PATH", str(path))
    SearchEngine(SearchTarget(4, 2), workers=2, sink=None).run()
    text = path.read_text(encoding="utf-8")
    assert "search start bits=32 count=2" in text
    assert "ordinal=1" in text and "ordinal=2" in text
    assert "search done found=2" in text
