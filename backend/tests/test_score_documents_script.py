import importlib.util
import json
from pathlib import Path

import pytest

SCRIPT = Path(__file__).resolve().parents[1] / "scripts" / "score_documents.py"


def _load_script():
    loader_spec = importlib.util.spec_from_file_location("score_documents", SCRIPT)
    module = importlib.util.module_from_spec(loader_spec)
    loader_spec.loader.exec_module(module)
    return module


def test_score_documents_prints_json_for_mock_provider(tmp_path, capsys):
    first = tmp_path / "a.txt"
    second = tmp_path / "b.txt"
    first.write_text("great", encoding="utf-8")
    second.write_text("awful", encoding="utf-8")

    code = _load_script().main([str(first), str(second), "--provider", "mock"])

    assert code == 0
    data = json.loads(capsys.readouterr().out)
    assert data["processed"] == 2
    assert [r["id"] for r in data["results"]] == ["a.txt", "b.txt"]


def test_score_documents_unknown_provider(tmp_path, capsys):
    doc = tmp_path / "a.txt"
    doc.write_text("x", encoding="utf-8")

    code = _load_script().main([str(doc), "--provider", "missing"])

    assert code == 2
    assert "Unknown provider" in capsys.readouterr().err


def test_score_documents_sends_file_name_as_id(tmp_path, capsys, monkeypatch):
    import httpx

    folder = tmp_path / "q&r=s"
    folder.mkdir()
    doc = folder / "review.txt"
    doc.write_text("lovely", encoding="utf-8")
    bodies = []

    def _fake_post(url, **kwargs):
        bodies.append(kwargs["content"])
        return httpx.Response(
            200,
            content=b"<RESULT><BLOCK><ID>1</ID><GLOBAL_VALUE>1</GLOBAL_VALUE><TEXT>lovely</TEXT></BLOCK></RESULT>",
        )

    monkeypatch.setattr("semant.services.executors.bitext.httpx.post", _fake_post)

    code = _load_script().main([str(doc), "--key", "u", "--secret", "p", "--language", "en"])

    assert code == 0
    assert b"&ID=review.txt&Lang=ENG&" in bodies[0]
    data = json.loads(capsys.readouterr().out)
    assert data["results"][0]["id"] == "review.txt"


@pytest.mark.parametrize("names", [["a&b.txt"], ["x=1.txt"], ["dup.txt", "sub/dup.txt"]])
def test_score_documents_refuses_unusable_ids(tmp_path, names):
    paths = []
    for name in names:
        path = tmp_path / name
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text("x", encoding="utf-8")
        paths.append(str(path))

    with pytest.raises(SystemExit) as excinfo:
        _load_script().main([*paths, "--provider", "mock"])
    assert excinfo.value.code == 2
