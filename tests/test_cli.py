from unittest.mock import patch

import numpy as np
import pytest

from bytefreq import Analyzer, analyze, score, train


@pytest.fixture
def corpus(tmp_path):
    root = tmp_path / "corpus"
    root.mkdir()
    (root / "one.txt").write_bytes(b"aaabbb")
    (root / "two.txt").write_bytes(b"ccc")
    return root


def restored(path):
    analyzer = Analyzer()
    analyzer.restore(path)
    return analyzer


def test_train_files(tmp_path, corpus, capsys):
    output = tmp_path / "out" / "model.npy"
    assert train.main([str(corpus), "-o", str(output)]) == 0

    model = restored(output)
    assert model.size == 9
    assert model.counts[ord("c")] == 3
    assert "Model saved to" in capsys.readouterr().out


def test_train_resume_accumulates(tmp_path, corpus):
    output = tmp_path / "model.npy"
    train.main([str(corpus), "-o", str(output)])
    train.main([str(corpus), "-o", str(output), "--resume"])
    assert restored(output).size == 18

    train.main([str(corpus), "-o", str(output)])
    assert restored(output).size == 9


def test_train_dataset(tmp_path):
    output = tmp_path / "model.npy"
    with patch("bytefreq.train.iter_dataset_texts", return_value=iter([b"abc", b"de"])) as texts:
        assert train.main(["--dataset", "wikitext", "--limit", "2", "-o", str(output)]) == 0

    assert texts.call_args.kwargs["limit"] == 2
    assert restored(output).size == 5


def test_train_requires_input():
    with pytest.raises(SystemExit):
        train.main([])


def test_train_empty_corpus(tmp_path, capsys):
    empty = tmp_path / "empty.txt"
    empty.write_bytes(b"")
    output = tmp_path / "model.npy"
    assert train.main([str(empty), "-o", str(output)]) == 1
    assert not output.exists()
    assert "not saved" in capsys.readouterr().err


def test_score_text_with_model(model_path, capsys):
    assert score.main(["--model", str(model_path), "--text", "cba", "--text", "xyz"]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines == ["1.0000\tcba", "0.0000\txyz"]


def test_score_files_with_occurrences(tmp_path, model_path, capsys):
    target = tmp_path / "target.txt"
    target.write_bytes(b"abcd")
    assert score.main(["--model", str(model_path), "--occurrences", str(target)]) == 0
    fields = capsys.readouterr().out.strip().split("\t")
    assert fields[1] == "0.7500"
    assert fields[2] == str(target)


def test_score_preset(capsys):
    assert score.main(["--preset", "english", "--text", "hello there"]) == 0
    value, name = capsys.readouterr().out.strip().split("\t")
    assert 0.0 < float(value) <= 1.0
    assert name == "hello there"


def test_score_falls_back_to_default_preset(tmp_path, monkeypatch, capsys):
    monkeypatch.setattr(score, "MODEL_DIR", tmp_path)
    assert score.main(["--text", "hello"]) == 0
    assert capsys.readouterr().out.endswith("\thello\n")


def test_score_untrained_model(tmp_path, capsys):
    path = tmp_path / "untrained.npy"
    Analyzer().save(path)
    assert score.main(["--model", str(path), "--text", "x"]) == 1
    assert "untrained" in capsys.readouterr().err


def test_score_requires_input():
    with pytest.raises(SystemExit):
        score.main(["--preset", "english"])


def test_analyze(tmp_path, capsys):
    path = tmp_path / "model.npy"
    Analyzer.from_counts(np.bincount(np.frombuffer(b"aaab\x00", dtype=np.uint8), minlength=256)).save(path)

    assert analyze.main([str(path), "--top", "2"]) == 0
    out = capsys.readouterr().out
    assert "Total bytes: 5" in out
    assert "Distinct byte values: 3 / 256" in out
    assert "'a'" in out
    assert "0x00" in out
    assert "'b'" not in out


def test_analyze_untrained(tmp_path, capsys):
    path = tmp_path / "model.npy"
    Analyzer().save(path)
    assert analyze.main([str(path)]) == 0
    assert "untrained" in capsys.readouterr().out
