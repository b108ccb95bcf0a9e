import pytest

from htmlsqueeze import cli, pipeline
from htmlsqueeze.settings import Settings

PAGE = """<html><head>
<style>
.btn { color: red }
</style>
<script src="lib.js"></script>
</head><body>
<!-- comment -->
<div class="btn" id="box">x</div>
<script>
document.querySelector(".btn").id = 'box';
</script>
</body></html>
"""


@pytest.fixture
def page(tmp_path):
    path = tmp_path / "index.html"
    path.write_text(PAGE, encoding="utf-8")
    return path


def test_missing_input_is_a_usage_error(capsys):
    with pytest.raises(SystemExit) as exc:
        cli.main([])
    assert exc.value.code != 0
    assert "usage:" in capsys.readouterr().err


def test_end_to_end_with_renaming(page, tmp_path, capsys):
    out = tmp_path / "out.html"
    cli.main([str(page), "-o", str(out), "--no-obfuscate"])

    text = out.read_text(encoding="utf-8")
    assert "btn" not in text
    assert "comment" not in text
    assert '<script src="lib.js"></script>' in text
    assert '<div class="_0" id="_1">x</div>' in text
    assert "._0{color:red" in text

    stdout = capsys.readouterr().out
    assert f"Wrote optimized file: {out}" in stdout
    assert "btn -> _0" in stdout
    assert "box -> _1" in stdout


def test_no_rename_keeps_names(page, tmp_path, capsys):
    out = tmp_path / "plain.html"
    cli.main([str(page), "--output", str(out), "--no-rename", "--no-obfuscate"])
    text = out.read_text(encoding="utf-8")
    assert ".btn{color:red" in text
    assert '<div class="btn" id="box">x</div>' in text
    assert "Mapping sample" not in capsys.readouterr().out


def test_default_output_path(page, tmp_path):
    cli.main([str(page), "--no-obfuscate"])
    assert (tmp_path / "index.min.html").exists()


def test_missing_obfuscator_keeps_script(page, tmp_path, monkeypatch, capsys):
    monkeypatch.setattr(Settings, "OBFUSCATOR_COMMAND", ["htmlsqueeze-no-such-obfuscator"])
    out = tmp_path / "out.html"
    cli.main([str(page), "--out", str(out)])
    assert "document.querySelector(\"._0\")" in out.read_text(encoding="utf-8")
    assert "JS obfuscation failed" in capsys.readouterr().err


def test_final_pass_failure_writes_unminified_document(page, tmp_path, monkeypatch, capsys):
    def broken(html):
        raise RuntimeError("parser exploded")

    monkeypatch.setattr(pipeline, "minify_document", broken)
    out = tmp_path / "out.html"
    cli.main([str(page), "-o", str(out), "--no-obfuscate"])
    text = out.read_text(encoding="utf-8")
    assert '<div class="_0" id="_1">x</div>' in text
    assert "<!-- comment -->" in text
    captured = capsys.readouterr()
    assert f"Wrote non-minified optimized file: {out}" in captured.out
    assert "parser exploded" in captured.err
    assert "Mapping sample" not in captured.out


def test_config_file_sets_output_and_sample_size(page, tmp_path, capsys):
    config = tmp_path / "conf.yml"
    config.write_text("output: from-config.html\nmapping_sample_size: 1\nobfuscate: false\n", encoding="utf-8")
    cli.main([str(page), "--config", str(config)])
    assert (tmp_path / "from-config.html").exists()
    stdout = capsys.readouterr().out
    assert "btn -> _0" in stdout
    assert "box -> _1" not in stdout


def test_invalid_config_is_a_usage_error(page, tmp_path):
    config = tmp_path / "conf.yml"
    config.write_text("unknown: 1\n", encoding="utf-8")
    with pytest.raises(SystemExit) as exc:
        cli.main([str(page), "--config", str(config)])
    assert exc.value.code == 2


def test_unreadable_input_propagates(tmp_path):
    with pytest.raises(FileNotFoundError):
        cli.main([str(tmp_path / "absent.html"), "--no-obfuscate"])
