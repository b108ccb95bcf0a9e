from htmlsqueeze.utils.blocks import Block, BlockScanner


def test_styles_are_found_case_insensitively_across_lines():
    html = '<style>.a{}</style><p>x</p><STYLE media="print">\n.b{}\n</STYLE>'
    styles = BlockScanner().styles(html)
    assert [s.content for s in styles] == [".a{}", "\n.b{}\n"]
    assert styles[1].attributes == ' media="print"'
    assert styles[1].full_span == '<STYLE media="print">\n.b{}\n</STYLE>'


def test_scripts_with_src_are_skipped():
    html = '<script src="a.js"></script><script>var x = 1;</script>'
    scripts = BlockScanner().scripts(html)
    assert len(scripts) == 1
    assert scripts[0].content == "var x = 1;"
    assert scripts[0].full_span == "<script>var x = 1;</script>"


def test_src_check_looks_at_the_opening_tag_only():
    html = '<script type="module">img.src = "x.png";</script><script defer SRC=\'b.js\'></script>'
    scripts = BlockScanner().scripts(html)
    assert [s.content for s in scripts] == ['img.src = "x.png";']
    assert scripts[0].attributes == ' type="module"'


def test_data_src_is_not_a_src_attribute():
    scripts = BlockScanner().scripts('<script data-src="x">go()</script>')
    assert [s.content for s in scripts] == ["go()"]


def test_scan_returns_styles_then_scripts():
    styles, scripts = BlockScanner().scan("<script>a()</script><style>p{}</style>")
    assert [b.kind for b in styles] == ["style"]
    assert [b.kind for b in scripts] == ["script"]


def test_render_keeps_attributes():
    block = Block("style", "<style id=\"s\">a</style>", ' id="s"', "a")
    assert block.with_content("b").render() == '<style id="s">b</style>'
    assert block.content == "a"
