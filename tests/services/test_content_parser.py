from techtrail.services.content_parser import ContentParser


def test_reads_markdown_from_file(tmp_path):
    post = tmp_path / "post.md"
    post.write_text("---\ntitle: Hi\n---\nBody", encoding="utf-8")

    content = ContentParser().get_markdown_content({"path": str(post)})

    assert content == "---\ntitle: Hi\n---\nBody"


def test_strips_byte_order_mark(tmp_path):
    post = tmp_path / "bom.md"
    post.write_bytes("\ufeff---\ntitle: BOM\n---\n".encode("utf-8"))

    content = ContentParser().get_markdown_content({"path": str(post)})

    assert content.startswith("---")


def test_inline_content_takes_precedence(tmp_path):
    doc = {"content": "inline", "path": str(tmp_path / "ignored.md")}
    assert ContentParser().get_markdown_content(doc) == "inline"


def test_missing_file_returns_empty_string_and_warns(tmp_path, caplog):
    doc = {"path": str(tmp_path / "gone.md")}

    with caplog.at_level("WARNING"):
        content = ContentParser().get_markdown_content(doc)

    assert content == ""
    assert any("disappeared" in r.message for r in caplog.records)


def test_doc_without_path_returns_empty_string():
    assert ContentParser().get_markdown_content({"_id": "x.md"}) == ""


def test_directory_path_is_logged_as_error(tmp_path, caplog):
    with caplog.at_level("ERROR"):
        content = ContentParser().get_markdown_content({"path": str(tmp_path)})

    assert content == ""
    assert any("Error reading" in r.message for r in caplog.records)
