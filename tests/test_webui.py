from lilmusic.webui import (
    WindowConfiguration,
    build_missing_asset_html,
    resolve_entry_page,
    to_file_url,
)


def test_file_url_encodes_space():
    assert to_file_url("/a b/c.html") == "file:///a%20b/c.html"


def test_file_url_encodes_utf8_bytes():
    assert to_file_url("/\u00e9.html") == "file:///%C3%A9.html"


def test_file_url_keeps_safe_characters(tmp_path):
    target = tmp_path / "ui-dir_1" / "index~v.2.html"
    url = to_file_url(target)
    assert url.startswith("file:///")
    assert url.endswith("/ui-dir_1/index~v.2.html")
    assert "%" not in url.replace(str(tmp_path), "")


def test_window_configuration_defaults():
    configuration = WindowConfiguration(title="LilMusic")
    assert (configuration.width, configuration.height) == (1280, 820)


def test_missing_asset_html_contains_path():
    html = build_missing_asset_html("/nowhere/ui/index.html")
    assert html.startswith("<!DOCTYPE html>")
    assert "<code>/nowhere/ui/index.html</code>" in html
    assert html.endswith("</html>")


def test_entry_page_for_existing_file(tmp_path):
    entry = tmp_path / "index.html"
    entry.write_text("<html></html>", encoding="utf-8")
    page = resolve_entry_page(WindowConfiguration(title="t", entry_file_path=entry))
    assert page.url == to_file_url(entry)
    assert page.html == ""
    assert page.is_fallback is False


def test_entry_page_for_missing_file(tmp_path):
    entry = tmp_path / "missing" / "index.html"
    page = resolve_entry_page(WindowConfiguration(title="t", entry_file_path=entry))
    assert page.is_fallback is True
    assert page.html == build_missing_asset_html(entry)
    assert page.url == ""