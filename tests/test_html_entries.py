from changelog_sync.parser.html_entries import parse_entries_from_html


def test_parses_headings_with_their_container():
    html = """
    <div class="entry"><h2>Release 1</h2><a href="/c/1">View</a><time datetime="2024-03-01"></time></div>
    <div class="entry"><h2>Release 2</h2><a href="/c/2">View</a><time datetime="2024-04-05"></time></div>
    """
    entries = parse_entries_from_html(html)

    assert [entry.title for entry in entries] == ["Release 1", "Release 2"]
    assert [entry.url for entry in entries] == ["/c/1", "/c/2"]
    assert [entry.date for entry in entries] == ["2024-03-01", "2024-04-05"]


def test_nearest_container_wins_over_outer_one():
    html = """
    <div id="outer">
      <a href="/outer">Outer</a>
      <li><h3>Inner</h3><a href="/inner">Read</a><time>May 2, 2024</time></li>
    </div>
    """
    [entry] = parse_entries_from_html(html)
    assert entry.url == "/inner"
    assert entry.date == "May 2, 2024"


def test_heading_without_container_uses_parent():
    html = "<section><h2>Loose</h2><a href='/loose'>x</a></section>"
    [entry] = parse_entries_from_html(html)
    assert entry.title == "Loose"
    assert entry.url == "/loose"
    assert entry.date is None


def test_falls_back_to_articles_and_returns_empty_for_blank():
    html = '<article><a href="/a/1">Read more about the release</a><time datetime="2024-05-01"></time></article>'
    [entry] = parse_entries_from_html(html)
    assert entry.url == "/a/1"
    assert entry.date == "2024-05-01"
    assert entry.content == "Read more about the release"

    assert parse_entries_from_html("") == []
    assert parse_entries_from_html("   \n") == []


def test_article_fallback_truncates_content():
    html = f"<article><p>{'x' * 500}</p></article>"
    [entry] = parse_entries_from_html(html)
    assert len(entry.content) == 200
